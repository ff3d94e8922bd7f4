from .algebra import (
    Monoid, Group, Semiring, Ring, CapabilityError,
    IntAdd, IntRing, ModRing, Concat, MaxMonoid, MinMonoid, BoolSemiring, MinPlus,
    fold, is_monoid, is_group, is_semiring, is_ring, require,
)
from .math import Matrix, DynMatrix, DimensionError
from .trees import SegmentTree, SumSegmentTree, MaxSegmentTree, MinSegmentTree
from .utils import Interval

__version__ = "0.1.0"
