import logging
import numbers
import operator
from typing import Callable

from ..algebra import Monoid, require
from ..utils import Interval

logger = logging.getLogger(__name__)


class SegmentTree:
    """
    Iterative bottom-up segment tree over a monoid.

    Leaves live at tree[n:2n], node i holds operation(tree[2i], tree[2i+1])
    and tree[0] is unused. Queries combine strictly left to right, so the
    operation only has to be associative.
    """

    def __init__(self, operation: Callable, identity: Callable, data=None):
        self.operation = operation
        self.identity = identity
        self.n = 0
        self.tree = []
        if data is not None:
            self.build(data)

    @staticmethod
    def from_monoid(structure, data=None) -> "SegmentTree":
        require(structure, Monoid, "SegmentTree")
        return SegmentTree(structure.plus, structure.zero, data)

    def build(self, data):
        """Reset to ``data`` empty leaves, or to the leaves of a sequence."""
        if isinstance(data, bool):
            raise TypeError(f"expected a leaf count or a sequence, got {data!r}")
        if isinstance(data, numbers.Integral):
            if data < 0:
                raise ValueError(f"leaf count must be non-negative, got {data}")
            self.n = int(data)
            self.tree = [self.identity() for _ in range(2 * self.n)]
        else:
            values = list(data)
            self.n = len(values)
            self.tree = [self.identity() for _ in range(self.n)] + values
            for i in range(self.n - 1, 0, -1):
                self.tree[i] = self.operation(self.tree[i << 1], self.tree[i << 1 | 1])
        logger.debug("built segment tree with %d leaves", self.n)

    def _check_position(self, p: int):
        if not 0 <= p < self.n:
            raise IndexError(f"position {p} out of range for {self.n} leaves")

    def _repair(self, idx: int):
        idx >>= 1
        while idx >= 1:
            left = idx << 1
            self.tree[idx] = self.operation(self.tree[left], self.tree[left + 1])
            idx >>= 1

    def get(self, p: int):
        self._check_position(p)
        return self.tree[self.n + p]

    def update(self, p: int, value):
        self._check_position(p)
        idx = self.n + p
        self.tree[idx] = value
        self._repair(idx)

    def add(self, p: int, value):
        """Combine ``value`` onto leaf p from the right."""
        self._check_position(p)
        idx = self.n + p
        self.tree[idx] = self.operation(self.tree[idx], value)
        self._repair(idx)

    def query(self, l, r: int = None):
        """Fold leaves [l, r), or the inclusive range of an Interval."""
        if r is None:
            if not isinstance(l, Interval):
                raise TypeError(f"expected an Interval or two bounds, got {l!r}")
            l, r = l.half_open()
        if not 0 <= l <= r <= self.n:
            raise IndexError(f"range [{l}, {r}) out of bounds for {self.n} leaves")

        acc_l = self.identity()
        acc_r = self.identity()
        l += self.n
        r += self.n
        while l < r:
            if l & 1:
                acc_l = self.operation(acc_l, self.tree[l])
                l += 1
            if r & 1:
                r -= 1
                acc_r = self.operation(self.tree[r], acc_r)
            l >>= 1
            r >>= 1
        return self.operation(acc_l, acc_r)

    @property
    def total(self):
        return self.query(0, self.n)

    def values(self) -> list:
        return self.tree[self.n:]

    def __len__(self):
        return self.n

    def __getitem__(self, p: int):
        return self.get(p)

    def __setitem__(self, p: int, value):
        self.update(p, value)


class SumSegmentTree(SegmentTree):
    def __init__(self, data=None, zero=0):
        super().__init__(operation=operator.add, identity=lambda: zero, data=data)

    def sum(self, start: int = 0, end: int = None):
        """Returns arr[start] + ... + arr[end - 1]."""
        if end is None: end = self.n
        return self.query(start, end)


class MaxSegmentTree(SegmentTree):
    def __init__(self, sentinel, data=None):
        self.sentinel = sentinel
        super().__init__(operation=max, identity=lambda: sentinel, data=data)

    def max(self, start: int = 0, end: int = None):
        if end is None: end = self.n
        return self.query(start, end)


class MinSegmentTree(SegmentTree):
    def __init__(self, sentinel, data=None):
        self.sentinel = sentinel
        super().__init__(operation=min, identity=lambda: sentinel, data=data)

    def min(self, start: int = 0, end: int = None):
        if end is None: end = self.n
        return self.query(start, end)
