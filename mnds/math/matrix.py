import logging
import numpy as np

from ..algebra import CapabilityError, Monoid, is_group, is_semiring, require, structure_name

logger = logging.getLogger(__name__)


class DimensionError(ValueError):
    """Raised when matrix shapes are incompatible or not positive."""


def _check_dim(value, name):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise DimensionError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise DimensionError(f"{name} must be positive, got {value}")
    return int(value)


def _check_hashable(T, what):
    try:
        hash(T)
    except TypeError:
        raise CapabilityError(f"{what} needs a hashable structure, got {structure_name(T)}") from None


# --- Cell kernels shared by Matrix and DynMatrix ---

def _zeros(T, n, m):
    out = np.empty((n, m), dtype=object)
    for i in range(n):
        for j in range(m):
            out[i, j] = T.zero()
    return out


def _identity(T, n):
    out = _zeros(T, n, n)
    for i in range(n):
        out[i, i] = T.one()
    return out


def _from_rows(rows):
    # Python scalars, so integer cells never wrap at a fixed width
    if isinstance(rows, np.ndarray):
        rows = rows.tolist()
    rows = [row.tolist() if isinstance(row, np.ndarray) else list(row) for row in rows]
    n = len(rows)
    m = len(rows[0]) if rows else 0
    if any(len(row) != m for row in rows):
        raise DimensionError("rows must all have the same length")
    out = np.empty((n, m), dtype=object)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            out[i, j] = value
    return out


def _add(T, a, b):
    return np.frompyfunc(T.plus, 2, 1)(a, b)


def _neg(T, a):
    return np.frompyfunc(T.neg, 1, 1)(a)


def _sub(T, a, b):
    # No primitive minus is assumed on the element type.
    return _add(T, a, _neg(T, b))


def _mul(T, a, b):
    n, inner = a.shape
    k = b.shape[1]
    out = np.empty((n, k), dtype=object)
    for i in range(n):
        for j in range(k):
            acc = T.zero()
            for t in range(inner):
                acc = T.plus(acc, T.mul(a[i, t], b[t, j]))
            out[i, j] = acc
    return out


def _pow(T, a, e):
    if isinstance(e, bool) or not isinstance(e, (int, np.integer)):
        raise TypeError(f"exponent must be an integer, got {e!r}")
    e = int(e)
    if e < 0:
        raise ValueError(f"exponent must be non-negative, got {e}")
    logger.debug("pow: exponent %d, %d squarings", e, e.bit_length())
    result = None
    base = a
    while e > 0:
        if e & 1:
            result = base.copy() if result is None else _mul(T, result, base)
        e >>= 1
        if e:
            base = _mul(T, base, base)
    if result is None:
        return _identity(T, a.shape[0])
    return result


# --- Capability mix-ins, attached at specialisation time ---

class _GroupOps:
    def __neg__(self):
        return self._wrap(_neg(self.structure, self._values))

    def __sub__(self, other):
        if not isinstance(other, _MatrixBase):
            return NotImplemented
        self._check_same_shape(other, "subtract")
        return self._wrap(_sub(self.structure, self._values, other._values))


class _SemiringOps:
    def __mul__(self, other):
        if not isinstance(other, _MatrixBase):
            return NotImplemented
        self._check_family(other)
        if self.shape[1] != other.shape[0]:
            raise DimensionError(
                f"cannot multiply {self.shape[0]}x{self.shape[1]} by {other.shape[0]}x{other.shape[1]}"
            )
        out = _mul(self.structure, self._values, other._values)
        return self._product_class(out.shape[1])._wrap(out)

    __matmul__ = __mul__


class _PowerOps:
    def pow(self, e):
        self._check_square("pow")
        return self._wrap(_pow(self.structure, self._values, e))

    def __pow__(self, e):
        return self.pow(e)


class _StaticIdentity:
    @classmethod
    def identity(cls):
        return cls._wrap(_identity(cls.structure, cls.N))


class _DynamicIdentity:
    @classmethod
    def identity(cls, n):
        n = _check_dim(n, "n")
        return cls._wrap(_identity(cls.structure, n))


def _mixins(T, square):
    bases = []
    if is_group(T):
        bases.append(_GroupOps)
    if is_semiring(T):
        bases.append(_SemiringOps)
        if square:
            bases.append(_PowerOps)
    return bases


class _MatrixBase:
    structure = None
    _generic = None

    @classmethod
    def _wrap(cls, values):
        obj = cls.__new__(cls)
        obj._values = values
        return obj

    @classmethod
    def _require_specialised(cls):
        if cls.structure is None:
            raise TypeError(f"{cls.__name__} must be specialised with a structure before use")

    @property
    def shape(self):
        return self._values.shape

    def __len__(self):
        return self._values.shape[0]

    def __getitem__(self, idx):
        i, j = idx
        return self._values[i, j]

    def __iter__(self):
        return iter(self.tolist())

    def tolist(self):
        return [list(row) for row in self._values]

    def to_numpy(self):
        return self._values.copy()

    def __repr__(self):
        return f"{type(self).__name__}({self.tolist()})"

    def __eq__(self, other):
        if not isinstance(other, _MatrixBase):
            return NotImplemented
        return (
            self._generic is other._generic
            and self.structure == other.structure
            and self.shape == other.shape
            and bool(np.array_equal(self._values, other._values))
        )

    __hash__ = None

    def _check_family(self, other):
        if self._generic is not other._generic:
            raise TypeError(f"cannot combine {type(self).__name__} with {type(other).__name__}")
        if self.structure != other.structure:
            raise TypeError(
                f"structures differ: {structure_name(self.structure)} and {structure_name(other.structure)}"
            )

    def _check_same_shape(self, other, what):
        self._check_family(other)
        if self.shape != other.shape:
            raise DimensionError(f"cannot {what} shapes {self.shape} and {other.shape}")

    def _check_square(self, what):
        n, m = self.shape
        if n != m:
            raise DimensionError(f"{what} needs a square matrix, got {n}x{m}")

    def __add__(self, other):
        if not isinstance(other, _MatrixBase):
            return NotImplemented
        self._check_same_shape(other, "add")
        return self._wrap(_add(self.structure, self._values, other._values))


class Matrix(_MatrixBase):
    """
    Matrix with dimensions fixed by its specialisation.

    ``Matrix[T, N, M]`` builds a class for N x M matrices over the
    structure T; ``Matrix[T, N]`` is square. Operators the structure
    cannot support are left off the specialised class entirely.
    """

    N = None
    M = None
    _specialisations = {}

    def __class_getitem__(cls, params):
        if cls.structure is not None:
            raise TypeError(f"{cls.__name__} is already specialised")
        if not isinstance(params, tuple) or len(params) not in (2, 3):
            raise TypeError("use Matrix[T, N] or Matrix[T, N, M]")
        T, N = params[0], params[1]
        M = params[2] if len(params) == 3 else N
        require(T, Monoid, "Matrix")
        _check_hashable(T, "Matrix")
        N = _check_dim(N, "N")
        M = _check_dim(M, "M")

        key = (T, N, M)
        if key not in Matrix._specialisations:
            name = f"Matrix[{structure_name(T)}, {N}, {M}]"
            bases = _mixins(T, N == M)
            if is_semiring(T) and N == M:
                bases.append(_StaticIdentity)
            attrs = {"structure": T, "N": N, "M": M, "__module__": __name__}
            Matrix._specialisations[key] = type(name, (*bases, Matrix), attrs)
            logger.debug("specialised %s", name)
        return Matrix._specialisations[key]

    def __init__(self):
        self._require_specialised()
        self._values = _zeros(self.structure, self.N, self.M)

    @classmethod
    def from_rows(cls, rows):
        cls._require_specialised()
        values = _from_rows(rows)
        if values.shape != (cls.N, cls.M):
            raise DimensionError(f"{cls.__name__} expects {cls.N}x{cls.M} values, got shape {values.shape}")
        return cls._wrap(values)

    def _product_class(self, k):
        return Matrix[self.structure, self.N, k]

    def to_dynamic(self):
        return DynMatrix[self.structure]._wrap(self._values.copy())


Matrix._generic = Matrix


class DynMatrix(_MatrixBase):
    """
    Matrix whose dimensions are chosen per instance.

    ``DynMatrix[T](n, m)`` is the n x m zero matrix over T. Shapes are
    checked when operators are applied.
    """

    _specialisations = {}

    def __class_getitem__(cls, T):
        if cls.structure is not None:
            raise TypeError(f"{cls.__name__} is already specialised")
        require(T, Monoid, "DynMatrix")
        _check_hashable(T, "DynMatrix")
        if T not in DynMatrix._specialisations:
            name = f"DynMatrix[{structure_name(T)}]"
            bases = _mixins(T, True)
            if is_semiring(T):
                bases.append(_DynamicIdentity)
            attrs = {"structure": T, "__module__": __name__}
            DynMatrix._specialisations[T] = type(name, (*bases, DynMatrix), attrs)
            logger.debug("specialised %s", name)
        return DynMatrix._specialisations[T]

    def __init__(self, n, m):
        self._require_specialised()
        self._values = _zeros(self.structure, _check_dim(n, "n"), _check_dim(m, "m"))

    @classmethod
    def from_rows(cls, rows):
        cls._require_specialised()
        values = _from_rows(rows)
        _check_dim(values.shape[0], "n")
        _check_dim(values.shape[1], "m")
        return cls._wrap(values)

    @property
    def n(self):
        return self._values.shape[0]

    @property
    def m(self):
        return self._values.shape[1]

    @property
    def is_square(self):
        return self.n == self.m

    def _product_class(self, k):
        return type(self)

    def to_static(self):
        return Matrix[self.structure, self.n, self.m]._wrap(self._values.copy())


DynMatrix._generic = DynMatrix
