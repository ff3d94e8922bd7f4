"""
Algebraic structures used to parameterise the containers in mnds.

A structure is a class whose operations are static methods; the class
it derives from declares which operations exist. Parameterised
structures (a sentinel, a modulus) are instances of such classes.
"""

from functools import reduce


class CapabilityError(TypeError):
    """Raised when a structure lacks the operations a container needs."""


class Monoid:
    @staticmethod
    def zero():
        raise NotImplementedError

    @staticmethod
    def plus(x, y):
        raise NotImplementedError


class Group(Monoid):
    @staticmethod
    def neg(x):
        raise NotImplementedError


class Semiring(Monoid):
    @staticmethod
    def one():
        raise NotImplementedError

    @staticmethod
    def mul(x, y):
        raise NotImplementedError


class Ring(Group, Semiring):
    pass


def _declares(structure, capability):
    if isinstance(structure, type):
        return issubclass(structure, capability)
    return isinstance(structure, capability)


def is_monoid(structure):
    return _declares(structure, Monoid)


def is_group(structure):
    return _declares(structure, Group)


def is_semiring(structure):
    return _declares(structure, Semiring)


def is_ring(structure):
    return _declares(structure, Ring)


def require(structure, capability, what="this operation"):
    """Raise CapabilityError unless ``structure`` declares ``capability``."""
    if not _declares(structure, capability):
        raise CapabilityError(
            f"{what} requires a {capability.__name__}, got {structure_name(structure)}"
        )
    return structure


def structure_name(structure):
    if isinstance(structure, type):
        return structure.__name__
    return repr(structure)


def fold(structure, values):
    """Left-to-right ``plus`` over ``values`` starting from ``zero()``."""
    return reduce(structure.plus, values, structure.zero())


# --- Stock structures ---

class IntAdd(Group):
    @staticmethod
    def zero():
        return 0

    @staticmethod
    def plus(x, y):
        return x + y

    @staticmethod
    def neg(x):
        return -x


class IntRing(Ring):
    @staticmethod
    def zero():
        return 0

    @staticmethod
    def plus(x, y):
        return x + y

    @staticmethod
    def neg(x):
        return -x

    @staticmethod
    def one():
        return 1

    @staticmethod
    def mul(x, y):
        return x * y


class ModRing(Ring):
    def __init__(self, modulus):
        if modulus < 1:
            raise ValueError(f"modulus must be positive, got {modulus}")
        self.modulus = modulus

    def __repr__(self):
        return f"ModRing({self.modulus})"

    def __eq__(self, other):
        return type(other) is type(self) and other.modulus == self.modulus

    def __hash__(self):
        return hash((type(self), self.modulus))

    def zero(self):
        return 0

    def plus(self, x, y):
        return (x + y) % self.modulus

    def neg(self, x):
        return -x % self.modulus

    def one(self):
        return 1 % self.modulus

    def mul(self, x, y):
        return (x * y) % self.modulus


class Concat(Monoid):
    """Strings under concatenation. Not commutative."""

    @staticmethod
    def zero():
        return ""

    @staticmethod
    def plus(x, y):
        return x + y


class MaxMonoid(Monoid):
    def __init__(self, sentinel=float("-inf")):
        self.sentinel = sentinel

    def __repr__(self):
        return f"MaxMonoid({self.sentinel!r})"

    def __eq__(self, other):
        return type(other) is type(self) and other.sentinel == self.sentinel

    def __hash__(self):
        return hash((type(self), self.sentinel))

    def zero(self):
        return self.sentinel

    def plus(self, x, y):
        return max(x, y)


class MinMonoid(Monoid):
    def __init__(self, sentinel=float("inf")):
        self.sentinel = sentinel

    def __repr__(self):
        return f"MinMonoid({self.sentinel!r})"

    def __eq__(self, other):
        return type(other) is type(self) and other.sentinel == self.sentinel

    def __hash__(self):
        return hash((type(self), self.sentinel))

    def zero(self):
        return self.sentinel

    def plus(self, x, y):
        return min(x, y)


class BoolSemiring(Semiring):
    @staticmethod
    def zero():
        return False

    @staticmethod
    def plus(x, y):
        return x or y

    @staticmethod
    def one():
        return True

    @staticmethod
    def mul(x, y):
        return x and y


class MinPlus(Semiring):
    """Tropical semiring: min plays the role of addition, + of multiplication."""

    @staticmethod
    def zero():
        return float("inf")

    @staticmethod
    def plus(x, y):
        return min(x, y)

    @staticmethod
    def one():
        return 0

    @staticmethod
    def mul(x, y):
        return x + y
