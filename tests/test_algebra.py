import pytest

from mnds import (
    BoolSemiring, CapabilityError, Concat, Group, IntAdd, IntRing, MaxMonoid, MinMonoid,
    MinPlus, ModRing, Monoid, Ring, Semiring, fold, is_group, is_monoid, is_ring,
    is_semiring, require,
)


@pytest.mark.parametrize("structure, monoid, group, semiring, ring", [
    (IntAdd, True, True, False, False),
    (IntRing, True, True, True, True),
    (ModRing(7), True, True, True, True),
    (Concat, True, False, False, False),
    (MaxMonoid(0), True, False, False, False),
    (MinMonoid(0), True, False, False, False),
    (BoolSemiring, True, False, True, False),
    (MinPlus, True, False, True, False),
    (int, False, False, False, False),
    (object(), False, False, False, False),
])
def test_capabilities(structure, monoid, group, semiring, ring):
    assert is_monoid(structure) is monoid
    assert is_group(structure) is group
    assert is_semiring(structure) is semiring
    assert is_ring(structure) is ring


def test_ring_composes_group_and_semiring():
    assert issubclass(Ring, Group)
    assert issubclass(Ring, Semiring)
    assert issubclass(Group, Monoid)
    assert issubclass(Semiring, Monoid)


def test_require():
    assert require(IntRing, Semiring) is IntRing
    with pytest.raises(CapabilityError, match="requires a Group"):
        require(Concat, Group, "subtraction")
    assert issubclass(CapabilityError, TypeError)


def test_base_operations_are_abstract():
    with pytest.raises(NotImplementedError):
        Monoid.zero()
    with pytest.raises(NotImplementedError):
        Group.neg(1)
    with pytest.raises(NotImplementedError):
        Semiring.mul(1, 2)


def test_fold_is_left_to_right():
    assert fold(Concat, ["a", "b", "c"]) == "abc"
    assert fold(Concat, []) == ""
    assert fold(IntAdd, [1, 2, 3]) == 6
    assert fold(MaxMonoid(float("-inf")), []) == float("-inf")


def test_mod_ring():
    Z7 = ModRing(7)
    assert Z7.plus(5, 4) == 2
    assert Z7.neg(3) == 4
    assert Z7.plus(3, Z7.neg(3)) == Z7.zero()
    assert Z7.mul(3, 5) == 1
    assert ModRing(1).one() == 0
    assert Z7 == ModRing(7)
    assert hash(Z7) == hash(ModRing(7))
    assert Z7 != ModRing(5)
    with pytest.raises(ValueError):
        ModRing(0)


def test_min_max_sentinels():
    assert MaxMonoid(-100).plus(MaxMonoid(-100).zero(), -5) == -5
    assert MinMonoid(100).plus(3, MinMonoid(100).zero()) == 3
    assert MaxMonoid(-1) == MaxMonoid(-1)
    assert MaxMonoid(-1) != MinMonoid(-1)


def test_tropical_semiring():
    assert MinPlus.plus(MinPlus.zero(), 4) == 4
    assert MinPlus.mul(MinPlus.one(), 4) == 4
    assert MinPlus.mul(MinPlus.zero(), 4) == MinPlus.zero()
