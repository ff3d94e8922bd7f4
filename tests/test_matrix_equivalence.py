import itertools

import pytest

from mnds import DynMatrix, IntRing, Matrix, ModRing


@pytest.mark.parametrize("structure", [IntRing, ModRing(11)])
@pytest.mark.parametrize("n, m, k", [(1, 1, 1), (2, 3, 2), (3, 3, 3), (4, 2, 5)])
def test_static_and_dynamic_agree(structure, n, m, k, random_rows):
    a, b, c = random_rows(n, m), random_rows(n, m), random_rows(m, k)
    if structure != IntRing:
        a, b, c = ([[x % 11 for x in row] for row in rows] for rows in (a, b, c))
    SA = Matrix[structure, n, m].from_rows(a)
    SB = Matrix[structure, n, m].from_rows(b)
    SC = Matrix[structure, m, k].from_rows(c)
    DA, DB, DC = SA.to_dynamic(), SB.to_dynamic(), SC.to_dynamic()

    assert (SA + SB).to_dynamic() == DA + DB
    assert (SA - SB).to_dynamic() == DA - DB
    assert (-SA).to_dynamic() == -DA
    assert (SA * SC).to_dynamic() == DA * DC
    if n == m:
        for e in range(5):
            assert SA.pow(e).to_dynamic() == DA.pow(e)
        assert Matrix[structure, n].identity().to_dynamic() == DynMatrix[structure].identity(n)


def test_round_trip_between_variants(random_rows):
    D = DynMatrix[IntRing].from_rows(random_rows(2, 3))
    S = D.to_static()
    assert type(S) is Matrix[IntRing, 2, 3]
    assert S.to_dynamic() == D
    assert list(itertools.chain(*S)) == list(itertools.chain(*D))
