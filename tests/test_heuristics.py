import math

import pytest

from fieldpath.heuristics import HEURISTICS, chebyshev, euclidean, get_heuristic, manhattan, octile


def test_manhattan():
    assert manhattan(2, 3) == 5


def test_euclidean():
    assert euclidean(3, 4) == pytest.approx(5.0)


def test_octile_is_symmetric():
    expected = (math.sqrt(2) - 1) * 3 + 4
    assert octile(3, 4) == pytest.approx(expected)
    assert octile(4, 3) == pytest.approx(expected)


def test_octile_pure_diagonal():
    assert octile(3, 3) == pytest.approx(3 * math.sqrt(2))


def test_chebyshev():
    assert chebyshev(2, 7) == 7


@pytest.mark.parametrize("name", sorted(HEURISTICS))
def test_zero_offset_is_zero(name):
    assert get_heuristic(name)(0, 0) == 0


def test_get_heuristic_is_case_insensitive():
    assert get_heuristic(" Octile ") is octile


def test_get_heuristic_unknown():
    with pytest.raises(ValueError, match="Unknown heuristic"):
        get_heuristic("taxicab")
