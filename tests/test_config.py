import pytest

from fieldpath.config import (
    DEFAULT_FINDER_CONFIG,
    FinderConfig,
    resolve_diagonal_movement,
    resolve_heuristic,
)
from fieldpath.diagonal_movement import DiagonalMovement
from fieldpath.heuristics import chebyshev, euclidean, manhattan, octile


@pytest.mark.parametrize("allow_diagonal, dont_cross_corners, expected", [
    (False, False, DiagonalMovement.NEVER),
    (False, True, DiagonalMovement.NEVER),
    (True, False, DiagonalMovement.IF_AT_MOST_ONE_OBSTACLE),
    (True, True, DiagonalMovement.ONLY_WHEN_NO_OBSTACLES),
])
def test_legacy_flags(allow_diagonal, dont_cross_corners, expected):
    assert resolve_diagonal_movement(None, allow_diagonal, dont_cross_corners) == expected


def test_explicit_policy_wins_over_legacy_flags():
    policy = resolve_diagonal_movement(DiagonalMovement.ALWAYS, allow_diagonal=False)
    assert policy == DiagonalMovement.ALWAYS
    policy = resolve_diagonal_movement(DiagonalMovement.NEVER, allow_diagonal=True, dont_cross_corners=True)
    assert policy == DiagonalMovement.NEVER


@pytest.mark.parametrize("name, expected", [
    ("never", DiagonalMovement.NEVER),
    ("Always", DiagonalMovement.ALWAYS),
    ("if-at-most-one-obstacle", DiagonalMovement.IF_AT_MOST_ONE_OBSTACLE),
    ("OnlyWhenNoObstacles", DiagonalMovement.ONLY_WHEN_NO_OBSTACLES),
    ("only_when_no_obstacles", DiagonalMovement.ONLY_WHEN_NO_OBSTACLES),
])
def test_policy_names(name, expected):
    assert resolve_diagonal_movement(name) == expected


def test_unknown_policy_name():
    with pytest.raises(ValueError, match="Unknown diagonal movement"):
        DiagonalMovement.from_name("sometimes")


@pytest.mark.parametrize("policy, expected", [
    (DiagonalMovement.NEVER, manhattan),
    (DiagonalMovement.ALWAYS, octile),
    (DiagonalMovement.IF_AT_MOST_ONE_OBSTACLE, octile),
    (DiagonalMovement.ONLY_WHEN_NO_OBSTACLES, octile),
])
def test_default_heuristic_follows_policy(policy, expected):
    assert resolve_heuristic(None, policy) is expected


def test_explicit_heuristic_is_always_honored():
    assert resolve_heuristic(chebyshev, DiagonalMovement.NEVER) is chebyshev
    assert resolve_heuristic(manhattan, DiagonalMovement.ALWAYS) is manhattan
    assert resolve_heuristic("euclidean", DiagonalMovement.NEVER) is euclidean


def test_default_config_resolution():
    resolved = DEFAULT_FINDER_CONFIG.resolve()
    assert resolved.diagonal_movement == DiagonalMovement.NEVER
    assert resolved.heuristic is manhattan
    assert resolved.weight == 1


@pytest.mark.parametrize("weight, expected", [(None, 1), (0, 1), (2.5, 2.5)])
def test_weight_defaults_when_falsy(weight, expected):
    assert FinderConfig(weight=weight).resolve().weight == expected
