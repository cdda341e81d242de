"""
Diagonal movement policies for grid neighbor lookup.
"""

from enum import Enum


class DiagonalMovement(Enum):
    """Rule set controlling when diagonal steps are allowed."""
    ALWAYS = 1
    NEVER = 2
    IF_AT_MOST_ONE_OBSTACLE = 3
    ONLY_WHEN_NO_OBSTACLES = 4

    @classmethod
    def from_name(cls, name: str) -> "DiagonalMovement":
        """
        Parse a policy name such as "never", "if-at-most-one-obstacle"
        or "OnlyWhenNoObstacles".

        Args:
            name: Policy name (case-insensitive, '-', '_' and spaces ignored)

        Returns:
            Matching DiagonalMovement member
        """
        key = name.strip().replace("-", "").replace("_", "").replace(" ", "").lower()
        for member in cls:
            if member.name.replace("_", "").lower() == key:
                return member
        known = ", ".join(member.name.lower().replace("_", "-") for member in cls)
        raise ValueError(f"Unknown diagonal movement '{name}' (expected one of: {known})")
