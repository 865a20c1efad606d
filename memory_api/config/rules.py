"""
Game Rules Constants Module

Validation limits and scoring rules shared by the request schemas and the
services. Fewer moves is a better memory-game result.
"""

from typing import Final, Tuple

MIN_PASSWORD_LENGTH: Final[int] = 6
"""
Shortest password accepted at registration and on profile update.
"""

MAX_PASSWORD_BYTES: Final[int] = 72
"""
Longest password bcrypt can hash, measured in UTF-8 bytes.
"""

MIN_HISTORY_MOVES: Final[int] = 1
"""
A completed game takes at least one move.
"""

MIN_HIGHSCORE_MOVES: Final[int] = 0
"""
High score submissions accept zero; zero is a valid stored score.
"""

# High score key policies
KEY_POLICY_USER_LEVEL: Final[str] = 'user_level'
"""
One record per (username, level) pair.
"""

KEY_POLICY_LEVEL: Final[str] = 'level'
"""
One record per level; the holder's username travels with the score.
"""

KEY_POLICIES: Final[Tuple[str, ...]] = (KEY_POLICY_USER_LEVEL, KEY_POLICY_LEVEL)


def validate_key_policy(policy: str) -> str:
    """
    Normalise and check a configured high score key policy.

    Raises:
        ValueError: If the policy is not one of KEY_POLICIES
    """
    normalised = (policy or '').strip().lower()
    if normalised not in KEY_POLICIES:
        raise ValueError(
            f"Unknown high score key policy '{policy}'. Expected one of: {', '.join(KEY_POLICIES)}"
        )
    return normalised
