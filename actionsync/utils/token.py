# actionsync Token Utilities
# Normalization of raw API credentials

import re
from typing import Optional

_BEARER_PREFIX = re.compile(r"^bearer\s+", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def sanitize_token(token: Optional[str]) -> str:
    """
    Clean a raw API token.

    Strips a leading "Bearer " marker (any letter case) and every
    whitespace character, so pasted values with newlines still work.

    Args:
        token: Raw token string, may be None.

    Returns:
        Cleaned token, or an empty string when no token was given.
    """
    if not token:
        return ""

    clean = _BEARER_PREFIX.sub("", token)
    return _WHITESPACE.sub("", clean)
