"""Opaque token generation utilities."""

import secrets


def generate_token(prefix: str = "", nbytes: int = 32) -> str:
    """Generate an opaque, URL-safe token value.

    Format: {prefix}_{urlsafe_random} when a prefix is given
    Example: at_Q2x0ZW...

    Args:
        prefix: Optional prefix identifying the token kind (e.g., "at")
        nbytes: Number of random bytes (default: 32)

    Returns:
        Token string
    """
    value = secrets.token_urlsafe(nbytes)
    return f"{prefix}_{value}" if prefix else value
