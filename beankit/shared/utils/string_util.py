"""
String Utilities

Random string and UUID generation, plus a prefix helper.

Random values come from the secrets module (OS CSPRNG), which is safe to
call from several threads without extra locking.
"""

import secrets
from uuid import uuid4

from beankit.domain.shared.exceptions import InvalidLengthError
from beankit.shared.config import DEFAULT_RANDOM_STRING_LENGTH, RANDOM_STRING_ALPHABET


def random_string(length: int = DEFAULT_RANDOM_STRING_LENGTH) -> str:
    """
    Generate a random alphanumeric string.

    Args:
        length: Number of characters (default 12)

    Returns:
        String of A-Z, a-z and 0-9 characters

    Raises:
        InvalidLengthError: If length is negative

    Examples:
        >>> len(random_string())
        12
        >>> random_string(0)
        ''
    """
    if length < 0:
        raise InvalidLengthError(f"Length must be >= 0, got {length}", length=length)
    return "".join(secrets.choice(RANDOM_STRING_ALPHABET) for _ in range(length))


def random_uuid() -> str:
    """Generate a random UUID4 as 32 lowercase hex characters, without dashes."""
    return uuid4().hex


def substring_begin(text: str, size: int) -> str:
    """
    Return the first size characters of text, or text itself when shorter.

    Raises:
        InvalidLengthError: If size is negative
    """
    if size < 0:
        raise InvalidLengthError(f"Size must be >= 0, got {size}", length=size)
    return text[:size]
