"""src/urlparts/utils/splitter.py

First-occurrence string splitting used by every URL extractor.
"""

from typing import Optional

__all__ = ["truncate"]

BEFORE = 0
AFTER = 1


def truncate(value: str, separator: str, side: int) -> Optional[str]:
    """
    Split ``value`` on the first ``separator`` and return one side.

    Args:
        value: String to split.
        separator: Substring to split on. Only the first occurrence counts.
        side: ``0`` for the piece before the separator (the whole value when
            the separator is missing), ``1`` for the piece after it.

    Returns:
        The selected piece, or None when it is empty or does not exist.
    """
    index = value.find(separator)

    if side == BEFORE:
        piece = value if index < 0 else value[:index]
    elif side == AFTER and index >= 0:
        piece = value[index + len(separator) :]
    else:
        return None

    return piece or None
