"""src/urlparts/utils/validators.py

Validation utilities for urlparts.
"""

from typing import FrozenSet, Optional

RECOGNIZED_PROTOCOLS: FrozenSet[str] = frozenset({"http", "https", "ftp"})


def is_recognized_protocol(protocol: Optional[str]) -> bool:
    """Exact, case-sensitive match against the closed protocol set."""
    return protocol in RECOGNIZED_PROTOCOLS
