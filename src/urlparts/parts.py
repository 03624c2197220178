"""src/urlparts/parts.py

Result record produced by :func:`urlparts.parse`.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

__all__ = ["ParsedURL", "Param"]

Param = Tuple[str, str]


@dataclass(frozen=True)
class ParsedURL:
    """
    Components of a single URL.

    Every optional field is None when the matching piece of the URL is
    missing or empty; the two states are not distinguished.

    Attributes:
        protocol: ``"http"``, ``"https"`` or ``"ftp"``.
        host: Text between the scheme separator and the first slash.
        path: Text after the host, without query string or fragment.
        search: Raw query string without the leading ``?``.
        fragment: Raw text after the first ``#``.
        params: ``(key, value)`` pairs from ``search`` in input order,
            duplicates included.
    """

    protocol: Optional[str]
    host: Optional[str]
    path: Optional[str]
    search: Optional[str]
    fragment: Optional[str]
    params: Tuple[Param, ...] = ()

    def get_param(self, key: str, default: Any = None) -> Any:
        """
        Get the value of a query parameter.

        Args:
            key: Parameter name (case-sensitive).
            default: Value returned when the key is not present.

        Returns:
            Value of the first pair named ``key``, or default.
        """
        for name, value in self.params:
            if name == key:
                return value
        return default

    def get_all_params(self, key: str) -> List[str]:
        """Get every value of a query parameter, in input order."""
        return [value for name, value in self.params if name == key]

    def as_dict(self) -> Dict[str, Any]:
        """Plain dictionary form, safe to pass to ``json.dumps``."""
        return {
            "protocol": self.protocol,
            "host": self.host,
            "path": self.path,
            "search": self.search,
            "fragment": self.fragment,
            "params": [[name, value] for name, value in self.params],
        }
