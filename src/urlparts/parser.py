"""src/urlparts/parser.py

URL decomposition for urlparts.

Each extractor re-parses the string it is given, so any of them can be
called on its own and return exactly what :func:`parse` puts in the
matching :class:`~urlparts.parts.ParsedURL` field.
"""

import logging
from typing import Optional, Tuple

from urlparts.exceptions import InvalidInputError
from urlparts.parts import Param, ParsedURL
from urlparts.utils.splitter import AFTER, BEFORE, truncate
from urlparts.utils.validators import is_recognized_protocol

__all__ = [
    "parse",
    "get_protocol",
    "get_host",
    "get_path",
    "get_search_string",
    "get_fragment",
    "get_params",
]

logger = logging.getLogger(__name__)

SCHEME_SEPARATOR = "://"


def _ensure_str(url: object) -> str:
    if not isinstance(url, str):
        logger.debug("Rejecting URL of type %s", type(url).__name__)
        raise InvalidInputError(url)
    return url


def _after_scheme(url: str) -> Optional[str]:
    return truncate(url, SCHEME_SEPARATOR, AFTER)


def get_protocol(url: str) -> Optional[str]:
    """Scheme before ``://`` if it is one of the recognised protocols."""
    protocol = truncate(_ensure_str(url), SCHEME_SEPARATOR, BEFORE)
    if is_recognized_protocol(protocol):
        return protocol
    return None


def get_host(url: str) -> Optional[str]:
    """
    Host part of ``url``.

    Taken after ``://`` when present (whatever the scheme), otherwise from
    the start of the string, up to the first ``/``.
    """
    url = _ensure_str(url)
    rest = _after_scheme(url)

    if rest is None:
        return truncate(url, "/", BEFORE)

    return truncate(rest, "/", BEFORE)


def get_path(url: str) -> Optional[str]:
    """Everything after the host, minus query string and fragment."""
    url = _ensure_str(url)
    rest = _after_scheme(url)
    path = truncate(url if rest is None else rest, "/", AFTER)

    if path is None:
        return None

    path = truncate(path, "?", BEFORE)
    if path is None:
        return None
    return truncate(path, "#", BEFORE)


def get_search_string(url: str) -> Optional[str]:
    """Raw query string, without ``?`` and any trailing fragment."""
    search = truncate(_ensure_str(url), "?", AFTER)

    if search is None:
        return None

    return truncate(search, "#", BEFORE)


def get_fragment(url: str) -> Optional[str]:
    """Raw text after the first ``#``."""
    return truncate(_ensure_str(url), "#", AFTER)


def get_params(url: str) -> Tuple[Param, ...]:
    """
    Query parameters of ``url`` as ``(key, value)`` pairs.

    The query string is split on every ``&`` and each token on its first
    ``=``. Tokens without ``=`` are dropped. Keys and values are returned
    as they appear, without decoding.

    Returns:
        Pairs in input order, empty when there is no query string.
    """
    search = get_search_string(url)
    if search is None:
        return ()

    params = []
    for token in search.split("&"):
        key, sep, value = token.partition("=")
        if sep:
            params.append((key, value))

    return tuple(params)


def parse(url: str) -> ParsedURL:
    """
    Break a URL down into its components.

    Surrounding whitespace (any character for which ``str.isspace`` is
    true) is stripped once; every field is then computed
    independently from the stripped string. Never fails on a ``str``:
    unrecognised or malformed pieces come back as None.

    Args:
        url: URL text, e.g. ``"https://www.example.com/en-US/?pre=2#fuzz"``.

    Returns:
        ParsedURL with protocol, host, path, search, fragment and params.

    Raises:
        InvalidInputError: If ``url`` is not a ``str``.
    """
    url = _ensure_str(url).strip()

    parts = ParsedURL(
        protocol=get_protocol(url),
        host=get_host(url),
        path=get_path(url),
        search=get_search_string(url),
        fragment=get_fragment(url),
        params=get_params(url),
    )
    logger.debug("Parsed %r into %s", url, parts)
    return parts
