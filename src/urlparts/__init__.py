"""src/urlparts/__init__.py

urlparts - break a URL string down into its components.

urlparts splits a URL into protocol, host, path, query string, query
parameters and fragment using plain first-occurrence substring splitting.
It has no dependencies outside the standard library, never touches the
network and never raises on malformed URLs: pieces it cannot find are
reported as None.

Key Features:
    - Single call decomposition with :func:`parse`
    - Standalone extractor for every field
    - Closed protocol set (http, https, ftp)
    - Immutable, JSON friendly result record
    - Full type hints (PEP 561)

Example:
    Basic usage::

        from urlparts import parse

        parts = parse('https://www.example.com/en-US/page/sub/?pre=2&foo=bar#fuzz')
        parts.protocol   # 'https'
        parts.host       # 'www.example.com'
        parts.path       # 'en-US/page/sub/'
        parts.search     # 'pre=2&foo=bar'
        parts.params     # (('pre', '2'), ('foo', 'bar'))
        parts.fragment   # 'fuzz'

    Single field::

        from urlparts import get_host

        get_host('foo://www.example.com/en-US/')  # 'www.example.com'
"""

from urlparts.exceptions import InvalidInputError, URLPartsError
from urlparts.parser import (
    get_fragment,
    get_host,
    get_params,
    get_path,
    get_protocol,
    get_search_string,
    parse,
)
from urlparts.parts import ParsedURL
from urlparts.version import __version__

__all__ = [
    "parse",
    "get_protocol",
    "get_host",
    "get_path",
    "get_search_string",
    "get_fragment",
    "get_params",
    "ParsedURL",
    "URLPartsError",
    "InvalidInputError",
    "__version__",
]
