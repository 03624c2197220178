"""tests/unit/test_utils.py"""

import pytest

from urlparts.utils.validators import RECOGNIZED_PROTOCOLS, is_recognized_protocol


def test_recognized_protocols_is_closed_set():
    """The protocol set holds exactly http, https and ftp."""
    assert RECOGNIZED_PROTOCOLS == frozenset({"http", "https", "ftp"})


@pytest.mark.parametrize(
    "protocol, expected",
    [
        ("http", True),
        ("https", True),
        ("ftp", True),
        ("HTTP", False),
        ("Https", False),
        ("ws", False),
        ("file", False),
        ("", False),
        (None, False),
    ],
)
def test_is_recognized_protocol(protocol, expected):
    """Test case-sensitive protocol recognition."""
    assert is_recognized_protocol(protocol) is expected
