"""tests/unit/test_exceptions.py"""

import pytest

from urlparts.exceptions import InvalidInputError, URLPartsError


def test_exception_hierarchy():
    """Verify the inheritance structure of urlparts exceptions."""
    assert issubclass(InvalidInputError, URLPartsError)
    assert issubclass(InvalidInputError, TypeError)


def test_invalid_input_error_message():
    """Verify that InvalidInputError names the offending type."""
    with pytest.raises(InvalidInputError) as exc_info:
        raise InvalidInputError(b"https://example.com")
    assert "bytes" in str(exc_info.value)
    assert exc_info.value.value == b"https://example.com"


def test_invalid_input_error_caught_as_type_error():
    """Verify that callers catching TypeError also catch InvalidInputError."""
    with pytest.raises(TypeError):
        raise InvalidInputError(None)
