"""src/urlparts/exceptions.py

urlparts Exceptions hierarchy.

Parsing itself never fails: malformed URLs produce absent fields. The only
error the package raises is for input that is not a string at all.
"""


class URLPartsError(Exception):
    """Base exception for all urlparts errors."""


class InvalidInputError(URLPartsError, TypeError):
    """
    The value handed to an extractor is not a ``str``.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"URL must be a str, got {type(value).__name__}")
