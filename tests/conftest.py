import pytest

FULL_URL = "https://www.example.com/en-US/page/sub/?pre=2&foo=bar#fuzz"


@pytest.fixture
def full_url():
    """URL carrying every component."""
    return FULL_URL


@pytest.fixture
def padded_url():
    """URL surrounded by whitespace."""
    return "  https://www.example.com/en-US/page/sub/#fuzz  "
