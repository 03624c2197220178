"""tests/unit/test_version.py"""

import re
from pathlib import Path

import urlparts
from urlparts import version

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def test_version_exported_from_version_module():
    """The package re-exports the version defined in urlparts.version."""
    assert urlparts.__version__ is version.__version__


def test_version_is_dotted_release():
    """Version is a MAJOR.MINOR.PATCH release string."""
    assert re.fullmatch(r"\d+\.\d+\.\d+", urlparts.__version__)


def test_pyproject_reads_version_module():
    """pyproject.toml takes its dynamic version from urlparts.version."""
    text = PYPROJECT.read_text(encoding="utf-8")

    assert 'dynamic = ["version"]' in text
    assert 'attr = "urlparts.version.__version__"' in text
