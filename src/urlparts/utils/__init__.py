"""src/urlparts/utils/__init__.py

Low-level helpers shared by the URL extractors.
"""

from .splitter import truncate
from .validators import RECOGNIZED_PROTOCOLS, is_recognized_protocol

__all__ = ["truncate", "RECOGNIZED_PROTOCOLS", "is_recognized_protocol"]
