"""Entity extraction and overlap resolution."""

from .extractor import Extractor
from .overlap import remove_overlapping

__all__ = [
    "Extractor",
    "remove_overlapping",
]
