"""linkedodict - Ordered dict with O(1) keyed access, reordering and removal at both ends."""

from linkedodict.core import LinkedOrderedDict
from linkedodict.errors import (
    LinkedOrderedDictError,
    MissingKeyError,
    MutatedDuringIterationError,
)
from linkedodict.types import Entry

__version__ = "0.0.1"

__all__ = [
    "LinkedOrderedDict",
    "Entry",
    "LinkedOrderedDictError",
    "MissingKeyError",
    "MutatedDuringIterationError",
]
