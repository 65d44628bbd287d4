"""Type definitions for linkedodict."""

from typing import TypeAlias, TypeVar

# Generic type variables for keys and values
K = TypeVar("K")  # Key type
V = TypeVar("V")  # Value type

# A removed (key, value) pair as returned by pop()/shift()
Entry: TypeAlias = tuple[K, V]
