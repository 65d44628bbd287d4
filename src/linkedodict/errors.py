"""Exception classes for linkedodict."""


class LinkedOrderedDictError(Exception):
    """Base exception for all linkedodict errors."""


class MissingKeyError(LinkedOrderedDictError, KeyError):
    """Raised by item access or item deletion when the key is not present."""


class MutatedDuringIterationError(LinkedOrderedDictError, RuntimeError):
    """Raised by a traversal when the dict was structurally changed since it started."""
