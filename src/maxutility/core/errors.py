from __future__ import annotations

"""Errors raised by the path finding core."""


class MaxUtilityError(RuntimeError):
    """Base class for precondition and invariant violations."""


class InvalidTreeError(MaxUtilityError):
    """The input is not a finite rooted tree of states."""


class NoLeafError(MaxUtilityError):
    """No leaf was reached while scanning for the best endpoint."""


__all__ = ["MaxUtilityError", "InvalidTreeError", "NoLeafError"]
