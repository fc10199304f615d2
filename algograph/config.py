"""Runtime configuration for algograph.

Recursive depth-first search descends once per vertex on a path, so large
graphs need more stack frames than the interpreter allows by default. The
minimal recursion limit is read from the ALGOGRAPH_RECURSION_LIMIT environment
variable and can be changed with set_recursion_limit(...) or temporarily with
recursion_limit(...).
"""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from typing import Iterator

_RECURSION_LIMIT_ENV_VAR = "ALGOGRAPH_RECURSION_LIMIT"
_DEFAULT_RECURSION_LIMIT = 10000


def _read_recursion_limit() -> int:
    raw = os.getenv(_RECURSION_LIMIT_ENV_VAR)

    if raw is None:
        return _DEFAULT_RECURSION_LIMIT

    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(
            f"{_RECURSION_LIMIT_ENV_VAR} must be an integer, got {raw!r}"
        ) from None

    if limit <= 0:
        raise ValueError(f"{_RECURSION_LIMIT_ENV_VAR} must be positive, got {limit}")

    return limit


_recursion_limit: int = _read_recursion_limit()


def get_recursion_limit() -> int:
    """
    Return the minimal interpreter recursion limit used by recursive DFS.

    Returns
    -------
    int
        The configured limit.
    """
    return _recursion_limit


def set_recursion_limit(limit: int) -> None:
    """
    Globally set the minimal recursion limit used by recursive DFS.

    Parameters
    ----------
    limit:
        New limit, must be positive.

    Raises
    ------
    ValueError
        If the limit is not positive.
    """
    if limit <= 0:
        raise ValueError(f"Recursion limit must be positive, got {limit}")

    global _recursion_limit
    _recursion_limit = int(limit)


@contextmanager
def recursion_limit(limit: int) -> Iterator[None]:
    """
    Context manager to temporarily change the configured recursion limit.

    Example
    -------
    >>> with recursion_limit(50000):
    ...     # Search deeper graphs recursively here
    ...     pass
    """
    global _recursion_limit
    previous = _recursion_limit
    set_recursion_limit(limit)
    try:
        yield
    finally:
        _recursion_limit = previous


@contextmanager
def raised_recursion_limit() -> Iterator[None]:
    """Raise the interpreter recursion limit to the configured value while inside."""
    previous = sys.getrecursionlimit()

    if previous < _recursion_limit:
        sys.setrecursionlimit(_recursion_limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)
