"""Parallel iteration over several iterables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import zip_longest as _zip_longest
from typing import Any


def zip_shortest(*args: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Yield tuples of items taken in step; stop at the shortest iterable.

    With no iterables nothing is yielded.
    """
    yield from zip(*args)


def zip_longest(*args: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Yield tuples of items taken in step until every iterable is exhausted.

    Positions whose iterable has run out hold ``None``. With no iterables
    nothing is yielded.
    """
    yield from _zip_longest(*args, fillvalue=None)