"""Lazy iteration helpers: starmap, takewhile and duplicate filtering."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from itertools import groupby
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def starmap(func: Callable[..., R], sequence: Iterable[Iterable[Any]]) -> Iterator[R]:
    """Yield ``func(*item)`` for every item of ``sequence``.

    Each item is unpacked as the positional arguments of ``func``; items may
    be tuples, lists or any other iterable.
    """
    for arguments in sequence:
        yield func(*arguments)


def takewhile(
    predicate: Callable[[T], Any] | None, iterable: Iterable[T]
) -> Iterator[T]:
    """Yield items of ``iterable`` until ``predicate`` is false for one.

    When ``predicate`` is ``None`` the truth value of each item is used.
    The first failing item is consumed but not yielded.
    """
    test = bool if predicate is None else predicate
    for item in iterable:
        if not test(item):
            return
        yield item


def unique_everseen(iterable: Iterable[T]) -> Iterator[T]:
    """Yield each distinct item once, in order of first appearance.

    Items must be hashable; an unhashable item raises ``TypeError``.
    """
    seen: set[Hashable] = set()
    for item in iterable:
        if item not in seen:
            seen.add(item)
            yield item


def unique_justseen(iterable: Iterable[T]) -> Iterator[T]:
    """Yield the first item of every run of consecutive equal items."""
    for _, group in groupby(iterable):
        yield next(group)