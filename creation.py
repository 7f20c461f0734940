"""
Stream factories, one per kind of source.

Every factory only builds a LazyStream; nothing is evaluated or printed until a
terminal operation runs on the returned stream.
"""

import random
import re
from array import array as TypedArray
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Callable, Optional, TypeVar, Union

from stream import LazyStream, SourceKind, StreamBuilder
from utils import (
    InvalidArgumentError,
    describe_callable,
    get_logger,
    require_callable,
    require_count,
    require_not_none,
    require_pattern,
)

T = TypeVar("T")

logger = get_logger("creation")


def from_values(*values: T) -> LazyStream:
    """Stream over the given literal values, in argument order."""
    logger.debug(f"from_values: {len(values)} value(s)")
    return LazyStream(values, SourceKind.VALUES)


def from_collection(collection: Iterable) -> LazyStream:
    """Stream over an existing collection in its natural iteration order.

    The collection is read when the stream is consumed, not when it is created.
    """
    _require_iterable(collection, "collection")
    logger.debug(f"from_collection: {type(collection).__name__}")
    return LazyStream(collection, SourceKind.COLLECTION)


def from_array(array: Sequence, start: int = 0, end: Optional[int] = None) -> LazyStream:
    """Stream over array[start:end] in index order.

    Accepts any sequence (list, tuple, range, array.array, ...) except text.
    Bounds must satisfy 0 <= start <= end <= len(array); unlike slicing, they
    are not clamped. If the array shrinks before consumption, the stream ends
    at its current length.
    """
    require_not_none(array, "array")
    if not isinstance(array, (Sequence, TypedArray)) or isinstance(array, (str, bytes)):
        raise InvalidArgumentError(
            f"'array' must be a sequence, got {type(array).__name__}"
        )
    size = len(array)
    start = require_count(start, "start")
    end = size if end is None else require_count(end, "end")
    if start > end or end > size:
        raise InvalidArgumentError(
            f"Array range [{start}, {end}) out of bounds for length {size}"
        )
    logger.debug(f"from_array: range [{start}, {end}) of {size}")
    return LazyStream(_array_range(array, start, end), SourceKind.ARRAY)


def of_array(array: Sequence) -> LazyStream:
    """Spread an array into from_values; same elements as from_array(array)."""
    require_not_none(array, "array")
    return from_values(*array)


def empty() -> LazyStream:
    logger.debug("empty: no elements")
    return LazyStream((), SourceKind.EMPTY)


def builder() -> StreamBuilder:
    """Return a fresh builder; call build() once all elements are added."""
    return StreamBuilder()


def iterate_unbounded(seed: T, transform: Callable[[T], T]) -> LazyStream:
    """Infinite stream seed, f(seed), f(f(seed)), ...; needs limit() before draining."""
    require_callable(transform, "transform")
    logger.debug(f"iterate: seed={seed!r}, transform={describe_callable(transform)}")
    return LazyStream(_iterate(seed, transform), SourceKind.ITERATE, bounded=False)


def iterate(seed: T, transform: Callable[[T], T], limit: int) -> LazyStream:
    """Exactly `limit` elements of the recurrence starting at seed.

    transform runs once per element after the first, so at most limit - 1 times.
    """
    require_count(limit, "limit")
    return iterate_unbounded(seed, transform).limit(limit)


def generate_unbounded(supplier: Callable[[], T]) -> LazyStream:
    """Infinite stream of supplier() results; needs limit() before draining."""
    require_callable(supplier, "supplier")
    logger.debug(f"generate: supplier={describe_callable(supplier)}")
    return LazyStream(_generate(supplier), SourceKind.GENERATE, bounded=False)


def generate(supplier: Callable[[], T], limit: int) -> LazyStream:
    """Exactly `limit` elements, one supplier() call each."""
    require_count(limit, "limit")
    return generate_unbounded(supplier).limit(limit)


def random_supplier(seed: Optional[int] = None) -> Callable[[], float]:
    """Supplier of uniform floats in [0, 1); pass a seed for repeatable output."""
    return random.Random(seed).random


def as_predicate(pattern: Union[str, re.Pattern]) -> Callable[[str], bool]:
    """Predicate that is true when the pattern is found anywhere in the string.

    Anchors in the pattern decide what "found" means, so "^P" is a prefix test.
    """
    compiled = require_pattern(pattern)

    def _matches(text: str) -> bool:
        return compiled.search(text) is not None

    _matches.__qualname__ = f"as_predicate({compiled.pattern!r})"
    return _matches


def from_pattern(collection: Iterable[str], pattern: Union[str, re.Pattern]) -> LazyStream:
    """Elements of collection matched by pattern, keeping their relative order."""
    predicate = as_predicate(pattern)
    _require_iterable(collection, "collection")
    logger.debug(f"from_pattern: {predicate.__qualname__}")
    return LazyStream(collection, SourceKind.PATTERN).filter(predicate)


def from_iterator(iterator: Iterator) -> LazyStream:
    """Stream that drains a single-pass iterator once.

    The iterator must not yield None; reusing it afterwards is undefined.
    """
    require_not_none(iterator, "iterator")
    if not isinstance(iterator, Iterator):
        raise InvalidArgumentError(
            f"'iterator' must be an iterator, got {type(iterator).__name__}; "
            f"use from_iterable() for collections"
        )
    logger.debug(f"from_iterator: {type(iterator).__name__}")
    return LazyStream(_non_null(iterator), SourceKind.ITERATOR)


def from_iterable(iterable: Iterable) -> LazyStream:
    """Stream equivalent to one pass over iterable; the iterable stays reusable."""
    _require_iterable(iterable, "iterable")
    logger.debug(f"from_iterable: {type(iterable).__name__}")
    return LazyStream(iterable, SourceKind.ITERABLE)


# ---------- sources ----------

def _require_iterable(value: Any, name: str) -> None:
    require_not_none(value, name)
    if not isinstance(value, Iterable):
        raise InvalidArgumentError(
            f"'{name}' must be iterable, got {type(value).__name__}"
        )


def _array_range(array, start, end):
    index = start
    while index < end and index < len(array):
        yield array[index]
        index += 1


def _iterate(seed, transform):
    value = seed
    while True:
        yield value
        value = transform(value)


def _generate(supplier):
    while True:
        yield supplier()


def _non_null(iterator):
    for position, item in enumerate(iterator):
        if item is None:
            raise InvalidArgumentError(f"iterator produced None at position {position}")
        yield item
