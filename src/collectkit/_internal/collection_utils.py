# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Helper functions for distinctness, equality and lookup over collections.

Every helper is a pure function: inputs are consumed at most once, scratch
sets are local to the call, and failures raise immediately with the offending
value in the message.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Hashable, Iterable, Iterator, Mapping
from typing import TypeVar

from collectkit.core.model_types import LogComponent

from .exceptions import (
    DuplicateElementError,
    MissingKeyError,
    UnequalElementsError,
    UnhashableElementError,
)
from .logging_utils import structured_extra

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger: logging.Logger = logging.getLogger("collectkit.collections")
mapping_logger: logging.Logger = logging.getLogger("collectkit.mappings")


def _require_hashable(element: object, key: object) -> None:
    try:
        _ = hash(key)
    except TypeError as exc:
        raise UnhashableElementError(element, key) from exc


def _iter_repeats_by(
    values: Iterable[T],
    selector: Callable[[T], K],
    seen: set[K],
) -> Iterator[tuple[T, K]]:
    """Yield ``(element, key)`` for every occurrence whose key was already seen.

    ``seen`` is owned by the caller; once the generator is exhausted it holds
    every distinct key. Stopping iteration early stops consuming ``values``.
    """
    for element in values:
        key = selector(element)
        _require_hashable(element, key)
        if key in seen:
            yield element, key
        seen.add(key)


def _iter_repeats(values: Iterable[H], seen: set[H]) -> Iterator[H]:
    for element, _ in _iter_repeats_by(values, _identity, seen):
        yield element


def _identity(value: H) -> H:
    return value


def repeating_elements(values: Iterable[H]) -> set[H]:
    """Return every element that appears more than once in ``values``.

    Args:
        values: Iterable of hashable items.

    Returns:
        A set holding each repeated element once, however often it repeats.
    """
    already_seen: set[H] = set()
    duplicates: set[H] = set()
    for element in values:
        _require_hashable(element, element)
        if element in already_seen:
            duplicates.add(element)
        else:
            already_seen.add(element)
    return duplicates


def to_set_checking_distinct(values: Iterable[H]) -> set[H]:
    """Return the elements of ``values`` as a set, requiring them to be distinct.

    Args:
        values: Iterable of hashable items.

    Returns:
        A set containing exactly the input's elements.

    Raises:
        DuplicateElementError: On the first element equal to an earlier one.
    """
    seen: set[H] = set()
    for element in _iter_repeats(values, seen):
        logger.debug(
            "Repeating element %r found",
            element,
            extra=structured_extra(
                LogComponent.COLLECTIONS,
                operation="to_set_checking_distinct",
                details={"element": element},
            ),
        )
        raise DuplicateElementError(element, element)
    return seen


def all_are_distinct(values: Iterable[Hashable]) -> bool:
    """Return ``True`` if ``values`` contains no repeating elements.

    Scanning stops at the first repeat.
    """
    for _ in _iter_repeats(values, set()):
        return False
    return True


def require_all_are_distinct(values: Iterable[Hashable]) -> None:
    """Raise `DuplicateElementError` if any element of ``values`` repeats."""
    _ = to_set_checking_distinct(values)


def all_are_distinct_by(values: Iterable[T], selector: Callable[[T], Hashable]) -> bool:
    """Return ``True`` if no two elements of ``values`` share a selector key.

    Args:
        values: Iterable of arbitrary items.
        selector: Pure function mapping each element to a hashable key.

    Returns:
        ``False`` as soon as a key repeats, otherwise ``True``.
    """
    for _ in _iter_repeats_by(values, selector, set()):
        return False
    return True


def require_all_are_distinct_by(values: Iterable[T], selector: Callable[[T], Hashable]) -> None:
    """Raise if two elements of ``values`` share a selector key.

    Args:
        values: Iterable of arbitrary items.
        selector: Pure function mapping each element to a hashable key.

    Raises:
        DuplicateElementError: On the first repeated key; the error carries
            both the key and the element that produced it.
    """
    for element, key in _iter_repeats_by(values, selector, set()):
        logger.debug(
            "Repeating key %r found",
            key,
            extra=structured_extra(
                LogComponent.COLLECTIONS,
                operation="require_all_are_distinct_by",
                details={"element": element, "key": key},
            ),
        )
        raise DuplicateElementError(element, key, by_key=True)


def all_are_equal(values: Collection[object]) -> bool:
    """Return ``True`` if every element of ``values`` equals the first one.

    Empty and single-element collections are trivially equal. Elements need not
    be hashable.
    """
    if len(values) <= 1:
        return True
    iterator = iter(values)
    first = next(iterator)
    return all(first == element for element in iterator)


def require_all_are_equal(values: Collection[object]) -> None:
    """Raise `UnequalElementsError` unless every element of ``values`` is equal.

    Does not raise for an empty collection.
    """
    if all_are_equal(values):
        return
    logger.debug(
        "Unequal elements found",
        extra=structured_extra(
            LogComponent.COLLECTIONS,
            operation="require_all_are_equal",
            details={"size": len(values)},
        ),
    )
    raise UnequalElementsError(values)


def get_or_fail(mapping: Mapping[K, V], key: K) -> V:
    """Return the value stored under ``key``, failing loudly when it is absent.

    The value type is expected not to encode absence itself (no ``None``
    meaning "missing"), so a present key always yields its stored value and
    an absent key always raises.

    Args:
        mapping: Mapping to query. It is never mutated, even when it defines
            ``__missing__``.
        key: Key whose value is required.

    Returns:
        The value associated with ``key``.

    Raises:
        MissingKeyError: If ``key`` is not in ``mapping``.
    """
    if key not in mapping:
        mapping_logger.debug(
            "Missing expected key %r",
            key,
            extra=structured_extra(
                LogComponent.MAPPINGS,
                operation="get_or_fail",
                details={"key": key, "size": len(mapping)},
            ),
        )
        raise MissingKeyError(key)
    return mapping[key]


__all__ = [
    "all_are_distinct",
    "all_are_distinct_by",
    "all_are_equal",
    "get_or_fail",
    "repeating_elements",
    "require_all_are_distinct",
    "require_all_are_distinct_by",
    "require_all_are_equal",
    "to_set_checking_distinct",
]
