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

"""Common exception hierarchy for collectkit.

Every error raised by the collection helpers derives from `CollectkitError`
and also from the builtin exception callers would naturally catch
(`ValueError`, `TypeError`, `RuntimeError`/`LookupError`).
"""

from __future__ import annotations

from collections.abc import Collection

__all__ = [
    "CollectkitError",
    "CollectkitStateError",
    "CollectkitTypeError",
    "CollectkitValidationError",
    "DuplicateElementError",
    "MissingKeyError",
    "UnequalElementsError",
    "UnhashableElementError",
]


class CollectkitError(Exception):
    """Base error for all collectkit exceptions."""


class CollectkitValidationError(CollectkitError, ValueError):
    """Raised when an argument fails a precondition the caller asked to enforce."""


class CollectkitTypeError(CollectkitError, TypeError):
    """Raised when input data has an unexpected type."""


class CollectkitStateError(CollectkitError, RuntimeError):
    """Raised when a state the caller relied on does not hold."""


class DuplicateElementError(CollectkitValidationError):
    """Raised when an iterable expected to be distinct repeats an element or key.

    Attributes:
        element: The element whose occurrence was found to repeat.
        key: The key derived from ``element``; the element itself when no
            selector was involved.
    """

    def __init__(self, element: object, key: object, *, by_key: bool = False) -> None:
        self.element = element
        self.key = key
        if by_key:
            message = (
                "Expected all elements to be distinct, but found repeating key: "
                f"{key!r} (from element {element!r})"
            )
        else:
            message = f"Expected all elements to be distinct, but found repeating element: {element!r}"
        super().__init__(message)


class UnequalElementsError(CollectkitValidationError):
    """Raised when a collection expected to hold equal elements does not."""

    def __init__(self, elements: Collection[object]) -> None:
        self.elements = elements
        super().__init__(f"Expected all elements in collection {elements!r} to be equal")


class UnhashableElementError(CollectkitTypeError):
    """Raised when an element or derived key cannot be tracked in a set."""

    def __init__(self, element: object, key: object) -> None:
        self.element = element
        self.key = key
        if key is element:
            message = f"Expected hashable elements, but found unhashable element: {element!r}"
        else:
            message = f"Expected hashable keys, but found unhashable key: {key!r} (from element {element!r})"
        super().__init__(message)


class MissingKeyError(CollectkitStateError, LookupError):
    """Raised when a mapping lacks a key the caller required to be present."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"Missing expected key in map: {key!r}")
