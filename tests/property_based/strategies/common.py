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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "distinct_ints",
    "hashable_elements",
    "small_int_lists",
    "words",
]


def small_int_lists(max_value: int = 8, max_size: int = 20) -> st.SearchStrategy[list[int]]:
    """Return a strategy of short integer lists drawn from a narrow range.

    The narrow range makes repeated elements common.
    """
    return st.lists(st.integers(min_value=0, max_value=max_value), max_size=max_size)


def distinct_ints(max_size: int = 20) -> st.SearchStrategy[list[int]]:
    """Return a strategy of integer lists without repeated elements."""
    return st.lists(st.integers(), max_size=max_size, unique=True)


def hashable_elements() -> st.SearchStrategy[object]:
    """Inputs mixing the hashable builtins equality treats specially.

    Returns:
        Strategy emitting ints, bools, short strings, ``None`` and tuples.
    """
    scalars = st.one_of(st.integers(-3, 3), st.booleans(), st.text(max_size=2), st.none())
    return st.one_of(scalars, st.tuples(scalars, scalars))


def words(max_size: int = 15) -> st.SearchStrategy[list[str]]:
    """Return a strategy of short ASCII words, suitable for ``len`` selectors."""
    word = st.text(alphabet="abc", max_size=4)
    return st.lists(word, max_size=max_size)
