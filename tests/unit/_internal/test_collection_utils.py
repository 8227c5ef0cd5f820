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

"""Unit tests for the collection helpers."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING

import pytest

from collectkit._internal.collection_utils import (
    all_are_distinct,
    all_are_distinct_by,
    all_are_equal,
    get_or_fail,
    repeating_elements,
    require_all_are_distinct,
    require_all_are_distinct_by,
    require_all_are_equal,
    to_set_checking_distinct,
)
from collectkit._internal.exceptions import (
    CollectkitStateError,
    CollectkitValidationError,
    DuplicateElementError,
    MissingKeyError,
    UnequalElementsError,
    UnhashableElementError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

pytestmark = pytest.mark.unit


def _tracked(values: list[int], consumed: list[int]) -> Iterator[int]:
    for value in values:
        consumed.append(value)
        yield value


def test_repeating_elements_collects_each_repeat_once() -> None:
    assert repeating_elements([1, 2, 2, 3, 3, 3]) == {2, 3}


def test_repeating_elements_empty_and_unique_inputs() -> None:
    assert repeating_elements([]) == set()
    assert repeating_elements("abc") == set()


def test_repeating_elements_accepts_generators() -> None:
    assert repeating_elements(value % 3 for value in range(7)) == {0, 1, 2}


def test_to_set_checking_distinct_returns_elements() -> None:
    assert to_set_checking_distinct([1, 2, 3]) == {1, 2, 3}
    assert to_set_checking_distinct([]) == set()


def test_to_set_checking_distinct_names_repeating_element() -> None:
    with pytest.raises(DuplicateElementError) as excinfo:
        _ = to_set_checking_distinct([1, 2, 2])
    assert str(excinfo.value) == "Expected all elements to be distinct, but found repeating element: 2"
    assert excinfo.value.element == 2
    assert excinfo.value.key == 2


def test_to_set_checking_distinct_reports_first_repeat_in_order() -> None:
    with pytest.raises(DuplicateElementError) as excinfo:
        _ = to_set_checking_distinct(["a", "b", "b", "a"])
    assert excinfo.value.element == "b"


def test_to_set_checking_distinct_stops_at_first_repeat() -> None:
    consumed: list[int] = []
    with pytest.raises(DuplicateElementError):
        _ = to_set_checking_distinct(_tracked([1, 1, 2, 3], consumed))
    assert consumed == [1, 1]


def test_duplicate_errors_are_value_errors() -> None:
    with pytest.raises(ValueError, match="repeating element"):
        require_all_are_distinct([0, 0])
    assert issubclass(DuplicateElementError, CollectkitValidationError)


def test_all_are_distinct_trivial_inputs() -> None:
    assert all_are_distinct([])
    assert all_are_distinct([1])
    assert all_are_distinct([1, 2, 3])
    assert not all_are_distinct([1, 1])


def test_all_are_distinct_uses_default_equality() -> None:
    assert not all_are_distinct([1, 1.0])
    assert not all_are_distinct([None, None])
    assert all_are_distinct([(1, 2), (2, 1)])


def test_all_are_distinct_short_circuits() -> None:
    consumed: list[int] = []
    assert not all_are_distinct(_tracked([5, 6, 5, 7, 8], consumed))
    assert consumed == [5, 6, 5]


def test_all_are_distinct_rejects_unhashable_elements() -> None:
    with pytest.raises(UnhashableElementError, match="unhashable element") as excinfo:
        _ = all_are_distinct([[1], [1]])
    assert isinstance(excinfo.value, TypeError)
    assert excinfo.value.element == [1]


def test_require_all_are_distinct_accepts_distinct_input() -> None:
    assert require_all_are_distinct(["x", "y"]) is None


def test_all_are_distinct_by_compares_keys() -> None:
    assert all_are_distinct_by(["a", "bb", "ccc"], len)
    assert not all_are_distinct_by(["a", "b", "cc"], len)
    assert all_are_distinct_by([], len)


def test_all_are_distinct_by_short_circuits() -> None:
    consumed: list[int] = []
    calls: list[int] = []

    def parity(value: int) -> int:
        calls.append(value)
        return value % 2

    assert not all_are_distinct_by(_tracked([1, 2, 3, 4, 5], consumed), parity)
    assert consumed == [1, 2, 3]
    assert calls == [1, 2, 3]


def test_all_are_distinct_by_accepts_unhashable_elements_with_hashable_keys() -> None:
    records = [{"id": 1}, {"id": 2}, {"id": 1}]
    assert not all_are_distinct_by(records, lambda record: record["id"])
    assert all_are_distinct_by(records[:2], lambda record: record["id"])


def test_all_are_distinct_by_rejects_unhashable_keys() -> None:
    with pytest.raises(UnhashableElementError, match="unhashable key") as excinfo:
        _ = all_are_distinct_by(["ab"], list)
    assert excinfo.value.key == ["a", "b"]
    assert excinfo.value.element == "ab"


def test_require_all_are_distinct_by_names_key_and_element() -> None:
    with pytest.raises(DuplicateElementError) as excinfo:
        require_all_are_distinct_by(["a", "b", "cc"], len)
    assert str(excinfo.value) == (
        "Expected all elements to be distinct, but found repeating key: 1 (from element 'b')"
    )
    assert excinfo.value.key == 1
    assert excinfo.value.element == "b"


def test_require_all_are_distinct_by_accepts_distinct_keys() -> None:
    assert require_all_are_distinct_by(["a", "bb"], len) is None


def test_all_are_equal_cases() -> None:
    assert all_are_equal([])
    assert all_are_equal([5])
    assert all_are_equal([5, 5, 5])
    assert not all_are_equal([5, 5, 6])
    assert all_are_equal([[1], [1]])


def test_all_are_equal_short_circuits() -> None:
    compared: list[int] = []

    class Probe:
        def __init__(self, ident: int) -> None:
            self.ident = ident

        def __eq__(self, other: object) -> bool:
            assert isinstance(other, Probe)
            compared.append(other.ident)
            return other.ident < 2

        __hash__ = None  # type: ignore[assignment]

    assert not all_are_equal([Probe(0), Probe(1), Probe(2), Probe(3)])
    assert compared == [1, 2]


def test_require_all_are_equal_includes_collection() -> None:
    require_all_are_equal([])
    require_all_are_equal(("a", "a"))
    with pytest.raises(UnequalElementsError) as excinfo:
        require_all_are_equal([5, 5, 6])
    assert str(excinfo.value) == "Expected all elements in collection [5, 5, 6] to be equal"
    assert excinfo.value.elements == [5, 5, 6]


def test_get_or_fail_returns_present_value() -> None:
    assert get_or_fail({"x": 1}, "x") == 1
    assert get_or_fail({"x": None}, "x") is None


def test_get_or_fail_names_missing_key() -> None:
    with pytest.raises(MissingKeyError) as excinfo:
        _ = get_or_fail({"x": 1}, "y")
    assert str(excinfo.value) == "Missing expected key in map: 'y'"
    assert excinfo.value.key == "y"
    assert isinstance(excinfo.value, CollectkitStateError)
    assert isinstance(excinfo.value, RuntimeError)
    assert isinstance(excinfo.value, LookupError)


def test_get_or_fail_does_not_populate_defaultdict() -> None:
    counts: defaultdict[str, int] = defaultdict(int)
    with pytest.raises(MissingKeyError):
        _ = get_or_fail(counts, "missing")
    assert "missing" not in counts


def test_failures_emit_debug_records(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="collectkit.collections")
    caplog.set_level(logging.DEBUG, logger="collectkit.mappings")
    with pytest.raises(DuplicateElementError):
        require_all_are_distinct_by(["a", "b"], len)
    with pytest.raises(MissingKeyError):
        _ = get_or_fail({}, "k")
    records = [record for record in caplog.records if record.name.startswith("collectkit")]
    assert [record.levelno for record in records] == [logging.DEBUG, logging.DEBUG]
    assert getattr(records[0], "operation", None) == "require_all_are_distinct_by"
    assert getattr(records[0], "component", None) == "collections"
    assert getattr(records[1], "operation", None) == "get_or_fail"
    assert getattr(records[1], "component", None) == "mappings"


def test_successful_checks_do_not_log(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="collectkit")
    assert all_are_distinct([1, 2])
    assert get_or_fail({"a": 1}, "a") == 1
    assert not [record for record in caplog.records if record.name.startswith("collectkit")]
