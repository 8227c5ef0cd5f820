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

"""JSON value shapes and normalisation used by collectkit's JSON log output.

This module intentionally has no dependencies on logging or the collection
helpers to keep the dependency graph acyclic.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias, cast

from pydantic import JsonValue

__all__ = [
    "JSONMapping",
    "JSONValue",
    "normalize_enums_for_json",
]

JSONValue: TypeAlias = JsonValue
JSONMapping = dict[str, JsonValue]


def normalize_enums_for_json(value: object) -> JSONValue:
    """Recursively convert a payload into JSON-compatible primitives.

    Enum keys and values are replaced by their `.value` payloads, tuples and
    sets become lists, and any other non-primitive object is rendered with
    `repr` so log records never fail to serialise.

    Args:
        value: Arbitrary Python object hierarchy.

    Returns:
        A structure built from `dict`/`list`/primitives only.
    """

    def _convert(obj: object) -> JSONValue:
        if isinstance(obj, Enum):
            return cast("JSONValue", obj.value)
        if isinstance(obj, dict):
            mapping_obj = cast("dict[object, object]", obj)
            result: dict[str, JSONValue] = {}
            for key, raw_val in mapping_obj.items():
                if isinstance(key, Enum):
                    norm_key: str = str(key.value)
                elif isinstance(key, str):
                    norm_key = key
                else:
                    norm_key = repr(key)
                result[norm_key] = _convert(raw_val)
            return cast("JSONValue", result)
        if isinstance(obj, (list, tuple)):
            items = cast("list[object] | tuple[object, ...]", obj)
            return cast("JSONValue", [_convert(item) for item in items])
        if isinstance(obj, (set, frozenset)):
            members = cast("set[object] | frozenset[object]", obj)
            return cast("JSONValue", sorted((_convert(item) for item in members), key=repr))
        if isinstance(obj, (str, int, float, bool)) or obj is None:
            return cast("JSONValue", obj)
        return cast("JSONValue", repr(obj))

    return _convert(value)
