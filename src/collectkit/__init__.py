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

"""collectkit - generic collection helpers.

Distinctness checks, duplicate detection, equality checks and fail-fast
mapping lookup over arbitrary element and key types.
"""

from __future__ import annotations

from collectkit._internal.error_codes import ErrorCode, error_code_catalog, error_code_for
from collectkit._internal.logging_utils import LogConfig, configure_logging

from .collections import (
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
from .exceptions import (
    CollectkitError,
    CollectkitStateError,
    CollectkitTypeError,
    CollectkitValidationError,
    DuplicateElementError,
    MissingKeyError,
    UnequalElementsError,
    UnhashableElementError,
)

__version__ = "0.1.0"

__all__ = [
    "CollectkitError",
    "CollectkitStateError",
    "CollectkitTypeError",
    "CollectkitValidationError",
    "DuplicateElementError",
    "ErrorCode",
    "LogConfig",
    "MissingKeyError",
    "UnequalElementsError",
    "UnhashableElementError",
    "__version__",
    "all_are_distinct",
    "all_are_distinct_by",
    "all_are_equal",
    "configure_logging",
    "error_code_catalog",
    "error_code_for",
    "get_or_fail",
    "repeating_elements",
    "require_all_are_distinct",
    "require_all_are_distinct_by",
    "require_all_are_equal",
    "to_set_checking_distinct",
]
