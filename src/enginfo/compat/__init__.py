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

"""Public compatibility interface for enginfo.

Modules that need version-tolerant behaviour import these symbols through this
package instead of branching on the interpreter version:

- tomllib: Stdlib TOML parser (with a fallback to `tomli`)
- UTC: A unified timezone instance for UTC
- StrEnum: A consistent base class for string-valued enums
- Typing helpers: Self, TypedDict, Unpack, override, etc.
"""

from __future__ import annotations

from .datetime import UTC
from .enums import StrEnum
from .toml import tomllib
from .typing import (
    NotRequired,
    Self,
    TypedDict,
    Unpack,
    assert_never,
    override,
)

__all__ = [
    "UTC",
    "NotRequired",
    "Self",
    "StrEnum",
    "TypedDict",
    "Unpack",
    "assert_never",
    "override",
    "tomllib",
]
