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

"""JSON value shapes and helpers shared by logging and report rendering.

This module has no dependencies on logging, configuration, or CLI layers so
that every other layer can import it.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Union, cast

__all__ = ["JSONMapping", "JSONValue", "normalise_for_json"]

JSONValue = Union[str, int, float, bool, dict[str, "JSONValue"], list["JSONValue"], None]
JSONMapping = dict[str, JSONValue]


def normalise_for_json(value: object) -> JSONValue:
    """Recursively convert enums and paths into JSON-compatible payloads.

    Args:
        value: Arbitrary structure that may contain ``Enum`` members, path-like
            objects, mappings, or sequences.

    Returns:
        A structure built only from ``dict``/``list``/primitives. Enum keys and
        values are replaced by their ``.value``; paths become strings.
    """
    if isinstance(value, Enum):
        return cast("JSONValue", value.value)
    if isinstance(value, os.PathLike):
        return os.fspath(cast("os.PathLike[str]", value))
    if isinstance(value, dict):
        result: JSONMapping = {}
        for key, item in cast("dict[object, object]", value).items():
            norm_key = str(key.value) if isinstance(key, Enum) else str(key)
            result[norm_key] = normalise_for_json(item)
        return result
    if isinstance(value, (list, tuple)):
        return [normalise_for_json(item) for item in cast("list[object]", value)]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)
