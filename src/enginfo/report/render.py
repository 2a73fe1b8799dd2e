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

"""Render report rows as an aligned text table or a JSON object."""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Sequence

    from enginfo.core.types import ReportRow

__all__ = ["SEPARATOR", "render_table", "slugify"]

SEPARATOR: Final[str] = " : "
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")


def slugify(text: str) -> str:
    """Lowercase ``text`` and collapse each whitespace run into a single hyphen."""
    return _WHITESPACE_RE.sub("-", str(text).lower())


def render_table(rows: Sequence[ReportRow], *, as_json: bool = False) -> str:
    """Render ``rows`` for display.

    Text mode pads every label to the longest label in ``rows`` and joins label
    and value with ``" : "``, one row per line, without a trailing newline.
    JSON mode keys each value by the slugified label; a later row wins when two
    labels slugify to the same key.
    """
    if as_json:
        payload: dict[str, str] = {}
        for row in rows:
            payload[slugify(row.label)] = row.value
        return json.dumps(payload, indent=2, ensure_ascii=False)
    width = max((len(row.label) for row in rows), default=0)
    return "\n".join(f"{row.label.ljust(width)}{SEPARATOR}{row.value}" for row in rows)
