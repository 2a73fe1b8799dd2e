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

"""Version token extraction from ``--version`` style output."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = ["version_from_output"]


def version_from_output(output: str, *, skip_names: Iterable[str] = ()) -> str | None:
    """Return the first version-like token found in ``output``.

    Engines answer a version query with ``"<binary-name> <version>"``; a leading
    token matching one of ``skip_names`` is ignored so a binary name such as
    ``schema-fmt-2`` is never mistaken for a version. A token qualifies when it
    contains at least one digit; commit hashes are accepted as versions.

    Args:
        output: Raw stdout or stderr of the version query.
        skip_names: Names the binary may print before its version.

    Returns:
        The version token, or ``None`` when nothing qualifies.
    """
    text = (output or "").strip()
    if not text:
        return None
    tokens = text.replace("(", " ").replace(")", " ").split()
    skipped = {name.lower() for name in skip_names}
    if tokens and tokens[0].lower() in skipped:
        tokens = tokens[1:]
    for token in tokens:
        if any(ch.isdigit() for ch in token):
            return token.strip(",;")
    return None
