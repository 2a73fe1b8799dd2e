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

"""Typing backports used across enginfo.

Constructs introduced after Python 3.10 are imported from the standard library
when available, and from `typing_extensions` otherwise, so callers never write
version checks themselves.

Notes:
    - Under `TYPE_CHECKING` every name comes from `typing_extensions` so type
      checkers see one consistent API when targeting Python 3.10.
    - At runtime the stdlib implementation wins whenever it exists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing_extensions import (
        NotRequired,
        Self,
        TypedDict,
        Unpack,
        assert_never,
        override,
    )
else:
    try:
        from typing import TypedDict, override  # py>=3.12
    except ImportError:
        from typing_extensions import TypedDict, override

    try:
        from typing import (  # py>=3.11
            NotRequired,
            Self,
            Unpack,
            assert_never,
        )
    except ImportError:  # py<3.11
        from typing_extensions import (  # type: ignore[assignment]
            NotRequired,
            Self,
            Unpack,
            assert_never,
        )

__all__ = [
    "NotRequired",
    "Self",
    "TypedDict",
    "Unpack",
    "assert_never",
    "override",
]
