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

"""Common exception hierarchy for enginfo."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from enginfo.core.model_types import EngineRole

__all__ = [
    "ArgumentError",
    "EngineError",
    "EngineNotFoundError",
    "EnginfoError",
    "EnginfoTypeError",
    "EnginfoValidationError",
    "ProbeError",
]


class EnginfoError(Exception):
    """Base error for all enginfo exceptions."""


class EnginfoValidationError(EnginfoError, ValueError):
    """Raised when input data fails validation checks."""


class EnginfoTypeError(EnginfoError, TypeError):
    """Raised when input data has an unexpected type."""


class ArgumentError(EnginfoValidationError):
    """Raised when command-line input cannot be parsed.

    The message is ready for display: the offending argument followed by the
    command usage text.
    """

    def __init__(self, error: str, usage: str) -> None:
        self.error = error
        self.usage = usage
        super().__init__(f"\n! {error}\n{usage}")


class EngineError(EnginfoError):
    """Base error for failures tied to a specific engine role."""

    def __init__(self, role: EngineRole, message: str) -> None:
        self.role = role
        super().__init__(message)


class EngineNotFoundError(EngineError):
    """Raised when no binary can be found for an engine role."""

    def __init__(self, role: EngineRole, searched: Sequence[Path | str]) -> None:
        self.searched = tuple(str(item) for item in searched)
        locations = ", ".join(self.searched) or "<nowhere>"
        super().__init__(role, f"No {role} binary found (searched: {locations})")


class ProbeError(EngineError):
    """Raised when an engine binary cannot report its version."""

    def __init__(self, role: EngineRole, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(role, f"Unable to read {role} version from {path}: {reason}")
