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

"""Argument parser helpers used across CLI commands."""

from __future__ import annotations

import argparse
from typing import Any, NoReturn, Protocol

from enginfo._internal.exceptions import ArgumentError
from enginfo.compat import override
from enginfo.runtime import consume


class ArgumentRegistrar(Protocol):
    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action: ...  # pragma: no cover - stub


def register_argument(
    registrar: ArgumentRegistrar,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Register an argument on a parser/argument group, discarding the action handle."""
    consume(registrar.add_argument(*args, **kwargs))


class RaisingArgumentParser(argparse.ArgumentParser):
    """Parser that raises ``ArgumentError`` instead of printing and exiting.

    The command decides how the error is shown and which exit code follows.
    """

    def __init__(self, *args: Any, usage_text: str, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.usage_text = usage_text

    @override
    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message, self.usage_text)


__all__ = ["ArgumentRegistrar", "RaisingArgumentParser", "register_argument"]
