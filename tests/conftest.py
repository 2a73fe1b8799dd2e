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

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from enginfo._internal.exceptions import EngineNotFoundError  # noqa: E402
from enginfo._internal.logging_utils import CHILD_LOGGERS, ROOT_LOGGER_NAME  # noqa: E402
from enginfo.engines import prober  # noqa: E402
from enginfo.engines.roles import ENGINE_ENV_VARS  # noqa: E402
from enginfo.runtime import CommandOutput  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from enginfo.core.model_types import EngineRole


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line(
        "markers",
        "integration: Integration tests (slower, multiple components)",
    )
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")
    config.addinivalue_line("markers", "engine: Engine-related tests")
    config.addinivalue_line("markers", "config: Configuration tests")


@pytest.fixture(autouse=True)
def _reset_enginfo_logging() -> Iterator[None]:
    """Undo ``configure_logging`` so handlers never outlive a captured stream."""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True
    for name in CHILD_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def _clear_override_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own engine overrides out of the tests."""
    for variable in ENGINE_ENV_VARS.values():
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.delenv("ENGINFO_CONFIG", raising=False)
    monkeypatch.delenv("ENGINFO_LOG_FORMAT", raising=False)
    monkeypatch.delenv("ENGINFO_LOG_LEVEL", raising=False)


class FakeResolver:
    """Resolver returning fixed default paths and recording every lookup."""

    def __init__(self, paths: Mapping[EngineRole, Path]) -> None:
        super().__init__()
        self.paths = dict(paths)
        self.calls: list[EngineRole] = []

    async def resolve(self, role: EngineRole) -> Path:
        self.calls.append(role)
        try:
            return self.paths[role]
        except KeyError:
            raise EngineNotFoundError(role, ["<fake>"]) from None


@pytest.fixture
def fake_resolver() -> Callable[[Mapping[EngineRole, Path]], FakeResolver]:
    return FakeResolver


@pytest.fixture
def fake_engines(monkeypatch: pytest.MonkeyPatch) -> Callable[..., list[list[str]]]:
    """Patch the prober's process runner with canned ``--version`` answers.

    The returned installer maps a binary path (as a string) to the stdout it
    prints; the list it returns records every argv that was run.
    """

    def install(outputs: Mapping[str, str], *, exit_codes: Mapping[str, int] | None = None) -> list[list[str]]:
        calls: list[list[str]] = []
        codes = dict(exit_codes or {})

        def _run(args: Iterable[str], cwd: Path | None = None) -> CommandOutput:
            _ = cwd
            argv = list(args)
            calls.append(argv)
            binary = argv[0]
            if binary not in outputs:
                raise FileNotFoundError(2, "No such file or directory", binary)
            return CommandOutput(
                args=argv,
                stdout=outputs[binary],
                stderr="",
                exit_code=codes.get(binary, 0),
                duration_ms=0.1,
            )

        monkeypatch.setattr(prober, "run_command", _run)
        return calls

    return install
