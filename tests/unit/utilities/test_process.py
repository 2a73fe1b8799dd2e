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


"""Unit tests for the subprocess wrapper."""

from __future__ import annotations

import subprocess
import sys
from typing import TYPE_CHECKING

import pytest

from enginfo.runtime import run_command

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit


def test_run_command_captures_output(tmp_path: Path) -> None:
    result = run_command(
        [sys.executable, "-c", "import sys; print('engine 1.0.0'); print('warn', file=sys.stderr)"],
        cwd=tmp_path,
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "engine 1.0.0"
    assert result.stderr.strip() == "warn"
    assert result.args[0] == sys.executable
    assert result.duration_ms >= 0


def test_run_command_reports_non_zero_exit() -> None:
    result = run_command([sys.executable, "-c", "raise SystemExit(3)"])
    assert result.exit_code == 3


def test_run_command_never_uses_shell(monkeypatch: pytest.MonkeyPatch) -> None:
    recorded: dict[str, object] = {}

    def _fake_run(args: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        recorded["args"] = args
        recorded.update(kwargs)
        return subprocess.CompletedProcess(args, 0, stdout="x 1\n", stderr="")

    monkeypatch.setattr(subprocess, "run", _fake_run)
    result = run_command(["engine", "--version"])
    assert result.stdout == "x 1\n"
    assert recorded["args"] == ["engine", "--version"]
    assert recorded.get("shell", False) is False
    assert recorded["check"] is False


def test_run_command_rejects_empty_argv() -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        _ = run_command([])
    with pytest.raises(TypeError):
        _ = run_command(["engine", ""])


def test_run_command_propagates_missing_executable(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        _ = run_command([str(tmp_path / "missing-engine"), "--version"])


def test_run_command_replaces_undecodable_bytes(tmp_path: Path) -> None:
    result = run_command(
        [sys.executable, "-c", "import sys; sys.stdout.buffer.write(b'engine \\xff\\xfe 1.0\\n')"],
        cwd=tmp_path,
    )
    assert result.exit_code == 0
    assert result.stdout == "engine \ufffd\ufffd 1.0\n"
