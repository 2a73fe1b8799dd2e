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


"""Unit tests for structured logging configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from enginfo.core.model_types import EngineRole, LogComponent, LogFormat
from enginfo.logging import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra

if TYPE_CHECKING:
    from _pytest.capture import CaptureFixture

pytestmark = pytest.mark.unit


def test_configure_logging_json_emits_structured_logs(capsys: CaptureFixture[str]) -> None:
    _ = configure_logging("json", log_level="debug")
    logger = logging.getLogger("enginfo.engines")
    logger.info(
        "probed",
        extra=structured_extra(
            LogComponent.ENGINE,
            engine=EngineRole.QUERY_ENGINE,
            env_var="ENGINFO_QUERY_ENGINE_BINARY",
            path=Path("/opt/custom/qe"),
            duration_ms=1.5,
            exit_code=0,
        ),
    )
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("broken")
    captured = capsys.readouterr()
    lines = [line for line in captured.err.strip().splitlines() if line]
    payload = json.loads(lines[-2])
    assert payload["message"] == "probed"
    assert payload["level"] == "info"
    assert payload["logger"] == "enginfo.engines"
    assert payload["component"] == "engine"
    assert payload["engine"] == "query-engine"
    assert payload["env_var"] == "ENGINFO_QUERY_ENGINE_BINARY"
    assert payload["path"] == str(Path("/opt/custom/qe"))
    assert payload["duration_ms"] == 1.5
    assert payload["exit_code"] == 0
    assert captured.out == ""

    exception_payload = json.loads(lines[-1])
    assert exception_payload["message"] == "broken"
    assert "exc_info" in exception_payload


def test_configure_logging_respects_level(capsys: CaptureFixture[str]) -> None:
    assert LOG_LEVELS == ("debug", "info", "warning", "error")
    assert LOG_FORMATS == ("text", "json")
    config = configure_logging("text", log_level="warning")
    assert config.format is LogFormat.TEXT
    assert config.level == logging.WARNING
    logger = logging.getLogger("enginfo")
    logger.info("ignored")
    logger.warning("recorded")
    captured = capsys.readouterr()
    assert "ignored" not in captured.err
    assert "[WARNING] recorded" in captured.err


def test_configure_logging_honors_env_overrides(
    capsys: CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ENGINFO_LOG_FORMAT", "json")
    monkeypatch.setenv("ENGINFO_LOG_LEVEL", "error")
    config = configure_logging()
    assert config.level_name == "error"
    logger = logging.getLogger("enginfo")
    logger.warning("warned")
    logger.error("failed", extra=structured_extra(LogComponent.CLI, exit_code=1))
    captured = capsys.readouterr()
    lines = [line for line in captured.err.splitlines() if line]
    assert json.loads(lines[-1])["message"] == "failed"
    assert all("warned" not in line for line in lines)


def test_configure_logging_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown log format"):
        _ = configure_logging("yaml")


def test_structured_extra_normalises_inputs(tmp_path: Path) -> None:
    extra = structured_extra(
        LogComponent.REPORT,
        engine="format-engine",
        path=tmp_path,
        exit_code="2",  # type: ignore[typeddict-item]
        details={"cwd": tmp_path},
    )
    assert extra["component"] is LogComponent.REPORT
    assert extra["engine"] is EngineRole.FORMAT_ENGINE
    assert extra["path"] == str(tmp_path)
    assert extra["exit_code"] == 2
    assert extra["details"] == {"cwd": tmp_path}


def test_structured_extra_drops_unknown_engines_and_empty_details() -> None:
    extra = structured_extra(LogComponent.CLI, engine="studio", details={})
    assert extra == {"component": LogComponent.CLI}
