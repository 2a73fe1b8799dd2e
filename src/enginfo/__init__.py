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

"""enginfo - version report for native engine binaries.

Locates the binary behind each engine role (environment override first,
bundled default second), asks it for its version, and renders the result
together with client library, Studio, platform and preview feature details.
"""

from __future__ import annotations

__version__ = "0.3.0"

from enginfo.exceptions import (  # noqa: E402
    ArgumentError,
    EngineError,
    EngineNotFoundError,
    EnginfoError,
    EnginfoTypeError,
    EnginfoValidationError,
    ProbeError,
)

from .core import ENGINE_ROLES, EngineInfo, EngineRole, ReportRow  # noqa: E402
from .features import read_feature_flags  # noqa: E402
from .report import ReportMetadata, assemble_report, render_table  # noqa: E402

__all__ = [
    "ENGINE_ROLES",
    "ArgumentError",
    "EngineError",
    "EngineInfo",
    "EngineNotFoundError",
    "EngineRole",
    "EnginfoError",
    "EnginfoTypeError",
    "EnginfoValidationError",
    "ProbeError",
    "ReportMetadata",
    "ReportRow",
    "__version__",
    "assemble_report",
    "read_feature_flags",
    "render_table",
]
