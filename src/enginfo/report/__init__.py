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

"""Version report assembly and rendering."""

from __future__ import annotations

from .assembler import (
    NOT_FOUND,
    assemble_report,
    collect_engine_infos,
    display_path,
    format_engine_info,
    resolve_engine,
)
from .metadata import ReportMetadata, installed_version
from .render import render_table, slugify

__all__ = [
    "NOT_FOUND",
    "ReportMetadata",
    "assemble_report",
    "collect_engine_infos",
    "display_path",
    "format_engine_info",
    "installed_version",
    "render_table",
    "resolve_engine",
    "slugify",
]
