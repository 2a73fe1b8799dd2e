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

"""Engine location and version probing."""

from __future__ import annotations

from .locator import locate_engine, override_variable
from .platform import detect_platform
from .prober import probe_version
from .resolver import ENGINES_VERSION, BundledEngineResolver, EngineResolver
from .roles import ENGINE_BINARY_NAMES, ENGINE_ENV_VARS, ENGINE_LABELS

__all__ = [
    "ENGINES_VERSION",
    "ENGINE_BINARY_NAMES",
    "ENGINE_ENV_VARS",
    "ENGINE_LABELS",
    "BundledEngineResolver",
    "EngineResolver",
    "detect_platform",
    "locate_engine",
    "override_variable",
    "probe_version",
]
