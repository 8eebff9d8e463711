# Copyright 2026 Firefly Software Solutions Inc.
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
"""Typed configuration property classes for the adapter and its logging."""

from __future__ import annotations

from dataclasses import dataclass, field

from cachecompat.core.config import config_properties


@config_properties(prefix="cachecompat.cache")
@dataclass
class CompatProperties:
    """Configuration for client shape detection (cachecompat.cache.*).

    ``shape`` is ``auto`` or one of the ``ClientShape`` values, matched
    case-insensitively. The remaining attribute names tell the detector
    where to look on the client handle.
    """

    shape: str = "auto"
    modern_marker: str = "connect"
    legacy_flag: str = "legacy_mode"
    legacy_namespace: str = "v4"
    redis_url: str = "redis://localhost:6379/0"

    def __post_init__(self) -> None:
        # Env overrides arrive as typed, e.g. "AUTO" or " Legacy_Callback".
        self.shape = str(self.shape).strip().lower()


@config_properties(prefix="cachecompat.logging")
@dataclass
class LoggingProperties:
    """Configuration for logging (cachecompat.logging.*)."""

    format: str = "console"
    level: dict | str = field(default_factory=lambda: {"root": "INFO"})
