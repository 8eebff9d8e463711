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
"""Adapter settings: one YAML/TOML file, profile overlays, env overrides.

A settings file looks like::

    cachecompat:
      cache:
        shape: auto
        redis_url: redis://${REDIS_HOST:localhost}:6379/0
      logging:
        format: json

Any leaf can be overridden from the environment by upper-casing its path,
e.g. ``CACHECOMPAT_CACHE_SHAPE=legacy_callback``.
"""

from __future__ import annotations

import dataclasses
import os
import re
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, get_type_hints

import yaml  # type: ignore[import-untyped]

T = TypeVar("T")

ENV_PREFIX = "CACHECOMPAT_"

_ENV_REF_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}")

_CONFIG_PROPERTIES_ATTR = "__cachecompat_config_prefix__"


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass as bindable to a settings prefix.

    Usage:
        @config_properties(prefix="cachecompat.cache")
        @dataclass
        class CompatProperties:
            shape: str = "auto"
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


def env_key(key: str) -> str:
    """Environment variable overriding *key*: ``cachecompat.cache.shape`` -> ``CACHECOMPAT_CACHE_SHAPE``."""
    path = key.removeprefix("cachecompat.")
    return ENV_PREFIX + path.upper().replace(".", "_").replace("-", "_")


def _expand_env(value: str) -> str:
    """Substitute ``${VAR}`` and ``${VAR:default}`` from the environment."""

    def _sub(match: re.Match[str]) -> str:
        name, default = match.group(1), match.group(2)
        resolved = os.environ.get(name, default)
        if resolved is None:
            raise ValueError(f"Environment variable '{name}' is not set and '{value}' gives no default")
        return resolved

    return _ENV_REF_RE.sub(_sub, value)


def _merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        merged[key] = _merge(current, value) if isinstance(current, dict) and isinstance(value, dict) else value
    return merged


def _read(path: Path) -> dict[str, Any]:
    if path.suffix == ".toml":
        with open(path, "rb") as f:
            data = tomllib.load(f)
    else:
        with open(path) as f:
            data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping, got {type(data).__name__}")
    return data


def _coerce(value: Any, expected: Any) -> Any:
    # Env overrides are always strings.
    if not isinstance(value, str):
        return value
    if expected is int:
        return int(value)
    if expected is float:
        return float(value)
    if expected is bool:
        return value.lower() in ("true", "1", "yes")
    return value


class Config:
    """Nested settings with dot-notation lookup.

    Priority (highest wins):
    1. Environment variables (``CACHECOMPAT_SECTION_KEY``)
    2. Settings dict / file values
    3. Dataclass defaults
    """

    def __init__(self, data: dict[str, Any] | None = None, sources: list[str] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._sources: list[str] = sources or []

    @property
    def loaded_sources(self) -> list[str]:
        """Files that were read, in merge order."""
        return list(self._sources)

    @classmethod
    def from_file(cls, path: str | Path, active_profiles: list[str] | None = None) -> Config:
        """Read *path* and merge ``<stem>-<profile><suffix>`` overlays on top.

        A missing base file gives empty settings; missing overlays are skipped.
        """
        path = Path(path)
        if not path.exists():
            return cls()

        data = _read(path)
        sources = [str(path)]
        for profile in active_profiles or []:
            overlay = path.with_name(f"{path.stem}-{profile}{path.suffix}")
            if overlay.exists():
                data = _merge(data, _read(overlay))
                sources.append(f"{overlay} (profile: {profile})")
        return cls(data, sources)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dot-notation *key*, env override first.

        String values have ``${VAR}`` / ``${VAR:default}`` expanded.
        """
        override = os.environ.get(env_key(key))
        if override is not None:
            return override

        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]

        if isinstance(node, str) and "${" in node:
            return _expand_env(node)
        return node

    def bind(self, config_cls: type[T]) -> T:
        """Build a @config_properties dataclass from settings under its prefix.

        Fields absent from the settings keep their dataclass defaults.
        """
        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        hints = get_type_hints(config_cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(config_cls):  # type: ignore[arg-type]
            value = self.get(f"{prefix}.{field.name}")
            if value is not None:
                kwargs[field.name] = _coerce(value, hints.get(field.name))
        return config_cls(**kwargs)
