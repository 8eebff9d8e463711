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
"""Client API shape classification."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from cachecompat.config.properties import CompatProperties
from cachecompat.kernel.exceptions import UnsupportedClientException

REQUIRED_METHODS = ("get", "set", "delete")


class ClientShape(Enum):
    """Calling convention and capability set exposed by a cache client."""

    LEGACY_CALLBACK = "legacy_callback"
    MODERN_PROMISE = "modern_promise"
    POSITIONAL_PROMISE = "positional_promise"

    @classmethod
    def parse(cls, value: str | ClientShape) -> ClientShape:
        """Resolve a shape from its configured name."""
        if isinstance(value, ClientShape):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise UnsupportedClientException(
                f"Unknown client shape {value!r}. Must be 'auto' or one of: {choices}",
                context={"shape": value},
            ) from None


def ensure_supported(client: Any, methods: tuple[str, ...] = REQUIRED_METHODS) -> None:
    """Raise unless *client* exposes every method in *methods*."""
    missing = [name for name in methods if not callable(getattr(client, name, None))]
    if missing:
        raise UnsupportedClientException(
            f"{type(client).__name__} is missing cache method(s): {', '.join(missing)}",
            context={"client": type(client).__name__, "missing": missing},
        )


def detect_shape(client: Any, properties: CompatProperties) -> ClientShape:
    """Classify *client* by capability, or honour a configured override.

    Clients exposing the modern marker attribute (``connect`` by default)
    return awaitables; anything else is treated as callback-style.
    """
    if properties.shape != "auto":
        return ClientShape.parse(properties.shape)
    if hasattr(client, properties.modern_marker):
        return ClientShape.MODERN_PROMISE
    return ClientShape.LEGACY_CALLBACK


def legacy_namespace(client: Any, properties: CompatProperties) -> Any | None:
    """Return the legacy-compatible sub-namespace if the client has it switched on.

    The flag lives on ``client.options``, which may be a mapping or an object.
    A flagged client without the namespace attribute is rejected.
    """
    options = getattr(client, "options", None)
    if isinstance(options, Mapping):
        enabled = options.get(properties.legacy_flag, False)
    else:
        enabled = getattr(options, properties.legacy_flag, False)
    if not enabled:
        return None

    namespace = getattr(client, properties.legacy_namespace, None)
    if namespace is None:
        raise UnsupportedClientException(
            f"{type(client).__name__} has '{properties.legacy_flag}' set "
            f"but no '{properties.legacy_namespace}' namespace",
            context={"client": type(client).__name__},
        )
    ensure_supported(namespace, ("get", "set"))
    return namespace
