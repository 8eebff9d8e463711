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
"""Cache adapter that hides which Redis client API shape is in use."""

from __future__ import annotations

import logging
from typing import Any

from cachecompat.cache.dialects import (
    LegacyCallbackDialect,
    ModernPromiseDialect,
    PositionalPromiseDialect,
)
from cachecompat.cache.ports.outbound import ClientDialect
from cachecompat.cache.serialization import deserialize, serialize
from cachecompat.cache.shapes import ClientShape, detect_shape, ensure_supported, legacy_namespace
from cachecompat.config.properties import CompatProperties
from cachecompat.kernel.exceptions import InvalidKeyException

_logger = logging.getLogger(__name__)


def _build_dialect(client: Any, shape: ClientShape, properties: CompatProperties) -> ClientDialect:
    if shape is ClientShape.LEGACY_CALLBACK:
        return LegacyCallbackDialect(client)
    if shape is ClientShape.POSITIONAL_PROMISE:
        return PositionalPromiseDialect(client)
    return ModernPromiseDialect(client, namespace=legacy_namespace(client, properties))


def _check_key(key: Any) -> None:
    if not isinstance(key, str) or not key:
        raise InvalidKeyException(key)


class CompatibilityCacheAdapter:
    """Uniform ``get``/``set``/``delete`` over callback-style and awaitable clients.

    The client's shape is classified once, when the adapter is built, and the
    matching dialect is kept for the adapter's lifetime. Later changes to the
    client's attributes do not alter routing.

    Values are stored as compact JSON strings. ``get`` returns the decoded
    value, the raw value when it is not JSON (data written by other
    systems), or ``None`` for a missing key.

    The adapter does not own the client: it never connects, closes, or
    retries. Errors raised by the client propagate unchanged.

    Args:
        client: A connected cache client handle.
        properties: Detection settings; defaults apply when omitted.
        shape: Explicit shape, overriding detection and ``properties.shape``.
    """

    def __init__(
        self,
        client: Any,
        properties: CompatProperties | None = None,
        shape: ClientShape | str | None = None,
    ) -> None:
        props = properties or CompatProperties()
        ensure_supported(client)
        resolved = ClientShape.parse(shape) if shape is not None else detect_shape(client, props)

        self._client = client
        self._dialect = _build_dialect(client, resolved, props)

        _logger.info(
            "Cache adapter using %s client shape for %s%s",
            resolved.value,
            type(client).__name__,
            " (legacy namespace)" if self.legacy_namespace_active else "",
        )

    @property
    def shape(self) -> ClientShape:
        """The client shape detected at construction."""
        return self._dialect.shape

    @property
    def legacy_namespace_active(self) -> bool:
        """Whether reads and writes go through the client's legacy-compatible namespace."""
        return self._dialect.legacy_namespace_active

    async def get(self, key: str) -> Any | None:
        """Fetch and decode a value. Returns ``None`` on a miss."""
        _check_key(key)
        raw = await self._dialect.get(key)
        return deserialize(key, raw)

    async def set(self, key: str, value: Any, ttl_millis: int | None = None) -> Any:
        """Encode and store a value, expiring after *ttl_millis* when given.

        Raises:
            SerializationException: *value* is not JSON-serializable. The
                client is not called.
        """
        _check_key(key)
        raw = serialize(key, value)
        return await self._dialect.set(key, raw, ttl_millis)

    async def delete(self, key: str) -> Any:
        """Remove a key. Removing a missing key is not an error."""
        _check_key(key)
        return await self._dialect.delete(key)
