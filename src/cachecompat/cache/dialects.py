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
"""Per-shape call routing and TTL encoding.

One dialect is chosen when an adapter is built. Each dialect receives the
already-serialized value and forwards it with the TTL convention its client
expects, so the adapter never branches on shape per call.
"""

from __future__ import annotations

from typing import Any

from cachecompat.cache.bridge import promisify
from cachecompat.cache.shapes import ClientShape

# Positional expiry marker meaning "TTL in milliseconds".
EXPIRY_MILLIS = "PX"


class LegacyCallbackDialect:
    """Callback-style client, bridged to awaitables once at construction.

    TTL travels positionally as ``"PX", ttl_millis``. Both slots are always
    sent, the second being ``None`` when no TTL was requested.
    """

    shape = ClientShape.LEGACY_CALLBACK
    legacy_namespace_active = False

    def __init__(self, client: Any) -> None:
        self._get = promisify(client.get)
        self._set = promisify(client.set)
        self._delete = promisify(client.delete)

    async def get(self, key: str) -> Any:
        return await self._get(key)

    async def set(self, key: str, raw: str, ttl_millis: int | None) -> Any:
        return await self._set(key, raw, EXPIRY_MILLIS, ttl_millis)

    async def delete(self, key: str) -> Any:
        return await self._delete(key)


class ModernPromiseDialect:
    """Awaitable client taking TTL as a ``px`` keyword option.

    When the client runs in legacy-compatible mode, reads and writes go
    through its sub-namespace instead. Deletes always use the top level.
    """

    shape = ClientShape.MODERN_PROMISE

    def __init__(self, client: Any, namespace: Any | None = None) -> None:
        self._client = client
        self._namespace = namespace
        self._target = namespace if namespace is not None else client

    @property
    def legacy_namespace_active(self) -> bool:
        return self._namespace is not None

    async def get(self, key: str) -> Any:
        return await self._target.get(key)

    async def set(self, key: str, raw: str, ttl_millis: int | None) -> Any:
        options: dict[str, Any] = {}
        if ttl_millis:
            options["px"] = ttl_millis
        return await self._target.set(key, raw, **options)

    async def delete(self, key: str) -> Any:
        return await self._client.delete(key)


class PositionalPromiseDialect:
    """Awaitable client that still takes TTL positionally (``"PX", ttl_millis``)."""

    shape = ClientShape.POSITIONAL_PROMISE
    legacy_namespace_active = False

    def __init__(self, client: Any) -> None:
        self._client = client

    async def get(self, key: str) -> Any:
        return await self._client.get(key)

    async def set(self, key: str, raw: str, ttl_millis: int | None) -> Any:
        return await self._client.set(key, raw, EXPIRY_MILLIS, ttl_millis)

    async def delete(self, key: str) -> Any:
        return await self._client.delete(key)
