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
"""Cache store and client dialect protocols."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from cachecompat.cache.shapes import ClientShape


@runtime_checkable
class CacheStore(Protocol):
    """Uniform cache interface exposed to callers.

    Values are any JSON-compatible Python object; ``ttl_millis`` is an
    expiry in milliseconds, ``None`` meaning the key never expires.
    """

    async def get(self, key: str) -> Any | None: ...

    async def set(self, key: str, value: Any, ttl_millis: int | None = None) -> Any: ...

    async def delete(self, key: str) -> Any: ...


@runtime_checkable
class ClientDialect(Protocol):
    """Routes already-serialized operations to one client shape."""

    shape: ClientShape
    legacy_namespace_active: bool

    async def get(self, key: str) -> Any: ...

    async def set(self, key: str, raw: str, ttl_millis: int | None) -> Any: ...

    async def delete(self, key: str) -> Any: ...
