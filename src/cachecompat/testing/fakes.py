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
"""In-memory cache clients mimicking each supported client API shape.

Usage::

    client = FakeModernClient(legacy_mode=True)
    adapter = CompatibilityCacheAdapter(client)
    await adapter.set("key", {"a": 1})
    assert client.store["key"] == '{"a":1}'
"""

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

Callback = Callable[..., None]


class _InMemoryStore:
    def __init__(self) -> None:
        self.store: dict[str, Any] = {}
        self.error: BaseException | None = None

    def fail_with(self, error: BaseException | None) -> None:
        """Make every subsequent operation fail with *error* (``None`` to heal)."""
        self.error = error

    def reset(self) -> None:
        self.store.clear()
        self.error = None


class FakeModernClient(_InMemoryStore):
    """Awaitable client with a ``connect`` marker, like redis v4+.

    With ``legacy_mode=True`` it also exposes ``options`` flagged for legacy
    mode and a ``v4`` namespace re-exposing ``get``/``set``/``delete``.
    """

    def __init__(self, legacy_mode: bool = False) -> None:
        super().__init__()
        self.options = {"legacy_mode": legacy_mode}
        self.v4 = SimpleNamespace(get=self.get, set=self.set, delete=self.delete)

    async def connect(self) -> None:
        pass

    async def get(self, key: str) -> str | None:
        if self.error is not None:
            raise self.error
        return self.store.get(key)

    async def set(self, key: str, value: str, px: int | None = None) -> str:
        if self.error is not None:
            raise self.error
        self.store[key] = value
        return "OK"

    async def delete(self, key: str) -> int:
        if self.error is not None:
            raise self.error
        return 1 if self.store.pop(key, None) is not None else 0


class FakePositionalClient(_InMemoryStore):
    """Awaitable client taking TTL positionally, like ioredis."""

    async def get(self, key: str) -> str | None:
        if self.error is not None:
            raise self.error
        return self.store.get(key)

    async def set(self, key: str, value: str, *ttl: Any) -> str:
        if self.error is not None:
            raise self.error
        self.store[key] = value
        return "OK"

    async def delete(self, key: str) -> int:
        if self.error is not None:
            raise self.error
        return 1 if self.store.pop(key, None) is not None else 0


class FakeLegacyCallbackClient(_InMemoryStore):
    """Callback-style client, like redis v3: results arrive via ``callback(error, result)``."""

    def get(self, key: str, callback: Callback) -> None:
        if self.error is not None:
            callback(self.error)
            return
        callback(None, self.store.get(key))

    def set(self, key: str, value: str, *args: Any) -> None:
        callback = args[-1]
        if self.error is not None:
            callback(self.error)
            return
        self.store[key] = value
        callback(None, "OK")

    def delete(self, key: str, callback: Callback) -> None:
        if self.error is not None:
            callback(self.error)
            return
        callback(None, 1 if self.store.pop(key, None) is not None else 0)
