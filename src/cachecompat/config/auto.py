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
"""Build a cache adapter from configuration, with provider detection."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any

import structlog

from cachecompat.config.properties import CompatProperties
from cachecompat.kernel.exceptions import UnsupportedClientException

if TYPE_CHECKING:
    from cachecompat.cache.adapters.compat import CompatibilityCacheAdapter
    from cachecompat.core.config import Config

logger = structlog.get_logger("cachecompat.config.auto")


class AutoConfiguration:
    """Detect available infrastructure providers by checking importable packages."""

    @staticmethod
    def is_available(module_name: str) -> bool:
        """Check if a Python package is importable."""
        try:
            importlib.import_module(module_name)
            return True
        except ImportError:
            return False


def create_cache_adapter(config: Config, client: Any | None = None) -> CompatibilityCacheAdapter:
    """Create an adapter from ``cachecompat.cache.*`` settings.

    With *client* given, it is wrapped as-is and its shape detected (or
    taken from ``cachecompat.cache.shape``). Without one, a
    ``redis.asyncio`` client is created from ``redis_url``. redis-py has no
    ``connect`` marker, so that client is always treated as modern unless
    the configuration names another shape.

    Raises:
        UnsupportedClientException: No client was given and redis is not installed.
    """
    from cachecompat.cache.adapters.compat import CompatibilityCacheAdapter
    from cachecompat.cache.shapes import ClientShape

    props = config.bind(CompatProperties)

    if client is not None:
        logger.info("cache_adapter_configured", provider="injected", shape=props.shape)
        return CompatibilityCacheAdapter(client, properties=props)

    if not AutoConfiguration.is_available("redis.asyncio"):
        raise UnsupportedClientException(
            "No cache client given and redis is not installed. Install cachecompat[redis] or pass a client.",
            context={"redis_url": props.redis_url},
        )

    import redis.asyncio as aioredis

    redis_client = aioredis.from_url(props.redis_url)
    shape = ClientShape.MODERN_PROMISE if props.shape == "auto" else props.shape
    logger.info("cache_adapter_configured", provider="redis", url=props.redis_url, shape=getattr(shape, "value", shape))
    return CompatibilityCacheAdapter(redis_client, properties=props, shape=shape)
