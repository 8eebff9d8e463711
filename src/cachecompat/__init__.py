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
"""cachecompat: a uniform get/set/delete adapter over incompatible Redis client shapes."""

from cachecompat.cache import CacheStore, ClientShape, CompatibilityCacheAdapter
from cachecompat.config import CompatProperties, create_cache_adapter
from cachecompat.core import Config
from cachecompat.kernel import (
    CacheCompatException,
    InvalidKeyException,
    SerializationException,
    UnsupportedClientException,
)

__version__ = "0.1.0"

__all__ = [
    "CacheCompatException",
    "CacheStore",
    "ClientShape",
    "CompatProperties",
    "CompatibilityCacheAdapter",
    "Config",
    "InvalidKeyException",
    "SerializationException",
    "UnsupportedClientException",
    "create_cache_adapter",
]
