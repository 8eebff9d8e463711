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
"""JSON encoding of stored values."""

from __future__ import annotations

import json
import logging
from typing import Any

from cachecompat.kernel.exceptions import SerializationException

_logger = logging.getLogger(__name__)

# Compact separators match what other writers sharing the store produce.
_SEPARATORS = (",", ":")


def serialize(key: str, value: Any) -> str:
    """Encode *value* as a JSON string.

    Raises:
        SerializationException: *value* holds a cycle, a type JSON cannot
            encode, or a NaN/Infinity float.
    """
    try:
        return json.dumps(value, separators=_SEPARATORS, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        _logger.warning("Refusing to cache non-JSON value for key '%s': %s", key, exc)
        raise SerializationException(key, str(exc)) from exc


def deserialize(key: str, raw: Any) -> Any:
    """Decode *raw* as JSON, returning it unchanged when it is not JSON.

    A miss (``None``) falls through the same path and comes back as ``None``.
    """
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError):
        if raw is not None:
            _logger.debug("Value for key '%s' is not JSON, returning raw", key)
        return raw
