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
"""Exception hierarchy for cachecompat.

All package exceptions inherit from CacheCompatException, so callers can
catch one type for every failure the adapter itself raises.

Categories:
- ValidationException: bad keys, values that cannot be serialized
- ConfigurationException: clients or settings the adapter cannot work with
- ClientErrorException: a callback-style client reported a non-exception error

Exceptions raised by the underlying cache client (connection refused,
timeouts, auth failures) are never wrapped and do not appear here.
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class CacheCompatException(Exception):
    """Base exception for all cachecompat errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CACHE_SERIALIZATION").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Validation Exceptions
# =============================================================================


class ValidationException(CacheCompatException):
    """Input validation failures."""


class InvalidKeyException(ValidationException):
    """Cache key is empty or not a string."""

    def __init__(self, key: object) -> None:
        super().__init__(
            f"Cache key must be a non-empty string, got {key!r}",
            code="CACHE_INVALID_KEY",
            context={"key": key},
        )


class SerializationException(ValidationException):
    """Value passed to ``set`` cannot be encoded as JSON."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            f"Value for key '{key}' is not JSON-serializable: {reason}",
            code="CACHE_SERIALIZATION",
            context={"key": key, "reason": reason},
        )


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(CacheCompatException):
    """Misconfiguration detected while building an adapter."""


class UnsupportedClientException(ConfigurationException):
    """The injected client does not match any supported API shape."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="CACHE_UNSUPPORTED_CLIENT", context=context)


# =============================================================================
# Client Exceptions
# =============================================================================


class ClientErrorException(CacheCompatException):
    """A callback-style client reported an error that is not an exception.

    Older clients pass plain strings or error codes as the callback error;
    the reported value is kept in ``context["error"]``.
    """

    def __init__(self, error: object) -> None:
        super().__init__(
            f"Cache client reported an error: {error!r}",
            code="CACHE_CLIENT_ERROR",
            context={"error": error},
        )
