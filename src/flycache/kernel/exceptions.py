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
"""Exception hierarchy for FlyCache.

All library exceptions inherit from FlyCacheException so callers can catch
the whole family with one handler. Engine failures are never wrapped by the
facade; CacheEngineException is offered to engine implementers who want a
typed error of their own.

Categories:
- BusinessException: caller mistakes such as malformed cache keys
- InfrastructureException: failures raised by cache engines
"""

from __future__ import annotations

from typing import Any


class FlyCacheException(Exception):
    """Base exception for all FlyCache errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CACHE_INVALID_KEY").
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
# Business Exceptions
# =============================================================================


class BusinessException(FlyCacheException):
    """Contract violations by the caller."""


class ValidationException(BusinessException):
    """Input validation failures."""


class InvalidKeyException(ValidationException):
    """A cache key, or a collection of cache keys, is not legal.

    Raised before the wrapped engine is touched.
    """

    def __init__(self, message: str, key: Any = None) -> None:
        super().__init__(message, code="CACHE_INVALID_KEY", context={"key": repr(key)})
        self.key = key


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(FlyCacheException):
    """Storage, serialization and network failures."""


class CacheEngineException(InfrastructureException):
    """A cache engine could not complete an operation."""
