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
"""Cache key validation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from flycache.kernel.exceptions import InvalidKeyException

INVALID_KEY_MESSAGE = "Cache keys must be non-empty strings."
INVALID_KEY_SET_MESSAGE = "A cache key set must be an iterable of keys."
INVALID_VALUES_MESSAGE = "Cache values must be a mapping of keys to values."


def validate_key(key: Any) -> None:
    """Raise InvalidKeyException unless *key* is a non-empty ``str``."""
    if not isinstance(key, str) or len(key) == 0:
        raise InvalidKeyException(INVALID_KEY_MESSAGE, key=key)


def validate_keys(keys: Any, *, check_each: bool = True) -> list[str]:
    """Validate a collection of keys and return it as a list.

    A bare string is rejected: iterating it would yield single characters.
    One-shot iterators are consumed, so callers must delegate the returned
    list rather than the original argument.
    """
    if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
        raise InvalidKeyException(INVALID_KEY_SET_MESSAGE, key=keys)
    materialized = list(keys)
    if check_each:
        for key in materialized:
            validate_key(key)
    return materialized


def validate_values(values: Any, *, check_each: bool = True) -> Mapping[str, Any]:
    """Validate a key/value mapping for a batch write."""
    if not isinstance(values, Mapping):
        raise InvalidKeyException(INVALID_VALUES_MESSAGE, key=values)
    if check_each:
        for key in values:
            validate_key(key)
    return values
