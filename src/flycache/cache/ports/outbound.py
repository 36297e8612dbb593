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
"""Cache ports: the engine contract consumed and the simple-cache contract exposed."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from flycache.cache.types import TTL, Key, KeyIterable, ValueMapping


@runtime_checkable
class CacheEngine(Protocol):
    """Contract of a wrapped cache engine.

    ``read`` and ``read_many`` signal absent keys with
    :data:`flycache.cache.types.MISS`. ``get_config``/``set_config`` expose the
    engine's mutable settings, including its default duration.
    """

    def read(self, key: Key) -> Any: ...

    def write(self, key: Key, value: Any) -> bool: ...

    def delete(self, key: Key) -> bool: ...

    def clear(self, only_expired: bool) -> bool: ...

    def read_many(self, keys: KeyIterable) -> Mapping[Key, Any]: ...

    def write_many(self, values: ValueMapping) -> bool: ...

    def delete_many(self, keys: KeyIterable) -> Mapping[Key, bool]: ...

    def get_config(self, name: str) -> Any: ...

    def set_config(self, name: str, value: Any) -> None: ...


@runtime_checkable
class SimpleCache(Protocol):
    """Standardized key-value cache interface.

    Caller code should depend on this protocol only.
    """

    def get(self, key: Key, default: Any = None) -> Any: ...

    def set(self, key: Key, value: Any, ttl: TTL = None) -> bool: ...

    def delete(self, key: Key) -> bool: ...

    def clear(self) -> bool: ...

    def get_multiple(self, keys: KeyIterable, default: Any = None) -> dict[Key, Any]: ...

    def set_multiple(self, values: ValueMapping, ttl: TTL = None) -> bool: ...

    def delete_multiple(self, keys: KeyIterable) -> bool: ...

    def has(self, key: Key) -> bool: ...
