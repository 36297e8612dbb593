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
"""Engine doubles shared by the cache tests."""

from __future__ import annotations

import time
from typing import Any
from unittest.mock import MagicMock

import pytest

from flycache.cache.engine import BaseCacheEngine
from flycache.cache.ports.outbound import CacheEngine
from flycache.cache.types import MISS


class DictEngine(BaseCacheEngine):
    """Dict-backed engine that records the duration seen by every write."""

    def __init__(self, **config: Any) -> None:
        super().__init__(**config)
        self.store: dict[str, tuple[Any, float | None]] = {}
        self.write_durations: list[Any] = []
        self.clear_calls: list[bool] = []
        self.fail_writes = False

    def read(self, key: str) -> Any:
        entry = self.store.get(key)
        if entry is None:
            return MISS
        value, expires_at = entry
        if expires_at is not None and time.monotonic() >= expires_at:
            del self.store[key]
            return MISS
        return value

    def write(self, key: str, value: Any) -> bool:
        self.write_durations.append(self.get_config(self.duration_key))
        if self.fail_writes:
            raise OSError("disk full")
        seconds = self.duration_seconds()
        expires_at = time.monotonic() + seconds if seconds > 0 else time.monotonic()
        self.store[key] = (value, expires_at)
        return True

    def delete(self, key: str) -> bool:
        return self.store.pop(key, None) is not None

    def clear(self, only_expired: bool) -> bool:
        self.clear_calls.append(only_expired)
        if only_expired:
            now = time.monotonic()
            self.store = {k: e for k, e in self.store.items() if e[1] is None or e[1] > now}
        else:
            self.store.clear()
        return True


@pytest.fixture
def engine() -> DictEngine:
    return DictEngine()


@pytest.fixture
def spy_engine() -> MagicMock:
    """An engine mock that only records calls."""
    return MagicMock(spec=CacheEngine)


@pytest.fixture
def engine_factory() -> type[DictEngine]:
    return DictEngine
