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
"""Base class for cache engines wrapped by the simple-cache facade."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, ClassVar

from flycache.cache.types import Key, KeyIterable, ValueMapping

_logger = logging.getLogger(__name__)


class BaseCacheEngine(ABC):
    """Skeleton for engines satisfying the :class:`CacheEngine` port.

    Subclasses implement the four single-key primitives; the batch
    operations default to looping over them. Settings live in a plain
    dict seeded from :attr:`default_config` and the constructor overrides.
    The default time-to-live is stored under :attr:`duration_key`, the slot
    a facade overrides for TTL-scoped writes.
    """

    duration_key: ClassVar[str] = "duration"
    default_duration: ClassVar[int] = 3600
    default_config: ClassVar[dict[str, Any]] = {}

    def __init__(self, **config: Any) -> None:
        self._config: dict[str, Any] = {
            self.duration_key: self.default_duration,
            **self.default_config,
            **config,
        }

    # ── settings ───────────────────────────────────────────────

    def get_config(self, name: str, default: Any = None) -> Any:
        return self._config.get(name, default)

    def set_config(self, name: str, value: Any) -> None:
        self._config[name] = value

    def duration_seconds(self) -> int:
        """The current default duration as whole seconds."""
        duration = self._config.get(self.duration_key)
        if duration is None:
            return 0
        if isinstance(duration, timedelta):
            return int(duration.total_seconds())
        return int(duration)

    # ── single-key primitives ──────────────────────────────────

    @abstractmethod
    def read(self, key: Key) -> Any:
        """Return the stored value, or ``MISS``."""

    @abstractmethod
    def write(self, key: Key, value: Any) -> bool: ...

    @abstractmethod
    def delete(self, key: Key) -> bool: ...

    @abstractmethod
    def clear(self, only_expired: bool) -> bool:
        """Remove all entries, or only the expired ones."""

    # ── batch operations ───────────────────────────────────────

    def read_many(self, keys: KeyIterable) -> dict[Key, Any]:
        return {key: self.read(key) for key in keys}

    def write_many(self, values: ValueMapping) -> bool:
        """Write every entry; True only if all writes succeeded."""
        failed = [key for key, value in values.items() if not self.write(key, value)]
        if failed:
            _logger.debug("Batch write failed for %d of %d keys", len(failed), len(values))
        return not failed

    def delete_many(self, keys: KeyIterable) -> dict[Key, bool]:
        return {key: self.delete(key) for key in keys}
