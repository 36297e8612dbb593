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
"""Simple-cache facade — the standardized cache interface over a cache engine."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from flycache.cache.keys import validate_key, validate_keys, validate_values
from flycache.cache.ports.outbound import CacheEngine
from flycache.cache.types import MISS, TTL, Key, KeyIterable, ValueMapping
from flycache.config.properties.cache import CacheProperties
from flycache.core.config import Config

_logger = logging.getLogger(__name__)

_ABSENT = object()


class SimpleCacheFacade:
    """Expose a :class:`CacheEngine` through the :class:`SimpleCache` contract.

    Single keys are validated before the engine is touched. Misses reported
    by the engine as ``MISS`` become the caller's default, and per-key batch
    delete results are reduced to one boolean. Engine errors propagate
    unchanged.

    A TTL is applied by temporarily rewriting the engine's default duration
    for the span of one write and restoring it afterwards, even on failure.
    The override is not safe when several threads share one engine: a
    concurrent writer may observe another caller's TTL.
    """

    def __init__(self, engine: CacheEngine, properties: CacheProperties | None = None) -> None:
        engine_key = _declared_duration_key(engine)
        if properties is None:
            properties = CacheProperties() if engine_key is None else CacheProperties(duration_key=engine_key)
        elif engine_key is not None and engine_key != properties.duration_key:
            raise ValueError(
                f"Cache duration key '{properties.duration_key}' does not match the "
                f"'{engine_key}' slot declared by {type(engine).__name__}"
            )
        self._engine = engine
        self._properties = properties

    @classmethod
    def from_config(cls, engine: CacheEngine, config: Config) -> SimpleCacheFacade:
        """Build a facade using the ``flycache.cache`` section of *config*.

        When the section leaves ``duration_key`` unset, the engine's declared
        slot is used.
        """
        properties = config.bind(CacheProperties)
        engine_key = _declared_duration_key(engine)
        if engine_key is not None and config.get("flycache.cache.duration_key") is None:
            properties = properties.model_copy(update={"duration_key": engine_key})
        return cls(engine, properties)

    @property
    def engine(self) -> CacheEngine:
        """The wrapped engine."""
        return self._engine

    @property
    def properties(self) -> CacheProperties:
        return self._properties

    # ── TTL override ───────────────────────────────────────────

    @contextmanager
    def _duration(self, ttl: TTL) -> Iterator[None]:
        """Swap the engine's default duration to *ttl* for the enclosed block."""
        if ttl is None:
            yield
            return

        name = self._properties.duration_key
        restore = self._engine.get_config(name)
        self._engine.set_config(name, ttl)
        _logger.debug("Cache duration '%s' overridden: %r -> %r", name, restore, ttl)
        try:
            yield
        except Exception:
            _logger.warning("TTL-scoped cache write failed, restoring duration '%s'", name)
            raise
        finally:
            self._engine.set_config(name, restore)

    # ── single key ─────────────────────────────────────────────

    def get(self, key: Key, default: Any = None) -> Any:
        """Fetch a value, or *default* when the key is not cached."""
        validate_key(key)
        result = self._engine.read(key)
        if result is MISS:
            return default
        return result

    def set(self, key: Key, value: Any, ttl: TTL = None) -> bool:
        """Store a value, optionally with a TTL overriding the engine default."""
        validate_key(key)
        with self._duration(ttl):
            result = self._engine.write(key, value)
        return bool(result)

    def delete(self, key: Key) -> bool:
        validate_key(key)
        return self._engine.delete(key)

    def clear(self) -> bool:
        """Wipe every entry, expired or not."""
        return self._engine.clear(False)

    def has(self, key: Key) -> bool:
        """Whether *key* is cached.

        Advisory only: another caller may delete the entry between this
        check and a subsequent :meth:`get`.
        """
        return self.get(key, _ABSENT) is not _ABSENT

    # ── batch ──────────────────────────────────────────────────

    def get_multiple(self, keys: KeyIterable, default: Any = None) -> dict[Key, Any]:
        """Fetch several keys; keys the engine reports as missed map to *default*."""
        keys = validate_keys(keys, check_each=self._properties.validate_batch_keys)
        results = self._engine.read_many(keys)
        return {key: default if value is MISS else value for key, value in results.items()}

    def set_multiple(self, values: ValueMapping, ttl: TTL = None) -> bool:
        """Store several entries with one optional TTL for the whole batch."""
        values = validate_values(values, check_each=self._properties.validate_batch_keys)
        with self._duration(ttl):
            return self._engine.write_many(values)

    def delete_multiple(self, keys: KeyIterable) -> bool:
        """Delete several keys; True only if the engine removed every one."""
        keys = validate_keys(keys, check_each=self._properties.validate_batch_keys)
        results = self._engine.delete_many(keys)
        for success in results.values():
            if not success:
                return False
        return True


def _declared_duration_key(engine: CacheEngine) -> str | None:
    """The duration slot an engine declares via ``duration_key``, if any."""
    key = getattr(engine, "duration_key", None)
    return key if isinstance(key, str) else None
