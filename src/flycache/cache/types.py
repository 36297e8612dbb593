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
"""Shared cache types: the miss sentinel and argument aliases."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any, Final, TypeAlias

Key: TypeAlias = str
TTL: TypeAlias = int | timedelta | None


class _MissSentinel:
    """Returned by engines when a key is not present.

    Distinct from every storable value, so a cached ``None``, ``False``,
    ``0`` or ``""`` is never mistaken for a miss.
    """

    _instance: _MissSentinel | None = None

    def __new__(cls) -> _MissSentinel:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISS"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISS"


MISS: Final = _MissSentinel()

KeyIterable: TypeAlias = Iterable[Key]
ValueMapping: TypeAlias = Mapping[Key, Any]


def is_miss(value: Any) -> bool:
    """Return True if *value* is the engine miss sentinel."""
    return value is MISS
