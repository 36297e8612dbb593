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
"""Cache facade configuration properties."""

from __future__ import annotations

from pydantic import BaseModel, Field

from flycache.core.config import config_properties


@config_properties(prefix="flycache.cache")
class CacheProperties(BaseModel):
    """Configuration for the cache facade (flycache.cache.*).

    Attributes:
        duration_key: Name of the engine configuration slot holding the
            default time-to-live. Overridden for the span of a TTL-scoped write.
        validate_batch_keys: Validate every key of a batch operation before
            delegating to the engine.
    """

    duration_key: str = Field(default="duration", min_length=1)
    validate_batch_keys: bool = True
