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
"""Tests for StructlogAdapter — structlog rendering of the flycache loggers."""

import io
import json
import logging
from unittest.mock import MagicMock

import pytest

from flycache.cache.facade import SimpleCacheFacade
from flycache.cache.ports.outbound import CacheEngine
from flycache.core.config import Config
from flycache.logging import StructlogAdapter, configure_logging


def _json_config(level: str = "DEBUG") -> Config:
    return Config({"flycache": {"logging": {"format": "json", "level": level}}})


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def adapter(stream):
    adapter = StructlogAdapter(stream=stream)
    yield adapter
    adapter.reset()
    logging.getLogger("flycache").setLevel(logging.NOTSET)
    logging.getLogger("flycache").propagate = True


def _events(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self, adapter):
        adapter.configure(Config({}))
        assert adapter._level == "WARNING"
        assert adapter._format == "console"
        assert logging.getLogger("flycache").level == logging.WARNING

    def test_handler_attached_to_namespace_only(self, adapter):
        root_handlers = list(logging.getLogger().handlers)
        adapter.configure(_json_config())
        assert adapter.handler in logging.getLogger("flycache").handlers
        assert logging.getLogger().handlers == root_handlers

    def test_reconfigure_replaces_handler(self, adapter):
        adapter.configure(_json_config())
        first = adapter.handler
        adapter.configure(_json_config())
        handlers = logging.getLogger("flycache").handlers
        assert first not in handlers
        assert handlers.count(adapter.handler) == 1

    def test_per_logger_levels(self, adapter):
        config = Config(
            {"flycache": {"logging": {"level": "INFO", "loggers": {"flycache.cache.engine": "error"}}}}
        )
        adapter.configure(config)
        assert logging.getLogger("flycache").level == logging.INFO
        assert logging.getLogger("flycache.cache.engine").level == logging.ERROR
        logging.getLogger("flycache.cache.engine").setLevel(logging.NOTSET)

    def test_propagate_setting(self, adapter):
        adapter.configure(Config({"flycache": {"logging": {"propagate": False}}}))
        assert logging.getLogger("flycache").propagate is False

    def test_format_from_env(self, adapter, monkeypatch):
        monkeypatch.setenv("FLYCACHE_LOGGING_FORMAT", "json")
        adapter.configure(Config({}))
        assert adapter._format == "json"

    def test_reset_removes_handler(self, adapter):
        adapter.configure(_json_config())
        handler = adapter.handler
        adapter.reset()
        assert adapter.handler is None
        assert handler not in logging.getLogger("flycache").handlers


class TestStructlogAdapterRendering:
    def test_json_records_from_library_loggers(self, adapter, stream):
        adapter.configure(_json_config())
        logging.getLogger("flycache.cache.engine").info("engine ready")

        [event] = _events(stream)
        assert event["event"] == "engine ready"
        assert event["level"] == "info"
        assert event["logger"] == "flycache.cache.engine"
        assert "timestamp" in event

    def test_records_below_level_are_dropped(self, adapter, stream):
        adapter.configure(_json_config(level="WARNING"))
        logging.getLogger("flycache.cache.engine").info("quiet")
        assert stream.getvalue() == ""

    def test_console_format(self, adapter, stream):
        adapter.configure(Config({"flycache": {"logging": {"level": "INFO"}}}))
        logging.getLogger("flycache.cache.engine").info("engine ready")
        assert "engine ready" in stream.getvalue()
        assert "flycache.cache.engine" in stream.getvalue()

    def test_ttl_override_records(self, adapter, stream):
        adapter.configure(_json_config())
        engine = MagicMock(spec=CacheEngine)
        engine.get_config.return_value = 3600
        engine.write.side_effect = OSError("disk full")
        cache = SimpleCacheFacade(engine)

        with pytest.raises(OSError):
            cache.set("key", "value", ttl=60)

        events = [e for e in _events(stream) if e["logger"] == "flycache.cache.facade"]
        assert [e["level"] for e in events] == ["debug", "warning"]
        assert events[0]["event"] == "Cache duration 'duration' overridden: 3600 -> 60"
        assert "restoring duration 'duration'" in events[1]["event"]


class TestConfigureLogging:
    def test_returns_configured_adapter(self, stream):
        adapter = configure_logging(_json_config(), stream=stream)
        try:
            logging.getLogger("flycache.cache").debug("hello")
            assert _events(stream)[0]["event"] == "hello"
        finally:
            adapter.reset()
            logging.getLogger("flycache").setLevel(logging.NOTSET)

    def test_set_level_unknown_falls_back_to_info(self):
        StructlogAdapter().set_level("flycache.test.unknown", "NOPE")
        assert logging.getLogger("flycache.test.unknown").level == logging.INFO
