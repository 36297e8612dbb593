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
"""StructlogAdapter — renders the ``flycache`` logger namespace through structlog."""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

from flycache.config.properties.logging import LoggingProperties
from flycache.core.config import Config

LOGGER_NAMESPACE = "flycache"


class StructlogAdapter:
    """Attach a structlog-formatted handler to the ``flycache`` loggers.

    Library modules log through stdlib ``logging.getLogger(__name__)``.
    Only the ``flycache`` namespace is touched: the root logger and the
    global structlog configuration stay under the application's control.
    Configuring again replaces the previously installed handler.
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream
        self._handler: logging.Handler | None = None
        self._level: str = "WARNING"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}

    @property
    def handler(self) -> logging.Handler | None:
        return self._handler

    def configure(self, config: Config) -> None:
        """Install the handler using the ``flycache.logging`` section of config."""
        props = config.bind(LoggingProperties)
        self._level = str(props.level).upper()
        self._format = str(props.format).lower()
        self._module_levels = {k: str(v).upper() for k, v in props.loggers.items()}

        namespace = logging.getLogger(LOGGER_NAMESPACE)
        self.reset()
        self._handler = self._build_handler()
        namespace.addHandler(self._handler)
        namespace.propagate = props.propagate
        self.set_level(LOGGER_NAMESPACE, self._level)
        for module, level in self._module_levels.items():
            self.set_level(module, level)

    def set_level(self, name: str, level: str) -> None:
        """Set the log level for a specific stdlib logger."""
        log_level = getattr(logging, level.upper(), logging.INFO)
        logging.getLogger(name).setLevel(log_level)

    def reset(self) -> None:
        """Remove the handler installed by :meth:`configure`, if any."""
        if self._handler is not None:
            logging.getLogger(LOGGER_NAMESPACE).removeHandler(self._handler)
            self._handler.close()
            self._handler = None

    def _build_handler(self) -> logging.Handler:
        shared_processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]

        if self._format == "json":
            renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer(colors=False)

        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=shared_processors,
        )

        handler = logging.StreamHandler(self._stream if self._stream is not None else sys.stderr)
        handler.setFormatter(formatter)
        return handler


def configure_logging(config: Config, stream: IO[str] | None = None) -> StructlogAdapter:
    """Render FlyCache's log records with structlog according to *config*."""
    adapter = StructlogAdapter(stream=stream)
    adapter.configure(config)
    return adapter
