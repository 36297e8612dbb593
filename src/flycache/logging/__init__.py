"""FlyCache Logging — structlog rendering for the flycache logger namespace."""

from flycache.logging.structlog_adapter import StructlogAdapter, configure_logging

__all__ = ["StructlogAdapter", "configure_logging"]
