"""flygen logging: structlog-backed configuration of the generator's loggers."""

from flygen.logging.structlog_adapter import StructlogAdapter

__all__ = ["StructlogAdapter"]
