# -*- coding: utf-8 -*-
"""MQX Logger - структурированное логирование консоли MQX на structlog.

Quick Start:
    >>> from mqx_logger import configure_logging, get_logger
    >>> configure_logging(service_name="mqx-console", log_level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("topic.created", topic="orders", partition_num=4)

Context Management:
    >>> from mqx_logger import bind_context
    >>> with bind_context(correlation_id="c0ffee", topic="orders"):
    ...     logger.info("offsets.opened")
"""

from __future__ import annotations

from .config import LoggerConfig
from .context import (
    bind_context,
    clear_all_context,
    get_correlation_id,
    get_current_context,
)
from .logger import (
    configure_logging,
    get_config,
    get_logger,
    reset_configuration,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Конфигурация
    "LoggerConfig",
    "configure_logging",
    "get_config",
    "reset_configuration",
    # Core API
    "get_logger",
    # Context
    "bind_context",
    "clear_all_context",
    "get_current_context",
    "get_correlation_id",
]
