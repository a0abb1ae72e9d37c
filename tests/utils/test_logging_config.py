# File: tests/utils/test_logging_config.py
"""Tests for logging configuration."""

import logging
import os

from cable_router.utils.logging_config import CableRouterLogger, get_logger


class TestLoggingConfig:
    """Tests for CableRouterLogger."""

    def test_trace_level_registered(self):
        """get_logger installs the TRACE method."""
        logger = get_logger("cable_router.tests")
        assert logging.getLevelName(CableRouterLogger.TRACE_LEVEL) == "TRACE"
        assert hasattr(logger, "trace")

    def test_configure_writes_log_file(self, tmp_path):
        """File logging creates a timestamped log file."""
        root = logging.getLogger()
        saved_handlers = list(root.handlers)
        saved_level = root.level
        try:
            log_file = CableRouterLogger.configure(debug_mode=True, log_dir=str(tmp_path))
            assert log_file is not None
            assert os.path.basename(log_file).startswith("cable_router_")
            assert os.path.exists(log_file)
            assert root.level == logging.DEBUG
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_console_only(self):
        """Console-only logging returns no file path."""
        root = logging.getLogger()
        saved_handlers = list(root.handlers)
        saved_level = root.level
        try:
            assert CableRouterLogger.configure(console_only=True) is None
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_reconfigure_closes_previous_handlers(self, tmp_path):
        """Reconfiguring releases the previous log file."""
        root = logging.getLogger()
        saved_handlers = list(root.handlers)
        saved_level = root.level
        try:
            CableRouterLogger.configure(log_dir=str(tmp_path))
            first_file_handler = next(
                h for h in root.handlers if isinstance(h, logging.FileHandler)
            )
            CableRouterLogger.configure(log_dir=str(tmp_path))
            assert first_file_handler not in root.handlers
            assert first_file_handler.stream is None
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
