"""
Logging configuration for the cable router.

This module provides the logging setup used by the routing engine and its API,
including a custom TRACE level for per-sample diagnostics. It supports file and
console output with different formats.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional

class CableRouterLogger:
    """
    Configures logging for the cable router with multiple levels.
    
    Supports:
    - Standard levels (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    - Custom TRACE level for per-sample zone and collision diagnostics
    - File and console output with different formats and levels
    """
    
    # Define custom TRACE level (between DEBUG and NOTSET)
    TRACE_LEVEL = 5
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    
    @staticmethod
    def _add_trace_method():
        """Add the TRACE method to the Logger class if not already present."""
        if not hasattr(logging.Logger, 'trace'):
            def trace(self, message, *args, **kwargs):
                """
                Log a message with level TRACE.
                
                This level provides extremely detailed tracing information beyond DEBUG.
                """
                if self.isEnabledFor(CableRouterLogger.TRACE_LEVEL):
                    self._log(CableRouterLogger.TRACE_LEVEL, message, args, **kwargs)
            logging.Logger.trace = trace
    
    @staticmethod
    def configure(debug_mode: bool = False, log_dir: str = "logs", console_only: bool = False) -> Optional[str]:
        """
        Configure the logging system for the entire application.
        
        Args:
            debug_mode: If True, sets DEBUG level for all loggers
            log_dir: Directory to store log files
            console_only: If True, skip the file handler (e.g. inside containers)
            
        Returns:
            Path to the created log file, or None when logging to console only
        """
        CableRouterLogger._add_trace_method()
        
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)
        
        # Close and clear any existing handlers
        for handler in list(root_logger.handlers):
            handler.close()
            root_logger.removeHandler(handler)
        
        log_file = None
        if not console_only:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"cable_router_{timestamp}.log")
            
            # File handler logs everything
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            file_handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)
            root_logger.addHandler(file_handler)
        
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s: %(message)s'))
        console_handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)
        root_logger.addHandler(console_handler)
        
        return log_file
    
    @staticmethod
    def get_logger(name: str, level: Optional[int] = None):
        """
        Get a configured logger for a specific module.
        
        Args:
            name: Logger name, typically __name__
            level: Optional specific level for this logger
            
        Returns:
            A configured logger
        """
        CableRouterLogger._add_trace_method()
        logger = logging.getLogger(name)
        if level:
            logger.setLevel(level)
        return logger

# For direct import convenience
def get_logger(name: str, level: Optional[int] = None):
    """
    Get a configured logger for a specific module.
    
    Convenience function that delegates to CableRouterLogger.get_logger.
    """
    return CableRouterLogger.get_logger(name, level)
