import logging
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import sys
from pythonjsonlogger import jsonlogger

from src.config.settings import settings

# Set per request by RequestLoggingMiddleware
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        
        if hasattr(record, 'correlation_id'):
            log_record['correlation_id'] = record.correlation_id

class CorrelationIdFilter(logging.Filter):
    """Copy the current request's correlation ID onto each record"""

    def filter(self, record):
        correlation_id = correlation_id_var.get()
        if correlation_id is not None and not hasattr(record, 'correlation_id'):
            record.correlation_id = correlation_id
        return True

def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance"""
    logger = logging.getLogger(name)
    
    # Only add handlers if they haven't been added yet
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        formatter = CustomJsonFormatter(
            '%(timestamp)s %(level)s %(name)s %(module)s %(function)s %(message)s'
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
        logger.addFilter(CorrelationIdFilter())
        logger.setLevel(settings.LOG_LEVEL.upper())
    
    return logger
