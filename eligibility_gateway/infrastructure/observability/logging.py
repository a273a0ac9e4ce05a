"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO
from pythonjsonlogger import jsonlogger
from eligibility_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Configure structured JSON logging (stdout unless a stream is given)"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler, stdout by default
    handler = logging.StreamHandler(stream or sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def mask_ni_number(ni_number: str) -> str:
    """Keep only the last 3 characters of an NI number for logs"""
    if len(ni_number) <= 3:
        return "*" * len(ni_number)
    return "*" * (len(ni_number) - 3) + ni_number[-3:]


def log_eligibility_decision(
    request_id: str,
    ni_number: str,
    accepted: bool,
    credit_score: int,
    error_count: int,
    duration_ms: float,
) -> None:
    """Log structured eligibility outcome for analysis"""
    logging.info(
        "Eligibility check completed",
        extra={
            "request_id": request_id,
            "ni_number": mask_ni_number(ni_number),
            "step": "eligibility_complete",
            "outcome": "accepted" if accepted else "declined",
            "credit_score": credit_score,
            "error_count": error_count,
            "duration_ms": duration_ms,
        },
    )
