"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "noel-solidarite"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_donation(
    request_id: str,
    donation_id: str,
    donation_type: str,
    cause: str,
    amount: float,
    duration_ms: float,
) -> None:
    """Log an accepted donation. Donor identity stays out of the logs."""
    logging.info(
        "Donation accepted",
        extra={
            "request_id": request_id,
            "donation_id": donation_id,
            "step": "donation_accepted",
            "donation_type": donation_type,
            "cause": cause,
            "amount": amount,
            "duration_ms": duration_ms,
        },
    )


def log_rejection(request_id: str, reason: str, path: str) -> None:
    """Log a submission refused at the API boundary"""
    logging.warning(
        "Donation rejected",
        extra={
            "request_id": request_id,
            "step": "donation_rejected",
            "reason": reason,
            "path": path,
        },
    )
