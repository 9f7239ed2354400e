"""Structured JSON logging for engine evaluations"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from auction_payments.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str | None = None) -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level or settings.log_level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_evaluation(
    payment_type: str,
    status: str,
    principal: str,
    total_with_interest: str,
    overdue_installments: int,
    max_days_late: int,
) -> None:
    """Log structured obligation evaluation outcome for analysis"""
    logging.getLogger("auction_payments.reporting").info(
        "Obligation evaluated",
        extra={
            "step": "obligation_evaluated",
            "payment_type": payment_type,
            "status": status,
            "principal": principal,
            "total_with_interest": total_with_interest,
            "overdue_installments": overdue_installments,
            "max_days_late": max_days_late,
        },
    )
