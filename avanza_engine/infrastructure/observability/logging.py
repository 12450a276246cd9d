"""Structured JSON logging for engine reports"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger.json import JsonFormatter

from avanza_engine.config import settings

logger = logging.getLogger("avanza_engine")


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers
    root.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)


def log_report(
    report_id: str,
    transaction_count: int,
    debt_count: int,
    band: str,
    duration_ms: float,
) -> None:
    """Log structured report outcome for analysis"""
    logger.info(
        "Report built",
        extra={
            "report_id": report_id,
            "step": "report_complete",
            "transaction_count": transaction_count,
            "debt_count": debt_count,
            "band": band,
            "duration_ms": duration_ms,
        },
    )


def log_ceiling_reached(report_id: str, debt_id: str, remaining_balance: float) -> None:
    """Warn about a debt whose payment never pays it off"""
    logger.warning(
        "Amortization stopped at iteration ceiling",
        extra={
            "report_id": report_id,
            "debt_id": debt_id,
            "step": "schedule",
            "remaining_balance": remaining_balance,
        },
    )
