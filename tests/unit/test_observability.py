"""Unit tests for JSON logging and evaluation metrics"""

import json
import logging
from decimal import Decimal

import pytest
from prometheus_client import REGISTRY

from auction_payments.infrastructure.observability.logging import CustomJsonFormatter, log_evaluation, setup_logging
from auction_payments.infrastructure.observability.metrics import record_evaluation


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_emits_json(restore_root_logger, capsys):
    setup_logging("INFO")

    assert isinstance(restore_root_logger.handlers[0].formatter, CustomJsonFormatter)

    log_evaluation("parcelamento", "atrasado", "1000.00", "1015.10", 2, 34)
    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)

    assert payload["message"] == "Obligation evaluated"
    assert payload["level"] == "INFO"
    assert payload["service"] == "auction-payments"
    assert payload["overdue_installments"] == 2


def test_record_evaluation_counts_interest():
    before = REGISTRY.get_sample_value("auction_interest_applied_total", {"payment_type": "entrada_parcelamento"}) or 0.0

    record_evaluation("entrada_parcelamento", "atrasado", Decimal("12.50"), 40)
    record_evaluation("entrada_parcelamento", "pendente", Decimal("0"), 0)

    after = REGISTRY.get_sample_value("auction_interest_applied_total", {"payment_type": "entrada_parcelamento"})
    assert after == before + 1
