"""
Unit tests for transaction id generation.
"""

import re
from datetime import date
from unittest.mock import patch

import pytest

from app.models.transaction import Transaction
from app.services.transaction_service import (
    TRANSACTION_ID_ATTEMPTS,
    TransactionIdGenerationError,
    generate_transaction_id,
    new_transaction_id,
    to_base36,
)


def stored_transaction(db_session, user, transaction_id: str) -> Transaction:
    txn = Transaction(
        user_id=user.user_id,
        transaction_id=transaction_id,
        categories=["paper"],
        weight_kg=5,
        location="Andheri East, Mumbai",
        estimated_price=75,
        confidence_score=95,
        pickup_date=date(2026, 10, 21),
        pickup_time="morning",
        pickup_type="pickup",
        payment_method="upi",
        status="confirmed",
    )
    db_session.add(txn)
    db_session.commit()
    return txn


class TestBase36:

    @pytest.mark.parametrize("number, expected", [
        (0, "0"),
        (35, "Z"),
        (36, "10"),
        (1295, "ZZ"),
        (1700000000000, "LOYW3V28"),
    ])
    def test_encoding(self, number, expected) -> None:
        assert to_base36(number) == expected


class TestTransactionIds:

    @pytest.mark.parametrize("prefix", ["TXN", "COD"])
    def test_format(self, prefix) -> None:
        transaction_id = new_transaction_id(prefix)

        assert re.fullmatch(rf"{prefix}[0-9A-Z]{{12,}}", transaction_id)
        assert len(transaction_id) <= 35

    def test_unused_id_is_returned(self, db_session) -> None:
        assert generate_transaction_id(db_session, "TXN").startswith("TXN")

    def test_collision_is_regenerated(self, db_session, user) -> None:
        stored_transaction(db_session, user, "TXNTAKEN00001")

        with patch(
            "app.services.transaction_service.new_transaction_id",
            side_effect=["TXNTAKEN00001", "TXNFRESH00002"],
        ):
            assert generate_transaction_id(db_session, "TXN") == "TXNFRESH00002"

    def test_gives_up_after_repeated_collisions(self, db_session, user) -> None:
        stored_transaction(db_session, user, "CODTAKEN00001")

        with patch(
            "app.services.transaction_service.new_transaction_id",
            return_value="CODTAKEN00001",
        ) as generator:
            with pytest.raises(TransactionIdGenerationError):
                generate_transaction_id(db_session, "COD")

        assert generator.call_count == TRANSACTION_ID_ATTEMPTS
