# services/transaction_service.py
import logging
import secrets
import string
import time

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.constant import TRANSACTION_ID_PREFIXES
from app.models.transaction import Transaction
from app.models.user import User
from app.schemas.transaction import TransactionCreate
from app.services.pricing_service import calculate_scrap_price

logger = logging.getLogger(__name__)

BASE36_ALPHABET = string.digits + string.ascii_uppercase
SUFFIX_ALPHABET = string.ascii_uppercase + string.digits
SUFFIX_LENGTH = 4
TRANSACTION_ID_ATTEMPTS = 5

class TransactionIdGenerationError(Exception):
    pass

class TransactionPersistenceError(Exception):
    pass

def to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))

def new_transaction_id(prefix: str) -> str:
    timestamp = to_base36(int(time.time() * 1000))
    suffix = "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f"{prefix}{timestamp}{suffix}"

def generate_transaction_id(db: Session, prefix: str) -> str:
    """
    Generate a transaction id such as ``TXNM2K9Q1ZT7F3A``.

    Ids are ``prefix`` + base36 millisecond timestamp + a random suffix, and
    are checked against existing rows before being handed out.
    """
    for _ in range(TRANSACTION_ID_ATTEMPTS):
        candidate = new_transaction_id(prefix)
        taken = db.query(Transaction.id).filter(Transaction.transaction_id == candidate).first()
        if not taken:
            return candidate
        logger.warning(f"Transaction id collision on {candidate}, regenerating")
    raise TransactionIdGenerationError(
        f"Could not generate a unique transaction id after {TRANSACTION_ID_ATTEMPTS} attempts"
    )

def create_transaction(db: Session, user: User, order: TransactionCreate) -> Transaction:
    """Price the order server-side, assign an id and persist it as a confirmed transaction.

    Raises PricingError, TransactionIdGenerationError or TransactionPersistenceError;
    nothing is written unless all three steps succeed.
    """
    quote = calculate_scrap_price(db, order.categories, order.weight)
    prefix = TRANSACTION_ID_PREFIXES[order.payment_method]
    transaction_id = generate_transaction_id(db, prefix)

    txn = Transaction(
        user_id=user.user_id,
        transaction_id=transaction_id,
        categories=list(order.categories),
        weight_kg=order.weight,
        location=order.location,
        estimated_price=quote.estimated_price,
        confidence_score=quote.confidence_score,
        pickup_date=order.pickup_date,
        pickup_time=order.pickup_time,
        pickup_type=order.pickup_type,
        payment_method=order.payment_method,
        status="confirmed",
    )
    try:
        db.add(txn)
        db.commit()
        db.refresh(txn)
    except SQLAlchemyError as e:
        db.rollback()
        raise TransactionPersistenceError(str(e)) from e

    logger.info(f"Created transaction {txn.transaction_id} for user {user.user_id}: {txn.estimated_price}")
    return txn
