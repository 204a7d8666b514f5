# routers/transaction.py
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from sqlalchemy import desc
import logging
from app.schemas.transaction import (
    TransactionCreate,
    TransactionCreateResponse,
    TransactionHistoryResponse,
    TransactionResponse,
)
from app.models.transaction import Transaction
from app.models.user import User
from app.database import get_db
from app.routers.auth import get_current_user
from app.services.pricing_service import PricingError
from app.services.transaction_service import (
    TransactionIdGenerationError,
    TransactionPersistenceError,
    create_transaction,
)

router = APIRouter(prefix="/transaction", tags=["Transaction"])
logger = logging.getLogger(__name__)

@router.post("/", response_model=TransactionCreateResponse, status_code=status.HTTP_201_CREATED)
def create_scrap_transaction(
    order: TransactionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Confirm a scrap pickup/drop-off order.

    The order is re-validated and re-priced here; the client's own estimate is
    never trusted. At most one transaction row is written per request.
    """
    try:
        txn = create_transaction(db, current_user, order)
    except PricingError as e:
        logger.error(f"Price calculation error: {e}")
        raise HTTPException(status_code=500, detail="Failed to calculate price")
    except TransactionIdGenerationError as e:
        logger.error(f"Transaction ID generation error: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate transaction ID")
    except TransactionPersistenceError as e:
        logger.error(f"Transaction insert error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create transaction")

    return TransactionCreateResponse(
        transaction_id=txn.transaction_id,
        estimated_price=float(txn.estimated_price),
        status=txn.status
    )

@router.get("/history", response_model=TransactionHistoryResponse)
def get_transaction_history(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    skip: int = Query(0, ge=0, description="Number of records to skip"),
    limit: int = Query(20, ge=1, le=100, description="Number of records to return")
):
    """Get the current user's transactions, most recent first"""
    query = db.query(Transaction).filter(Transaction.user_id == current_user.user_id)
    total = query.count()
    transactions = (query
                    .order_by(desc(Transaction.created_at), desc(Transaction.id))
                    .offset(skip)
                    .limit(limit)
                    .all())

    return TransactionHistoryResponse(
        transactions=[TransactionResponse.model_validate(txn) for txn in transactions],
        total=total
    )

@router.get("/history/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    txn = db.query(Transaction).filter(
        Transaction.transaction_id == transaction_id,
        Transaction.user_id == current_user.user_id
    ).first()
    if not txn:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return txn
