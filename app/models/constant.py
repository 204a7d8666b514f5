from datetime import timezone, timedelta

IST = timezone(timedelta(hours=5, minutes=30))

SCRAP_CATEGORIES = ("paper", "plastic", "metal", "ewaste")
PICKUP_TYPES = ("pickup", "dropoff")
PAYMENT_METHODS = ("upi", "cash")
TRANSACTION_STATUSES = ("pending", "confirmed", "completed", "cancelled")

# Transaction id prefixes by payment method
TRANSACTION_ID_PREFIXES = {
    "upi": "TXN",
    "cash": "COD",
}
