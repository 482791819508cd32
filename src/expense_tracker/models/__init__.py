from .enums import Collection, TransactionType
from .models import Base, KeyValueDB, RecordCreate, Record, Transaction

__all__ = [
    "Collection",
    "TransactionType",
    "Base",
    "KeyValueDB",
    "RecordCreate",
    "Record",
    "Transaction",
]
