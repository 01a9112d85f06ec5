"""Receipt Processor - scores purchase receipts and serves points by receipt id."""

from receipt_processor.service import ReceiptNotFound, ReceiptService
from receipt_processor.store import InMemoryPointsStore, PointsStore

__all__ = ["ReceiptNotFound", "ReceiptService", "InMemoryPointsStore", "PointsStore"]
