"""Service layer: validate → score → store, and points lookup."""

import logging
from typing import Callable

from receipt_processor.store import InMemoryPointsStore, PointsStore
from src.pipeline import validate
from src.scoring import score_breakdown
from src.utils import new_receipt_id

log = logging.getLogger("receipt_processor.service")


class ReceiptNotFound(KeyError):
    """Raised when no points are stored for a receipt id."""


class ReceiptService:
    """
    Orchestrates one submission: strict decode, validation, scoring, id generation, storage.
    The store and id supplier are injected; scoring itself holds no state.
    """

    def __init__(self, store: PointsStore | None = None, id_factory: Callable[[], str] = new_receipt_id):
        self.store = store if store is not None else InMemoryPointsStore()
        self.id_factory = id_factory

    def process(self, payload: dict) -> tuple[str, int]:
        """
        Score a decoded receipt payload and store the points under a new id.
        Returns (receipt_id, points). Raises ValidationRejected if the payload is invalid.
        """
        receipt = validate(payload)
        breakdown = score_breakdown(receipt)
        receipt_id = self.id_factory()
        self.store.put(receipt_id, breakdown["total"])
        log.debug("Scored receipt %s: %s", receipt_id, breakdown["rules"])
        return receipt_id, breakdown["total"]

    def points(self, receipt_id: str) -> int:
        """Stored points for receipt_id. Raises ReceiptNotFound if unknown."""
        points = self.store.get(receipt_id)
        if points is None:
            raise ReceiptNotFound(receipt_id)
        return points
