#!/usr/bin/env python3
"""Flask web app for the Receipt Processor - submit receipts, fetch their points."""

import os

from flask import Flask, jsonify, request
from dotenv import load_dotenv

load_dotenv()

from receipt_processor.audit import audit_log, setup_app_logging
from receipt_processor.service import ReceiptNotFound, ReceiptService
from src.pipeline import INVALID_RECEIPT_MESSAGE, ValidationRejected
from src.utils import hash_payload

NOT_FOUND_MESSAGE = "No receipt found for that ID."

log = setup_app_logging()

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = 1024 * 1024  # 1MB

service = ReceiptService()


@app.route("/receipts/process", methods=["POST"])
def api_process_receipt():
    """Validate and score a receipt. Returns the id its points are stored under."""
    data = request.get_json(force=True, silent=True)
    payload_hash = hash_payload(data) if data is not None else None

    try:
        receipt_id, points = service.process(data)
    except ValidationRejected:
        audit_log(action="process", status="rejected", payload_hash=payload_hash)
        log.info("Receipt rejected (payload_hash=%s)", (payload_hash or "undecodable")[:16])
        return jsonify({"error": INVALID_RECEIPT_MESSAGE}), 400
    except Exception as e:
        audit_log(action="process", status="error", payload_hash=payload_hash, error=str(e))
        log.exception("Process receipt failed")
        return jsonify({"error": "Internal server error"}), 500

    audit_log(
        action="process",
        status="success",
        receipt_id=receipt_id,
        points=points,
        payload_hash=payload_hash,
        item_count=len(data["items"]),
    )
    log.info("Receipt processed: id=%s points=%d", receipt_id, points)
    return jsonify({"id": receipt_id})


@app.route("/receipts/<receipt_id>/points", methods=["GET"])
def api_get_points(receipt_id: str):
    """Return the points awarded to a previously processed receipt."""
    try:
        points = service.points(receipt_id)
    except ReceiptNotFound:
        audit_log(action="points", status="not_found", receipt_id=receipt_id)
        log.info("Points lookup: unknown id=%s", receipt_id)
        return jsonify({"error": NOT_FOUND_MESSAGE}), 404

    audit_log(action="points", status="success", receipt_id=receipt_id, points=points)
    return jsonify({"points": points})


if __name__ == "__main__":
    host = os.environ.get("RECEIPT_PROCESSOR_HOST", "127.0.0.1")
    port = int(os.environ.get("RECEIPT_PROCESSOR_PORT", "8080"))
    debug = os.environ.get("RECEIPT_PROCESSOR_DEBUG", "").strip().lower() in ("1", "true", "yes")
    log.info(
        "Receipt Processor starting on http://%s:%d | Logs: logs/app.log | Audit: logs/audit.log",
        host,
        port,
    )
    app.run(host=host, port=port, debug=debug)
