import hashlib
import logging
from typing import Any

# Create the library logger
logger = logging.getLogger("relayconn")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def redact_cursor(cursor: Any) -> str | None:
    """
    Redacts a cursor value for logging.
    Hashes the value to allow correlation across log lines without
    revealing what the cursor encodes.
    """
    if cursor is None:
        return None
    try:
        return hashlib.sha256(str(cursor).encode("utf-8")).hexdigest()[:8]
    except Exception:
        return "<redaction_failed>"
