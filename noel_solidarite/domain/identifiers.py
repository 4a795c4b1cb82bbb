"""Donation reference generation"""

import uuid
from datetime import datetime, timezone


def generate_donation_id(now: datetime | None = None) -> str:
    """
    Build a donation reference of the form DON-<epoch millis>-<suffix>.

    The suffix is a random UUID4 in hex, so uniqueness does not depend on the
    timestamp: two ids minted in the same millisecond still differ.
    """
    now = now or datetime.now(timezone.utc)
    millis = int(now.timestamp() * 1000)
    return f"DON-{millis}-{uuid.uuid4().hex}"
