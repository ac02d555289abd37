import time

from .constants import GRACE_PERIOD
from .records import NameRecord


def is_record_valid(record: NameRecord, now: int = None) -> bool:
    """A record is valid while ``now + GRACE_PERIOD <= expires_at``; 0 never expires."""
    if record.expires_at == 0:
        return True
    if now is None:
        now = int(time.time())
    return now + GRACE_PERIOD <= record.expires_at


def evaluate(record: NameRecord, now: int = None) -> NameRecord:
    """Set ``record.is_valid`` from its expiry and return the record."""
    record.is_valid = is_record_valid(record, now)
    return record
