"""Mixins for SQLAlchemy models."""

import itertools
import os
import re
import time
from datetime import UTC, datetime

from sqlalchemy import Column, String

OBJECT_ID_LENGTH = 24
OBJECT_ID_PATTERN = re.compile(r"^[0-9a-f]{24}$")

# Per-process random part and counter, laid out like a MongoDB ObjectId
_PROCESS_UNIQUE = os.urandom(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big") >> 1)


def generate_object_id() -> str:
    """Generate a 12-byte identifier rendered as lowercase hex.

    Layout: 4-byte seconds timestamp, 5 random bytes fixed per process, and a
    3-byte counter. Ids issued by one process sort in creation order.
    """
    count = next(_counter) & 0xFFFFFF
    raw = (
        int(time.time()).to_bytes(4, "big")
        + _PROCESS_UNIQUE
        + count.to_bytes(3, "big")
    )
    return raw.hex()


def is_valid_object_id(value: str) -> bool:
    """Check whether a string is a well-formed record identifier."""
    return bool(OBJECT_ID_PATTERN.match(value))


def formatted_now() -> str:
    """Current UTC time as ``YYYY-MM-DD HH:MM:SS.mmm``."""
    return datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


class ObjectIdMixin:
    """Mixin to add a store-generated string primary key."""

    id = Column(String(OBJECT_ID_LENGTH), primary_key=True, default=generate_object_id)


class CreatedTimeMixin:
    """Mixin to add an application-formatted creation timestamp."""

    created_time = Column(String(32), nullable=False, default=formatted_now)
