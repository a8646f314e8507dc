"""Domain value objects - pure Python immutable types."""

import json
from datetime import datetime, timezone
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional
from uuid import UUID, uuid4


@dataclass(frozen=True)
class ExecutionID:
    """Unique identifier for tracing one unit of work through the logs."""

    value: UUID

    @classmethod
    def generate(cls) -> "ExecutionID":
        """Generate a new ExecutionID."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)


class MethodStatus(str, Enum):
    """Availability of a store payment/shipping method."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"

    @classmethod
    def parse(cls, raw: Any) -> "MethodStatus":
        """
        Parse a stored status.

        Both the English and the Indonesian spelling ("Aktif") count as
        active. Anything else, including a missing status, is inactive.
        """
        text = str(raw or "").strip().lower()
        if text in ("active", "aktif"):
            return cls.ACTIVE
        return cls.INACTIVE


@dataclass(frozen=True)
class CheckoutMethod:
    """
    Payment or shipping method configured on a store.

    Stored configuration is loosely typed; use `from_raw` to build one.
    """

    method: str
    label: str
    status: MethodStatus = MethodStatus.INACTIVE

    @property
    def is_active(self) -> bool:
        return self.status is MethodStatus.ACTIVE

    def matches(self, requested: str) -> bool:
        """Case-insensitive match on method or label."""
        wanted = requested.strip().lower()
        if not wanted:
            return False
        return wanted in (self.method.lower(), self.label.lower())

    @classmethod
    def from_raw(cls, raw: Any) -> "CheckoutMethod":
        """
        Normalize a stored entry.

        Accepts a plain string or a mapping keyed by method/value/label
        with an optional status.
        """
        if isinstance(raw, dict):
            method = str(raw.get("method") or raw.get("value") or "").strip()
            label = str(raw.get("label") or method).strip()
            return cls(method=method, label=label, status=MethodStatus.parse(raw.get("status")))

        text = str(raw if raw is not None else "").strip()
        return cls(method=text, label=text)


def normalize_methods(raw: Any) -> List[CheckoutMethod]:
    """
    Parse a store's stored method list into `CheckoutMethod` objects.

    The column may hold a JSON array, a JSON-encoded string or a single
    mapping. Unparsable strings yield an empty list.
    """
    if raw is None:
        return []

    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return []

    if isinstance(raw, dict):
        raw = [raw]

    if not isinstance(raw, (list, tuple)):
        return []

    return [CheckoutMethod.from_raw(entry) for entry in raw]


def find_method(methods: List[CheckoutMethod], requested: str) -> Optional[CheckoutMethod]:
    """Return the first configured method matching the request."""
    for method in methods:
        if method.matches(requested):
            return method
    return None


def utcnow() -> datetime:
    """Naive UTC timestamp, matching how timestamps are stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
