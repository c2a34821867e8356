# models.py
import time
from datetime import date as Date
from enum import Enum
from typing import Dict, Iterable, Optional

from pydantic import BaseModel, Field, field_validator


class Priority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


# Display text only. Stored records always carry the enum value.
PRIORITY_LABELS: Dict[Priority, str] = {
    Priority.LOW: "Low",
    Priority.NORMAL: "Normal",
    Priority.HIGH: "High",
}


class Task(BaseModel):
    id: int
    task: str = Field(min_length=1)
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    importance: Priority = Priority.NORMAL
    completed: bool = False

    @field_validator("date")
    @classmethod
    def date_must_exist(cls, value: str) -> str:
        # Rejects dates like 2024-02-30 that still match the pattern.
        Date.fromisoformat(value)
        return value


class IdGenerator:
    """
    Hands out task ids based on the current time in milliseconds.
    Each id is strictly greater than the previous one, so two creates
    within the same millisecond still get distinct ids.
    """

    def __init__(self, clock=None):
        self._clock = clock or (lambda: int(time.time() * 1000))
        self._last = 0

    def next_id(self, existing: Optional[Iterable[int]] = None) -> int:
        floor = max(existing, default=0) if existing is not None else 0
        candidate = max(self._clock(), self._last + 1, floor + 1)
        self._last = candidate
        return candidate
