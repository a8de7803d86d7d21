"""
AnswerSet: the answers collected so far on the estimate wizard.

Answers arrive as a loose field dict (from the HTTP layer or a caller) and are
normalized here. Nothing in this module raises for bad answer content:
unrecognized tags become "unset" and malformed sizes become an unresolved
quantity, both logged at WARNING.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from .models import (
    Grade, Material, PRIMARY_DIMENSIONS, Priority, RoomType, SizePreset, Usage, WorkType,
)
from .tables import DEFAULT_GRADE, SIZE_PRESETS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnswerSet:
    room_type: Optional[RoomType] = None
    size: Optional[SizePreset] = None
    custom_tatami: Optional[float] = None  # only read when size is CUSTOM
    work: Optional[WorkType] = None
    usage: Optional[Usage] = None
    priority: Optional[Priority] = None
    material: Optional[Material] = None
    grade: Grade = DEFAULT_GRADE

    @classmethod
    def from_fields(cls, fields: dict) -> "AnswerSet":
        """
        Build an AnswerSet from a field dict such as
        {"room_type": "detached", "size": "custom", "custom_tatami": "5.5", ...}.

        A bare number given as "size" is taken as a custom mat count.
        Missing keys and None values are unset answers.
        """
        size_value = fields.get("size")
        custom_tatami = fields.get("custom_tatami")
        if _looks_numeric(size_value):
            custom_tatami = size_value
            size = SizePreset.CUSTOM
        else:
            size = _parse_choice(SizePreset, size_value, "size")

        grade = _parse_choice(Grade, fields.get("grade"), "grade") or DEFAULT_GRADE

        return cls(
            room_type=_parse_choice(RoomType, fields.get("room_type"), "room_type"),
            size=size,
            custom_tatami=parse_tatami(custom_tatami) if size == SizePreset.CUSTOM else None,
            work=_parse_choice(WorkType, fields.get("work"), "work"),
            usage=_parse_choice(Usage, fields.get("usage"), "usage"),
            priority=_parse_choice(Priority, fields.get("priority"), "priority"),
            material=_parse_choice(Material, fields.get("material"), "material"),
            grade=grade,
        )


def parse_tatami(value) -> Optional[float]:
    """Parse a custom mat count from user input. Returns None if it isn't a number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(str(value).strip())
    except (ValueError, TypeError):
        logger.warning("Ignoring non-numeric custom size: %r", value)
        return None


def is_valid_tatami(value: Optional[float]) -> bool:
    """A custom mat count counts only if it is a positive, finite number."""
    return value is not None and math.isfinite(value) and value > 0


def is_answered(answers: AnswerSet, dimension: str) -> bool:
    """Whether one primary dimension holds a valid answer."""
    value = getattr(answers, dimension)
    if value is None:
        return False
    if dimension == "size" and value == SizePreset.CUSTOM:
        return is_valid_tatami(answers.custom_tatami)
    return True


def answered_count(answers: AnswerSet) -> int:
    """Number of the six primary dimensions answered (0..6). Grade never counts."""
    return sum(1 for d in PRIMARY_DIMENSIONS if is_answered(answers, d))


def tatami_count(answers: AnswerSet) -> float:
    """Resolved quantity in mats. 0.0 means unresolved."""
    if answers.size is None:
        return 0.0
    if answers.size == SizePreset.CUSTOM:
        if is_valid_tatami(answers.custom_tatami):
            return answers.custom_tatami
        return 0.0
    return SIZE_PRESETS[answers.size]["tatami"]


def _parse_choice(enum_cls, value, field_id: str):
    if value is None or value == "":
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip())
    except ValueError:
        logger.warning("Unrecognized %s answer %r: treating as unset", field_id, value)
        return None


def _looks_numeric(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        try:
            float(value.strip())
        except ValueError:
            return False
        return True
    return False
