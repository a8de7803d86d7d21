"""
Question catalog: the six wizard questions, in the order they are asked.

Tracks which ones are answered so the wizard knows what to ask next.
"Answered" follows the same rule as the answered count: a custom size only
counts once it has a positive mat count.
"""

import copy
from typing import Optional

from .answers import AnswerSet, is_answered
from .models import (
    Grade, Material, Priority, RoomType, SizePreset, Usage, WorkType,
)
from .tables import DEFAULT_GRADE

QUESTIONS = [
    {
        "id": "room_type",
        "step": 1,
        "text": "What kind of room is it?",
        "type": "choice",
        "options": [o.value for o in RoomType],
    },
    {
        "id": "size",
        "step": 2,
        "text": "How many mats does the room hold?",
        "type": "choice",
        "options": [o.value for o in SizePreset],
        "custom_field": "custom_tatami",
        "unit": "tatami",
    },
    {
        "id": "work",
        "step": 3,
        "text": "What work do you need?",
        "type": "choice",
        "options": [o.value for o in WorkType],
    },
    {
        "id": "usage",
        "step": 4,
        "text": "How will the room be used?",
        "type": "choice",
        # "unknown" is accepted but not offered on the wizard
        "options": [o.value for o in Usage if o != Usage.UNKNOWN],
    },
    {
        "id": "priority",
        "step": 5,
        "text": "What matters most to you?",
        "type": "choice",
        "options": [o.value for o in Priority if o != Priority.UNKNOWN],
    },
    {
        "id": "material",
        "step": 6,
        "text": "Which mat style do you prefer?",
        "type": "choice",
        "options": [o.value for o in Material if o != Material.ANY],
        "secondary": {
            "id": "grade",
            "type": "select",
            "options": [g.value for g in Grade],
            "default": DEFAULT_GRADE.value,
        },
    },
]

_BY_ID = {q["id"]: q for q in QUESTIONS}


def get_all_questions() -> list[dict]:
    return [copy.deepcopy(q) for q in QUESTIONS]


def get_question(question_id: str) -> dict:
    """Raises KeyError for an unknown id."""
    return copy.deepcopy(_BY_ID[question_id])


def get_next_question(answers: AnswerSet) -> Optional[dict]:
    """First question, in wizard order, without a valid answer. None once all six are in."""
    for question in QUESTIONS:
        if not is_answered(answers, question["id"]):
            return copy.deepcopy(question)
    return None


def get_completion_status(answers: AnswerSet) -> dict:
    answered = [q["id"] for q in QUESTIONS if is_answered(answers, q["id"])]
    missing = [q["id"] for q in QUESTIONS if q["id"] not in answered]
    return {
        "is_complete": not missing,
        "answered": len(answered),
        "total": len(QUESTIONS),
        "missing": missing,
        "completion_pct": round(len(answered) / len(QUESTIONS) * 100, 1),
    }
