"""
Estimate API: stateless wrapper around the estimation engine.

POST /api/estimate                     : Price the answers given so far
GET  /api/estimate/questions           : The six wizard questions, in order
GET  /api/estimate/questions/{id}      : One question
GET  /api/estimate/options             : Every lookup table, for auditing
"""

import logging

from fastapi import APIRouter, HTTPException

from .. import schemas, tables
from ..answers import AnswerSet
from ..config import settings
from ..estimation.engine import EstimationEngine
from ..questions import get_all_questions, get_completion_status, get_next_question, get_question

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/estimate", tags=["estimate"])

# Singleton engine: no state between requests
engine = EstimationEngine()


@router.post("", response_model=schemas.EstimateResponse)
def create_estimate(request: schemas.EstimateRequest):
    """
    Price one answer set. Every call is independent: the wizard re-posts the
    full set of answers each time one changes.
    """
    fields = request.model_dump(exclude_none=True)
    fields.setdefault("grade", settings.DEFAULT_GRADE)
    answers = AnswerSet.from_fields(fields)

    result = engine.estimate(answers)
    logger.info(
        "Estimate: answered=%d tier=%s center=%s",
        result["answered_count"],
        result["tier"],
        result["estimate"]["center"] if result["estimate"] else None,
    )

    return {
        **result,
        "next_question": get_next_question(answers),
        "completion": get_completion_status(answers),
        "currency": settings.CURRENCY,
    }


@router.get("/questions", response_model=list[schemas.Question])
def list_questions():
    return get_all_questions()


@router.get("/questions/{question_id}", response_model=schemas.Question)
def read_question(question_id: str):
    try:
        return get_question(question_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown question: {question_id}")


def _plain(mapping):
    """Lookup tables as plain JSON-able dicts (enum keys → their string values)."""
    if hasattr(mapping, "items"):
        return {getattr(k, "value", k): _plain(v) for k, v in mapping.items()}
    if isinstance(mapping, tuple):
        return list(mapping)
    return mapping


@router.get("/options")
def list_options():
    """All coefficients, prices and fees the engine prices from."""
    return {
        "currency": settings.CURRENCY,
        "coefficients": {
            "room_type": _plain(tables.ROOM_TYPE_COEF),
            "size": _plain(tables.SIZE_PRESETS),
            "work": _plain(tables.WORK_COEF),
            "usage": _plain(tables.USAGE_COEF),
            "priority": _plain(tables.PRIORITY_COEF),
            "material": _plain(tables.MATERIAL_COEF),
        },
        "price_table": _plain(tables.PRICE_TABLE),
        "add_on_fees": _plain(tables.ADD_ON_FEES),
        "add_on_rules": {
            "usage": _plain(tables.USAGE_ADD_ONS),
            "priority": _plain(tables.PRIORITY_ADD_ONS),
        },
        "confidence": {
            str(answered): {"accuracy_percent": accuracy, "spread": spread}
            for answered, (accuracy, spread) in tables.CONFIDENCE_TABLE.items()
        },
    }
