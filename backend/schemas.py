from pydantic import BaseModel
from typing import Optional, List, Union
from .models import Grade, Material, Priority, RoomType, SizePreset, Usage, WorkType

class EstimateRequest(BaseModel):
    room_type: Optional[RoomType] = None
    # Preset name, or a bare mat count
    size: Optional[Union[SizePreset, float]] = None
    # Read when size == "custom". Lenient on purpose: bad input withholds the estimate
    custom_tatami: Optional[Union[float, str]] = None
    work: Optional[WorkType] = None
    usage: Optional[Usage] = None
    priority: Optional[Priority] = None
    material: Optional[Material] = None
    grade: Optional[Grade] = None

class EstimateRange(BaseModel):
    center: float
    low: int
    high: int
    provisional_low: float
    provisional_high: float

class AddOnItem(BaseModel):
    name: str
    source: str
    per_unit: int

class PriceComposition(BaseModel):
    tatami_count: float
    unit: str
    base_unit_price: int
    coefficients: dict
    coefficient_product: float
    add_ons: List[AddOnItem] = []
    add_on_per_unit: int = 0
    add_on_total: float = 0.0

class Question(BaseModel):
    id: str
    step: int
    text: str
    type: str
    options: List[str]
    custom_field: Optional[str] = None
    unit: Optional[str] = None
    secondary: Optional[dict] = None

class CompletionStatus(BaseModel):
    is_complete: bool
    answered: int
    total: int
    missing: List[str]
    completion_pct: float

class EstimateResponse(BaseModel):
    answered_count: int
    accuracy_percent: int
    spread: float
    tier: Optional[str] = None
    estimate: Optional[EstimateRange] = None
    composition: PriceComposition
    next_question: Optional[Question] = None
    completion: CompletionStatus
    currency: str
