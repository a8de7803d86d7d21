"""
Base price resolver: (work, material, grade) → unit price in JPY.

Work picks the table, material the row, grade the column. An unset work
prices from the re-cover table; an unset material prices from the resin row.
"""

from ..models import Grade, PriceTableKey, WorkType
from ..tables import (
    DEFAULT_GRADE, DEFAULT_PRICE_MATERIAL, DEFAULT_PRICE_TABLE, PRICE_TABLE, WORK_TO_PRICE_TABLE,
)


def price_table_for(work) -> PriceTableKey:
    """Which of the three price tables a work answer prices from."""
    return WORK_TO_PRICE_TABLE.get(work, DEFAULT_PRICE_TABLE)


def unit_label(work) -> str:
    """Loose-lay panels are sold per panel, everything else per mat."""
    return "panel" if work == WorkType.OKIDATAMI else "mat"


def resolve_base_price(work=None, material=None, grade: Grade = DEFAULT_GRADE) -> int:
    table = PRICE_TABLE[price_table_for(work)]
    row = table.get(material, table[DEFAULT_PRICE_MATERIAL])
    return row.get(grade, row[DEFAULT_GRADE])
