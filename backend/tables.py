# Tatami estimate reference data: coefficients, unit prices (JPY), add-on fees.
# Every value here is a fixed constant; nothing is interpolated.

from types import MappingProxyType

from .models import (
    Grade, Material, PriceTableKey, Priority, RoomType, SizePreset, Usage, WorkType,
)


def _frozen(mapping: dict) -> MappingProxyType:
    """Read-only view of a (possibly nested) dict."""
    return MappingProxyType({
        k: _frozen(v) if isinstance(v, dict) else v
        for k, v in mapping.items()
    })


# --- Coefficients (multipliers) ---

ROOM_TYPE_COEF = _frozen({
    RoomType.DETACHED: 1.00,
    RoomType.MANSION: 1.15,
    RoomType.LIVING: 0.95,
    RoomType.UNKNOWN: 1.10,
})

WORK_COEF = _frozen({
    WorkType.REPLACE: 1.00,
    WorkType.NEW: 1.80,
    WorkType.OKIDATAMI: 1.30,
    WorkType.UNKNOWN: 1.30,
})

USAGE_COEF = _frozen({
    Usage.DAILY: 1.00,
    Usage.KIDS: 1.15,
    Usage.PETS: 1.25,
    Usage.CARE: 1.35,
    Usage.UNKNOWN: 1.00,
})

PRIORITY_COEF = _frozen({
    Priority.COST: 0.90,
    Priority.HEALTH: 1.20,
    Priority.DURABILITY: 1.15,
    Priority.DESIGN: 1.25,
    Priority.UNKNOWN: 1.00,
})

MATERIAL_COEF = _frozen({
    Material.IGUSA_CN: 1.00,
    Material.IGUSA_JP: 1.00,
    Material.RESIN: 0.95,
    Material.WASHI: 1.10,
    Material.ANY: 0.90,
})

# Named sizes: mat count + fixed multiplier
SIZE_PRESETS = _frozen({
    SizePreset.SMALL: {"tatami": 4.5, "coef": 1.20},
    SizePreset.SIX: {"tatami": 6.0, "coef": 1.00},
    SizePreset.EIGHT_PLUS: {"tatami": 8.0, "coef": 0.95},
})

NEUTRAL_COEF = 1.00


# --- Base unit prices (JPY per mat, per panel for okidatami) ---

WORK_TO_PRICE_TABLE = _frozen({
    WorkType.REPLACE: PriceTableKey.REPLACE,
    WorkType.NEW: PriceTableKey.NEW_INSTALL,
    WorkType.OKIDATAMI: PriceTableKey.OKIDATAMI,
    WorkType.UNKNOWN: PriceTableKey.REPLACE,
})

DEFAULT_PRICE_TABLE = PriceTableKey.REPLACE
# No material preference yet → resin row, the "no-preference" baseline
DEFAULT_PRICE_MATERIAL = Material.RESIN
DEFAULT_GRADE = Grade.STANDARD

PRICE_TABLE = _frozen({
    PriceTableKey.REPLACE: {
        Material.IGUSA_CN: {Grade.ECONOMY: 5500, Grade.STANDARD: 6500, Grade.PREMIUM: 7500, Grade.DELUXE: 9000},
        Material.IGUSA_JP: {Grade.ECONOMY: 8000, Grade.STANDARD: 9000, Grade.PREMIUM: 10500, Grade.DELUXE: 12000},
        Material.RESIN: {Grade.ECONOMY: 6000, Grade.STANDARD: 7000, Grade.PREMIUM: 8500, Grade.DELUXE: 10000},
        Material.WASHI: {Grade.ECONOMY: 7500, Grade.STANDARD: 9000, Grade.PREMIUM: 11000, Grade.DELUXE: 13000},
        Material.ANY: {Grade.ECONOMY: 6000, Grade.STANDARD: 7000, Grade.PREMIUM: 8500, Grade.DELUXE: 10000},
    },
    PriceTableKey.NEW_INSTALL: {
        Material.IGUSA_CN: {Grade.ECONOMY: 11000, Grade.STANDARD: 13000, Grade.PREMIUM: 15000, Grade.DELUXE: 17000},
        Material.IGUSA_JP: {Grade.ECONOMY: 16000, Grade.STANDARD: 18000, Grade.PREMIUM: 21000, Grade.DELUXE: 25000},
        Material.RESIN: {Grade.ECONOMY: 12000, Grade.STANDARD: 14000, Grade.PREMIUM: 16500, Grade.DELUXE: 19000},
        Material.WASHI: {Grade.ECONOMY: 15000, Grade.STANDARD: 17500, Grade.PREMIUM: 20000, Grade.DELUXE: 23000},
        Material.ANY: {Grade.ECONOMY: 12000, Grade.STANDARD: 14000, Grade.PREMIUM: 16500, Grade.DELUXE: 19000},
    },
    PriceTableKey.OKIDATAMI: {
        Material.IGUSA_CN: {Grade.ECONOMY: 4500, Grade.STANDARD: 5500, Grade.PREMIUM: 6500, Grade.DELUXE: 7500},
        Material.IGUSA_JP: {Grade.ECONOMY: 6500, Grade.STANDARD: 7500, Grade.PREMIUM: 9000, Grade.DELUXE: 10500},
        Material.RESIN: {Grade.ECONOMY: 5000, Grade.STANDARD: 6000, Grade.PREMIUM: 7000, Grade.DELUXE: 8500},
        Material.WASHI: {Grade.ECONOMY: 6000, Grade.STANDARD: 7000, Grade.PREMIUM: 8500, Grade.DELUXE: 10000},
        Material.ANY: {Grade.ECONOMY: 5000, Grade.STANDARD: 6000, Grade.PREMIUM: 7000, Grade.DELUXE: 8500},
    },
})


# --- Add-on processing fees (JPY per mat) ---

ADD_ON_FEES = _frozen({
    "antibacterial": 800,
    "anti_mite": 1000,
    "anti_mold": 800,
    "deodorize": 1200,
    "anti_soil": 1000,
    "durable": 1500,
    "anti_slip": 1200,
    "design_edge": 1500,
    "color_tatami": 2000,
})

# Rules are layered, not de-duplicated: kids + health charges antibacterial twice.
USAGE_ADD_ONS = _frozen({
    Usage.KIDS: ("antibacterial", "anti_mite"),
    Usage.PETS: ("deodorize", "anti_soil", "durable"),
    Usage.CARE: ("anti_slip", "anti_mold"),
})

PRIORITY_ADD_ONS = _frozen({
    Priority.HEALTH: ("antibacterial", "anti_mite", "anti_mold"),
    Priority.DURABILITY: ("anti_soil", "durable"),
    Priority.DESIGN: ("design_edge", "color_tatami"),
})


# --- Confidence policy: answered count → (accuracy %, ± spread) ---

CONFIDENCE_TABLE = _frozen({
    0: (0, 0.60),
    1: (10, 0.50),
    2: (25, 0.40),
    3: (40, 0.30),
    4: (60, 0.20),
    5: (80, 0.15),
    6: (95, 0.10),
})

# Provisional spreads of the two pricing tiers
COARSE_SPREAD = 0.30
REFINED_SPREAD = 0.10
