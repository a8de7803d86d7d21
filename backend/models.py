import enum


# --- Answer dimensions ---
# Each primary question on the estimate wizard answers exactly one of these.
# "unknown" / "any" are real answers, not the absence of one.

class RoomType(str, enum.Enum):
    DETACHED = "detached"
    MANSION = "mansion"
    LIVING = "living"
    UNKNOWN = "unknown"


class SizePreset(str, enum.Enum):
    SMALL = "small"
    SIX = "six"
    EIGHT_PLUS = "eightPlus"
    CUSTOM = "custom"  # quantity comes from custom_tatami


class WorkType(str, enum.Enum):
    REPLACE = "replace"
    NEW = "new"
    OKIDATAMI = "okidatami"
    UNKNOWN = "unknown"


class Usage(str, enum.Enum):
    DAILY = "daily"
    KIDS = "kids"
    PETS = "pets"
    CARE = "care"
    UNKNOWN = "unknown"


class Priority(str, enum.Enum):
    COST = "cost"
    HEALTH = "health"
    DURABILITY = "durability"
    DESIGN = "design"
    UNKNOWN = "unknown"


class Material(str, enum.Enum):
    IGUSA_CN = "igusa_cn"
    IGUSA_JP = "igusa_jp"
    RESIN = "resin"
    WASHI = "washi"
    ANY = "any"


class Grade(str, enum.Enum):
    ECONOMY = "economy"
    STANDARD = "standard"
    PREMIUM = "premium"
    DELUXE = "deluxe"


class PriceTableKey(str, enum.Enum):
    REPLACE = "replace"          # re-covering existing mats
    NEW_INSTALL = "new_install"  # full new mats
    OKIDATAMI = "okidatami"      # loose-lay panels, priced per panel


class Tier(str, enum.Enum):
    COARSE = "coarse"
    REFINED = "refined"


# Order the wizard asks them in. Grade is not a primary dimension.
PRIMARY_DIMENSIONS = [
    "room_type",
    "size",
    "work",
    "usage",
    "priority",
    "material",
]
