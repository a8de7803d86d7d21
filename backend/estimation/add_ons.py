"""
Add-on accumulator: flat per-mat processing fees triggered by usage and priority.

Usage and priority rules are applied independently and summed. Overlaps are
charged twice (kids + health both add antibacterial). The total is added on
top of the multiplied price, never multiplied itself.
"""

from ..tables import ADD_ON_FEES, PRIORITY_ADD_ONS, USAGE_ADD_ONS


class AddOnAccumulator:
    """Builds the add-on section of an estimate from usage + priority answers."""

    def applied_add_ons(self, usage=None, priority=None) -> list:
        """
        Ordered list of fees that apply, usage rules first.

        Returns: [{"name": str, "source": "usage" | "priority", "per_unit": int}, ...]
        """
        applied = []
        for name in USAGE_ADD_ONS.get(usage, ()):
            applied.append({"name": name, "source": "usage", "per_unit": ADD_ON_FEES[name]})
        for name in PRIORITY_ADD_ONS.get(priority, ()):
            applied.append({"name": name, "source": "priority", "per_unit": ADD_ON_FEES[name]})
        return applied

    def per_unit(self, usage=None, priority=None) -> int:
        """Sum of all applied fees, per mat."""
        return sum(item["per_unit"] for item in self.applied_add_ons(usage, priority))

    def build(self, usage, priority, tatami: float) -> dict:
        """
        Returns:
            {
                add_ons: list,          # from applied_add_ons
                add_on_per_unit: int,
                add_on_total: float,    # per_unit × tatami
            }
        """
        add_ons = self.applied_add_ons(usage, priority)
        per_unit = sum(item["per_unit"] for item in add_ons)
        return {
            "add_ons": add_ons,
            "add_on_per_unit": per_unit,
            "add_on_total": round(per_unit * tatami, 2),
        }
