"""Liturgical colors and their UI shade ramps.

The ramps are static theme configuration (Tailwind-style 50..900 steps),
not derived from the base hex value.
"""

from dataclasses import dataclass, field
from types import MappingProxyType

SHADE_STEPS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)


@dataclass(frozen=True)
class LiturgicalColor:
    name: str
    hex: str
    shades: MappingProxyType = field(compare=False, repr=False)

    def to_dict(self):
        return {
            "color": self.name,
            "hex": self.hex,
            "tailwind": {str(step): value for step, value in self.shades.items()},
        }


def _color(name, hex_value, ramp):
    return LiturgicalColor(name, hex_value, MappingProxyType(dict(zip(SHADE_STEPS, ramp, strict=True))))


WHITE = _color(
    "white",
    "#ffffff",
    ("#ffffff", "#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af", "#6b7280", "#4b5563", "#374151", "#1f2937"),
)
RED = _color(
    "red",
    "#dc2626",
    ("#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171", "#ef4444", "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d"),
)
GREEN = _color(
    "green",
    "#16a34a",
    ("#f0fdf4", "#dcfce7", "#bbf7d0", "#86efac", "#4ade80", "#22c55e", "#16a34a", "#15803d", "#166534", "#14532d"),
)
PURPLE = _color(
    "purple",
    "#9333ea",
    ("#faf5ff", "#f3e8ff", "#e9d5ff", "#d8b4fe", "#c084fc", "#a855f7", "#9333ea", "#7e22ce", "#6b21a8", "#581c87"),
)
ROSE = _color(
    "rose",
    "#e11d48",
    ("#fff1f2", "#ffe4e6", "#fecdd3", "#fda4af", "#fb7185", "#f43f5e", "#e11d48", "#be123c", "#9f1239", "#881337"),
)
GOLD = _color(
    "gold",
    "#f59e0b",
    ("#fffbeb", "#fef3c7", "#fde68a", "#fcd34d", "#fbbf24", "#f59e0b", "#d97706", "#b45309", "#92400e", "#78350f"),
)

LITURGICAL_COLORS = MappingProxyType({c.name: c for c in (WHITE, RED, GREEN, PURPLE, ROSE, GOLD)})

# Ordered choices for validation and admin dropdowns
COLOR_NAMES = tuple(LITURGICAL_COLORS)


def get_color(name):
    """Return the color registered under *name* (case-insensitive), or None."""
    if not isinstance(name, str):
        return None
    return LITURGICAL_COLORS.get(name.strip().lower())
