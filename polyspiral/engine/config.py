"""Engine configuration — tunables for character metrics and run limits."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Controls how widths turn into character budgets."""

    # Average glyph width is font_size / divisor (0.5em rendered as 1ch)
    char_width_divisor: float = 1.5

    # Padding is half a character at this side count, scaled by reference/sides
    padding_reference_sides: int = 4

    # Hard cap on emitted segments; None = bounded only by geometry
    max_segments: int | None = None

    def char_width(self, font_size: float) -> float:
        return font_size / self.char_width_divisor

    def padding(self, font_size: float, sides: int) -> float:
        """Horizontal padding applied at both ends of every side."""
        return self.char_width(font_size) / 2 * (self.padding_reference_sides / sides)
