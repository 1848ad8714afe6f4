"""Layout data model — configuration in, immutable segments out.

SpiralConfig → Shape + Contraction → Segment* → SpiralLayout
LayoutContext is the single mutable state object for one run.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field

from polyspiral.engine.errors import DegenerateGeometry, InvalidConfiguration
from polyspiral.engine.words import WordQueue
from polyspiral.utils.geometry import central_angle, contraction, measure


def _check_positive(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfiguration(f"{name} must be a positive finite number, got {value!r}")


@dataclass(frozen=True)
class SpiralConfig:
    """Everything one layout run depends on."""

    size: float
    font_size: float
    sides: int
    spacing: float
    text: str

    def validate(self) -> None:
        """Raise InvalidConfiguration for any field that is out of range on its own."""
        validate_geometry(self.size, self.font_size, self.sides, self.spacing)
        if not isinstance(self.text, str) or not self.text.strip():
            raise InvalidConfiguration("text must contain at least one non-whitespace character")

    @property
    def total_size(self) -> float:
        """Drawing area edge once half a font size is reserved on each border."""
        return self.size - self.font_size


@dataclass(frozen=True)
class Shape:
    """Linear measurements of the regular polygon."""

    sides: int
    central_angle: float
    side_length: float
    height: float

    @classmethod
    def measure(cls, size: float, sides: int) -> Shape:
        angle = central_angle(sides)
        side_length, height = measure(size, sides, angle)
        return cls(sides=sides, central_angle=angle, side_length=side_length, height=height)

    @property
    def interior_angle(self) -> float:
        return math.pi - self.central_angle

    @property
    def rotation_degrees(self) -> float:
        """Rotation between consecutive sides, as the renderer applies it."""
        return math.degrees(self.central_angle)


@dataclass(frozen=True)
class Contraction:
    """Per-lap shrinkage: inset at lap seams, outset mid-lap (negative for 5+ sides)."""

    inset: float
    outset: float

    @classmethod
    def for_shape(cls, spacing: float, shape: Shape) -> Contraction:
        inset, outset = contraction(spacing, shape.central_angle)
        return cls(inset=inset, outset=outset)


@dataclass(frozen=True)
class Segment:
    """One side of the spiral with the text assigned to it."""

    side: int
    width: float
    text: str
    padding: float = 0.0
    # Text ends inside a word that the next segment finishes
    continues: bool = False


@dataclass(frozen=True)
class SpiralLayout:
    """Result of one layout run, outermost segment first."""

    config: SpiralConfig
    shape: Shape
    contraction: Contraction
    segments: tuple[Segment, ...]

    @property
    def total_size(self) -> float:
        return self.config.total_size

    @property
    def offset_top(self) -> float:
        return (self.total_size - self.shape.height) / 2

    @property
    def offset_left(self) -> float:
        return (self.total_size - self.shape.side_length) / 2

    @property
    def text(self) -> str:
        """Segment texts rejoined into the word stream they were cut from."""
        parts: list[str] = []
        for i, seg in enumerate(self.segments):
            if i and not self.segments[i - 1].continues:
                parts.append(" ")
            parts.append(seg.text)
        return "".join(parts)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)


@dataclass
class LayoutContext:
    """Shared state for a single layout run."""

    config: SpiralConfig
    shape: Shape
    contraction: Contraction
    words: WordQueue
    # Next side to compute (1-based)
    side: int = 1
    segments: list[Segment] = field(default_factory=list)
    # Why the run ended: "width", "budget" or "" while running
    stop_reason: str = ""

    @classmethod
    def prepare(cls, config: SpiralConfig) -> LayoutContext:
        """Validate, then measure. Raises before any segment is computed."""
        config.validate()
        shape, contraction = measure_geometry(
            config.size, config.font_size, config.sides, config.spacing
        )
        return cls(
            config=config,
            shape=shape,
            contraction=contraction,
            words=WordQueue.from_text(config.text),
        )


def validate_geometry(size: float, font_size: float, sides: int, spacing: float) -> None:
    if isinstance(sides, bool) or not isinstance(sides, numbers.Integral):
        raise InvalidConfiguration(f"sides must be an integer, got {sides!r}")
    if sides < 3:
        raise InvalidConfiguration(f"sides must be at least 3, got {sides}")
    _check_positive("size", size)
    _check_positive("font_size", font_size)
    _check_positive("spacing", spacing)


def measure_geometry(
    size: float, font_size: float, sides: int, spacing: float
) -> tuple[Shape, Contraction]:
    """Shape and per-lap contraction of the drawing area left inside `size`."""
    validate_geometry(size, font_size, sides, spacing)
    total_size = size - font_size
    if total_size <= 0:
        raise DegenerateGeometry(
            f"size {size} must exceed font_size {font_size} to leave a drawing area"
        )
    shape = Shape.measure(total_size, sides)
    if not shape.side_length > 0:
        raise DegenerateGeometry(f"Side length {shape.side_length:.4f} leaves no drawable side")
    return shape, Contraction.for_shape(spacing, shape)
