"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from polyspiral.engine import SpiralConfig


class LayoutRequest(BaseModel):
    size: float = Field(..., description="Edge length of the square bounding box")
    font_size: float = Field(..., description="Font size; drives character width and padding")
    sides: int = Field(..., description="Number of polygon sides (>= 3)")
    spacing: float = Field(..., description="Gap between consecutive laps")
    text: str = Field(..., description="Text to lay out; cycled until the spiral is full")

    def to_config(self) -> SpiralConfig:
        return SpiralConfig(
            size=self.size,
            font_size=self.font_size,
            sides=self.sides,
            spacing=self.spacing,
            text=self.text,
        )


class MeasureRequest(BaseModel):
    size: float = Field(..., description="Edge length of the square bounding box")
    font_size: float = Field(..., description="Font size reserved around the drawing area")
    sides: int = Field(..., description="Number of polygon sides (>= 3)")
    spacing: float = Field(..., description="Gap between consecutive laps")
    count: int = Field(default=0, ge=0, le=1000, description="Sides of width profile to preview")
