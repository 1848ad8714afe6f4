"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from polyspiral.engine import Contraction, Segment, Shape, SpiralLayout


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ShapeOut(BaseModel):
    sides: int
    central_angle: float
    rotation_degrees: float
    side_length: float
    height: float

    @classmethod
    def from_shape(cls, shape: Shape) -> ShapeOut:
        return cls(
            sides=shape.sides,
            central_angle=shape.central_angle,
            rotation_degrees=shape.rotation_degrees,
            side_length=shape.side_length,
            height=shape.height,
        )


class ContractionOut(BaseModel):
    inset: float
    outset: float

    @classmethod
    def from_contraction(cls, contraction: Contraction) -> ContractionOut:
        return cls(inset=contraction.inset, outset=contraction.outset)


class SegmentOut(BaseModel):
    side: int
    width: float
    text: str
    padding: float = 0.0
    continues: bool = False

    @classmethod
    def from_segment(cls, segment: Segment) -> SegmentOut:
        return cls(
            side=segment.side,
            width=segment.width,
            text=segment.text,
            padding=segment.padding,
            continues=segment.continues,
        )


class LayoutResponse(BaseModel):
    shape: ShapeOut
    contraction: ContractionOut
    total_size: float
    offset_top: float
    offset_left: float
    segments: list[SegmentOut] = Field(default_factory=list)
    processing_time_ms: float = 0.0

    @classmethod
    def from_layout(cls, result: SpiralLayout, processing_time_ms: float = 0.0) -> LayoutResponse:
        return cls(
            shape=ShapeOut.from_shape(result.shape),
            contraction=ContractionOut.from_contraction(result.contraction),
            total_size=result.total_size,
            offset_top=result.offset_top,
            offset_left=result.offset_left,
            segments=[SegmentOut.from_segment(s) for s in result.segments],
            processing_time_ms=processing_time_ms,
        )


class MeasureResponse(BaseModel):
    shape: ShapeOut
    contraction: ContractionOut
    widths: list[float] = Field(default_factory=list)
