"""Segment layout engine — walks the spiral side by side and fills each with words."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Generator

import numpy as np
from numpy.typing import NDArray

from polyspiral.engine.config import EngineConfig
from polyspiral.engine.context import (
    Contraction,
    LayoutContext,
    Segment,
    Shape,
    SpiralConfig,
    SpiralLayout,
)
from polyspiral.engine.errors import DegenerateGeometry, SegmentLimitExceeded
from polyspiral.engine.laps import lap_count_table, lap_counts
from polyspiral.engine.words import WordQueue

logger = logging.getLogger(__name__)


def outer_width(shape: Shape, contraction: Contraction, side: int) -> float:
    num_insets, num_outsets = lap_counts(side, shape.sides)
    return shape.side_length - contraction.inset * num_insets - contraction.outset * num_outsets


def fill_side(words: WordQueue, budget: int) -> tuple[str, bool]:
    """Greedily take words until `budget` characters are used.

    Returns the side's text and whether it ends inside a split word. A
    separator is only added while more than one character remains, so text
    never ends in a space.
    """
    parts: list[str] = []
    while budget > 0:
        token = words.take_front()
        if token.is_full_word:
            words.requeue_back(token)
        if len(token) > budget:
            parts.append(words.split_and_return(token, budget))
            return "".join(parts), True
        parts.append(token.text)
        budget -= len(token)
        if budget <= 1:
            break
        parts.append(" ")
        budget -= 1
    return "".join(parts), False


def _advance(ctx: LayoutContext, engine: EngineConfig) -> Segment | None:
    """Compute the segment for ctx.side, or record why the spiral ends there."""
    config = ctx.config
    width = outer_width(ctx.shape, ctx.contraction, ctx.side)
    if width < ctx.contraction.inset:
        ctx.stop_reason = "width"
        return None

    padding = engine.padding(config.font_size, config.sides)
    inner = width - padding * 2
    budget = math.floor(inner / engine.char_width(config.font_size))
    if budget <= 0:
        ctx.stop_reason = "budget"
        return None

    if engine.max_segments is not None and ctx.side > engine.max_segments:
        raise SegmentLimitExceeded(
            f"Layout needs more than {engine.max_segments} segments; "
            "increase spacing or reduce size"
        )

    text, continues = fill_side(ctx.words, budget)
    return Segment(side=ctx.side, width=width, text=text, padding=padding, continues=continues)


def _run(ctx: LayoutContext, engine: EngineConfig) -> Generator[Segment, None, None]:
    logger.debug(
        "Shape: %d sides, side_length=%.3f height=%.3f; inset=%.3f outset=%.3f",
        ctx.config.sides,
        ctx.shape.side_length,
        ctx.shape.height,
        ctx.contraction.inset,
        ctx.contraction.outset,
    )
    while True:
        segment = _advance(ctx, engine)
        if segment is None:
            break
        ctx.segments.append(segment)
        ctx.side += 1
        yield segment

    logger.debug("Spiral ended at side %d (%s)", ctx.side, ctx.stop_reason)
    if not ctx.segments:
        raise DegenerateGeometry(
            f"No side fits a single character (side_length={ctx.shape.side_length:.3f}, "
            f"font_size={ctx.config.font_size}); increase size or reduce font_size"
        )


def iter_segments(
    config: SpiralConfig,
    engine: EngineConfig | None = None,
) -> Generator[Segment, None, None]:
    """Yield segments outermost first.

    Configuration errors surface on the first next(), before any segment.
    """
    ctx = LayoutContext.prepare(config)
    yield from _run(ctx, engine or EngineConfig())


def layout(config: SpiralConfig, engine: EngineConfig | None = None) -> SpiralLayout:
    """Lay `config.text` out along the inward spiral of a regular polygon."""
    start = time.perf_counter()
    ctx = LayoutContext.prepare(config)
    for _ in _run(ctx, engine or EngineConfig()):
        pass

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Layout complete: %d-gon, %d segments in %.1fms",
        config.sides,
        len(ctx.segments),
        elapsed,
    )
    return SpiralLayout(
        config=config,
        shape=ctx.shape,
        contraction=ctx.contraction,
        segments=tuple(ctx.segments),
    )


def outer_width_profile(shape: Shape, contraction: Contraction, count: int) -> NDArray[np.float64]:
    """Outer widths of sides 1..count, ignoring text and termination."""
    num_insets, num_outsets = lap_count_table(count, shape.sides)
    return shape.side_length - contraction.inset * num_insets - contraction.outset * num_outsets
