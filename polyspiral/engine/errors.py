"""Layout error taxonomy. Every error is raised synchronously and never defaulted away."""

from __future__ import annotations


class LayoutError(ValueError):
    """Base class for every failure the layout engine reports."""


class InvalidConfiguration(LayoutError):
    """A configuration field is out of range on its own (sides < 3, size <= 0, empty text)."""


class DegenerateGeometry(LayoutError):
    """Fields are individually valid but jointly leave no usable drawing area."""


class SegmentLimitExceeded(LayoutError):
    """The run would produce more segments than the configured cap allows."""
