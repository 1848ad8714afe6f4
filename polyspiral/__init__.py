"""polyspiral — lay text out along the inward spiral of a regular polygon."""

from polyspiral.engine import EngineConfig, SpiralConfig, SpiralLayout, layout

__version__ = "0.1.0"

__all__ = ["EngineConfig", "SpiralConfig", "SpiralLayout", "layout", "__version__"]
