"""Shared test fixtures."""

from __future__ import annotations

import pytest

from polyspiral.engine import SpiralConfig

LONG_WORD = "supercalifragilisticexpialidocious"

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua."
)


def make_config(**overrides) -> SpiralConfig:
    fields = {"size": 300.0, "font_size": 20.0, "sides": 6, "spacing": 10.0, "text": "hello world"}
    fields.update(overrides)
    return SpiralConfig(**fields)


@pytest.fixture
def hexagon_config() -> SpiralConfig:
    return make_config()


@pytest.fixture
def square_config() -> SpiralConfig:
    return make_config(sides=4, text=LOREM)


@pytest.fixture
def triangle_config() -> SpiralConfig:
    return make_config(sides=3, text=LOREM)


@pytest.fixture
def long_word_config() -> SpiralConfig:
    # Every side of this square holds 12 characters
    return make_config(size=100.0, font_size=10.0, sides=4, spacing=5.0, text=LONG_WORD)
