import logging

import numpy as np
import pytest

from blendsplit.composite.blend import (
    BLEND_FUNC,
    blend,
    get_mode,
    multiply,
    resolve_mode,
    screen,
)
from blendsplit.constants import BlendMode
from blendsplit.errors import InvalidParameters

from ..utils import BLACK, GRAY, WHITE, pixels, solid, with_fraction

logger = logging.getLogger(__name__)

A = np.arange(256)[:, np.newaxis]
B = np.arange(256)[np.newaxis, :]


def test_multiply_table() -> None:
    result = multiply(A, B)
    assert result.dtype == np.uint8
    assert np.array_equal(result, np.floor(A * B / 255.0 + 0.5))


def test_screen_table() -> None:
    result = screen(A, B)
    assert result.dtype == np.uint8
    expected = 255 - np.floor((255 - A) * (255 - B) / 255.0 + 0.5)
    assert np.array_equal(result, expected)


@pytest.mark.parametrize("func", [multiply, screen])
def test_blend_monotonic(func) -> None:
    result = func(A, B).astype(np.int32)
    assert np.all(np.diff(result, axis=0) >= 0)
    assert np.all(np.diff(result, axis=1) >= 0)
    assert result.min() == 0
    assert result.max() == 255


@pytest.mark.parametrize("func", [multiply, screen])
def test_blend_symmetric(func) -> None:
    result = func(A, B)
    assert np.array_equal(result, result.T)


def test_blend_identities() -> None:
    assert multiply([255, 255, 255], [0, 0, 0]).tolist() == [0, 0, 0]
    assert screen([0, 0, 0], [255, 255, 255]).tolist() == [255, 255, 255]
    values = np.arange(256)
    assert np.array_equal(multiply(values, 255), values)
    assert np.array_equal(screen(values, 0), values)


@pytest.mark.parametrize(
    "a, b, expected_multiply, expected_screen",
    [
        (128, 128, 64, 192),
        (200, 10, 8, 202),
        (1, 1, 0, 2),
    ],
)
def test_blend_values(a: int, b: int, expected_multiply: int, expected_screen: int) -> None:
    assert int(multiply(a, b)) == expected_multiply
    assert int(screen(a, b)) == expected_screen


def test_blend_func_table() -> None:
    assert set(BLEND_FUNC) == {BlendMode.MULTIPLY, BlendMode.SCREEN}


@pytest.mark.parametrize(
    "mode, expected",
    [
        ("multiply", BlendMode.MULTIPLY),
        ("Screen", BlendMode.SCREEN),
        ("AUTO", BlendMode.AUTO),
        (BlendMode.SCREEN, BlendMode.SCREEN),
    ],
)
def test_get_mode(mode, expected: BlendMode) -> None:
    assert get_mode(mode) == expected


@pytest.mark.parametrize("mode", ["overlay", "", 3])
def test_get_mode_error(mode) -> None:
    with pytest.raises(InvalidParameters):
        get_mode(mode)


@pytest.mark.parametrize(
    "incoming, expected",
    [
        (solid(10, 10, WHITE), BlendMode.MULTIPLY),
        (solid(10, 10, BLACK), BlendMode.SCREEN),
        (with_fraction(10, 10, 30, WHITE, GRAY), BlendMode.MULTIPLY),
        (with_fraction(10, 10, 30, BLACK, GRAY), BlendMode.MULTIPLY),
        (solid(10, 10, GRAY), BlendMode.MULTIPLY),
    ],
)
def test_resolve_auto(incoming, expected: BlendMode) -> None:
    assert resolve_mode(BlendMode.AUTO, incoming) == expected


@pytest.mark.parametrize("mode", [BlendMode.MULTIPLY, BlendMode.SCREEN])
def test_resolve_explicit(mode: BlendMode) -> None:
    assert resolve_mode(mode, solid(4, 4, WHITE)) == mode
    assert resolve_mode(mode, solid(4, 4, BLACK)) == mode


def test_blend_keeps_backdrop_alpha() -> None:
    backdrop = solid(3, 2, (200, 100, 50, 77))
    source = solid(3, 2, (128, 255, 0, 255))
    assert pixels(blend("multiply", backdrop, source)) == {(100, 100, 0, 77)}
    assert pixels(blend("screen", backdrop, source)) == {(228, 255, 50, 77)}


def test_blend_does_not_modify_inputs() -> None:
    backdrop = solid(2, 2, GRAY)
    source = solid(2, 2, BLACK)
    blend(BlendMode.MULTIPLY, backdrop, source)
    assert pixels(backdrop) == {GRAY}
    assert pixels(source) == {BLACK}


def test_blend_errors() -> None:
    with pytest.raises(InvalidParameters):
        blend(BlendMode.AUTO, solid(2, 2, GRAY), solid(2, 2, GRAY))
    with pytest.raises(InvalidParameters):
        blend(BlendMode.MULTIPLY, solid(2, 2, GRAY), solid(3, 2, GRAY))
