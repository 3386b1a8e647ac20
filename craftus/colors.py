"""Packed 15-bit colours as used by the GUI and world shaders."""

from __future__ import annotations

COLOR_WHITE = 0x7FFF


def shader_rgb(r: int, g: int, b: int) -> int:
    """Pack three 5-bit channels into one colour value."""
    return (b & 0x1F) | ((g & 0x1F) << 5) | ((r & 0x1F) << 10)


def shader_r(color: int) -> int:
    return (color >> 10) & 0x1F


def shader_g(color: int) -> int:
    return (color >> 5) & 0x1F


def shader_b(color: int) -> int:
    return color & 0x1F


def shader_rgb_mix(a: int, b: int) -> int:
    """Average of two packed colours, channel by channel."""
    return shader_rgb(
        (shader_r(a) + shader_r(b)) // 2,
        (shader_g(a) + shader_g(b)) // 2,
        (shader_b(a) + shader_b(b)) // 2,
    )


def shader_rgb_darken(color: int, factor: int) -> int:
    """Scale every channel by ``factor / 16`` (a .4 fixed point factor)."""
    return shader_rgb(
        shader_r(color) * factor // 16,
        shader_g(color) * factor // 16,
        shader_b(color) * factor // 16,
    )