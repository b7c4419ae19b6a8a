"""Colour channel masking for image previews."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Optional, Tuple


class Channel(IntFlag):
    """Image channels that can be shown or hidden."""

    NONE = 0
    RED = 1
    GREEN = 2
    BLUE = 4
    ALPHA = 8
    ALL = 15


_SINGLE_CHANNELS = (Channel.RED, Channel.GREEN, Channel.BLUE, Channel.ALPHA)
_COLOURS = Channel.RED | Channel.GREEN | Channel.BLUE


@dataclass
class ChannelMask:
    """The set of channels currently visible."""

    channels: Channel = Channel.ALL

    def __contains__(self, channel: Channel) -> bool:
        return bool(self.channels & channel)

    def toggle(self, channel: Channel, enabled: bool) -> bool:
        """Show or hide a single channel; return True if the mask changed."""
        if channel not in _SINGLE_CHANNELS or (channel in self) == bool(enabled):
            return False
        if enabled:
            self.channels |= channel
        else:
            self.channels &= ~channel
        return True


def apply_channels(
    rgb: bytes, alpha: Optional[bytes], channels: Channel
) -> Tuple[bytes, Optional[bytes]]:
    """Return the pixel data with hidden channels removed.

    ``rgb`` holds three bytes per pixel and ``alpha`` one byte per pixel, or
    is None for an opaque image. Hidden colours are zeroed. If all colours are
    hidden but alpha is shown, the alpha is drawn as grey and the result is
    opaque. A hidden alpha becomes fully opaque.
    """
    rgb = bytes(rgb)
    if len(rgb) % 3:
        raise ValueError("rgb data length must be a multiple of 3")
    pixels = len(rgb) // 3
    if alpha is not None:
        alpha = bytes(alpha)
        if len(alpha) != pixels:
            raise ValueError(f"alpha has {len(alpha)} bytes for {pixels} pixels")

    channels = Channel(channels)
    if channels == Channel.ALL:
        return rgb, alpha

    has_alpha = alpha is not None
    show_alpha = bool(channels & Channel.ALPHA)
    result_alpha = alpha

    if channels & _COLOURS != _COLOURS:
        colours = bytearray(rgb)
        alpha_cache = alpha if has_alpha and show_alpha else None
        if not channels & _COLOURS and show_alpha:
            grey = alpha_cache if alpha_cache is not None else b"\xff" * pixels
            for plane in range(3):
                colours[plane::3] = grey
            alpha_cache = None
        else:
            for plane, channel in enumerate((Channel.RED, Channel.GREEN, Channel.BLUE)):
                if not channels & channel:
                    colours[plane::3] = bytes(pixels)
        rgb = bytes(colours)
        # Replacing the colours drops the alpha unless it is restored below.
        result_alpha = alpha_cache

    if has_alpha and not show_alpha:
        result_alpha = b"\xff" * pixels

    return rgb, result_alpha