"""Off-screen pixel images and the conversion of RGB colours to pixel values."""

from __future__ import annotations

from dataclasses import dataclass, field

_PAD_BITS = 32


@dataclass
class Image:
    """A rectangle of pixels stored row by row in a byte buffer.

    Each row is padded to a multiple of 32 bits. Pixels are stored with the
    byte order given by ``big_endian``.
    """

    width: int
    height: int
    bpp: int = 32
    big_endian: bool = False
    data: bytearray = field(init=False, repr=False)

    def __init__(self, width: int, height: int, bpp: int = 32, big_endian: bool = False):
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        if bpp <= 0 or bpp % 8 or bpp > 32:
            raise ValueError(f"unsupported bits per pixel: {bpp}")
        self.width = width
        self.height = height
        self.bpp = bpp
        self.big_endian = big_endian
        self.data = bytearray(self.size_line * height)

    @property
    def size_line(self) -> int:
        """Number of bytes in one row, padding included."""
        bits = self.width * self.bpp
        return (bits + _PAD_BITS - 1) // _PAD_BITS * (_PAD_BITS // 8)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color``; only its low ``bpp`` bits are kept."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        value = color & ((1 << self.bpp) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self.byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + opp], self.byteorder)


def _shift_and_bits(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, int, int, int, int, int]:
    """Return (shift, bits) for red, green and blue, flattened into six values."""
    result: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        result.extend(_shift_and_bits(mask))
    return tuple(result)  # type: ignore[return-value]


def get_color_value(color: int, depth: int, shifts: tuple[int, int, int, int, int, int]) -> int:
    """Convert a 0xRRGGBB colour to the pixel value of a visual.

    At depth 24 or more the colour is used unchanged; below that each
    channel is cut down to the visual's bits and moved to its place.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    r_shift, r_bits, g_shift, g_bits, b_shift, b_bits = shifts
    return (
        ((red >> (16 - r_bits)) << r_shift)
        + ((green >> (16 - g_bits)) << g_shift)
        + ((blue >> (16 - b_bits)) << b_shift)
    )