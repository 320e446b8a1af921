import pytest

from solong.image import Image, get_color_value, rgb_shifts

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242

TRUECOLOR = (0xFF0000, 0xFF00, 0xFF)


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize(
    "w, h, kind", [(IM1_SX, IM1_SY, 1), (IM3_SX, IM3_SY, 1), (IM3_SX, IM3_SY, 2)]
)
@pytest.mark.parametrize("big_endian", [False, True])
def test_color_map_fill_round_trip(w, h, kind, big_endian):
    img = Image(w, h, 32, big_endian)
    shifts = rgb_shifts(*TRUECOLOR)
    expected = {}
    for y in range(h):
        for x in range(w):
            color = get_color_value(_color_map(x, y, w, h, kind), 24, shifts)
            img.set_pixel(x, y, color)
            expected[(x, y)] = color
    for (x, y), color in expected.items():
        assert img.get_pixel(x, y) == color


def test_size_line_for_32_bpp():
    img = Image(IM1_SX, IM1_SY, 32)
    assert img.size_line == IM1_SX * 4
    assert len(img.data) == img.size_line * IM1_SY


def test_size_line_padded_to_32_bits():
    img = Image(IM1_SX, IM1_SY, 24)
    assert img.size_line % 4 == 0
    assert img.size_line >= IM1_SX * 3
    assert img.size_line - IM1_SX * 3 < 4


def test_little_endian_byte_layout():
    img = Image(2, 1, 32, False)
    img.set_pixel(0, 0, 0x11223344)
    assert bytes(img.data[:4]) == bytes([0x44, 0x33, 0x22, 0x11])


def test_big_endian_byte_layout():
    img = Image(2, 1, 32, True)
    img.set_pixel(1, 0, 0x11223344)
    assert bytes(img.data[4:8]) == bytes([0x11, 0x22, 0x33, 0x44])


def test_transparent_colour_is_masked_to_pixel_size():
    img = Image(1, 1, 32)
    img.set_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


def test_new_image_is_black():
    img = Image(5, 3, 32)
    assert all(img.get_pixel(x, y) == 0 for x in range(5) for y in range(3))


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (IM1_SX, 0), (0, IM1_SY)])
def test_out_of_range_pixel(x, y):
    img = Image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        img.set_pixel(x, y, 0)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


@pytest.mark.parametrize("w, h, bpp", [(0, 1, 32), (1, 0, 32), (1, 1, 12), (1, 1, 0)])
def test_invalid_image_parameters(w, h, bpp):
    with pytest.raises(ValueError):
        Image(w, h, bpp)


def test_rgb_shifts_truecolor():
    assert rgb_shifts(*TRUECOLOR) == (16, 8, 8, 8, 0, 8)


def test_rgb_shifts_565():
    assert rgb_shifts(0xF800, 0x7E0, 0x1F) == (11, 5, 5, 6, 0, 5)


def test_rgb_shifts_rejects_zero_mask():
    with pytest.raises(ValueError):
        rgb_shifts(0, 0xFF00, 0xFF)


@pytest.mark.parametrize("color", [0xFF99FF, 0x00FFFF, 0x0, 0x123456])
def test_deep_visual_keeps_colour(color):
    assert get_color_value(color, 24, rgb_shifts(*TRUECOLOR)) == color


def test_shallow_visual_packs_white_and_black():
    shifts = rgb_shifts(0xF800, 0x7E0, 0x1F)
    assert get_color_value(0xFFFFFF, 16, shifts) == 0xFFFF
    assert get_color_value(0x000000, 16, shifts) == 0


def test_shallow_visual_pure_channels_fill_masks():
    masks = (0xF800, 0x7E0, 0x1F)
    shifts = rgb_shifts(*masks)
    assert get_color_value(0xFF0000, 16, shifts) == masks[0]
    assert get_color_value(0x00FF00, 16, shifts) == masks[1]
    assert get_color_value(0x0000FF, 16, shifts) == masks[2]