"""Reading XPM pixmaps, from files or in-memory lines, into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from .colors import lookup_color
from .image import Image
from .wordtab import str_str, str_str_quoted, str_to_wordtab

_TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_INT = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?[0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside double quotes.

    Comment characters are replaced by spaces. A line comment is blanked
    together with the newline that ends it.
    """
    chars = text
    while (begin := str_str_quoted(chars, "/*")) != -1:
        end = str_str(chars[begin + 2:], "*/")
        if end == -1:
            raise XpmError("unterminated comment")
        stop = begin + end + 4
        chars = chars[:begin] + " " * (stop - begin) + chars[stop:]
    while (begin := str_str_quoted(chars, "//")) != -1:
        end = str_str(chars[begin + 2:], "\n")
        stop = len(chars) if end == -1 else begin + end + 3
        chars = chars[:begin] + " " * (stop - begin) + chars[stop:]
    return chars


def _iter_quoted(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        stop = text.find('"', start + 1)
        if stop == -1:
            return
        yield text[start + 1:stop]
        pos = stop + 1


def quoted_lines(text: str) -> list[str]:
    """Return the contents of every double-quoted string in ``text``, in order."""
    return list(_iter_quoted(text))


def text_rgb(name: str, end: str | None) -> int:
    """Return the 0xRRGGBB value of an XPM colour specification.

    ``#RRGGBB`` is read as hexadecimal. Otherwise ``name`` (joined to
    ``end`` by a space when given) is looked up as a colour name; an
    unknown name gives 0 and ``none`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX.match(name, 1)
        return int(match.group(1), 16) if match else 0
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(word: str) -> int:
    match = _INT.match(word)
    return int(match.group(1)) if match else 0


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = str_to_wordtab(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad XPM header: {line!r}")
    return values  # type: ignore[return-value]


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    words = str_to_wordtab(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without colour: {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], text_rgb(words[index], end)


def parse_xpm(lines: Iterable[str]) -> list[list[int]]:
    """Parse XPM lines (header, colours, pixels) into rows of 0xRRGGBB values.

    Transparent pixels (colour ``none``) become 0xFF000000 and pixels whose
    characters name no colour become 0.
    """
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"XPM data ends before {what}") from None

    width, height, ncolors, cpp = _parse_header(next_line("the header"))
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        key, value = _parse_color(next_line("the colour table ends"), cpp)
        if cpp <= 2 or key not in colors:
            colors[key] = value

    rows: list[list[int]] = []
    for _ in range(height):
        line = next_line("all pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for x in range(width):
            col = colors.get(line[x * cpp:(x + 1) * cpp], 0)
            row.append(_TRANSPARENT if col == -1 else col)
        rows.append(row)
    return rows


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from in-memory XPM lines."""
    rows = parse_xpm(lines)
    image = Image(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, color in enumerate(row):
            image.set_pixel(x, y, color)
    return image


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and build an image from it."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return xpm_to_image(quoted_lines(strip_comments(text)))