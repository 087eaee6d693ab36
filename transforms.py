import logging
from enum import IntEnum

from config import MAX_QUANTIZE_LEVEL, MIN_QUANTIZE_LEVEL
from errors import InvalidParameterError
from pixel_grid import Pixel

logger = logging.getLogger(__name__)


class Channel(IntEnum):
    # numbering matches the menu choices
    RED = 1
    GREEN = 2
    BLUE = 3

    @property
    def label(self):
        return self.name.lower()


def parse_channel(value):
    """Accept a Channel, its menu number (1-3) or its name ("red", ...)."""
    if isinstance(value, Channel):
        return value
    if isinstance(value, str):
        key = value.strip()
        if key.isdigit():
            value = int(key)
        else:
            try:
                return Channel[key.upper()]
            except KeyError:
                raise InvalidParameterError(f"Unknown channel: {value!r}") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"Unknown channel: {value!r}")
    try:
        return Channel(value)
    except ValueError:
        raise InvalidParameterError(
            f"Channel must be 1 (red), 2 (green) or 3 (blue), got {value}") from None


def validate_level(level):
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidParameterError(f"Quantization level must be an integer, got {level!r}")
    if not MIN_QUANTIZE_LEVEL <= level <= MAX_QUANTIZE_LEVEL:
        raise InvalidParameterError(
            f"Quantization level must be between {MIN_QUANTIZE_LEVEL} "
            f"and {MAX_QUANTIZE_LEVEL}, got {level}")
    return level


def invert(grid):
    """Replace every channel value with its bitwise complement."""
    logger.debug("Inverting %dx%d grid", grid.width, grid.height)
    for row in grid.pixels:
        for col, (r, g, b) in enumerate(row):
            row[col] = Pixel(r ^ 0xFF, g ^ 0xFF, b ^ 0xFF)


def quantize(grid, level):
    """Clear the ``level`` lowest bits of every channel.

    ``level`` must already be in 0..7, see validate_level().
    """
    logger.debug("Quantizing %dx%d grid at level %d", grid.width, grid.height, level)
    mask = (0xFF << level) & 0xFF
    for row in grid.pixels:
        for col, (r, g, b) in enumerate(row):
            row[col] = Pixel(r & mask, g & mask, b & mask)


def remove_channel(grid, channel):
    channel = Channel(channel)
    logger.debug("Removing %s channel", channel.label)
    for row in grid.pixels:
        for col, pix in enumerate(row):
            if channel == Channel.RED:
                row[col] = pix._replace(red=0)
            elif channel == Channel.GREEN:
                row[col] = pix._replace(green=0)
            else:
                row[col] = pix._replace(blue=0)


def flip_horizontal(grid):
    logger.debug("Flipping %dx%d grid horizontally", grid.width, grid.height)
    # build the reversed rows, then copy them back over the originals
    reversed_rows = [row[::-1] for row in grid.pixels]
    for row, reversed_row in zip(grid.pixels, reversed_rows):
        row[:] = reversed_row
