"""Entry points combining decode, one transform and encode.

Every operation takes the bare base name of the source image (no ".bmp"),
writes the result next to it under a descriptive suffix and returns the path
of the written file. Parameters are checked before the source is read.
"""
import logging
from enum import IntEnum

import transforms
from bmp_parser import decode
from bmp_writer import encode
from config import (
    CHANNEL_REMOVED_SUFFIX,
    COPY_SUFFIX,
    FLIPPED_SUFFIX,
    INVERTED_SUFFIX,
    QUANTIZE_SUFFIX,
)
from errors import BitmapError, InvalidParameterError

logger = logging.getLogger(__name__)


class Command(IntEnum):
    EXIT = -1
    COPY = 1
    REMOVE_CHANNEL = 2
    INVERT = 3
    QUANTIZE = 4
    FLIP_HORIZONTAL = 5


def _process(base_path, suffix, transform=None):
    try:
        grid = decode(base_path)
        if transform is not None:
            transform(grid)
        return encode(grid, str(base_path) + suffix)
    except BitmapError as exc:
        logger.warning("Operation on %s abandoned: %s", base_path, exc)
        raise


def copy(base_path):
    logger.info("Copying %s", base_path)
    return _process(base_path, COPY_SUFFIX)


def remove_channel(base_path, channel):
    channel = transforms.parse_channel(channel)
    logger.info("Removing %s channel from %s", channel.label, base_path)
    return _process(base_path,
                    CHANNEL_REMOVED_SUFFIX.format(channel=channel.label),
                    lambda grid: transforms.remove_channel(grid, channel))


def invert(base_path):
    logger.info("Inverting %s", base_path)
    return _process(base_path, INVERTED_SUFFIX, transforms.invert)


def quantize(base_path, level):
    level = transforms.validate_level(level)
    logger.info("Quantizing %s at level %d", base_path, level)
    return _process(base_path,
                    QUANTIZE_SUFFIX.format(level=level),
                    lambda grid: transforms.quantize(grid, level))


def flip_horizontal(base_path):
    logger.info("Flipping %s horizontally", base_path)
    return _process(base_path, FLIPPED_SUFFIX, transforms.flip_horizontal)


def run_command(command, base_path, channel=None, level=None):
    """Dispatch a menu command to its operation and return the written path."""
    try:
        command = Command(command)
    except ValueError:
        raise InvalidParameterError(f"Unknown command: {command!r}") from None
    if command is Command.COPY:
        return copy(base_path)
    if command is Command.REMOVE_CHANNEL:
        if channel is None:
            raise InvalidParameterError("remove channel needs a channel")
        return remove_channel(base_path, channel)
    if command is Command.INVERT:
        return invert(base_path)
    if command is Command.QUANTIZE:
        if level is None:
            raise InvalidParameterError("quantize needs a level")
        return quantize(base_path, level)
    if command is Command.FLIP_HORIZONTAL:
        return flip_horizontal(base_path)
    raise InvalidParameterError(f"{command.name} is not an image operation")
