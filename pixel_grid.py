from typing import List, NamedTuple

from config import BYTES_PER_PIXEL, HEADER_SIZE


class Pixel(NamedTuple):
    red: int
    green: int
    blue: int


class BitmapFileMeta:
    def __init__(self, file_size):
        # raw file-size field from the source header, written back unchanged
        self.file_size = file_size

    @classmethod
    def for_dimensions(cls, width, height):
        return cls(HEADER_SIZE + width * height * BYTES_PER_PIXEL)

    def __eq__(self, other):
        return isinstance(other, BitmapFileMeta) and self.file_size == other.file_size

    def __repr__(self):
        return f"BitmapFileMeta(file_size={self.file_size})"


class PixelGrid:
    """Decoded image: dimensions plus rows of (red, green, blue) pixels.

    ``pixels[row][col]``, row 0 is the first row stored in the file.
    """

    def __init__(self, width, height, pixels, meta=None):
        self.width = width
        self.height = height
        self.pixels: List[List[Pixel]] = pixels
        self.meta = meta if meta is not None else BitmapFileMeta.for_dimensions(width, height)

    @classmethod
    def from_rows(cls, rows, meta=None):
        # build from nested sequences of (r, g, b) triples
        pixels = [[Pixel(*pix) for pix in row] for row in rows]
        height = len(pixels)
        width = len(pixels[0]) if height > 0 else 0
        return cls(width, height, pixels, meta)

    def to_rows(self):
        return [[tuple(pix) for pix in row] for row in self.pixels]

    def copy(self):
        return PixelGrid(self.width, self.height,
                         [list(row) for row in self.pixels],
                         BitmapFileMeta(self.meta.file_size))

    def __eq__(self, other):
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return (self.width == other.width and self.height == other.height
                and self.pixels == other.pixels)

    def __repr__(self):
        return f"PixelGrid(width={self.width}, height={self.height})"
