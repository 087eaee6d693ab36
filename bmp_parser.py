import logging

from config import BMP_EXTENSION, BYTES_PER_PIXEL, HEADER_SIZE
from errors import (
    InvalidHeaderError,
    OpenFailedError,
    SourceNotFoundError,
    TruncatedInputError,
)
from pixel_grid import BitmapFileMeta, Pixel, PixelGrid

logger = logging.getLogger(__name__)


class BMPParser:
    def __init__(self, base_path):
        # the ".bmp" extension is always added here, callers pass the bare name
        self.filepath = str(base_path) + BMP_EXTENSION
        self.metadata = {}      # Store header information (file size, width, height)
        self.pixel_data = []    # Store image pixels, top row first

    def load(self):
        # Read the entire BMP file into memory
        try:
            with open(self.filepath, "rb") as f:
                self.bmp_bytes = f.read()
        except FileNotFoundError as exc:
            raise SourceNotFoundError(f"File not found: {self.filepath}") from exc
        except OSError as exc:
            raise OpenFailedError(f"File can not be opened: {self.filepath}: {exc}") from exc

        # Parse different parts of BMP
        self._parse_header()
        self._parse_pixel_data()
        logger.info("Image loaded: %s (%dx%d)", self.filepath,
                    self.metadata['width'], self.metadata['height'])
        return self.to_grid()

    def _parse_header(self):
        b = self.bmp_bytes
        if len(b) < HEADER_SIZE:
            raise TruncatedInputError(
                f"{self.filepath}: header needs {HEADER_SIZE} bytes, got {len(b)}")
        # Bytes 0-1 (signature) are not checked
        # File size, carried through to any saved copy
        self.metadata['file_size'] = int.from_bytes(b[2:6], 'little')
        # Image width & height
        self.metadata['width'] = int.from_bytes(b[18:22], 'little', signed=True)
        self.metadata['height'] = int.from_bytes(b[22:26], 'little', signed=True)
        # Remaining header fields (bpp, compression, ...) are skipped

        if self.metadata['width'] <= 0 or self.metadata['height'] <= 0:
            raise InvalidHeaderError(
                f"{self.filepath}: bad dimensions "
                f"{self.metadata['width']}x{self.metadata['height']}")

    def _parse_pixel_data(self):
        width = self.metadata['width']
        height = self.metadata['height']

        # Rows are packed back to back, no 4-byte padding
        row_size = width * BYTES_PER_PIXEL
        needed = HEADER_SIZE + row_size * height
        if len(self.bmp_bytes) < needed:
            raise TruncatedInputError(
                f"{self.filepath}: pixel data needs {needed} bytes, "
                f"got {len(self.bmp_bytes)}")

        self.pixel_data = []
        for row in range(height):
            row_start = HEADER_SIZE + row * row_size
            row_pixels = []
            for col in range(width):
                idx = row_start + col * BYTES_PER_PIXEL
                # File color bytes are ordered blue, green, red
                B, G, R = self.bmp_bytes[idx:idx + 3]
                row_pixels.append(Pixel(R, G, B))
            self.pixel_data.append(row_pixels)

    def to_grid(self):
        return PixelGrid(self.metadata['width'], self.metadata['height'],
                         self.pixel_data, BitmapFileMeta(self.metadata['file_size']))


def decode(base_path):
    """Load ``base_path + ".bmp"`` into a new PixelGrid.

    Raises a DecodeError subclass when the file is missing, unreadable,
    truncated or declares non-positive dimensions.
    """
    return BMPParser(base_path).load()
