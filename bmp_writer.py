import logging

from config import (
    BITS_PER_PIXEL,
    BMP_EXTENSION,
    HEADER_SIZE,
    INFO_HEADER_SIZE,
)
from errors import WriteFailedError

logger = logging.getLogger(__name__)


class BMPWriter:

    def header_fields(self, grid):
        # (offset, size, value, signed) for every field that is not zero
        return [
            (0, 2, int.from_bytes(b"BM", 'little'), False),
            (2, 4, grid.meta.file_size & 0xFFFFFFFF, False),
            (10, 4, HEADER_SIZE, False),
            (14, 4, INFO_HEADER_SIZE, False),
            (18, 4, grid.width, True),
            (22, 4, grid.height, True),
            (26, 2, 1, False),              # colour planes
            (28, 2, BITS_PER_PIXEL, False),
            (30, 4, 0, False),              # no compression
        ]

    def build_header(self, grid):
        header = bytearray(HEADER_SIZE)
        for offset, size, value, signed in self.header_fields(grid):
            header[offset:offset + size] = value.to_bytes(size, 'little', signed=signed)
        return bytes(header)

    def build_pixel_data(self, grid):
        out = bytearray()
        for row in grid.pixels:
            for (r, g, b) in row:
                # stored as blue, green, red
                out.append(b)
                out.append(g)
                out.append(r)
        return bytes(out)

    def save(self, grid, base_path):
        filepath = str(base_path) + BMP_EXTENSION
        header = self.build_header(grid)
        payload = self.build_pixel_data(grid)

        try:
            with open(filepath, 'wb') as f:
                f.write(header)
                f.write(payload)
        except OSError as exc:
            raise WriteFailedError(f"File can not be saved: {filepath}: {exc}") from exc

        logger.info("Image saved: %s (%dx%d)", filepath, grid.width, grid.height)
        return filepath


def encode(grid, base_path):
    """Write ``grid`` to ``base_path + ".bmp"``, replacing any existing file.

    The file-size header field is taken from ``grid.meta`` as is. Returns the
    path written.
    """
    return BMPWriter().save(grid, base_path)
