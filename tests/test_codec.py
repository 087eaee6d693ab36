"""Decoding and encoding of the fixed 54-byte header bitmap layout."""

from pathlib import Path

import pytest

from bmp_parser import BMPParser, decode
from bmp_writer import BMPWriter, encode
from errors import (
    DecodeError,
    InvalidHeaderError,
    OpenFailedError,
    SourceNotFoundError,
    TruncatedInputError,
    WriteFailedError,
)
from pixel_grid import BitmapFileMeta, Pixel, PixelGrid


def _raw_bitmap(width, height, pixel_bytes, file_size=0, magic=b"BM"):
    header = bytearray(54)
    header[0:2] = magic
    header[2:6] = file_size.to_bytes(4, "little")
    header[18:22] = width.to_bytes(4, "little", signed=True)
    header[22:26] = height.to_bytes(4, "little", signed=True)
    return bytes(header) + bytes(pixel_bytes)


def test_decode_reads_dimensions_and_bgr_pixels(tmp_path):
    # two pixels stored blue, green, red
    data = _raw_bitmap(2, 1, [3, 2, 1, 30, 20, 10], file_size=1234)
    (tmp_path / "raw.bmp").write_bytes(data)

    grid = decode(str(tmp_path / "raw"))

    assert grid.width == 2
    assert grid.height == 1
    assert grid.pixels == [[(1, 2, 3), (10, 20, 30)]]
    assert grid.pixels[0][0].red == 1
    assert grid.meta == BitmapFileMeta(1234)


def test_decode_row_zero_is_first_row_on_disk(tmp_path):
    data = _raw_bitmap(1, 2, [0, 0, 255, 255, 0, 0])
    (tmp_path / "rows.bmp").write_bytes(data)

    grid = decode(str(tmp_path / "rows"))

    assert grid.pixels == [[(255, 0, 0)], [(0, 0, 255)]]


def test_decode_ignores_magic_and_trailing_bytes(tmp_path):
    data = _raw_bitmap(1, 1, [7, 8, 9, 99, 99], magic=b"XY")
    (tmp_path / "odd.bmp").write_bytes(data)

    grid = decode(str(tmp_path / "odd"))

    assert grid.pixels == [[(9, 8, 7)]]


def test_decode_accepts_path_objects(sample_image):
    grid = decode(Path(sample_image))
    assert grid.width == 2 and grid.height == 2


def test_decode_missing_file(tmp_path):
    with pytest.raises(SourceNotFoundError) as excinfo:
        decode(str(tmp_path / "nope"))
    assert isinstance(excinfo.value, OpenFailedError)
    assert isinstance(excinfo.value, DecodeError)
    assert "nope.bmp" in str(excinfo.value)


def test_decode_unreadable_path(tmp_path):
    (tmp_path / "folder.bmp").mkdir()
    with pytest.raises(OpenFailedError):
        decode(str(tmp_path / "folder"))


@pytest.mark.parametrize("size", [0, 1, 26, 53])
def test_decode_short_header_is_truncated(tmp_path, size):
    (tmp_path / "short.bmp").write_bytes(bytes(size))
    with pytest.raises(TruncatedInputError):
        decode(str(tmp_path / "short"))


def test_decode_short_pixel_data_is_truncated(tmp_path):
    # 2x2 needs 12 pixel bytes
    data = _raw_bitmap(2, 2, range(11))
    (tmp_path / "cut.bmp").write_bytes(data)

    parser = BMPParser(str(tmp_path / "cut"))
    with pytest.raises(TruncatedInputError):
        parser.load()
    assert parser.pixel_data == []


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-2, 2), (2, -1)])
def test_decode_rejects_non_positive_dimensions(tmp_path, width, height):
    data = _raw_bitmap(width, height, bytes(12))
    (tmp_path / "dims.bmp").write_bytes(data)
    with pytest.raises(InvalidHeaderError):
        decode(str(tmp_path / "dims"))


def test_encode_header_layout(tmp_path):
    grid = PixelGrid.from_rows([[(1, 2, 3), (4, 5, 6), (7, 8, 9)]], meta=BitmapFileMeta(777))

    written = encode(grid, str(tmp_path / "out"))

    assert written == str(tmp_path / "out") + ".bmp"
    data = Path(written).read_bytes()
    assert len(data) == 54 + 9
    assert data[0:2] == b"BM"
    assert int.from_bytes(data[2:6], "little") == 777
    assert data[6:10] == bytes(4)
    assert int.from_bytes(data[10:14], "little") == 54
    assert int.from_bytes(data[14:18], "little") == 40
    assert int.from_bytes(data[18:22], "little") == 3
    assert int.from_bytes(data[22:26], "little") == 1
    assert int.from_bytes(data[26:28], "little") == 1
    assert int.from_bytes(data[28:30], "little") == 24
    assert data[30:54] == bytes(24)
    assert data[54:] == bytes([3, 2, 1, 6, 5, 4, 9, 8, 7])


def test_encode_without_decoded_source_computes_file_size(tmp_path, sample_grid):
    written = encode(sample_grid, str(tmp_path / "fresh"))
    data = Path(written).read_bytes()
    assert int.from_bytes(data[2:6], "little") == len(data) == 54 + 12


def test_encode_overwrites_existing_file(tmp_path, sample_grid):
    target = tmp_path / "over.bmp"
    target.write_bytes(b"old contents that are longer than the new image" * 10)

    encode(sample_grid, str(tmp_path / "over"))

    assert len(target.read_bytes()) == 54 + 12


def test_encode_unwritable_destination(tmp_path, sample_grid):
    with pytest.raises(WriteFailedError):
        encode(sample_grid, str(tmp_path / "missing_dir" / "out"))


def test_round_trip_reproduces_bytes(sample_image):
    original = Path(sample_image + ".bmp").read_bytes()

    encode(decode(sample_image), sample_image + "_again")

    assert Path(sample_image + "_again.bmp").read_bytes() == original


def test_round_trip_keeps_inconsistent_file_size(tmp_path, sample_image):
    data = bytearray(Path(sample_image + ".bmp").read_bytes())
    data[2:6] = (4000000000).to_bytes(4, "little")
    (tmp_path / "bogus.bmp").write_bytes(bytes(data))

    grid = decode(str(tmp_path / "bogus"))
    assert grid.meta.file_size == 4000000000
    encode(grid, str(tmp_path / "bogus_copy"))

    assert (tmp_path / "bogus_copy.bmp").read_bytes() == bytes(data)


def test_writer_pixel_data_is_bgr_row_major(sample_grid):
    payload = BMPWriter().build_pixel_data(sample_grid)
    assert payload == bytes([30, 20, 10, 60, 50, 40, 90, 80, 70, 120, 110, 100])


def test_decoded_pixels_are_pixel_tuples(sample_image):
    grid = decode(sample_image)
    assert all(isinstance(pix, Pixel) for row in grid.pixels for pix in row)
