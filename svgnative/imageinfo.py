"""Decoding embedded JPEG images into pixel surfaces and reading PNG blobs."""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from PIL import Image, UnidentifiedImageError


class PixelFormat(Enum):
    """Pixel layouts of an image surface, with their bits per pixel."""

    ARGB32 = 32
    RGB24 = 24
    A8 = 8
    A1 = 1
    RGB16_565 = 16

    @property
    def bits_per_pixel(self) -> int:
        """Bits each pixel occupies in a row."""
        return 32 if self is PixelFormat.RGB24 else self.value


_STRIDE_ALIGNMENT = 4


def stride_for_width(pixel_format: PixelFormat, width: int) -> int:
    """Return the row length in bytes for ``width`` pixels, aligned to 4 bytes."""
    if width < 0:
        raise ValueError(f"invalid width: {width}")
    row_bytes = (pixel_format.bits_per_pixel * width + 7) // 8
    return (row_bytes + _STRIDE_ALIGNMENT - 1) // _STRIDE_ALIGNMENT * _STRIDE_ALIGNMENT


@dataclass
class ImageSurface:
    """Pixel rows stored as native-endian 32-bit words, one per pixel."""

    format: PixelFormat
    width: int
    height: int
    stride: int
    data: bytes
    mime_data: Dict[str, bytes] = field(default_factory=dict)

    def pixel(self, x: int, y: int) -> int:
        """Return the 32-bit word stored for the pixel at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        offset = y * self.stride + x * 4
        return int.from_bytes(self.data[offset:offset + 4], sys.byteorder)


def surface_from_jpeg(data: bytes) -> ImageSurface:
    """Decode a JPEG stream into an RGB24 surface; raise ValueError if it cannot be."""
    try:
        image = Image.open(io.BytesIO(data))
        if image.format != "JPEG":
            raise ValueError("data is not a JPEG image")
        image.load()
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise ValueError(f"cannot decode JPEG image: {exc}") from exc

    width, height = image.size
    components = len(image.getbands())
    pixel_format = PixelFormat.RGB24
    stride = stride_for_width(pixel_format, width)
    raw = image.tobytes()
    jpeg_stride = width * components
    out = bytearray(stride * height)

    for y in range(height):
        row = raw[y * jpeg_stride:(y + 1) * jpeg_stride]
        base = y * stride
        for x in range(width):
            value = 0
            for byte in row[x * components:(x + 1) * components]:
                value = (value << 8) | byte
            if components == 1:
                value = value << 16 | value << 8 | value
            value &= 0xFFFFFFFF
            start = base + x * 4
            out[start:start + 4] = value.to_bytes(4, sys.byteorder)

    pixels = bytes(out)
    return ImageSurface(
        pixel_format, width, height, stride, pixels, {"image/x-pixmap": pixels}
    )


@dataclass
class PngBlobReader:
    """Reads fixed-size chunks from an in-memory blob, padding the last with zeros."""

    blob: bytes
    cur_pos: int = 0
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.limit is None:
            self.limit = len(self.blob)

    def read(self, length: int) -> bytes:
        """Return the next ``length`` bytes; raise EOFError once the blob is used up."""
        if self.limit <= self.cur_pos:
            raise EOFError("read past the end of the blob")
        available = min(length, self.limit - self.cur_pos)
        chunk = bytes(self.blob[self.cur_pos:self.cur_pos + available])
        self.cur_pos += available
        return chunk.ljust(length, b"\0")