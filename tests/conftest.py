from __future__ import annotations

import io
import struct
import zlib

import pytest
from PIL import Image


def make_image_bytes(fmt: str, size=(4, 3), color=(200, 30, 30), mode: str = "RGB") -> bytes:
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format=fmt)
    return buf.getvalue()


def _png_chunk(cid: bytes, payload: bytes) -> bytes:
    return (
        struct.pack(">I", len(payload))
        + cid
        + payload
        + struct.pack(">I", zlib.crc32(cid + payload) & 0xFFFFFFFF)
    )


def make_png_without_pixels(width: int, height: int) -> bytes:
    """PNG declaring ``width`` x ``height`` pixels with no pixel data behind it."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", ihdr)
        + _png_chunk(b"IDAT", b"")
        + _png_chunk(b"IEND", b"")
    )


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes("PNG")


@pytest.fixture
def gif_bytes() -> bytes:
    return make_image_bytes("GIF", size=(5, 2))


@pytest.fixture
def out_dir(tmp_path):
    d = tmp_path / "out"
    d.mkdir()
    return d
