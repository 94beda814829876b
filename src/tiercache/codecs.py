"""Object codecs and cost estimation for cached payloads."""

from __future__ import annotations

import io
import logging
import sys
from typing import Any, Protocol, runtime_checkable

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

_BYTES_PER_PIXEL = 4  # RGBA, matches the decoded bitmap footprint
_DEFAULT_IMAGE_FORMAT = "JPEG"
_DEFAULT_IMAGE_QUALITY = 80
_JPEG_MODES = {"RGB", "L", "CMYK"}


@runtime_checkable
class ObjectCodec(Protocol):
    """Converts cached objects to bytes and back. Never raises."""

    def encode(self, obj: Any) -> bytes | None: ...

    def decode(self, data: bytes) -> Any | None: ...


class BytesCodec:
    """Passthrough codec for payloads that are already bytes."""

    def encode(self, obj: Any) -> bytes | None:
        if isinstance(obj, (bytes, bytearray, memoryview)):
            return bytes(obj)
        if isinstance(obj, str):
            return obj.encode("utf-8")
        logger.warning("BytesCodec cannot encode %s", type(obj).__name__)
        return None

    def decode(self, data: bytes) -> Any | None:
        return data


class ImageCodec:
    """Pillow codec that re-encodes images at a fixed lossy quality.

    Images without a JPEG-compatible mode (RGBA, P, LA, ...) are flattened to
    RGB before encoding. Decoding fully loads the pixel data so the returned
    image does not hold a reference to the source buffer.
    """

    def __init__(
        self,
        format: str = _DEFAULT_IMAGE_FORMAT,
        quality: int = _DEFAULT_IMAGE_QUALITY,
    ) -> None:
        self._format = format.upper()
        self._quality = quality

    @property
    def format(self) -> str:
        return self._format

    @property
    def quality(self) -> int:
        return self._quality

    def encode(self, obj: Any) -> bytes | None:
        if not isinstance(obj, Image.Image):
            logger.warning("ImageCodec cannot encode %s", type(obj).__name__)
            return None
        buf = io.BytesIO()
        try:
            img = obj
            if self._format == "JPEG" and img.mode not in _JPEG_MODES:
                img = img.convert("RGB")
            img.save(buf, format=self._format, quality=self._quality)
        except (OSError, ValueError, KeyError) as e:
            logger.warning("Failed to encode image as %s: %s", self._format, e)
            return None
        return buf.getvalue()

    def decode(self, data: bytes) -> Any | None:
        try:
            img = Image.open(io.BytesIO(data))
            img.load()
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            OSError,
            ValueError,
            SyntaxError,
        ) as e:
            logger.warning("Failed to decode cached image (%d bytes): %s", len(data), e)
            return None
        return img


def estimate_cost(obj: Any) -> int:
    """Approximate in-memory weight of a cached object, in bytes."""
    if isinstance(obj, Image.Image):
        width, height = obj.size
        return width * height * _BYTES_PER_PIXEL
    if isinstance(obj, (bytes, bytearray)):
        return len(obj)
    if isinstance(obj, memoryview):
        return obj.nbytes
    if isinstance(obj, str):
        return len(obj.encode("utf-8"))
    size_bytes = getattr(obj, "size_bytes", None)
    if isinstance(size_bytes, int):
        return size_bytes
    return sys.getsizeof(obj)
