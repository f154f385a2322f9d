"""Extraction strategies and the label-to-strategy registry."""

import io
import logging
from pathlib import Path
from typing import Dict, Tuple

from PIL import Image, UnidentifiedImageError

from .config import RunConfig
from .errors import DecodeError

logger = logging.getLogger(__name__)

# file-type label -> (Pillow codec name, output extension)
IMAGE_CODECS: Dict[str, Tuple[str, str]] = {
    "PNG": ("PNG", "png"),
    "GIF": ("GIF", "gif"),
    "BMP": ("BMP", "bmp"),
    "TIFF": ("TIFF", "tiff"),
}


class Extractor:
    """Writes a matched input buffer to ``<output_dir>/<base_name>.<extension>``."""

    def __init__(self, extension: str) -> None:
        self.extension = extension

    def output_path(self, run: RunConfig) -> Path:
        return run.output_dir / f"{run.base_name}.{self.extension}"

    def extract(self, data: bytes, run: RunConfig) -> Path:
        """
        Write ``data`` to this extractor's output file. Subclasses implement.

        Args:
            data: Full content of the scanned input file
            run: Per-run naming configuration

        Returns:
            Path of the written file
        """
        raise NotImplementedError(f"{type(self).__name__}.extract")

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.extension!r})"


class RawCopyExtractor(Extractor):
    """Copies the whole buffer verbatim."""

    def extract(self, data: bytes, run: RunConfig) -> Path:
        output_path = self.output_path(run)
        with output_path.open("wb") as f:
            f.write(data)
        return output_path


class ImageCodecExtractor(Extractor):
    """Decodes the whole buffer as an image and re-encodes it with ``codec``."""

    def __init__(self, codec: str, extension: str) -> None:
        super().__init__(extension)
        self.codec = codec

    def decode(self, data: bytes) -> Image.Image:
        """
        Decode ``data`` with Pillow's format auto-detection.

        Raises:
            DecodeError: If no supported image format recognizes the buffer,
                the image data is truncated or corrupt, or its declared size
                exceeds Pillow's decompression bomb limit
        """
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
        except UnidentifiedImageError as e:
            raise DecodeError(f"image: unknown format ({e})") from e
        except Image.DecompressionBombError as e:
            raise DecodeError(f"image: {e}") from e
        except (OSError, SyntaxError, ValueError, EOFError) as e:
            raise DecodeError(f"image: {e}") from e
        return image

    def encode(self, image: Image.Image) -> bytes:
        """
        Encode ``image`` with this extractor's codec.

        Modes the codec's writer rejects (CMYK as PNG, LA as BMP, ...) are
        converted to RGBA when the image carries alpha, otherwise to RGB.
        """
        buf = io.BytesIO()
        try:
            image.save(buf, format=self.codec)
        except (OSError, KeyError, ValueError) as e:
            has_alpha = "A" in image.getbands() or "transparency" in image.info
            mode = "RGBA" if has_alpha else "RGB"
            logger.debug(f"{self.codec} cannot write mode {image.mode} ({e}), using {mode}")
            buf = io.BytesIO()
            image.convert(mode).save(buf, format=self.codec)
        return buf.getvalue()

    def extract(self, data: bytes, run: RunConfig) -> Path:
        image = self.decode(data)
        logger.debug(
            f"Re-encoding {image.format} {image.size[0]}x{image.size[1]} as {self.codec}"
        )
        encoded = self.encode(image)

        output_path = self.output_path(run)
        with output_path.open("wb") as f:
            f.write(encoded)
        return output_path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.codec!r}, {self.extension!r})"


def extractor_for(file_type: str) -> Extractor:
    """
    Select the extraction strategy for a file-type label.

    Labels registered in ``IMAGE_CODECS`` are re-encoded through Pillow;
    any other label is raw-copied under its lowercased name.

    Args:
        file_type: Label from the definitions file

    Returns:
        Extractor bound to the label
    """
    if file_type in IMAGE_CODECS:
        codec, extension = IMAGE_CODECS[file_type]
        return ImageCodecExtractor(codec, extension)
    return RawCopyExtractor(file_type.lower())
