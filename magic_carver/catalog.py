"""Signature catalog loading from ``FILE_TYPE:HEXBYTES`` definitions."""

import binascii
import logging
from pathlib import Path
from typing import Iterable, List, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import DecodeError, FormatError
from .extractors import Extractor, extractor_for

logger = logging.getLogger(__name__)


class SignatureRecord(BaseModel):
    """A file-type label, its magic bytes and the extractor bound to it."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    file_type: str
    magic_pattern: bytes = Field(..., min_length=1)
    extractor: Extractor

    def matches(self, data: bytes) -> bool:
        return self.magic_pattern in data


def parse_line(line: str) -> SignatureRecord:
    """
    Parse one definitions line into a signature record.

    Args:
        line: A single line without its line terminator

    Returns:
        Record with its extractor already bound

    Raises:
        FormatError: If the line does not split into exactly two parts on ``:``,
            or the signature part is empty
        DecodeError: If the signature part is not valid hex
    """
    parts = line.split(":")
    if len(parts) != 2:
        raise FormatError(line)

    file_type, hex_signature = parts
    logger.debug(f"fileType: {file_type} hexSignature: {hex_signature}")

    if not hex_signature:
        raise FormatError(line, reason="empty signature")

    try:
        magic_bytes = binascii.unhexlify(hex_signature)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"invalid hex signature {hex_signature!r}: {e}") from e

    return SignatureRecord(
        file_type=file_type,
        magic_pattern=magic_bytes,
        extractor=extractor_for(file_type),
    )


def _strip_terminator(line: str) -> str:
    # "\n" ends a line; a single "\r" before it is dropped, any other "\r" is data
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_definitions(lines: Iterable[str]) -> List[SignatureRecord]:
    """Parse definitions lines in order, stopping at the first bad line."""
    return [parse_line(_strip_terminator(line)) for line in lines]


def load_catalog(path: Union[str, Path]) -> List[SignatureRecord]:
    """
    Load the signature catalog from a definitions file.

    Args:
        path: Definitions file, one ``FILE_TYPE:HEXBYTES`` entry per line

    Returns:
        Records in file order; empty for an empty file

    Raises:
        OSError: If the file cannot be opened or read
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8", newline="\n") as f:
            catalog = parse_definitions(f)
    except UnicodeDecodeError as e:
        raise DecodeError(f"{path}: definitions are not valid UTF-8 ({e})") from e

    logger.info(f"Loaded {len(catalog)} signatures from {path}")
    return catalog
