"""
Magic Carver - extract embedded files by magic-byte signature.

Scans a binary file for the signatures listed in a definitions file and
writes every match out as a standalone file, re-encoding image types.
"""

__version__ = "1.0.0"

from .catalog import SignatureRecord, load_catalog, parse_definitions
from .config import CarveSettings, RunConfig
from .errors import CarveError, DecodeError, FormatError
from .extractors import Extractor, ImageCodecExtractor, RawCopyExtractor, extractor_for
from .scanner import extract_embedded_files, find_matches

__all__ = [
    "CarveSettings",
    "RunConfig",
    "SignatureRecord",
    "CarveError",
    "DecodeError",
    "FormatError",
    "Extractor",
    "ImageCodecExtractor",
    "RawCopyExtractor",
    "extractor_for",
    "load_catalog",
    "parse_definitions",
    "extract_embedded_files",
    "find_matches",
]
