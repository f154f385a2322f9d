"""Signature scanning and extraction over a single input file."""

import logging
from pathlib import Path
from typing import List, Sequence

from .catalog import SignatureRecord
from .config import RunConfig

logger = logging.getLogger(__name__)


def find_matches(
    data: bytes, catalog: Sequence[SignatureRecord]
) -> List[SignatureRecord]:
    """Return the records whose magic pattern occurs anywhere in ``data``, in catalog order."""
    return [record for record in catalog if record.matches(data)]


def extract_from_bytes(
    data: bytes, run: RunConfig, catalog: Sequence[SignatureRecord]
) -> List[Path]:
    """
    Run every matching record's extractor over ``data``.

    Extraction stops at the first failing extractor; files written before
    it are left in place. Records sharing an output name overwrite each
    other in catalog order.

    Args:
        data: Full content of the input file
        run: Per-run naming configuration
        catalog: Signature records in definitions order

    Returns:
        Paths written, one per matching record
    """
    written: List[Path] = []
    for record in catalog:
        if not record.matches(data):
            continue
        logger.info(f"Extracting {record.file_type}...")
        written.append(record.extractor.extract(data, run))
    return written


def extract_embedded_files(
    run: RunConfig, catalog: Sequence[SignatureRecord]
) -> List[Path]:
    """
    Read ``run.input_path`` once and extract every embedded signature match.

    Args:
        run: Per-run naming configuration
        catalog: Signature records in definitions order

    Returns:
        Paths written; empty when nothing matched
    """
    data = run.input_path.read_bytes()
    logger.debug(f"Read {len(data):,} bytes from {run.input_path}")
    return extract_from_bytes(data, run, catalog)
