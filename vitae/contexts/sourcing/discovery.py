"""
Resume record discovery and loading.

Records are JSON documents named exactly `resume.json` anywhere below the
source root. Their directory position encodes locale and role (see
vitae.contexts.templating.paths).
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from vitae.contexts.sourcing.exceptions import DiscoveryError, RecordLoadError
from vitae.contexts.sourcing.logger import log_discovery_result
from vitae.utils.settings import RECORD_FILENAME


def _walk(directory: Path, record_filename: str, found: List[Path]) -> None:
    try:
        # Sorted per level so builds are reproducible across filesystems
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise DiscoveryError(f"Cannot list directory {directory}: {e}") from e

    for entry in entries:
        if entry.is_dir():
            _walk(entry, record_filename, found)
        elif entry.name == record_filename:
            found.append(entry)


def find_records(src_dir: Path, record_filename: str = RECORD_FILENAME) -> List[Path]:
    """
    Recursively collect every resume record under src_dir.

    Only files whose name is exactly `record_filename` are returned. Entries
    are visited in name order at each directory level.

    Args:
        src_dir: Root of the source tree
        record_filename: Filename that marks a record (default: resume.json)

    Returns:
        Ordered list of record paths

    Raises:
        DiscoveryError: If src_dir is missing, not a directory, or any
                        directory in the tree cannot be listed
    """
    src_dir = Path(src_dir)
    if not src_dir.exists():
        raise DiscoveryError(f"Source directory not found: {src_dir}")
    if not src_dir.is_dir():
        raise DiscoveryError(f"Source path is not a directory: {src_dir}")

    records: List[Path] = []
    _walk(src_dir, record_filename, records)

    log_discovery_result(src_dir, records)
    return records


def load_record(record_path: Path) -> Dict[str, Any]:
    """
    Read and parse one resume record.

    Args:
        record_path: Path to a resume.json file

    Returns:
        The record as a plain dict

    Raises:
        RecordLoadError: If the file is unreadable, not JSON, or not a JSON object
    """
    try:
        text = Path(record_path).read_text(encoding="utf-8")
    except OSError as e:
        raise RecordLoadError("Cannot read record", record_path, e) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RecordLoadError("Invalid JSON in record", record_path, e) from e

    if not isinstance(data, dict):
        raise RecordLoadError(
            f"Record must be a JSON object, got {type(data).__name__}", record_path
        )

    return data
