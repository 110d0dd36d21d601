"""
Sourcing Context

Responsibilities:
- Finds resume records under the source tree
- Loads individual records from disk

Owns: Record discovery, record parsing
Never: Modifies record content
"""

from vitae.contexts.sourcing.discovery import find_records, load_record
from vitae.contexts.sourcing.exceptions import DiscoveryError, NoRecordsError, RecordLoadError

__all__ = ["find_records", "load_record", "DiscoveryError", "NoRecordsError", "RecordLoadError"]
