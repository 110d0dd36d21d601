"""
Shared utilities for vitae.

Common functionality used across contexts:
- Build settings (paths and defaults)
- Logger setup
- Timestamps
"""

from vitae.utils.settings import BuildSettings, load_settings
from vitae.utils.timestamp import now, today

__all__ = ["BuildSettings", "load_settings", "now", "today"]
