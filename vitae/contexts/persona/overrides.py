"""
Persona-specific content overrides.

An override document lives at <overrides_dir>/<personaId>.json and mirrors
(a subset of) the resume record schema. It is deep-merged over every record
before rendering:

    base      {"skills": ["a", "b"], "meta": {"x": 1, "y": 2}}
    override  {"skills": ["c"], "meta": {"y": 3}}
    result    {"skills": ["c"], "meta": {"x": 1, "y": 3}}

Mappings merge key by key; lists and scalars are replaced wholesale.
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from vitae.contexts.persona.config_store import PersonaConfig
from vitae.contexts.persona.logger import _log_debug, _log_warning


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge override into base without mutating either.

    For each key in override: when both values are mappings they are merged
    recursively, otherwise the override value replaces the base value.
    Keys present only in base are kept as they are.

    Args:
        base: Original document
        override: Partial document whose values win

    Returns:
        New merged dict
    """
    result = dict(base)

    for key, value in override.items():
        current = base.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)

    return result


def get_override_path(overrides_dir: Path, persona_id: str) -> Path:
    """Conventional location of a persona's override document."""
    return Path(overrides_dir) / f"{persona_id}.json"


def load_overrides(overrides_dir: Path, persona: PersonaConfig) -> Optional[Dict[str, Any]]:
    """
    Load the override document for a persona.

    Args:
        overrides_dir: Directory holding <personaId>.json documents
        persona: Current persona configuration

    Returns:
        The override mapping, or None when there is none or it cannot be used
    """
    override_path = get_override_path(overrides_dir, persona.persona_id)

    if not override_path.exists():
        _log_debug(f"No overrides for persona '{persona.persona_id}'")
        return None

    try:
        overrides = json.loads(override_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        _log_warning(f"Could not load overrides from {override_path}: {e}")
        return None

    if not isinstance(overrides, dict):
        _log_warning(f"Overrides in {override_path} must be a JSON object, ignoring")
        return None

    return overrides


def apply_overrides(
    record: Dict[str, Any],
    persona: PersonaConfig,
    overrides_dir: Path,
) -> Dict[str, Any]:
    """
    Apply the persona's override document to a record.

    Missing overrides are expected and silent; unusable ones are logged and
    skipped. In both cases the record is returned unchanged.

    Args:
        record: Base resume record
        persona: Current persona configuration
        overrides_dir: Directory holding override documents

    Returns:
        The merged record (a new dict) or the input record
    """
    overrides = load_overrides(overrides_dir, persona)
    if overrides is None:
        return record

    _log_debug(f"Applying {len(overrides)} top-level override(s) for '{persona.persona_id}'")
    return deep_merge(record, overrides)
