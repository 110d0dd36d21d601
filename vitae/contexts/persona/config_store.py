"""
Persona configuration loading.

The persona configuration is a single JSON (or YAML) document:

    {
        "personaId": "sergio",
        "displayName": "Sergio",
        "defaultLanguage": "en",
        "defaultRole": "backend",
        "outputNaming": "{persona}-{role}-{lang}.pdf"
    }

Loading never fails: an unreadable or malformed document yields the
built-in defaults, and each missing or invalid field is replaced by its own
default with a warning.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from vitae.contexts.persona.defaults import REQUIRED_FIELDS, get_default_persona_config
from vitae.contexts.persona.logger import _log_debug, _log_info, _log_warning


@dataclass(frozen=True)
class PersonaConfig:
    """
    Persona identity and naming defaults.

    Attributes:
        persona_id: Identifier used in output names and to locate overrides
        display_name: Human-readable persona name
        default_language: Locale used when a record's path carries none
        default_role: Role used when a record's path carries none
        output_naming: Filename template with {persona} {role} {lang} {date} tokens
    """

    persona_id: str
    display_name: str
    default_language: str
    default_role: str
    output_naming: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersonaConfig":
        return cls(
            persona_id=data["personaId"],
            display_name=data["displayName"],
            default_language=data["defaultLanguage"],
            default_role=data["defaultRole"],
            output_naming=data["outputNaming"],
        )


def _is_valid(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _validate_fields(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Keep valid fields from raw, replacing each missing/invalid one by its default."""
    defaults = get_default_persona_config()
    resolved = {}

    for key, default in defaults.items():
        value = raw.get(key)
        if _is_valid(value):
            resolved[key] = value
            continue

        reason = "missing" if value is None else f"invalid ({value!r})"
        kind = "required field" if key in REQUIRED_FIELDS else "field"
        _log_warning(f"{kind} {key} {reason} in persona config, using default '{default}'")
        resolved[key] = default

    return resolved


def load_persona_config(config_path: Path) -> PersonaConfig:
    """
    Load the persona configuration, falling back to defaults.

    Args:
        config_path: Path to persona.config.json

    Returns:
        A complete PersonaConfig (never raises)
    """
    # "${...}" in a persona value is literal text, not an interpolation
    try:
        loaded = OmegaConf.to_container(OmegaConf.load(config_path), resolve=False)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, OmegaConfBaseException) as e:
        _log_warning(f"Could not load persona config: {e}")
        _log_warning("Using default configuration")
        return PersonaConfig.from_dict(get_default_persona_config())

    if not isinstance(loaded, dict):
        _log_warning(f"Persona config at {config_path} is not a mapping")
        _log_warning("Using default configuration")
        return PersonaConfig.from_dict(get_default_persona_config())

    config = PersonaConfig.from_dict(_validate_fields(loaded))
    _log_info(f"Persona: {config.persona_id} ({config.display_name})")
    _log_debug(f"  Config: {config_path}")
    _log_debug(f"  Output naming: {config.output_naming}")
    return config


class PersonaConfigStore:
    """
    Loads the persona configuration once and hands out the same object thereafter.

    One store is built per build run and passed to whoever needs the config.
    """

    def __init__(self, config_path: Path):
        self.config_path = Path(config_path)
        self._config: Optional[PersonaConfig] = None

    def get(self) -> PersonaConfig:
        """Return the persona configuration, loading it on first use."""
        if self._config is None:
            self._config = load_persona_config(self.config_path)
        return self._config

    def is_loaded(self) -> bool:
        return self._config is not None
