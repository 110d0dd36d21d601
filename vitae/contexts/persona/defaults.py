"""
Default values for the persona configuration.

Used by config_store.py whenever the persona configuration file is absent,
unreadable, or missing individual fields.
"""

from typing import Any, Dict

# Keys as they appear in persona.config.json
DEFAULT_PERSONA_CONFIG = {
    "personaId": "default",
    "displayName": "Resume",
    "defaultLanguage": "en",
    "defaultRole": "developer",
    "outputNaming": "{persona}-{role}-{lang}.pdf",
}

# Fields the build cannot do without
REQUIRED_FIELDS = ("personaId", "outputNaming")

# Tokens understood by the output naming template
NAMING_TOKENS = ("persona", "role", "lang", "date")


def get_default_persona_config() -> Dict[str, Any]:
    """Fresh copy of the built-in persona configuration."""
    return DEFAULT_PERSONA_CONFIG.copy()
