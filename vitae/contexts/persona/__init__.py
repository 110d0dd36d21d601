"""
Persona Context

Responsibilities:
- Loads and validates the persona configuration (identity, defaults, output naming)
- Applies persona-specific content overrides to resume records

Owns: Persona configuration, override documents, deep merge
Never: Decides output paths or renders documents
"""

from vitae.contexts.persona.config_store import (
    PersonaConfig,
    PersonaConfigStore,
    load_persona_config,
)
from vitae.contexts.persona.overrides import apply_overrides, deep_merge, load_overrides

__all__ = [
    "PersonaConfig",
    "PersonaConfigStore",
    "load_persona_config",
    "apply_overrides",
    "deep_merge",
    "load_overrides",
]
