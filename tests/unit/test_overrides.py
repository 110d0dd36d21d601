"""Unit tests for persona override merging."""

import copy
import json

import pytest

from vitae.contexts.persona.config_store import PersonaConfig
from vitae.contexts.persona.overrides import (
    apply_overrides,
    deep_merge,
    get_override_path,
    load_overrides,
)

PERSONA = PersonaConfig(
    persona_id="sergio",
    display_name="Sergio",
    default_language="en",
    default_role="backend",
    output_naming="{persona}-{role}-{lang}.pdf",
)


@pytest.mark.unit
class TestDeepMerge:
    """Tests for deep_merge."""

    def test_mappings_merge_lists_replace(self):
        base = {"skills": ["a", "b"], "meta": {"x": 1, "y": 2}}
        override = {"skills": ["c"], "meta": {"y": 3}}

        assert deep_merge(base, override) == {"skills": ["c"], "meta": {"x": 1, "y": 3}}

    def test_base_only_keys_preserved(self):
        base = {"basics": {"name": "Ada", "email": "ada@example.com"}, "work": []}
        override = {"basics": {"name": "Ada L."}}

        merged = deep_merge(base, override)

        assert merged["basics"] == {"name": "Ada L.", "email": "ada@example.com"}
        assert merged["work"] == []

    def test_nested_recursion(self):
        base = {"a": {"b": {"c": 1, "d": 2}}}
        override = {"a": {"b": {"d": 3, "e": 4}}}

        assert deep_merge(base, override) == {"a": {"b": {"c": 1, "d": 3, "e": 4}}}

    def test_scalar_replaced_by_mapping(self):
        assert deep_merge({"a": 5}, {"a": {"b": 1}}) == {"a": {"b": 1}}

    def test_mapping_replaced_by_scalar(self):
        assert deep_merge({"a": {"b": 1}}, {"a": "flat"}) == {"a": "flat"}

    def test_null_override_replaces(self):
        assert deep_merge({"a": {"b": 1}}, {"a": None}) == {"a": None}

    def test_lists_of_mappings_not_element_merged(self):
        base = {"work": [{"name": "A", "position": "Dev"}, {"name": "B"}]}
        override = {"work": [{"name": "C"}]}

        assert deep_merge(base, override) == {"work": [{"name": "C"}]}

    def test_inputs_not_mutated(self):
        base = {"meta": {"x": 1}, "skills": ["a"]}
        override = {"meta": {"y": 2}, "skills": ["b"]}
        base_before = copy.deepcopy(base)
        override_before = copy.deepcopy(override)

        merged = deep_merge(base, override)
        merged["meta"]["z"] = 3
        merged["skills"].append("c")

        assert base == base_before
        assert override == override_before

    def test_idempotent(self):
        base = {"skills": ["a", "b"], "meta": {"x": 1, "y": 2}, "name": "Ada"}
        override = {"skills": ["c"], "meta": {"y": 3}}

        once = deep_merge(base, override)
        twice = deep_merge(once, override)

        assert once == twice


@pytest.mark.unit
def test_override_path_convention(tmp_path):
    assert get_override_path(tmp_path, "sergio") == tmp_path / "sergio.json"


@pytest.mark.unit
def test_apply_overrides_absent_is_silent(tmp_path, log_messages):
    record = {"basics": {"name": "Ada"}}

    result = apply_overrides(record, PERSONA, tmp_path)

    assert result is record
    assert [m for level, m in log_messages if level == "WARNING"] == []


@pytest.mark.unit
def test_apply_overrides_invalid_json_warns(tmp_path, log_messages):
    (tmp_path / "sergio.json").write_text("{not json", encoding="utf-8")
    record = {"basics": {"name": "Ada"}}

    result = apply_overrides(record, PERSONA, tmp_path)

    assert result == {"basics": {"name": "Ada"}}
    warnings = [m for level, m in log_messages if level == "WARNING"]
    assert len(warnings) == 1
    assert "sergio.json" in warnings[0]


@pytest.mark.unit
def test_apply_overrides_undecodable_file_warns(tmp_path, log_messages):
    (tmp_path / "sergio.json").write_bytes(b'{"x": "\xff"}')
    record = {"basics": {"name": "Ada"}}

    result = apply_overrides(record, PERSONA, tmp_path)

    assert result is record
    warnings = [m for level, m in log_messages if level == "WARNING"]
    assert len(warnings) == 1
    assert "sergio.json" in warnings[0]


@pytest.mark.unit
def test_apply_overrides_non_object_ignored(tmp_path, log_messages):
    (tmp_path / "sergio.json").write_text("[1, 2]", encoding="utf-8")

    assert load_overrides(tmp_path, PERSONA) is None
    assert any(level == "WARNING" for level, _ in log_messages)


@pytest.mark.unit
def test_apply_overrides_merges(tmp_path):
    overrides = {"basics": {"label": "Platform Engineer"}, "skills": ["Go"]}
    (tmp_path / "sergio.json").write_text(json.dumps(overrides), encoding="utf-8")
    record = {"basics": {"name": "Ada", "label": "Engineer"}, "skills": ["Python", "SQL"]}

    result = apply_overrides(record, PERSONA, tmp_path)

    assert result == {
        "basics": {"name": "Ada", "label": "Platform Engineer"},
        "skills": ["Go"],
    }
    assert record["basics"]["label"] == "Engineer"


@pytest.mark.unit
def test_apply_overrides_uses_persona_id(tmp_path):
    (tmp_path / "someone-else.json").write_text('{"basics": {"name": "X"}}', encoding="utf-8")
    record = {"basics": {"name": "Ada"}}

    assert apply_overrides(record, PERSONA, tmp_path) == {"basics": {"name": "Ada"}}
