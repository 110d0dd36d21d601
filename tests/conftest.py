"""Shared fixtures: loguru capture and throw-away project trees."""

import json
import shutil
import sys
from pathlib import Path

import pytest
from loguru import logger

from vitae.contexts.templating.paths import ensure_parent_dir
from vitae.utils.settings import BuildSettings

REPO_ROOT = Path(__file__).resolve().parents[1]

SAMPLE_RECORD = {
    "basics": {
        "name": "Sergio Example",
        "label": "Backend Engineer",
        "url": "https://sergio.dev",
    },
    "work": [
        {
            "name": "Example Corp",
            "position": "Engineer",
            "startDate": "2025-01-15",
            "endDate": "",
        }
    ],
    "skills": [{"name": "Languages", "keywords": ["Python", "SQL"]}],
}

PERSONA_CONFIG = {
    "personaId": "sergio",
    "displayName": "Sergio",
    "defaultLanguage": "en",
    "defaultRole": "backend",
    "outputNaming": "{persona}-{role}-{lang}.pdf",
}


@pytest.fixture
def log_messages():
    """Collect (level, message) pairs emitted through loguru during the test."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def reset_logger():
    """Restore a plain stderr sink after code that reconfigures loguru."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def project(tmp_path) -> BuildSettings:
    """A minimal project tree: real template and themes, persona config, empty src/."""
    shutil.copytree(REPO_ROOT / "templates", tmp_path / "templates")
    shutil.copytree(REPO_ROOT / "themes", tmp_path / "themes")

    config_path = tmp_path / "config" / "persona.config.json"
    config_path.parent.mkdir(parents=True)
    config_path.write_text(json.dumps(PERSONA_CONFIG), encoding="utf-8")
    (tmp_path / "config" / "overrides").mkdir()
    (tmp_path / "src").mkdir()

    return BuildSettings.for_root(tmp_path, output_format="html")


@pytest.fixture
def write_record(project):
    """Write a record at src/<relative_dir>/resume.json; data may be a dict or raw text."""

    def _write(relative_dir: str, data=None) -> Path:
        record_path = ensure_parent_dir(project.src_dir / relative_dir / "resume.json")
        if data is None:
            data = SAMPLE_RECORD
        text = data if isinstance(data, str) else json.dumps(data)
        record_path.write_text(text, encoding="utf-8")
        return record_path

    return _write


class FakePrinter:
    """Stands in for PdfPrinter; writes a marker file instead of launching Chromium."""

    def __init__(self, fail_on: str = None):
        self.fail_on = fail_on
        self.entered = False
        self.closed = False
        self.printed = []

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.closed = True

    def print_pdf(self, document: str, output_path: Path) -> Path:
        if self.fail_on and self.fail_on in str(output_path):
            raise RuntimeError("print engine crashed")
        ensure_parent_dir(output_path)
        output_path.write_bytes(b"%PDF-fake\n" + document.encode("utf-8"))
        self.printed.append(output_path)
        return output_path


@pytest.fixture
def fake_printers():
    """Factory for FakePrinter that remembers every instance it created."""
    created = []

    def factory(**kwargs):
        printer = FakePrinter(**kwargs)
        created.append(printer)
        return printer

    factory.created = created
    return factory
