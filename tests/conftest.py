"""Shared test fixtures for playstyle."""

from __future__ import annotations

from pathlib import Path

import pytest

from playstyle.models.document import Document
from playstyle.parser.loader import DocumentLoader
from playstyle.rules import RuleRegistry
from playstyle.service.checker import Checker
from playstyle.settings import Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"
GOOD_PLAYBOOK = FIXTURES_DIR / "good_playbook.yml"
BAD_PLAYBOOK = FIXTURES_DIR / "bad_playbook.yml"
MALFORMED_PLAYBOOK = FIXTURES_DIR / "malformed.yml"

SAMPLE_TASKS_YAML = """\
---
- name: 'install packages'
  apt:
    name: 'nginx'
    state: 'present'
    update_cache: true
  become: true

- name: 'render site config'
  template:
    src: 'site.conf.j2'
    dest: '/etc/nginx/conf.d/site.conf'
    mode: 0644
"""


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def loader(settings: Settings) -> DocumentLoader:
    return DocumentLoader(settings)


@pytest.fixture
def checker(settings: Settings) -> Checker:
    return Checker(settings)


@pytest.fixture
def load(loader: DocumentLoader):
    """Load a YAML string into a ``Document``."""

    def _load(content: str) -> Document:
        return loader.load_string(content)

    return _load


@pytest.fixture
def run_rule(load):
    """Run a single named rule over a YAML string."""

    def _run(name: str, content: str, settings: Settings | None = None):
        return RuleRegistry.get(name, settings).check(load(content))

    return _run
