#!/usr/bin/env python3
# CUI // SP-CTI
"""Shared pytest fixtures for the banner marking test suite.

Centralizes project-root path setup, the four control registries and a
helper for writing throwaway vocabulary YAML files.
"""

import sys
import textwrap
from pathlib import Path

import pytest

# Ensure project root is on sys.path
BASE_DIR = Path(__file__).resolve().parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from banner_marking.controls import control_vocabulary  # noqa: E402


@pytest.fixture
def dissem():
    """Dissemination control registry (NOFORN, ORCON, ...)."""
    return control_vocabulary.dissem_controls()


@pytest.fixture
def other_dissem():
    """Other dissemination control registry (EXDIS, LIMDIS, ...)."""
    return control_vocabulary.other_dissem_controls()


@pytest.fixture
def classification():
    """Classification level registry (UNCLASSIFIED .. TOP SECRET)."""
    return control_vocabulary.classification_levels()


@pytest.fixture
def aea():
    """Atomic Energy Act type registry (RD, FRD, ...)."""
    return control_vocabulary.aea_types()


@pytest.fixture
def write_vocabulary(tmp_path):
    """Write a vocabulary YAML document to a temp file and return its path."""

    def _write(content: str, name: str = "banner_controls.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write
