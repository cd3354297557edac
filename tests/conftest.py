"""Shared pytest fixtures."""

from __future__ import annotations

import sys
import textwrap
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:  # pragma: no cover - typing only
    from pathlib import Path


SAMPLE_MODULE = "toggled_sample_models"

_SAMPLE_SOURCE = '''
from pydantic import BaseModel, Field

from toggled import Enable


class Inside(BaseModel):
    thing: int
    other: str


class Outside(BaseModel):
    name: str = "sample"
    inside: Enable[Inside] = Field(default_factory=Enable.off)
'''


@pytest.fixture(autouse=True)
def _no_log_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's ``TOGGLED_LOG_LEVEL`` from leaking into tests."""
    monkeypatch.delenv("TOGGLED_LOG_LEVEL", raising=False)


@pytest.fixture
def sample_models(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Provide an importable module with sample models.

    Returns the ``module:Name`` reference of its ``Outside`` model.
    """
    (tmp_path / f"{SAMPLE_MODULE}.py").write_text(textwrap.dedent(_SAMPLE_SOURCE), encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, SAMPLE_MODULE, raising=False)
    return f"{SAMPLE_MODULE}:Outside"


@pytest.fixture
def write_document(tmp_path: Path):
    """Return a helper writing dedented text to a file under ``tmp_path``."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write
