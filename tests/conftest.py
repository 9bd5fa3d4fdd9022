"""Shared pytest fixtures and test helpers for commonkit tests."""

from __future__ import annotations

import sys
import textwrap
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from commonkit.domain.descriptors import FieldDescriptor, TypeDescriptor
from commonkit.domain.types import Visibility

SAMPLE_MODULE = "ck_sample_types"

SAMPLE_SOURCE = '''\
from typing import Protocol


class Named(Protocol):
    LABEL: str = "named"


class Tagged(Protocol):
    LABEL: str = "tagged"


class Versioned(Named, Protocol):
    VERSION: int = 1


class Base(Versioned):
    owner: str = "root"
    _ledger: tuple = ()

    def describe(self) -> str:
        return self.owner


class Account(Base, Tagged):
    __secret: str = "s3cr3t"
    balance: int = 0

    @property
    def masked(self) -> str:
        return "***"


class Plain:
    pass


NOT_A_CLASS = 42
'''


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[str]:
    """Write an importable module of sample classes and return its name."""
    (tmp_path / f"{SAMPLE_MODULE}.py").write_text(textwrap.dedent(SAMPLE_SOURCE))
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, SAMPLE_MODULE, raising=False)
    yield SAMPLE_MODULE
    sys.modules.pop(SAMPLE_MODULE, None)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no config env var set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("COMMONKIT_CONFIG", raising=False)


# ---------------------------------------------------------------------------
# Descriptor builders
# ---------------------------------------------------------------------------


def public(name: str) -> FieldDescriptor:
    return FieldDescriptor(name=name, visibility=Visibility.PUBLIC)


def private(name: str) -> FieldDescriptor:
    return FieldDescriptor(name=name, visibility=Visibility.PRIVATE)


@pytest.fixture
def diamond() -> dict[str, TypeDescriptor]:
    """``Base implements IB``; ``Derived extends Base implements ID``; ``ID extends IB``."""
    ib = TypeDescriptor.interface("IB", fields=[public("y")])
    i_d = TypeDescriptor.interface("ID", extends=[ib])
    base = TypeDescriptor("Base", interfaces=(ib,), fields=(private("x"), public("shared")))
    derived = TypeDescriptor("Derived", superclass=base, interfaces=(i_d,))
    return {"IB": ib, "ID": i_d, "Base": base, "Derived": derived}
