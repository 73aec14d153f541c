"""Shared test fixtures for fe-cli tests.

Provides CliRunner fixtures, a stand-in compiler backend and source
files for testing the driver end to end.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Generator, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from fe_cli import output

TOKEN_SOURCE = "contract Token:\n    pub fn balance_of() -> u256:\n        return 0\n"
TWO_CONTRACT_SOURCE = "contract Foo:\n    pass\ncontract Bar:\n    pass\n"

FAKE_BACKEND_SOURCE = '''
from fe_core.models import CompiledContract, CompiledModule


def compile(src, *, with_bytecode, optimize):
    if "syntax error" in src:
        raise ValueError("unexpected token `error` at 1:8")
    contracts = {}
    for line in src.splitlines():
        if line.startswith("contract "):
            name = line.split()[1].rstrip(":")
            contracts[name] = CompiledContract(
                json_abi='[{"name": "%s"}]' % name,
                yul='object "%s" { code { } }' % name,
                bytecode="6080" if with_bytecode else None,
            )
    return CompiledModule(
        fe_ast="Module(optimize=%s, with_bytecode=%s)" % (optimize, with_bytecode),
        fe_tokens=src,
        contracts=contracts,
    )


def compile_invalid(src, *, with_bytecode, optimize):
    return {"contracts": {"Foo": {"json_abi": "[]"}}}
'''


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    Yields:
        CliRunner instance with isolated filesystem.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture(autouse=True)
def plain_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use uncolored, wide consoles so output assertions see plain text."""
    console = output.create_console(no_color=True)
    console.width = 1000
    monkeypatch.setattr(output, "console", console)
    err_console = output.create_console(no_color=True, stderr=True)
    err_console.width = 1000
    monkeypatch.setattr(output, "err_console", err_console)


@pytest.fixture
def fake_backend(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Install a stand-in compiler backend and point FE_COMPILER at it.

    Returns:
        The backend module name.
    """
    backend_dir = tmp_path / "backend"
    backend_dir.mkdir()
    (backend_dir / "fake_fe_backend.py").write_text(FAKE_BACKEND_SOURCE)
    monkeypatch.syspath_prepend(str(backend_dir))
    monkeypatch.delitem(sys.modules, "fake_fe_backend", raising=False)
    monkeypatch.setenv("FE_COMPILER", "fake_fe_backend:compile")
    return "fake_fe_backend"


@pytest.fixture
def solc_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Force the solc backend capability on."""
    monkeypatch.setenv("FE_SOLC_BACKEND", "1")


@pytest.fixture
def solc_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Force the solc backend capability off."""
    monkeypatch.setenv("FE_SOLC_BACKEND", "0")


@pytest.fixture
def token_source(tmp_path: Path) -> Path:
    """Write a one-contract source file."""
    path = tmp_path / "token.fe"
    path.write_text(TOKEN_SOURCE)
    return path


@pytest.fixture
def two_contract_source(tmp_path: Path) -> Path:
    """Write a two-contract source file."""
    path = tmp_path / "pair.fe"
    path.write_text(TWO_CONTRACT_SOURCE)
    return path


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo the logging setup each invocation of the fe command performs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
