"""Shared pytest fixtures for fe-core tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import structlog

from fe_core.models import CompiledContract, CompiledModule

TOKEN_ABI = '[{"type":"function","name":"balanceOf","inputs":[],"outputs":[]}]'
TOKEN_YUL = 'object "Token" { code { sstore(0, 1) } }'


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    Without this, structlog may use different processors depending on
    test execution order.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def token_contract() -> CompiledContract:
    """Return a contract with ABI and Yul but no bytecode."""
    return CompiledContract(json_abi=TOKEN_ABI, yul=TOKEN_YUL)


@pytest.fixture
def token_module(token_contract: CompiledContract) -> CompiledModule:
    """Return a module holding the single 'Token' contract."""
    return CompiledModule(
        fe_ast="Module { body: [Contract(Token)] }",
        fe_tokens="contract Token:\n    pub fn f():\n        pass\n",
        contracts={"Token": token_contract},
    )


@pytest.fixture
def two_contract_module() -> CompiledModule:
    """Return a module with two contracts, both carrying bytecode."""
    return CompiledModule(
        fe_ast="Module { body: [Contract(Foo), Contract(Bar)] }",
        fe_tokens="contract Foo:\ncontract Bar:\n",
        contracts={
            "Foo": CompiledContract(json_abi="[]", yul='object "Foo" { code { } }', bytecode="6080"),
            "Bar": CompiledContract(json_abi="[]", yul='object "Bar" { code { } }', bytecode="6081"),
        },
    )


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Return a not-yet-existing output directory path."""
    return tmp_path / "output"


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
                json_abi="[]",
                yul='object "%s" { code { } }' % name,
                bytecode="6080" if with_bytecode else None,
            )
    return CompiledModule(
        fe_ast="Module(optimize=%s)" % optimize,
        fe_tokens=src,
        contracts=contracts,
    )


def compile_mapping(src, *, with_bytecode, optimize):
    return {"fe_ast": "ast", "fe_tokens": "tokens", "contracts": {"Foo": {"json_abi": "[]", "yul": ""}}}


def compile_invalid(src, *, with_bytecode, optimize):
    return {"contracts": {"Foo": {"json_abi": "[]"}}}


NOT_CALLABLE = 42
'''


@pytest.fixture
def fake_backend(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Install an importable stand-in compiler backend.

    Returns:
        Module name of the backend; its entry point is ``<name>:compile``.
    """
    backend_dir = tmp_path / "backend"
    backend_dir.mkdir()
    (backend_dir / "fake_fe_backend.py").write_text(FAKE_BACKEND_SOURCE)
    monkeypatch.syspath_prepend(str(backend_dir))
    monkeypatch.delitem(sys.modules, "fake_fe_backend", raising=False)
    return "fake_fe_backend"
