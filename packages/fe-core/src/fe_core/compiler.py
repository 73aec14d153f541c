"""Compiler backend integration for fe-core.

The lexer, parser, type checker and code generator live outside this
package. They are reached through a ModuleCompiler: any callable taking
source text and returning a CompiledModule (or a mapping of the same
shape). The backend is named by a dotted path such as
``fe_compiler:compile`` and imported on demand.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import structlog
from pydantic import ValidationError as PydanticValidationError

from fe_core.errors import CompilationError, CompilerNotFoundError, FeError
from fe_core.models import CompiledModule

logger = structlog.get_logger(__name__)


@runtime_checkable
class ModuleCompiler(Protocol):
    """Callable that compiles Fe source text."""

    def __call__(
        self,
        src: str,
        *,
        with_bytecode: bool,
        optimize: bool,
    ) -> CompiledModule | Mapping[str, Any]: ...


def load_compiler(compiler_path: str) -> ModuleCompiler:
    """Import a compiler backend by dotted path.

    Accepts ``package.module:attr`` or ``package.module.attr``.

    Args:
        compiler_path: Location of the backend callable.

    Returns:
        The backend callable.

    Raises:
        CompilerNotFoundError: If the module or attribute cannot be
            resolved, or the attribute is not callable.
    """
    if ":" in compiler_path:
        module_name, _, attr_name = compiler_path.partition(":")
    else:
        module_name, _, attr_name = compiler_path.rpartition(".")

    if not module_name or not attr_name:
        raise CompilerNotFoundError(compiler_path, internal_details="malformed compiler path")

    try:
        mod = importlib.import_module(module_name)
        backend = getattr(mod, attr_name)
    except (ImportError, AttributeError) as e:
        raise CompilerNotFoundError(compiler_path, internal_details=repr(e)) from e

    if not callable(backend):
        raise CompilerNotFoundError(
            compiler_path, internal_details=f"{type(backend).__name__} is not callable"
        )

    return backend  # type: ignore[no-any-return]


def compile_source(
    compiler: ModuleCompiler,
    src: str,
    *,
    with_bytecode: bool,
    optimize: bool,
) -> CompiledModule:
    """Run the backend and normalise its result to a CompiledModule.

    Args:
        compiler: Backend callable.
        src: Fe source text.
        with_bytecode: Ask the backend for bytecode.
        optimize: Enable the Yul optimizer.

    Returns:
        The compiled module.

    Raises:
        CompilationError: If the backend raises. Its message is kept as is.
        pydantic.ValidationError: If the backend returns a malformed mapping.
    """
    try:
        result = compiler(src, with_bytecode=with_bytecode, optimize=optimize)
    except FeError:
        raise
    except Exception as e:
        raise CompilationError(str(e), internal_details=repr(e)) from e

    if isinstance(result, CompiledModule):
        return result

    try:
        return CompiledModule.model_validate(result)
    except PydanticValidationError:
        logger.error("compiler_result_invalid", result_type=type(result).__name__)
        raise


def compile_file(
    compiler: ModuleCompiler,
    src_file: Path | str,
    *,
    with_bytecode: bool,
    optimize: bool,
) -> CompiledModule:
    """Read a source file and compile it.

    Args:
        compiler: Backend callable.
        src_file: Path to the .fe source.
        with_bytecode: Ask the backend for bytecode.
        optimize: Enable the Yul optimizer.

    Returns:
        The compiled module.

    Raises:
        CompilationError: If the file cannot be read or compilation fails.
    """
    path = Path(src_file)
    try:
        src = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CompilationError(f"Unable to read {path}: {e}") from e

    logger.info(
        "compiling",
        src_file=str(path),
        with_bytecode=with_bytecode,
        optimize=optimize,
    )
    return compile_source(compiler, src, with_bytecode=with_bytecode, optimize=optimize)
