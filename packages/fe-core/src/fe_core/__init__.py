"""fe-core: Artifact emission for the Fe compiler driver.

This package provides:
- ArtifactKind / TargetSet: Which outputs to produce
- CompiledModule / CompiledContract: Compiler output contract
- ModuleEmitter: Writes the requested artifacts into an output directory
- Compiler backend loading and the solc backend capability check
"""

from __future__ import annotations

__version__ = "0.1.0"

from fe_core.compiler import ModuleCompiler, compile_file, compile_source, load_compiler
from fe_core.config import DriverConfig
from fe_core.emission import (
    EmissionReport,
    ModuleEmitter,
    prepare_output_dir,
    write_artifact,
)

# Error types
from fe_core.errors import (
    ArtifactWriteError,
    CompilationError,
    CompilerNotFoundError,
    DestinationIsFileError,
    DestinationNotEmptyError,
    FeError,
    UnknownTargetError,
)
from fe_core.features import BYTECODE_ADVISORY, solc_backend_available
from fe_core.models import CompiledContract, CompiledModule
from fe_core.pretty import pretty_curly_print
from fe_core.targets import DEFAULT_TARGETS, ArtifactKind, TargetSet

__all__ = [
    "__version__",
    # Targets
    "ArtifactKind",
    "TargetSet",
    "DEFAULT_TARGETS",
    # Models
    "CompiledModule",
    "CompiledContract",
    "DriverConfig",
    # Emission
    "ModuleEmitter",
    "EmissionReport",
    "prepare_output_dir",
    "write_artifact",
    "pretty_curly_print",
    # Compiler backend
    "ModuleCompiler",
    "load_compiler",
    "compile_source",
    "compile_file",
    "solc_backend_available",
    "BYTECODE_ADVISORY",
    # Errors
    "FeError",
    "UnknownTargetError",
    "DestinationIsFileError",
    "DestinationNotEmptyError",
    "ArtifactWriteError",
    "CompilationError",
    "CompilerNotFoundError",
]
