"""Artifact emission for fe-core.

This package provides:
- prepare_output_dir: Output directory safety checks
- write_artifact: Single-file writer
- ModuleEmitter: Writes the requested artifacts of a CompiledModule
"""

from __future__ import annotations

from fe_core.emission.emitter import (
    MODULE_AST_FILE_NAME,
    MODULE_TOKENS_FILE_NAME,
    EmissionReport,
    ModuleEmitter,
    abi_file_name,
    bytecode_file_name,
    yul_file_name,
)
from fe_core.emission.guard import is_nonexistent_or_empty, prepare_output_dir
from fe_core.emission.writer import write_artifact

__all__ = [
    "ModuleEmitter",
    "EmissionReport",
    "prepare_output_dir",
    "is_nonexistent_or_empty",
    "write_artifact",
    "MODULE_AST_FILE_NAME",
    "MODULE_TOKENS_FILE_NAME",
    "abi_file_name",
    "yul_file_name",
    "bytecode_file_name",
]
