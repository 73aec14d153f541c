"""Driver configuration model.

Collects everything one compile-and-emit run needs. Values come from
CLI options, with environment fallbacks for the compiler backend.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fe_core.pretty import DEFAULT_INDENT_WIDTH
from fe_core.targets import DEFAULT_TARGETS, TargetSet

# Environment variable naming the compiler backend callable
COMPILER_ENV_VAR = "FE_COMPILER"

# Backend used when neither --compiler nor FE_COMPILER is set
DEFAULT_COMPILER = "fe_compiler:compile"

DEFAULT_OUTPUT_DIR_NAME = "output"


def get_compiler_path() -> str:
    """Get the compiler backend path from FE_COMPILER, or the default."""
    return os.environ.get(COMPILER_ENV_VAR) or DEFAULT_COMPILER


class DriverConfig(BaseModel):
    """Configuration for a single compile-and-emit run.

    Attributes:
        input_path: Fe source file to compile.
        output_dir: Directory receiving the artifacts.
        targets: Artifact kinds to emit.
        overwrite: Allow writing into a non-empty output directory.
        optimize: Enable the Yul optimizer. Independent of overwrite.
        compiler: Dotted path of the compiler backend callable.
        yul_indent_width: Indentation width of emitted Yul.

    Example:
        >>> config = DriverConfig(input_path="erc20.fe", targets="abi,yul")
        >>> str(config.targets)
        'abi,yul'
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    input_path: Path = Field(..., description="Fe source file")
    output_dir: Path = Field(
        default=Path(DEFAULT_OUTPUT_DIR_NAME),
        description="Output directory",
    )
    targets: TargetSet = Field(
        default_factory=lambda: TargetSet.parse(DEFAULT_TARGETS),
        description="Artifact kinds to emit",
    )
    overwrite: bool = Field(default=False, description="Write into a non-empty output directory")
    optimize: bool = Field(default=False, description="Enable the Yul optimizer")
    compiler: str = Field(
        default_factory=get_compiler_path,
        min_length=1,
        description="Compiler backend, e.g. 'fe_compiler:compile'",
    )
    yul_indent_width: int = Field(
        default=DEFAULT_INDENT_WIDTH,
        ge=1,
        le=16,
        description="Indentation width of emitted Yul",
    )

    @field_validator("targets", mode="before")
    @classmethod
    def parse_targets(cls, value: Any) -> TargetSet:
        """Accept a comma-separated string or a list of names.

        Raises:
            UnknownTargetError: If a name is not a known artifact kind.
        """
        if isinstance(value, TargetSet):
            return value
        if isinstance(value, str):
            return TargetSet.parse(value)
        return TargetSet.from_names(value)
