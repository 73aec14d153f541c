"""Module emitter: writes the requested artifacts of a compiled module.

Output layout::

    <outdir>/module.ast
    <outdir>/module.tokens
    <outdir>/<contract>/<contract>_abi.json
    <outdir>/<contract>/<contract>_ir.yul
    <outdir>/<contract>/<contract>.bin

Emission is linear: validate the output directory, write module-level
artifacts, then per-contract artifacts. The first failure aborts the run
and nothing already written is rolled back.
"""

from __future__ import annotations

from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, Field

from fe_core.emission.guard import prepare_output_dir
from fe_core.emission.writer import write_artifact
from fe_core.errors import ArtifactWriteError
from fe_core.models import CompiledContract, CompiledModule
from fe_core.pretty import DEFAULT_INDENT_WIDTH, pretty_curly_print
from fe_core.targets import ArtifactKind, TargetSet

logger = structlog.get_logger(__name__)

MODULE_AST_FILE_NAME = "module.ast"
MODULE_TOKENS_FILE_NAME = "module.tokens"


def abi_file_name(contract_name: str) -> str:
    return f"{contract_name}_abi.json"


def yul_file_name(contract_name: str) -> str:
    return f"{contract_name}_ir.yul"


def bytecode_file_name(contract_name: str) -> str:
    return f"{contract_name}.bin"


class EmissionReport(BaseModel):
    """Summary of a completed emission.

    Attributes:
        output_dir: Directory the artifacts were written into.
        written: Every artifact file written, in write order.
        bytecode_skipped: Contracts whose requested bytecode was not
            written because the capability or payload was missing.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    output_dir: Path = Field(..., description="Output directory")
    written: tuple[Path, ...] = Field(default=(), description="Artifact files written")
    bytecode_skipped: tuple[str, ...] = Field(
        default=(),
        description="Contracts whose bytecode was requested but not emitted",
    )


class ModuleEmitter:
    """Write the artifacts selected by a TargetSet for a CompiledModule.

    The bytecode capability is the only build-dependent branch and lives
    here: a Bytecode target produces ``<contract>.bin`` only when
    ``bytecode_enabled`` is True and the contract carries a payload.
    Otherwise the target is skipped for that contract without error.

    Example:
        >>> emitter = ModuleEmitter(bytecode_enabled=solc_backend_available())
        >>> report = emitter.emit(module, TargetSet.parse("abi,yul"), Path("output"))
    """

    def __init__(
        self,
        *,
        bytecode_enabled: bool,
        yul_indent_width: int = DEFAULT_INDENT_WIDTH,
    ) -> None:
        """Initialize the ModuleEmitter.

        Args:
            bytecode_enabled: Whether the solc backend capability is present.
            yul_indent_width: Indentation width for pretty-printed Yul.
        """
        self.bytecode_enabled = bytecode_enabled
        self.yul_indent_width = yul_indent_width

    def emit(
        self,
        module: CompiledModule,
        targets: TargetSet,
        output_dir: Path | str,
        *,
        overwrite: bool = False,
    ) -> EmissionReport:
        """Emit all requested artifacts.

        The module's contracts are drained: the module is empty afterwards
        and must not be reused.

        Args:
            module: Compiler output to emit.
            targets: Requested artifact kinds.
            output_dir: Output directory.
            overwrite: Allow writing into a non-empty output directory.

        Returns:
            EmissionReport describing what was written.

        Raises:
            DestinationIsFileError: If a file occupies the output path.
            DestinationNotEmptyError: If the output directory has content
                and overwrite is False.
            ArtifactWriteError: On the first failed write.
        """
        root = prepare_output_dir(output_dir, overwrite=overwrite)
        log = logger.bind(output_dir=str(root), targets=str(targets))
        log.info("emission_started", contracts=len(module.contracts))

        written: list[Path] = []
        skipped: list[str] = []

        if targets.contains(ArtifactKind.ast):
            written.append(write_artifact(root / MODULE_AST_FILE_NAME, module.fe_ast))

        if targets.contains(ArtifactKind.tokens):
            written.append(write_artifact(root / MODULE_TOKENS_FILE_NAME, module.fe_tokens))

        for name, contract in module.drain_contracts():
            written.extend(self._emit_contract(root, name, contract, targets, skipped))

        log.info("emission_complete", artifacts=len(written), bytecode_skipped=len(skipped))
        return EmissionReport(
            output_dir=root,
            written=tuple(written),
            bytecode_skipped=tuple(skipped),
        )

    def _emit_contract(
        self,
        root: Path,
        name: str,
        contract: CompiledContract,
        targets: TargetSet,
        skipped: list[str],
    ) -> list[Path]:
        contract_dir = root / name
        try:
            contract_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ArtifactWriteError(contract_dir, e) from e

        written: list[Path] = []

        if targets.contains(ArtifactKind.abi):
            written.append(write_artifact(contract_dir / abi_file_name(name), contract.json_abi))

        if targets.contains(ArtifactKind.yul):
            body = pretty_curly_print(contract.yul, self.yul_indent_width)
            written.append(write_artifact(contract_dir / yul_file_name(name), body))

        if targets.contains(ArtifactKind.bytecode):
            if self.bytecode_enabled and contract.bytecode is not None:
                written.append(
                    write_artifact(contract_dir / bytecode_file_name(name), contract.bytecode)
                )
            else:
                logger.debug(
                    "bytecode_skipped",
                    contract=name,
                    backend_enabled=self.bytecode_enabled,
                )
                skipped.append(name)

        return written
