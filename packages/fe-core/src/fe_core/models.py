"""Compiled module models for fe-core.

This module defines the input contract handed to the emitter by the
compiler backend:
- CompiledContract: per-contract outputs (ABI, Yul, optional bytecode)
- CompiledModule: module-level outputs plus the contracts mapping

Contract names are used verbatim as directory and file names. The
backend guarantees they are unique (they are mapping keys) and safe as
path components; the emitter does not re-validate them.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field


class CompiledContract(BaseModel):
    """Outputs for a single contract.

    Attributes:
        json_abi: JSON-encoded interface description.
        yul: Yul intermediate representation, unformatted.
        bytecode: Hex-encoded deployment bytecode. None when the solc
            backend is absent or bytecode was not requested.

    Example:
        >>> contract = CompiledContract(json_abi="[]", yul='object "Foo" { code { } }')
        >>> contract.bytecode is None
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    json_abi: str = Field(..., description="JSON-encoded contract ABI")
    yul: str = Field(..., description="Yul intermediate representation")
    bytecode: str | None = Field(
        default=None,
        description="Hex-encoded bytecode, present only with the solc backend",
    )


class CompiledModule(BaseModel):
    """Everything the compiler produced for one source module.

    A CompiledModule is consumed exactly once: drain_contracts() moves the
    contracts out, leaving the mapping empty.

    Attributes:
        fe_ast: Textual syntax tree of the module.
        fe_tokens: Textual token stream of the module.
        contracts: Contract name to CompiledContract. Names must be unique
            and usable as directory names (caller precondition).
    """

    model_config = ConfigDict(extra="forbid")

    fe_ast: str = Field(default="", description="Module syntax tree")
    fe_tokens: str = Field(default="", description="Module token stream")
    contracts: dict[str, CompiledContract] = Field(
        default_factory=dict,
        description="Compiled contracts keyed by contract name",
    )

    def drain_contracts(self) -> Iterator[tuple[str, CompiledContract]]:
        """Yield each (name, contract) pair, removing it from the module.

        Yields:
            Contract name and its compiled outputs, in mapping order.
        """
        while self.contracts:
            name = next(iter(self.contracts))
            yield name, self.contracts.pop(name)
