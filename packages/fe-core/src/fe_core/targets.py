"""Compilation target models for fe-core.

This module defines the ArtifactKind enum and the TargetSet collection
used to select which artifacts the emitter materializes.

Target names are plain strings only at the parse boundary (the --emit
option). Past TargetSet construction everything is an ArtifactKind.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum

from fe_core.errors import UnknownTargetError

DEFAULT_TARGETS = "abi,bytecode"
"""Targets emitted when the caller does not choose any."""


class ArtifactKind(str, Enum):
    """Output formats the driver can emit.

    Used both as a requested-target tag and as the kind of a produced
    artifact.
    """

    abi = "abi"
    ast = "ast"
    bytecode = "bytecode"
    tokens = "tokens"
    yul = "yul"


class TargetSet:
    """Immutable, deduplicated set of requested artifact kinds.

    Example:
        >>> targets = TargetSet.parse("abi,yul,abi")
        >>> ArtifactKind.yul in targets
        True
        >>> len(targets)
        2
    """

    __slots__ = ("_kinds",)

    def __init__(self, kinds: Iterable[ArtifactKind] = ()) -> None:
        """Initialize TargetSet from already-validated kinds.

        Args:
            kinds: Artifact kinds to include. Duplicates are collapsed.
        """
        self._kinds: frozenset[ArtifactKind] = frozenset(ArtifactKind(k) for k in kinds)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> TargetSet:
        """Build a TargetSet from user-supplied target names.

        Names are matched case-insensitively after stripping whitespace.
        All names are validated before anything is built.

        Args:
            names: Target names such as "abi" or "bytecode".

        Returns:
            The validated TargetSet.

        Raises:
            UnknownTargetError: If any name is not a known artifact kind.
        """
        known = [kind.value for kind in ArtifactKind]
        kinds: list[ArtifactKind] = []
        for name in names:
            token = name.strip().lower()
            if token not in known:
                raise UnknownTargetError(name, known_targets=known)
            kinds.append(ArtifactKind(token))
        return cls(kinds)

    @classmethod
    def parse(cls, value: str) -> TargetSet:
        """Parse a comma-separated target list, e.g. "abi,bytecode".

        Args:
            value: Comma-separated target names.

        Returns:
            The validated TargetSet.

        Raises:
            UnknownTargetError: If any token is unknown or empty.
        """
        return cls.from_names(value.split(","))

    def contains(self, kind: ArtifactKind) -> bool:
        """Return True if the given kind was requested."""
        return kind in self._kinds

    def __contains__(self, kind: object) -> bool:
        return kind in self._kinds

    def __iter__(self) -> Iterator[ArtifactKind]:
        return iter(sorted(self._kinds, key=lambda k: k.value))

    def __len__(self) -> int:
        return len(self._kinds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TargetSet):
            return NotImplemented
        return self._kinds == other._kinds

    def __hash__(self) -> int:
        return hash(self._kinds)

    def __repr__(self) -> str:
        return f"TargetSet({','.join(k.value for k in self)})"

    def __str__(self) -> str:
        return ",".join(k.value for k in self)
