"""Custom exception hierarchy for fe-core.

This module defines the exception classes raised by the emission stage:
- FeError: Base exception for all driver errors
- UnknownTargetError: A requested output kind is not recognised
- DestinationIsFileError / DestinationNotEmptyError: Output directory guard failures
- ArtifactWriteError: An artifact could not be persisted
- CompilationError: The compiler backend rejected the source

User-facing messages are safe to display. Technical details (OS error
numbers, backend tracebacks) are logged internally via structlog.

Every error aborts the whole emission. Artifacts already written by an
aborted run stay on disk; re-running with --overwrite is the recovery path.
"""

from __future__ import annotations

from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


class FeError(Exception):
    """Base exception for the Fe compiler driver.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging. This is
            logged internally but never exposed to the user.

    Example:
        >>> raise FeError(
        ...     "Unable to write output",
        ...     internal_details="[Errno 28] No space left on device",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize FeError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "fe_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class UnknownTargetError(FeError):
    """Raised when an --emit token does not name a known artifact kind.

    Attributes:
        token: The offending token, as supplied by the user.
        known_targets: The accepted target names.

    Example:
        >>> raise UnknownTargetError("wasm", known_targets=["abi", "ast"])
        # User sees: "Unknown target 'wasm'. Valid targets: abi, ast"
    """

    def __init__(self, token: str, *, known_targets: list[str]) -> None:
        """Initialize UnknownTargetError.

        Args:
            token: The unrecognised target name.
            known_targets: Names that would have been accepted.
        """
        super().__init__(f"Unknown target '{token}'. Valid targets: {', '.join(known_targets)}")
        self.token = token
        self.known_targets = known_targets


class DestinationIsFileError(FeError):
    """Raised when a regular file sits where the output directory should be.

    Always fatal, --overwrite does not apply: a file cannot become a
    directory tree.
    """

    def __init__(self, path: Path | str) -> None:
        """Initialize DestinationIsFileError.

        Args:
            path: The output directory path.
        """
        super().__init__(
            f"A file exists at path `{path}`, the location of the output directory. "
            "Refusing to overwrite."
        )
        self.path = Path(path)


class DestinationNotEmptyError(FeError):
    """Raised when the output directory already has content and --overwrite is off."""

    def __init__(self, path: Path | str) -> None:
        """Initialize DestinationNotEmptyError.

        Args:
            path: The output directory path.
        """
        super().__init__(f"Directory '{path}' is not empty. Use --overwrite to overwrite.")
        self.path = Path(path)


class ArtifactWriteError(FeError):
    """Raised when an artifact or directory cannot be written.

    Wraps the underlying OSError (permission denied, disk full,
    invalid path) or the UnicodeEncodeError of a body that is not
    encodable as UTF-8.

    Attributes:
        path: The file or directory that failed.
        cause: The underlying error.
    """

    def __init__(self, path: Path | str, cause: OSError | UnicodeError) -> None:
        """Initialize ArtifactWriteError.

        Args:
            path: The file or directory that could not be written.
            cause: The underlying I/O or encoding error.
        """
        if isinstance(cause, UnicodeEncodeError):
            # str(cause) echoes the offending character, which may not print
            reason = f"text is not encodable as UTF-8 ({cause.reason} at position {cause.start})"
        else:
            reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(
            f"Unable to write `{path}`: {reason}",
            internal_details=repr(cause),
        )
        self.path = Path(path)
        self.cause = cause


class CompilationError(FeError):
    """Raised when the compiler backend fails.

    The backend's message is surfaced unchanged.

    Example:
        >>> raise CompilationError("type mismatch at 3:12")
    """

    pass


class CompilerNotFoundError(CompilationError):
    """Raised when the configured compiler backend cannot be imported.

    Attributes:
        compiler_path: The dotted path that failed to resolve.
    """

    def __init__(self, compiler_path: str, *, internal_details: str | None = None) -> None:
        """Initialize CompilerNotFoundError.

        Args:
            compiler_path: Dotted path of the backend callable.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(
            f"Compiler backend '{compiler_path}' could not be loaded. "
            "Set --compiler or FE_COMPILER to an importable callable.",
            internal_details=internal_details,
        )
        self.compiler_path = compiler_path
