"""CLI error handling for fe-cli.

Wraps fe-core exceptions into CLIError so Click prints a user-friendly
message and exits with the right code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click
from pydantic import ValidationError as PydanticValidationError

from fe_cli.output import error

if TYPE_CHECKING:
    from fe_core.errors import FeError
    from pydantic_core import ErrorDetails


# Exit codes: every compilation or emission failure is a plain failure
EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_FAILURE) -> None:
        """Initialize CLIError.

        Args:
            message: User-facing error message.
            exit_code: Exit code for the CLI.
        """
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message using Rich formatting.

        Args:
            file: Output file (unused, for Click compatibility).
        """
        error(self.format_message())


def format_pydantic_error(err: PydanticValidationError) -> str:
    """Format Pydantic validation error into user-friendly message.

    Args:
        err: Pydantic ValidationError instance.

    Returns:
        Formatted error message with field paths and issues.

    Example:
        >>> format_pydantic_error(err)
        "Validation failed:\\n  - contracts.Token.yul: Field required"
    """
    errors: list[ErrorDetails] = err.errors()
    lines = ["Validation failed:"]

    for e in errors:
        loc = ".".join(str(x) for x in e["loc"])
        msg = e["msg"]
        lines.append(f"  - {loc}: {msg}")

    return "\n".join(lines)


def handle_compile_failure(input_file: str, err: FeError | PydanticValidationError) -> NoReturn:
    """Turn a compilation or emission failure into a CLIError.

    Args:
        input_file: Source file being compiled.
        err: The failure raised by fe-core or the backend result validation.

    Raises:
        CLIError: Always, with exit code 1.
    """
    if isinstance(err, PydanticValidationError):
        detail = f"Compiler returned an invalid module.\n{format_pydantic_error(err)}"
    else:
        detail = err.user_message

    raise CLIError(f"Unable to compile {input_file}.\nError: {detail}")
