"""CLI entry point for the Fe compiler driver.

Compiles one source file through the configured backend and emits the
requested artifacts into an output directory.
"""

from __future__ import annotations

from pathlib import Path

import click
import rich_click as rclick
from fe_core import (
    BYTECODE_ADVISORY,
    ArtifactKind,
    DriverConfig,
    FeError,
    ModuleEmitter,
    TargetSet,
    UnknownTargetError,
    compile_file,
    load_compiler,
    solc_backend_available,
)
from fe_core.config import COMPILER_ENV_VAR, DEFAULT_COMPILER, DEFAULT_OUTPUT_DIR_NAME
from fe_core.observability import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
    LOG_LEVELS,
    configure_logging,
)
from fe_core.pretty import DEFAULT_INDENT_WIDTH
from fe_core.targets import DEFAULT_TARGETS
from pydantic import ValidationError as PydanticValidationError

from fe_cli import __version__
from fe_cli.errors import handle_compile_failure
from fe_cli.output import set_no_color, success, warning

# Configure rich-click for better help formatting
rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True

TARGET_CHOICES = ", ".join(kind.value for kind in ArtifactKind)


def _parse_targets(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> TargetSet:
    """Merge every --emit occurrence into one TargetSet."""
    names = [name for item in value for name in item.split(",")]
    try:
        return TargetSet.from_names(names)
    except UnknownTargetError as e:
        raise click.BadParameter(e.user_message, ctx=ctx, param=param) from None


@click.command(cls=rclick.RichCommand)
@click.version_option(version=__version__, prog_name="fe")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
@click.argument("input_file", metavar="INPUT", type=click.Path(dir_okay=False))
@click.option(
    "-o",
    "--output-dir",
    "output_dir",
    type=click.Path(),
    default=DEFAULT_OUTPUT_DIR_NAME,
    show_default=True,
    help="The directory to store the compiler output e.g. /tmp/output",
)
@click.option(
    "-e",
    "--emit",
    "targets",
    multiple=True,
    default=(DEFAULT_TARGETS,),
    show_default=True,
    callback=_parse_targets,
    help=f"Comma separated compile targets e.g. -e bytecode,yul. Choices: {TARGET_CHOICES}",
)
@click.option(
    "--overwrite",
    is_flag=True,
    default=False,
    help="Overwrite contents of output directory.",
)
@click.option(
    "--optimize",
    is_flag=True,
    default=False,
    help="Enables the Yul optimizer.",
)
@click.option(
    "--yul-indent-width",
    type=click.IntRange(1, 16),
    default=DEFAULT_INDENT_WIDTH,
    show_default=True,
    help="Spaces per nesting level in emitted Yul.",
)
@click.option(
    "--compiler",
    "compiler_path",
    envvar=COMPILER_ENV_VAR,
    default=DEFAULT_COMPILER,
    show_default=True,
    help="Compiler backend callable, as 'module:function'.",
)
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV_VAR,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    help="Minimum level of diagnostic log output (written to stderr).",
)
def cli(
    input_file: str,
    output_dir: str,
    targets: TargetSet,
    overwrite: bool,
    optimize: bool,
    yul_indent_width: int,
    compiler_path: str,
    log_level: str,
) -> None:
    """Compiler for the Fe language.

    Compiles INPUT (e.g. `erc20.fe`) and writes the selected artifacts
    into the output directory.

    **Examples:**

    - `fe erc20.fe`
    - `fe erc20.fe -e abi,yul -o build/`
    - `fe erc20.fe --emit bytecode --overwrite --optimize`
    """
    configure_logging(log_level=log_level)

    config = DriverConfig(
        input_path=Path(input_file),
        output_dir=Path(output_dir),
        targets=targets,
        overwrite=overwrite,
        optimize=optimize,
        compiler=compiler_path,
        yul_indent_width=yul_indent_width,
    )

    bytecode_enabled = solc_backend_available()
    bytecode_requested = config.targets.contains(ArtifactKind.bytecode)
    if bytecode_requested and not bytecode_enabled:
        warning(BYTECODE_ADVISORY)

    try:
        backend = load_compiler(config.compiler)
        module = compile_file(
            backend,
            config.input_path,
            with_bytecode=bytecode_requested and bytecode_enabled,
            optimize=config.optimize,
        )
        emitter = ModuleEmitter(
            bytecode_enabled=bytecode_enabled,
            yul_indent_width=config.yul_indent_width,
        )
        emitter.emit(module, config.targets, config.output_dir, overwrite=config.overwrite)
    except (FeError, PydanticValidationError) as e:
        handle_compile_failure(input_file, e)

    success(f"Compiled {input_file}. Outputs in `{output_dir}`")


if __name__ == "__main__":
    cli()
