"""Output directory safety checks.

The guard is the entire concurrency discipline of the emitter: it does
not lock. Two runs writing into the same directory at once is undefined
behaviour and the caller's responsibility.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from fe_core.errors import (
    ArtifactWriteError,
    DestinationIsFileError,
    DestinationNotEmptyError,
)

logger = structlog.get_logger(__name__)


def is_nonexistent_or_empty(path: Path) -> bool:
    """Return True if path does not exist or is a directory with no entries.

    Raises:
        ArtifactWriteError: If the directory exists but cannot be listed.
    """
    if not path.exists():
        return True
    try:
        return next(path.iterdir(), None) is None
    except OSError as e:
        raise ArtifactWriteError(path, e) from e


def prepare_output_dir(path: Path | str, *, overwrite: bool) -> Path:
    """Verify the output directory is safe to write into, then create it.

    Checks, in order:
    1. A non-directory at ``path`` is always rejected.
    2. Without ``overwrite``, an existing directory must be empty.
    3. With ``overwrite``, existing contents are left in place. Nothing
       is purged; files are replaced one by one as artifacts are written.

    Args:
        path: Output directory.
        overwrite: Allow writing into a non-empty directory.

    Returns:
        The output directory as a Path. It exists on return.

    Raises:
        DestinationIsFileError: If a file occupies the output path.
        DestinationNotEmptyError: If the directory has content and
            overwrite is False.
        ArtifactWriteError: If the directory cannot be listed or created.
    """
    output_dir = Path(path)

    if output_dir.exists() and not output_dir.is_dir():
        raise DestinationIsFileError(output_dir)

    if not overwrite and not is_nonexistent_or_empty(output_dir):
        raise DestinationNotEmptyError(output_dir)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArtifactWriteError(output_dir, e) from e

    logger.debug("output_dir_ready", path=str(output_dir), overwrite=overwrite)
    return output_dir
