"""Single-artifact file writer."""

from __future__ import annotations

from pathlib import Path

import structlog

from fe_core.errors import ArtifactWriteError

logger = structlog.get_logger(__name__)


def write_artifact(path: Path | str, body: str | bytes) -> Path:
    """Write one artifact, replacing any existing file.

    Parent directories are created as needed. Text bodies are written as
    UTF-8 exactly as given (no newline translation), byte bodies verbatim.
    There is no multi-file transaction: a failure here leaves earlier
    artifacts of the same run on disk.

    Args:
        path: Destination file.
        body: Artifact content.

    Returns:
        The destination as a Path.

    Raises:
        ArtifactWriteError: On any underlying I/O error, or when a text
            body cannot be encoded as UTF-8.

    Example:
        >>> write_artifact(Path("output/Foo/Foo_abi.json"), "[]")
    """
    output_path = Path(path)

    try:
        data = body.encode("utf-8") if isinstance(body, str) else body
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except (OSError, UnicodeEncodeError) as e:
        raise ArtifactWriteError(output_path, e) from e

    logger.debug("artifact_written", path=str(output_path), size=len(data))
    return output_path
