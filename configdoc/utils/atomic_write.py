"""Atomic text file writes."""

import os
import tempfile
from pathlib import Path

from configdoc.exceptions import OutputWriteError


def write_atomic(output_path: Path, content: str) -> Path:
    """
    Write text to a file atomically.

    The content goes to a temporary file in the target directory which then
    replaces the output, so a failed write never leaves a partial file.

    Returns:
        The path that was written

    Raises:
        OutputWriteError: If the file cannot be written
    """
    output_path = Path(output_path)
    tmp_name = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        os.replace(tmp_name, output_path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputWriteError(f"Cannot write {output_path}: {e}") from e

    return output_path
