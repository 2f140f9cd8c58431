"""File utility helpers."""
from __future__ import annotations

import os
import uuid
from contextlib import contextmanager, suppress
from pathlib import Path
from typing import IO, Any, Iterator, Optional, Union


def _publish(tmp_path: Path, target: Path, overwrite: bool) -> None:
    if overwrite:
        os.replace(tmp_path, target)
        return
    # link() refuses an existing target, so a file created meanwhile is kept.
    try:
        os.link(tmp_path, target)
    except FileExistsError:
        raise FileExistsError(f"File {target} already exists") from None
    os.unlink(tmp_path)


@contextmanager
def atomic_write(
    path: Union[str, Path],
    mode: str = "w",
    encoding: Optional[str] = "utf-8",
    permissions: int = 0o644,
    newline: Optional[str] = None,
    overwrite: bool = True,
) -> Iterator[IO[Any]]:
    """Write ``path`` through a temporary sibling file that is renamed into place.

    Readers see either the old content or the complete new content.  If the
    ``with`` block raises, the temporary file is removed and ``path`` is left
    untouched.

    Args:
        path: Target file path; missing parent directories are created.
        mode: ``"w"`` for text or ``"wb"`` for bytes.
        encoding: Text encoding, ignored in binary mode.
        permissions: Mode bits applied before the rename.
        newline: Passed to :func:`open` in text mode.
        overwrite: When false, raise :class:`FileExistsError` if ``path`` exists.
    """
    target = Path(path).resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    if not overwrite and target.exists():
        raise FileExistsError(f"File {target} already exists")

    if "b" in mode:
        encoding = newline = None
    tmp_path = target.with_name(f"{target.name}.{uuid.uuid4().hex}.tmp")

    try:
        with open(tmp_path, mode, encoding=encoding, newline=newline) as handle:
            yield handle
            handle.flush()
            os.fsync(handle.fileno())
        with suppress(OSError):
            # Some filesystems refuse chmod; the file is still usable.
            os.chmod(tmp_path, permissions)
        _publish(tmp_path, target, overwrite)
    except Exception:
        with suppress(OSError):
            tmp_path.unlink()
        raise
