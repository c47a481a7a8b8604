from __future__ import annotations

import logging
from pathlib import Path

from .errors import SizeOutOfRangeError, UnreadableSourceError

logger = logging.getLogger(__name__)


def read_source(path: str | Path, *, kind: str, max_size: int, min_size: int = 0) -> bytes:
    """Read a whole track or replay file, checking its size before reading it."""

    path = Path(path)
    if not path.is_file():
        raise UnreadableSourceError(f"cannot read {kind} file: {path}")
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise UnreadableSourceError(f"cannot read {kind} file: {path}") from exc

    if size < min_size:
        raise SizeOutOfRangeError(
            f"the {kind} file {path} is too small: {size} < {min_size}",
            size=size,
            minimum=min_size,
            maximum=max_size,
        )
    if size > max_size:
        raise SizeOutOfRangeError(
            f"the {kind} file {path} is too large: {size} > {max_size}",
            size=size,
            minimum=min_size,
            maximum=max_size,
        )

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise UnreadableSourceError(f"cannot read {kind} file: {path}") from exc
    logger.debug("read %s file %s (%d bytes)", kind, path, len(data))
    return data
