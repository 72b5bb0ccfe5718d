"""Durable file replacement: write to a temp file, then rename over the target."""

import errno
import logging
import os
import time
from pathlib import Path
from typing import Union

from .exceptions import AtomicWriteError
from .constants import TEMP_FILE_SUFFIX, WRITE_MAX_RETRIES, WRITE_RETRY_DELAY

logger = logging.getLogger(__name__)

# Lock/permission errors raised while another process (an editor, Claude Code
# itself, antivirus) briefly holds the destination open.
RETRYABLE_ERRNOS = frozenset({errno.EACCES, errno.EPERM, errno.EBUSY})


def _is_retryable(error: OSError) -> bool:
    return isinstance(error, PermissionError) or error.errno in RETRYABLE_ERRNOS


def _temp_path_for(path: Path) -> Path:
    """Unique sibling temp path, so concurrent writers never share one."""
    token = f"{os.getpid()}.{time.time_ns()}"
    return path.with_name(f"{path.name}.{token}{TEMP_FILE_SUFFIX}")


def _remove_quietly(path: Path) -> None:
    try:
        path.unlink()
    except OSError:
        pass


def _write_temp(temp_path: Path, content: str) -> None:
    with open(temp_path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
        f.flush()
        os.fsync(f.fileno())


def write_atomically(
    path: Union[str, Path],
    content: str,
    max_retries: int = WRITE_MAX_RETRIES,
    retry_delay: float = WRITE_RETRY_DELAY,
) -> None:
    """Replace the file at ``path`` with ``content`` or leave it untouched.

    The content is written to a temp file in the same directory and renamed
    over the target. Renames failing with a transient lock/permission error
    are retried up to ``max_retries`` times, sleeping
    ``retry_delay * 2 ** attempt`` seconds between attempts.

    Args:
        path: Target file
        content: Full new file content
        max_retries: Number of retries after the first rename attempt
        retry_delay: Base backoff delay in seconds

    Raises:
        AtomicWriteError: If the temp file cannot be written, the rename fails
            with a non-retryable error, or all retries are exhausted
    """
    path = Path(path)
    temp_path = _temp_path_for(path)

    try:
        _write_temp(temp_path, content)
    except OSError as e:
        _remove_quietly(temp_path)
        raise AtomicWriteError(path, e) from e

    attempt = 0
    while True:
        try:
            os.replace(temp_path, path)
            logger.debug(f"Wrote {path} (attempt {attempt + 1})")
            return
        except OSError as e:
            if not _is_retryable(e) or attempt >= max_retries:
                _remove_quietly(temp_path)
                raise AtomicWriteError(path, e) from e

            delay = retry_delay * (2 ** attempt)
            logger.warning(
                f"Rename onto {path} failed ({e}); retrying in {delay:.2f}s "
                f"({attempt + 1}/{max_retries})"
            )
            time.sleep(delay)
            attempt += 1
