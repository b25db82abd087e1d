"""Reading Markdown input and writing Typst output."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE, MARKDOWN_EXTENSIONS

MAX_FILE_SIZE_ENV_VAR = "TYPST_WRITER_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Return the input size limit, preferring ``TYPST_WRITER_MAX_FILE_SIZE``.

    Raises:
        ValueError: If the variable is set to anything but a positive integer.
    """
    raw_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if raw_value is None:
        return default
    if not raw_value.strip().isdigit() or int(raw_value) == 0:
        raise ValueError(
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {raw_value!r} (expected positive integer)"
        )
    return int(raw_value)


def resolve_markdown_path(raw_path: str, base_dir: Path) -> Path:
    """Resolve a user-supplied Markdown path that must live under `base_dir`.

    Args:
        raw_path: Absolute or relative path, ``~`` allowed.
        base_dir: Resolved working directory the file must be inside.

    Returns:
        Path: Resolved path to the Markdown file.

    Raises:
        ValueError: If the path crosses a symlink, does not exist, is outside
            `base_dir`, or lacks a Markdown extension.

    Examples:
        resolve_markdown_path("docs/intro.md", Path.cwd().resolve())
    """
    path = Path(raw_path).expanduser()
    if _crosses_symlink(path):
        raise ValueError(f"Symlinks are not supported for security reasons: {path}")

    try:
        resolved = path.resolve(strict=True)
    except OSError as error:
        raise ValueError(f"{path} does not exist or cannot be resolved: {error}") from error

    if not resolved.is_relative_to(base_dir):
        raise ValueError(f"{resolved} is outside of the working directory {base_dir}.")

    if resolved.suffix.lower() not in MARKDOWN_EXTENSIONS:
        raise ValueError(
            f"{resolved} is not a Markdown file "
            f"(supported extensions: {', '.join(MARKDOWN_EXTENSIONS)})"
        )
    return resolved


def read_markdown(filepath: Path, max_size: int) -> str:
    """Read a UTF-8 Markdown file no larger than `max_size` bytes.

    The file must be a regular file, and it must not change between the size
    check and the end of the read.

    Raises:
        IOError: If the file is missing, not a regular file, too large, not
            valid UTF-8, or modified while being read.

    Examples:
        markdown = read_markdown(Path("README.md"), 1024 * 1024)
    """
    before = _regular_file_stat(filepath)
    if before.st_size > max_size:
        raise IOError(f"{filepath} exceeds the maximum allowed size of {max_size} bytes.")

    try:
        with open(filepath, "r", encoding="UTF-8") as handle:
            markdown = handle.read()
    except UnicodeDecodeError as error:
        raise IOError(f"{filepath} is not valid UTF-8: {error}") from error
    except OSError as error:
        raise IOError(f"Error reading {filepath}: {error}") from error

    if _fingerprint(_regular_file_stat(filepath)) != _fingerprint(before):
        raise IOError(f"{filepath} changed while it was being read.")
    return markdown


def write_output(filepath: Path, text: str):
    """Write Typst output to a file atomically.

    The text is written to a temporary file in the target directory, synced,
    and moved over `filepath`. An existing file keeps its permissions.

    Raises:
        IOError: If the destination is a symlink, its directory is missing, or
            the file cannot be written.

    Examples:
        write_output(Path("README.typ"), "= Title\\n\\n")
    """
    filepath = Path(filepath).expanduser()

    if _crosses_symlink(filepath):
        raise IOError(f"Symlinks are not supported for security reasons: {filepath}")

    if not filepath.parent.is_dir():
        raise IOError(f"Output directory {filepath.parent} does not exist.")

    permissions = _output_permissions(filepath)
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="UTF-8", delete=False, dir=filepath.parent
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(text)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
            os.chmod(tmp_file.name, permissions)

        os.replace(temp_path, filepath)
    except OSError as error:
        raise IOError(f"Error writing {filepath}: {error}") from error
    finally:
        if temp_path is not None:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                pass


def _crosses_symlink(path: Path) -> bool:
    """Return True when `path` or one of its parents is a symlink."""
    for candidate in (path, *path.parents):
        try:
            if candidate.is_symlink():
                return True
        except OSError:
            continue
    return False


def _regular_file_stat(filepath: Path) -> os.stat_result:
    """Stat `filepath` without following symlinks and require a regular file."""
    try:
        stat_result = os.stat(filepath, follow_symlinks=False)
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    if not stat.S_ISREG(stat_result.st_mode):
        raise IOError(f"{filepath} is not a regular file.")
    return stat_result


def _fingerprint(stat_result: os.stat_result) -> tuple[int, int, int, int]:
    return (
        stat_result.st_ino,
        stat_result.st_dev,
        stat_result.st_size,
        stat_result.st_mtime_ns,
    )


def _output_permissions(filepath: Path) -> int:
    # Keep the mode of an existing file; new files follow the process umask
    try:
        return stat.S_IMODE(os.stat(filepath, follow_symlinks=False).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error
