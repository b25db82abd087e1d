"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .constants import DEFAULT_INDENT_SPACES, DEFAULT_MAX_FILE_SIZE

# Files searched in each directory, with the tables read from them, in priority order
CONFIG_SOURCES = (
    ("pyproject.toml", (("tool", "typst-writer"),)),
    (".typst-writer.toml", (("typst-writer",), ("tool", "typst-writer"))),
)


@dataclass
class TypstConfig:
    """Configuration for converting Markdown to Typst.

    Attributes:
        strikethrough: Whether ``~text~`` and ``~~text~~`` are parsed as strikethrough.
        indent_spaces: Spaces added per nested list level.
        max_file_size: Maximum file size in bytes that will be converted.

    Examples:
        TypstConfig(indent_spaces=4, strikethrough=False)
    """

    strikethrough: bool = True
    indent_spaces: int = DEFAULT_INDENT_SPACES
    max_file_size: int = DEFAULT_MAX_FILE_SIZE

    @property
    def indent(self) -> str:
        return " " * self.indent_spaces


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`indent_spaces` must be a positive integer")
    """


def load_config(search_path: Path) -> TypstConfig:
    """Load settings from the closest directory that defines them.

    Starting at `search_path` and moving up to the filesystem root, each
    directory is checked for ``[tool.typst-writer]`` in `pyproject.toml`, then
    ``[typst-writer]`` or ``[tool.typst-writer]`` in `.typst-writer.toml`.
    Unreadable or malformed TOML files are skipped.

    Args:
        search_path: Directory where the search starts.

    Returns:
        TypstConfig: The first settings table found, or defaults.

    Raises:
        ConfigError: If the table found is not a mapping or has unknown keys.

    Examples:
        load_config(Path("docs"))
    """
    start = search_path.resolve()
    for directory in (start, *start.parents):
        for filename, table_paths in CONFIG_SOURCES:
            config_file = directory / filename
            found = _read_table(config_file, table_paths)
            if found is not None:
                table_name, settings = found
                return _config_from_table(settings, table_name, config_file)
    return TypstConfig()


def _read_table(
    config_file: Path, table_paths: tuple[tuple[str, ...], ...]
) -> tuple[str, object] | None:
    """Return the first table present in `config_file` with its dotted name."""
    try:
        with open(config_file, "rb") as stream:
            document = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        table: object = document
        for key in table_path:
            if not isinstance(table, dict) or key not in table:
                break
            table = table[key]
        else:
            return ".".join(table_path), table
    return None


def _config_from_table(settings: object, table_name: str, config_file: Path) -> TypstConfig:
    """Build a `TypstConfig` from a raw TOML table."""
    if not isinstance(settings, dict):
        raise ConfigError(f"Invalid `[{table_name}]` settings in {config_file}")
    try:
        return TypstConfig(**settings)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_name}]` settings in {config_file}") from error


def validate_config(config: TypstConfig) -> None:
    """Validate a `TypstConfig` instance.

    Raises:
        ConfigError: If `strikethrough` is not a boolean or a numeric setting is
            not a positive integer.
    """
    if not isinstance(config.strikethrough, bool):
        raise ConfigError("`strikethrough` must be a boolean")

    for name in ("indent_spaces", "max_file_size"):
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigError(f"`{name}` must be a positive integer")


def build_config(search_path: Path, **overrides: object) -> TypstConfig:
    """Load configuration, apply non-None overrides, and validate the result.

    Raises:
        ConfigError: If loading or validation fails.
        TypeError: If an override name is not a `TypstConfig` field.

    Examples:
        config = build_config(Path.cwd(), indent_spaces=4, strikethrough=None)
    """
    config = load_config(search_path)
    changes = {key: value for key, value in overrides.items() if value is not None}
    if changes:
        config = replace(config, **changes)
    validate_config(config)
    return config
