# topmark:header:start
#
#   project      : Worrywart
#   file         : loaders.py
#   file_relpath : src/worrywart/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Sources:
    - the runtime defaults (`load_defaults_dict`, no I/O), and
    - on-disk TOML files (``worrywart.toml`` / ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from worrywart.config.keys import Toml
from worrywart.config.logging import get_logger
from worrywart.constants import DEFAULT_LIMIT, PYPROJECT_FILE_NAME, PYPROJECT_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from worrywart.config.logging import WorrywartLogger

TomlTable = dict[str, Any]

logger: WorrywartLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Configuration could not be read or contains invalid values."""


def load_defaults_dict() -> TomlTable:
    """Return Worrywart's runtime defaults as a new dict.

    ``filename`` has no default here: sessions fall back to the unspecified-file
    label unless a file name is configured or supplied by the caller.
    """
    return {
        Toml.KEY_LIMIT: DEFAULT_LIMIT,
        Toml.KEY_SHOW_HINTS: True,
        Toml.KEY_COLOR: True,
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"invalid TOML in {path}: {e}") from e
    data: Any = doc.unwrap()
    return data if isinstance(data, dict) else {}


def extract_section(path: Path, table: TomlTable) -> TomlTable | None:
    """Return the Worrywart table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.worrywart]`` (None when absent); any
    other file is taken whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return table
    section: Any = table
    for part in PYPROJECT_SECTION:
        section = section.get(part) if isinstance(section, dict) else None
    if section is None:
        logger.debug("No [%s] section in %s", ".".join(PYPROJECT_SECTION), path)
        return None
    if not isinstance(section, dict):
        raise ConfigError(f"[{'.'.join(PYPROJECT_SECTION)}] in {path} is not a table")
    return section
