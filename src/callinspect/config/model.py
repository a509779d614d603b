# topmark:header:start
#
#   project      : CallInspect
#   file         : model.py
#   file_relpath : src/callinspect/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CallInspect settings and their TOML loader.

Settings live either in a dedicated TOML file (passed with ``--config``) or in
the ``[tool.callinspect]`` table of ``pyproject.toml``:

```toml
[tool.callinspect]
output_format = "json"
log_level = "DEBUG"
```

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from callinspect.config.logging import get_logger, parse_log_level
from callinspect.constants import DEFAULT_CONFIG_PATH, PYPROJECT_TOML_NAME, PYPROJECT_TOML_SECTION
from callinspect.core.formats import OutputFormat
from callinspect.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from callinspect.config.logging import CallInspectLogger

TomlTable = dict[str, Any]

logger: CallInspectLogger = get_logger(__name__)


@dataclass(frozen=True)
class CallInspectConfig:
    """Immutable CallInspect settings.

    Attributes:
        output_format (OutputFormat): Default output format of the CLI.
        log_level (int | None): Logging level; None defers to the environment.
    """

    output_format: OutputFormat = OutputFormat.TEXT
    log_level: int | None = None

    @classmethod
    def from_dict(cls, table: TomlTable) -> CallInspectConfig:
        """Build a config from a (possibly partial) TOML table.

        Args:
            table (TomlTable): The ``[tool.callinspect]`` table or a whole standalone document.

        Returns:
            CallInspectConfig: The settings, with defaults for missing keys.

        Raises:
            ConfigError: If a key holds a value that cannot be interpreted.
        """
        output_format: OutputFormat = OutputFormat.TEXT
        raw_format: Any = table.get("output_format")
        if raw_format is not None:
            try:
                output_format = OutputFormat(str(raw_format).lower())
            except ValueError as exc:
                choices = ", ".join(f.value for f in OutputFormat)
                raise ConfigError(
                    f"Invalid output_format {raw_format!r} (expected one of: {choices})"
                ) from exc

        log_level: int | None = None
        raw_level: Any = table.get("log_level")
        if raw_level is not None:
            if isinstance(raw_level, bool) or not isinstance(raw_level, (str, int)):
                raise ConfigError(f"Invalid log_level {raw_level!r}")
            log_level = parse_log_level(raw_level)
            if log_level is None:
                raise ConfigError(f"Unknown log_level {raw_level!r}")

        for key in table:
            if key not in ("output_format", "log_level"):
                logger.warning("Ignoring unknown config key %r", key)

        return cls(output_format=output_format, log_level=log_level)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``callinspect.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8; undecodable files count as unreadable.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_section(data: TomlTable, dotted: str = PYPROJECT_TOML_SECTION) -> TomlTable:
    """Return the nested table at ``dotted`` (e.g. ``tool.callinspect``), or an empty dict."""
    node: Any = data
    for part in dotted.split("."):
        if not isinstance(node, dict):
            return {}
        node = node.get(part, {})
    return cast("TomlTable", node) if isinstance(node, dict) else {}


def load_config(path: Path | None = None) -> CallInspectConfig:
    """Resolve the effective settings.

    An explicit ``path`` is read as a standalone document, unless it is a
    ``pyproject.toml``, in which case only its ``[tool.callinspect]`` table is
    used. Without ``path``, ``pyproject.toml`` in the working directory is
    consulted when present.

    Args:
        path (Path | None): Optional configuration file.

    Returns:
        CallInspectConfig: The resolved settings (defaults when nothing is found).

    Raises:
        ConfigError: If the configuration holds invalid values.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.is_file():
            logger.debug("No %s in working directory, using defaults", PYPROJECT_TOML_NAME)
            return CallInspectConfig()
        path = DEFAULT_CONFIG_PATH

    data: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        data = extract_section(data)

    logger.debug("Loaded config from %s: %r", path, data)
    return CallInspectConfig.from_dict(data)
