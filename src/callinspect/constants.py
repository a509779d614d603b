# topmark:header:start
#
#   project      : CallInspect
#   file         : constants.py
#   file_relpath : src/callinspect/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CallInspect Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from pathlib import Path

CALLINSPECT_VERSION: str = get_version("callinspect")

PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOML_SECTION: str = "tool.callinspect"

#: Environment variable consulted by `callinspect.config.logging.resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: str = "CALLINSPECT_LOG_LEVEL"

# Formatted names
CLOSURE_NAME: str = "{closure}"
UNKNOWN_NAME: str = "unknown"

# Binding markers used by `CallableInspector.format_name`
INSTANCE_SEPARATOR: str = "->"
STATIC_SEPARATOR: str = "::"

# Module omitted from qualified type names
BUILTINS_MODULE: str = "builtins"

#: Separator between the file name and the line number in a location descriptor.
LOCATION_SEPARATOR: str = ":"

DEFAULT_CONFIG_PATH: Path = Path(PYPROJECT_TOML_NAME)
