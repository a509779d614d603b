# topmark:header:start
#
#   project      : CallInspect
#   file         : __init__.py
#   file_relpath : src/callinspect/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for CallInspect.

Settings are read with `tomlkit` from a dedicated TOML file or from the
``[tool.callinspect]`` table of ``pyproject.toml``.
"""

from __future__ import annotations

from callinspect.config.model import CallInspectConfig, load_config

__all__ = [
    "CallInspectConfig",
    "load_config",
]
