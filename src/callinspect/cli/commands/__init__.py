# topmark:header:start
#
#   project      : CallInspect
#   file         : __init__.py
#   file_relpath : src/callinspect/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the CallInspect CLI."""
