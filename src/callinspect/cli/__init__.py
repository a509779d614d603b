# topmark:header:start
#
#   project      : CallInspect
#   file         : __init__.py
#   file_relpath : src/callinspect/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for CallInspect."""
