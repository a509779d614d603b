# topmark:header:start
#
#   project      : CallInspect
#   file         : __init__.py
#   file_relpath : src/callinspect/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core CallInspect building blocks: value types, classification and source lookup."""
