# topmark:header:start
#
#   project      : CallInspect
#   file         : __main__.py
#   file_relpath : src/callinspect/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running CallInspect via ``python -m callinspect``.

Delegates to :func:`callinspect.cli.main.cli`, the same entry point as the
``callinspect`` console script.

Examples:
    Describe a function::

        python -m callinspect describe os.path.join
"""

from __future__ import annotations

from callinspect.cli.main import cli

if __name__ == "__main__":
    cli()
