# topmark:header:start
#
#   project      : JsonDoc
#   file         : __main__.py
#   file_relpath : src/jsondoc/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running JsonDoc via ``python -m jsondoc``.

Delegates to [`jsondoc.cli.main.cli`][], the same entry point as the
``jsondoc`` console script.

Examples:
    Describe a class::

        python -m jsondoc describe myapp.models:Person
"""

from __future__ import annotations

from jsondoc.cli.main import cli

if __name__ == "__main__":
    cli()
