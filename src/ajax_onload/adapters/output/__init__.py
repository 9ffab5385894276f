"""Output adapter - page output sink for generated script blocks.

Contents:
    * :func:`.stdout.write_output` - Write blocks to standard output
"""

from __future__ import annotations

from .stdout import write_output

__all__ = ["write_output"]
