"""Console script entry point with production wiring.

Lives at package level, outside ``adapters``, so composition can be wired
into the CLI without breaking the layer contracts.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``ajax-onload`` console script with production services.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
