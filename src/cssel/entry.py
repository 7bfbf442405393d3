"""Console script entry point (``cssel``) with production wiring.

Lives at package level so the composition root can be handed to the CLI
adapter without the adapters layer importing composition itself.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
