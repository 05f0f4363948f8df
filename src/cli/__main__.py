# =============================================================================
# src/cli/__main__.py -- Package Entry Point
# =============================================================================
#
# Enables running the CLI package itself as a module:
#     python -m src.cli venues --area JBR
#     python -m src.cli options --genre Techno
#
# Delegates to the facet query CLI (facets.py).
# =============================================================================

"""Allow ``python -m src.cli`` execution."""

from src.cli.facets import main

main()
