# =============================================================================
# src/cli/__init__.py -- CLI Module Overview
# =============================================================================
#
# Command-line access to the facet engine without running the API server.
# Queries run against a JSON snapshot (an export of /api/venues or of the
# final_1 table), which makes the CLI handy for checking taxonomy or date
# changes against real data before deploying them.
#
# Architecture Notes:
#   - argparse, no extra CLI dependency.
#   - The CLI builds its own SnapshotService over a JsonFileRecordSource
#     instead of going through src.main, so it never touches Supabase.
# =============================================================================

"""CLI tools for vibeMap.

- ``python -m src.cli venues`` -- filtered, deduplicated venues as JSON.
- ``python -m src.cli options`` -- exclude-self facet options as JSON.
"""
