"""
bucket_advisor.reporting - Terminal formatting for CLI output.

This package only formats in-memory objects; it does not score, rank, or
write files (see ``bucket_advisor.recommendations.reporter`` for export).

Modules:
  formatters - ASCII terminal table formatters for Typer CLI commands.
"""
