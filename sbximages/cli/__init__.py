"""sbximages CLI — Typer-based command-line interface.

Provides the ``sbximages`` command with subcommands for generating the
release manifest, validating and printing the build config, and showing
an existing manifest.
"""
