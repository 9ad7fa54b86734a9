"""plugintrack CLI — Typer-based command-line interface.

Provides the ``plugintrack`` command with subcommands for inspecting the
action table and classifying local files. All output uses Rich.
"""
