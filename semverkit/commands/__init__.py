"""CLI subcommands for semverkit."""
