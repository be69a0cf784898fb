"""mcli subcommands."""
