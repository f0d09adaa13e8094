"Subcommands of the `canvas` program"
