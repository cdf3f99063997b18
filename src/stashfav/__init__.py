"""Mark git stashes as favorites and manage them from the command line."""
