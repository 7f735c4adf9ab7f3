"""Service surfaces built on top of the client (currently the CLI)."""
