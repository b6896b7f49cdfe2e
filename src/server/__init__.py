"""HTTP API for sqltips."""
