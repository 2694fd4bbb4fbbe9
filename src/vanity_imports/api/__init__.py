"""HTTP API for the vanity import server."""
