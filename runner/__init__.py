"""Post-deploy smoke runner for the static demo server."""
