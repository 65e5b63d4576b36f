"""Web layer: generate-and-check flow and HTTP API."""
