"""Reference HTTP API for the DPT codec."""
