"""Command-line tools for tlvframe."""
