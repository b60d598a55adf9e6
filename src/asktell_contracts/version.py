"""Contract version."""

CONTRACTS_VERSION = "0.1.0"
