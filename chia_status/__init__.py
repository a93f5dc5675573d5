"""Chia farm status indicator: mutual-TLS RPC clients and status derivation."""

__version__ = "0.1.0"
