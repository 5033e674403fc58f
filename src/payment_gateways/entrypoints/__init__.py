"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- CLI: The payment-gateways-demo command

Entrypoints wire concrete adapters into use cases and own process exit codes.
"""
