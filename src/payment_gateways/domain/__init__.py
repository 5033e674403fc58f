"""Domain layer - Gateway families, value objects, and rules.

This layer contains:
- Value Objects: Immutable objects defined by their attributes (e.g., TransactionId)
- Gateway Families: The closed set of mock providers a factory can belong to
- Domain Exceptions: Configuration errors and invariant violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
