"""Application layer - Payment orchestration and port definitions.

This layer contains:
- Use Cases: The factory-based PaymentService and the switch-based variant
- Ports: Abstract interfaces for gateway components and side effects
- DTOs: Data transfer objects for use case output

The application layer depends only on the domain layer.
Concrete gateways are injected via a PaymentGatewayFactory.
"""
