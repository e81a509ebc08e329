"""Infrastructure layer - Adapters and external integrations.

Implementations of domain protocols (ports):
- api/: Conference back-end HTTP client and JSON codec
- logging/: structlog-based logger adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
