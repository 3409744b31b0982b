"""
Infrastructure Package
======================

Provides abstraction layers for external dependencies following the Dependency Inversion Principle.

Modules:
    - storage: Image hosting abstraction (S3, MinIO)
    - commerce: Commerce platform abstraction (Stripe products and prices)
    - container: Service container wiring the ingestion pipeline

This package enables:
    - Easy testing with mocked providers
    - Switching between providers without code changes
    - Loose coupling between the ingestion pipeline and external services
"""
