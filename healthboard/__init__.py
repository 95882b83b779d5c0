"""
Healthboard Root Module

Polls configured HTTP service health endpoints, aggregates their
metadata and exposes the results through a small HTTP API.

Layer Structure:
- Domain: Entities, ports and the health metadata parser
- Application: Use cases and DTOs
- Infrastructure: HTTP transport, health check engine and configuration
- Presentation: FastAPI controllers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
