"""Application layer: DTOs, repository ports, mappers, and services."""
