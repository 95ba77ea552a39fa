"""Entity <-> DTO mappers."""

from timesheet.application.mappers.role_permission import dto_to_entity, entity_to_dto

__all__ = ["dto_to_entity", "entity_to_dto"]
