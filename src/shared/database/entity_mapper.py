from typing import Any

from src.shared.database.base_mapper import BaseEntityMapper


class EntityMapper:
    """Registry resolving the mapper for a domain model type."""

    def __init__(self, mappers: dict[type, BaseEntityMapper]):
        self.mappers = mappers

    def mapper_for(self, model_type: type) -> BaseEntityMapper:
        if model_type in self.mappers:
            return self.mappers[model_type]
        raise ValueError(f"No entity mapping found for model type: {model_type}")

    def map_to_entity(self, model_instance: Any):
        return self.mapper_for(type(model_instance)).to_entity(model_instance)

    def entity_type_for(self, model_type: type) -> type:
        return self.mapper_for(model_type).entity_type

    def sync_identity(self, model_instance: Any, entity: Any) -> None:
        self.mapper_for(type(model_instance)).sync_identity(model_instance, entity)
