import abc
from typing import ClassVar, Generic, TypeVar


TModel = TypeVar("TModel")
TEntity = TypeVar("TEntity")


class BaseEntityMapper(abc.ABC, Generic[TModel, TEntity]):
    """Converts one domain model type to and from its ORM entity."""

    entity_type: ClassVar[type]

    @staticmethod
    @abc.abstractmethod
    def to_entity(model_instance: TModel) -> TEntity:
        pass

    @staticmethod
    @abc.abstractmethod
    def to_model(entity: TEntity) -> TModel:
        pass

    @staticmethod
    def sync_identity(model_instance: TModel, entity: TEntity) -> None:
        """Copy storage-assigned keys from a committed entity back onto the model."""
