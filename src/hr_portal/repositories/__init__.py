from .entity_repository import EntityRepository

__all__ = ["EntityRepository"]
