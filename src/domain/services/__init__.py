"""Domain services: CRUD contracts and their DAO-backed implementations."""

from .base import GenericResourceService, GenericService
from .generic import GenericDaoService, ResourceDaoService
from .users import DefaultUserService, UserService

__all__ = [
    "GenericService",
    "GenericResourceService",
    "GenericDaoService",
    "ResourceDaoService",
    "UserService",
    "DefaultUserService",
]
