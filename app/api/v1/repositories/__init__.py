from .role_repository import RoleRepository, get_role_repository
from .user_repository import UserRepository, get_user_repository
from .user_roles_repository import UserRolesRepository, get_user_roles_repository

__all__ = [
    "RoleRepository",
    "UserRepository",
    "UserRolesRepository",
    "get_role_repository",
    "get_user_repository",
    "get_user_roles_repository"
]
