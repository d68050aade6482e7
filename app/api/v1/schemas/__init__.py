from .roles import Role, RoleBase
from .users import UserBase, UserProfile, build_user_profile, PROFILE_FIELDS
from .token import TokenData

__all__ = [
    "Role",
    "RoleBase",
    "TokenData",
    "UserBase",
    "UserProfile",
    "build_user_profile",
    "PROFILE_FIELDS",
]
