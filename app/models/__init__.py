from app.models.UserCreate import UserCreate
from app.models.UserResponse import UserResponse
from app.models.UserUpdate import UserUpdate

__all__ = ["UserCreate", "UserResponse", "UserUpdate"]
