from pydantic import BaseModel
from typing import Optional


class UserUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
