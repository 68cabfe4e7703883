"""
Request schemas for user endpoints
"""

import re
from typing import Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field, StringConstraints, field_validator
from typing_extensions import Annotated

PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")

UserName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=50)]
Email = Annotated[EmailStr, AfterValidator(str.lower)]


class UserRegister(BaseModel):
    """Schema for registering a new user"""
    name: UserName
    email: Email
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if not PASSWORD_PATTERN.match(value):
            raise ValueError(
                "Password must contain at least one lowercase letter, one uppercase letter, and one number"
            )
        return value


class UserLogin(BaseModel):
    """Schema for login credentials"""
    email: Email
    password: str = Field(..., min_length=1)


class UserProfileUpdate(BaseModel):
    """Schema for profile updates; fields other than name and email are ignored"""

    model_config = ConfigDict(extra="ignore")

    name: Optional[UserName] = None
    email: Optional[Email] = None

    def changes(self) -> dict:
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
