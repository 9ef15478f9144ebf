from pydantic import BaseModel, Field

from restaurant_api.api.access.schemas.schema_user import UserResponse


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    token: str
    token_type: str = "Bearer"
    user: UserResponse
