"""Pydantic schemas for account creation."""
from pydantic import BaseModel, ConfigDict, Field


class UserCreateSchema(BaseModel):
    model_config = ConfigDict(strict=True)

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
