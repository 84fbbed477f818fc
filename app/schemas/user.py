from pydantic import BaseModel, ConfigDict, Field
from typing import ClassVar


# Login payload
class UserLogin(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)

# Login failure echo, never carries the password
class UserLoginEcho(BaseModel):
    username: str

# User read schema
class UserRead(BaseModel):
    id: int
    username: str
    email: str | None = None
    roles: list[str] = Field(default_factory=list, validation_alias="role_names")

    model_config: ClassVar[ConfigDict] = ConfigDict(
        from_attributes=True, populate_by_name=True
    )
