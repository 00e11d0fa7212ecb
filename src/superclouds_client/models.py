"""
Request and response models for the Superclouds users API.

All models are frozen; a user record is replaced by re-fetching it, never
edited in place.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer


class User(BaseModel):
    id: str = Field("", description="User unique identifier")
    email: str = Field("", description="User email")
    first_name: Optional[str] = Field(None, description="Given name")
    last_name: Optional[str] = Field(None, description="Family name")
    role: Optional[str] = Field(None, description="Role name")

    model_config = ConfigDict(frozen=True)

    @field_validator("id", "email", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value


class ListUsersInput(BaseModel):
    """
    Query for GET /users.

    Zero and empty values are left out of the query string so the server
    applies its own defaults.
    """

    size: int = Field(0, description="Page size")
    page: int = Field(0, description="Page number")
    search_term: str = Field("", alias="s", description="Search term")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.size > 0:
            params["size"] = str(self.size)
        if self.page > 0:
            params["page"] = str(self.page)
        if self.search_term != "":
            params["s"] = self.search_term
        return params


class ListUsersOutput(BaseModel):
    """
    Paginated response envelope of GET /users.

    Missing or null members decode to their zero value; an empty page may
    arrive as "data": null.
    """

    users: List[User] = Field(default_factory=list, alias="data")
    message: str = ""
    page: int = 0
    pages: int = 0
    size: int = 0
    status: int = 0
    total: int = 0

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("users", "message", "page", "pages", "size", "status", "total", mode="before")
    @classmethod
    def _null_as_empty(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class CreateUserInput(BaseModel):
    email: str = Field(description="Email of the user to invite")

    model_config = ConfigDict(frozen=True)


class DeleteUserInput(BaseModel):
    email: str = Field(description="Email of the user to remove")

    model_config = ConfigDict(frozen=True)


class UpdateUserInput(BaseModel):
    """Profile changes for the authenticated user; empty fields are not sent."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    contact: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler):
        return {k: v for k, v in handler(self).items() if v not in (None, "")}


class ListRolesOutput(BaseModel):
    roles: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator("roles", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value


class UpdateUserRoleInput(BaseModel):
    email: str
    role: str

    model_config = ConfigDict(frozen=True)


class ChangePasswordInput(BaseModel):
    """
    Password change for the authenticated user.

    new_password travels as "password". The confirmation is sent as given;
    comparing it with new_password is left to the server.
    """

    current_password: str = Field(repr=False)
    new_password: str = Field(alias="password", repr=False)
    confirm_password: str = Field(repr=False)

    model_config = ConfigDict(frozen=True, populate_by_name=True)
