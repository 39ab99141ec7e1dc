from pydantic import BaseModel, ConfigDict, Field


class SignupCredentials(BaseModel):
    """Username and password for a single create-user request."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(repr=False)
