from pydantic import BaseModel, Field


class TokenRequest(BaseModel):
    """Identity the client asks to be signed into the session cookie."""

    email: str = Field(min_length=1)

    model_config = {"extra": "allow"}
