from pydantic import BaseModel, field_validator

from ._utils.constants import DEFAULT_BASE_URL


class Config(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    api_key: str | None = None

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str | None) -> str:
        if not value:
            return DEFAULT_BASE_URL
        assert value.startswith(("http://", "https://")), "Invalid URL"
        return value.rstrip("/")
