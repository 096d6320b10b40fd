"""Link Schemas — Pydantic models for the go-link endpoints.

Invariants:
    - LinkCreate.name is 1-255 ASCII alphanumeric characters
    - LinkCreate.url parses as an absolute URL and is kept verbatim
"""

from pydantic import BaseModel, Field, field_validator

from golinks.core.domain_types import LinkRecord, is_valid_url

NAME_PATTERN = r"^[A-Za-z0-9]+$"


class LinkCreate(BaseModel):
    """Link creation payload."""
    name: str = Field(min_length=1, max_length=255, pattern=NAME_PATTERN)
    url: str = Field(min_length=1, max_length=8192)

    @field_validator("url")
    @classmethod
    def check_url(cls, v: str) -> str:
        if not is_valid_url(v):
            raise ValueError("Field `url` is not a valid URL")
        return v

    def to_record(self) -> LinkRecord:
        return LinkRecord.create(self.name, self.url)


class LinkResponse(BaseModel):
    """Public-facing link data."""
    name: str
    url: str

    @classmethod
    def from_record(cls, record: LinkRecord) -> "LinkResponse":
        return cls(name=record.name.value, url=record.url)
