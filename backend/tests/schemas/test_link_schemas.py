"""Link Schemas — boundary validation of name and url.

Invariants:
    - name must be 1-255 ASCII alphanumerics
    - url must be an absolute URL, kept verbatim
"""

import pytest
from pydantic import ValidationError

from golinks.core.domain_types import LinkRecord
from golinks.schemas.link import LinkCreate, LinkResponse


def test_link_create_accepts_valid_payload():
    body = LinkCreate(name="Valid123", url="https://example.com/a?b=c")
    assert body.to_record() == LinkRecord.create("Valid123", "https://example.com/a?b=c")


@pytest.mark.parametrize("name", ["", "inva/lid", "has space", "x" * 256])
def test_link_create_rejects_bad_names(name):
    with pytest.raises(ValidationError):
        LinkCreate(name=name, url="https://example.com")


def test_link_create_rejects_bad_url():
    with pytest.raises(ValidationError) as exc_info:
        LinkCreate(name="docs", url="not-a-url")
    assert exc_info.value.errors()[0]["loc"] == ("url",)


def test_link_response_from_record():
    record = LinkRecord.create("docs", "https://docs.example.com")
    assert LinkResponse.from_record(record).model_dump() == {
        "name": "docs", "url": "https://docs.example.com",
    }
