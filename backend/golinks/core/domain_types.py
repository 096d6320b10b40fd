"""Domain Types — validated value objects for link names and link records.

Invariants:
    - Identifier is non-empty and every character is ASCII alphanumeric
    - Identifier equality and hashing are by exact (case-sensitive) text
    - LinkRecord.name is an Identifier, never raw text
    - LinkRecord.url parses as an absolute URL; the original text is kept verbatim
    - Both types are immutable; construct through Identifier.parse / LinkRecord.create

Design Decisions:
    - Frozen dataclasses over NewType: the invariant must hold at runtime, not only
      for the type checker
    - pydantic AnyUrl for URL validation: same parser the HTTP schemas use, so the
      boundary and the core never disagree about what a URL is
"""

from dataclasses import dataclass

from pydantic import AnyUrl, TypeAdapter, ValidationError

from golinks.core.errors import InvalidIdentifierError, InvalidUrlError

_URL_ADAPTER = TypeAdapter(AnyUrl)


def is_valid_identifier(text: str) -> bool:
    """True when text is non-empty ASCII alphanumeric."""
    return bool(text) and text.isascii() and text.isalnum()


def is_valid_url(text: str) -> bool:
    """True when text parses as an absolute URL."""
    try:
        _URL_ADAPTER.validate_python(text)
    except ValidationError:
        return False
    return True


@dataclass(frozen=True, slots=True)
class Identifier:
    """Short link name, the lookup key for go-links."""
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not is_valid_identifier(self.value):
            raise InvalidIdentifierError(str(self.value))

    @classmethod
    def parse(cls, text: str) -> "Identifier":
        return cls(text)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class LinkRecord:
    """A go-link: name plus destination URL."""
    name: Identifier
    url: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, Identifier):
            raise InvalidIdentifierError(str(self.name))
        if not isinstance(self.url, str) or not is_valid_url(self.url):
            raise InvalidUrlError(str(self.url))

    @classmethod
    def create(cls, name: str | Identifier, url: str) -> "LinkRecord":
        """Build a record from raw text, validating both fields."""
        ident = name if isinstance(name, Identifier) else Identifier.parse(name)
        return cls(ident, url)

    def to_dict(self) -> dict:
        return {"name": self.name.value, "url": self.url}
