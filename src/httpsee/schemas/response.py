"""
Immutable schemas for completed HTTP responses.
"""

from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Headers(Mapping[str, str]):
    """
    Ordered, read-only header mapping with case-insensitive keys.

    Duplicate keys collapse onto the first occurrence's position and keep the
    last value, so every key is unique.
    """

    __slots__ = ("_items", "_index")

    def __init__(
        self, items: Union[Mapping[str, str], Iterable[Tuple[str, str]], None] = None
    ):
        pairs = items.items() if isinstance(items, Mapping) else (items or [])
        ordered: List[Tuple[str, str]] = []
        index = {}
        for key, value in pairs:
            folded = str(key).lower()
            if folded in index:
                position = index[folded]
                ordered[position] = (ordered[position][0], str(value))
            else:
                index[folded] = len(ordered)
                ordered.append((str(key), str(value)))
        self._items: Tuple[Tuple[str, str], ...] = tuple(ordered)
        self._index = index

    def __getitem__(self, key: str) -> str:
        return self._items[self._index[key.lower()]][1]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._index

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Headers):
            return self._items == other._items
        if isinstance(other, Mapping):
            return self == Headers(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"Headers({list(self._items)!r})"

    def pairs(self) -> Tuple[Tuple[str, str], ...]:
        """Return the header pairs in their original order."""
        return self._items

    def format_lines(self) -> List[str]:
        """Format each header as a ``Key: value`` line."""
        return [f"{key}: {value}" for key, value in self._items]


class Response(BaseModel):
    """
    A completed HTTP response, as delivered by the transport engine.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status_code: int = Field(description="HTTP status code")
    version: str = Field(default="HTTP/1.1", description="Protocol version string")
    headers: Headers = Field(
        default_factory=Headers, description="Ordered case-insensitive headers"
    )
    body: Union[bytes, str] = Field(default=b"", description="Response payload")

    @field_validator("headers", mode="before")
    @classmethod
    def _coerce_headers(cls, value: Any) -> Headers:
        if isinstance(value, Headers):
            return value
        return Headers(value)

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive header lookup."""
        return self.headers.get(name, default)

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get("content-type")

    @property
    def mime_type(self) -> Optional[str]:
        """Content type lowercased and stripped of parameters."""
        if not self.content_type:
            return None
        return self.content_type.split(";", 1)[0].strip().lower()

    @property
    def charset(self) -> Optional[str]:
        if not self.content_type:
            return None
        for param in self.content_type.split(";")[1:]:
            name, _, value = param.partition("=")
            if name.strip().lower() == "charset" and value.strip():
                return value.strip().strip('"')
        return None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299

    @property
    def content(self) -> bytes:
        """Body as bytes, encoding text bodies with the declared charset."""
        if isinstance(self.body, bytes):
            return self.body
        try:
            return self.body.encode(self.charset or "utf-8", errors="replace")
        except LookupError:
            return self.body.encode("utf-8")

    @property
    def text(self) -> str:
        """Body decoded to text, falling back to UTF-8 with replacement."""
        if isinstance(self.body, str):
            return self.body
        try:
            return self.body.decode(self.charset or "utf-8")
        except (LookupError, UnicodeDecodeError):
            return self.body.decode("utf-8", errors="replace")
