"""
Content-type registry: ordered MIME pattern to renderer table.

Patterns are regular expressions searched against the MIME string, so
parameters such as ``charset`` never need to be matched. The first rule whose
pattern matches wins; later rules are not consulted.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Pattern, Sequence, Tuple, Union

from ..schemas.errors import UsageError
from ..utils.ui.buffer import Buffer

logger = logging.getLogger(__name__)


class ContentRenderer(ABC):
    """Content-specific transform applied to a freshly filled buffer."""

    name: str = ""

    @abstractmethod
    def apply_to(self, buffer: Buffer) -> None:
        """Adjust the buffer's contents and presentation mode."""
        ...


class SyntaxRenderer(ContentRenderer):
    """Mark the buffer for syntax highlighting with a given lexer."""

    def __init__(self, lexer: str, mode: Optional[str] = None):
        self.name = lexer
        self.lexer = lexer
        self.mode = mode or lexer

    def apply_to(self, buffer: Buffer) -> None:
        buffer.lexer = self.lexer
        buffer.mode = self.mode


class JsonRenderer(SyntaxRenderer):
    """JSON highlighting, pretty printed when the body parses."""

    def __init__(self, indent: int = 2, pretty: bool = True):
        super().__init__("json")
        self.indent = indent
        self.pretty = pretty

    def apply_to(self, buffer: Buffer) -> None:
        super().apply_to(buffer)
        if not self.pretty or not buffer.text.strip():
            return
        try:
            data = json.loads(buffer.text)
        except ValueError:
            logger.debug("Body of %s is not valid JSON, leaving as-is", buffer.name)
            return
        buffer.replace_text(json.dumps(data, indent=self.indent, ensure_ascii=False) + "\n")


class ImageRenderer(ContentRenderer):
    """Replace undisplayable image bytes with a short description."""

    name = "image"

    def apply_to(self, buffer: Buffer) -> None:
        buffer.mode = "image"
        buffer.lexer = None
        kind = buffer.response.mime_type if buffer.response else None
        buffer.replace_text(f"[{kind or 'image'}, {len(buffer.raw)} bytes]\n")


RENDERERS: Dict[str, Callable[[], ContentRenderer]] = {
    "json": JsonRenderer,
    "html": lambda: SyntaxRenderer("html"),
    "xml": lambda: SyntaxRenderer("xml"),
    "css": lambda: SyntaxRenderer("css"),
    "javascript": lambda: SyntaxRenderer("javascript"),
    "text": lambda: SyntaxRenderer("text", mode="text"),
    "image": ImageRenderer,
}

DEFAULT_CONTENT_TYPE_RULES: List[Tuple[str, str]] = [
    (r"^application/(ld\+)?json", "json"),
    (r"^text/json", "json"),
    (r"^text/html", "html"),
    (r"^application/xhtml\+xml", "html"),
    (r"^(application|text)/xml", "xml"),
    (r"\+xml\b", "xml"),
    (r"^text/css", "css"),
    (r"^(application|text)/javascript", "javascript"),
    (r"^image/", "image"),
]


@dataclass(frozen=True)
class ContentTypeRule:
    """One (pattern, renderer) row of the table."""

    pattern: Pattern[str]
    renderer: ContentRenderer

    def matches(self, mime: str) -> bool:
        return self.pattern.search(mime) is not None


class ContentTypeRegistry:
    """Ordered rule table; order is significant."""

    def __init__(self, rules: Iterable[ContentTypeRule] = ()):
        self.rules: List[ContentTypeRule] = list(rules)

    @classmethod
    def from_config(
        cls, rules: Sequence[Tuple[str, Union[str, ContentRenderer]]]
    ) -> "ContentTypeRegistry":
        """
        Build a registry from (pattern, renderer) pairs.

        Renderers may be given by key (see RENDERERS) or as instances.

        Raises:
            UsageError: For invalid patterns or unknown renderer keys.
        """
        built = []
        for pattern, renderer in rules:
            try:
                compiled = re.compile(pattern, re.IGNORECASE)
            except re.error as e:
                raise UsageError(f"Invalid content type pattern {pattern!r}: {e}") from e
            if isinstance(renderer, str):
                factory = RENDERERS.get(renderer)
                if factory is None:
                    raise UsageError(f"Unknown renderer {renderer!r} for {pattern!r}")
                renderer = factory()
            built.append(ContentTypeRule(compiled, renderer))
        return cls(built)

    @classmethod
    def default(cls) -> "ContentTypeRegistry":
        return cls.from_config(DEFAULT_CONTENT_TYPE_RULES)

    def add(self, pattern: str, renderer: Union[str, ContentRenderer]) -> None:
        """Append a rule at the lowest priority."""
        self.rules.extend(ContentTypeRegistry.from_config([(pattern, renderer)]).rules)

    def match(self, mime: Optional[str]) -> Optional[ContentTypeRule]:
        if not mime:
            return None
        for rule in self.rules:
            if rule.matches(mime):
                return rule
        return None

    def apply(self, buffer: Buffer, mime: Optional[str]) -> Optional[ContentTypeRule]:
        """Apply the first matching renderer to ``buffer``; None leaves it plain."""
        rule = self.match(mime)
        if rule is not None:
            rule.renderer.apply_to(buffer)
        return rule
