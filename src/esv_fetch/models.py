"""Data models for ESV passage requests and responses."""

from dataclasses import dataclass, field, fields
from typing import Optional


INDENT_CHOICES = ("space", "tab")


@dataclass(frozen=True)
class PassageOptions:
    """Formatting options for the ESV text endpoint.

    Every option defaults to ``None``, meaning it is left out of the query and
    the API's own default applies. Field names map to the API's hyphenated
    parameter names (``include_headings`` -> ``include-headings``).
    """

    include_passage_references: Optional[bool] = None  # Book/chapter/verse line before each passage
    include_verse_numbers: Optional[bool] = None
    include_first_verse_numbers: Optional[bool] = None  # Number on the first verse of each passage
    include_footnotes: Optional[bool] = None  # Footnote markers
    include_footnote_body: Optional[bool] = None
    include_headings: Optional[bool] = None  # Section headings
    include_short_copyright: Optional[bool] = None
    include_copyright: Optional[bool] = None
    include_passage_horizontal_lines: Optional[bool] = None
    include_heading_horizontal_lines: Optional[bool] = None
    horizontal_line_length: Optional[int] = None  # Number of '=' characters per line
    include_selahs: Optional[bool] = None
    indent_using: Optional[str] = None  # "space" or "tab"
    indent_paragraphs: Optional[int] = None
    indent_poetry: Optional[bool] = None
    indent_poetry_lines: Optional[int] = None
    indent_declares: Optional[int] = None  # "The word of the Lord" and similar
    indent_psalm_doxology: Optional[int] = None

    def __post_init__(self):
        if self.indent_using is not None and self.indent_using not in INDENT_CHOICES:
            raise ValueError(
                f"indent_using must be one of {INDENT_CHOICES}, got {self.indent_using!r}"
            )
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, int) and not isinstance(value, bool) and value < 0:
                raise ValueError(f"{f.name} must not be negative, got {value}")

    def to_params(self) -> list[tuple[str, str]]:
        """Return the set options as ordered ``(api_name, value)`` pairs."""
        params = []
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            params.append((f.name.replace("_", "-"), _format_value(value)))
        return params


def _format_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


# Sends only the reference; the API applies its defaults.
MINIMAL_OPTIONS = PassageOptions()

# Bare passage text: no references, numbers, footnotes, headings or copyright.
PLAIN_TEXT_OPTIONS = PassageOptions(
    include_passage_references=False,
    include_verse_numbers=False,
    include_first_verse_numbers=False,
    include_footnotes=False,
    include_footnote_body=False,
    include_headings=False,
    include_short_copyright=False,
    include_copyright=False,
    include_passage_horizontal_lines=False,
    include_heading_horizontal_lines=False,
    horizontal_line_length=5,
    include_selahs=False,
    indent_using="space",
    indent_paragraphs=2,
    indent_poetry=True,
    indent_poetry_lines=4,
    indent_declares=2,
    indent_psalm_doxology=1,
)


@dataclass
class PassageResponse:
    """Decoded body of a passage text response."""

    query: str  # Echo of the submitted reference
    canonical: str  # e.g., "John 3:16"
    passages: list[str] = field(default_factory=list)
    detail: Optional[str] = None  # Set by the API on auth and validation errors

    @classmethod
    def from_dict(cls, data: dict, reference: str = "") -> "PassageResponse":
        """Build a response from a decoded JSON object.

        ``reference`` stands in for ``query`` and ``canonical`` when the API
        leaves them out.
        """
        query = data.get("query") or reference
        passages = data.get("passages") or []
        if not isinstance(passages, (list, tuple)):
            passages = [passages]
        detail = data.get("detail")
        return cls(
            query=query,
            canonical=data.get("canonical") or query,
            passages=[str(p) for p in passages if p is not None],
            detail=str(detail) if detail is not None else None,
        )

    @property
    def found(self) -> bool:
        return len(self.passages) > 0

    @property
    def text(self) -> str:
        """All passages joined in order, with surrounding whitespace removed."""
        return "".join(self.passages).strip()
