from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class Tone(str, Enum):
    """Growth profile the upstream agent writes titles for."""

    VIRAL = "Viral"
    EDUCATIONAL = "Educational"
    STORY = "Story"
    SEO = "SEO"

    @property
    def description(self) -> str:
        return _TONE_DESCRIPTIONS[self]


_TONE_DESCRIPTIONS: dict[Tone, str] = {
    Tone.VIRAL: "Curiosity gaps",
    Tone.EDUCATIONAL: "Authority & Value",
    Tone.STORY: "Transformation",
    Tone.SEO: "Keyword Focus",
}

VARIATION_COUNTS: tuple[int, ...] = (5, 10, 20)
DEFAULT_TONE = Tone.VIRAL
DEFAULT_VARIATION_COUNT = 10


@dataclass(frozen=True)
class GenerationRequest:
    """User-supplied fields for one generation attempt."""

    topic: str
    key_points: str = ""
    target_audience: str = ""
    main_takeaway: str = ""
    variation_count: int | str = DEFAULT_VARIATION_COUNT
    tone: Tone = DEFAULT_TONE


@dataclass
class GenerationForm:
    """Mutable field values written by the presentation layer."""

    topic: str = ""
    key_points: str = ""
    target_audience: str = ""
    main_takeaway: str = ""
    variation_count: int | str = DEFAULT_VARIATION_COUNT
    tone: Tone = DEFAULT_TONE

    @classmethod
    def from_template_variables(cls, variables: dict[str, str | int]) -> "GenerationForm":
        """Seed the form from host-provided template variables.

        Text fields accept any scalar. Unknown or empty values fall back to
        the form defaults.
        """
        tone_value = str(variables.get("tone") or DEFAULT_TONE.value)
        try:
            tone = Tone(tone_value)
        except ValueError:
            tone = DEFAULT_TONE
        return cls(
            topic=_text(variables.get("topic")),
            key_points=_text(variables.get("key_points")),
            target_audience=_text(variables.get("target_audience")),
            main_takeaway=_text(variables.get("main_takeaway")),
            variation_count=variables.get("description_count") or DEFAULT_VARIATION_COUNT,
            tone=tone,
        )

    def to_request(self) -> GenerationRequest:
        return GenerationRequest(
            topic=self.topic,
            key_points=self.key_points,
            target_audience=self.target_audience,
            main_takeaway=self.main_takeaway,
            variation_count=self.variation_count,
            tone=self.tone,
        )


def _text(value: str | int | None) -> str:
    return str(value) if value else ""


@dataclass(frozen=True)
class HttpResponse:
    """Status line and body text returned by a transport adapter."""

    status_code: int
    text: str = ""
    reason: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class TitleCandidate:
    """One generated title with its supporting metadata."""

    youtube_title: str
    thumbnail_text: str | None = None
    ctr_rationale: str | None = None
    rank: int | None = None

    def display_rank(self, index: int) -> int:
        """Rank badge value: the rank when present, else the 1-based position."""
        return self.rank if self.rank else index + 1

    @property
    def is_top_ranked(self) -> bool:
        return self.rank is not None and self.rank <= 3


@dataclass(frozen=True)
class TitleSet:
    """Ordered collection of candidates shown to the user."""

    candidates: tuple[TitleCandidate, ...] = ()

    def __iter__(self) -> Iterator[TitleCandidate]:
        return iter(self.candidates)

    def __len__(self) -> int:
        return len(self.candidates)

    def __getitem__(self, index: int) -> TitleCandidate:
        return self.candidates[index]

    @property
    def titles(self) -> list[str]:
        return [c.youtube_title for c in self.candidates]

    def to_clipboard_text(self) -> str:
        """Render every candidate on its own line for "Copy All"."""
        lines = []
        for candidate in self.candidates:
            line = candidate.youtube_title
            if candidate.thumbnail_text:
                line += f" [Thumb: {candidate.thumbnail_text}]"
            lines.append(line)
        return "\n".join(lines)


@dataclass(frozen=True)
class ErrorInfo:
    """Display-ready description of a failed attempt."""

    message: str
    status_code: int | None = None
    reason: str = ""
    body: str = ""


@dataclass(frozen=True)
class Success:
    titles: TitleSet


@dataclass(frozen=True)
class SuccessOpaque:
    """Successful response whose body carried no recognizable titles."""

    text: str
    payload: object = field(default=None, compare=False)


@dataclass(frozen=True)
class Failure:
    error: ErrorInfo


RequestOutcome = Success | SuccessOpaque | Failure
