"""Builds canonical TitleCandidates from the raw titles list."""

from typing import Any

from app.generation.exceptions import MalformedPayloadError
from app.generation.models import TitleCandidate, TitleSet
from app.logging.logger import Log

_TITLE_KEYS = ("youtube_title", "youtubeTitle", "title")
_THUMBNAIL_KEYS = ("thumbnail_text", "thumbnailText")
_RATIONALE_KEYS = ("ctr_rationale", "ctrRationale")


def build_title_set(raw_titles: list[Any]) -> TitleSet:
    """Normalize every element and order the result.

    Elements that cannot be turned into a candidate are logged and skipped.
    """
    candidates: list[TitleCandidate] = []
    for i, item in enumerate(raw_titles):
        try:
            candidates.append(build_candidate(item, i))
        except MalformedPayloadError as exc:
            Log.warning(f"Skipping title candidate: {exc}")
    return TitleSet(candidates=tuple(order_by_rank(candidates)))


def build_candidate(raw: Any, index: int) -> TitleCandidate:
    if isinstance(raw, str):
        return TitleCandidate(youtube_title=raw)
    if not isinstance(raw, dict):
        raise MalformedPayloadError(
            f"Title at index {index} must be a string or an object, got {type(raw).__name__}"
        )
    title = _first_text(raw, _TITLE_KEYS)
    if not title:
        raise MalformedPayloadError(f"Title at index {index} has no 'youtube_title'")
    return TitleCandidate(
        youtube_title=title,
        thumbnail_text=_first_text(raw, _THUMBNAIL_KEYS),
        ctr_rationale=_first_text(raw, _RATIONALE_KEYS),
        rank=_build_rank(raw.get("rank")),
    )


def order_by_rank(candidates: list[TitleCandidate]) -> list[TitleCandidate]:
    """Sort ascending by rank when every candidate is ranked; otherwise keep order."""
    if candidates and all(c.rank is not None for c in candidates):
        return sorted(candidates, key=lambda c: c.rank)
    return list(candidates)


def _first_text(raw: dict[str, Any], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = raw.get(key)
        if value is None:
            continue
        return value if isinstance(value, str) else str(value)
    return None


def _build_rank(raw: Any) -> int | None:
    # unusable ranks count as absent
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None
