"""Ordered strategies for locating the titles payload in an agent-run response.

The upstream service does not fix where its output lands, so each strategy
looks in one known place and returns the candidate payload it found, or None.
Strategies raise MalformedPayloadError when the place exists but cannot be
decoded; the chain treats that as "no match" and moves on.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from app.generation.exceptions import MalformedPayloadError
from app.logging.logger import Log

Strategy = Callable[[Any], Any]

_CHAT_MESSAGE_TYPE = "chatMessage"
_CHAT_SOURCES = frozenset({"system", "assistant"})


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of the strategy chain.

    ``titles`` is None when no strategy found a titles list; ``payload`` is
    the most specific value found so far, for display.
    """

    payload: Any
    titles: list[Any] | None = None
    strategy: str | None = None


def decode_json(value: Any) -> Any:
    """Decode string-encoded JSON; structured values pass through unchanged."""
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except (ValueError, RecursionError) as exc:
        raise MalformedPayloadError(f"Invalid embedded JSON: {exc}") from exc


def find_titles(payload: Any) -> list[Any] | None:
    """Return the titles list carried by a payload, resolving ``output`` wrappers."""
    if not isinstance(payload, dict):
        return None
    output = payload.get("output")
    if isinstance(output, list):
        return output
    if isinstance(output, dict) and output.get("titles") is not None:
        titles = output["titles"]
    else:
        titles = payload.get("titles")
    return titles if isinstance(titles, list) else None


def try_direct_result(body: Any) -> Any:
    """``result.output`` (possibly string-encoded), else ``result`` when it has titles."""
    if not isinstance(body, dict):
        return None
    result = body.get("result")
    if not isinstance(result, dict):
        return None
    output = result.get("output")
    if output is not None and output != "":
        return decode_json(output)
    if result.get("titles") is not None:
        return result
    return None


def try_top_level(body: Any) -> Any:
    """The body itself, when it already carries titles."""
    return body if find_titles(body) is not None else None


def try_thread_variables(body: Any) -> Any:
    """``thread.variables.output.value``, descending into a nested ``output`` object."""
    value = _dig(body, "thread", "variables", "output", "value")
    if value is None:
        return None
    decoded = decode_json(value)
    if isinstance(decoded, dict) and isinstance(decoded.get("output"), dict):
        return decoded["output"]
    return decoded


def try_thread_posts(body: Any) -> Any:
    """Most recent system/assistant chat message whose content decodes to titles."""
    posts = _dig(body, "thread", "posts")
    if not isinstance(posts, list):
        return None
    for post in reversed(posts):
        content = _chat_message_content(post)
        if content is None:
            continue
        try:
            parsed = decode_json(content)
        except MalformedPayloadError:
            continue
        if find_titles(parsed) is not None:
            return parsed
    return None


STRATEGIES: tuple[Strategy, ...] = (
    try_direct_result,
    try_top_level,
    try_thread_variables,
    try_thread_posts,
)


def run_extraction_chain(
    body: Any,
    strategies: tuple[Strategy, ...] = STRATEGIES,
) -> ExtractionResult:
    """Apply strategies in order until one yields a titles list."""
    best: Any = body
    for strategy in strategies:
        try:
            candidate = strategy(body)
        except MalformedPayloadError as exc:
            Log.debug(f"Extraction strategy {strategy.__name__} skipped: {exc}")
            continue
        if candidate is None:
            continue
        best = candidate
        titles = find_titles(candidate)
        if titles is not None:
            return ExtractionResult(payload=candidate, titles=titles, strategy=strategy.__name__)
    return ExtractionResult(payload=best)


def _dig(value: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _chat_message_content(post: Any) -> Any:
    if not isinstance(post, dict) or post.get("type") != _CHAT_MESSAGE_TYPE:
        return None
    message = post.get(_CHAT_MESSAGE_TYPE)
    if not isinstance(message, dict):
        message = post
    source = message.get("source") or message.get("role")
    if source not in _CHAT_SOURCES:
        return None
    return message.get("content")
