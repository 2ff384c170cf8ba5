"""Tests for the ResponseNormalizer."""

import json
from unittest.mock import patch

from app.generation.models import (
    Failure,
    HttpResponse,
    Success,
    SuccessOpaque,
    TitleCandidate,
)
from app.generation.normalizer import ResponseNormalizer


def _ok(body: object) -> HttpResponse:
    text = body if isinstance(body, str) else json.dumps(body)
    return HttpResponse(status_code=200, text=text, reason="OK")


def _normalize(body: object) -> object:
    return ResponseNormalizer().normalize(_ok(body))


class TestHttpFailures:
    def test_500_is_failure_with_status_and_body(self) -> None:
        outcome = ResponseNormalizer().normalize(
            HttpResponse(status_code=500, text="internal error", reason="Internal Server Error")
        )
        assert isinstance(outcome, Failure)
        assert outcome.error.status_code == 500
        assert outcome.error.body == "internal error"
        assert outcome.error.message == (
            "Webhook failed: 500 Internal Server Error - internal error"
        )

    def test_failure_bypasses_normalization(self) -> None:
        body = json.dumps({"titles": ["should not be read"]})
        outcome = ResponseNormalizer().normalize(HttpResponse(status_code=401, text=body))
        assert isinstance(outcome, Failure)
        assert outcome.error.status_code == 401
        assert outcome.error.body == body

    def test_failure_without_reason(self) -> None:
        outcome = ResponseNormalizer().normalize(HttpResponse(status_code=502, text="bad gateway"))
        assert isinstance(outcome, Failure)
        assert outcome.error.message == "Webhook failed: 502 - bad gateway"


class TestOpaqueSuccess:
    def test_non_json_body(self) -> None:
        assert _normalize("Generated OK") == SuccessOpaque("Generated OK")

    def test_empty_body_uses_placeholder(self) -> None:
        assert _normalize("") == SuccessOpaque("Success (No content)")

    def test_blank_body_uses_placeholder(self) -> None:
        assert _normalize("  \n") == SuccessOpaque("Success (No content)")

    def test_json_without_titles_is_rendered(self) -> None:
        outcome = _normalize({"status": "queued"})
        assert isinstance(outcome, SuccessOpaque)
        assert json.loads(outcome.text) == {"status": "queued"}
        assert outcome.payload == {"status": "queued"}

    def test_shows_most_specific_payload(self) -> None:
        outcome = _normalize({"result": {"output": '{"note": "no titles today"}'}})
        assert isinstance(outcome, SuccessOpaque)
        assert outcome.payload == {"note": "no titles today"}

    def test_json_string_body(self) -> None:
        assert _normalize('"just a string"') == SuccessOpaque("just a string")

    def test_titles_of_only_unusable_elements(self) -> None:
        outcome = _normalize({"titles": [1, 2]})
        assert isinstance(outcome, SuccessOpaque)
        assert outcome.payload == {"titles": [1, 2]}

    def test_malformed_embedded_output_is_not_fatal(self) -> None:
        outcome = _normalize({"result": {"output": "{oops"}})
        assert isinstance(outcome, SuccessOpaque)
        assert outcome.payload == {"result": {"output": "{oops"}}


class TestTitleExtraction:
    def test_ranked_titles_sorted(self, ranked_titles_body: str) -> None:
        outcome = _normalize(ranked_titles_body)
        assert isinstance(outcome, Success)
        assert outcome.titles.titles == ["B", "A"]
        assert outcome.titles[1] == TitleCandidate(
            youtube_title="A", thumbnail_text="THUMB A", rank=2
        )

    def test_bare_string_titles(self) -> None:
        outcome = _normalize({"titles": ["X", "Y"]})
        assert isinstance(outcome, Success)
        assert outcome.titles.titles == ["X", "Y"]
        assert [c.thumbnail_text for c in outcome.titles] == [None, None]

    def test_result_output_string(self) -> None:
        output = json.dumps({"titles": [{"youtube_title": "R", "rank": 1}]})
        outcome = _normalize({"result": {"output": output}})
        assert isinstance(outcome, Success)
        assert outcome.titles.titles == ["R"]

    def test_result_output_list(self) -> None:
        outcome = _normalize({"result": {"output": {"output": ["L1", "L2"]}}})
        assert isinstance(outcome, Success)
        assert outcome.titles.titles == ["L1", "L2"]

    def test_result_output_nested_titles(self) -> None:
        outcome = _normalize({"result": {"output": {"output": {"titles": ["N"]}}}})
        assert isinstance(outcome, Success)
        assert outcome.titles.titles == ["N"]

    def test_thread_variables(self) -> None:
        value = json.dumps({"output": {"titles": ["T1", "T2"]}})
        outcome = _normalize({"thread": {"variables": {"output": {"value": value}}}})
        assert isinstance(outcome, Success)
        assert outcome.titles.titles == ["T1", "T2"]

    def test_thread_posts_second_to_last(self, thread_posts_body: str) -> None:
        outcome = _normalize(thread_posts_body)
        assert isinstance(outcome, Success)
        assert outcome.titles.titles == ["From posts 1", "From posts 2"]

    def test_empty_titles_list_is_success(self) -> None:
        outcome = _normalize({"titles": []})
        assert isinstance(outcome, Success)
        assert len(outcome.titles) == 0

    def test_partial_ranks_keep_server_order(self) -> None:
        outcome = _normalize({"titles": [
            {"youtube_title": "C", "rank": 3},
            {"youtube_title": "U"},
            {"youtube_title": "A", "rank": 1},
        ]})
        assert isinstance(outcome, Success)
        assert outcome.titles.titles == ["C", "U", "A"]


class TestLogging:
    def test_logs_title_count_in_info(self) -> None:
        with patch("app.generation.normalizer.Log") as mock_log:
            _normalize({"titles": ["a", "b"]})
        info_calls = [c.args[0] for c in mock_log.info.call_args_list]
        assert any("2 titles" in msg for msg in info_calls)

    def test_logs_http_failure_as_error(self) -> None:
        with patch("app.generation.normalizer.Log") as mock_log:
            ResponseNormalizer().normalize(HttpResponse(status_code=503, text="down"))
        mock_log.error.assert_called_once()
        assert "503" in mock_log.error.call_args.args[0]


class TestUnparseableBodies:
    def test_oversized_integer_body_is_opaque(self) -> None:
        body = "1" * 5000
        outcome = _normalize(body)
        assert isinstance(outcome, SuccessOpaque)
        assert outcome.text == body

    def test_deeply_nested_body_is_opaque(self) -> None:
        body = "[" * 100000
        outcome = _normalize(body)
        assert outcome == SuccessOpaque(body)

    def test_oversized_embedded_output_falls_through_to_posts(self) -> None:
        outcome = _normalize({
            "result": {"output": "9" * 5000},
            "thread": {"posts": [{
                "type": "chatMessage",
                "chatMessage": {"source": "assistant", "content": '{"titles": ["ok"]}'},
            }]},
        })
        assert isinstance(outcome, Success)
        assert outcome.titles.titles == ["ok"]
