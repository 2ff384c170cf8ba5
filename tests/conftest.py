import json

import pytest


@pytest.fixture()
def ranked_titles_body() -> str:
    """Direct result body with titles out of rank order."""
    return json.dumps({
        "titles": [
            {"youtube_title": "A", "thumbnail_text": "THUMB A", "rank": 2},
            {"youtube_title": "B", "ctr_rationale": "Short and sharp", "rank": 1},
        ]
    })


@pytest.fixture()
def thread_posts_body() -> str:
    """Thread body whose only usable payload sits in the second-to-last system post."""
    titles_json = json.dumps({"titles": ["From posts 1", "From posts 2"]})
    return json.dumps({
        "thread": {
            "posts": [
                {
                    "type": "chatMessage",
                    "chatMessage": {"source": "system", "content": '{"titles": ["stale"]}'},
                },
                {
                    "type": "chatMessage",
                    "chatMessage": {"source": "user", "content": '{"titles": ["user"]}'},
                },
                {
                    "type": "chatMessage",
                    "chatMessage": {"source": "system", "content": titles_json},
                },
                {
                    "type": "chatMessage",
                    "chatMessage": {"source": "system", "content": "Done! {not json"},
                },
            ]
        }
    })
