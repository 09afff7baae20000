"""Shared bookmark test data."""
from typing import Any


def make_bookmarks_array() -> list[dict[str, Any]]:
    """Three well-formed bookmarks, as they are stored and as the API returns them."""
    return [
        {
            "id": 1,
            "title": "Thinkful",
            "url": "https://www.thinkful.com",
            "description": "Think outside the classroom",
            "rating": "5.00",
        },
        {
            "id": 2,
            "title": "Google",
            "url": "https://www.google.com",
            "description": "Where we find everything else",
            "rating": "4.00",
        },
        {
            "id": 3,
            "title": "MDN",
            "url": "https://developer.mozilla.org",
            "description": None,
            "rating": "4.50",
        },
    ]


def make_malicious_bookmark() -> dict[str, Any]:
    """A bookmark carrying script injection in both text fields."""
    return {
        "id": 911,
        "title": 'Naughty naughty very naughty <script>alert("xss");</script>',
        "url": "google.com",
        "description": (
            'Bad image <img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
        ),
        "rating": "5.00",
    }
