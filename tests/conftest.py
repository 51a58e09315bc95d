"""Shared test fixtures and configuration."""

import json

import httpx
import pytest


def embed_json(data) -> str:
    """Serialize data the way the site does: a JSON string literal holding JSON."""
    inner = json.dumps(data, separators=(",", ":"))
    return json.dumps(inner)[1:-1]


def wrap_html(payload: str) -> str:
    """Place an escaped payload inside a hydration script tag."""
    return (
        "<!DOCTYPE html><html><head><title>VivaTech</title></head><body>"
        '<nav data-items="[1, 2]">Menu</nav>'
        f'<script>self.__next_f.push([1,"{payload}"])</script>'
        "</body></html>"
    )


def mock_client(html: str = "", status_code: int = 200, requests: list | None = None) -> httpx.Client:
    """httpx client answering every request with a fixed page."""

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code, text=html)

    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture
def jane_doe_html() -> str:
    """Page embedding a single minimal speaker."""
    payload = (
        r'[{\"id\":\"1\",\"firstname\":\"Jane\",\"lastname\":\"Doe\",'
        r'\"jobTitle\":\"CEO\",\"company\":\"Acme\"}]'
    )
    return wrap_html(payload)


@pytest.fixture
def speakers_data() -> list[dict]:
    return [
        {
            "id": "sp-1",
            "firstname": "Ada",
            "lastname": "Lovelace",
            "email": "ada@example.com",
            "jobTitle": "Chief Scientist",
            "company": "Analytical Engines",
            "tags": ["AI", "Math"],
            "themes": ["Future of Work"],
            "image": {
                "s": "https://img.example.com/s.jpg",
                "t": "https://img.example.com/t.jpg",
                "l": "https://img.example.com/l.jpg",
                "u": "https://img.example.com/u.jpg",
            },
            "hasBio": True,
            "hasSessions": True,
            "isOfficial": False,
            "isPartner": True,
            "top": True,
            "communication_manager": "Charles B.",
            "bio": "Ignored field",
        },
        {
            "id": "sp-2",
            "firstname": "Éric",
            "lastname": "Dupont",
            "jobTitle": "CTO",
            "company": "R&D Labs",
        },
    ]


@pytest.fixture
def partners_data() -> list[dict]:
    return [
        {
            "id": "p-1",
            "name": "Acme Corp",
            "type": "gold partner",
            "desc": "Builds everything",
            "short_desc": "Everything",
            "website": "https://acme.example.com",
            "logo": {"u": "https://img.example.com/acme.png"},
            "key_figures": {"city": "Paris, France"},
        },
        {
            "id": "p-2",
            "name": "Tiny Startup - Germany",
            "type": "startup",
            "short_desc": "Small but mighty",
        },
        {
            "id": "p-3",
            "name": "Big Sponsor",
            "type": "sponsor",
        },
        {
            "id": "p-4",
            "name": "Acme Corp",
            "type": "startup",
            "desc": "Duplicate entry",
        },
    ]


@pytest.fixture
def embed():
    """Build a full page around data serialized as an escaped payload."""

    def _embed(data) -> str:
        return wrap_html(embed_json(data))

    return _embed


@pytest.fixture
def client_for():
    """Factory for mocked httpx clients."""
    return mock_client
