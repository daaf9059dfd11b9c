import pytest
import httpx
from types import SimpleNamespace
from datetime import datetime, timezone
from services.base import ProviderError
from services.newsapi_service import NewsApiProvider
from services.gnews_service import GNewsProvider
from services.alpaca_news_service import AlpacaNewsProvider


def mock_client(payload, status_code=200, seen=None):
    def handler(request):
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


NEWSAPI_PAYLOAD = {
    "status": "ok",
    "totalResults": 3,
    "articles": [
        {
            "source": {"id": "reuters", "name": "Reuters"},
            "title": "Apple shares rally on strong iPhone demand",
            "description": "Analysts upgrade the stock.",
            "url": "https://example.com/apple-rally",
            "publishedAt": "2025-11-02T10:00:00Z",
        },
        {
            "source": {"id": None, "name": "CNBC"},
            "title": "Apple faces regulatory concerns",
            "description": None,
            "url": "https://example.com/apple-regulation",
            "publishedAt": "2025-11-02T09:00:00Z",
        },
        {
            # Missing url: skipped
            "source": {"name": "Blog"},
            "title": "Broken item",
            "publishedAt": "2025-11-02T08:00:00Z",
        },
    ],
}


@pytest.mark.asyncio
async def test_newsapi_parses_articles():
    seen = []
    provider = NewsApiProvider("test-key", client=mock_client(NEWSAPI_PAYLOAD, seen=seen))

    articles = await provider.fetch_news("AAPL", limit=10)

    assert len(articles) == 2
    assert articles[0].title == "Apple shares rally on strong iPhone demand"
    assert articles[0].source == "Reuters"
    assert articles[0].published_at == datetime(2025, 11, 2, 10, 0, tzinfo=timezone.utc)
    assert articles[1].description is None

    params = seen[0].url.params
    assert seen[0].url.path == "/v2/everything"
    assert params["q"] == "AAPL"
    assert params["apiKey"] == "test-key"
    assert params["pageSize"] == "10"


@pytest.mark.asyncio
async def test_newsapi_respects_limit():
    provider = NewsApiProvider("test-key", client=mock_client(NEWSAPI_PAYLOAD))
    articles = await provider.fetch_news("AAPL", limit=1)
    assert len(articles) == 1


@pytest.mark.asyncio
async def test_newsapi_error_payload_raises():
    payload = {"status": "error", "code": "apiKeyInvalid", "message": "Your API key is invalid."}
    provider = NewsApiProvider("bad-key", client=mock_client(payload))

    with pytest.raises(ProviderError, match="API key is invalid"):
        await provider.fetch_news("AAPL")


@pytest.mark.asyncio
async def test_newsapi_http_error_raises():
    provider = NewsApiProvider("test-key", client=mock_client({}, status_code=500))

    with pytest.raises(httpx.HTTPStatusError):
        await provider.fetch_news("AAPL")


@pytest.mark.asyncio
@pytest.mark.parametrize("provider_class", [NewsApiProvider, GNewsProvider])
@pytest.mark.parametrize("payload", [[], ["not", "an", "object"], "text", 42])
async def test_non_object_json_raises_provider_error(provider_class, payload):
    provider = provider_class("test-key", client=mock_client(payload))

    with pytest.raises(ProviderError, match="expected a JSON object"):
        await provider.fetch_news("AAPL")


@pytest.mark.asyncio
async def test_gnews_parses_articles():
    payload = {
        "totalArticles": 1,
        "articles": [
            {
                "title": "Tesla deliveries beat estimates",
                "description": "Shares rise in early trading.",
                "url": "https://example.com/tesla",
                "publishedAt": "2025-11-02T12:30:00Z",
                "source": {"name": "Bloomberg", "url": "https://bloomberg.com"},
            }
        ],
    }
    seen = []
    provider = GNewsProvider("g-key", client=mock_client(payload, seen=seen))

    articles = await provider.fetch_news("TSLA", limit=5)

    assert len(articles) == 1
    assert articles[0].source == "Bloomberg"
    assert seen[0].url.params["apikey"] == "g-key"
    assert seen[0].url.params["max"] == "5"


@pytest.mark.asyncio
async def test_gnews_errors_payload_raises():
    payload = {"errors": ["You have reached your request limit for today."]}
    provider = GNewsProvider("g-key", client=mock_client(payload))

    with pytest.raises(ProviderError, match="request limit"):
        await provider.fetch_news("TSLA")


class StubNewsClient:
    """Stand-in for alpaca NewsClient."""

    def __init__(self, items=None, error=None):
        self.items = items or []
        self.error = error
        self.requests = []

    def get_news(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return SimpleNamespace(data={"news": self.items})


def alpaca_item(**overrides):
    fields = dict(
        id=1,
        headline="Microsoft beats earnings expectations",
        summary="Cloud growth remains strong.",
        url="https://example.com/msft",
        created_at=datetime(2025, 11, 2, 14, 0, tzinfo=timezone.utc),
        source="benzinga",
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.mark.asyncio
async def test_alpaca_parses_news():
    client = StubNewsClient(items=[alpaca_item(), alpaca_item(id=2, summary="")])
    provider = AlpacaNewsProvider("key", "secret", client=client)

    articles = await provider.fetch_news("MSFT", limit=5)

    assert len(articles) == 2
    assert articles[0].title == "Microsoft beats earnings expectations"
    assert articles[0].source == "benzinga"
    assert articles[1].description is None
    assert client.requests[0].limit == 5


@pytest.mark.asyncio
async def test_alpaca_skips_unparseable_items():
    client = StubNewsClient(items=[alpaca_item(), SimpleNamespace(id=3)])
    provider = AlpacaNewsProvider("key", "secret", client=client)

    articles = await provider.fetch_news("MSFT")
    assert len(articles) == 1


@pytest.mark.asyncio
async def test_alpaca_fetch_failure_raises():
    client = StubNewsClient(error=RuntimeError("forbidden"))
    provider = AlpacaNewsProvider("key", "secret", client=client)

    with pytest.raises(RuntimeError, match="forbidden"):
        await provider.fetch_news("MSFT")
