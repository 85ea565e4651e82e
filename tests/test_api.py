"""HTTP endpoint tests for records, search, suggestions and tags."""

from fastapi.testclient import TestClient

from catalog.app import create_app
from catalog.config import Settings
from catalog.records import RecordStore

NEW_ITEM = {
    "title": "Guide to Sourdough",
    "description": "Wild yeast, long fermentation and crusty loaves.",
    "tags": ["baking", "guide"],
    "date": "2025-08-01",
}


class TestItems:
    """Record listing and creation."""

    def test_list_items(self, client: TestClient) -> None:
        """Listing returns every seeded record with an ETag."""
        response = client.get("/api/v1/items")

        assert response.status_code == 200
        data = response.json()
        assert [item["id"] for item in data] == list(range(1, 11))
        assert data[3]["date"] == "2023-05-20"
        assert response.headers["cache-control"].startswith("public, max-age=300")
        assert response.headers["etag"] == '"items-11"'

    def test_list_items_not_modified(self, client: TestClient) -> None:
        """A matching If-None-Match yields 304 Not Modified."""
        response = client.get("/api/v1/items", headers={"If-None-Match": '"items-11"'})
        assert response.status_code == 304

    def test_create_item(self, client: TestClient) -> None:
        """Posting a valid record returns 201 with the next id."""
        response = client.post("/api/v1/items", json=NEW_ITEM)

        assert response.status_code == 201
        assert response.headers["cache-control"] == "no-cache"
        data = response.json()
        assert data["id"] == 11
        assert data["tags"] == ["baking", "guide"]

        listing = client.get("/api/v1/items")
        assert listing.headers["etag"] == '"items-12"'
        assert len(listing.json()) == 11

    def test_create_item_is_searchable(self, client: TestClient) -> None:
        """A newly created record shows up in search results."""
        client.post("/api/v1/items", json=NEW_ITEM)

        response = client.get("/api/v1/search", params={"q": "sourdough"})

        assert [r["item"]["id"] for r in response.json()["results"]] == [11]

    def test_create_item_missing_field(self, client: TestClient) -> None:
        """A payload without a required field is rejected with 422."""
        payload = {k: v for k, v in NEW_ITEM.items() if k != "title"}
        response = client.post("/api/v1/items", json=payload)
        assert response.status_code == 422

    def test_create_item_duplicate_tags(self, client: TestClient) -> None:
        """Duplicate tags in a payload are rejected with 422."""
        response = client.post(
            "/api/v1/items", json={**NEW_ITEM, "tags": ["guide", "guide"]}
        )
        assert response.status_code == 422

    def test_create_item_overlong_description(self, client: TestClient) -> None:
        """An oversized description is rejected and nothing is stored."""
        response = client.post(
            "/api/v1/items", json={**NEW_ITEM, "description": "x" * 100_000}
        )
        assert response.status_code == 422
        assert len(client.get("/api/v1/items").json()) == 10

    def test_get_item(self, client: TestClient) -> None:
        """A single record is fetched by id."""
        response = client.get("/api/v1/items/4")
        assert response.status_code == 200
        assert response.json()["title"] == "Street Food Guide"

    def test_get_missing_item(self, client: TestClient) -> None:
        """An unknown id returns 404."""
        response = client.get("/api/v1/items/404")
        assert response.status_code == 404


class TestSearch:
    """Search endpoint behaviour."""

    def test_empty_query_lists_everything(self, client: TestClient) -> None:
        """An empty query returns the whole catalog unscored."""
        response = client.get("/api/v1/search")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 10
        assert data["page_size"] == 10
        assert data["sort"] == "relevance"
        assert all(r["score"] is None and r["matches"] == [] for r in data["results"])

    def test_guide_query(self, client: TestClient) -> None:
        """Searching "guide" ranks the exact title hit first."""
        response = client.get("/api/v1/search", params={"q": "guide"})

        data = response.json()
        assert data["total"] == 3
        first = data["results"][0]
        assert first["item"]["id"] == 4
        assert first["score"] == 0.0
        assert first["matches"] == [
            {"key": "title", "index": None, "indices": [[12, 17]]},
            {"key": "tags", "index": 1, "indices": [[0, 5]]},
            {"key": "description", "index": None, "indices": [[19, 24]]},
        ]

    def test_tag_filter_and_oldest_sort(self, client: TestClient) -> None:
        """Tag filtering combines with oldest-first ordering."""
        response = client.get(
            "/api/v1/search", params={"tag": "guide", "sort": "oldest"}
        )
        ids = [r["item"]["id"] for r in response.json()["results"]]
        assert ids == [4, 8, 10]

    def test_page_size_truncates(self, client: TestClient) -> None:
        """page_size limits results but not the total."""
        response = client.get("/api/v1/search", params={"page_size": 5})
        data = response.json()
        assert data["total"] == 10
        assert len(data["results"]) == 5

    def test_non_positive_page_size_is_bad_request(self, client: TestClient) -> None:
        """A page size below one returns 400."""
        response = client.get("/api/v1/search", params={"page_size": 0})
        assert response.status_code == 400
        assert "page_size" in response.json()["detail"]

    def test_oversized_page_is_bad_request(self, client: TestClient) -> None:
        """A page size above the configured maximum returns 400."""
        response = client.get("/api/v1/search", params={"page_size": 101})
        assert response.status_code == 400

    def test_unknown_sort_is_rejected(self, client: TestClient) -> None:
        """An unsupported sort value is rejected."""
        response = client.get("/api/v1/search", params={"sort": "random"})
        assert response.status_code == 422

    def test_suggestions(self, client: TestClient) -> None:
        """Suggestion endpoint returns matching words and tags."""
        response = client.get("/api/v1/search/suggestions", params={"q": "gu"})
        assert response.json() == {"query": "gu", "suggestions": ["Guide", "guide"]}

    def test_tags(self, client: TestClient) -> None:
        """Tag endpoint returns counts for every tag."""
        response = client.get("/api/v1/tags")
        data = response.json()
        assert data[0] == {"tag": "coffee", "count": 1}
        assert {"tag": "guide", "count": 3} in data


class TestAuth:
    """Optional API key protection."""

    def _client(self, protect_reads: bool = False) -> TestClient:
        settings = Settings(key="secret", auth_protect_reads=protect_reads)
        return TestClient(create_app(settings, store=RecordStore()))

    def test_reads_are_public_by_default(self) -> None:
        """Reads need no key unless read protection is on."""
        response = self._client().get("/api/v1/items")
        assert response.status_code == 200
        assert response.json() == []

    def test_write_without_key(self) -> None:
        """Writes without a key return 401."""
        response = self._client().post("/api/v1/items", json=NEW_ITEM)
        assert response.status_code == 401
        assert response.json() == {"error": "Missing X-API-Key header"}

    def test_write_with_wrong_key(self) -> None:
        """Writes with a wrong key return 401."""
        response = self._client().post(
            "/api/v1/items", json=NEW_ITEM, headers={"X-API-Key": "nope"}
        )
        assert response.status_code == 401

    def test_write_with_valid_key(self) -> None:
        """Writes with the configured key succeed."""
        response = self._client().post(
            "/api/v1/items", json=NEW_ITEM, headers={"X-API-Key": "secret"}
        )
        assert response.status_code == 201
        assert response.json()["id"] == 1

    def test_protected_reads(self) -> None:
        """Read protection requires a key for GET requests."""
        client = self._client(protect_reads=True)
        assert client.get("/api/v1/search").status_code == 401
        assert client.get("/api/v1/health/live").status_code == 200


class TestRequestId:
    """Correlation ids on responses."""

    def test_generated_when_absent(self, client: TestClient) -> None:
        """A request id is generated when the client sends none."""
        response = client.get("/api/v1/tags")
        assert len(response.headers["x-request-id"]) == 32

    def test_echoed_when_supplied(self, client: TestClient) -> None:
        """A client supplied request id is echoed back."""
        response = client.get("/api/v1/tags", headers={"X-Request-ID": "abc123"})
        assert response.headers["x-request-id"] == "abc123"
