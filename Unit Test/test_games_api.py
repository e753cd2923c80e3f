import httpx
from sqlalchemy.exc import IntegrityError

from app.main import app
from app.db.deps import get_game_store
from app.services.game_store import GameStore
from app.services.top100_importer import Top100Importer, get_top100_importer
from app.utils.error_handler import StoreError


def test_create_returns_id_and_supplied_fields(client, chess_payload):
    response = client.post("/api/games", json=chess_payload)
    assert response.status_code == 200
    body = response.json()
    assert isinstance(body["id"], int)
    for key, value in chess_payload.items():
        assert body[key] == value
    assert "createdAt" in body and "updatedAt" in body


def test_create_then_list_contains_exactly_one_match(client, chess_payload):
    assert client.get("/api/games").json() == []
    created = client.post("/api/games", json=chess_payload).json()

    games = client.get("/api/games").json()
    matches = [g for g in games if g["name"] == "Chess"]
    assert len(matches) == 1
    assert matches[0]["id"] == created["id"]


def test_create_rejects_unknown_platform(client, chess_payload):
    chess_payload["platform"] = "symbian"
    response = client.post("/api/games", json=chess_payload)
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"
    assert client.get("/api/games").json() == []


def test_create_requires_name(client, chess_payload):
    del chess_payload["name"]
    response = client.post("/api/games", json=chess_payload)
    assert response.status_code == 400


def test_search(client):
    for name, platform in [
        ("Super Mario Run", "ios"),
        ("Mario Kart Tour", "android"),
        ("Candy Crush Saga", "ios"),
    ]:
        client.post("/api/games", json={"name": name, "platform": platform})

    by_name = client.post("/api/games/search", json={"name": "Mario"}).json()
    assert {g["name"] for g in by_name} == {"Super Mario Run", "Mario Kart Tour"}

    by_both = client.post("/api/games/search", json={"name": "Mario", "platform": "ios"}).json()
    assert [g["name"] for g in by_both] == ["Super Mario Run"]

    everything = client.post("/api/games/search", json={}).json()
    assert len(everything) == 3


def test_update_replaces_every_field(client):
    created = client.post(
        "/api/games",
        json={"name": "A", "platform": "ios", "storeId": "s1", "isPublished": True},
    ).json()

    response = client.put(f"/api/games/{created['id']}", json={"name": "B"})
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["name"] == "B"
    assert body["platform"] is None
    assert body["storeId"] is None
    assert body["isPublished"] is None


def test_update_missing_game_is_404(client, chess_payload):
    response = client.put("/api/games/12345", json=chess_payload)
    assert response.status_code == 404
    assert response.json() == {"error": "Game not found", "detail": {"id": 12345}}


def test_delete(client, chess_payload):
    created = client.post("/api/games", json=chess_payload).json()

    response = client.delete(f"/api/games/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"id": created["id"]}
    assert all(g["id"] != created["id"] for g in client.get("/api/games").json())


def test_delete_missing_game_is_404(client):
    response = client.delete("/api/games/999")
    assert response.status_code == 404
    assert response.json()["detail"] == {"id": 999}


def _feeds_importer(ios_response):
    feeds = {
        "https://feeds.test/android.top100.json": httpx.Response(
            200,
            json=[
                {"publisherId": "King", "name": "Candy Crush Saga", "os": "android",
                 "appId": "com.king.candycrushsaga", "bundle_id": "com.king.candycrushsaga", "version": "1.0"},
                [{"publisherId": "Nintendo", "name": "Mario Kart Tour", "os": "android",
                  "appId": "com.nintendo.zaka", "bundle_id": "com.nintendo.zaka", "version": "2.0"}],
            ],
        ),
        "https://feeds.test/ios.top100.json": ios_response,
    }

    def handler(request):
        return feeds[str(request.url)]

    return Top100Importer(
        url_template="https://feeds.test/{platform}.top100.json",
        platforms=["android", "ios"],
        transport=httpx.MockTransport(handler),
    )


def test_populate_inserts_both_feeds(client):
    importer = _feeds_importer(
        httpx.Response(200, json=[
            {"publisherId": "SYBO", "name": "Subway Surfers", "os": "ios",
             "appId": "512939461", "bundle_id": "com.kiloo.subwaysurfers", "version": "3.1"},
        ])
    )
    app.dependency_overrides[get_top100_importer] = lambda: importer

    response = client.post("/api/games/populate")
    assert response.status_code == 200
    assert response.json() == "ok"

    games = client.get("/api/games").json()
    assert [g["name"] for g in games] == ["Candy Crush Saga", "Mario Kart Tour", "Subway Surfers"]
    assert all(g["isPublished"] for g in games)
    assert games[2]["platform"] == "ios"
    assert games[2]["storeId"] == "512939461"


def test_populate_feed_failure_inserts_nothing(client):
    app.dependency_overrides[get_top100_importer] = lambda: _feeds_importer(
        httpx.Response(200, text="Access Denied")
    )

    response = client.post("/api/games/populate")
    assert response.status_code == 502
    assert response.json()["detail"] == "https://feeds.test/ios.top100.json"
    assert client.get("/api/games").json() == []


class RejectingStore:
    def bulk_create(self, records):
        raise StoreError("Error populating db with top 100 games in all platforms", Exception("disk full"))


def test_populate_bulk_create_failure_is_400_and_not_ok(client):
    app.dependency_overrides[get_top100_importer] = lambda: _feeds_importer(httpx.Response(200, json=[]))
    app.dependency_overrides[get_game_store] = lambda: RejectingStore()

    response = client.post("/api/games/populate")
    assert response.status_code == 400
    assert response.json() == {
        "error": "Error populating db with top 100 games in all platforms",
        "detail": "disk full",
    }


def test_search_without_body_lists_everything(client, chess_payload):
    client.post("/api/games", json=chess_payload)

    response = client.post("/api/games/search")
    assert response.status_code == 200
    assert [g["name"] for g in response.json()] == ["Chess"]


def test_update_without_name_is_rejected(client, chess_payload):
    created = client.post("/api/games", json=chess_payload).json()
    del chess_payload["name"]

    response = client.put(f"/api/games/{created['id']}", json=chess_payload)
    assert response.status_code == 400
    assert client.get("/api/games").json()[0]["name"] == "Chess"


class UnreadableStore:
    def list_all(self):
        raise StoreError("There was an error querying games", Exception("no such table: games"))

    def search(self, name=None, platform=None):
        raise StoreError("There was an error searching games", Exception("no such table: games"))


def test_list_store_error_is_400(client):
    app.dependency_overrides[get_game_store] = lambda: UnreadableStore()

    response = client.get("/api/games")
    assert response.status_code == 400
    assert response.json() == {
        "error": "There was an error querying games",
        "detail": "no such table: games",
    }


def test_search_store_error_is_400(client):
    app.dependency_overrides[get_game_store] = lambda: UnreadableStore()

    response = client.post("/api/games/search", json={"name": "Mario"})
    assert response.status_code == 400
    assert response.json()["error"] == "There was an error searching games"

    no_body = client.post("/api/games/search")
    assert no_body.status_code == 400
    assert no_body.json()["error"] == "There was an error querying games"


class CommitRejectingSession:
    """Real session for reads, but every commit hits a constraint."""

    def __init__(self, db):
        self._db = db

    def __getattr__(self, name):
        return getattr(self._db, name)

    def commit(self):
        raise IntegrityError("UPDATE games", {}, Exception("CHECK constraint failed: games"))


def test_update_store_error_is_400_and_row_is_unchanged(client, db_session, chess_payload):
    created = client.post("/api/games", json=chess_payload).json()
    app.dependency_overrides[get_game_store] = lambda: GameStore(CommitRejectingSession(db_session))

    response = client.put(f"/api/games/{created['id']}", json={"name": "Checkers"})
    assert response.status_code == 400
    assert response.json() == {
        "error": f"Error updating game {created['id']}",
        "detail": str(IntegrityError("UPDATE games", {}, Exception("CHECK constraint failed: games"))),
    }

    del app.dependency_overrides[get_game_store]
    games = client.get("/api/games").json()
    assert [g["name"] for g in games] == ["Chess"]
    assert games[0]["platform"] == "android"
