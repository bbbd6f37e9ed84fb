import logging

from palindrome_api.app.store import MessageStoreError


class BrokenStore:
    def create(self, payload):
        raise MessageStoreError("connection refused by 10.0.0.5")

    def read(self, message_id):
        raise RuntimeError("unexpected")

    def list(self, criteria=None):
        raise MessageStoreError("connection refused by 10.0.0.5")

    def delete(self, message_id):
        raise MessageStoreError("connection refused by 10.0.0.5")

    def close(self):
        pass


def test_healthz(client):
    for path in ("/healthz", "/healthz/"):
        r = client.get(path)
        assert r.status_code == 200
        assert r.text == "ok"


def test_create_returns_message_json(client):
    r = client.post("/api/v1/messages", json={"text": "racecar"})
    assert r.status_code == 200
    body = r.json()
    assert set(body) == {"id", "text", "palindrome", "createdAt"}
    assert body["text"] == "racecar"
    assert body["palindrome"] is True
    assert body["createdAt"].endswith("Z")


def test_strict_and_normalized_scenarios(make_client):
    strict = make_client(strict=True)
    assert strict.post("/api/v1/messages", json={"text": "racecar"}).json()["palindrome"] is True
    assert strict.post("/api/v1/messages", json={"text": "a toyota"}).json()["palindrome"] is False

    normalized = make_client(strict=False)
    assert normalized.post("/api/v1/messages", json={"text": "a toyota"}).json()["palindrome"] is True


def test_create_empty_text_is_allowed(client):
    r = client.post("/api/v1/messages", json={"text": ""})
    assert r.status_code == 200
    assert r.json()["palindrome"] is True


def test_create_missing_text_is_bad_request(client):
    assert client.post("/api/v1/messages", json={}).status_code == 400
    assert client.post("/api/v1/messages", json={"text": None}).status_code == 400


def test_create_malformed_body_is_bad_request(client):
    r = client.post(
        "/api/v1/messages",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert client.post("/api/v1/messages", json={"text": 5}).status_code == 400
    assert client.post("/api/v1/messages").status_code == 400


def test_read_round_trip(client):
    created = client.post("/api/v1/messages", json={"text": "abc"}).json()
    r = client.get(f"/api/v1/messages/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created
    assert client.get(f"/api/v1/messages/{created['id']}/").json() == created


def test_read_unknown_is_not_found(client):
    r = client.get("/api/v1/messages/does-not-exist")
    assert r.status_code == 404


def test_list_and_filter(client):
    texts = {"racecar": True, "abc": False, "abba": True}
    for text in texts:
        client.post("/api/v1/messages", json={"text": text})

    everything = client.get("/api/v1/messages")
    assert everything.status_code == 200
    assert sorted(m["text"] for m in everything.json()) == sorted(texts)

    palindromes = client.get("/api/v1/messages", params={"palindrome": "true"}).json()
    assert sorted(m["text"] for m in palindromes) == ["abba", "racecar"]

    others = client.get("/api/v1/messages/", params={"palindrome": "FALSE"}).json()
    assert [m["text"] for m in others] == ["abc"]

    assert len(client.get("/api/v1/messages?palindrome=").json()) == 3


def test_list_empty(client):
    r = client.get("/api/v1/messages")
    assert r.status_code == 200
    assert r.json() == []


def test_list_invalid_filter_is_bad_request(client):
    assert client.get("/api/v1/messages", params={"palindrome": "maybe"}).status_code == 400
    assert client.get("/api/v1/messages", params={"palindrome": " true "}).status_code == 400


def test_delete_is_idempotent(client):
    created = client.post("/api/v1/messages", json={"text": "abc"}).json()
    first = client.delete(f"/api/v1/messages/{created['id']}")
    assert first.status_code == 204
    assert first.content == b""
    assert client.delete(f"/api/v1/messages/{created['id']}/").status_code == 204
    assert client.get(f"/api/v1/messages/{created['id']}").status_code == 404


def test_storage_failure_is_internal_error_without_detail(make_client):
    client = make_client(store=BrokenStore(), raise_server_exceptions=False)
    r = client.post("/api/v1/messages", json={"text": "abc"})
    assert r.status_code == 500
    assert "10.0.0.5" not in r.text
    assert client.get("/api/v1/messages").status_code == 500
    assert client.delete("/api/v1/messages/x").status_code == 500


def test_unexpected_failure_is_internal_error(make_client):
    client = make_client(store=BrokenStore(), raise_server_exceptions=False)
    r = client.get("/api/v1/messages/x")
    assert r.status_code == 500
    assert "unexpected" not in r.text


def test_unknown_route_and_method(client):
    assert client.get("/api/v1/unknown").status_code == 404
    assert client.put("/api/v1/messages/x", json={}).status_code == 405


def test_unexpected_failure_is_logged_once_without_traceback(make_client, caplog):
    client = make_client(store=BrokenStore(), raise_server_exceptions=False)
    with caplog.at_level(logging.ERROR, logger="palindrome_api.app.core.errors"):
        client.get("/api/v1/messages/x")
    records = [r for r in caplog.records if r.name == "palindrome_api.app.core.errors"]
    assert len(records) == 1
    assert records[0].levelno == logging.ERROR
    assert records[0].exc_info is None
