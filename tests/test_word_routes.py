"""Word endpoint tests."""

from fastapi.testclient import TestClient


def _add_word(client: TestClient, baby_id: int, word: str, day: str, category=None, user_id="user-1"):
    return client.post(
        "/api/words",
        json={
            "word": word,
            "date": day,
            "babyId": baby_id,
            "category": category,
            "userId": user_id,
        },
    )


def test_create_word(client: TestClient, baby_id: int) -> None:
    response = _add_word(client, baby_id, "mama", "2025-01-01", "family")
    assert response.status_code == 200
    assert isinstance(response.json()["id"], int)


def test_create_word_missing_fields(client: TestClient, baby_id: int) -> None:
    response = client.post("/api/words", json={"babyId": baby_id, "userId": "user-1"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields: word, date"


def test_create_word_for_other_users_baby(client: TestClient, baby_id: int) -> None:
    response = _add_word(client, baby_id, "mama", "2025-01-01", user_id="user-2")
    assert response.status_code == 403


def test_create_word_rejects_bad_date(client: TestClient, baby_id: int) -> None:
    response = _add_word(client, baby_id, "mama", "yesterday")
    assert response.status_code == 422


def test_list_words(client: TestClient, baby_id: int) -> None:
    _add_word(client, baby_id, "cat", "2025-01-02", "animal")
    _add_word(client, baby_id, "mama", "2025-01-01", "family")

    response = client.get(f"/api/words/{baby_id}", params={"userId": "user-1"})
    assert response.status_code == 200
    data = response.json()
    assert [w["word"] for w in data] == ["mama", "cat"]
    assert set(data[0]) == {"id", "word", "date", "category"}
    assert data[0]["date"] == "2025-01-01"


def test_list_words_filters(client: TestClient, baby_id: int) -> None:
    _add_word(client, baby_id, "mama", "2025-01-01", "family")
    _add_word(client, baby_id, "cat", "2025-01-02", "animal")
    _add_word(client, baby_id, "dog", "2025-01-05", "animal")

    response = client.get(
        f"/api/words/{baby_id}",
        params={"userId": "user-1", "from": "2025-01-02", "category": "animal"},
    )
    assert [w["word"] for w in response.json()] == ["cat", "dog"]

    response = client.get(f"/api/words/{baby_id}", params={"userId": "user-1", "to": "2025-01-01"})
    assert [w["word"] for w in response.json()] == ["mama"]


def test_list_words_unauthorized(client: TestClient, baby_id: int) -> None:
    response = client.get(f"/api/words/{baby_id}", params={"userId": "user-2"})
    assert response.status_code == 403
    assert response.json()["detail"] == "Unauthorized access"


def test_update_category(client: TestClient, baby_id: int) -> None:
    word_id = _add_word(client, baby_id, "mama", "2025-01-01").json()["id"]

    response = client.patch(f"/api/words/{word_id}", params={"userId": "user-1"}, json={"category": "family"})
    assert response.status_code == 200
    assert response.json() == {"message": "Category updated"}

    words = client.get(f"/api/words/{baby_id}", params={"userId": "user-1"}).json()
    assert words[0]["category"] == "family"


def test_update_category_of_other_users_word(client: TestClient, baby_id: int) -> None:
    word_id = _add_word(client, baby_id, "mama", "2025-01-01").json()["id"]
    response = client.patch(f"/api/words/{word_id}", params={"userId": "user-2"}, json={"category": "food"})
    assert response.status_code == 404


def test_delete_word(client: TestClient, baby_id: int) -> None:
    word_id = _add_word(client, baby_id, "mama", "2025-01-01").json()["id"]

    assert client.delete(f"/api/words/{word_id}", params={"userId": "user-2"}).status_code == 403

    response = client.delete(f"/api/words/{word_id}", params={"userId": "user-1"})
    assert response.status_code == 200
    assert response.json() == {"message": "Word deleted"}
    assert client.get(f"/api/words/{baby_id}", params={"userId": "user-1"}).json() == []


def test_empty_category_is_stored_as_none(client: TestClient, baby_id: int) -> None:
    word_id = _add_word(client, baby_id, "mama", "2025-01-01", "").json()["id"]
    client.patch(f"/api/words/{word_id}", params={"userId": "user-1"}, json={"category": ""})
    _add_word(client, baby_id, "cat", "2025-01-02", "")

    words = client.get(f"/api/words/{baby_id}", params={"userId": "user-1"}).json()
    assert [w["category"] for w in words] == [None, None]
