"""Tests for the diary HTTP endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

from nutrilog.api.app import create_app
from nutrilog.containers import AppContainer
from nutrilog.domain.products import Product

DAY = "2024-03-12"


def _client(container: AppContainer) -> tuple[TestClient, dict[str, str]]:
    user = container.profile_service.register_user("sam@example.com", "Sam")
    return TestClient(create_app(container)), {"X-User-Id": str(user.id)}


def test_diary_requires_user_header(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    assert client.get("/api/diary").status_code == 401
    assert client.get("/api/diary", headers={"X-User-Id": "nope"}).status_code == 401


def test_get_log_creates_empty_day(container: AppContainer) -> None:
    client, headers = _client(container)

    response = client.get("/api/diary", params={"date": DAY}, headers=headers)

    assert response.status_code == 200
    log = response.json()["log"]
    assert log["date"] == DAY
    assert log["meals"]["breakfast"]["items"] == []
    assert log["totals"] == {"calories": 0, "protein": 0, "carbs": 0, "fat": 0}


def test_add_item_and_composite(
    container: AppContainer, banana: Product, whey: Product
) -> None:
    client, headers = _client(container)

    response = client.post(
        "/api/diary/add-item",
        json={
            "date": f"{DAY}T08:30:00Z",
            "mealType": "breakfast",
            "productId": str(banana.id),
            "amount": 150,
        },
        headers=headers,
    )
    assert response.status_code == 200
    item = response.json()["log"]["meals"]["breakfast"]["items"][0]
    assert item["calculatedValues"] == {
        "calories": 78,
        "protein": 0.5,
        "carbs": 21,
        "fat": 0.3,
    }

    response = client.post(
        "/api/diary/add-composite",
        json={
            "date": DAY,
            "mealType": "snack",
            "name": "Shake",
            "ingredients": [
                {"productId": str(banana.id), "amount": 150},
                {"productId": str(whey.id), "amount": 1},
            ],
        },
        headers=headers,
    )
    log = response.json()["log"]
    shake = log["meals"]["snack"]["items"][0]
    assert shake["amountConsumed"] == 151
    assert shake["calculatedValues"]["protein"] == 24.5
    assert [part["unit"] for part in shake["ingredients"]] == ["gram", "unit"]
    assert log["totals"]["calories"] == 276


def test_add_item_unknown_product_returns_404(container: AppContainer) -> None:
    client, headers = _client(container)

    response = client.post(
        "/api/diary/add-item",
        json={
            "date": DAY,
            "mealType": "lunch",
            "productId": str(uuid4()),
            "amount": 100,
        },
        headers=headers,
    )

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Product not found"}


def test_add_item_validates_payload(
    container: AppContainer, banana: Product
) -> None:
    client, headers = _client(container)

    missing_meal = client.post(
        "/api/diary/add-item",
        json={"date": DAY, "productId": str(banana.id), "amount": 100},
        headers=headers,
    )
    bad_meal = client.post(
        "/api/diary/add-item",
        json={
            "date": DAY,
            "mealType": "brunch",
            "productId": str(banana.id),
            "amount": 100,
        },
        headers=headers,
    )
    bad_date = client.post(
        "/api/diary/add-item",
        json={
            "date": "yesterday",
            "mealType": "lunch",
            "productId": str(banana.id),
            "amount": 100,
        },
        headers=headers,
    )

    assert missing_meal.status_code == 400
    assert "mealType" in missing_meal.json()["message"]
    assert bad_meal.status_code == 400
    assert bad_date.status_code == 400
    assert bad_date.json()["success"] is False


def test_update_item_accepts_number_or_object(
    container: AppContainer, banana: Product
) -> None:
    client, headers = _client(container)
    added = client.post(
        "/api/diary/add-item",
        json={
            "date": DAY,
            "mealType": "lunch",
            "productId": str(banana.id),
            "amount": 100,
        },
        headers=headers,
    )
    item_id = added.json()["log"]["meals"]["lunch"]["items"][0]["_id"]

    response = client.patch(
        f"/api/diary/item/{item_id}",
        json={"date": DAY, "mealType": "lunch", "amount": 200},
        headers=headers,
    )
    assert response.json()["log"]["totals"]["calories"] == 104

    response = client.patch(
        f"/api/diary/item/{item_id}",
        json={"date": DAY, "mealType": "lunch", "amount": {"amount": 150}},
        headers=headers,
    )
    assert response.json()["log"]["totals"]["calories"] == 78

    response = client.patch(
        f"/api/diary/item/{item_id}",
        json={"date": DAY, "mealType": "lunch"},
        headers=headers,
    )
    assert response.status_code == 400


def test_update_unknown_item_returns_404(container: AppContainer) -> None:
    client, headers = _client(container)

    response = client.patch(
        f"/api/diary/item/{uuid4()}",
        json={"date": DAY, "mealType": "dinner", "amount": 10},
        headers=headers,
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Item not found"


def test_delete_item(container: AppContainer, banana: Product) -> None:
    client, headers = _client(container)
    added = client.post(
        "/api/diary/add-item",
        json={
            "date": DAY,
            "mealType": "dinner",
            "productId": str(banana.id),
            "amount": 100,
        },
        headers=headers,
    )
    item_id = added.json()["log"]["meals"]["dinner"]["items"][0]["_id"]

    unknown = client.request(
        "DELETE",
        f"/api/diary/item/{uuid4()}",
        json={"date": DAY, "mealType": "dinner"},
        headers=headers,
    )
    assert unknown.status_code == 200
    assert unknown.json()["log"]["totals"]["calories"] == 52

    response = client.request(
        "DELETE",
        f"/api/diary/item/{item_id}",
        json={"date": DAY, "mealType": "dinner"},
        headers=headers,
    )
    assert response.json()["log"]["meals"]["dinner"]["items"] == []
    assert response.json()["log"]["totals"]["calories"] == 0


def test_mutations_require_date(container: AppContainer, banana: Product) -> None:
    client, headers = _client(container)

    added = client.post(
        "/api/diary/add-item",
        json={"mealType": "breakfast", "productId": str(banana.id), "amount": 150},
        headers=headers,
    )
    removed = client.request(
        "DELETE",
        f"/api/diary/item/{uuid4()}",
        json={"mealType": "breakfast", "date": ""},
        headers=headers,
    )

    assert added.status_code == 400
    assert added.json()["success"] is False
    assert "date" in added.json()["message"]
    assert removed.status_code == 400
    assert container.diary_service.repository.logs == {}


def test_update_with_empty_ingredients_clears_composite(
    container: AppContainer, banana: Product
) -> None:
    client, headers = _client(container)
    added = client.post(
        "/api/diary/add-composite",
        json={
            "date": DAY,
            "mealType": "snack",
            "name": "Bowl",
            "ingredients": [{"productId": str(banana.id), "amount": 100}],
        },
        headers=headers,
    )
    item_id = added.json()["log"]["meals"]["snack"]["items"][0]["_id"]

    response = client.patch(
        f"/api/diary/item/{item_id}",
        json={"date": DAY, "mealType": "snack", "amount": {"ingredients": []}},
        headers=headers,
    )

    assert response.status_code == 200
    item = response.json()["log"]["meals"]["snack"]["items"][0]
    assert item["ingredients"] == []
    assert response.json()["log"]["totals"]["calories"] == 0
