def test_create_custom_category_with_defaults(client, alice, alice_headers):
    response = client.post("/api/categories", headers=alice_headers, json={"name": "Pets"})
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Pets"
    assert data["icon"] == "circle"
    assert data["color"] == "#000000"
    assert data["type"] == "custom"
    assert data["user"] == alice["id"]


def test_create_category_with_icon_and_color(client, alice_headers):
    response = client.post(
        "/api/categories",
        headers=alice_headers,
        json={"name": "Travel", "icon": "airplane", "color": "#123ABC"}
    )
    assert response.status_code == 200
    assert response.json()["icon"] == "airplane"
    assert response.json()["color"] == "#123ABC"


def test_create_category_requires_name(client, alice_headers):
    for body in ({}, {"name": ""}, {"name": "   "}):
        response = client.post("/api/categories", headers=alice_headers, json=body)
        assert response.status_code == 400
        assert response.json() == {"message": "Please add a category name"}


def test_categories_are_private(client, alice_headers, bob_headers):
    client.post("/api/categories", headers=alice_headers, json={"name": "Pets"})

    bob_names = [c["name"] for c in client.get("/api/categories", headers=bob_headers).json()]
    assert "Pets" not in bob_names
    assert len(bob_names) == 6


def test_delete_category(client, alice_headers):
    created = client.post("/api/categories", headers=alice_headers, json={"name": "Pets"}).json()

    response = client.delete(f"/api/categories/{created['id']}", headers=alice_headers)
    assert response.status_code == 200
    assert response.json() == {"id": created["id"]}

    names = [c["name"] for c in client.get("/api/categories", headers=alice_headers).json()]
    assert "Pets" not in names


def test_delete_missing_category(client, alice_headers):
    response = client.delete("/api/categories/9999", headers=alice_headers)
    assert response.status_code == 404
    assert response.json() == {"message": "Category not found"}


def test_delete_other_users_category(client, alice_headers, bob_headers):
    bob_category = client.get("/api/categories", headers=bob_headers).json()[0]

    response = client.delete(f"/api/categories/{bob_category['id']}", headers=alice_headers)
    assert response.status_code == 401
    assert response.json() == {"message": "User not authorized"}

    assert len(client.get("/api/categories", headers=bob_headers).json()) == 6


def test_categories_require_token(client):
    assert client.get("/api/categories").status_code == 401
