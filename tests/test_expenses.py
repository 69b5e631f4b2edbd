import pytest


@pytest.fixture
def alice_categories(client, alice_headers):
    return {c["name"]: c["id"] for c in client.get("/api/categories", headers=alice_headers).json()}


def add_expense(client, headers, **fields):
    response = client.post("/api/expenses", headers=headers, json=fields)
    assert response.status_code == 200, response.text
    return response.json()


# =============================================================================
# Creation and category name snapshot
# =============================================================================

def test_create_expense_takes_category_name(client, alice, alice_headers, alice_categories):
    expense = add_expense(
        client, alice_headers,
        title="Groceries", amount=45.5, category=alice_categories["Food"], description="Weekly shop"
    )
    assert expense["categoryName"] == "Food"
    assert expense["category"] == alice_categories["Food"]
    assert expense["amount"] == 45.5
    assert expense["description"] == "Weekly shop"
    assert expense["user"] == alice["id"]
    assert expense["date"]


def test_create_expense_with_unknown_category(client, alice_headers):
    expense = add_expense(client, alice_headers, title="Mystery", amount=3, category=9999)
    assert expense["categoryName"] == "Uncategorized"
    assert expense["category"] == 9999


def test_create_expense_with_other_users_category(client, alice_headers, bob_headers):
    bob_food = client.get("/api/categories", headers=bob_headers).json()[0]["id"]
    expense = add_expense(client, alice_headers, title="Sneaky", amount=3, category=bob_food)
    assert expense["categoryName"] == "Uncategorized"


def test_create_expense_explicit_category_name(client, alice_headers, alice_categories):
    expense = add_expense(
        client, alice_headers,
        title="Dinner", amount=30, category=alice_categories["Food"], categoryName="Eating out"
    )
    assert expense["categoryName"] == "Eating out"


def test_create_expense_with_date(client, alice_headers, alice_categories):
    expense = add_expense(
        client, alice_headers,
        title="Rent", amount=800, category=alice_categories["Housing"], date="2024-05-01T09:30:00"
    )
    assert expense["date"] == "2024-05-01T09:30:00"


@pytest.mark.parametrize("body", [
    {"amount": 10, "category": 1},
    {"title": "No amount", "category": 1},
    {"title": "No category", "amount": 10},
    {"title": "", "amount": 10, "category": 1},
])
def test_create_expense_missing_fields(client, alice_headers, body):
    response = client.post("/api/expenses", headers=alice_headers, json=body)
    assert response.status_code == 400
    assert "message" in response.json()


# =============================================================================
# Listing
# =============================================================================

def test_list_expenses_newest_first(client, alice_headers, bob_headers, alice_categories):
    add_expense(client, alice_headers, title="Old", amount=1, category=alice_categories["Food"], date="2024-01-01T00:00:00")
    add_expense(client, alice_headers, title="New", amount=2, category=alice_categories["Food"], date="2024-03-01T00:00:00")
    add_expense(client, alice_headers, title="Middle", amount=3, category=alice_categories["Food"], date="2024-02-01T00:00:00")
    bob_food = client.get("/api/categories", headers=bob_headers).json()[0]["id"]
    add_expense(client, bob_headers, title="Bob's", amount=4, category=bob_food)

    titles = [e["title"] for e in client.get("/api/expenses", headers=alice_headers).json()]
    assert titles == ["New", "Middle", "Old"]


def test_list_expenses_filtered_by_category(client, alice_headers, alice_categories):
    add_expense(client, alice_headers, title="Lunch", amount=1, category=alice_categories["Food"])
    add_expense(client, alice_headers, title="Taxi", amount=2, category=alice_categories["Transport"])

    response = client.get(
        "/api/expenses", headers=alice_headers, params={"category": alice_categories["Transport"]}
    )
    assert [e["title"] for e in response.json()] == ["Taxi"]


# =============================================================================
# Category deletion leaves expenses alone
# =============================================================================

def test_deleting_category_keeps_expense_name(client, alice_headers):
    pets = client.post("/api/categories", headers=alice_headers, json={"name": "Pets"}).json()
    expense = add_expense(client, alice_headers, title="Vet", amount=60, category=pets["id"])

    client.delete(f"/api/categories/{pets['id']}", headers=alice_headers)

    expenses = client.get("/api/expenses", headers=alice_headers).json()
    assert len(expenses) == 1
    assert expenses[0]["id"] == expense["id"]
    assert expenses[0]["categoryName"] == "Pets"
    assert expenses[0]["category"] == pets["id"]

    stats = client.get("/api/expenses/stats", headers=alice_headers).json()
    assert stats["categoryStats"] == {"Pets": 60}


# =============================================================================
# Updates
# =============================================================================

def test_update_expense_partial(client, alice_headers, alice_categories):
    expense = add_expense(
        client, alice_headers, title="Lunch", amount=12, category=alice_categories["Food"], description="Cafe"
    )
    response = client.put(f"/api/expenses/{expense['id']}", headers=alice_headers, json={"amount": 15})
    assert response.status_code == 200
    updated = response.json()
    assert updated["amount"] == 15
    assert updated["title"] == "Lunch"
    assert updated["description"] == "Cafe"
    assert updated["categoryName"] == "Food"


def test_update_expense_new_category_renames(client, alice_headers, alice_categories):
    expense = add_expense(client, alice_headers, title="Bus", amount=2, category=alice_categories["Food"])
    response = client.put(
        f"/api/expenses/{expense['id']}",
        headers=alice_headers,
        json={"category": alice_categories["Transport"]}
    )
    assert response.json()["categoryName"] == "Transport"
    assert response.json()["category"] == alice_categories["Transport"]


def test_update_expense_unresolved_category_keeps_name(client, alice_headers, alice_categories):
    expense = add_expense(client, alice_headers, title="Bus", amount=2, category=alice_categories["Transport"])
    response = client.put(f"/api/expenses/{expense['id']}", headers=alice_headers, json={"category": 9999})
    assert response.status_code == 200
    assert response.json()["categoryName"] == "Transport"
    assert response.json()["category"] == 9999


def test_update_missing_expense(client, alice_headers):
    response = client.put("/api/expenses/9999", headers=alice_headers, json={"amount": 1})
    assert response.status_code == 404
    assert response.json() == {"message": "Expense not found"}


# =============================================================================
# Ownership
# =============================================================================

def test_other_user_cannot_touch_expense(client, alice_headers, bob_headers, alice_categories):
    expense = add_expense(client, alice_headers, title="Mine", amount=5, category=alice_categories["Food"])

    update = client.put(f"/api/expenses/{expense['id']}", headers=bob_headers, json={"amount": 1})
    assert update.status_code == 401
    assert update.json() == {"message": "User not authorized"}

    delete = client.delete(f"/api/expenses/{expense['id']}", headers=bob_headers)
    assert delete.status_code == 401

    assert client.get("/api/expenses", headers=bob_headers).json() == []
    remaining = client.get("/api/expenses", headers=alice_headers).json()
    assert remaining[0]["amount"] == 5


def test_delete_expense(client, alice_headers, alice_categories):
    expense = add_expense(client, alice_headers, title="Mine", amount=5, category=alice_categories["Food"])
    response = client.delete(f"/api/expenses/{expense['id']}", headers=alice_headers)
    assert response.status_code == 200
    assert response.json() == {"id": expense["id"]}
    assert client.get("/api/expenses", headers=alice_headers).json() == []

    again = client.delete(f"/api/expenses/{expense['id']}", headers=alice_headers)
    assert again.status_code == 404


# =============================================================================
# Statistics
# =============================================================================

def test_stats_empty(client, alice_headers):
    response = client.get("/api/expenses/stats", headers=alice_headers)
    assert response.status_code == 200
    assert response.json() == {"totalAmount": 0, "categoryStats": {}, "count": 0}


def test_stats(client, alice_headers, bob_headers, alice_categories):
    add_expense(client, alice_headers, title="a", amount=10, category=alice_categories["Food"])
    add_expense(client, alice_headers, title="b", amount=5, category=alice_categories["Food"])
    add_expense(client, alice_headers, title="c", amount=7, category=alice_categories["Transport"])
    bob_food = client.get("/api/categories", headers=bob_headers).json()[0]["id"]
    add_expense(client, bob_headers, title="d", amount=100, category=bob_food)

    response = client.get("/api/expenses/stats", headers=alice_headers)
    assert response.json() == {"totalAmount": 22, "categoryStats": {"Food": 15, "Transport": 7}, "count": 3}


def test_out_of_range_category_id_is_bad_request(client, alice_headers, alice_categories):
    huge = 10 ** 20
    response = client.post(
        "/api/expenses",
        headers=alice_headers,
        json={"title": "Lunch", "amount": 10, "category": huge}
    )
    assert response.status_code == 400

    expense = add_expense(client, alice_headers, title="Lunch", amount=10, category=alice_categories["Food"])
    response = client.put(f"/api/expenses/{expense['id']}", headers=alice_headers, json={"category": huge})
    assert response.status_code == 400

    response = client.get("/api/expenses", headers=alice_headers, params={"category": huge})
    assert response.status_code == 400
