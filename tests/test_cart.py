from sqlalchemy import text


def add(client, user_id, product_id, quantity):
    response = client.post(f"/api/cart/{user_id}/items", json={"product_id": product_id, "quantity": quantity})
    assert response.status_code == 201
    return response.json()


def test_add_without_unique_constraint_creates_duplicate_rows(client):
    first = add(client, 1, "prod1", 2)
    second = add(client, 1, "prod1", 3)
    assert first["id"] != second["id"]

    cart = client.get("/api/cart/1").json()
    assert sorted(item["quantity"] for item in cart) == [2, 3]
    assert all(item["product_id"] == "prod1" for item in cart)


def test_add_with_unique_constraint_merges_quantities(client, orders_engine):
    with orders_engine.begin() as conn:
        conn.execute(text("CREATE UNIQUE INDEX ux_cart_user_product ON cart (user_id, product_id)"))

    first = add(client, 1, "prod1", 2)
    second = add(client, 1, "prod1", 3)
    add(client, 1, "prod2", 1)

    assert second["id"] == first["id"]
    assert second["quantity"] == 5
    cart = {item["product_id"]: item["quantity"] for item in client.get("/api/cart/1").json()}
    assert cart == {"prod1": 5, "prod2": 1}


def test_cart_is_scoped_to_user(client):
    add(client, 1, "prod1", 1)
    add(client, 2, "prod2", 1)
    assert [i["product_id"] for i in client.get("/api/cart/2").json()] == ["prod2"]


def test_remove_item(client):
    item = add(client, 1, "prod1", 1)

    # Another user's cart does not own the item
    assert client.delete(f"/api/cart/2/items/{item['id']}").status_code == 404

    response = client.delete(f"/api/cart/1/items/{item['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Item removed from cart"}

    response = client.delete(f"/api/cart/1/items/{item['id']}")
    assert response.status_code == 404
    assert response.text == "Cart item not found"


def test_clear_cart(client):
    add(client, 1, "prod1", 1)
    add(client, 1, "prod2", 1)
    add(client, 2, "prod3", 1)

    response = client.delete("/api/cart/1/clear")
    assert response.json() == {"message": "Cart cleared successfully"}
    assert client.get("/api/cart/1").json() == []
    assert len(client.get("/api/cart/2").json()) == 1

    # Clearing an empty cart still succeeds
    assert client.delete("/api/cart/1/clear").status_code == 200


def test_cart_is_capped_at_100(client, orders_engine):
    with orders_engine.begin() as conn:
        for n in range(101):
            conn.execute(
                text("INSERT INTO cart (user_id, product_id, quantity) VALUES (1, :p, 1)"), {"p": f"prod{n}"}
            )
    assert len(client.get("/api/cart/1").json()) == 100
