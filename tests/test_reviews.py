from bson import ObjectId


def create_review(client, product_id="prod1", rating=5):
    response = client.post("/api/reviews", json={
        "product_id": product_id, "user_id": 1, "rating": rating, "comment": "Great product!",
    })
    assert response.status_code == 201
    return response.json()


def test_new_review_starts_with_zero_helpful(client):
    review = create_review(client)
    assert review["helpful"] == 0
    assert ObjectId.is_valid(review["id"])


def test_helpful_increments_once_per_call(client):
    review = create_review(client)
    for _ in range(2):
        response = client.post(f"/api/reviews/{review['id']}/helpful")
        assert response.json() == {"message": "Review marked as helpful"}

    reviews = client.get("/api/reviews/product/prod1").json()
    assert reviews[0]["helpful"] == 2


def test_helpful_on_missing_or_invalid_review(client):
    assert client.post(f"/api/reviews/{ObjectId()}/helpful").status_code == 404
    response = client.post("/api/reviews/bad/helpful")
    assert response.status_code == 400
    assert response.text == "Invalid review ID"


def test_reviews_listed_per_product(client):
    create_review(client, "prod1")
    create_review(client, "prod1", rating=3)
    create_review(client, "prod2")
    assert sorted(r["rating"] for r in client.get("/api/reviews/product/prod1").json()) == [3, 5]


def test_delete_review(client):
    review = create_review(client)
    response = client.delete(f"/api/reviews/{review['id']}")
    assert response.json() == {"message": "Review deleted successfully"}

    response = client.delete(f"/api/reviews/{review['id']}")
    assert response.status_code == 404
    assert response.text == "Review not found"


def test_wishlist_add_get_remove(client):
    response = client.post("/api/wishlist/7/items", json={"product_id": "prod1"})
    assert response.status_code == 201
    item = response.json()
    assert (item["user_id"], item["product_id"]) == (7, "prod1")
    assert item["added_at"] is not None

    client.post("/api/wishlist/8/items", json={"product_id": "prod2"})
    assert [i["product_id"] for i in client.get("/api/wishlist/7").json()] == ["prod1"]

    response = client.delete("/api/wishlist/7/items/prod1")
    assert response.json() == {"message": "Item removed from wishlist"}
    assert client.get("/api/wishlist/7").json() == []

    response = client.delete("/api/wishlist/7/items/prod1")
    assert response.status_code == 404
    assert response.text == "Wishlist item not found"


def test_wishlist_does_not_enforce_uniqueness(client):
    client.post("/api/wishlist/7/items", json={"product_id": "prod1"})
    client.post("/api/wishlist/7/items", json={"product_id": "prod1"})
    assert len(client.get("/api/wishlist/7").json()) == 2


def test_review_and_wishlist_lists_are_capped_at_100(client, document_store):
    for _ in range(101):
        document_store.db["reviews"].docs.append(
            {"_id": ObjectId(), "product_id": "prod1", "user_id": 1, "rating": 4, "helpful": 0}
        )
        document_store.db["wishlist"].docs.append({"_id": ObjectId(), "user_id": 7, "product_id": "prod1"})

    assert len(client.get("/api/reviews/product/prod1").json()) == 100
    assert len(client.get("/api/wishlist/7").json()) == 100
