# File: tests/test_products.py

import pytest

from storefront.schemas.product import MAX_SAFE_INTEGER

MISSING = "Please provide all the required parameters."
NOT_NUMBERS = "Price and quantity must be valid numbers."


def test_list_products_empty(client):
    resp = client.get("/products")
    assert resp.status_code == 404
    assert resp.json() == {"error": "No Products found"}


def test_list_products_after_create(client, created_product):
    resp = client.get("/products")
    assert resp.status_code == 200
    data = resp.json()
    assert data["total"] == 1
    assert len(data["allProducts"]) == 1
    assert data["allProducts"][0]["id"] == created_product["id"]


def test_create_product(client):
    resp = client.post(
        "/product",
        json={"name": "Mouse", "price": 49.99, "quantity": 100, "image": "mouse.png"},
    )
    assert resp.status_code == 201
    product = resp.json()["newProduct"]
    assert product["id"]
    assert product["name"] == "Mouse"
    assert product["price"] == 49.99
    assert product["quantity"] == 100
    assert product["image"] == "mouse.png"


def test_create_product_missing_field(client):
    resp = client.post("/product", json={"name": "Mouse", "price": 10, "quantity": 1})
    assert resp.status_code == 400
    assert resp.json() == {"error": MISSING}


def test_create_product_non_numeric_price(client):
    resp = client.post(
        "/product",
        json={"name": "Mouse", "price": "free", "quantity": 1, "image": "mouse.png"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": NOT_NUMBERS}
    assert NOT_NUMBERS != MISSING


def test_create_product_rejects_numeric_strings_and_booleans(client):
    for price, quantity in (("10", 1), (10, "3"), (True, 1), (10, False)):
        resp = client.post(
            "/product",
            json={"name": "Mouse", "price": price, "quantity": quantity, "image": "m.png"},
        )
        assert resp.status_code == 400, (price, quantity)
        assert resp.json() == {"error": NOT_NUMBERS}


def test_create_product_fractional_quantity(client):
    resp = client.post(
        "/product",
        json={"name": "Cable", "price": 10, "quantity": 2.5, "image": "cable.png"},
    )
    assert resp.status_code == 201
    product = resp.json()["newProduct"]
    assert product["quantity"] == 2.5
    assert product["price"] == 10


def test_numbers_come_back_as_sent(client, created_product):
    resp = client.get(f"/product/{created_product['id']}")
    assert resp.status_code == 200
    # 3500 is returned as an integer, not 3500.0
    assert isinstance(resp.json()["product"]["price"], int)
    assert isinstance(resp.json()["product"]["quantity"], int)


def _post_raw(client, raw_price, raw_quantity="1"):
    body = (
        '{"name": "X", "price": ' + raw_price + ', "quantity": ' + raw_quantity
        + ', "image": "x.png"}'
    )
    return client.post(
        "/product",
        content=body.encode(),
        headers={"Content-Type": "application/json"},
    )


@pytest.mark.parametrize("raw_price", ["1e400", "-1e400", "NaN", "Infinity"])
def test_create_product_rejects_non_finite_price(client, raw_price):
    resp = _post_raw(client, raw_price)
    assert resp.status_code == 400
    assert resp.json() == {"error": NOT_NUMBERS}
    assert client.get("/products").status_code == 404


def test_create_product_rejects_integers_out_of_range(client):
    resp = _post_raw(client, "1", raw_quantity="18446744073709551616")
    assert resp.status_code == 400
    assert resp.json() == {"error": NOT_NUMBERS}

    resp = _post_raw(client, str(MAX_SAFE_INTEGER + 1))
    assert resp.status_code == 400
    assert resp.json() == {"error": NOT_NUMBERS}


def test_create_product_accepts_largest_safe_integer(client):
    resp = _post_raw(client, str(MAX_SAFE_INTEGER))
    assert resp.status_code == 201
    assert resp.json()["newProduct"]["price"] == MAX_SAFE_INTEGER


def test_update_product_rejects_non_finite_price(client, created_product):
    resp = client.put(
        f"/product/{created_product['id']}",
        content=b'{"price": NaN}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": NOT_NUMBERS}


def test_create_product_zero_values_are_present(client):
    resp = client.post(
        "/product",
        json={"name": "Sample", "price": 0, "quantity": 0, "image": "s.png"},
    )
    assert resp.status_code == 201


def test_get_product(client, created_product):
    resp = client.get(f"/product/{created_product['id']}")
    assert resp.status_code == 200
    product = resp.json()["product"]
    assert product["name"] == created_product["name"]
    assert product["price"] == created_product["price"]


def test_get_unknown_product(client):
    resp = client.get("/product/missing")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product does not exist"}


def test_update_product_partial(client, created_product):
    resp = client.put(f"/product/{created_product['id']}", json={"price": 3000})
    assert resp.status_code == 200
    updated = resp.json()["updatedProduct"]
    assert updated["price"] == 3000
    assert updated["name"] == created_product["name"]
    assert updated["quantity"] == created_product["quantity"]
    assert updated["image"] == created_product["image"]


def test_update_product_empty_body_keeps_record(client, created_product):
    resp = client.put(f"/product/{created_product['id']}", json={})
    assert resp.status_code == 200
    assert resp.json()["updatedProduct"]["name"] == created_product["name"]


def test_update_product_checks_types(client, created_product):
    resp = client.put(f"/product/{created_product['id']}", json={"quantity": "lots"})
    assert resp.status_code == 400
    assert resp.json() == {"error": NOT_NUMBERS}


def test_update_product_ignores_id_in_body(client, created_product):
    resp = client.put(
        f"/product/{created_product['id']}",
        json={"id": "something-else", "name": "Renamed"},
    )
    assert resp.status_code == 200
    assert resp.json()["updatedProduct"]["id"] == created_product["id"]
    assert resp.json()["updatedProduct"]["name"] == "Renamed"


def test_update_unknown_product(client):
    resp = client.put("/product/missing", json={"name": "x"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product does not exist.."}


def test_delete_product(client, created_product):
    resp = client.delete(f"/product/{created_product['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"msg": "Product deleted.."}

    resp = client.delete(f"/product/{created_product['id']}")
    assert resp.status_code == 404
    assert resp.json() == {"error": f"No Product with ID {created_product['id']}"}

    assert client.get("/products").status_code == 404
