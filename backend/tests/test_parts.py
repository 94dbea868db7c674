import pytest

from inventory.domain.errors import MissingReferenceError
from inventory.models import Part, StockTransaction
from inventory.repositories.category_repository import CategoryRepository
from inventory.schemas.part import PartCreate
from inventory.services.part_service import PartService


def test_create_part_with_initial_stock_seeds_one_in_transaction(client, make_category):
    cat = make_category("Bearings")
    r = client.post("/api/parts", json={
        "name": "Ball bearing 6204",
        "partNumber": "BRG-6204",
        "categoryId": cat["id"],
        "unitPrice": 4.8,
        "initialStock": 100,
        "minimumStock": 10,
        "location": "A-1",
    })
    assert r.status_code == 201
    part = r.json()["data"]
    assert part["currentStock"] == 100
    assert part["categoryName"] == "Bearings"
    assert part["unitPrice"] == 4.8

    txns = client.get(f"/api/transactions/part/{part['id']}").json()["data"]
    assert len(txns) == 1
    t = txns[0]
    assert t["type"] == "IN"
    assert t["quantity"] == 100
    assert t["reason"] == "Initial stock"
    assert t["totalAmount"] == 480.0
    assert t["isPaid"] is True
    assert t["amountPaid"] == 480.0


def test_create_part_without_stock_has_no_transactions(client, make_part):
    part = make_part(initialStock=0)
    assert part["currentStock"] == 0
    assert client.get(f"/api/transactions/part/{part['id']}").json()["data"] == []


def test_create_part_unknown_category_is_400(client):
    r = client.post("/api/parts", json={
        "name": "Orphan", "partNumber": "ORPH-1", "categoryId": 999, "unitPrice": 1, "initialStock": 5,
    })
    assert r.status_code == 400
    assert r.json()["error"] == "Category with id 999 not found"
    assert client.get("/api/parts").json()["data"] == []
    assert client.get("/api/transactions").json()["data"] == []


def test_duplicate_part_number_is_400_and_nothing_written(client, make_part):
    first = make_part(partNumber="DUP-1", initialStock=3)
    r = client.post("/api/parts", json={
        "name": "Other", "partNumber": "DUP-1", "categoryId": first["categoryId"],
        "unitPrice": 1, "initialStock": 7,
    })
    assert r.status_code == 400
    assert len(client.get("/api/parts").json()["data"]) == 1
    assert len(client.get("/api/transactions").json()["data"]) == 1


def test_negative_price_or_stock_is_400(client, make_category):
    cat = make_category()
    base = {"name": "x", "partNumber": "NEG-1", "categoryId": cat["id"], "unitPrice": 1, "initialStock": 1}
    assert client.post("/api/parts", json={**base, "unitPrice": -1}).status_code == 400
    assert client.post("/api/parts", json={**base, "initialStock": -3}).status_code == 400


def test_get_part_and_not_found(client, make_part):
    part = make_part()
    r = client.get(f"/api/parts/{part['id']}")
    assert r.status_code == 200
    assert r.json()["data"]["partNumber"] == part["partNumber"]
    assert client.get("/api/parts/4242").status_code == 404
    assert client.get("/api/parts/not-a-number").status_code == 400


def test_partial_update_keeps_unset_fields_and_stock(client, make_part):
    part = make_part(initialStock=12, minimumStock=3, location="B-1", supplier="Acme")
    r = client.put(f"/api/parts/{part['id']}", json={"unitPrice": 9.99, "location": None, "minimumStock": 20})
    assert r.status_code == 200
    upd = r.json()["data"]
    assert upd["unitPrice"] == 9.99
    assert upd["minimumStock"] == 20
    assert upd["location"] == "B-1"      # null means "leave as is"
    assert upd["supplier"] == "Acme"
    assert upd["name"] == part["name"]
    assert upd["currentStock"] == 12


def test_update_missing_part_is_404(client):
    assert client.put("/api/parts/77", json={"name": "x"}).status_code == 404


def test_delete_part(client, make_part):
    part = make_part(initialStock=0)
    r = client.delete(f"/api/parts/{part['id']}")
    assert r.status_code == 200
    assert r.json()["data"] is True
    assert client.get(f"/api/parts/{part['id']}").status_code == 404
    assert client.delete(f"/api/parts/{part['id']}").status_code == 404


def test_part_with_transactions_cannot_be_deleted(client, make_part):
    part = make_part(initialStock=5)
    assert client.delete(f"/api/parts/{part['id']}").status_code == 400
    assert client.get(f"/api/parts/{part['id']}").status_code == 200


def test_low_stock_is_boundary_inclusive(client, make_category, make_part):
    cat = make_category()
    below = make_part(cat["id"], initialStock=5, minimumStock=10)
    equal = make_part(cat["id"], initialStock=10, minimumStock=10)
    above = make_part(cat["id"], initialStock=11, minimumStock=10)

    r = client.get("/api/parts/low-stock")
    assert r.status_code == 200
    ids = {p["id"] for p in r.json()["data"]}
    assert below["id"] in ids
    assert equal["id"] in ids
    assert above["id"] not in ids


def test_search_pagination(client, make_category, make_part):
    cat = make_category()
    for i in range(45):
        make_part(cat["id"], name=f"Gasket {i}", partNumber=f"GSK-{i:03d}")
    make_part(cat["id"], name="Valve", partNumber="VLV-1")

    r = client.post("/api/parts/search", json={"query": "gasket", "page": 2, "limit": 20})
    assert r.status_code == 200
    page = r.json()["data"]
    assert len(page["data"]) == 20
    assert page["total"] == 45
    assert page["totalPages"] == 3
    assert page["page"] == 2
    assert page["limit"] == 20

    last = client.post("/api/parts/search", json={"query": "gasket", "page": 3, "limit": 20}).json()["data"]
    assert len(last["data"]) == 5


def test_search_matches_part_number_and_description(client, make_category, make_part):
    cat = make_category()
    a = make_part(cat["id"], name="Hex bolt", partNumber="FST-M8")
    b = make_part(cat["id"], name="Nut", partNumber="N-1", description="fits the m8 bolt")
    make_part(cat["id"], name="Washer", partNumber="W-1")

    found = client.post("/api/parts/search", json={"query": "M8"}).json()["data"]
    assert {p["id"] for p in found["data"]} == {a["id"], b["id"]}
    assert found["page"] == 1
    assert found["limit"] == 20


def test_search_category_and_low_stock_filters(client, make_category, make_part):
    c1, c2 = make_category(), make_category()
    low = make_part(c1["id"], initialStock=1, minimumStock=5)
    make_part(c1["id"], initialStock=50, minimumStock=5)
    make_part(c2["id"], initialStock=1, minimumStock=5)

    r = client.post("/api/parts/search", json={"categoryId": c1["id"], "lowStock": True})
    page = r.json()["data"]
    assert [p["id"] for p in page["data"]] == [low["id"]]
    assert page["total"] == 1
    assert page["totalPages"] == 1


def test_search_empty_result_has_zero_pages(client):
    page = client.post("/api/parts/search", json={"query": "nothing"}).json()["data"]
    assert page == {"data": [], "page": 1, "limit": 20, "total": 0, "totalPages": 0}


def test_search_rejects_bad_paging(client):
    assert client.post("/api/parts/search", json={"page": 0}).status_code == 400
    assert client.post("/api/parts/search", json={"limit": 0}).status_code == 400


@pytest.mark.parametrize("query", ["%", "_"])
def test_search_treats_like_wildcards_literally(client, make_category, make_part, query):
    cat = make_category()
    make_part(cat["id"], name="Gasket", partNumber="GSK-1")
    make_part(cat["id"], name="Valve", partNumber="VLV-1")

    page = client.post("/api/parts/search", json={"query": query}).json()["data"]
    assert page["total"] == 0
    assert page["data"] == []


def test_search_matches_literal_underscore_only(client, make_category, make_part):
    cat = make_category()
    wanted = make_part(cat["id"], name="Seal", partNumber="A_1")
    make_part(cat["id"], name="Shim", partNumber="AX1")

    page = client.post("/api/parts/search", json={"query": "a_1"}).json()["data"]
    assert [p["id"] for p in page["data"]] == [wanted["id"]]


def test_create_part_reports_missing_category_on_insert_failure(db_session):
    class StaleCategories(CategoryRepository):
        # present at check time, gone by the time the row is inserted
        checked = False

        def get(self, category_id):
            if not self.checked:
                self.checked = True
                return object()
            return super().get(category_id)

    svc = PartService(db_session, categories=StaleCategories(db_session))
    with pytest.raises(MissingReferenceError) as exc:
        svc.create_part(PartCreate(name="Orphan", partNumber="ORPH-1", categoryId=404, unitPrice=1, initialStock=2))

    assert str(exc.value) == "Category with id 404 not found"
    assert db_session.query(Part).count() == 0
    assert db_session.query(StockTransaction).count() == 0
