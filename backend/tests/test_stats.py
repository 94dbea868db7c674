import pytest


def test_inventory_stats_empty(client):
    r = client.get("/api/stats/inventory")
    assert r.status_code == 200
    assert r.json()["data"] == {
        "totalCategories": 0,
        "totalParts": 0,
        "totalValue": 0.0,
        "lowStockParts": [],
        "fastMovingParts": [],
        "topCategories": [],
    }


def test_inventory_stats_totals(client, make_category, make_part):
    tools = make_category("Tools")
    belts = make_category("Belts")
    make_category("Empty")

    make_part(tools["id"], initialStock=10, unitPrice=2.5, minimumStock=5)    # 25.00
    low = make_part(tools["id"], initialStock=3, unitPrice=1.2, minimumStock=5)  # 3.60, low
    belt = make_part(belts["id"], initialStock=4, unitPrice=10, minimumStock=4)  # 40.00, low (boundary)

    client.post("/api/transactions", json={"partId": belt["id"], "type": "OUT", "quantity": 2})  # 20.00

    data = client.get("/api/stats/inventory").json()["data"]
    assert data["totalCategories"] == 3
    assert data["totalParts"] == 3
    assert data["totalValue"] == pytest.approx(25 + 3.6 + 20)
    assert sorted(p["id"] for p in data["lowStockParts"]) == sorted([low["id"], belt["id"]])
    assert [f["partId"] for f in data["fastMovingParts"]] == [belt["id"]]
    assert [c["categoryName"] for c in data["topCategories"]] == ["Tools", "Belts", "Empty"]


def test_inventory_stats_keeps_top_five(client, make_category, make_part):
    cats = [make_category() for _ in range(7)]
    for c in cats:
        p = make_part(c["id"], initialStock=50)
        client.post("/api/transactions", json={"partId": p["id"], "type": "OUT", "quantity": 1})

    data = client.get("/api/stats/inventory").json()["data"]
    assert len(data["fastMovingParts"]) == 5
    assert len(data["topCategories"]) == 5
    assert data["totalCategories"] == 7


def test_category_stats(client, make_category, make_part):
    a = make_category("Alpha")
    b = make_category("Beta")
    empty = make_category("Gamma")

    make_part(a["id"], initialStock=2, unitPrice=3, minimumStock=0)
    make_part(b["id"], initialStock=1, unitPrice=5, minimumStock=1)
    make_part(b["id"], initialStock=4, unitPrice=0.5, minimumStock=10)

    r = client.get("/api/stats/categories")
    assert r.status_code == 200
    rows = r.json()["data"]
    assert [row["categoryId"] for row in rows] == [b["id"], a["id"], empty["id"]]

    beta, alpha, gamma = rows
    assert beta == {"categoryId": b["id"], "categoryName": "Beta", "partCount": 2,
                    "totalValue": pytest.approx(5 + 2), "lowStockCount": 2}
    assert alpha["partCount"] == 1
    assert alpha["totalValue"] == pytest.approx(6)
    assert alpha["lowStockCount"] == 0
    assert gamma == {"categoryId": empty["id"], "categoryName": "Gamma", "partCount": 0,
                     "totalValue": 0.0, "lowStockCount": 0}


def test_category_value_is_sum_of_stock_times_price(client, make_category, make_part):
    c = make_category()
    make_part(c["id"], initialStock=10, unitPrice=1)
    make_part(c["id"], initialStock=1, unitPrice=10)

    row = client.get("/api/stats/categories").json()["data"][0]
    # 10*1 + 1*10, not (10+1) * (1+10)
    assert row["totalValue"] == pytest.approx(20)
