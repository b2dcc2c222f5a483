def test_list_companies(client, test_company, test_invoice):
    resp = client.get("/companies")
    assert resp.status_code == 200
    assert resp.json() == {
        "companies": [{"code": test_company["code"], "name": test_company["name"]}]
    }


def test_list_companies_empty(client):
    resp = client.get("/companies")
    assert resp.status_code == 200
    assert resp.json() == {"companies": []}


def test_get_company_ok(client, test_company, test_invoice):
    resp = client.get(f"/companies/{test_company['code']}")
    assert resp.status_code == 200
    assert resp.json() == {
        "company": {
            "code": test_company["code"],
            "name": test_company["name"],
            "description": test_company["description"],
            "invoices": [test_invoice["id"]],
        }
    }


def test_get_company_lists_only_its_invoices_in_order(client, test_company, test_invoice):
    client.post("/companies", json={"code": "other", "name": "Other Co"})
    other = client.post("/invoices", json={"comp_code": "other", "amt": 5}).json()["invoice"]
    second = client.post("/invoices", json={"comp_code": "test", "amt": 7}).json()["invoice"]

    invoices = client.get("/companies/test").json()["company"]["invoices"]
    assert invoices == [test_invoice["id"], second["id"]]
    assert other["id"] not in invoices


def test_get_company_not_found(client):
    resp = client.get("/companies/0")
    assert resp.status_code == 404

    data = resp.json()
    assert data["message"] == "Company Not Found"
    assert data["error"] == {"code": "NOT_FOUND", "status": 404, "message": "Company Not Found"}


def test_create_then_get_company(client):
    payload = {"code": "test-post", "name": "Test Post", "description": "Tests post requests"}

    resp = client.post("/companies", json=payload)
    assert resp.status_code == 201
    assert resp.json() == {"company": payload}

    resp = client.get("/companies/test-post")
    assert resp.status_code == 200
    assert resp.json() == {"company": {**payload, "invoices": []}}


def test_create_company_without_description(client):
    resp = client.post("/companies", json={"code": "bare", "name": "Bare Co"})
    assert resp.status_code == 201
    assert resp.json() == {"company": {"code": "bare", "name": "Bare Co", "description": None}}


def test_create_company_duplicate_code_is_internal_error(client, test_company):
    resp = client.post("/companies", json={"code": "test", "name": "Again"})
    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == "INTERNAL_ERROR"

    # nada mudou
    assert client.get("/companies/test").json()["company"]["name"] == "Test Company"


def test_create_company_missing_name(client):
    resp = client.post("/companies", json={"code": "nope"})
    assert resp.status_code == 422

    data = resp.json()
    assert data["error"]["code"] == "VALIDATION_ERROR"
    assert any(d["field"].endswith("name") for d in data["error"]["details"])


def test_update_company(client, test_company):
    resp = client.put(
        f"/companies/{test_company['code']}",
        json={"name": "PUT", "description": "Tests put request"},
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "company": {"code": test_company["code"], "name": "PUT", "description": "Tests put request"}
    }


def test_update_missing_company_returns_null(client):
    resp = client.put("/companies/0", json={"name": "Ghost"})
    assert resp.status_code == 200
    assert resp.json() == {"company": None}


def test_patch_company_route_does_not_exist(client, test_company):
    resp = client.patch(f"/companies/{test_company['code']}")
    assert resp.status_code == 404
    assert resp.json()["message"] == "Not Found"


def test_delete_company(client, test_company, test_invoice):
    resp = client.delete(f"/companies/{test_company['code']}")
    assert resp.status_code == 200
    assert resp.json() == {"status": "deleted"}

    assert client.get(f"/companies/{test_company['code']}").status_code == 404
    # invoices somem junto (cascade no banco)
    assert client.get(f"/invoices/{test_invoice['id']}").status_code == 404


def test_delete_missing_company(client, test_company):
    resp = client.delete("/companies/0")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"

    assert len(client.get("/companies").json()["companies"]) == 1
