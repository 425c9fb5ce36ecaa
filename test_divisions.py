"""
Division CRUD tests
"""
from hrd_api.models import Division


def test_list_divisions_counts_only_active_employees(client, it_division, make_employee, db):
    hr = Division(name="HR", color="#ec4899", icon="people")
    db.add(hr)
    db.commit()

    make_employee(name="Andi", division_id=it_division.id)
    make_employee(name="Citra", division_id=it_division.id)
    make_employee(name="Dewi", division_id=it_division.id, status="Inactive")

    response = client.get("/api/divisions")

    assert response.status_code == 200
    data = response.json()["data"]
    assert [d["name"] for d in data] == ["IT", "HR"]
    assert data[0]["employee_count"] == 2
    assert data[1]["employee_count"] == 0
    assert data[0]["icon"] == "desktop"


def test_get_division(client, it_division, make_employee):
    make_employee(division_id=it_division.id)

    response = client.get(f"/api/divisions/{it_division.id}")

    assert response.status_code == 200
    assert response.json()["data"]["employee_count"] == 1
    assert response.json()["data"]["description"] == "Information Technology"


def test_get_missing_division_is_404(client):
    response = client.get("/api/divisions/42")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Division not found"}


def test_create_division_with_defaults(client, db):
    response = client.post("/api/divisions", json={"name": "Legal"})

    assert response.status_code == 201
    division_id = response.json()["id"]
    division = db.query(Division).filter(Division.id == division_id).first()
    assert division.color == "#3b82f6"
    assert division.icon == "business"


def test_create_division_requires_name(client, db):
    response = client.post("/api/divisions", json={"description": "No name"})

    assert response.status_code == 400
    assert response.json()["message"] == "name is required"
    assert db.query(Division).count() == 0


def test_create_duplicate_division_is_400(client, it_division):
    response = client.post("/api/divisions", json={"name": "IT"})

    assert response.status_code == 400
    assert response.json()["message"] == "Division name already exists"


def test_update_division_changes_only_sent_fields(client, it_division, db):
    response = client.put(f"/api/divisions/{it_division.id}", json={"color": "#000000"})

    assert response.status_code == 200
    db.expire_all()
    division = db.query(Division).filter(Division.id == it_division.id).first()
    assert division.color == "#000000"
    assert division.name == "IT"


def test_update_missing_division_is_404(client):
    response = client.put("/api/divisions/42", json={"name": "Ops"})

    assert response.status_code == 404


def test_delete_division_keeps_employees_listable(client, it_division, make_employee, db):
    employee = make_employee(name="Eko", division_id=it_division.id)

    response = client.delete(f"/api/divisions/{it_division.id}")
    assert response.status_code == 200
    assert db.query(Division).count() == 0

    listing = client.get("/api/employees")
    assert listing.status_code == 200
    data = listing.json()["data"]
    assert [e["id"] for e in data] == [employee.id]
    assert data[0]["division_name"] is None
    assert data[0]["division_color"] is None


def test_delete_missing_division_is_404(client):
    response = client.delete("/api/divisions/42")

    assert response.status_code == 404


def test_update_division_can_clear_description(client, it_division, db):
    response = client.put(f"/api/divisions/{it_division.id}", json={"description": None})

    assert response.status_code == 200
    db.expire_all()
    division = db.query(Division).filter(Division.id == it_division.id).first()
    assert division.description is None
    assert division.color == "#3b82f6"


def test_update_division_ignores_null_color_and_icon(client, it_division, db):
    response = client.put(f"/api/divisions/{it_division.id}", json={"color": None, "icon": None})

    assert response.status_code == 200
    db.expire_all()
    division = db.query(Division).filter(Division.id == it_division.id).first()
    assert division.color == "#3b82f6"
    assert division.icon == "desktop"


def test_update_division_with_null_name_is_400(client, it_division, db):
    response = client.put(f"/api/divisions/{it_division.id}", json={"name": None})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "name is required"}
    db.expire_all()
    assert db.query(Division).filter(Division.id == it_division.id).first().name == "IT"


def test_duplicate_division_caught_by_unique_index_is_400(client, it_division, db, monkeypatch):
    from hrd_api.routers import divisions

    # Lose the race: the pre-check sees no clash, the unique index does
    monkeypatch.setattr(divisions, "_ensure_name_available", lambda db, name: None)

    response = client.post("/api/divisions", json={"name": "IT"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Division name already exists"}
    assert db.query(Division).count() == 1


def test_database_error_is_500_envelope(client, monkeypatch):
    from sqlalchemy.exc import OperationalError
    from hrd_api.routers import divisions

    def broken_query(db):
        raise OperationalError("SELECT divisions", {}, Exception("disk I/O error"))

    monkeypatch.setattr(divisions, "_divisions_with_counts", broken_query)

    response = client.get("/api/divisions")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Database error"}
    assert "disk I/O error" not in response.text
