# tests/test_route_api.py
from fastapi.testclient import TestClient

from routefinder.main import app

client = TestClient(app)


def test_route_found():
    payload = {"start": "Varna", "end": "Dobrich", "include_time": True}

    response = client.post("/route/", json=payload)
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "found"
    assert [c["name"] for c in data["path"]] == ["Varna", "Dobrich"]
    assert data["road_distance"] == 40
    assert data["total_distance"] > 0
    assert data["total_time"]["hours"] == 0
    assert data["summary"].startswith("Distance: ")
    assert ", Time: 0 H " in data["summary"]

    # Every path point carries a position for highlighting
    for point in data["path"]:
        assert set(point) == {"name", "x", "y"}


def test_route_without_time():
    response = client.post("/route/", json={"start": "Varna", "end": "Kazanlak", "include_time": False})
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "found"
    assert data["total_time"] is None
    assert "Time" not in data["summary"]


def test_route_unknown_city_is_not_an_error():
    response = client.post("/route/", json={"start": "Plovdiv", "end": "Varna"})
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "invalid_city"
    assert data["path"] == []
    assert "Plovdiv" in data["message"]


def test_route_missing_field_rejected():
    response = client.post("/route/", json={"start": "Varna"})
    assert response.status_code == 422


def test_list_cities():
    response = client.get("/route/cities")
    assert response.status_code == 200

    cities = response.json()
    assert len(cities) == 12
    by_name = {c["name"]: c for c in cities}
    varna = by_name["Varna"]
    assert [r["destination"] for r in varna["roads"]] == ["Burgas", "Dobrich", "Razgrad", "Shumen"]
    assert sum(len(c["roads"]) for c in cities) == 50
