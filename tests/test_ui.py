from fastapi.testclient import TestClient

from zoohabitat.config import build_evaluator
from zoohabitat.ui import create_app


def test_evaluate_returns_viable_enclosures():
    client = TestClient(create_app())

    response = client.post("/api/evaluate", json={"species": "HIPOPOTAMO", "quantity": 1})
    assert response.status_code == 200
    assert response.json() == {
        "viableEnclosures": [
            "Enclosure 3 (free space: 0 total: 7)",
            "Enclosure 4 (free space: 4 total: 8)",
        ]
    }


def test_evaluate_accepts_animal_alias():
    client = TestClient(create_app())

    response = client.post("/api/evaluate", json={"animal": "CROCODILO", "quantity": 1})
    assert response.json() == {"viableEnclosures": ["Enclosure 4 (free space: 5 total: 8)"]}


def test_evaluate_errors_are_data():
    client = TestClient(create_app())

    for payload, message in (
        ({"species": "UNICORNIO", "quantity": 1}, "Invalid species"),
        ({"species": "MACACO", "quantity": 0}, "Invalid quantity"),
        ({"species": "MACACO", "quantity": 10}, "No viable enclosure"),
    ):
        response = client.post("/api/evaluate", json=payload)
        assert response.status_code == 200
        assert response.json() == {"error": message}


def test_malformed_request_is_rejected():
    client = TestClient(create_app())

    response = client.post("/api/evaluate", json={"species": "MACACO"})
    assert response.status_code == 422


def test_enclosures_are_unchanged_after_evaluation():
    evaluator = build_evaluator()
    client = TestClient(create_app(evaluator))
    before = client.get("/api/enclosures").json()

    client.post("/api/evaluate", json={"species": "MACACO", "quantity": 2})

    after = client.get("/api/enclosures").json()
    assert after == before
    assert before[0] == {
        "id": 1,
        "totalSize": 10,
        "freeSpace": 7,
        "biomes": ["savana"],
        "occupants": {"MACACO": 3},
    }


def test_species_listing():
    client = TestClient(create_app())

    species = {entry["name"]: entry for entry in client.get("/api/species").json()}
    assert species["LEAO"] == {"name": "LEAO", "size": 3, "biomes": ["savana"], "comfort": "carnivore"}
    assert species["HIPOPOTAMO"]["comfort"] == "mixes_only_in"
    assert species["GAZELA"]["comfort"] == "default"
