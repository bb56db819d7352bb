def _create_run(client, release, **dates):
    response = client.post("/api/runs", json={"name": "Sprint 1", "releaseId": release.id, **dates})
    assert response.status_code == 201
    return response.json()


def test_create_run_returns_iso_dates(client, release):
    run = _create_run(client, release, start="2026-01-15T10:00:00Z")

    assert run["start"] == "2026-01-15T10:00:00+00:00"
    assert run["end"] is None
    assert run["releaseId"] == release.id

def test_create_run_invalid_date(client, release):
    response = client.post(
        "/api/runs",
        json={"name": "Sprint 1", "releaseId": release.id, "start": "15/01/2026"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid start datetime format. Use ISO 8601."}

def test_create_run_missing_release(client):
    response = client.post("/api/runs", json={"name": "Sprint 1", "releaseId": 3})

    assert response.status_code == 404
    assert response.json() == {"error": "Release not found"}

def test_update_run_with_bad_end_changes_nothing(client, release):
    run = _create_run(client, release, start="2026-01-15T10:00:00Z")

    response = client.put(f"/api/runs/{run['id']}", json={"name": "Renamed", "end": "later"})

    assert response.status_code == 400
    assert client.get(f"/api/runs/{run['id']}").json() == run

def test_update_run_keeps_omitted_start(client, release):
    run = _create_run(client, release, start="2026-01-15T10:00:00Z")

    response = client.put(
        f"/api/runs/{run['id']}",
        json={"name": "Sprint 1", "end": "2026-01-20T18:00:00+00:00"}
    )

    assert response.status_code == 200
    assert response.json()["start"] == "2026-01-15T10:00:00+00:00"
    assert response.json()["end"] == "2026-01-20T18:00:00+00:00"

def test_run_cases(client, release, test_case):
    run = _create_run(client, release)

    added = client.post(f"/api/runs/{run['id']}/cases", json={"caseId": test_case.id})
    assert added.status_code == 201
    assert added.json() == {"added": True}

    again = client.post(f"/api/runs/{run['id']}/cases", json={"caseId": test_case.id})
    assert again.status_code == 409

    assert client.get(f"/api/runs/{run['id']}/cases").json() == {"cases": [test_case.id]}

def test_add_missing_case_to_run(client, release):
    run = _create_run(client, release)

    response = client.post(f"/api/runs/{run['id']}/cases", json={"caseId": 99})

    assert response.status_code == 404
    assert response.json() == {"error": "Case not found"}

def test_add_case_to_missing_run(client, test_case):
    response = client.post("/api/runs/5/cases", json={"caseId": test_case.id})

    assert response.status_code == 404
    assert response.json() == {"error": "Run not found"}

def test_delete_run_and_filter_by_release(client, release, test_case):
    run = _create_run(client, release)
    client.post(f"/api/runs/{run['id']}/cases", json={"caseId": test_case.id})

    assert client.get("/api/runs", params={"releaseId": release.id}).json() == {"runs": [run]}

    response = client.delete(f"/api/runs/{run['id']}")
    assert response.json() == {"deleted": True}
    assert client.get(f"/api/runs/{run['id']}/cases").status_code == 404
    assert client.get("/api/runs").json() == {"runs": []}

def test_create_run_rejects_dates_without_offset(client, release):
    for start in ["2026-01-15", "2026-01-15T10:00:00"]:
        response = client.post(
            "/api/runs",
            json={"name": "Sprint 1", "releaseId": release.id, "start": start}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid start datetime format. Use ISO 8601."}
    assert client.get("/api/runs").json() == {"runs": []}
