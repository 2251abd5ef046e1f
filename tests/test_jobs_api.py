JOB = {
    "title": "Backend Developer",
    "company": "Acme",
    "location": "Remote",
    "description": "Build APIs.",
}


def test_post_job(client, auth_headers) -> None:
    response = client.post("/api/jobs", json=JOB, headers=auth_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["company"] == "Acme"
    assert body["salary"] is None
    assert body["owner"]["username"] == "alice"


def test_post_job_requires_fields(client) -> None:
    response = client.post("/api/jobs", json={"title": "Dev", "company": " ", "description": ""})

    assert response.status_code == 400
    assert [err["loc"] for err in response.json()["errors"]] == ["company", "description"]


def test_list_and_get_jobs(client) -> None:
    first = client.post("/api/jobs", json=JOB).json()
    client.post("/api/jobs", json={**JOB, "title": "Frontend Developer"})

    listed = client.get("/api/jobs").json()
    fetched = client.get(f"/api/jobs/{first['id']}")

    assert [job["title"] for job in listed] == ["Backend Developer", "Frontend Developer"]
    assert fetched.status_code == 200
    assert fetched.json() == first


def test_get_unknown_job_returns_404(client) -> None:
    response = client.get("/api/jobs/unknown")

    assert response.status_code == 404
    assert response.json() == {"detail": "Job not found"}
