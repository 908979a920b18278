"""HTTP API for jobs, board, table and summary"""

import uuid

import pytest


@pytest.fixture
def headers(auth_headers, owner_id):
    return auth_headers(owner_id)


def add(client, headers, **body):
    body.setdefault("company", "Acme")
    body.setdefault("position", "Engineer")
    resp = client.post("/api/jobs", json=body, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


class TestAuthRequired:

    def test_no_token(self, client):
        resp = client.get("/api/jobs")
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Not Authenticated: No token provided"

    def test_garbage_token(self, client):
        resp = client.get("/api/jobs", headers={"Authorization": "Bearer nope"})
        assert resp.status_code == 401

    def test_wrong_scheme(self, client):
        resp = client.get("/api/jobs", headers={"Authorization": "Basic abc"})
        assert resp.status_code == 401

    def test_cookie_token(self, client, owner_id, auth_headers):
        token = auth_headers(owner_id)["Authorization"].split(" ", 1)[1]
        client.cookies.set("access_token_cookie", token)
        assert client.get("/api/jobs").status_code == 200


class TestCreate:

    def test_quick_add(self, client, headers):
        job = add(client, headers, salary="$150k - $200k", url="https://acme.example/jobs/1")

        assert job["status"] == "APPLYING"
        assert job["status_label"] == "To Apply"
        assert job["created_at"]
        assert job["salary"] == "$150k - $200k"
        uuid.UUID(job["id"])

    def test_empty_company(self, client, headers):
        resp = client.post("/api/jobs", json={"company": "", "position": "Engineer"}, headers=headers)
        assert resp.status_code == 422
        assert resp.json()["detail"] == "company is required"

    def test_missing_position(self, client, headers):
        resp = client.post("/api/jobs", json={"company": "Acme"}, headers=headers)
        assert resp.status_code == 422

    def test_bad_url(self, client, headers):
        resp = client.post("/api/jobs", json={"company": "Acme", "position": "Dev", "url": "not a url"}, headers=headers)
        assert resp.status_code == 422

    def test_unknown_status(self, client, headers):
        resp = client.post("/api/jobs", json={"company": "Acme", "position": "Dev", "status": "GHOSTED"}, headers=headers)
        assert resp.status_code == 422

    def test_profile_created_on_first_request(self, client, make_user, auth_headers):
        uid = make_user(with_profile=False)
        job = add(client, auth_headers(uid))
        assert job["status"] == "APPLYING"
        assert client.get("/api/profile", headers=auth_headers(uid)).json()["id"] == str(uid)


class TestStatusChange:

    def test_owner_moves_job(self, client, headers):
        job = add(client, headers)
        resp = client.patch(f"/api/jobs/{job['id']}/status", json={"status": "OFFER"}, headers=headers)

        assert resp.status_code == 200
        assert resp.json()["status"] == "OFFER"
        assert client.get(f"/api/jobs/{job['id']}", headers=headers).json()["status"] == "OFFER"

    def test_other_user_gets_404(self, client, headers, other_user_id, auth_headers):
        job = add(client, headers)
        resp = client.patch(f"/api/jobs/{job['id']}/status", json={"status": "OFFER"},
                            headers=auth_headers(other_user_id))
        assert resp.status_code == 404
        assert client.get(f"/api/jobs/{job['id']}", headers=headers).json()["status"] == "APPLYING"

    def test_unknown_status_value(self, client, headers):
        job = add(client, headers)
        resp = client.patch(f"/api/jobs/{job['id']}/status", json={"status": "LOST"}, headers=headers)
        assert resp.status_code == 422


class TestUpdateDelete:

    def test_patch_note(self, client, headers):
        job = add(client, headers)
        resp = client.patch(f"/api/jobs/{job['id']}", json={"note": "# Round 2\n- system design"}, headers=headers)
        assert resp.status_code == 200
        assert resp.json()["note"].startswith("# Round 2")
        assert resp.json()["created_at"] == job["created_at"]

    def test_patch_blank_position(self, client, headers):
        job = add(client, headers)
        resp = client.patch(f"/api/jobs/{job['id']}", json={"position": ""}, headers=headers)
        assert resp.status_code == 422

    def test_delete(self, client, headers, other_user_id, auth_headers):
        job = add(client, headers)
        assert client.delete(f"/api/jobs/{job['id']}", headers=auth_headers(other_user_id)).status_code == 404
        assert client.delete(f"/api/jobs/{job['id']}", headers=headers).status_code == 204
        assert client.get(f"/api/jobs/{job['id']}", headers=headers).status_code == 404


class TestViews:

    def test_list_filters_by_status(self, client, headers):
        add(client, headers, company="A", status="APPLIED")
        add(client, headers, company="B")
        rows = client.get("/api/jobs", params={"status": "APPLIED"}, headers=headers).json()
        assert [r["company"] for r in rows] == ["A"]

    def test_board_has_every_column(self, client, headers):
        add(client, headers, company="A", status="INTERVIEWING")
        add(client, headers, company="B", status="INTERVIEWING")
        add(client, headers, company="C")

        board = client.get("/api/jobs/board", headers=headers).json()
        assert board["total"] == 3
        assert len(board["columns"]) == 11
        by_status = {c["status"]: c for c in board["columns"]}
        assert by_status["INTERVIEWING"]["count"] == 2
        assert by_status["APPLYING"]["label"] == "To Apply"
        assert by_status["HIRED"]["jobs"] == []

    def test_table_sorting(self, client, headers):
        for name in ("beta", "Alpha", "gamma"):
            add(client, headers, company=name)

        table = client.get("/api/jobs/table", params={"sort": "company", "direction": "asc"}, headers=headers).json()
        assert [j["company"] for j in table["jobs"]] == ["Alpha", "beta", "gamma"]
        assert table["sort"] == {"field": "company", "direction": "asc"}

        table = client.get("/api/jobs/table", params={"sort": "createdAt"}, headers=headers).json()
        assert table["sort"] == {"field": "created_at", "direction": "desc"}

    def test_table_empty(self, client, headers):
        table = client.get("/api/jobs/table", headers=headers).json()
        assert table["jobs"] == []
        assert table["total"] == 0

    def test_table_bad_sort_field(self, client, headers):
        resp = client.get("/api/jobs/table", params={"sort": "salary"}, headers=headers)
        assert resp.status_code == 422

    def test_summary(self, client, headers):
        add(client, headers, status="OFFER")
        add(client, headers, status="INTERVIEWING")
        add(client, headers)
        summary = client.get("/api/jobs/summary", headers=headers).json()
        assert summary["total"] == 3
        assert summary["offers"] == 1
        assert summary["interviewing"] == 1
        assert summary["by_status"]["APPLYING"] == 1

    def test_statuses(self, client):
        statuses = client.get("/api/statuses").json()
        assert [s["status"] for s in statuses][:3] == ["APPLYING", "APPLIED", "FOR_INTERVIEW"]
        assert statuses[-1] == {"status": "WITHDRAW", "label": "Withdrawn", "color": "gray"}
