from bson import ObjectId
from fastapi.testclient import TestClient

from career_code import main

HR = "hr@acme.com"
APPLICANT = "dev@example.com"


def post_job(client, **fields):
    job = {"hr_email": HR, "title": "Backend Engineer", "company": "Acme", "company_logo": "https://acme.test/logo.png"}
    job.update(fields)
    response = client.post("/jobs", json=job)
    assert response.status_code == 200
    return response.json()["insertedId"]


def post_application(client, job_id, applicant=APPLICANT, **fields):
    application = {"jobId": job_id, "applicant": applicant, "status": "pending"}
    application.update(fields)
    response = client.post("/applications", json=application)
    assert response.status_code == 200
    return response.json()["insertedId"]


def test_root_and_health(client):
    assert client.get("/").text == "Career code cooking"
    assert client.get("/health").json() == {"status": "healthy", "mongodb": "in-memory"}


# ============================================================
# JOBS
# ============================================================

def test_create_job_returns_insert_result(client):
    response = client.post("/jobs", json={"hr_email": HR, "title": "Designer"})
    body = response.json()
    assert body["acknowledged"] is True
    assert ObjectId.is_valid(body["insertedId"])


def test_list_jobs_with_and_without_email_filter(client):
    post_job(client, title="One")
    post_job(client, title="Two", hr_email="other@corp.com")

    assert {job["title"] for job in client.get("/jobs").json()} == {"One", "Two"}
    filtered = client.get("/jobs", params={"email": HR}).json()
    assert [job["title"] for job in filtered] == ["One"]


def test_get_job_by_id(client):
    job_id = post_job(client)
    job = client.get(f"/jobs/{job_id}").json()
    assert job["_id"] == job_id
    assert job["title"] == "Backend Engineer"


def test_get_unknown_job_is_null(client):
    response = client.get(f"/jobs/{ObjectId()}")
    assert response.status_code == 200
    assert response.json() is None


def test_malformed_job_id_is_server_error(lenient_client):
    assert lenient_client.get("/jobs/not-an-object-id").status_code == 500


def test_employer_jobs_carry_application_counts(client, login):
    first = post_job(client, title="First")
    second = post_job(client, title="Second")
    post_job(client, title="Elsewhere", hr_email="other@corp.com")
    post_application(client, first)
    post_application(client, first, applicant="another@example.com")

    login(HR)
    jobs = client.get("/jobs/applications", params={"email": HR}).json()
    counts = {job["title"]: job["application_count"] for job in jobs}
    assert counts == {"First": 2, "Second": 0}
    assert {job["_id"] for job in jobs} == {first, second}


# ============================================================
# APPLICATIONS
# ============================================================

def test_applications_for_job(client):
    job_id = post_job(client)
    app_id = post_application(client, job_id)
    post_application(client, post_job(client, title="Other"))

    applications = client.get(f"/applications/job/{job_id}").json()
    assert [application["_id"] for application in applications] == [app_id]


def test_applicant_listing_joins_job_fields(client, login):
    job_id = post_job(client, title="Data Engineer", company="Globex", company_logo="globex.png")
    post_application(client, job_id)
    post_application(client, job_id, applicant="someone@else.com")

    login(APPLICANT)
    applications = client.get("/applications", params={"email": APPLICANT}).json()
    assert len(applications) == 1
    application = applications[0]
    assert application["applicant"] == APPLICANT
    assert application["jobId"] == job_id
    assert (application["company"], application["title"], application["company_logo"]) == (
        "Globex", "Data Engineer", "globex.png"
    )


def test_joined_fields_are_not_stored(client, login, db):
    job_id = post_job(client, title="Before")
    app_id = post_application(client, job_id)

    db["jobs"].update_one({"_id": ObjectId(job_id)}, {"$set": {"title": "After"}})

    login(APPLICANT)
    applications = client.get("/applications", params={"email": APPLICANT}).json()
    assert applications[0]["title"] == "After"
    stored = db["applications"].find_one({"_id": ObjectId(app_id)})
    assert "title" not in stored
    assert "company" not in stored


def test_application_with_missing_job_is_server_error(lenient_client, client):
    post_application(client, str(ObjectId()))
    lenient_client.post("/jwt", json={"email": APPLICANT})
    response = lenient_client.get("/applications", params={"email": APPLICANT})
    assert response.status_code == 500


def test_update_application_status(client, login, db):
    app_id = post_application(client, post_job(client))

    response = client.patch(f"/applications/{app_id}", json={"status": "reviewed"})
    assert response.json() == {"acknowledged": True, "matchedCount": 1, "modifiedCount": 1, "upsertedId": None}
    assert db["applications"].find_one({"_id": ObjectId(app_id)})["status"] == "reviewed"


def test_update_unknown_application_matches_nothing(client):
    response = client.patch(f"/applications/{ObjectId()}", json={"status": "reviewed"})
    body = response.json()
    assert (body["matchedCount"], body["modifiedCount"]) == (0, 0)


def test_update_malformed_application_id_is_server_error(lenient_client):
    response = lenient_client.patch("/applications/xyz", json={"status": "reviewed"})
    assert response.status_code == 500


def test_startup_with_in_memory_store_skips_mongo(app, monkeypatch):
    def unreachable(*args, **kwargs):
        raise AssertionError("MongoDB should not be touched")

    monkeypatch.setattr(main, "test_mongo_connection", unreachable)
    monkeypatch.setattr(main, "init_mongo_indexes", unreachable)
    with TestClient(app) as started:
        assert started.get("/health").json()["mongodb"] == "in-memory"
