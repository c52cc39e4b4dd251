import pytest

from tests.conftest import post_job, signup


def _send(client, headers, job_id, content):
    return client.post("/messages", json={"job_id": job_id, "content": content}, headers=headers)


@pytest.fixture
def hired_job(client):
    c = signup(client, "Client", role="client")
    f = signup(client, "Freelancer")
    job_id = post_job(client, c["headers"]).json()["job_id"]
    resp = client.post(f"/jobs/{job_id}/hire", headers=f["headers"])
    assert resp.status_code == 200, resp.text
    return {"client": c, "freelancer": f, "job_id": job_id}


def test_message_before_hire_is_rejected(client):
    c = signup(client, "Client", role="client")
    job_id = post_job(client, c["headers"]).json()["job_id"]

    resp = _send(client, c["headers"], job_id, "anyone there?")
    assert resp.status_code == 400, resp.text
    assert resp.json()["detail"] == "Job has no assigned freelancer yet"


def test_participants_exchange_messages(client, hired_job):
    c, f, job_id = hired_job["client"], hired_job["freelancer"], hired_job["job_id"]

    assert _send(client, c["headers"], job_id, "hello").status_code == 201
    assert _send(client, f["headers"], job_id, "hi, starting today").status_code == 201
    assert _send(client, c["headers"], job_id, "great").status_code == 201

    for party in (c, f):
        resp = client.get(f"/messages/{job_id}", headers=party["headers"])
        assert resp.status_code == 200, resp.text
        messages = resp.json()
        assert [m["content"] for m in messages] == ["hello", "hi, starting today", "great"]
        assert [m["sender_name"] for m in messages] == ["Client", "Freelancer", "Client"]


def test_receiver_is_the_other_participant(client, hired_job):
    c, f, job_id = hired_job["client"], hired_job["freelancer"], hired_job["job_id"]

    _send(client, c["headers"], job_id, "from client")
    _send(client, f["headers"], job_id, "from freelancer")

    messages = client.get(f"/messages/{job_id}", headers=c["headers"]).json()
    assert messages[0]["sender_id"] == c["user"]["id"]
    assert messages[0]["receiver_id"] == f["user"]["id"]
    assert messages[1]["sender_id"] == f["user"]["id"]
    assert messages[1]["receiver_id"] == c["user"]["id"]


def test_outsider_cannot_send_or_read(client, hired_job):
    outsider = signup(client, "Outsider")
    job_id = hired_job["job_id"]

    resp = _send(client, outsider["headers"], job_id, "let me in")
    assert resp.status_code == 403, resp.text

    resp = client.get(f"/messages/{job_id}", headers=outsider["headers"])
    assert resp.status_code == 403, resp.text


def test_unknown_job_is_forbidden(client):
    f = signup(client, "Freelancer")

    assert _send(client, f["headers"], 4242, "hello").status_code == 403
    assert client.get("/messages/4242", headers=f["headers"]).status_code == 403


def test_messages_require_token(client, hired_job):
    assert _send(client, {}, hired_job["job_id"], "hello").status_code == 401
    assert client.get(f"/messages/{hired_job['job_id']}").status_code == 401


def test_empty_message_is_rejected(client, hired_job):
    resp = _send(client, hired_job["client"]["headers"], hired_job["job_id"], "  ")
    assert resp.status_code == 422, resp.text
