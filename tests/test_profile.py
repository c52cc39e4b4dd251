import io

from PIL import Image

from app.crud.user_crud import get_user_by_id
from app.utils.file_validators import MAX_IMAGE_SIZE
from tests.conftest import login, signup


def _png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (8, 8), color=(200, 30, 30)).save(buf, format="PNG")
    return buf.getvalue()


def test_update_bio_only(client, db_session, avatar_storage):
    f = signup(client, "Freelancer")

    resp = client.put("/profile", data={"bio": "Python developer"}, headers=f["headers"])
    assert resp.status_code == 200, resp.text
    assert resp.json()["avatar"] is None

    user = get_user_by_id(db_session, f["user"]["id"])
    assert user.bio == "Python developer"
    assert avatar_storage.uploads == []


def test_update_avatar_uploads_and_stores_url(client, db_session, avatar_storage):
    f = signup(client, "Freelancer")
    content = _png_bytes()

    resp = client.put(
        "/profile",
        data={"bio": "Designer"},
        files={"avatar": ("me.png", content, "image/png")},
        headers=f["headers"],
    )
    assert resp.status_code == 200, resp.text
    url = resp.json()["avatar"]
    assert url.startswith("https://")

    assert avatar_storage.uploads == [(f["user"]["id"], content)]
    user = get_user_by_id(db_session, f["user"]["id"])
    assert user.avatar_url == url
    assert user.bio == "Designer"

    # the new avatar shows up in the login projection
    assert login(client, f["email"]).json()["user"]["avatar"] == url


def test_empty_update_is_noop(client, db_session, avatar_storage):
    f = signup(client, "Freelancer")
    client.put("/profile", data={"bio": "keep me"}, headers=f["headers"])

    resp = client.put("/profile", headers=f["headers"])
    assert resp.status_code == 200, resp.text

    assert avatar_storage.uploads == []
    assert get_user_by_id(db_session, f["user"]["id"]).bio == "keep me"


def test_avatar_must_be_an_image(client, avatar_storage):
    f = signup(client, "Freelancer")

    resp = client.put(
        "/profile",
        files={"avatar": ("notes.txt", b"hello", "text/plain")},
        headers=f["headers"],
    )
    assert resp.status_code == 400, resp.text

    resp = client.put(
        "/profile",
        files={"avatar": ("fake.png", b"not really a png", "image/png")},
        headers=f["headers"],
    )
    assert resp.status_code == 400, resp.text
    assert resp.json()["detail"] == "Invalid image file"
    assert avatar_storage.uploads == []


def test_profile_requires_token(client):
    resp = client.put("/profile", data={"bio": "anon"})
    assert resp.status_code == 401, resp.text


def test_avatar_over_size_limit_is_rejected(client, avatar_storage):
    f = signup(client, "Freelancer")
    oversized = _png_bytes() + b"\0" * MAX_IMAGE_SIZE

    resp = client.put(
        "/profile",
        files={"avatar": ("big.png", oversized, "image/png")},
        headers=f["headers"],
    )
    assert resp.status_code == 400, resp.text
    assert resp.json()["detail"].startswith("File too large")
    assert avatar_storage.uploads == []


def test_avatar_upload_runs_off_the_event_loop(client, avatar_storage):
    f = signup(client, "Freelancer")

    resp = client.put(
        "/profile",
        files={"avatar": ("me.png", _png_bytes(), "image/png")},
        headers=f["headers"],
    )
    assert resp.status_code == 200, resp.text
    assert avatar_storage.ran_on_event_loop is False


def test_empty_bio_leaves_stored_bio(client, db_session):
    f = signup(client, "Freelancer")
    client.put("/profile", data={"bio": "keep me"}, headers=f["headers"])

    resp = client.put("/profile", data={"bio": ""}, headers=f["headers"])
    assert resp.status_code == 200, resp.text
    assert get_user_by_id(db_session, f["user"]["id"]).bio == "keep me"
