import io

from evault.services import get_vault
from evault.workflows.download import DOWNLOAD_FAILED, MISSING_KEY
from evault.workflows.upload import MISSING_INPUT, UPLOAD_FAILED
from tests.conftest import PASSWORD

CONTENT = b"quarterly report"


def post_upload(client, public_key, name="report card.pdf", data=CONTENT):
    return client.post(
        "/upload",
        data={"file": (io.BytesIO(data), name, "application/pdf"), "public_key": public_key},
        content_type="multipart/form-data"
    )


class TestAuthRoutes:

    def test_register_then_login(self, client):
        resp = client.post("/register", data={
            "email": "carol@example.com",
            "password": PASSWORD,
            "confirm": PASSWORD,
        })
        assert resp.status_code == 302
        resp = client.post("/login", data={"email": "carol@example.com", "password": PASSWORD})
        assert resp.status_code == 302
        assert client.get("/dashboard").status_code == 200

    def test_bad_login(self, client, user):
        resp = client.post("/login", data={"email": user.email, "password": "nope-nope"})
        assert resp.status_code == 200
        assert b"Invalid login credentials" in resp.data

    def test_dashboard_requires_login(self, client):
        resp = client.get("/dashboard")
        assert resp.status_code == 302
        assert "/login" in resp.headers["Location"]

    def test_logout(self, logged_in):
        logged_in.post("/logout")
        assert logged_in.get("/dashboard").status_code == 302


class TestFileRoutes:

    def test_upload_list_download_delete(self, app, logged_in, key_pair):
        resp = post_upload(logged_in, key_pair[0])
        assert resp.status_code == 302

        files = logged_in.get("/api/files").get_json()
        assert len(files) == 1
        assert files[0]["file_name"] == "report card.pdf"
        assert "encrypted_key" not in files[0]
        storage_path = files[0]["storage_path"]
        assert " " not in storage_path and storage_path.endswith(".pdf")

        page = logged_in.get("/dashboard")
        assert b"report card.pdf" in page.data

        resp = logged_in.post(f"/download/{files[0]['id']}", data={"private_key": key_pair[1]})
        assert resp.status_code == 200
        assert resp.data == CONTENT
        assert resp.mimetype == "application/pdf"
        assert "attachment" in resp.headers["Content-Disposition"]
        assert "report card.pdf" in resp.headers["Content-Disposition"]

        resp = logged_in.post(f"/delete/{files[0]['id']}")
        assert resp.status_code == 302
        assert logged_in.get("/api/files").get_json() == []
        with app.app_context():
            assert not get_vault().objects.exists(storage_path)

    def test_same_file_twice(self, logged_in, key_pair):
        post_upload(logged_in, key_pair[0])
        post_upload(logged_in, key_pair[0])
        paths = {f["storage_path"] for f in logged_in.get("/api/files").get_json()}
        assert len(paths) == 2

    def test_wrong_private_key(self, logged_in, key_pair, other_key_pair):
        post_upload(logged_in, key_pair[0])
        file_id = logged_in.get("/api/files").get_json()[0]["id"]
        resp = logged_in.post(f"/download/{file_id}", data={"private_key": other_key_pair[1]},
                              follow_redirects=True)
        assert resp.status_code == 200
        assert resp.mimetype == "text/html"
        assert DOWNLOAD_FAILED.encode() in resp.data
        assert CONTENT not in resp.data

    def test_upload_without_public_key(self, logged_in):
        resp = post_upload(logged_in, "", data=b"x")
        assert resp.status_code == 302
        page = logged_in.get("/dashboard")
        assert MISSING_INPUT.encode() in page.data
        assert logged_in.get("/api/files").get_json() == []

    def test_upload_without_file(self, logged_in, key_pair):
        resp = logged_in.post("/upload", data={"public_key": key_pair[0]}, follow_redirects=True)
        assert MISSING_INPUT.encode() in resp.data

    def test_upload_invalid_public_key(self, logged_in):
        resp = post_upload(logged_in, "definitely not a key")
        assert resp.status_code == 302
        assert UPLOAD_FAILED.encode() in logged_in.get("/dashboard").data

    def test_upload_public_key_too_small(self, logged_in, small_public_key):
        resp = post_upload(logged_in, small_public_key)
        assert resp.status_code == 302
        assert UPLOAD_FAILED.encode() in logged_in.get("/dashboard").data
        assert logged_in.get("/api/files").get_json() == []

    def test_download_without_private_key(self, logged_in, key_pair):
        post_upload(logged_in, key_pair[0])
        file_id = logged_in.get("/api/files").get_json()[0]["id"]
        resp = logged_in.post(f"/download/{file_id}", data={"private_key": ""}, follow_redirects=True)
        assert resp.mimetype == "text/html"
        assert MISSING_KEY.encode() in resp.data

    def test_delete_unknown(self, logged_in):
        resp = logged_in.post("/delete/999", follow_redirects=True)
        assert b"Failed to delete file" in resp.data


class TestKeyRoutes:

    def test_generate_keys_page(self, logged_in):
        resp = logged_in.post("/keys")
        assert resp.status_code == 200
        assert b"Copy your private key now" in resp.data

    def test_generate_keys_api(self, logged_in):
        body = logged_in.post("/api/keys").get_json()
        assert body["public_key"] and body["private_key"]
        assert body["public_key"] != body["private_key"]
