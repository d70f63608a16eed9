"""
Tests for the upload proxy routes, which re-encode the parsed form.
"""


def test_upload_multiple_forwards_every_file(test_client, backend):
    response = test_client.post(
        "/api/upload-multiple",
        data={"destination": "brands/gallery"},
        files=[
            ("images", ("one.png", b"one", "image/png")),
            ("images", ("two.jpg", b"two", "image/jpeg")),
        ],
    )

    assert response.status_code == 200
    assert response.json()["count"] == 2
    assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"

    upstream_request = backend.requests[-1]
    assert str(upstream_request.url) == "http://backend.test/api/upload-multiple"
    assert upstream_request.headers["content-type"].startswith("multipart/form-data; boundary=")
    body = upstream_request.content
    assert b'name="destination"' in body and b"brands/gallery" in body
    assert b'name="images"; filename="one.png"' in body
    assert b'name="images"; filename="two.jpg"' in body


def test_upload_single_uses_its_own_path(test_client, backend):
    response = test_client.post(
        "/api/upload",
        data={"destination": "brands/logo"},
        files=[("image", ("logo.png", b"logo", "image/png"))],
    )

    assert response.status_code == 200
    assert response.json() == {"url": "/uploads/0.png"}
    assert backend.requests[-1].url.path == "/api/upload"


def test_upload_multiple_failure_carries_details(test_client, backend):
    backend.fail_with = 413

    response = test_client.post(
        "/api/upload-multiple",
        data={"destination": "brands/gallery"},
        files=[("images", ("big.png", b"x" * 10, "image/png"))],
    )

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to upload multiple files",
        "details": "API responded with status: 413",
    }


def test_upload_failure_when_upstream_down(test_client, backend):
    backend.down = True

    response = test_client.post(
        "/api/upload",
        data={"destination": "brands/logo"},
        files=[("image", ("logo.png", b"logo", "image/png"))],
    )

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to upload file"


def test_form_without_files_is_relayed_as_multipart(test_client, backend):
    response = test_client.post(
        "/api/upload-multiple", data={"destination": "brands/gallery"}
    )

    assert response.status_code == 200
    assert response.json() == {"urls": [], "count": 0}
    upstream_request = backend.requests[-1]
    assert upstream_request.headers["content-type"].startswith("multipart/form-data; boundary=")
    assert b'name="destination"' in upstream_request.content


def test_field_and_file_order_is_kept(test_client, backend):
    test_client.post(
        "/api/upload-multiple",
        data={"destination": "brands/gallery"},
        files=[
            ("images", ("one.png", b"one", "image/png")),
            ("images", ("two.png", b"two", "image/png")),
        ],
    )

    body = backend.requests[-1].content
    assert body.index(b"one.png") < body.index(b"two.png")
    assert body.count(b'name="destination"') == 1
