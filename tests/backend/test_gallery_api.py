"""
Tests for /api/gallery endpoints.
"""

UPLOAD = {
    "title": "Sankranti Rangoli",
    "description": "Rangoli competition winners",
    "category": "festivals",
    "fileData": "data:image/png;base64,aGVsbG8=",
    "fileType": "image",
    "mimeType": "image/png",
}


class TestGallery:

    def test_gallery_starts_empty(self, client):
        response = client.get("/api/gallery")

        assert response.status_code == 200
        assert response.json() == []

    def test_admin_uploads_item(self, client, admin_headers):
        response = client.post("/api/gallery/upload", json=UPLOAD, headers=admin_headers)

        assert response.status_code == 201
        item = response.json()
        assert item["id"] == 1
        assert item["type"] == "image"
        assert item["mimeType"] == "image/png"
        assert item["data"] == UPLOAD["fileData"]
        assert item["uploadedBy"] == "admin@kta-community.org"
        assert item["uploadedAt"]

        listed = client.get("/api/gallery").json()
        assert [i["id"] for i in listed] == [1]

    def test_upload_missing_fields_returns_400(self, client, admin_headers, assert_error_response):
        response = client.post(
            "/api/gallery/upload",
            json={"title": "Only a title"},
            headers=admin_headers,
        )

        assert_error_response(response, 400, "missing required fields")

    def test_upload_rejects_non_media(self, client, admin_headers, assert_error_response):
        response = client.post(
            "/api/gallery/upload",
            json={**UPLOAD, "mimeType": "application/x-msdownload"},
            headers=admin_headers,
        )

        assert_error_response(response, 400, "only image and video")

    def test_member_cannot_upload(self, client, member_headers, assert_error_response):
        response = client.post("/api/gallery/upload", json=UPLOAD, headers=member_headers)

        assert_error_response(response, 403)

    def test_delete_item_and_reuse_id(self, client, admin_headers):
        client.post("/api/gallery/upload", json=UPLOAD, headers=admin_headers)
        client.post("/api/gallery/upload", json=UPLOAD, headers=admin_headers)

        response = client.delete("/api/gallery/2", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Item deleted"}

        item = client.post("/api/gallery/upload", json=UPLOAD, headers=admin_headers).json()
        assert item["id"] == 2

    def test_delete_unknown_item_returns_404(self, client, admin_headers, assert_error_response):
        response = client.delete("/api/gallery/9", headers=admin_headers)

        assert_error_response(response, 404)
