"""
Tests for the admin console: /api/users and /api/stats.
"""

ADMIN_EMAIL = "admin@kta-community.org"


class TestUserListing:

    def test_admin_lists_users_without_passwords(self, client, admin_headers, member_token):
        response = client.get("/api/users", headers=admin_headers)

        assert response.status_code == 200
        users = response.json()
        assert {u["email"] for u in users} == {ADMIN_EMAIL, "member@kta.org"}
        for user in users:
            assert "password" not in user
            assert "memberSince" in user

    def test_member_cannot_list_users(self, client, member_headers, assert_error_response):
        response = client.get("/api/users", headers=member_headers)

        assert_error_response(response, 403, "admin access required")


class TestAdminAccess:

    def test_grant_admin_takes_effect_for_existing_token(self, client, admin_headers, member_headers):
        assert client.get("/api/users", headers=member_headers).status_code == 403

        response = client.post(
            "/api/users/grant-admin", json={"email": "member@kta.org"}, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Admin access granted"}
        assert client.get("/api/users", headers=member_headers).status_code == 200

    def test_revoke_admin(self, client, admin_headers, member_headers):
        client.post("/api/users/grant-admin", json={"email": "member@kta.org"}, headers=admin_headers)

        response = client.post(
            "/api/users/revoke-admin", json={"email": "member@kta.org"}, headers=admin_headers
        )

        assert response.status_code == 200
        assert client.get("/api/users", headers=member_headers).status_code == 403

    def test_grant_unknown_user_returns_404(self, client, admin_headers, assert_error_response):
        response = client.post(
            "/api/users/grant-admin", json={"email": "nobody@kta.org"}, headers=admin_headers
        )

        assert_error_response(response, 404, "user not found")

    def test_bootstrap_admin_cannot_be_revoked_even_by_admin(
        self, client, admin_headers, assert_error_response
    ):
        response = client.post(
            "/api/users/revoke-admin", json={"email": ADMIN_EMAIL}, headers=admin_headers
        )

        assert_error_response(response, 403, "cannot revoke primary admin")

    def test_bootstrap_admin_cannot_be_revoked_by_promoted_admin(
        self, client, admin_headers, member_headers, assert_error_response
    ):
        client.post("/api/users/grant-admin", json={"email": "member@kta.org"}, headers=admin_headers)

        revoke = client.post(
            "/api/users/revoke-admin", json={"email": ADMIN_EMAIL}, headers=member_headers
        )
        delete = client.delete(f"/api/users/{ADMIN_EMAIL}", headers=member_headers)

        assert_error_response(revoke, 403)
        assert_error_response(delete, 403, "cannot delete primary admin")

    def test_bootstrap_admin_cannot_be_deleted(self, client, admin_headers, store, assert_error_response):
        response = client.delete(f"/api/users/{ADMIN_EMAIL}", headers=admin_headers)

        assert_error_response(response, 403)
        assert ADMIN_EMAIL in store._documents["users"]

    def test_delete_user(self, client, admin_headers, member_token, store):
        response = client.delete("/api/users/member@kta.org", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted"}
        assert "member@kta.org" not in store._documents["users"]

    def test_delete_unknown_user_returns_404(self, client, admin_headers, assert_error_response):
        response = client.delete("/api/users/nobody@kta.org", headers=admin_headers)

        assert_error_response(response, 404)

    def test_non_admin_gets_403_before_protection_check(self, client, member_headers, assert_error_response):
        response = client.post(
            "/api/users/revoke-admin", json={"email": ADMIN_EMAIL}, headers=member_headers
        )

        assert_error_response(response, 403, "admin access required")


class TestStats:

    def test_stats_count_collections(self, client, admin_headers, member_token):
        client.post("/api/contact", json={"name": "A", "message": "One"})
        client.post("/api/contact", json={"name": "B", "message": "Two"})
        client.put("/api/contact/1/read", headers=admin_headers)

        response = client.get("/api/stats", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {
            "totalMembers": 2,
            "totalEvents": 1,
            "totalPhotos": 0,
            "unreadMessages": 1,
        }

    def test_stats_require_admin(self, client, member_headers, assert_error_response):
        response = client.get("/api/stats", headers=member_headers)

        assert_error_response(response, 403)

    def test_stats_skip_malformed_message_entries(self, client, admin_headers, store, message_doc):
        store._documents["messages"] = [
            message_doc(1),
            "stray entry",
            message_doc(2, read=True),
            {"id": "not-a-number"},
        ]

        response = client.get("/api/stats", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["unreadMessages"] == 1
