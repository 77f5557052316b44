class TestListUsers:
    def test_list_users(self, client, customer_headers, vendor_user):
        response = client.get("/api/admin/list-users", headers=customer_headers)

        assert response.status_code == 200
        assert {u["email"] for u in response.json} == {
            "customer@test.com",
            "vendor@test.com",
        }
        vendor = next(u for u in response.json if u["email"] == "vendor@test.com")
        assert vendor["wallet"]["btcBalance"] == 0.5
        assert vendor["wallet"]["sbtcBalance"] == 5000000.0
        assert "passwordHash" not in vendor

    def test_list_users_requires_token(self, client):
        response = client.get("/api/admin/list-users")

        assert response.status_code == 401
