"""
Tests for the member search endpoints.
"""

import pytest


class TestSearchEndpoint:
    def test_no_parameters_returns_everyone(self, client, seed_members):
        response = client.get("/api/v1/members")

        assert response.status_code == 200
        assert [row["username"] for row in response.json()] == [
            "member1", "member2", "member3", "member4",
        ]

    def test_row_shape(self, client, seed_members):
        response = client.get("/api/v1/members", params={"username": "member1"})

        row = response.json()[0]
        assert set(row) == {"member_id", "username", "age", "team_id", "team_name"}
        assert row["team_name"] == "teamA"
        assert row["age"] == 10

    def test_filters(self, client, seed_members):
        response = client.get(
            "/api/v1/members",
            params={"team_name": "teamB", "age_goe": 35},
        )

        assert [row["username"] for row in response.json()] == ["member4"]

    def test_blank_username_is_ignored(self, client, seed_members):
        response = client.get("/api/v1/members", params={"username": "  "})
        assert len(response.json()) == 4

    @pytest.mark.parametrize(
        "params",
        [
            {"age_goe": "old"},
            {"age_goe": 10**20},
            {"age_loe": 201},
            {"age_loe": -1},
        ],
    )
    def test_invalid_age(self, client, seed_members, params):
        response = client.get("/api/v1/members", params=params)
        assert response.status_code == 422

    def test_age_bounds_are_inclusive(self, client, seed_members):
        response = client.get("/api/v1/members", params={"age_goe": 0, "age_loe": 200})

        assert response.status_code == 200
        assert len(response.json()) == 4


class TestPageEndpoints:
    @pytest.mark.parametrize("path", ["/api/v2/members", "/api/v3/members"])
    def test_first_page(self, client, seed_members, path):
        response = client.get(path, params={"page": 0, "size": 3})

        assert response.status_code == 200
        data = response.json()
        assert [row["username"] for row in data["content"]] == ["member1", "member2", "member3"]
        assert data["pagination"]["total_elements"] == 4
        assert data["pagination"]["total_pages"] == 2
        assert data["pagination"]["has_next"] is True

    @pytest.mark.parametrize("path", ["/api/v2/members", "/api/v3/members"])
    def test_filtered_page(self, client, seed_members, path):
        response = client.get(path, params={"age_goe": 20, "age_loe": 30, "size": 10})

        data = response.json()
        assert [row["username"] for row in data["content"]] == ["member2", "member3"]
        assert data["pagination"]["total_elements"] == 2

    def test_both_variants_agree(self, client, seed_members):
        params = {"team_name": "teamA", "page": 1, "size": 1}

        simple = client.get("/api/v2/members", params=params).json()
        optimized = client.get("/api/v3/members", params=params).json()

        assert simple == optimized
        assert simple["content"][0]["username"] == "member2"

    def test_default_page_request(self, client, seed_members):
        data = client.get("/api/v3/members").json()

        assert data["pagination"]["page"] == 0
        assert data["pagination"]["size"] == 20
        assert data["pagination"]["offset"] == 0

    @pytest.mark.parametrize(
        "params",
        [
            {"page": -1},
            {"page": 1_000_001},
            {"page": 10**17, "size": 200},
            {"size": 0},
            {"size": 201},
        ],
    )
    @pytest.mark.parametrize("path", ["/api/v2/members", "/api/v3/members"])
    def test_invalid_page_request(self, client, seed_members, path, params):
        response = client.get(path, params=params)
        assert response.status_code == 422

    @pytest.mark.parametrize("path", ["/api/v2/members", "/api/v3/members"])
    def test_last_allowed_page_is_empty(self, client, seed_members, path):
        response = client.get(path, params={"page": 1_000_000, "size": 200})

        assert response.status_code == 200
        data = response.json()
        assert data["content"] == []
        assert data["pagination"]["total_elements"] == 4


class TestGetMember:
    def test_found(self, client, seed_members):
        member_id = seed_members["member2"].id
        response = client.get(f"/api/members/{member_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "member2"
        assert data["age"] == 20

    def test_not_found(self, client, seed_members):
        response = client.get("/api/members/999999")

        assert response.status_code == 404
        assert "999999" in response.json()["detail"]
