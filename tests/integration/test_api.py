"""HTTP API tests: routing, authentication, problem documents."""

from __future__ import annotations

from datetime import date

import pytest

API = "/api/v1"
PROBLEM_JSON = "application/problem+json"


@pytest.fixture
async def heat(owner, make_movie, make_genre):  # noqa: ANN001, ANN201
    crime = await make_genre("Crime")
    return await make_movie(
        owner,
        title="Heat",
        duration=170,
        rating=8.3,
        release_date=date(1995, 12, 15),
        image_key="images/heat.jpg",
        genres=[crime],
    )


class TestAuthentication:
    async def test_missing_token(self, client):
        response = await client.post(f"{API}/movies", json={"title": "Heat"})

        assert response.status_code == 401
        assert response.headers["content-type"].startswith(PROBLEM_JSON)
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json()["type"] == "missing-authentication"

    async def test_unknown_token(self, client):
        response = await client.post(
            f"{API}/movies",
            json={"title": "Heat"},
            headers={"Authorization": "Bearer nope"},
        )

        assert response.status_code == 401
        assert response.json()["type"] == "token-invalid"

    async def test_wrong_scheme(self, client):
        response = await client.get(f"{API}/users/me", headers={"Authorization": "Basic abc"})

        assert response.status_code == 401

    async def test_me(self, client, owner, owner_headers):
        response = await client.get(f"{API}/users/me", headers=owner_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == owner.id
        assert body["email"] == owner.email
        assert "password_hash" not in body


class TestMovieReads:
    async def test_get_movie(self, client, heat):
        response = await client.get(f"{API}/movies/{heat.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Heat"
        assert body["release_date"] == "1995-12-15"
        assert body["genres"] == [{"id": heat.genres[0].id, "name": "Crime"}]

    async def test_get_missing_movie(self, client):
        response = await client.get(f"{API}/movies/999")

        assert response.status_code == 404
        assert response.headers["content-type"].startswith(PROBLEM_JSON)
        body = response.json()
        assert body["type"] == "movie-not-found"
        assert body["status"] == 404
        assert body["movie_id"] == 999

    async def test_list_pages(self, client, owner, make_movie):
        for title in ("Alpha", "Beta", "Gamma"):
            await make_movie(owner, title=title)

        first = await client.get(f"{API}/movies", params={"first": 2})
        body = first.json()

        assert first.status_code == 200
        assert [e["node"]["title"] for e in body["edges"]] == ["Alpha", "Beta"]
        assert body["total_count"] == 3
        assert body["page_info"]["has_next_page"] is True
        assert body["page_info"]["has_previous_page"] is False

        second = await client.get(
            f"{API}/movies",
            params={"first": 2, "after": body["page_info"]["end_cursor"]},
        )
        body = second.json()

        assert [e["node"]["title"] for e in body["edges"]] == ["Gamma"]
        assert body["page_info"]["has_next_page"] is False
        assert body["page_info"]["has_previous_page"] is True

    async def test_list_filters_and_order(self, client, owner, make_movie, make_genre):
        drama = await make_genre("Drama")
        await make_movie(owner, title="Short", duration=80, rating=6.0)
        await make_movie(owner, title="Long", duration=180, rating=9.0, genres=[drama])
        await make_movie(owner, title="Medium", duration=120, rating=7.5, genres=[drama])

        response = await client.get(
            f"{API}/movies",
            params={
                "min_duration": 100,
                "genre_ids": [drama.id],
                "order_field": "rating",
                "order_direction": "desc",
            },
        )

        body = response.json()
        assert [e["node"]["title"] for e in body["edges"]] == ["Long", "Medium"]
        assert body["total_count"] == 2

    async def test_list_by_status(self, client, owner, make_movie):
        await make_movie(owner, title="Out", status="Released")
        await make_movie(owner, title="Soon")

        response = await client.get(f"{API}/movies", params={"status": "Released"})

        assert [e["node"]["title"] for e in response.json()["edges"]] == ["Out"]

    async def test_list_mine(self, client, owner, other_user, make_movie, other_headers):
        await make_movie(owner, title="Owned")
        await make_movie(other_user, title="Theirs")

        response = await client.get(f"{API}/movies", params={"mine": True}, headers=other_headers)

        assert [e["node"]["title"] for e in response.json()["edges"]] == ["Theirs"]

    async def test_list_mine_requires_auth(self, client):
        response = await client.get(f"{API}/movies", params={"mine": True})

        assert response.status_code == 401

    @pytest.mark.parametrize(
        ("params", "problem_type"),
        [
            ({"first": 0}, "validation-error"),
            ({"first": 1000}, "page-size-too-large"),
            ({"min_duration": 0}, "validation-error"),
            ({"order_field": "budget"}, "validation-error"),
        ],
    )
    async def test_list_rejects_bad_parameters(self, client, params, problem_type):
        response = await client.get(f"{API}/movies", params=params)

        assert response.status_code == 422
        assert response.json()["type"] == problem_type


class TestMovieWrites:
    async def test_create(self, client, owner, owner_headers, make_genre):
        drama = await make_genre("Drama")

        response = await client.post(
            f"{API}/movies",
            json={
                "title": "Sicario",
                "budget": 30_000_000,
                "revenue": 84_900_000,
                "duration": 121,
                "status": "Released",
                "genre_ids": [drama.id],
            },
            headers=owner_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["created_by_id"] == owner.id
        assert body["profit"] == 54_900_000
        assert [g["name"] for g in body["genres"]] == ["Drama"]

    async def test_create_rejects_invalid_payload(self, client, owner_headers):
        response = await client.post(
            f"{API}/movies",
            json={"title": "Bad", "rating": 11, "duration": 0},
            headers=owner_headers,
        )

        assert response.status_code == 422
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"body.rating", "body.duration"}

    async def test_create_with_unknown_genre(self, client, owner_headers):
        response = await client.post(
            f"{API}/movies",
            json={"title": "Heat", "genre_ids": [42]},
            headers=owner_headers,
        )

        assert response.status_code == 404
        assert response.json()["type"] == "genre-not-found"

    async def test_owner_updates(self, client, heat, owner_headers):
        response = await client.patch(
            f"{API}/movies/{heat.id}",
            json={"tagline": "A Los Angeles crime saga", "genre_ids": []},
            headers=owner_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["tagline"] == "A Los Angeles crime saga"
        assert body["genres"] == []
        assert body["duration"] == 170

    async def test_other_user_cannot_update(self, client, heat, other_headers):
        response = await client.patch(
            f"{API}/movies/{heat.id}",
            json={"title": "Stolen"},
            headers=other_headers,
        )

        assert response.status_code == 403
        assert response.headers["content-type"].startswith(PROBLEM_JSON)
        assert response.json()["type"] == "movie-not-owner"
        assert response.json()["detail"] == "not authorized"

        current = await client.get(f"{API}/movies/{heat.id}")
        assert current.json()["title"] == "Heat"

    async def test_other_user_cannot_delete(self, client, heat, storage, other_headers):
        response = await client.delete(f"{API}/movies/{heat.id}", headers=other_headers)

        assert response.status_code == 403
        assert (await client.get(f"{API}/movies/{heat.id}")).status_code == 200
        assert storage.deleted == []

    async def test_owner_deletes(self, client, heat, storage, owner_headers):
        response = await client.delete(f"{API}/movies/{heat.id}", headers=owner_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": True}
        assert (await client.get(f"{API}/movies/{heat.id}")).status_code == 404
        assert storage.deleted == ["images/heat.jpg"]

    async def test_delete_missing(self, client, owner_headers):
        response = await client.delete(f"{API}/movies/999", headers=owner_headers)

        assert response.status_code == 404


class TestGenresApi:
    async def test_list(self, client, make_genre):
        await make_genre("Drama")
        await make_genre("Comedy")

        response = await client.get(f"{API}/genres")

        assert [g["name"] for g in response.json()] == ["Comedy", "Drama"]

    async def test_create_requires_auth(self, client):
        response = await client.post(f"{API}/genres", json={"name": "Noir"})

        assert response.status_code == 401

    async def test_create_and_conflict(self, client, owner_headers):
        created = await client.post(f"{API}/genres", json={"name": "Noir"}, headers=owner_headers)
        duplicate = await client.post(f"{API}/genres", json={"name": "NOIR"}, headers=owner_headers)

        assert created.status_code == 201
        assert created.json()["name"] == "Noir"
        assert duplicate.status_code == 409
        assert duplicate.json()["type"] == "genre-name-exists"


class TestUploadsApi:
    async def test_presign(self, client, storage, owner_headers):
        response = await client.post(
            f"{API}/uploads/presign",
            json={"folder": "images", "filename": "poster.png", "content_type": "image/png"},
            headers=owner_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["key"].startswith("images/")
        assert body["key"].endswith(".png")
        assert body["upload_url"].startswith("https://storage.test/")
        assert storage.presigned[0][0] == body["key"]

    async def test_folder_not_allowed(self, client, owner_headers):
        response = await client.post(
            f"{API}/uploads/presign",
            json={"folder": "etc", "filename": "passwd", "content_type": "text/plain"},
            headers=owner_headers,
        )

        assert response.status_code == 422
        assert response.json()["type"] == "upload-folder-not-allowed"


class TestOperational:
    async def test_health(self, client):
        response = await client.get(f"{API}/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "database": "ok"}

    async def test_request_id_is_echoed(self, client):
        response = await client.get(f"{API}/genres", headers={"X-Request-ID": "req-123"})

        assert response.headers["x-request-id"] == "req-123"

    async def test_request_id_in_problem(self, client):
        response = await client.get(f"{API}/movies/999", headers={"X-Request-ID": "req-404"})

        assert response.json()["request_id"] == "req-404"
