"""
Game Inventory — HTTP Route Tests
==================================

What:  End-to-end requests through the full app (middleware, handlers,
       templates) with the in-memory store.
How:   HTTPX AsyncClient over ASGITransport; redirects are not followed.

What we test:
    ✅ Pages render with stored data (escaped exactly once)
    ✅ Successful writes answer 303 with the record's url
    ✅ Invalid forms redisplay with every message
    ✅ Unknown or malformed ids give the 404 page
    ✅ Blocked console delete shows the dependent games
    ✅ Store faults give the 500 page; /health reports status
"""

import uuid
from unittest.mock import AsyncMock

import pytest

from game_inventory.exceptions import DatabaseError


class TestHomePage:

    @pytest.mark.asyncio
    async def test_counts(self, test_client, seeded):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "<strong>Games:</strong> 1" in response.text
        assert "<strong>Consoles:</strong> 2" in response.text

    @pytest.mark.asyncio
    async def test_request_id_header(self, test_client):
        response = await test_client.get("/", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"


class TestConsolePages:

    @pytest.mark.asyncio
    async def test_list(self, test_client, seeded):
        response = await test_client.get("/consoles")

        assert response.status_code == 200
        assert response.text.index("Nintendo Switch") < response.text.index("PlayStation 5")
        assert seeded["switch"].url in response.text

    @pytest.mark.asyncio
    async def test_detail_lists_games(self, test_client, seeded):
        response = await test_client.get(seeded["switch"].url)

        assert response.status_code == 200
        assert "Tears of the Kingdom" in response.text

    @pytest.mark.asyncio
    async def test_create_redirects_to_new_console(self, test_client, store):
        response = await test_client.post(
            "/console/create", data={"name": "Sega Saturn", "description": "32-bit"}
        )

        (console,) = store.consoles.values()
        assert response.status_code == 303
        assert response.headers["location"] == f"/console/{console.id}"

    @pytest.mark.asyncio
    async def test_create_duplicate_redirects_to_existing(self, test_client, store, seeded):
        response = await test_client.post(
            "/console/create", data={"name": "PlayStation 5", "description": "Again"}
        )

        assert response.status_code == 303
        assert response.headers["location"] == seeded["ps5"].url
        assert len(store.consoles) == 2

    @pytest.mark.asyncio
    async def test_invalid_form_redisplayed(self, test_client, store):
        response = await test_client.post(
            "/console/create", data={"name": "ab", "description": ""}
        )

        assert response.status_code == 200
        assert "Console name must contain at least 3 characters" in response.text
        assert "Description must not be empty" in response.text
        assert 'value="ab"' in response.text
        assert store.consoles == {}

    @pytest.mark.asyncio
    async def test_markup_escaped_once(self, test_client, store):
        response = await test_client.post(
            "/console/create", data={"name": "<i>Halo</i> Box", "description": "x"}
        )
        page = await test_client.get(response.headers["location"])

        assert "&lt;i&gt;Halo&lt;/i&gt; Box" in page.text
        assert "<i>Halo</i>" not in page.text
        assert "&amp;lt;" not in page.text

    @pytest.mark.asyncio
    async def test_update(self, test_client, store, seeded):
        url = seeded["ps5"].url

        response = await test_client.post(
            f"{url}/update", data={"name": "PS5 Slim", "description": "Smaller"}
        )

        assert response.status_code == 303
        assert response.headers["location"] == url
        assert store.consoles[seeded["ps5"].id].name == "PS5 Slim"

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, test_client, store):
        response = await test_client.post(
            f"/console/{uuid.uuid4()}/update", data={"name": "Neo Geo", "description": "x"}
        )

        assert response.status_code == 404
        assert store.consoles == {}

    @pytest.mark.asyncio
    async def test_unknown_id(self, test_client):
        response = await test_client.get(f"/console/{uuid.uuid4()}")

        assert response.status_code == 404
        assert "Console not found" in response.text

    @pytest.mark.asyncio
    async def test_malformed_id(self, test_client):
        response = await test_client.get("/console/not-a-uuid")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_create_path_is_not_an_id(self, test_client):
        response = await test_client.get("/console/create")

        assert response.status_code == 200
        assert "Create Console" in response.text

    @pytest.mark.asyncio
    async def test_delete_blocked_lists_games(self, test_client, store, seeded):
        response = await test_client.post(f"{seeded['switch'].url}/delete")

        assert response.status_code == 200
        assert "Delete the following games" in response.text
        assert seeded["zelda"].url in response.text
        assert seeded["switch"].id in store.consoles

    @pytest.mark.asyncio
    async def test_delete(self, test_client, store, seeded):
        response = await test_client.post(f"{seeded['ps5'].url}/delete")

        assert response.status_code == 303
        assert response.headers["location"] == "/consoles"
        assert seeded["ps5"].id not in store.consoles

    @pytest.mark.asyncio
    async def test_delete_page_for_missing_console(self, test_client):
        response = await test_client.get(f"/console/{uuid.uuid4()}/delete")

        assert response.status_code == 303
        assert response.headers["location"] == "/consoles"


class TestGamePages:

    @pytest.mark.asyncio
    async def test_create_form_lists_consoles(self, test_client, seeded):
        response = await test_client.get("/game/create")

        assert response.status_code == 200
        assert f'value="{seeded["switch"].id}"' in response.text
        assert f'value="{seeded["ps5"].id}"' in response.text

    @pytest.mark.asyncio
    async def test_create(self, test_client, store, seeded):
        response = await test_client.post("/game/create", data={
            "name": "Chrono Trigger",
            "description": "RPG",
            "console": str(seeded["switch"].id),
            "price": "19.99",
            "number_in_stock": "5",
        })

        assert response.status_code == 303
        game_id = uuid.UUID(response.headers["location"].rsplit("/", 1)[1])
        assert store.games[game_id].price == 19.99

        page = await test_client.get(response.headers["location"])
        assert "Chrono Trigger" in page.text
        assert "19.99" in page.text
        assert "Nintendo Switch" in page.text

    @pytest.mark.asyncio
    async def test_invalid_create_keeps_console_choices(self, test_client, store, seeded):
        response = await test_client.post("/game/create", data={
            "name": "Chrono Trigger",
            "description": "RPG",
            "console": str(seeded["ps5"].id),
            "price": "cheap",
            "number_in_stock": "many",
        })

        assert response.status_code == 200
        assert "Price must be a number" in response.text
        assert "Number in stock must be a number" in response.text
        assert f'value="{seeded["ps5"].id}" selected' in response.text
        assert len(store.games) == 1

    @pytest.mark.asyncio
    async def test_list(self, test_client, seeded):
        response = await test_client.get("/games")

        assert response.status_code == 200
        assert seeded["zelda"].url in response.text

    @pytest.mark.asyncio
    async def test_update_form_preselects_console(self, test_client, seeded):
        response = await test_client.get(f"{seeded['zelda'].url}/update")

        assert response.status_code == 200
        assert f'value="{seeded["switch"].id}" selected' in response.text

    @pytest.mark.asyncio
    async def test_unknown_and_malformed_ids(self, test_client):
        assert (await test_client.get(f"/game/{uuid.uuid4()}")).status_code == 404
        assert (await test_client.get("/game/42/update")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete(self, test_client, store, seeded):
        response = await test_client.post(f"{seeded['zelda'].url}/delete")

        assert response.status_code == 303
        assert response.headers["location"] == "/games"
        assert store.games == {}


class TestErrorsAndHealth:

    @pytest.mark.asyncio
    async def test_unknown_path(self, test_client):
        response = await test_client.get("/no/such/page")

        assert response.status_code == 404
        assert "text/html" in response.headers["content-type"]

    @pytest.mark.asyncio
    async def test_store_fault_renders_500(self, test_client, store):
        store.list_consoles = AsyncMock(side_effect=DatabaseError())

        response = await test_client.get("/consoles", headers={"X-Request-ID": "req42"})

        assert response.status_code == 500
        assert "An internal error occurred" in response.text
        assert "req42" in response.text

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "connected"
        assert data["version"] == "1.0.0"

    @pytest.mark.asyncio
    async def test_health_unhealthy(self, test_client, store):
        await store.close()

        response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
