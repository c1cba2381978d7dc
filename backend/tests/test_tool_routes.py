"""Integration tests for tool and artifact message routes."""

from __future__ import annotations

from backend.services.host_bridge import host_bridge

# ── health + listing ────────────────────────────────────────────────────────


class TestHealth:
    async def test_health(self, async_client):
        res = await async_client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}


class TestListTools:
    async def test_list_tools(self, async_client):
        res = await async_client.get("/api/tools")
        assert res.status_code == 200
        names = [tool["name"] for tool in res.json()]
        assert "record_edit" in names
        assert "record_view_query_result" in names


# ── tool calls ──────────────────────────────────────────────────────────────


class TestRunTool:
    async def test_record_edit(self, async_client, account_text):
        res = await async_client.post("/api/tools/record_edit", json={"text": account_text})
        assert res.status_code == 200

        body = res.json()
        assert body["isError"] is False
        text, resource = body["content"]
        assert text["type"] == "text"
        assert resource["uri"] == "ui://record/edit/001"
        assert resource["mimeType"] == "text/html"
        assert resource["text"].startswith("<!doctype html>")

    async def test_parse_error_is_still_200(self, async_client):
        res = await async_client.post("/api/tools/record_edit", json={"text": "no fields here"})
        assert res.status_code == 200
        body = res.json()
        assert body["isError"] is True
        assert body["content"][0]["text"].startswith("Error parsing object text:")

    async def test_unknown_tool(self, async_client):
        res = await async_client.post("/api/tools/nope", json={})
        assert res.status_code == 200
        assert res.json()["isError"] is True

    async def test_table(self, async_client, account_text, globex_text):
        res = await async_client.post(
            "/api/tools/record_view_table",
            json={"records": [account_text, globex_text], "object_type": "Account"},
        )
        body = res.json()
        assert body["isError"] is False
        assert body["content"][1]["uri"] == "ui://records/table/Account/001"


# ── artifact messages ───────────────────────────────────────────────────────


class TestArtifactMessages:
    async def test_size_change(self, async_client):
        res = await async_client.post(
            "/api/artifacts/messages",
            json={"uri": "ui://record/edit/001", "message": {"type": "ui-size-change", "payload": {"height": 416}}},
        )
        assert res.status_code == 200
        assert res.json()["kind"] == "resize"
        assert res.json()["height"] == 416

    async def test_save_then_save_again(self, async_client):
        message = {
            "type": "prompt",
            "payload": {"prompt": "No changes detected.", "params": {"recordData": {"Name": "Acme"}}},
        }
        first = await async_client.post("/api/artifacts/messages", json={"uri": "ui://record/edit/001", "message": message})
        second = await async_client.post("/api/artifacts/messages", json={"uri": "ui://record/edit/001", "message": message})

        assert first.json()["kind"] == "prompt"
        assert first.json()["record_data"] == {"Name": "Acme"}
        assert second.json()["kind"] == "ignored"

    async def test_cancel(self, async_client):
        res = await async_client.post(
            "/api/artifacts/messages",
            json={"uri": "ui://record/edit/001", "message": {"type": "action", "payload": {"action": "cancel"}}},
        )
        assert res.json()["kind"] == "dismiss"

    async def test_undecodable_message(self, async_client):
        res = await async_client.post(
            "/api/artifacts/messages",
            json={"uri": "ui://record/edit/001", "message": {"type": "explode", "payload": {}}},
        )
        assert res.status_code == 422
        assert "Unknown message type" in res.json()["detail"]

    async def test_missing_uri(self, async_client):
        res = await async_client.post("/api/artifacts/messages", json={"message": {}})
        assert res.status_code == 422

    async def test_invented_uris_do_not_grow_state(self, async_client, monkeypatch):
        monkeypatch.setattr(host_bridge, "max_artifacts", 10)
        for i in range(30):
            res = await async_client.post(
                "/api/artifacts/messages",
                json={"uri": f"ui://junk/{i}", "message": {"type": "ui-size-change", "payload": {"height": 100}}},
            )
            assert res.status_code == 200
        assert len(host_bridge) == 10
