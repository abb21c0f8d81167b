import pytest
from httpx import ASGITransport, AsyncClient

from draftrec.api import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest.mark.anyio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_normalize_picks_skips_unidentified(client):
    payload = {
        "picks": [
            {"player_id": "x", "round": 2, "pick_in_round": 5},
            {"round": 1, "pick_in_round": 1},
        ],
        "teams": 10,
    }

    response = await client.post("/picks/normalize", json=payload)

    assert response.status_code == 200
    assert response.json() == [{"playerId": "x", "meta": {"overall": 15, "round": 2, "roundPick": 5}}]


@pytest.mark.anyio
async def test_player_rows_fuse_nested_records(client):
    payload = {
        "players": [
            {"player": {"id": 4034, "full_name": "Christian McCaffrey", "position": "RB", "team": "sf", "bye_week": "9"}},
            "not-a-record",
        ]
    }

    response = await client.post("/players/rows", json=payload)

    assert response.status_code == 200
    rows = response.json()
    assert len(rows) == 1
    assert rows[0]["player_id"] == "4034"
    assert rows[0]["team"] == "sf"
    assert rows[0]["bye_week"] == 9
    assert "rank" not in rows[0]


@pytest.mark.anyio
async def test_available_rows(client):
    payload = {
        "rows": [
            {"player_id": "a", "name": "A", "position": "RB", "rank": 2},
            {"player_id": "b", "name": "B", "position": "WR", "rank": 1, "picked": {"overall": 3}},
            {"player_id": "c", "name": "C", "position": "RB"},
        ],
        "showUnranked": True,
    }

    response = await client.post("/players/available", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert [row["player_id"] for row in body] == ["a", "c"]
    assert body[0] == {"player_id": "a", "name": "A", "position": "RB", "rank": 2}


@pytest.mark.anyio
async def test_recommended_lineups(client):
    payload = {
        "ownedIds": ["p1", "p2"],
        "allPlayers": {"RB": {"p1": {"rank": 5}, "p2": {"rank": 3}}},
        "slotTypes": ["RB", "RB", "FLEX"],
    }

    response = await client.post("/lineups/recommended", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["fantasyPros"] == [
        {"position": "RB", "slot": "RB1", "playerId": "p2"},
        {"position": "RB", "slot": "RB2", "playerId": "p1"},
        {"position": "-", "slot": "FLEX1", "playerId": "empty-FLEX-1"},
    ]
    assert body["borisChen"] == body["fantasyPros"]


@pytest.mark.anyio
async def test_recommended_lineups_rejects_malformed_table(client):
    payload = {"ownedIds": [], "allPlayers": {"RB": ["p1"]}, "slotTypes": ["RB"]}

    response = await client.post("/lineups/recommended", json=payload)

    assert response.status_code == 400


@pytest.mark.anyio
async def test_recommended_lineups_skip_bad_entries(client):
    payload = {
        "ownedIds": ["p1", "p2"],
        "allPlayers": {"RB": {"p1": {"rank": 5}, "p2": {"rank": "n/a"}}},
        "slotTypes": ["RB"],
    }

    response = await client.post("/lineups/recommended", json=payload)

    assert response.status_code == 200
    assert response.json()["borisChen"] == [{"position": "RB", "slot": "RB1", "playerId": "p1"}]


@pytest.mark.anyio
async def test_draft_view_model(client):
    payload = {
        "picks": [
            {"player_id": "2", "round": 1, "pick_in_round": 1, "roster_id": 7},
            {"player_id": "1", "round": 1, "pick_in_round": 2, "roster_id": 3},
        ],
        "borisChen": [
            {"player_id": "1", "name": "Quinn Passer", "position": "QB", "rank": 1},
            {"player_id": "2", "name": "Rob Runner", "position": "RB", "rank": 2},
            {"player_id": "3", "name": "Wes Wideout", "position": "WR", "rank": 3},
        ],
        "roster": ["QB", "RB", "WR"],
        "drafterIds": ["7"],
        "teams": 12,
        "topLimit": 1,
    }

    response = await client.post("/draft/view-model", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert [row["player_id"] for row in body["available"]] == ["3"]
    assert body["myPlayers"][0]["draftedByMe"] is True
    assert body["picksMade"] == 2
    assert body["nextPick"] == "1.03"
    assert body["needs"] == {"QB": 1, "RB": 0, "WR": 1}
    assert body["lineups"]["borisChen"][1] == {"position": "RB", "slot": "RB1", "playerId": "2"}
    assert [row["player_id"] for row in body["topAvailable"]["WR"]] == ["3"]


@pytest.mark.anyio
async def test_draft_view_model_unknown_preset(client):
    response = await client.post("/draft/view-model", json={"roster": "NOPE"})

    assert response.status_code == 400
