import asyncio

import pytest
from fastapi import HTTPException

from api.main import build_store, create_app
from api.routers import leaderboard, rounds, tournament
from api.routers.rounds import (
    ClosestToPinUpdate,
    SkinsScoreUpdate,
    TeamNameUpdate,
    TeamScoreUpdate,
    TeamSlotUpdate,
)
from api.settings import Settings
from storage.seed import build_seed_tournament
from storage.exceptions import StorageError
from storage.store import JsonFileTournamentStore, MemoryTournamentStore


@pytest.fixture
def store():
    return MemoryTournamentStore()


# ================================================================
# Tournament
# ================================================================

@pytest.mark.asyncio
async def test_get_tournament_returns_seed(store):
    data = await tournament.get_tournament(store=store)
    assert len(data.rounds) == 3


@pytest.mark.asyncio
async def test_save_tournament_requires_privilege(store):
    blob = build_seed_tournament().model_dump(mode="json")
    with pytest.raises(HTTPException) as exc:
        await tournament.save_tournament(data=blob, privileged=False, store=store, lock=asyncio.Lock())
    assert exc.value.status_code == 403


@pytest.mark.asyncio
async def test_save_tournament_rejects_bad_shape(store):
    with pytest.raises(HTTPException) as exc:
        await tournament.save_tournament(data={"rounds": []}, privileged=True, store=store, lock=asyncio.Lock())
    assert exc.value.status_code == 400


@pytest.mark.asyncio
async def test_save_and_clear_tournament(store):
    blob = build_seed_tournament().model_dump(mode="json")
    blob["rounds"][0]["name"] = "Opening Day"

    resp = await tournament.save_tournament(data=blob, privileged=True, store=store, lock=asyncio.Lock())
    assert resp.success is True
    assert (await store.load()).rounds[0].name == "Opening Day"

    with pytest.raises(HTTPException) as exc:
        await tournament.clear_tournament(privileged=False, store=store, lock=asyncio.Lock())
    assert exc.value.status_code == 403

    await tournament.clear_tournament(privileged=True, store=store, lock=asyncio.Lock())
    assert (await store.load()).rounds[0].name == "Thursday - Payout"


# ================================================================
# Rounds
# ================================================================

@pytest.mark.asyncio
async def test_skins_score_entry_and_standings(store):
    lock = asyncio.Lock()
    updated = await rounds.update_skins_score(
        round_id="friday", req=SkinsScoreUpdate(player_id="12", hole=7, score=4),
        privileged=True, store=store, lock=lock,
    )
    assert updated.skins_game.skin_results[0].winner == "12"

    outcome = await rounds.get_skins(round_id="friday", store=store)
    assert outcome.skins_won == 1
    assert outcome.pot_per_skin == 360


class FlakyReadStore(MemoryTournamentStore):
    """Fails the next read, then behaves normally."""

    def __init__(self):
        super().__init__()
        self.fail_next_read = False

    async def _read(self):
        if self.fail_next_read:
            self.fail_next_read = False
            raise StorageError("connection reset")
        return await super()._read()


@pytest.mark.asyncio
async def test_failed_read_during_score_entry_keeps_saved_data():
    store = FlakyReadStore()
    lock = asyncio.Lock()
    for hole in range(1, 10):
        await rounds.update_skins_score(
            round_id="thursday", req=SkinsScoreUpdate(player_id="1", hole=hole, score=4),
            privileged=True, store=store, lock=lock,
        )

    store.fail_next_read = True
    with pytest.raises(HTTPException) as exc:
        await rounds.update_skins_score(
            round_id="thursday", req=SkinsScoreUpdate(player_id="2", hole=1, score=5),
            privileged=True, store=store, lock=lock,
        )
    assert exc.value.status_code == 503

    thursday = (await store.load()).get_round("thursday")
    assert len(thursday.skins_game.scores["1"]) == 9
    assert "2" not in thursday.skins_game.scores


@pytest.mark.asyncio
async def test_invalid_stored_data_blocks_score_entry(store):
    await store._write({"rounds": "garbage"})

    with pytest.raises(HTTPException) as exc:
        await rounds.update_skins_score(
            round_id="thursday", req=SkinsScoreUpdate(player_id="1", hole=1, score=4),
            privileged=True, store=store, lock=asyncio.Lock(),
        )
    assert exc.value.status_code == 503
    assert await store._read() == {"rounds": "garbage"}


@pytest.mark.asyncio
async def test_mutations_require_privilege(store):
    with pytest.raises(HTTPException) as exc:
        await rounds.update_skins_score(
            round_id="friday", req=SkinsScoreUpdate(player_id="12", hole=7, score=4),
            privileged=False, store=store, lock=asyncio.Lock(),
        )
    assert exc.value.status_code == 403
    assert (await store.load()).rounds[1].skins_game.scores == {}


@pytest.mark.asyncio
async def test_unknown_round_and_bad_targets(store):
    lock = asyncio.Lock()
    with pytest.raises(HTTPException) as exc:
        await rounds.update_team_score(
            round_id="sunday", team_id="team-1", req=TeamScoreUpdate(total_score=60),
            privileged=True, store=store, lock=lock,
        )
    assert exc.value.status_code == 404

    with pytest.raises(HTTPException) as exc:
        await rounds.update_team_score(
            round_id="thursday", team_id="team-9", req=TeamScoreUpdate(total_score=60),
            privileged=True, store=store, lock=lock,
        )
    assert exc.value.status_code == 400

    with pytest.raises(HTTPException) as exc:
        await rounds.get_scramble(round_id="sunday", store=store)
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_closest_to_pin_endpoints(store):
    lock = asyncio.Lock()
    updated = await rounds.set_closest_to_pin_winner(
        round_id="thursday", hole=17, req=ClosestToPinUpdate(player_id="9", distance="2 ft"),
        privileged=True, store=store, lock=lock,
    )
    assert updated.closest_to_pin_game.get_hole(17).winner == "9"

    cleared = await rounds.clear_closest_to_pin_winner(
        round_id="thursday", hole=17, privileged=True, store=store, lock=lock,
    )
    assert cleared.closest_to_pin_game.get_hole(17).distance is None

    with pytest.raises(HTTPException) as exc:
        await rounds.set_closest_to_pin_winner(
            round_id="thursday", hole=4, req=ClosestToPinUpdate(player_id="9"),
            privileged=True, store=store, lock=lock,
        )
    assert exc.value.status_code == 400


@pytest.mark.asyncio
async def test_scramble_endpoints(store):
    lock = asyncio.Lock()
    for slot, player_id in enumerate(["1", "6", "12"]):
        await rounds.update_team_slot(
            round_id="saturday", team_id="team-2", slot=slot, req=TeamSlotUpdate(player_id=player_id),
            privileged=True, store=store, lock=lock,
        )
    await rounds.update_team_name(
        round_id="saturday", team_id="team-2", req=TeamNameUpdate(name="Birdie Hunters"),
        privileged=True, store=store, lock=lock,
    )
    await rounds.update_team_score(
        round_id="saturday", team_id="team-2", req=TeamScoreUpdate(total_score=61),
        privileged=True, store=store, lock=lock,
    )

    with pytest.raises(HTTPException) as exc:
        await rounds.update_team_slot(
            round_id="saturday", team_id="team-3", slot=0, req=TeamSlotUpdate(player_id="1"),
            privileged=True, store=store, lock=lock,
        )
    assert exc.value.status_code == 400

    with pytest.raises(HTTPException) as exc:
        await rounds.update_team_slot(
            round_id="saturday", team_id="team-3", slot=0, req=TeamSlotUpdate(player_id="not-a-player"),
            privileged=True, store=store, lock=lock,
        )
    assert exc.value.status_code == 400

    standings = await rounds.get_scramble(round_id="saturday", store=store)
    assert standings.results[0].team_id == "team-2"
    assert standings.payouts[0].team_payout == 280
    assert standings.payouts[0].per_player == pytest.approx(93.333, rel=1e-3)

    board = await leaderboard.get_leaderboard(scope="saturday", store=store)
    assert [e.total for e in board.entries[:3]] == [93, 93, 93]


# ================================================================
# Leaderboard
# ================================================================

@pytest.mark.asyncio
async def test_leaderboard_endpoints(store):
    board = await leaderboard.get_leaderboard(scope="total", store=store)
    assert board.prize_pool == 1800
    assert len(board.entries) == 18

    report = await leaderboard.get_leaderboard_report(scope="thursday", store=store)
    assert report.title == "Thursday Payout"
    assert report.rows[0]["total"] == "$0.00"

    with pytest.raises(HTTPException) as exc:
        await leaderboard.get_leaderboard(scope="sunday", store=store)
    assert exc.value.status_code == 404


# ================================================================
# App wiring
# ================================================================

def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TOURNAMENT_STORAGE", "FILE")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("ADMIN_ROLE", "organizer")

    settings = Settings.from_env()
    assert settings.storage == "file"
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.admin_role == "organizer"


@pytest.mark.asyncio
async def test_build_store_picks_backend(tmp_path):
    file_store = await build_store(Settings(storage="file", data_file=str(tmp_path / "t.json")))
    assert isinstance(file_store, JsonFileTournamentStore)

    assert isinstance(await build_store(Settings()), MemoryTournamentStore)

    with pytest.raises(RuntimeError):
        await build_store(Settings(storage="postgres"))


def test_create_app_routes():
    app = create_app(Settings())
    paths = set(app.openapi()["paths"])

    assert "/api/health" in paths
    assert "/api/tournament" in paths
    assert "/api/leaderboard" in paths
    assert "/api/rounds/{round_id}/scramble/teams/{team_id}/slots/{slot}" in paths
