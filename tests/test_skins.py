import pytest

from models import HoleScore, Player, SkinsGame, tribute_course
from payouts.skins import calculate_skins, player_skins_winnings, recompute_skins


def _game(scores, total_pot=360):
    """scores: {player_id: {hole: gross}}"""
    players = [
        Player(id="a", name="Ethan", group="A"),
        Player(id="b", name="Steve", group="B"),
        Player(id="d", name="Greg", group="D"),
    ]
    course = tribute_course()
    return SkinsGame(
        players=players,
        total_pot=total_pot,
        scores={
            pid: [
                HoleScore(hole=hole, score=gross, par=course.get_hole(hole).par if course.get_hole(hole) else 4)
                for hole, gross in sorted(holes.items())
            ]
            for pid, holes in scores.items()
        },
    )


def test_unique_low_net_wins_and_ties_void_the_hole():
    game = _game({
        "a": {1: 4, 2: 3, 8: 4, 17: 3},
        "b": {1: 3, 17: 4},
        "d": {1: 5, 2: 5, 8: 5, 17: 4},
    })
    outcome = calculate_skins(game, tribute_course())

    by_hole = {r.hole: r for r in outcome.results}
    assert sorted(by_hole) == [1, 2, 8, 17]

    assert by_hole[1].winner == "b"        # 3 gross, no stroke on hcp 13
    assert by_hole[1].net_score == 3
    assert by_hole[2].winner == "a"
    assert by_hole[8].winner is None       # a 4 vs d 5-1 on the hardest hole
    assert by_hole[8].net_score == 4
    assert by_hole[17].winner is None      # a 3 vs d 4-1 on the easiest hole

    assert outcome.skins_won == 2
    assert outcome.pot_per_skin == 180
    assert by_hole[1].pot == 180 and by_hole[8].pot == 0
    assert player_skins_winnings("a", outcome.results) == 180
    assert player_skins_winnings("b", outcome.results) == 180
    assert player_skins_winnings("d", outcome.results) == 0


def test_no_skins_won_pays_nothing():
    game = _game({"a": {3: 4}, "b": {3: 4}})
    outcome = calculate_skins(game, tribute_course())

    assert len(outcome.results) == 1
    assert outcome.results[0].winner is None
    assert outcome.skins_won == 0
    assert outcome.pot_per_skin == 0
    assert sum(r.pot for r in outcome.results) == 0


def test_empty_and_single_entrant_rounds():
    assert calculate_skins(_game({}), tribute_course()).results == []

    outcome = calculate_skins(_game({"d": {5: 6}}), tribute_course())
    assert outcome.results[0].winner == "d"
    assert outcome.results[0].net_score == 5   # hcp 5 hole, D gets a stroke
    assert outcome.pot_per_skin == 360


def test_pot_sums_to_total_when_split_unevenly():
    # seven holes each won outright by a
    game = _game({"a": {h: 3 for h in range(1, 8)}, "b": {h: 6 for h in range(1, 8)}})
    outcome = calculate_skins(game, tribute_course())

    assert outcome.skins_won == 7
    assert sum(r.pot for r in outcome.results) == pytest.approx(360, abs=0.01)


def test_unplayed_unknown_and_off_roster_scores_are_ignored():
    game = _game({"a": {4: 5}, "b": {4: 6}})
    game.scores["a"].append(HoleScore(hole=19, score=2, par=4))   # not on the course
    game.scores["b"].append(HoleScore(hole=6, score=0, par=3))    # not played yet
    game.scores["ghost"] = [HoleScore(hole=4, score=1, par=5)]    # not on the roster

    outcome = calculate_skins(game, tribute_course())
    assert [r.hole for r in outcome.results] == [4]
    assert outcome.results[0].winner == "a"


def test_recompute_is_idempotent_and_writes_back():
    game = _game({"a": {1: 4, 2: 4}, "b": {1: 5, 2: 3}})
    course = tribute_course()

    first = recompute_skins(game, course)
    second = recompute_skins(game, course)

    assert first == second
    assert game.skin_results == second.results
    assert game.pot_per_hole == 180


def test_new_score_changes_pot_for_every_hole():
    game = _game({"a": {1: 3, 2: 3}, "b": {1: 5, 2: 5}})
    course = tribute_course()
    assert recompute_skins(game, course).pot_per_skin == 180

    # b ties hole 2, so hole 1 now carries the whole pot
    game.scores["b"] = [HoleScore(hole=1, score=5, par=4), HoleScore(hole=2, score=3, par=4)]
    outcome = recompute_skins(game, course)
    assert outcome.skins_won == 1
    assert game.skin_results[0].pot == 360
