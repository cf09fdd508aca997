from .closest_to_pin import (
    assign_winner,
    clear_winner,
    player_ctp_winnings,
    remaining_prize,
    total_awarded,
)
from .leaderboard import (
    TOTAL_SCOPE,
    Leaderboard,
    LeaderboardEntry,
    WinningsBreakdown,
    build_leaderboard,
    leaderboard_rows,
    round_winnings,
    total_winnings_by_player,
)
from .scramble import (
    TeamPayout,
    calculate_scramble_payouts,
    calculate_team_results,
    completed_teams,
    player_scramble_winnings,
    recompute_scramble,
)
from .skins import SkinsOutcome, calculate_skins, player_skins_winnings, recompute_skins
from .strokes import group_allowance, net_score, net_score_for_hole, strokes_on_hole

__all__ = [
    "TOTAL_SCOPE",
    "Leaderboard",
    "LeaderboardEntry",
    "SkinsOutcome",
    "TeamPayout",
    "WinningsBreakdown",
    "assign_winner",
    "build_leaderboard",
    "calculate_scramble_payouts",
    "calculate_skins",
    "calculate_team_results",
    "clear_winner",
    "completed_teams",
    "group_allowance",
    "leaderboard_rows",
    "net_score",
    "net_score_for_hole",
    "player_ctp_winnings",
    "player_scramble_winnings",
    "player_skins_winnings",
    "recompute_scramble",
    "recompute_skins",
    "remaining_prize",
    "round_winnings",
    "strokes_on_hole",
    "total_awarded",
    "total_winnings_by_player",
]
