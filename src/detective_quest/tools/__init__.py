from detective_quest.tools.game_tools import (
    enter_mansion,
    look_around,
    move,
    review_clue_ledger,
    list_suspects,
    make_accusation,
)

__all__ = [
    "enter_mansion",
    "look_around",
    "move",
    "review_clue_ledger",
    "list_suspects",
    "make_accusation",
]
