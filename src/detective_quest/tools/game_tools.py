"""
Custom CrewAI Tools for Detective Quest
Tools for a detective agent to explore the mansion and make an accusation
through the same engines the console game uses.

Exploration Rules:
- Start by entering the mansion, then move left or right one room at a time
- There is no way back - every move goes deeper into the mansion
- Clues are collected automatically when a room is entered
- Exploration ends at a room with no exits, or when you leave
- Accuse only after exploration has ended
"""

from typing import List

from crewai.tools import tool

from detective_quest.game_state import collected_clue_lines, get_game_session
from detective_quest.navigation import Direction, Navigator, parse_choice
from detective_quest.verdict import EVIDENCE_THRESHOLD, format_verdict


# Words an agent is likely to use, on top of the single-letter keys
DIRECTION_WORDS = {
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "quit": Direction.QUIT,
    "leave": Direction.QUIT,
    "exit": Direction.QUIT,
}

OPTION_WORDS = {
    Direction.LEFT: "left",
    Direction.RIGHT: "right",
    Direction.QUIT: "quit",
}


def _parse_direction(text: str):
    word = text.strip().lower()
    if word in DIRECTION_WORDS:
        return DIRECTION_WORDS[word]
    return parse_choice(text)


def _describe_position(navigator: Navigator) -> str:
    room = navigator.current
    if navigator.finished:
        return (
            f"📍 Exploration is over (ended in: {room.name}, reason: {navigator.end_reason.value}).\n"
            f"Use 'Make Accusation' to name the culprit."
        )
    options = ", ".join(OPTION_WORDS[d] for d in navigator.available_directions())
    return f"📍 You are in: {room.name}\n🚪 Options: {options}"


def _capture(navigator: Navigator) -> List[str]:
    """Collect navigator output for the tool result instead of printing it."""
    messages: List[str] = []
    navigator.write = messages.append
    return messages


@tool("Enter Mansion")
def enter_mansion() -> str:
    """
    Enter the mansion through the Entrance Hall. Call this once, before
    any other exploration tool.

    Returns:
        What you see in the first room and where you can go
    """
    session = get_game_session()
    if session.navigator is not None:
        return "Error: You are already inside the mansion.\n" + _describe_position(session.navigator)

    messages: List[str] = []
    navigator = session.start_navigation(write=messages.append)
    return "\n".join(m.strip() for m in messages) + "\n" + _describe_position(navigator)


@tool("Look Around")
def look_around() -> str:
    """
    Describe the room you are in and the exits you can take.

    Returns:
        Current room and available options
    """
    session = get_game_session()
    if session.navigator is None:
        return "Error: You have not entered the mansion yet. Use 'Enter Mansion' first."
    return _describe_position(session.navigator)


@tool("Move")
def move(direction: str) -> str:
    """
    Move to the next room or leave the mansion.

    Args:
        direction: "left", "right" or "quit" (or the keys e, d, s)

    Returns:
        What happened, any clue found, and your new options
    """
    session = get_game_session()
    navigator = session.navigator
    if navigator is None:
        return "Error: You have not entered the mansion yet. Use 'Enter Mansion' first."
    if navigator.finished:
        return "Error: Exploration is already over.\n" + _describe_position(navigator)

    choice = _parse_direction(direction)
    if choice is None:
        return f"Error: Unknown direction '{direction}'. Use left, right or quit."

    messages = _capture(navigator)
    navigator.step(choice)
    return "\n".join(m.strip() for m in messages) + "\n" + _describe_position(navigator)


@tool("Review Clue Ledger")
def review_clue_ledger() -> str:
    """
    List every clue collected so far, in alphabetical order.

    Returns:
        The collected clues
    """
    session = get_game_session()
    lines = collected_clue_lines(session)
    if not lines:
        return "📒 Your clue ledger is empty."
    return f"📒 Collected clues ({len(lines)}):\n" + "\n".join(lines)


@tool("List Suspects")
def list_suspects() -> str:
    """
    List the suspects that clues in this case can point at.

    Returns:
        Suspect names
    """
    session = get_game_session()
    return "🕵️ Suspects: " + ", ".join(session.index.suspects())


@tool("Make Accusation")
def make_accusation(suspect_name: str) -> str:
    """
    Accuse a suspect. Only possible after exploration has ended.
    The accusation holds if at least two collected clues point at the suspect.

    Args:
        suspect_name: Name of the suspect you accuse

    Returns:
        The final verdict
    """
    session = get_game_session()
    if session.navigator is None or not session.navigator.finished:
        return "Error: Finish exploring the mansion before making an accusation."
    if session.verdict is not None:
        return "Error: You have already made your accusation.\n" + format_verdict(session.verdict)

    report = session.accuse(suspect_name)
    return format_verdict(report) + f"\n(Threshold: {EVIDENCE_THRESHOLD} matching clues)"
