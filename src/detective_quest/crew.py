"""
Detective Quest Crew - an LLM detective that plays the game.
The agent explores the mansion and accuses a suspect using the game tools.
"""

from typing import Optional

from crewai import Agent, Crew, Process, Task

from detective_quest.tools import (
    enter_mansion,
    look_around,
    move,
    review_clue_ledger,
    list_suspects,
    make_accusation,
)


DETECTIVE_TOOLS = [
    # Exploration
    enter_mansion,
    look_around,
    move,
    review_clue_ledger,
    # Accusation
    list_suspects,
    make_accusation,
]


def create_detective_agent(llm: Optional[str] = None) -> Agent:
    """
    Create the detective agent.

    Args:
        llm: Model name; CrewAI's default model is used when omitted
    """
    kwargs = {}
    if llm:
        kwargs["llm"] = llm
    return Agent(
        role="Detective",
        goal="Explore the mansion, collect clues and accuse the right culprit",
        backstory=(
            "You are a methodical detective called to a mansion after a crime. "
            "The mansion's rooms branch left and right with no way back, so every "
            "choice of path matters. You trust only the clues written in your ledger."
        ),
        tools=DETECTIVE_TOOLS,
        allow_delegation=False,
        verbose=False,
        **kwargs,
    )


def create_exploration_crew(detective: Agent) -> Crew:
    """Crew for walking the mansion until the exploration ends."""
    exploration_task = Task(
        description="""
        Explore the mansion to collect clues.

        1. Call "Enter Mansion" once to step into the Entrance Hall
        2. Use "Move" with "left" or "right" to go deeper - there is no way back
        3. Clues are collected automatically when you enter a room
        4. Keep moving until you reach a room with no exits,
           or use "Move" with "quit" when you want to stop
        5. Finish with "Review Clue Ledger"
        """,
        expected_output="""
        A brief summary in this exact format:
        PATH: [rooms visited, in order]
        CLUES: [collected clues] or "None"
        """,
        agent=detective,
    )

    return Crew(
        agents=[detective],
        tasks=[exploration_task],
        process=Process.sequential,
        verbose=False,
        tracing=False,
    )


def create_accusation_crew(detective: Agent) -> Crew:
    """Crew for naming the culprit once exploration is over."""
    accusation_task = Task(
        description="""
        Exploration is over. Name the culprit.

        1. Use "Review Clue Ledger" to read your clues
        2. Use "List Suspects" to see who can be accused
        3. Decide which suspect most of your clues point at
        4. Use "Make Accusation" exactly once

        The accusation only holds if at least two of your clues point at the suspect.
        """,
        expected_output="""
        A brief summary in this exact format:
        ACCUSED: [suspect name]
        VERDICT: [verdict as reported by Make Accusation]
        """,
        agent=detective,
    )

    return Crew(
        agents=[detective],
        tasks=[accusation_task],
        process=Process.sequential,
        verbose=False,
        tracing=False,
    )
