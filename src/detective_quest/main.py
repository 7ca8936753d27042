#!/usr/bin/env python
"""
Detective Quest - Exploring the Mysterious Mansion
Main entry point: play in the console, or let an LLM detective play.
"""

import os
import sys
import time
import logging
import traceback

# Disable CrewAI tracing before importing crewai
os.environ["CREWAI_TRACING_ENABLED"] = "false"

from dotenv import load_dotenv

from detective_quest.game_state import GameSession, collected_clue_lines, reset_game_session
from detective_quest.navigation import EndReason, explore
from detective_quest.settings import GameSettings
from detective_quest.verdict import format_verdict
from detective_quest.crew import (
    create_detective_agent,
    create_exploration_crew,
    create_accusation_crew,
)


logger = logging.getLogger(__name__)


def configure_logging(settings: GameSettings):
    """Set up console logging; DEBUG only when the debug setting is on."""
    logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    logging.getLogger().setLevel(logging.DEBUG if settings.debug else logging.WARNING)


def get_error_details(exception):
    """
    Extract detailed error information from an exception.

    Args:
        exception: The exception to analyze

    Returns:
        A formatted string with error details
    """
    error_info = [
        f"Type: {type(exception).__name__}",
        f"Message: {str(exception)}",
    ]

    if exception.__cause__ is not None:
        error_info.append(f"Caused by: {type(exception.__cause__).__name__}: {exception.__cause__}")

    # HTTP details from LLM provider errors
    if hasattr(exception, 'status_code'):
        error_info.append(f"Status Code: {exception.status_code}")
    response = getattr(exception, 'response', None)
    if response is not None:
        if hasattr(response, 'status_code'):
            error_info.append(f"Response Status: {response.status_code}")
        if hasattr(response, 'text'):
            error_info.append(f"Response Body: {response.text[:500]}")

    if "None or empty" in str(exception) or "empty response" in str(exception).lower():
        error_info.append("Possible causes: quota exceeded, model overloaded, or the model answered with tool calls only")

    return " | ".join(error_info)


def retry_with_backoff(func, max_retries=3, base_delay=5, debug=False):
    """
    Retry a function with exponential backoff.

    Args:
        func: Callable to retry
        max_retries: Maximum number of retry attempts
        base_delay: Base delay in seconds (doubled after every failure)
        debug: Log full stack traces of failed attempts

    Returns:
        The result of the function call

    Raises:
        The last exception if all retries fail
    """
    last_exception = None

    for attempt in range(max_retries + 1):
        try:
            result = func()
            if result is None or (hasattr(result, 'raw') and not result.raw):
                raise ValueError(f"Empty response from LLM (result type: {type(result).__name__})")
            return result
        except Exception as e:
            last_exception = e
            error_details = get_error_details(e)

            if debug:
                logger.error(f"Attempt {attempt + 1} failed with exception:", exc_info=True)

            if attempt < max_retries:
                delay = base_delay * (2 ** attempt)
                sys.stdout.write(f"\n⚠️ Attempt {attempt + 1}/{max_retries + 1} failed\n")
                sys.stdout.write(f"   📋 Error: {error_details}\n")
                sys.stdout.write(f"🔄 Retrying in {delay} seconds...\n")
                sys.stdout.flush()
                time.sleep(delay)
            else:
                sys.stdout.write(f"\n❌ All {max_retries + 1} attempts failed\n")
                sys.stdout.write(f"   📋 Final Error: {error_details}\n")
                if debug:
                    for line in traceback.format_exception(type(e), e, e.__traceback__):
                        sys.stdout.write(f"      {line}")
                sys.stdout.flush()
    raise last_exception


def print_banner(write=print):
    write("=" * 50)
    write("🔍 WELCOME TO DETECTIVE QUEST 🔍")
    write("   Exploring the Mysterious Mansion")
    write("=" * 50)


def show_collected_clues(session: GameSession, write=print):
    write("\n📒 COLLECTED CLUES:")
    write("-" * 40)
    lines = collected_clue_lines(session)
    if not lines:
        write("(none)")
    for line in lines:
        write(line)


def run_game(read=input, write=print, settings: GameSettings = None):
    """
    Play one game in the console.

    Args:
        read: Returns one line of player input; raises EOFError at end of input
        write: Receives every line of output
        settings: Game settings (read from the environment when omitted)

    Returns:
        The VerdictReport of the final accusation
    """
    settings = settings or GameSettings.from_env()
    print_banner(write)

    with GameSession.new_game(settings.index_capacity) as session:
        result = explore(session.mansion, session.ledger, read, write)
        logger.info(f"Exploration ended ({result.reason.value}) after {len(result.visited)} rooms")

        show_collected_clues(session, write)

        accused = ""
        if not session.ledger.is_empty():
            write(f"\n🕵️ Suspects: {', '.join(session.index.suspects())}")
            try:
                accused = read("Who is the culprit? ")
            except (EOFError, KeyboardInterrupt):
                write("")

        report = session.accuse(accused)
        write("\n" + format_verdict(report))
        return report


def run_autoplay(settings: GameSettings = None):
    """
    Let an LLM detective explore the mansion and make the accusation.

    Returns:
        The VerdictReport, or None if the detective never accused anyone
    """
    settings = settings or GameSettings.from_env()
    print_banner()
    print("🤖 AUTOPLAY: an AI detective takes the case\n")

    session = reset_game_session(settings.index_capacity)
    detective = create_detective_agent(settings.llm_model)

    try:
        try:
            result = retry_with_backoff(create_exploration_crew(detective).kickoff, settings.max_retries, debug=settings.debug)
            sys.stdout.write(f"\n📝 Exploration Summary:\n{'-' * 40}\n")
            sys.stdout.write(str(result.raw if hasattr(result, 'raw') else result) + "\n")
            sys.stdout.flush()
        except Exception as e:
            sys.stdout.write(f"\n❌ Error during exploration: {e}\n")
            sys.stdout.flush()

        if session.navigator is None:
            print("⚠️ The detective never entered the mansion.")
            session.start_navigation(write=lambda _: None)
        if not session.navigator.finished:
            session.navigator.stop(EndReason.QUIT)

        show_collected_clues(session)

        try:
            retry_with_backoff(create_accusation_crew(detective).kickoff, settings.max_retries, debug=settings.debug)
        except Exception as e:
            sys.stdout.write(f"\n❌ Error during accusation: {e}\n")
            sys.stdout.flush()

        if session.verdict is None:
            print("\n⚠️ The detective made no accusation.")
        else:
            print("\n" + format_verdict(session.verdict))
        return session.verdict
    finally:
        session.release()


def main():
    """Main entry point."""
    load_dotenv()
    settings = GameSettings.from_env()
    configure_logging(settings)
    mode = sys.argv[1] if len(sys.argv) > 1 else "play"

    try:
        if mode == "play":
            run_game(settings=settings)
        elif mode == "auto":
            if not settings.has_llm_key():
                print("❌ Error: no LLM API key set.")
                print("Please create a .env file with your key, for example:")
                print("  OPENAI_API_KEY=your-key-here")
                sys.exit(1)
            run_autoplay(settings)
        else:
            print("Usage: detective-quest [play|auto]")
            print("  play: explore the mansion yourself (default)")
            print("  auto: let an AI detective play")
    except MemoryError:
        logger.critical("Out of memory while building the game", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
