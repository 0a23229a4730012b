"""
Reminder Manager Start - Interactive Console Entry Point

Reads slash commands from stdin and prints the replies:
    /add 05.03.24 dentist
    /today
    /fordays 7
    /help
"""

import logging
import sys

from reminder_manager.agents import ReminderHandlers
from reminder_manager.config import load_settings
from reminder_manager.core import Commander, SystemClock
from reminder_manager.memory import ReminderStore

logger = logging.getLogger(__name__)

EXIT_WORDS = ("quit", "exit", "q")


def build_commander(store: ReminderStore, date_format: str) -> Commander:
    """Wire a Commander with every reminder command for the given store"""
    commander = Commander()
    ReminderHandlers(store, date_format=date_format).register(commander)
    return commander


def main() -> int:
    """
    Main entry point.

    Returns:
        Process exit code
    """
    settings = load_settings()

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    print("=" * 70)
    print("Reminder Manager")
    print("Type /help for commands, 'quit' to exit")
    print("=" * 70)
    print()

    store = ReminderStore(clock=SystemClock())
    commander = build_commander(store, settings.date_format)

    # =========================================================================
    # Main loop
    # =========================================================================
    while True:
        try:
            user_input = input("You: ").strip()

            if not user_input:
                continue

            if user_input.lower() in EXIT_WORDS:
                print("\nGoodbye!")
                break

            print(commander.handle(user_input))
            print()

        except (EOFError, KeyboardInterrupt):
            print("\n\nInterrupted. Goodbye!")
            break
        except Exception as e:
            logger.error(f"Error in main loop: {e}", exc_info=True)
            print(f"\nError: {e}\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
