"""
Reminder Command Handlers - Text Front End for ReminderStore

Responsibilities:
- Parse command arguments (ids, day counts, dates)
- Call the store
- Render replies as plain text
- NO ordering logic, NO storage

Every store error is turned into a reply; nothing raised by the store
escapes a handler.
"""

import logging
from typing import Dict, List, Optional

from reminder_manager.core.commander import Commander
from reminder_manager.core.date_utils import DateParseError, parse_date
from reminder_manager.memory.reminder_models import (
    InvalidArgumentError,
    Reminder,
    ReminderNotFoundError,
)
from reminder_manager.memory.reminder_store import ReminderStore

logger = logging.getLogger(__name__)

HELP_COMMAND = "help"
ADD_COMMAND = "add"
LIST_COMMAND = "list"
REMOVE_OUTDATED_COMMAND = "rmout"
REMOVE_BY_ID_COMMAND = "rm"
EDIT_COMMAND = "edit"
TODAY_COMMAND = "today"
FOR_DAYS_COMMAND = "fordays"

# Insertion order is the order shown by /help
DESCRIPTIONS: Dict[str, str] = {
    ADD_COMMAND: "[dd.mm.yy / today / tomorrow] [text] adds a new reminder",
    LIST_COMMAND: "shows all your plans in chronological order",
    REMOVE_OUTDATED_COMMAND: "removes outdated records",
    REMOVE_BY_ID_COMMAND: "[id] removes record with given id",
    EDIT_COMMAND: "[id] [new text] changes the reminder text",
    TODAY_COMMAND: "shows today's activities",
    FOR_DAYS_COMMAND: "[count] shows records for next 'count' days",
    HELP_COMMAND: "show this menu",
}

BAD_ARGUMENT_RESPONSE = "Bad argument, try one more time"
SUCCESS_RESPONSE = "Success! =)"


class ReminderHandlers:
    """
    Command handlers bound to one ReminderStore.

    Usage:
        store = ReminderStore()
        commander = Commander()
        ReminderHandlers(store).register(commander)
        print(commander.handle("/today"))
    """

    def __init__(self, store: ReminderStore, date_format: Optional[str] = None):
        """
        Args:
            store: Store the commands operate on
            date_format: Format for reading and printing dates (default dd.mm.yy)
        """
        self.store = store
        self.date_format = date_format
        logger.info("ReminderHandlers initialized")

    def register(self, commander: Commander):
        """Register every reminder command on the given Commander"""
        commander.register_handler(LIST_COMMAND, self.list_reminders)
        commander.register_handler(ADD_COMMAND, self.add)
        commander.register_handler(REMOVE_OUTDATED_COMMAND, self.remove_outdated)
        commander.register_handler(REMOVE_BY_ID_COMMAND, self.remove_by_id)
        commander.register_handler(EDIT_COMMAND, self.edit)
        commander.register_handler(TODAY_COMMAND, self.today)
        commander.register_handler(FOR_DAYS_COMMAND, self.for_days)
        commander.register_handler(HELP_COMMAND, self.help)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def help(self, args: str = "") -> str:
        return "\n".join(f"/{name} {desc}" for name, desc in DESCRIPTIONS.items())

    def add(self, args: str) -> str:
        params = args.split(" ", 1)
        if len(params) < 2 or not params[1].strip():
            return BAD_ARGUMENT_RESPONSE

        try:
            date = parse_date(params[0], self.store.clock, self.date_format)
            self.store.insert(params[1], date)
        except (DateParseError, InvalidArgumentError) as e:
            logger.debug(f"/add rejected: {e}")
            return BAD_ARGUMENT_RESPONSE

        return SUCCESS_RESPONSE

    def list_reminders(self, args: str = "") -> str:
        reminders = self.store.snapshot()
        if not reminders:
            return "You haven't planned anything yet"

        today = self.store.clock.today()
        outdated = [r for r in reminders if r.is_outdated(today)]
        actual = reminders[len(outdated):]

        sections = []
        if outdated:
            sections.append("There are outdated entries on your list\n\n" + self._render(outdated))
        if actual:
            sections.append("Your actual plans\n\n" + self._render(actual))
        return "\n\n".join(sections)

    def today(self, args: str = "") -> str:
        reminders = self.store.today()
        if not reminders:
            return "Nothing to do today =("
        return f"{len(reminders)} things to do today\n\n{self._render(reminders)}"

    def for_days(self, args: str) -> str:
        try:
            count = int(args)
        except ValueError:
            return BAD_ARGUMENT_RESPONSE
        if count < 1:
            return BAD_ARGUMENT_RESPONSE

        reminders = self.store.query_window(count)
        if not reminders:
            return f"Nothing to do next {count} days =("
        return f"{len(reminders)} things to do next {count} days\n\n{self._render(reminders)}"

    def remove_outdated(self, args: str = "") -> str:
        removed = self.store.remove_outdated()
        if removed == 0:
            return "There aren't outdated records"
        return f"{removed} records were deleted"

    def remove_by_id(self, args: str) -> str:
        try:
            reminder_id = int(args)
        except ValueError:
            return BAD_ARGUMENT_RESPONSE

        try:
            self.store.remove_by_id(reminder_id)
        except ReminderNotFoundError as e:
            return str(e)

        return SUCCESS_RESPONSE

    def edit(self, args: str) -> str:
        params = args.split(" ", 1)
        if len(params) < 2:
            return BAD_ARGUMENT_RESPONSE
        try:
            reminder_id = int(params[0])
        except ValueError:
            return BAD_ARGUMENT_RESPONSE

        try:
            self.store.edit_text(reminder_id, params[1])
        except InvalidArgumentError:
            return BAD_ARGUMENT_RESPONSE
        except ReminderNotFoundError as e:
            return str(e)

        return SUCCESS_RESPONSE

    def _render(self, reminders: List[Reminder]) -> str:
        return "\n".join(r.format(self.date_format) for r in reminders)
