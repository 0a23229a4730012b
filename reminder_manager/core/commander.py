"""
Commander - Text Command Dispatch

Responsibilities:
- Keep a registry of named command handlers
- Split "/name arguments" messages and route them
- NO business logic, NO formatting of results
"""

import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

Handler = Callable[[str], str]

UNKNOWN_COMMAND_RESPONSE = "Unknown command, try /help"

# "/name rest of line" - name is a single word, rest is passed through untouched
COMMAND_PATTERN = re.compile(r"^/(?P<name>[A-Za-z0-9_]+)(?:\s+(?P<args>.*))?$", re.DOTALL)


class CommandError(Exception):
    """Raised when a message cannot be parsed into a command"""
    pass


class Commander:
    """
    Deterministic command router.

    Routes messages based on:
    - Leading slash
    - Command name (case-insensitive)

    Does NOT:
    - Validate arguments (handlers do that)
    - Catch handler errors
    """

    def __init__(self):
        """Initialize commander"""
        self._handlers: Dict[str, Handler] = {}

    def register_handler(self, name: str, handler: Handler):
        """
        Register a handler for /name.

        Args:
            name: Command name without the leading slash
            handler: Callable receiving the argument string, returning the reply

        Raises:
            ValueError: If name is empty or contains whitespace
        """
        if not name or not name.strip() or name.strip() != name or " " in name:
            raise ValueError(f"Invalid command name: {name!r}")

        key = name.lower()
        if key in self._handlers:
            logger.warning(f"Handler for /{key} replaced")
        self._handlers[key] = handler
        logger.debug(f"Registered handler: /{key}")

    def commands(self) -> List[str]:
        """Registered command names, sorted"""
        return sorted(self._handlers)

    @staticmethod
    def parse(message: str) -> Tuple[str, str]:
        """
        Split a message into (command name, argument string).

        Raises:
            CommandError: If the message is not a /command
        """
        if not message or not message.strip():
            raise CommandError("Empty message")

        match = COMMAND_PATTERN.match(message.strip())
        if not match:
            raise CommandError(f"Not a command: {message!r}")

        return match.group("name").lower(), (match.group("args") or "").strip()

    def handle(self, message: str) -> str:
        """
        Route a message to its handler.

        Returns:
            The handler's reply, or UNKNOWN_COMMAND_RESPONSE
        """
        try:
            name, args = self.parse(message)
        except CommandError as e:
            logger.debug(f"Rejected message: {e}")
            return UNKNOWN_COMMAND_RESPONSE

        handler: Optional[Handler] = self._handlers.get(name)
        if handler is None:
            logger.info(f"Unknown command: /{name}")
            return UNKNOWN_COMMAND_RESPONSE

        logger.debug(f"Dispatching /{name} (args={args!r})")
        return handler(args)
