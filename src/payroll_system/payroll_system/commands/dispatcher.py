from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, Optional, TextIO

from ..common.validators import require_int
from ..core.constants import INVALID_ARGUMENTS
from ..core.exceptions import DomainError, ValidationError

logger = logging.getLogger(__name__)

Handler = Callable[[list[str]], list[str]]


def int_arg(args: list[str], index: int, name: str) -> int:
    if index >= len(args):
        raise ValidationError(f"missing argument: {name}")
    return require_int(args[index], name)


def str_arg(args: list[str], index: int, name: str) -> str:
    if index >= len(args):
        raise ValidationError(f"missing argument: {name}")
    return args[index]


class CommandDispatcher:
    """Maps the first token of a command line to a registered handler.

    Handlers receive the remaining tokens and return the lines to print.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def command(self, name: str) -> Callable[[Handler], Handler]:
        def decorator(handler: Handler) -> Handler:
            self._handlers[name] = handler
            return handler

        return decorator

    @property
    def commands(self) -> list[str]:
        return sorted(self._handlers)

    def dispatch(self, line: str) -> list[str]:
        tokens = line.split()
        if not tokens:
            return []

        name, args = tokens[0], tokens[1:]
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Ignoring unknown command %r", name)
            return []

        try:
            return handler(args)
        except ValidationError as e:
            logger.debug("%s: %s", name, e)
            return [INVALID_ARGUMENTS]
        except DomainError as e:
            logger.error("%s failed: %s", name, e)
            return []

    def run(self, lines: Iterable[str], *, out: Optional[TextIO] = None) -> int:
        """Process commands until the input is exhausted. Returns the number of lines read."""
        out = out or sys.stdout
        count = 0
        for line in lines:
            count += 1
            for output_line in self.dispatch(line):
                out.write(output_line + "\n")
            out.flush()
        return count
