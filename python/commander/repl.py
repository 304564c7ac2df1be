"""Interactive REPL for commander."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout
from prompt_toolkit.shortcuts import clear as clear_screen

from .completion import AutoComplete, ConsoleCompleter
from .context import ConsoleContext
from .executor import CommandExecutor
from .output import ResultPrinter

LOGGER = logging.getLogger("commander.repl")

PROMPT = "> "


class ConsoleREPL:
    """prompt_toolkit REPL; plain ``input()`` when stdin is not a terminal."""

    def __init__(self, ctx: ConsoleContext, executor: CommandExecutor) -> None:
        self.ctx = ctx
        self.executor = executor
        self.history_store = ctx.open_history()
        self.autocomplete = AutoComplete(executor.registry, ctx.objects)
        self.printer = ResultPrinter(ctx)
        executor.add_observer(self.printer)

    def run(self) -> int:
        if not sys.stdin.isatty():
            return self._fallback_loop()
        history = InMemoryHistory()
        for entry in self.history_store.snapshot():
            history.append_string(entry)
        self.ctx.clear_screen = clear_screen
        session = PromptSession(
            PROMPT,
            history=history,
            completer=ConsoleCompleter(self.autocomplete),
            complete_while_typing=True,
        )
        buffer: List[str] = []
        while not self.ctx.quit_requested:
            try:
                with patch_stdout():
                    line = session.prompt()
            except (EOFError, KeyboardInterrupt):
                print()
                return 0
            self._feed(buffer, line)
        return 0

    def _fallback_loop(self) -> int:
        buffer: List[str] = []
        while not self.ctx.quit_requested:
            try:
                line = input(PROMPT if sys.stdout.isatty() else "")
            except (EOFError, KeyboardInterrupt):
                return 0
            self._feed(buffer, line)
        return 0

    def _feed(self, buffer: List[str], line: str) -> None:
        if self._handle_multiline(buffer, line):
            return
        payload = " ".join(buffer) if buffer else line
        buffer.clear()
        self.dispatch(payload)

    def dispatch(self, line: str) -> Optional[bool]:
        stripped = line.strip()
        if not stripped:
            return None
        self.history_store.append(stripped)
        result = self.executor.execute(stripped)
        return result.ok

    def _handle_multiline(self, buffer: List[str], line: str) -> bool:
        stripped = line.rstrip()
        if stripped.endswith("\\"):
            buffer.append(stripped[:-1])
            return True
        if buffer:
            buffer.append(stripped)
        return False
