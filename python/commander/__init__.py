"""
commander text console package.

Commands are registered in a :class:`~commander.commands.CommandRegistry`
and run through a :class:`~commander.executor.CommandExecutor`, which
tokenizes the input line, resolves an optional target object, converts
arguments against the command signature and reports a
:class:`~commander.result.CommandResult` to its observers.  Use
``python -m commander`` or the ``commander`` script to launch the console.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .cli import main

__all__ = ["main", "__version__"]
