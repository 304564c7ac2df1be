"""Registry tests for commander."""

from __future__ import annotations

import logging

import pytest

from commander.commands import CommandRegistry, build_registry
from commander.commands.base import Command
from commander.context import ConsoleContext
from commander.kinds import TEXT, VECTOR3


def _registry(*names: str) -> CommandRegistry:
    registry = CommandRegistry()
    for name in names:
        registry.register(Command(name))
    return registry


def test_lookup_is_case_insensitive():
    registry = _registry("Spawn")
    assert registry.get("SPAWN") is registry.get("spawn")
    assert registry.get("spawn").name == "spawn"
    assert "SpAwN" in registry


def test_get_missing_or_empty_returns_none():
    registry = _registry("help")
    assert registry.get("nope") is None
    assert registry.get("") is None
    assert registry.get(None) is None


def test_register_overwrites_with_warning(caplog):
    registry = CommandRegistry()
    first = Command("echo", "first")
    second = Command("ECHO", "second")
    registry.register(first)
    with caplog.at_level(logging.WARNING, logger="commander.registry"):
        registry.register(second)
    assert registry.get("echo") is second
    assert len(registry) == 1
    assert "already registered" in caplog.text


def test_register_none_is_ignored(caplog):
    registry = CommandRegistry()
    with caplog.at_level(logging.ERROR, logger="commander.registry"):
        registry.register(None)
    assert len(registry) == 0
    assert "null command" in caplog.text


def test_unregister():
    registry = _registry("help", "echo")
    registry.unregister("HELP")
    registry.unregister("missing")
    registry.unregister(None)
    assert [cmd.name for cmd in registry.all()] == ["echo"]


def test_suggestions_are_sorted_prefix_matches():
    registry = _registry("spawn", "speed", "help", "spin")
    assert registry.suggestions("sp") == ["spawn", "speed", "spin"]
    assert registry.suggestions("SPA") == ["spawn"]
    assert registry.suggestions("") == []
    assert registry.suggestions("zz") == []


def test_close_matches_catch_typos():
    registry = _registry("help", "echo", "list")
    assert registry.close_matches("hlp") == ["help"]
    assert registry.close_matches("") == []


def test_list_commands_orders_by_category_then_name():
    registry = CommandRegistry()
    registry.register(Command("zeta", category="Alpha"))
    registry.register(Command("beta", category="beta"))
    registry.register(Command("alpha", category="Alpha"))
    assert [cmd.name for cmd in registry.list_commands()] == ["alpha", "zeta", "beta"]


def test_command_rejects_empty_name():
    with pytest.raises(ValueError):
        Command("  ")


def test_command_usage_lists_parameter_labels():
    cmd = Command("spawn", "Create", signature=[TEXT, VECTOR3])
    assert cmd.signature == (TEXT, VECTOR3)
    assert cmd.usage() == "spawn <text> <x,y,z>"
    assert cmd.format_help().endswith("Create")


def test_build_registry_has_builtins():
    registry = build_registry(ConsoleContext())
    for name in ("help", "echo", "clear", "time", "list", "find", "spawn", "destroy", "move", "paint", "quit", "version", "history"):
        assert name in registry
    assert registry.get("move").resolves_target
    assert not registry.get("find").resolves_target


def test_builtin_target_resolution_flags():
    registry = build_registry(ConsoleContext())
    for name in ("help", "echo", "clear", "time", "version", "history", "quit", "list", "find", "spawn"):
        assert registry.get(name).resolves_target is False, name
    for name in ("destroy", "move", "paint"):
        assert registry.get(name).resolves_target is True, name
