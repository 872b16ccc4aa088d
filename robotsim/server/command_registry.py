"""
Command registration system with decorator support.

This module provides a centralized registry for all commands, enabling
auto-discovery and registration through decorators. This eliminates the
need for manual command factory maintenance.
"""

from __future__ import annotations

import logging
import pkgutil
import time
from collections.abc import Callable
from importlib import import_module

from robotsim.commands.base import CommandBase
from robotsim.config import TRACE

logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Singleton registry for command classes.

    Commands register themselves using the @register_command decorator.
    The registry supports auto-discovery of decorated commands and
    provides a centralized lookup mechanism.
    """

    _instance: CommandRegistry | None = None
    _commands: dict[str, type[CommandBase]] = {}
    _discovered: bool = False

    def __new__(cls) -> CommandRegistry:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the registry (only runs once due to singleton)."""
        if not hasattr(self, "_initialized"):
            self._commands = {}
            self._discovered = False
            self._initialized = True

    def register(self, name: str, command_class: type[CommandBase]) -> None:
        """
        Register a command class with the given name.

        Args:
            name: The command keyword (stored upper-cased)
            command_class: The command class to register

        Raises:
            ValueError: If a different class is already registered under the name
        """
        key = name.upper()
        existing = self._commands.get(key)
        if existing is not None:
            if existing is not command_class:
                raise ValueError(
                    f"Command '{key}' is already registered with class {existing.__name__}. "
                    f"Cannot register with {command_class.__name__}"
                )
            return
        self._commands[key] = command_class
        logger.debug(f"Registered command '{key}' -> {command_class.__name__}")

    def get_command_class(self, name: str) -> type[CommandBase] | None:
        """
        Retrieve a command class by keyword (case-insensitive).

        Returns:
            The command class if found, None otherwise
        """
        if not self._discovered:
            self.discover_commands()

        return self._commands.get(name.upper())

    def list_registered_commands(self) -> list[str]:
        """
        Return a list of all registered command names.

        Returns:
            List of command names (sorted)
        """
        if not self._discovered:
            self.discover_commands()

        return sorted(self._commands.keys())

    def discover_commands(self) -> None:
        """
        Auto-discover and register all decorated commands.

        This method imports all modules in the robotsim.commands package
        to trigger the @register_command decorators.
        """
        if self._discovered:
            return

        logger.info("Discovering commands...")

        commands_package = import_module("robotsim.commands")

        for _importer, modname, ispkg in pkgutil.iter_modules(commands_package.__path__):
            if ispkg or modname == "base":
                continue

            full_module_name = f"robotsim.commands.{modname}"
            # A broken command module is a packaging bug; let it propagate
            module = import_module(full_module_name)
            logger.debug(f"Imported command module: {full_module_name}")

            # Decorators only run on first import; re-register after clear()
            for obj in vars(module).values():
                if (
                    isinstance(obj, type)
                    and issubclass(obj, CommandBase)
                    and obj.__module__ == full_module_name
                    and obj._registered_name
                ):
                    self.register(obj._registered_name, obj)

        self._discovered = True
        logger.info(
            f"Command discovery complete. {len(self._commands)} commands registered."
        )

    def create_command_from_parts(
        self, parts: list[str]
    ) -> tuple[CommandBase | None, str | None]:
        """
        Create a command instance from pre-split message parts.

        Args:
            parts: Pre-split message parts

        Returns:
            A tuple of (command, error_message):
            - (command, None) if successful
            - (None, None) if command name not registered
            - (None, error_message) if command is recognized but has invalid parameters
        """
        if not self._discovered:
            self.discover_commands()

        if not parts:
            logger.debug("Empty message parts")
            return None, None

        command_name = parts[0].upper()
        start_t = time.perf_counter()
        logger.log(TRACE, "match_start name=%s parts=%d", command_name, len(parts))

        command_class = self._commands.get(command_name)

        if command_class is None:
            logger.log(TRACE, "match_unknown name=%s", command_name)
            logger.debug(f"No command registered for: {command_name}")
            return None, None

        command = command_class()
        can_handle, error = command.match(parts)
        dur_ms = (time.perf_counter() - start_t) * 1000.0

        if can_handle:
            logger.log(TRACE, "match_ok name=%s dur_ms=%.2f", command_name, dur_ms)
            return command, None

        logger.log(TRACE, "match_error name=%s dur_ms=%.2f err=%s", command_name, dur_ms, error)
        logger.debug(f"Command '{command_name}' rejected: {error}")
        return None, error or "Command validation failed"

    def clear(self) -> None:
        """
        Clear all registered commands.

        This is mainly useful for testing.
        """
        self._commands.clear()
        self._discovered = False
        logger.debug("Command registry cleared")


# Global registry instance
_registry = CommandRegistry()


def register_command(name: str) -> Callable[[type[CommandBase]], type[CommandBase]]:
    """
    Decorator to register a command class.

    Usage:
        @register_command("MOVE")
        class MoveCommand(KeywordCommand):
            ...

    Args:
        name: The command keyword

    Returns:
        Decorator function that registers the class
    """

    def decorator(cls: type[CommandBase]) -> type[CommandBase]:
        if not issubclass(cls, CommandBase):
            raise TypeError(f"Class {cls.__name__} must inherit from CommandBase")

        _registry.register(name, cls)

        # Add the command name as a class attribute for reference
        cls._registered_name = name.upper()

        return cls

    return decorator


# Module-level convenience functions that delegate to the registry singleton
get_command_class = _registry.get_command_class
list_registered_commands = _registry.list_registered_commands
discover_commands = _registry.discover_commands
clear_registry = _registry.clear
create_command_from_parts = _registry.create_command_from_parts
