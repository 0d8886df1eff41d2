"""Key-token to command registry and the default viewer key map."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..runtime.commands import Command


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single command."""

    combos: tuple[str, ...]
    command: Command


class KeyComboRegistry:
    """Small key-to-command table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        """Initialize empty registry with optional token normalizer."""
        self._normalize = normalize if normalize is not None else self._identity
        self._commands: dict[str, Command] = {}

    @staticmethod
    def _identity(key: str) -> str:
        """Return key unchanged for exact-match (case-sensitive) lookup."""
        return key

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing commands for same combos."""
        for combo in binding.combos:
            self._commands[self._normalize(combo)] = binding.command
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def resolve(self, key: str) -> Command | None:
        """Return the command bound to ``key``, or ``None`` when unbound."""
        return self._commands.get(self._normalize(key))


DEFAULT_BINDINGS: tuple[KeyComboBinding, ...] = (
    KeyComboBinding(("q", "Q", "ESC", "CTRL_C"), Command.QUIT),
    KeyComboBinding(("j", "DOWN"), Command.LINE_DOWN),
    KeyComboBinding(("k", "UP"), Command.LINE_UP),
    KeyComboBinding((" ", "PAGE_DOWN"), Command.PAGE_DOWN),
    KeyComboBinding(("b", "PAGE_UP"), Command.PAGE_UP),
    KeyComboBinding(("J", "CTRL_D"), Command.HALF_PAGE_DOWN),
    KeyComboBinding(("K", "CTRL_U"), Command.HALF_PAGE_UP),
    KeyComboBinding(("h", "LEFT"), Command.PAN_RIGHT),
    KeyComboBinding(("l", "RIGHT"), Command.PAN_LEFT),
    KeyComboBinding(("H",), Command.HALF_PAN_RIGHT),
    KeyComboBinding(("L",), Command.HALF_PAN_LEFT),
    KeyComboBinding(("0",), Command.RESET_COLUMN),
    KeyComboBinding(("g", "HOME"), Command.GO_TO_TOP),
    KeyComboBinding(("G", "END"), Command.GO_TO_BOTTOM),
    KeyComboBinding(("m",), Command.SET_MARK),
    KeyComboBinding(("n",), Command.NEXT_MARK),
    KeyComboBinding(("p",), Command.PREVIOUS_MARK),
    KeyComboBinding(("CTRL_L",), Command.REDRAW),
)


def default_key_registry() -> KeyComboRegistry:
    return KeyComboRegistry().register_bindings(*DEFAULT_BINDINGS)
