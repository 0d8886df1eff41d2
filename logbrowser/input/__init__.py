"""Input-layer public API for key decoding, events, and key bindings.

Exports are split between low-level terminal decoding (`read_key`), event
classification (`poll_event`), and the key-to-command registry.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .bindings import DEFAULT_BINDINGS, KeyComboBinding, KeyComboRegistry, default_key_registry
from .events import RESIZE_POLL_MS, Event, KeyEvent, ResizeEvent, poll_event

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "DEFAULT_BINDINGS",
    "default_key_registry",
    "Event",
    "KeyEvent",
    "ResizeEvent",
    "RESIZE_POLL_MS",
    "poll_event",
]
