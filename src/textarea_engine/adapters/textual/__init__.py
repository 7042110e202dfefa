"""Textual host adapter; the demo app lives in ``app`` and needs ``textual``."""

from .controller import TextualTextAreaAdapter, TextualUIHooks, key_event_from_textual

__all__ = ["TextualTextAreaAdapter", "TextualUIHooks", "key_event_from_textual"]
