"""Form controls manipulated by the page controller."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Button:
    label: str
    disabled: bool = False
    busy: bool = False


@dataclass
class TextInput:
    value: str = ""
    focused: bool = False

    def focus(self) -> None:
        self.focused = True


@dataclass
class ContactForm:
    """Name, email and message inputs plus their submit control."""

    name: TextInput = field(default_factory=TextInput)
    email: TextInput = field(default_factory=TextInput)
    message: TextInput = field(default_factory=TextInput)
    submit: Button = field(default_factory=lambda: Button(label="Send message"))

    def values(self) -> tuple[str, str, str]:
        """Return the trimmed field values."""

        return self.name.value.strip(), self.email.value.strip(), self.message.value.strip()

    def reset(self) -> None:
        for control in (self.name, self.email, self.message):
            control.value = ""
            control.focused = False


@contextmanager
def busy(button: Button, label: str) -> Iterator[Button]:
    """Disable ``button`` and show ``label`` until the block exits, however it exits."""

    original = button.label
    button.disabled = True
    button.busy = True
    button.label = label
    try:
        yield button
    finally:
        button.disabled = False
        button.busy = False
        button.label = original


__all__ = ["Button", "ContactForm", "TextInput", "busy"]
