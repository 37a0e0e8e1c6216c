"""Formatting style selection."""

from enum import Enum


class FormattingStyle(str, Enum):
    """Presentation style for a rendered playlist."""

    BASIC = "basic"
    NUMBERED = "numbered"
    PRETTY = "pretty"

    @classmethod
    def from_flags(cls, basic: bool = False, numbered: bool = False) -> "FormattingStyle":
        """Select style from command line flags. Pretty is the default."""
        if basic and numbered:
            raise ValueError("Basic and numbered styles are mutually exclusive")
        if basic:
            return cls.BASIC
        if numbered:
            return cls.NUMBERED
        return cls.PRETTY

    def __str__(self) -> str:
        return self.value
