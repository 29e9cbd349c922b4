# topmark:header:start
#
#   project      : OutputWriter
#   file         : enum_mixins.py
#   file_relpath : src/outputwriter/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyed string enums: a stable machine key plus a label and parse aliases.

Members are declared as ``(key, label[, aliases])`` tuples:

    ```python
    class Target(KeyedStrEnum):
        FILE = ("file", "Write to file")
        STDOUT = ("stdout", "Write to STDOUT", ("console",))

    assert Target.parse("Console") is Target.STDOUT
    assert str(Target.FILE) == "file"
    ```

No CLI or rendering concerns live here.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Fold case only; blanks and punctuation must match exactly."""
    return s.lower()


class KeyedStrEnum(str, Enum):
    """A ``str`` Enum whose `.value` is a stable machine key.

    Attributes:
        label (str): Human-readable description.
        aliases (tuple[str, ...]): Extra tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(cls: type[_KS], key: str, label: str, aliases: Iterable[str] = ()) -> _KS:
        member: _KS = str.__new__(cls, key)
        member._value_ = key
        member.label = label
        member.aliases = tuple(aliases)
        return member

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """The stable machine key (same as `.value`)."""
        return str(self.value)

    def tokens(self) -> Iterator[str]:
        """Yield every normalized token naming this member: key, name, then aliases."""
        yield _norm_token(self.key)
        yield _norm_token(self.name)
        for alias in self.aliases:
            yield _norm_token(alias)

    @classmethod
    def choices(cls) -> list[str]:
        """Return the machine keys of all members, in declaration order."""
        return [member.key for member in cls]

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Return the member named by `raw`, or None.

        `raw` may be a key, a member name or an alias, in any letter case.
        Nothing else is normalized, so ``" json "`` names no member.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)
        return next((member for member in cls if token in member.tokens()), None)
