# topmark:header:start
#
#   project      : OutputWriter
#   file         : cli_types.py
#   file_relpath : src/outputwriter/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types for OutputWriter enums."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

import click

from outputwriter.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=KeyedStrEnum)


class KeyedEnumParam(click.ParamType, Generic[E]):
    """Accept any key, member name or alias of a `KeyedStrEnum`, in any case.

    Help output and completion only offer the canonical keys.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self.choices: list[str] = enum_cls.choices()

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Render the keys as ``[a|b|c]`` in usage lines."""
        return f"[{'|'.join(self.choices)}]"

    def convert(
        self,
        value: str | E,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Return the member `value` names; fail with the list of keys otherwise."""
        if isinstance(value, self.enum_cls):
            return value
        member: E | None = self.enum_cls.parse(value)
        if member is None:
            self.fail(f"'{value}' is not one of {', '.join(self.choices)}.", param, ctx)
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete against the canonical keys."""
        from click.shell_completion import CompletionItem

        prefix: str = incomplete.lower()
        return [CompletionItem(key) for key in self.choices if key.startswith(prefix)]
