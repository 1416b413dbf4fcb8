"""
Positional message templates.

Templates use ``str.format`` syntax limited to positional fields::

    format("{0} is the new {1}", Arg.of("foo", "bar"))   # explicit
    format("{} is the new {}", Arg.of("foo", "bar"))     # automatic
    format("took {0:.2f}s for {1!r}", Arg.of(1.5, "x"))  # spec / conversion

``str.format`` silently ignores surplus arguments; here every argument
must be referenced and every placeholder must resolve, otherwise
``TemplateArityError`` is raised before anything is rendered.
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterator, Sequence

from glogkit.errors import TemplateArityError, TemplateError
from glogkit.fields import Arg

_parser = string.Formatter()
_FIELD_HEAD = re.compile(r"[.\[]")


class _Numbering:
    """Tracks automatic vs explicit field numbering, as ``str.format`` does."""

    def __init__(self, template: str):
        self.template = template
        self.next_auto = 0
        self.mode: str | None = None

    def resolve(self, field_name: str) -> int:
        head = _FIELD_HEAD.split(field_name, maxsplit=1)[0]
        if head == "":
            self._switch("automatic")
            index = self.next_auto
            self.next_auto += 1
            return index
        if head.isdecimal():
            self._switch("explicit")
            return int(head)
        raise TemplateError(
            f"Named placeholder {{{head}}} is not supported; use positional fields",
            template=self.template,
        )

    def _switch(self, mode: str) -> None:
        if self.mode is None:
            self.mode = mode
        elif self.mode != mode:
            raise TemplateError(
                "Cannot mix automatic ({}) and explicit ({0}) field numbering",
                template=self.template,
            )


def _walk(fragment: str, numbering: _Numbering) -> Iterator[int]:
    try:
        parsed = list(_parser.parse(fragment))
    except ValueError as exc:
        raise TemplateError(f"Malformed template: {exc}", template=numbering.template, cause=exc) from exc

    for _literal, field_name, format_spec, _conversion in parsed:
        if field_name is None:
            continue
        yield numbering.resolve(field_name)
        if format_spec:
            yield from _walk(format_spec, numbering)


def placeholders(template: str) -> list[int]:
    """Argument indices referenced by ``template``, in reference order."""
    return list(_walk(template, _Numbering(template)))


def format(template: str, args: Sequence[Arg]) -> str:
    """Render ``template`` with the values of ``args`` substituted in order.

    Raises:
        TemplateArityError: the referenced indices are not exactly
            ``0 .. len(args) - 1``.
        TemplateError: the template is malformed, uses named fields, or a
            value fails to render.
    """
    referenced = set(placeholders(template))
    if referenced != set(range(len(args))):
        raise TemplateArityError(template, placeholders=referenced, arguments=len(args))

    values = [arg.value for arg in args]
    try:
        return template.format(*values)
    except Exception as exc:
        raise TemplateError(f"Failed to render template: {exc}", template=template, cause=exc) from exc


__all__ = ["format", "placeholders"]
