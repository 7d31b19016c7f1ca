"""
Positional message substitution

Messages use ``{}`` placeholders filled in order by positional arguments,
e.g. ``"user {} logged in from {}"``.
"""

from typing import Any, Sequence, Tuple

PLACEHOLDER = "{}"


def format_message(template: str, args: Sequence[Any]) -> str:
    """
    Substitute ``{}`` placeholders in ``template`` with ``args``.

    Args:
        template: Message template
        args: Positional arguments, rendered with ``str()``

    Returns:
        The substituted message. Surplus arguments are ignored and surplus
        placeholders are left as ``{}``.
    """
    if not args:
        return template

    parts = template.split(PLACEHOLDER)
    if len(parts) == 1:
        return template

    out = [parts[0]]
    for i, part in enumerate(parts[1:]):
        out.append(str(args[i]) if i < len(args) else PLACEHOLDER)
        out.append(part)
    return "".join(out)


class BraceMessage:
    """
    Deferred message handed to the stdlib backend.

    The backend keeps the raw template and arguments on its record and only
    renders the text when a handler asks for it.
    """

    __slots__ = ("template", "args")

    def __init__(self, template: str, args: Tuple[Any, ...]):
        self.template = template
        self.args = args

    def __str__(self) -> str:
        return format_message(self.template, self.args)

    def __repr__(self) -> str:
        return f"BraceMessage({self.template!r}, {self.args!r})"
