"""Placeholder substitution for resource templates."""

import re
from typing import Any, Mapping, Optional, Sequence, Union

Arguments = Union[Sequence[Any], Mapping[str, Any]]

_POSITIONAL = re.compile(r"\{(\d+)\}")
_NAMED = re.compile(r"\{(\w+)\}")


def format_template(template: str, args: Optional[Arguments] = None) -> str:
    """Substitute arguments into a template.

    A sequence fills positional {0}, {1}, ... placeholders; a mapping fills
    named {name} placeholders. Placeholders without a matching argument are
    left verbatim. Empty or missing arguments return the template unchanged.

    Args:
        template: Raw template text.
        args: Positional sequence, named mapping, or None.

    Returns:
        Formatted text.
    """
    if not args:
        return template

    if isinstance(args, Mapping):

        def _named(match: "re.Match[str]") -> str:
            name = match.group(1)
            return str(args[name]) if name in args else match.group(0)

        return _NAMED.sub(_named, template)

    values = (args,) if isinstance(args, str) else tuple(args)

    def _positional(match: "re.Match[str]") -> str:
        index = int(match.group(1))
        return str(values[index]) if index < len(values) else match.group(0)

    return _POSITIONAL.sub(_positional, template)
