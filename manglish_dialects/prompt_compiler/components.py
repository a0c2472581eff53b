"""Static building blocks of a prompt: Role, Rule, OutputRule, Guide.

Components are plain classes whose content is checked once, when the class
body executes. Role, Rule and OutputRule text never contains code fences or
``# `` header lines: fences belong to the Context values and ``#`` lines to
the renderer's section boundaries.
"""

import re
import sys
from pathlib import Path
from textwrap import dedent
from typing import Any, ClassVar

MAX_RULE_LINES = 5

_FENCE = re.compile(r"^\s*(```|~~~)", re.MULTILINE)


def _h1_line(content: str) -> int | None:
    """1-based number of the first ``# `` header line, if any."""
    for line_num, line in enumerate(content.splitlines(), 1):
        if line.startswith("# "):
            return line_num
    return None


class _Component:
    """Docstring and ``text`` checks shared by Role, Rule and OutputRule.

    Direct bases (Role, Rule, OutputRule) set ``_base = True`` in their own
    body and are exempt; every concrete subclass is validated.
    """

    kind: ClassVar[str] = "Component"
    max_lines: ClassVar[int | None] = None
    text: ClassVar[str]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("_base"):
            return

        name = f"{cls.kind} '{cls.__name__}'"
        if cls.__doc__ is None or not cls.__doc__.strip():
            raise TypeError(f"{name} must define a non-empty docstring")

        value = cls.__dict__.get("text")
        if not isinstance(value, str):
            raise TypeError(f"{name} must define 'text' as a ClassVar[str]")
        text = dedent(value).strip()
        if not text:
            raise TypeError(f"{name} has empty 'text'")
        if cls.max_lines is not None and len(text.splitlines()) > cls.max_lines:
            raise TypeError(f"{name} text exceeds {cls.max_lines} lines, use a Guide for longer content")
        if _FENCE.search(text):
            raise TypeError(f"{name} text must not contain code fences; only Context values are fenced")
        if (line_num := _h1_line(text)) is not None:
            raise TypeError(f"{name} text line {line_num} starts with '# ', which is reserved for prompt sections")

        cls.text = text
        cls._check_text(name)

    @classmethod
    def _check_text(cls, name: str) -> None:
        """Extra per-kind checks on the normalized text."""


class Role(_Component):
    """Persona the model is asked to adopt, rendered as ``You are a/an {text}.``

    Must be a single line without closing punctuation; the renderer adds the period.
    """

    _base = True
    kind = "Role"

    @classmethod
    def _check_text(cls, name: str) -> None:
        if "\n" in cls.text:
            raise TypeError(f"{name} text must be a single line")
        if cls.text[-1] in ".!?":
            raise TypeError(f"{name} text must not end with punctuation (the renderer adds a period automatically)")


class Rule(_Component):
    """Behavioral constraint, rendered in the numbered Rules section (max 5 lines)."""

    _base = True
    kind = "Rule"
    max_lines = MAX_RULE_LINES


class OutputRule(_Component):
    """Output formatting constraint, rendered in the numbered Output Rules section (max 5 lines)."""

    _base = True
    kind = "OutputRule"
    max_lines = MAX_RULE_LINES


class Guide:
    """Reference material such as a worked example, loaded from a Markdown file.

    ``template`` is a path relative to the defining module. The file is read
    once at class creation; ``##`` and deeper headers are allowed, ``#`` is not.
    """

    template: ClassVar[str]
    _content: ClassVar[str]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        name = f"Guide '{cls.__name__}'"
        if cls.__doc__ is None or not cls.__doc__.strip():
            raise TypeError(f"{name} must define a non-empty docstring")

        template = cls.__dict__.get("template")
        if not isinstance(template, str) or not template.strip():
            raise TypeError(f"{name} must define 'template' as a ClassVar[str]")
        if Path(template).is_absolute():
            raise TypeError(f"{name} template must be a relative path, got absolute")

        module_file = getattr(sys.modules.get(cls.__module__), "__file__", None)
        if not module_file:
            raise TypeError(f"{name} cannot resolve module file for template validation")

        path = (Path(module_file).resolve().parent / template).resolve()
        if not path.is_file():
            raise TypeError(f"{name} template not found: {path}")

        content = path.read_text(encoding="utf-8")
        if (line_num := _h1_line(content)) is not None:
            raise TypeError(f"{name} template line {line_num} uses '# ' header which is reserved for prompt section boundaries, use '## ' or deeper")
        cls._content = content

    @classmethod
    def render(cls) -> str:
        """Return the cached template file content."""
        return cls._content


__all__ = ["Guide", "OutputRule", "Role", "Rule"]
