"""PromptSpec base class with import-time validation."""

import typing
from textwrap import dedent
from typing import Any, ClassVar, Generic

from pydantic import BaseModel, ConfigDict
from pydantic.fields import FieldInfo
from typing_extensions import TypeVar

from .components import Guide, OutputRule, Role, Rule

OutputT = TypeVar("OutputT", default=str)

_SPEC_KNOWN_ATTRS: frozenset[str] = frozenset({
    "role",
    "task",
    "guides",
    "rules",
    "output_rules",
    "model_config",
})


def _check_no_duplicates(items: tuple[type, ...], *, attr: str, spec_name: str) -> None:
    """Reject duplicate entries in a spec tuple (rules, guides, etc.)."""
    seen: set[type] = set()
    for item in items:
        if item in seen:
            raise TypeError(f"PromptSpec '{spec_name}'.{attr} contains duplicate: {item.__name__}")
        seen.add(item)


def _check_unknown_attrs(cls: type, name: str) -> None:
    """Detect unknown class attributes that are likely typos.

    Runs during __init_subclass__ (before model_fields is populated), so uses
    cls.__annotations__ to identify Pydantic field declarations.
    """
    own_annotations = set(cls.__annotations__) if hasattr(cls, "__annotations__") else set()
    for attr_name in cls.__dict__:
        if attr_name.startswith("_"):
            continue
        if attr_name in _SPEC_KNOWN_ATTRS:
            continue
        if attr_name in own_annotations:
            continue
        val = cls.__dict__[attr_name]
        if callable(val) or isinstance(val, (classmethod, staticmethod, property)):
            continue
        raise TypeError(
            f"PromptSpec '{name}' has unknown attribute '{attr_name}'. Known spec attributes: {', '.join(sorted(_SPEC_KNOWN_ATTRS - {'model_config'}))}"
        )


def _check_field_descriptions(cls: type, name: str) -> None:
    """Validate that all Pydantic fields have Field(description=...)."""
    own_annotations = cls.__annotations__ if hasattr(cls, "__annotations__") else {}
    for field_name in own_annotations:
        if field_name in _SPEC_KNOWN_ATTRS:
            continue
        default = cls.__dict__.get(field_name)
        if isinstance(default, FieldInfo):
            if default.description is None:
                raise TypeError(f"PromptSpec '{name}' field '{field_name}' must use Field(description='...'). Bare Field() without description is not allowed.")
        else:
            raise TypeError(f"PromptSpec '{name}' field '{field_name}' must use Field(description='...'). Bare '{field_name}: ...' is not allowed.")


def _check_component_tuple(cls: type, name: str, *, attr: str, base: type, wrong: type | None = None, hint: str = "") -> tuple[type, ...]:
    """Validate an optional tuple of component classes and return it."""
    items = cls.__dict__.get(attr, ())
    if not isinstance(items, tuple):
        raise TypeError(f"PromptSpec '{name}'.{attr} must be a tuple of {base.__name__} subclasses")
    for item in items:
        if not isinstance(item, type) or not issubclass(item, base):
            if wrong is not None and isinstance(item, type) and issubclass(item, wrong):
                raise TypeError(f"PromptSpec '{name}'.{attr} contains {wrong.__name__} '{item.__name__}'. {hint}")
            raise TypeError(f"PromptSpec '{name}'.{attr} contains non-{base.__name__} class: {item!r}")
    _check_no_duplicates(items, attr=attr, spec_name=name)
    return items


class PromptSpec(BaseModel, Generic[OutputT]):
    """Base class for all prompt specifications.

    Generic parameter ``OutputT`` determines the output type:
    - ``PromptSpec[str]`` (or just ``PromptSpec``, default) for text output
    - ``PromptSpec[MyModel]`` for structured output (MyModel must be a BaseModel subclass)

    Must subclass PromptSpec directly, no inheritance chains allowed.
    Must define role and task on every PromptSpec subclass.
    Must use ``Field(description='...')`` for all dynamic Pydantic fields; the
    description becomes the label of the value in the rendered Context section.

    Required ClassVars: role, task.
    Optional ClassVars: guides=(), rules=(), output_rules=().
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    role: ClassVar[type[Role]]
    task: ClassVar[str]
    guides: ClassVar[tuple[type[Guide], ...]]
    rules: ClassVar[tuple[type[Rule], ...]]
    output_rules: ClassVar[tuple[type[OutputRule], ...]]
    output_type: ClassVar[type[str] | type[BaseModel]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        # Pydantic creates concrete subclasses for parameterized generics (e.g. PromptSpec[str]).
        if "[" in cls.__name__:
            return

        name = cls.__name__

        non_spec = [b.__name__ for b in cls.__bases__ if not (b is PromptSpec or (issubclass(b, PromptSpec) and "[" in b.__name__))]
        if non_spec or len(cls.__bases__) != 1:
            raise TypeError(f"PromptSpec '{name}' must inherit directly from PromptSpec, not from {', '.join(non_spec) or 'multiple bases'}")

        if cls.__doc__ is None or not cls.__doc__.strip():
            raise TypeError(f"PromptSpec '{name}' must define a non-empty docstring")

        if "role" not in cls.__dict__:
            raise TypeError(f"PromptSpec '{name}' must define 'role'")
        role = cls.__dict__["role"]
        if not isinstance(role, type) or not issubclass(role, Role):
            raise TypeError(f"PromptSpec '{name}'.role must be a Role subclass (class reference), got {role!r}")

        if "task" not in cls.__dict__:
            raise TypeError(f"PromptSpec '{name}' must define 'task'")
        task = cls.__dict__["task"]
        if not isinstance(task, str):
            raise TypeError(f"PromptSpec '{name}'.task must be a string")
        cls.task = dedent(task).strip()
        if not cls.task:
            raise TypeError(f"PromptSpec '{name}'.task must not be empty")

        # The generic parameter is the source of truth for output_type
        if "output_type" in cls.__dict__:
            raise TypeError(
                f"PromptSpec '{name}' must not declare 'output_type' directly. Use the generic parameter instead: class {name}(PromptSpec[MyModel])"
            )
        output_type: type[str] | type[BaseModel] = str
        for base in getattr(cls, "__orig_bases__", ()):
            if typing.get_origin(base) is PromptSpec:
                args = typing.get_args(base)
                if args and args[0] is not str:
                    output_type = args[0]
                break
        else:
            for base in cls.__bases__:
                meta = getattr(base, "__pydantic_generic_metadata__", None)
                if meta and meta.get("origin") is PromptSpec and meta.get("args"):
                    arg = meta["args"][0]
                    if arg is not str:
                        output_type = arg
                    break
        if output_type is not str and not (isinstance(output_type, type) and issubclass(output_type, BaseModel)):
            raise TypeError(f"PromptSpec '{name}' generic parameter must be 'str' or a BaseModel subclass, got {output_type!r}")
        cls.output_type = output_type

        cls.guides = _check_component_tuple(cls, name, attr="guides", base=Guide)
        cls.rules = _check_component_tuple(
            cls, name, attr="rules", base=Rule, wrong=OutputRule, hint="Use output_rules= for output formatting constraints."
        )
        cls.output_rules = _check_component_tuple(
            cls, name, attr="output_rules", base=OutputRule, wrong=Rule, hint="Use rules= for behavioral constraints."
        )

        _check_field_descriptions(cls, name)
        _check_unknown_attrs(cls, name)


__all__ = ["OutputT", "PromptSpec"]
