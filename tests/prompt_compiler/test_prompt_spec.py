"""Tests for PromptSpec import-time validation."""

import pytest
from pydantic import BaseModel, Field, PydanticUserError
from pydantic import ValidationError as PydanticValidationError

from manglish_dialects.prompt_compiler import OutputRule, PromptSpec, Role, Rule
from manglish_dialects.prompt_compiler.spec import _check_unknown_attrs


class SpecRole(Role):
    """Spec role."""

    text = "dialect expert"


class SpecRule(Rule):
    """Spec rule."""

    text = "Answer in Manglish"


class SpecOutputRule(OutputRule):
    """Spec output rule."""

    text = "Return JSON only"


class Verdict(BaseModel):
    label: str


class TextSpec(PromptSpec):
    """Free text spec."""

    role = SpecRole
    task = """
        Say hello.
    """

    name: str = Field(description="Name")


class VerdictSpec(PromptSpec[Verdict]):
    """Structured spec."""

    role = SpecRole
    task = "Classify"
    rules = (SpecRule,)
    output_rules = (SpecOutputRule,)


class TestOutputType:
    def test_default_is_text(self):
        assert TextSpec.output_type is str

    def test_structured(self):
        assert VerdictSpec.output_type is Verdict

    def test_rejects_non_model_parameter(self):
        with pytest.raises(TypeError, match="generic parameter"):

            class BadSpec(PromptSpec[int]):  # type: ignore[type-var]
                """Bad."""

                role = SpecRole
                task = "x"


class TestClassValidation:
    def test_task_is_dedented(self):
        assert TextSpec.task == "Say hello."

    def test_optional_tuples_default_empty(self):
        assert TextSpec.rules == ()
        assert TextSpec.guides == ()
        assert TextSpec.output_rules == ()

    def test_requires_docstring(self):
        with pytest.raises(TypeError, match="docstring"):

            class NoDoc(PromptSpec):
                role = SpecRole
                task = "x"

    def test_requires_role(self):
        with pytest.raises(TypeError, match="must define 'role'"):

            class NoRole(PromptSpec):
                """No role."""

                task = "x"

    def test_role_must_be_class(self):
        with pytest.raises(TypeError, match="Role subclass"):

            class StrRole(PromptSpec):
                """String role."""

                role = "expert"  # type: ignore[assignment]
                task = "x"

    def test_requires_task(self):
        with pytest.raises(TypeError, match="must define 'task'"):

            class NoTask(PromptSpec):
                """No task."""

                role = SpecRole

    def test_rejects_empty_task(self):
        with pytest.raises(TypeError, match="must not be empty"):

            class EmptyTask(PromptSpec):
                """Empty task."""

                role = SpecRole
                task = "   "

    def test_rules_must_be_tuple(self):
        with pytest.raises(TypeError, match="must be a tuple"):

            class ListRules(PromptSpec):
                """List rules."""

                role = SpecRole
                task = "x"
                rules = [SpecRule]  # type: ignore[assignment]

    def test_output_rule_in_rules_points_to_output_rules(self):
        with pytest.raises(TypeError, match="Use output_rules="):

            class Misplaced(PromptSpec):
                """Misplaced."""

                role = SpecRole
                task = "x"
                rules = (SpecOutputRule,)  # type: ignore[assignment]

    def test_rule_in_output_rules_points_to_rules(self):
        with pytest.raises(TypeError, match="Use rules="):

            class Misplaced(PromptSpec):
                """Misplaced."""

                role = SpecRole
                task = "x"
                output_rules = (SpecRule,)  # type: ignore[assignment]

    def test_rejects_duplicates(self):
        with pytest.raises(TypeError, match="duplicate: SpecRule"):

            class Dupes(PromptSpec):
                """Dupes."""

                role = SpecRole
                task = "x"
                rules = (SpecRule, SpecRule)

    def test_fields_need_description(self):
        with pytest.raises(TypeError, match=r"Field\(description="):

            class Bare(PromptSpec):
                """Bare."""

                role = SpecRole
                task = "x"
                sentence: str

    def test_field_without_description(self):
        with pytest.raises(TypeError, match="Bare Field"):

            class Undescribed(PromptSpec):
                """Undescribed."""

                role = SpecRole
                task = "x"
                sentence: str = Field()

    def test_rejects_unannotated_tuple_attribute(self):
        with pytest.raises(PydanticUserError, match="non-annotated attribute was detected: `rule"):

            class Typo(PromptSpec):
                """Typo."""

                role = SpecRole
                task = "x"
                rule = (SpecRule,)

    def test_rejects_output_type_attribute(self):
        with pytest.raises(TypeError, match="generic parameter instead"):

            class Explicit(PromptSpec):
                """Explicit."""

                role = SpecRole
                task = "x"
                output_type = Verdict

    def test_rejects_inheritance_chain(self):
        with pytest.raises(TypeError, match="inherit directly"):

            class Child(TextSpec):
                """Child."""

                role = SpecRole
                task = "x"


class TestInstances:
    def test_frozen(self):
        spec = TextSpec(name="Anu")
        with pytest.raises(PydanticValidationError):
            spec.name = "Biju"  # type: ignore[misc]

    def test_extra_fields_forbidden(self):
        with pytest.raises(PydanticValidationError):
            TextSpec(name="Anu", extra="x")  # type: ignore[call-arg]


class TestUnknownAttrs:
    def test_flags_plain_attribute(self):
        class Dummy:
            guide = 1

        with pytest.raises(TypeError, match="has unknown attribute 'guide'"):
            _check_unknown_attrs(Dummy, "Dummy")

    def test_ignores_private_and_callables(self):
        class Dummy:
            _private = "ok"

            def helper(self) -> None:
                pass

        _check_unknown_attrs(Dummy, "Dummy")
