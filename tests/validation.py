from cmdbind import (
    ArgumentBinder,
    ArgumentSpec,
    BoundValues,
    Length,
    Pattern,
    Range,
    ValidationResult,
    Validator,
    ValueValidator,
)

from _util import options, registry


class Validator_:
    def setup_method(self):
        self.registry = registry(
            ArgumentSpec(name="name", required=True),
            ArgumentSpec(int, name="count", validators=[Range(1, 5)]),
            ArgumentSpec(int, name="size", required=True),
        )
        self.binder = ArgumentBinder(self.registry, options())

    def _check(self, *tokens):
        values = self.binder.bind(tokens)
        return Validator(self.registry).check(values)

    def valid_values_give_empty_result(self):
        result = self._check("/name", "x", "/size", "2", "/count", "3")
        assert result == []
        assert result.is_valid

    def result_is_a_ValidationResult(self):
        assert isinstance(self._check(), ValidationResult)

    def failed_conversion_alone(self):
        result = self._check("/name", "x", "/count", "lots", "/size", "1")
        assert result == ["count has an error: 'lots' is not a valid int."]

    def exactly_two_errors_in_registry_order(self):
        result = self._check("/count", "lots", "/size", "1")
        assert result == [
            "name is required.",
            "count has an error: 'lots' is not a valid int.",
        ]
        assert not result.is_valid

    def required_field_with_bad_value_reports_both(self):
        result = self._check("/name", "x", "/size", "big")
        assert result == [
            "size has an error: 'big' is not a valid int.",
            "size is required.",
        ]

    def blank_required_value_is_not_accepted(self):
        result = self._check("/name", "x", "/size", "")
        assert result == [
            "size has an error: '' is not a valid int.",
            "size is required.",
        ]

    def attached_validators_are_consulted(self):
        result = self._check("/name", "x", "/size", "1", "/count", "9")
        assert result == ["The field count must be between 1 and 5."]

    def does_not_mutate_and_may_repeat(self):
        values = self.binder.bind(["/count", "9"])
        validator = Validator(self.registry)
        first = validator.check(values)
        assert validator.check(values) == first
        assert values["count"].value == 9

    def rebinding_changes_the_result(self):
        validator = Validator(self.registry)
        values = self.binder.bind(["/count", "9"])
        assert len(validator.check(values)) == 3
        self.binder.bind(["/name", "x", "/size", "1", "/count", "2"], values)
        assert validator.check(values) == []

    def tolerates_missing_bound_values(self):
        result = Validator(self.registry).check(BoundValues())
        assert result == ["name is required.", "size is required."]


class Range_:
    def accepts_inclusive_bounds(self):
        r = Range(1, 3)
        assert r.is_valid(1) and r.is_valid(3)

    def rejects_outside(self):
        assert not Range(1, 3).is_valid(4)

    def None_is_valid(self):
        assert Range(1, 3).is_valid(None)

    def checks_list_items(self):
        assert Range(1, 3).is_valid([1, 2])
        assert not Range(1, 3).is_valid([1, 5])

    def message(self):
        msg = Range(1, 3).format_error_message("n")
        assert msg == "The field n must be between 1 and 3."

    def custom_message(self):
        r = Range(1, 3, message="{name} out of {minimum}..{maximum}")
        assert r.format_error_message("n") == "n out of 1..3"


class Pattern_:
    def matches_whole_value(self):
        p = Pattern(r"[a-z]+")
        assert p.is_valid("abc")
        assert not p.is_valid("abc1")

    def message(self):
        msg = Pattern(r"\d+").format_error_message("id")
        assert msg == "The field id must match the regular expression '\\d+'."


class Length_:
    def checks_bounds(self):
        length = Length(3, minimum=1)
        assert length.is_valid("ab")
        assert not length.is_valid("")
        assert not length.is_valid("abcd")
        assert length.is_valid(["a"])

    def message(self):
        msg = Length(3).format_error_message("code")
        assert msg == "The field code must have a length between 0 and 3."


class ValueValidator_:
    def custom_subclasses_plug_in(self):
        class Even(ValueValidator):
            message = "{name} must be even."

            def is_valid(self, value):
                return value is None or value % 2 == 0

        spec = ArgumentSpec(int, name="n", validators=[Even()])
        reg = registry(spec)
        values = ArgumentBinder(reg, options()).bind(["/n", "3"])
        assert Validator(reg).check(values) == ["n must be even."]
