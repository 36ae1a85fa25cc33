"""
Post-binding validation, plus a few stock value validators.

A value validator is any object providing:

* ``is_valid(value)``, returning a boolean;
* ``format_error_message(name)``, returning the message to show for the
  argument called ``name`` (used both for errors and in help output).

`ValueValidator` is a convenient base class but is not required.
"""

import re


class ValidationResult(list):
    """
    List of human-readable error strings; empty means valid.
    """

    @property
    def is_valid(self):
        return not self


class Validator:
    """
    Check bound values against the arguments of ``registry``.

    For each argument, in registry order, reports (in this order):

    * a conversion error, as ``"<name> has an error: <message>"``;
    * a missing required value, as ``"<name> is required."``;
    * the message of each attached validator rejecting the value.
    """

    def __init__(self, registry):
        self.registry = registry

    def check(self, values):
        """
        Validate ``values`` (a `.BoundValues`), returning a `ValidationResult`.

        Never mutates ``values``.
        """
        errors = ValidationResult()
        for spec in self.registry:
            bound = values.get(spec.name)
            value = spec.default if bound is None else bound.value
            if bound is not None and bound.error is not None:
                errors.append(
                    "{} has an error: {}".format(spec.name, bound.error.message)
                )
            if spec.required and (bound is None or not bound.was_set):
                errors.append("{} is required.".format(spec.name))
            for validator in spec.validators:
                if not validator.is_valid(value):
                    errors.append(validator.format_error_message(spec.name))
        return errors


class ValueValidator:
    """
    Base class for value validators.

    Subclasses implement `is_valid` and set ``message``, a format string which
    receives the argument name as ``{name}`` plus every attribute of the
    validator instance.
    """

    message = "The field {name} is invalid."

    def __init__(self, message=None):
        if message is not None:
            self.message = message

    def __repr__(self):
        return "<{}>".format(self.__class__.__name__)

    def is_valid(self, value):
        raise NotImplementedError

    def format_error_message(self, name):
        params = dict(vars(self))
        params["name"] = name
        return self.message.format(**params)


class Range(ValueValidator):
    """
    Require ``minimum <= value <= maximum``. Lists are checked item by item.
    """

    message = "The field {name} must be between {minimum} and {maximum}."

    def __init__(self, minimum, maximum, message=None):
        super().__init__(message)
        self.minimum = minimum
        self.maximum = maximum

    def is_valid(self, value):
        if value is None:
            return True
        if isinstance(value, list):
            return all(self.is_valid(x) for x in value)
        return self.minimum <= value <= self.maximum


class Pattern(ValueValidator):
    """
    Require the whole string value to match regular expression ``pattern``.
    """

    message = "The field {name} must match the regular expression '{pattern}'."

    def __init__(self, pattern, message=None):
        super().__init__(message)
        self.pattern = pattern
        self._regex = re.compile(pattern)

    def is_valid(self, value):
        if value is None:
            return True
        if isinstance(value, list):
            return all(self.is_valid(x) for x in value)
        return self._regex.fullmatch(str(value)) is not None


class Length(ValueValidator):
    """
    Require ``minimum <= len(value) <= maximum`` for strings and lists.
    """

    message = "The field {name} must have a length between {minimum} and {maximum}."  # noqa

    def __init__(self, maximum, minimum=0, message=None):
        super().__init__(message)
        self.maximum = maximum
        self.minimum = minimum

    def is_valid(self, value):
        if value is None:
            return True
        return self.minimum <= len(value) <= self.maximum
