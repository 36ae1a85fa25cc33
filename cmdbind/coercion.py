"""
String <-> value conversion for argument fields.

Conversion failures are ordinary results here, not exceptions: every call to
`Coercer.to_type` yields a `Conversion` whose ``error`` is either ``None`` or
a `ConversionError` describing what went wrong. The binder stores that error
on the field and validation reports it later.
"""

import enum
from collections import namedtuple

from .util import debug


class ConversionError:
    """
    Why a given ``text`` could not become a value of ``kind``.
    """

    def __init__(self, text, kind, reason=None):
        self.text = text
        self.kind = kind
        self.reason = reason

    @property
    def message(self):
        msg = "{!r} is not a valid {}.".format(self.text, kind_name(self.kind))
        if self.reason:
            msg = "{} {}".format(msg, self.reason)
        return msg

    def __str__(self):
        return self.message

    def __repr__(self):
        return "<ConversionError: {}>".format(self.message)

    def __eq__(self, other):
        return (
            isinstance(other, ConversionError)
            and (self.text, self.kind, self.reason)
            == (other.text, other.kind, other.reason)
        )


class Conversion(namedtuple("Conversion", ("value", "error"))):
    """
    Result of a conversion: the ``value`` on success, or an ``error`` (a
    `ConversionError`) and a ``value`` of ``None`` on failure.
    """

    __slots__ = ()

    @property
    def ok(self):
        return self.error is None


def kind_name(kind):
    return getattr(kind, "__name__", repr(kind))


def is_enum(kind):
    return isinstance(kind, type) and issubclass(kind, enum.Enum)


class Coercer:
    """
    Convert argument tokens to and from typed values.

    Supported kinds: ``bool``, ``str``, ``int``, ``float``, any `enum.Enum`
    subclass (members are looked up by name), ``list`` (element-wise, using an
    item kind) and any other callable which accepts a single string and raises
    ``ValueError`` or ``TypeError`` on bad input.

    Subclass and override `to_type`/`to_string` to teach it new tricks.
    """

    #: Case-insensitive spellings accepted for booleans.
    true_strings = ("true", "t", "yes", "y", "on", "1")
    false_strings = ("false", "f", "no", "n", "off", "0")

    def to_type(self, text, kind):
        """
        Convert string ``text`` into a value of type ``kind``.

        Returns a `Conversion`. Empty or blank text is an error for any kind
        other than ``str``.
        """
        if kind is str:
            return Conversion(text, None)
        if text is None or not text.strip():
            debug("Refusing to cast blank {!r} to {!r}".format(text, kind))
            return Conversion(None, ConversionError(text or "", kind))
        if kind is bool:
            return self._to_bool(text)
        if is_enum(kind):
            return self._to_enum(text, kind)
        try:
            return Conversion(kind(text), None)
        except (ValueError, TypeError) as e:
            debug("Unable to cast {!r} to {!r}: {!r}".format(text, kind, e))
            return Conversion(None, ConversionError(text, kind))

    def _to_bool(self, text):
        lowered = text.strip().lower()
        if lowered in self.true_strings:
            return Conversion(True, None)
        if lowered in self.false_strings:
            return Conversion(False, None)
        return Conversion(None, ConversionError(text, bool))

    def _to_enum(self, text, kind):
        if text in kind.__members__:
            return Conversion(kind[text], None)
        # Fall back to a case-insensitive match on member names
        for name, member in kind.__members__.items():
            if name.lower() == text.lower():
                return Conversion(member, None)
        reason = "Possible values are: {}.".format(", ".join(kind.__members__))
        return Conversion(None, ConversionError(text, kind, reason))

    def to_list(self, texts, item_kind):
        """
        Convert each of ``texts`` to ``item_kind``, yielding a list value.

        The first failing element's error is the error of the whole list.
        """
        values = []
        for text in texts:
            value, error = self.to_type(text, item_kind)
            if error is not None:
                return Conversion(None, error)
            values.append(value)
        return Conversion(values, None)

    def convert_tokens(self, tokens, spec):
        """
        Convert a value-run of ``tokens`` into a value for ``spec``.

        List-kind specs get every token; ``str`` specs get the tokens joined
        by single spaces; any other kind only looks at the first token.
        """
        tokens = list(tokens)
        if spec.is_list:
            return self.to_list(tokens, spec.item_kind)
        if spec.kind is str:
            return Conversion(" ".join(tokens), None)
        return self.to_type(tokens[0] if tokens else "", spec.kind)

    def to_string(self, value):
        """
        Render ``value`` the way `to_type` expects to read it back.
        """
        if value is None:
            return ""
        if isinstance(value, enum.Enum):
            return value.name
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def is_empty(self, value):
        """
        Whether ``value`` is "nothing": ``None``, an empty string/collection.
        """
        if value is None:
            return True
        if isinstance(value, (str, list, tuple, dict, set)):
            return len(value) == 0
        return False
