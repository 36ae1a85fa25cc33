from ..coercion import is_enum


class ArgumentSpec:
    """
    Static description of one command-line bindable field.

    Declared as a class attribute of an `.ArgumentObject` subclass, where it
    doubles as a descriptor: reading the attribute on an instance returns the
    currently bound value, assigning to it sets the value directly.

    :param kind:
        Type hint & converter. ``str`` (default), ``bool`` (a switch which
        needs no value), ``int``, ``float``, an `enum.Enum` subclass, ``list``
        (see ``item_kind``) or any callable taking a single string.
    :param name:
        Canonical argument name. Defaults to the attribute name the spec is
        declared under.
    :param aliases:
        Iterable of alternate names, e.g. ``("v",)``. The first alias is what
        usage lines display.
    :param required:
        Whether validation should complain if this argument is never given.
    :param usage:
        Short value placeholder shown in usage lines, e.g. ``"FILE"``.
    :param help:
        Description shown in full help output.
    :param show_in_usage:
        ``None`` (default) shows the argument in the usage line only when it
        is required; ``True``/``False`` force it on/off.
    :param persist:
        Whether `.StateCodec` saves this argument's value.
    :param default:
        Value used when the argument is never given. ``None`` means the kind's
        own default: ``False`` for ``bool``, ``[]`` for ``list``, otherwise
        ``None``.
    :param item_kind:
        Element kind for ``list`` arguments. Defaults to ``str``.
    :param validators:
        Iterable of value validators (see `cmdbind.validation`).
    """

    def __init__(
        self,
        kind=str,
        name=None,
        aliases=(),
        required=False,
        usage="",
        help="",
        show_in_usage=None,
        persist=True,
        default=None,
        item_kind=str,
        validators=(),
    ):
        if isinstance(aliases, str):
            aliases = (aliases,)
        self.kind = kind
        self.name = name
        self.aliases = tuple(aliases)
        self.required = required
        self.usage = usage or ""
        self.help = help or ""
        self.show_in_usage = show_in_usage
        self.persist = persist
        self._default = default
        self.item_kind = item_kind
        self.validators = tuple(validators)
        self.attr_name = None

    def __set_name__(self, owner, attr_name):
        self.attr_name = attr_name
        if self.name is None:
            self.name = attr_name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        values = obj.__dict__.get("values")
        if values is None or self.name not in values:
            return self.default
        return values[self.name].value

    def __set__(self, obj, value):
        obj.values.setdefault(self.name, BoundValue(self)).set_value(value)

    def __str__(self):
        aliases = ""
        if self.aliases:
            aliases = " ({})".format(", ".join(self.aliases))
        kind = ""
        if self.kind is not str:
            kind = " [{}]".format(getattr(self.kind, "__name__", self.kind))
        return "<{}: {}{}{}{}>".format(
            self.__class__.__name__,
            self.name,
            aliases,
            kind,
            "!" if self.required else "",
        )

    def __repr__(self):
        return str(self)

    @property
    def names(self):
        """
        The canonical name followed by any aliases.
        """
        return (self.name,) + self.aliases

    @property
    def takes_value(self):
        return self.kind is not bool

    @property
    def is_list(self):
        return self.kind is list

    @property
    def is_enum(self):
        return is_enum(self.kind)

    @property
    def choices(self):
        """
        Member names of an enum kind, in definition order; else empty.
        """
        if not self.is_enum:
            return ()
        return tuple(self.kind.__members__)

    @property
    def default(self):
        if self._default is not None:
            # Hand out copies of mutable defaults so fields can't share them
            return list(self._default) if self.is_list else self._default
        if self.kind is bool:
            return False
        if self.is_list:
            return []
        return None

    @property
    def shown_in_usage(self):
        if self.show_in_usage is None:
            return self.required
        return self.show_in_usage


class BoundValue:
    """
    Per-instance runtime state of one argument.

    Tracks the current ``value``, whether it was explicitly set (``was_set``)
    as opposed to left at its default, the raw tokens it was last set from and
    any conversion ``error`` those tokens produced.
    """

    def __init__(self, spec):
        self.spec = spec
        self.value = spec.default
        self.raw_value = None
        self.was_set = False
        self.error = None

    def __repr__(self):
        flags = "set" if self.was_set else "default"
        if self.error is not None:
            flags += ", error"
        return "<BoundValue {}={!r} ({})>".format(
            self.spec.name, self.value, flags
        )

    def set_value(self, value):
        """
        Set an already-typed ``value``, clearing any prior conversion error.
        """
        self.value = value
        self.error = None
        self.was_set = True

    def set_tokens(self, tokens, coercer):
        """
        Convert the value-run ``tokens`` with ``coercer`` and store the result.

        On failure the value and ``was_set`` are left alone and the
        `.ConversionError` is kept on ``error``.

        :returns: The `.Conversion` produced.
        """
        self.raw_value = list(tokens)
        result = coercer.convert_tokens(self.raw_value, self.spec)
        self.apply(result)
        return result

    def apply(self, result):
        """
        Store a `.Conversion` ``result``.
        """
        if result.error is None:
            self.set_value(result.value)
        else:
            self.error = result.error


class BoundValues(dict):
    """
    Mapping of argument name -> `BoundValue`, seeded from a registry.
    """

    def __init__(self, registry=()):
        super().__init__()
        for spec in registry:
            self[spec.name] = BoundValue(spec)

    def for_spec(self, spec):
        if spec.name not in self:
            self[spec.name] = BoundValue(spec)
        return self[spec.name]

    def as_dict(self):
        """
        Plain ``{name: value}`` snapshot of every argument.
        """
        return {name: bound.value for name, bound in self.items()}

