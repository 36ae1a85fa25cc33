import enum
from urllib.parse import parse_qsl

from ..coercion import Coercer
from ..exceptions import ConfigurationError
from ..util import debug
from .argument import BoundValues


class Source(enum.Enum):
    """
    Where an argument object should read its arguments from.
    """

    #: ``sys.argv``, minus the program name.
    ARGV = "argv"
    #: A URL query string, e.g. ``"?file=a.txt&verbose=true"``.
    QUERY_STRING = "query_string"
    #: An explicit list of tokens given by the host.
    LIST = "list"


class ArgumentBinder:
    """
    Bind raw argument tokens onto the values of a registry's arguments.

    ``registry`` is an `.ArgumentSpecRegistry`; ``options`` a
    `.BindingOptions` (only ``prefix`` and ``default_args`` matter here).
    ``coercer`` defaults to a plain `.Coercer`.

    Binding is deliberately permissive: unknown argument names are skipped,
    empty values are no-ops, and conversion failures are recorded on the
    affected `.BoundValue` instead of being raised, so one bad argument never
    keeps the rest from binding.
    """

    def __init__(self, registry, options, coercer=None):
        self.registry = registry
        self.options = options
        self.coercer = coercer or Coercer()

    @property
    def prefix(self):
        return self.options.prefix

    def is_name(self, token):
        return token.startswith(self.prefix)

    def value_run(self, tokens, start=0):
        """
        Return the run of non-prefixed tokens in ``tokens`` from ``start``.

        The run stops at the first prefixed token, or the end of ``tokens``.
        """
        run = []
        for token in tokens[start:]:
            if self.is_name(token):
                break
            run.append(token)
        return run

    def default_specs(self):
        """
        The `.ArgumentSpec` objects named by ``options.default_args``.

        :raises:
            `.ConfigurationError` if any of those names is unknown.
        """
        specs = []
        for name in self.options.default_args:
            spec = self.registry.resolve(name)
            if spec is None:
                err = "The default argument {!r} was not found."
                raise ConfigurationError(err.format(name))
            specs.append(spec)
        return specs

    def bind(self, tokens, values=None):
        """
        Bind argv-style ``tokens`` onto ``values``.

        ``tokens`` must not include the program name. ``values`` is a
        `.BoundValues` mapping; a fresh one is created if not given.

        :returns: ``values``.
        """
        tokens = list(tokens)
        if values is None:
            values = BoundValues(self.registry)
        debug("Binding tokens: {!r}".format(tokens))
        index = 0
        if tokens and self.options.default_args and not self.is_name(tokens[0]):
            index = self.bind_positionals(tokens, values)
        while index < len(tokens):
            index = self.bind_named(tokens, index, values)
        return values

    def bind_positionals(self, tokens, values):
        """
        Assign the leading value-run of ``tokens`` to the default arguments.

        :returns: Index of the first token after the run.
        """
        run = self.value_run(tokens)
        specs = self.default_specs()
        if len(specs) == 1:
            debug("Giving default argument {!r} {!r}".format(specs[0], run))
            values.for_spec(specs[0]).set_tokens(run, self.coercer)
        else:
            for spec, token in zip(specs, run):
                debug("Giving default argument {!r} {!r}".format(spec, token))
                values.for_spec(spec).set_tokens([token], self.coercer)
        return len(run)

    def bind_named(self, tokens, index, values):
        """
        Handle the token at ``index``, which may name an argument.

        :returns: Index of the next token to examine.
        """
        token = tokens[index]
        if not self.is_name(token):
            debug("Skipping stray value {!r}".format(token))
            return index + 1
        name = token[len(self.prefix):]
        negated = name.endswith("-")
        if negated:
            name = name[:-1]
        if not name:
            return index + 1
        spec = self.registry.resolve(name)
        if spec is None:
            debug("Ignoring unknown argument {!r}".format(token))
            return index + 1
        bound = values.for_spec(spec)
        run = self.value_run(tokens, index + 1)
        if not spec.takes_value:
            return index + 1 + self.bind_switch(bound, negated, run)
        if run:
            debug("Setting {!r} from {!r}".format(spec, run))
            bound.set_tokens(run, self.coercer)
        else:
            debug("No value given for {!r}, leaving it alone".format(spec))
        return index + 1 + len(run)

    def bind_switch(self, bound, negated, run):
        """
        Set boolean ``bound`` from its (possibly absent) trailing ``run``.

        A trailing ``-`` on the name always means ``False``. Otherwise a value
        following the switch is only used, and consumed, if it reads as a
        boolean; anything else just means ``True`` and is left in place.

        :returns: Number of tokens consumed from ``run``.
        """
        if negated:
            debug("Saw negated switch {!r}".format(bound.spec))
            bound.set_value(False)
            return 0
        if run:
            result = self.coercer.to_type(run[0], bool)
            if result.ok:
                debug("Switch {!r} given value {!r}".format(bound.spec, run[0]))
                bound.raw_value = run[:1]
                bound.set_value(result.value)
                return 1
            debug(
                "{!r} doesn't look like a boolean, treating {!r} as seen".format(
                    run[0], bound.spec
                )
            )
        bound.set_value(True)
        return 0

    def bind_query(self, query, values=None):
        """
        Bind ``name=value&...`` pairs from a URL ``query`` onto ``values``.

        There is no positional handling and no prefix. Repeated names build
        up list arguments; for anything else the last occurrence wins. A
        boolean named with a blank value counts as ``True``.

        :returns: ``values``.
        """
        if values is None:
            values = BoundValues(self.registry)
        query = (query or "").lstrip("?")
        debug("Binding query string: {!r}".format(query))
        given = {}
        for name, value in parse_qsl(query, keep_blank_values=True):
            spec = self.registry.resolve(name)
            if spec is None:
                debug("Ignoring unknown query parameter {!r}".format(name))
                continue
            given.setdefault(spec.name, []).append(value)
        for name, texts in given.items():
            spec = self.registry[name]
            bound = values.for_spec(spec)
            texts = [x for x in texts if x != ""]
            if not spec.takes_value:
                bound.raw_value = texts[-1:]
                result = self.coercer.to_type(texts[-1], bool) if texts else None
                if result is None:
                    bound.set_value(True)
                else:
                    bound.apply(result)
            elif not texts:
                debug("No value given for {!r}, leaving it alone".format(spec))
            elif spec.is_list:
                bound.set_tokens(texts, self.coercer)
            else:
                bound.set_tokens(texts[-1:], self.coercer)
        return values
