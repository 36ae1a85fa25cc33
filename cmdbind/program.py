import inspect
import sys

from .coercion import Coercer
from .exceptions import ConfigurationError, NotInitialized
from .options import BindingOptions
from .parser import (
    ArgumentBinder,
    ArgumentSpec,
    ArgumentSpecRegistry,
    BoundValues,
    Source,
)
from .state import StateCodec
from .usage import UsageRenderer
from .util import debug
from .validation import Validator


class ArgumentObject:
    """
    An object whose attributes can be initialized from command-line arguments.

    Subclass it and declare each bindable attribute as an `.ArgumentSpec`::

        class Options(ArgumentObject):
            "Copies files around."

            binding_options = {"default_args": ["source"]}

            source = ArgumentSpec(required=True, usage="FILE")
            verbose = ArgumentSpec(bool, aliases=("v",))
            count = ArgumentSpec(int, default=1, help="Copies to make.")

        options = Options()
        options.initialize()
        if options.help or not options.validate():
            print(options.get_help_text())

    The class docstring becomes the help description unless the options
    already carry one. Customize the title/description/usage by overriding
    `create_options`, or by handing in a `.BindingOptions` explicitly.

    Every instance automatically supports ``help`` (alias ``?``).
    """

    #: Keyword arguments for the default `.BindingOptions`.
    binding_options = {}

    #: Coercer class used for converting tokens to values and back.
    coercer_class = Coercer

    help = ArgumentSpec(
        bool,
        aliases=("?",),
        show_in_usage=True,
        persist=False,
        help="Displays command-line usage information.",
    )

    def __init__(self, options=None):
        """
        Create a new, uninitialized argument object.

        :param options:
            A `.BindingOptions`. Defaults to the result of `create_options`.
        """
        self.options = options if options is not None else self.create_options()
        if self.options.description is None:
            # Only the class's own docstring, never an inherited one
            self.options.description = inspect.cleandoc(type(self).__doc__ or "")
        self.coercer = self.coercer_class()
        self.registry = None
        self.values = BoundValues()
        self.errors = []
        self.is_initialized = False

    def create_options(self):
        """
        Return the `.BindingOptions` used when none are given to ``__init__``.
        """
        return BindingOptions.from_dict(self.binding_options)

    def __str__(self):
        return self.options.usage or ""

    @property
    def type_name(self):
        cls = type(self)
        return "{}.{}".format(cls.__module__, cls.__qualname__)

    @property
    def binder(self):
        return ArgumentBinder(self.registry, self.options, self.coercer)

    @property
    def default_specs(self):
        return self.binder.default_specs()

    @property
    def error_text(self):
        return "\n".join(self.errors)

    def _prepare(self):
        """
        Build the registry, check the options against it, compute usage.

        Only does real work the first time it's called.
        """
        if self.registry is not None:
            return
        registry = ArgumentSpecRegistry.from_class(type(self))
        debug("Registry for {}: {!r}".format(self.type_name, registry))
        # Nothing is stored until the options check out
        default_specs = ArgumentBinder(
            registry, self.options, self.coercer
        ).default_specs()
        self._wait_spec(registry)
        self.registry = registry
        values = BoundValues(registry)
        # Keep anything assigned before initialization
        values.update(self.values)
        self.values = values
        if self.options.usage is None:
            renderer = UsageRenderer(
                registry, self.options, default_specs, self.coercer
            )
            self.options.usage = renderer.render_usage()

    def _wait_spec(self, registry=None):
        name = self.options.wait_arg
        if not name:
            return None
        if registry is None:
            registry = self.registry
        spec = registry.resolve(name)
        if spec is None:
            err = "The wait argument {!r} was not found."
            raise ConfigurationError(err.format(name))
        if spec.kind is not bool:
            raise ConfigurationError("The wait argument must be a boolean.")
        return spec

    def _finish(self):
        spec = self._wait_spec()
        if spec is not None:
            self.options.wait = bool(self.values[spec.name].value)
        self.is_initialized = True
        self.initialized()

    def initialize(self, source=Source.ARGV, args=None):
        """
        Initialize from the given ``source`` of arguments.

        :param source:
            A `.Source`. ``ARGV`` (default) reads ``sys.argv[1:]``; ``LIST``
            binds the token list given as ``args``; ``QUERY_STRING`` binds the
            query string given as ``args``.
        """
        if source is Source.ARGV:
            self.initialize_from_cmdline(*sys.argv[1:])
        elif source is Source.LIST:
            self.initialize_from_cmdline(*(args or ()))
        elif source is Source.QUERY_STRING:
            self.initialize_from_query_string(args or "")
        else:
            raise ValueError("Unknown argument source {!r}".format(source))

    def initialize_empty(self):
        """
        Initialize without binding any arguments.
        """
        self._prepare()
        self._finish()

    def initialize_from_cmdline(self, *args):
        """
        Initialize from argv-style ``args``, without the program name.
        """
        self._prepare()
        self.binder.bind(args, self.values)
        self._finish()

    def initialize_from_query_string(self, query):
        """
        Initialize from ``name=value&...`` pairs in ``query``.
        """
        self._prepare()
        self.binder.bind_query(query, self.values)
        self._finish()

    def initialized(self):
        """
        Hook called once initialization completes. Does nothing by default.
        """
        pass

    def get_errors(self):
        """
        Return a list of validation error strings.

        Override to add checks spanning several arguments; call the parent
        implementation to keep the per-argument checks.
        """
        return list(Validator(self.registry).check(self.values))

    def validate(self):
        """
        Validate the bound values, storing the errors found in ``errors``.

        :returns: ``True`` if there were no errors.
        """
        if self.registry is None:
            raise NotInitialized
        self.errors = self.get_errors()
        return not self.errors

    def get_help_text(self, max_width=80):
        """
        Return the full help text, ``max_width`` columns wide.

        Errors from the latest `validate` call are shown first.
        """
        if self.registry is None:
            raise NotInitialized
        renderer = UsageRenderer(
            self.registry, self.options, self.default_specs, self.coercer
        )
        return renderer.render_help(self.errors, max_width)

    def save(self, path):
        """
        Save persistable values to ``path`` as XML.
        """
        if self.registry is None:
            raise NotInitialized
        StateCodec(self.registry, self.coercer).dump(
            self.values, self.type_name, path
        )

    def restore(self, path):
        """
        Restore values saved by `save` from ``path``.

        :returns:
            ``True`` if ``path`` was read, ``False`` if it was missing or
            unreadable (in which case nothing changes).
        """
        self._prepare()
        return StateCodec(self.registry, self.coercer).restore(path, self.values)
