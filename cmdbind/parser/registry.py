from lexicon import Lexicon

from ..exceptions import DuplicateNameError
from ..util import debug
from .argument import ArgumentSpec


class ArgumentSpecRegistry:
    """
    Ordered, alias-aware collection of `.ArgumentSpec` objects.

    Generally built once per argument object by `from_class`, by walking the
    class' declared specs; may also be built by hand from any iterable of
    specs.

    Names and aliases share a single namespace: no alias may shadow another
    spec's name, nor another alias.
    """

    def __init__(self, specs=()):
        """
        Create a registry, adding each of ``specs`` in order.
        """
        self.specs = Lexicon()
        for spec in specs:
            self.add(spec)

    @classmethod
    def from_class(cls, klass):
        """
        Build a registry from the `.ArgumentSpec` attributes of ``klass``.

        Base classes are walked first, so inherited arguments (such as the
        implicit ``help`` flag) come before a subclass' own. Within a class,
        arguments keep their source order. Attributes overridden by a
        subclass are registered once, at the base class' position.
        """
        found = {}
        for base in reversed(klass.__mro__):
            for attr, value in vars(base).items():
                if isinstance(value, ArgumentSpec):
                    found[attr] = value
                elif attr in found:
                    # Subclass replaced the spec with something else
                    del found[attr]
        return cls(found.values())

    def __str__(self):
        return "<ArgumentSpecRegistry: {}>".format(
            ", ".join(spec.name for spec in self)
        )

    def __repr__(self):
        return str(self)

    def __iter__(self):
        return iter(list(self.specs.values()))

    def __len__(self):
        return len(self.specs)

    def __contains__(self, name):
        return name in self.specs

    def __getitem__(self, name):
        return self.specs[name]

    def add(self, spec):
        """
        Add ``spec`` to this registry.

        :raises:
            `.DuplicateNameError` if its name or any of its aliases is already
            known to the registry (as a name or as an alias), or if the spec
            repeats one of its own names.
        """
        if not spec.name:
            raise ValueError("Arguments must have a name: {!r}".format(spec))
        seen = set()
        for name in spec.names:
            if name in self.specs:
                raise DuplicateNameError(name, self.specs[name].name)
            if name in seen:
                raise DuplicateNameError(name, spec.name)
            seen.add(name)
        debug("Adding {!r}".format(spec))
        self.specs[spec.name] = spec
        for alias in spec.aliases:
            self.specs.alias(alias, to=spec.name)

    def resolve(self, token):
        """
        Return the spec named or aliased exactly ``token``, or ``None``.
        """
        if token in self.specs:
            return self.specs[token]
        return None
