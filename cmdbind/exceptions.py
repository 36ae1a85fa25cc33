"""
Custom exception classes.

These are reserved for conditions the host program must fix before any
binding can happen (bad declarations, bad options, API misuse). Problems with
the actual user-supplied arguments are never raised; they are recorded on the
affected field and reported through validation instead.
"""


class BuildError(ValueError):
    """
    An argument registry could not be built from the declared fields.
    """

    pass


class DuplicateNameError(BuildError):
    """
    Two declared arguments share a name and/or alias.

    ``name`` is the colliding name or alias; ``existing`` is the canonical name
    of the argument which already claimed it.
    """

    def __init__(self, name, existing=None):
        self.name = name
        self.existing = existing
        super().__init__(name, existing)

    def __str__(self):
        msg = "An argument named/aliased {!r} already exists"
        if self.existing is not None:
            msg += " (claimed by {!r})".format(self.existing)
        return msg.format(self.name) + "!"


class ConfigurationError(Exception):
    """
    The binding options don't agree with the declared arguments.

    E.g. a default or "wait" argument name which doesn't resolve to any
    declared argument, or an empty argument prefix.
    """

    pass


class NotInitialized(Exception):
    """
    An argument object was used before one of its ``initialize`` methods ran.
    """

    def __str__(self):
        return "The command-line object has not been initialized yet."


class UnknownFileType(Exception):
    """
    An options file was requested with an unsupported suffix.
    """

    pass
