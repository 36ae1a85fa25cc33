import json
import os
import sys
from os.path import splitext

import yaml

from .exceptions import ConfigurationError, UnknownFileType
from .util import debug


class BindingOptions:
    """
    Host-supplied settings controlling how arguments are bound and displayed.

    :param str prefix:
        String which marks a token as an argument name. Default: ``"/"``.
    :param default_args:
        Ordered names of arguments which may be given positionally, i.e.
        before any prefixed argument. A single string is treated as a
        one-item list.
    :param str wait_arg:
        Name of a boolean argument whose bound value is copied into
        ``wait`` once binding is complete. Optional.
    :param str application_name:
        Program name shown at the start of the usage line. Defaults to the
        basename of ``sys.argv[0]``.
    :param str title:
        First line of help output. Defaults to ``application_name``.
    :param str description:
        Help text shown under the title. ``None`` lets the argument object
        fill it in (e.g. from its docstring).
    :param str usage:
        Usage line. ``None`` means "compute it when initializing".
    """

    #: Keys accepted by `from_dict` / `from_file`.
    keys = (
        "prefix",
        "default_args",
        "wait_arg",
        "application_name",
        "title",
        "description",
        "usage",
    )

    def __init__(
        self,
        prefix="/",
        default_args=None,
        wait_arg=None,
        application_name=None,
        title=None,
        description=None,
        usage=None,
    ):
        if not prefix:
            raise ConfigurationError("The argument prefix cannot be empty.")
        if isinstance(default_args, str):
            default_args = [default_args]
        self.prefix = prefix
        self.default_args = list(default_args or ())
        self.wait_arg = wait_arg or None
        if application_name is None:
            application_name = os.path.basename(sys.argv[0]) if sys.argv else ""
        self.application_name = application_name
        self._title = title
        self.description = description
        self.usage = usage
        self.wait = False

    def __repr__(self):
        return "<BindingOptions: prefix={!r} default_args={!r}>".format(
            self.prefix, self.default_args
        )

    @property
    def title(self):
        if self._title is None:
            return self.application_name
        return self._title

    @title.setter
    def title(self, value):
        self._title = value

    @classmethod
    def from_dict(cls, data):
        """
        Build options from a mapping of ``keys`` to values.

        :raises: `.ConfigurationError` if ``data`` holds unknown keys.
        """
        data = dict(data or {})
        unknown = sorted(set(data) - set(cls.keys))
        if unknown:
            err = "Unknown binding option(s) {!r}; valid options are: {!r}"
            raise ConfigurationError(err.format(unknown, list(cls.keys)))
        return cls(**data)

    @classmethod
    def from_file(cls, path):
        """
        Build options from a YAML (``.yaml``/``.yml``) or JSON file.

        :raises: `.UnknownFileType` for any other suffix.
        """
        type_ = splitext(path)[1].lstrip(".")
        try:
            loader = getattr(cls, "_load_{}".format(type_))
        except AttributeError:
            msg = "Options files of type {!r} (from file {!r}) are not supported! Please use one of: {!r}"  # noqa
            raise UnknownFileType(msg.format(type_, path, ["yaml", "yml", "json"]))
        data = loader(path)
        debug("Loaded binding options from {!r}: {!r}".format(path, data))
        return cls.from_dict(data)

    @staticmethod
    def _load_yaml(path):
        with open(path) as fd:
            return yaml.safe_load(fd)

    @staticmethod
    def _load_yml(path):
        return BindingOptions._load_yaml(path)

    @staticmethod
    def _load_json(path):
        with open(path) as fd:
            return json.load(fd)
