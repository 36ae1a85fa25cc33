import enum

from cmdbind import (
    ArgumentObject,
    ArgumentSpec,
    ArgumentSpecRegistry,
    BindingOptions,
    Range,
)


class Color(enum.Enum):
    Red = 1
    Green = 2
    Blue = 3


class Sample(ArgumentObject):
    """
    Sample program used throughout the tests.
    """

    binding_options = {"application_name": "sample", "default_args": "file"}

    file = ArgumentSpec(required=True, usage="FILE", help="File to read.")
    verbose = ArgumentSpec(bool, aliases=("v",), help="Talk more.")
    count = ArgumentSpec(
        int,
        aliases=("c", "n"),
        default=3,
        validators=[Range(1, 10)],
        help="How many times.",
    )
    color = ArgumentSpec(Color, help="Favorite color.")
    tags = ArgumentSpec(list, aliases=("t",), help="Labels to apply.")
    sizes = ArgumentSpec(list, item_kind=int)
    secret = ArgumentSpec(persist=False)


class Copier(ArgumentObject):
    "Copies things."

    binding_options = {
        "application_name": "copy",
        "default_args": ["src", "dst"],
        "prefix": "-",
        "wait_arg": "pause",
    }

    src = ArgumentSpec(required=True)
    dst = ArgumentSpec(required=True, usage="DEST")
    force = ArgumentSpec(bool, aliases=("f",))
    pause = ArgumentSpec(bool, aliases=("p",), show_in_usage=True)
    level = ArgumentSpec(float, show_in_usage=True)


class Bare(ArgumentObject):
    pass


def registry(*specs):
    return ArgumentSpecRegistry(specs)


def options(**kwargs):
    kwargs.setdefault("application_name", "app")
    return BindingOptions(**kwargs)
