from ._version import __version_info__, __version__  # noqa
from .coercion import Coercer, Conversion, ConversionError  # noqa
from .exceptions import (  # noqa
    BuildError,
    ConfigurationError,
    DuplicateNameError,
    NotInitialized,
    UnknownFileType,
)
from .options import BindingOptions  # noqa
from .parser import (  # noqa
    ArgumentBinder,
    ArgumentSpec,
    ArgumentSpecRegistry,
    BoundValue,
    BoundValues,
    Source,
)
from .program import ArgumentObject  # noqa
from .state import StateCodec  # noqa
from .usage import UsageRenderer  # noqa
from .validation import (  # noqa
    Length,
    Pattern,
    Range,
    ValidationResult,
    Validator,
    ValueValidator,
)
