from .argument import ArgumentSpec, BoundValue, BoundValues
from .binder import ArgumentBinder, Source
from .registry import ArgumentSpecRegistry
