from .coercion import Coercer
from .util import wrap


class UsageRenderer:
    """
    Render usage lines and full help text for a registry of arguments.

    ``options`` is the `.BindingOptions` in effect; ``default_specs`` the
    specs bound positionally (as resolved by `.ArgumentBinder.default_specs`),
    shown first in usage lines.
    """

    #: Extra gutter room next to the longest argument name, for ' (x): '.
    gutter_padding = 6
    error_indent = "    "

    def __init__(self, registry, options, default_specs=(), coercer=None):
        self.registry = registry
        self.options = options
        self.default_specs = list(default_specs)
        self.coercer = coercer or Coercer()

    def render_usage(self):
        """
        Return the one-line invocation summary.

        Shows the application name, then positional arguments, then required
        arguments (unless hidden), then optional arguments explicitly marked
        as shown in usage, wrapped in ``[]``.
        """
        parts = [self.options.application_name]
        for spec in self.default_specs:
            parts.append("<{}>".format(spec.usage or spec.name))
        # Required arguments first...
        for spec in self.registry:
            if spec.required and spec.shown_in_usage:
                parts.append(self.spec_usage(spec))
        # ...then anything optional which asked to be shown.
        for spec in self.registry:
            if not spec.required and spec.shown_in_usage:
                parts.append("[{}]".format(self.spec_usage(spec)))
        return " ".join(parts)

    def spec_usage(self, spec):
        flag = self.options.prefix + (spec.aliases[0] if spec.aliases else spec.name)
        if spec.usage:
            return "{} <{}>".format(flag, spec.usage)
        if not spec.takes_value:
            return "{}[-]".format(flag)
        return "{} <{}>".format(flag, spec.name)

    def render_help(self, errors=(), max_width=80):
        """
        Return full help text, ``max_width`` columns wide.

        Any ``errors`` (e.g. from `.Validator.check`) lead the output. Then
        come the title, description and usage line, followed by one block per
        argument describing it.
        """
        lines = []
        errors = list(errors)
        if errors:
            lines.extend(wrap("ERROR: " + errors[0], max_width))
            for error in errors[1:]:
                lines.extend(wrap(error, max_width, self.error_indent))
            lines.append("")
        lines.append(self.options.title)
        # Description always gets at least one line, even when blank
        lines.extend(wrap(self.options.description or "", max_width) or [""])
        lines.append("Usage: " + (self.options.usage or self.render_usage()))
        lines.append("")
        gutter = self.gutter_width()
        for spec in self.registry:
            lines.extend(self.spec_help(spec, gutter, max_width))
        return "\n".join(lines) + "\n"

    def gutter_width(self):
        names = [len(spec.name) for spec in self.registry]
        return max(names or [0]) + self.gutter_padding

    def spec_help(self, spec, gutter, max_width):
        indent = " " * gutter
        label = spec.name
        if spec.aliases:
            label += " ({})".format(", ".join(spec.aliases))
        label = (label + ": ").ljust(gutter)
        described = wrap(spec.help, max_width - gutter)
        lines = [label + (described[0] if described else "")]
        lines.extend(indent + line for line in described[1:])
        if spec.required:
            lines.append(indent + "REQUIRED")
        else:
            default = self.format_default(spec)
            if default:
                lines.append(indent + "Default Value: " + default)
        if spec.is_enum:
            choices = indent + "Possible Values: [{}]".format(
                ", ".join(spec.choices)
            )
            if len(choices) < max_width:
                lines.append(choices)
        for validator in spec.validators:
            lines.append(indent + validator.format_error_message(spec.name))
        return [line.rstrip() for line in lines]

    def format_default(self, spec):
        """
        Render ``spec``'s default value, or return ``""`` if it is empty.

        ``False`` counts as empty for switches, since that is what "not
        given" already means.
        """
        value = spec.default
        if self.coercer.is_empty(value) or value is False:
            return ""
        if spec.is_list:
            items = [self.coercer.to_string(x) for x in value]
            if spec.item_kind is str:
                return '["{}"]'.format('", "'.join(items))
            return "[{}]".format(", ".join(items))
        return self.coercer.to_string(value)
