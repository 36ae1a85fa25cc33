import logging
import os
import textwrap


LOG_FORMAT = "%(name)s.%(module)s.%(funcName)s: %(message)s"


def enable_logging():
    logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)


# Allow from-the-start debugging via shell env var.
if os.environ.get("CMDBIND_DEBUG"):
    enable_logging()

# Add top level logger functions to global namespace. Meh.
log = logging.getLogger("cmdbind")
debug = log.debug


def wrap(text, width, indent=""):
    """
    Word-wrap ``text`` to ``width`` columns, returning a list of lines.

    Existing line breaks in ``text`` are honored; each paragraph is wrapped on
    its own. ``indent`` is prepended to every resulting line (and counts
    against ``width``). Blank input yields an empty list.
    """
    if not text:
        return []
    # Guard against silly widths (e.g. a gutter wider than the terminal)
    width = max(width, len(indent) + 1)
    lines = []
    for paragraph in text.splitlines():
        if not paragraph.strip():
            lines.append(indent.rstrip())
            continue
        lines.extend(
            textwrap.wrap(
                paragraph,
                width=width,
                initial_indent=indent,
                subsequent_indent=indent,
                break_on_hyphens=False,
            )
        )
    return lines
