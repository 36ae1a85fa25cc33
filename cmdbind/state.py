"""
Saving and restoring bound argument values as a small XML document::

    <ArgumentObject>
      <Type>myapp.cli.Options</Type>
      <Values>
        <name>value</name>
        <files><Item>a.txt</Item><Item>b.txt</Item></files>
        <unset null="true" />
      </Values>
    </ArgumentObject>
"""

import xml.etree.ElementTree as ET

from .coercion import Coercer
from .util import debug


ROOT_TAG = "ArgumentObject"
TYPE_TAG = "Type"
VALUES_TAG = "Values"
ITEM_TAG = "Item"
NULL_ATTR = "null"


class StateCodec:
    """
    Convert the persistable values of ``registry``'s arguments to/from XML.

    Only arguments declared with ``persist=True`` are written. Values are
    rendered and read back through ``coercer`` (default: a plain `.Coercer`).
    """

    def __init__(self, registry, coercer=None):
        self.registry = registry
        self.coercer = coercer or Coercer()

    def save(self, values, type_name):
        """
        Build an `~xml.etree.ElementTree.ElementTree` holding ``values``.

        :param values: A `.BoundValues` mapping.
        :param str type_name: Full type name of the owning argument object.
        """
        root = ET.Element(ROOT_TAG)
        ET.SubElement(root, TYPE_TAG).text = type_name
        container = ET.SubElement(root, VALUES_TAG)
        for spec in self.registry:
            if not spec.persist:
                continue
            bound = values.get(spec.name)
            value = spec.default if bound is None else bound.value
            node = ET.SubElement(container, spec.name)
            if value is None:
                node.set(NULL_ATTR, "true")
            elif spec.is_list:
                for item in value:
                    ET.SubElement(node, ITEM_TAG).text = self.coercer.to_string(
                        item
                    )
            else:
                node.text = self.coercer.to_string(value)
        return ET.ElementTree(root)

    def dump(self, values, type_name, path):
        """
        Write ``values`` to ``path`` (a filename or binary file object).
        """
        tree = self.save(values, type_name)
        tree.write(path, encoding="utf-8", xml_declaration=True)

    def load(self, source):
        """
        Parse ``source`` (a path or file object) into an element tree.

        Returns ``None`` if it can't be read or isn't well-formed XML; stale or
        missing saved state must never stop a program from starting.
        """
        try:
            return ET.parse(source)
        except (OSError, ET.ParseError) as e:
            debug("Unable to read saved state from {!r}: {!r}".format(source, e))
            return None

    def restore(self, source, values):
        """
        Restore saved values from ``source`` onto ``values``.

        Entries naming unknown arguments are ignored. Restored values count as
        explicitly set, but are not validated.

        :returns: ``True`` if ``source`` was read, ``False`` otherwise.
        """
        tree = self.load(source)
        if tree is None:
            return False
        container = tree.getroot().find(VALUES_TAG)
        if container is None:
            debug("No {!r} element in saved state, ignoring".format(VALUES_TAG))
            return False
        for node in container:
            spec = self.registry.resolve(node.tag)
            if spec is None:
                debug("Ignoring saved value for unknown {!r}".format(node.tag))
                continue
            self.restore_value(node, values.for_spec(spec))
        return True

    def restore_value(self, node, bound):
        spec = bound.spec
        if node.get(NULL_ATTR) == "true":
            bound.set_value(None)
        elif spec.is_list:
            texts = [item.text or "" for item in node.findall(ITEM_TAG)]
            bound.apply(self.coercer.to_list(texts, spec.item_kind))
        else:
            bound.apply(self.coercer.to_type(node.text or "", spec.kind))
