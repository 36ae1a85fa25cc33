import io
import xml.etree.ElementTree as ET

from cmdbind import ArgumentSpec, BoundValues, StateCodec

from _util import Color, registry


def _registry():
    return registry(
        ArgumentSpec(name="name"),
        ArgumentSpec(int, name="count"),
        ArgumentSpec(float, name="ratio"),
        ArgumentSpec(bool, name="flag"),
        ArgumentSpec(Color, name="color"),
        ArgumentSpec(list, name="tags"),
        ArgumentSpec(list, name="sizes", item_kind=int),
        ArgumentSpec(name="secret", persist=False),
    )


def _filled(reg):
    values = BoundValues(reg)
    for name, value in (
        ("name", "  spaced out  "),
        ("count", 7),
        ("ratio", 0.1),
        ("flag", True),
        ("color", Color.Blue),
        ("tags", ["a", "", "c d"]),
        ("sizes", []),
        ("secret", "hunter2"),
    ):
        values[name].set_value(value)
    return values


class StateCodec_:
    class save:
        def setup_method(self):
            self.reg = _registry()
            tree = StateCodec(self.reg).save(_filled(self.reg), "app.Options")
            self.root = tree.getroot()

        def root_and_type_tags(self):
            assert self.root.tag == "ArgumentObject"
            assert self.root.find("Type").text == "app.Options"

        def one_entry_per_persistable_argument(self):
            tags = [x.tag for x in self.root.find("Values")]
            assert tags == [
                "name",
                "count",
                "ratio",
                "flag",
                "color",
                "tags",
                "sizes",
            ]

        def scalars_are_text(self):
            values = self.root.find("Values")
            assert values.find("count").text == "7"
            assert values.find("flag").text == "true"
            assert values.find("color").text == "Blue"

        def lists_are_item_elements(self):
            items = self.root.find("Values").find("tags").findall("Item")
            assert [x.text for x in items] == ["a", "", "c d"]

        def None_is_marked_null(self):
            values = BoundValues(self.reg)
            root = StateCodec(self.reg).save(values, "x").getroot()
            assert root.find("Values").find("count").get("null") == "true"

    class round_trip:
        def reproduces_every_persistable_value(self, tmp_path):
            reg = _registry()
            original = _filled(reg)
            path = str(tmp_path / "state.xml")
            StateCodec(reg).dump(original, "app.Options", path)
            restored = BoundValues(_registry())
            assert StateCodec(reg).restore(path, restored) is True
            for name in ("name", "count", "ratio", "flag", "color", "tags"):
                assert restored[name].value == original[name].value
            assert restored["sizes"].value == []
            assert restored["secret"].value is None

        def restores_None(self):
            reg = _registry()
            buf = io.BytesIO()
            StateCodec(reg).dump(BoundValues(reg), "x", buf)
            buf.seek(0)
            restored = BoundValues(reg)
            restored["count"].set_value(4)
            StateCodec(reg).restore(buf, restored)
            assert restored["count"].value is None

        def restored_values_count_as_set(self, tmp_path):
            reg = _registry()
            path = str(tmp_path / "state.xml")
            StateCodec(reg).dump(_filled(reg), "x", path)
            restored = BoundValues(reg)
            StateCodec(reg).restore(path, restored)
            assert restored["count"].was_set is True
            assert restored["secret"].was_set is False

    class restore:
        def missing_file_returns_False(self, tmp_path):
            values = BoundValues(_registry())
            path = str(tmp_path / "nope.xml")
            assert StateCodec(_registry()).restore(path, values) is False

        def malformed_file_returns_False(self, tmp_path):
            path = tmp_path / "bad.xml"
            path.write_text("<ArgumentObject><Values>")
            values = BoundValues(_registry())
            assert StateCodec(_registry()).restore(str(path), values) is False
            assert not any(x.was_set for x in values.values())

        def document_without_values_returns_False(self):
            buf = io.BytesIO(b"<ArgumentObject><Type>x</Type></ArgumentObject>")
            values = BoundValues(_registry())
            assert StateCodec(_registry()).restore(buf, values) is False

        def unknown_entries_are_ignored(self):
            doc = (
                b"<ArgumentObject><Values>"
                b"<bogus>1</bogus><count>3</count>"
                b"</Values></ArgumentObject>"
            )
            values = BoundValues(_registry())
            assert StateCodec(_registry()).restore(io.BytesIO(doc), values)
            assert values["count"].value == 3
            assert "bogus" not in values

        def list_items_go_through_coercion(self):
            doc = (
                b"<ArgumentObject><Values><sizes>"
                b"<Item>1</Item><Item>22</Item>"
                b"</sizes></Values></ArgumentObject>"
            )
            values = BoundValues(_registry())
            StateCodec(_registry()).restore(io.BytesIO(doc), values)
            assert values["sizes"].value == [1, 22]

        def bad_entries_record_errors_without_validating(self):
            doc = (
                b"<ArgumentObject><Values>"
                b"<count>many</count>"
                b"</Values></ArgumentObject>"
            )
            values = BoundValues(_registry())
            assert StateCodec(_registry()).restore(io.BytesIO(doc), values)
            assert values["count"].error is not None

    def dumped_file_is_parseable_xml(self, tmp_path):
        reg = _registry()
        path = str(tmp_path / "state.xml")
        StateCodec(reg).dump(_filled(reg), "x", path)
        assert ET.parse(path).getroot().tag == "ArgumentObject"
