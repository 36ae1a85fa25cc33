from cmdbind.util import wrap


class wrap_:
    def empty_text_gives_no_lines(self):
        assert wrap("", 10) == []
        assert wrap(None, 10) == []

    def short_text_is_one_line(self):
        assert wrap("hello there", 80) == ["hello there"]

    def wraps_on_words(self):
        assert wrap("one two three four", 9) == ["one two", "three", "four"]

    def indent_applies_to_every_line(self):
        assert wrap("one two three", 9, "  ") == ["  one two", "  three"]

    def keeps_existing_line_breaks(self):
        assert wrap("first\nsecond", 80) == ["first", "second"]

    def blank_paragraphs_stay_blank(self):
        assert wrap("a\n\nb", 80, "  ") == ["  a", "", "  b"]

    def does_not_break_on_hyphens(self):
        assert wrap("a well-known thing", 12) == ["a well-known", "thing"]
