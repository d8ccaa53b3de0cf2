import pytest

from wirecut.errors import InputModelError
from wirecut.parsing import parse_wiring, read_wiring


def test_parse_lines():
    records = parse_wiring(["jqt: rhn xhk nvd", "", "  xhk:hfx  ", "lone:"])
    assert records == [
        ("jqt", ["rhn", "xhk", "nvd"]),
        ("xhk", ["hfx"]),
        ("lone", []),
    ]


@pytest.mark.parametrize("line", ["jqt rhn xhk", ": rhn", "   :"])
def test_malformed_line(line):
    with pytest.raises(InputModelError, match="Line 2"):
        parse_wiring(["abc: def", line])


def test_read_wiring(tmp_path):
    path = tmp_path / "wiring.txt"
    path.write_text("a: b c\nb: c\n")
    assert read_wiring(path) == [("a", ["b", "c"]), ("b", ["c"])]
