from pathlib import Path
from typing import Iterable, List, Tuple, Union

from wirecut.errors import InputModelError


def parse_wiring(lines: Iterable[str]) -> List[Tuple[str, List[str]]]:
    """
    Parses `name: other other ...` lines into adjacency records.

    Blank lines are skipped. A line without a `:` separator, or with nothing
    before it, raises `InputModelError`.
    """
    records = []
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue

        component, sep, rest = line.partition(":")
        component = component.strip()
        if not sep or not component:
            raise InputModelError(f"Line {lineno}: expected 'component: others', got {line!r}")

        records.append((component, rest.split()))
    return records


def read_wiring(path: Union[str, Path]) -> List[Tuple[str, List[str]]]:
    with open(path) as f:
        return parse_wiring(f)
