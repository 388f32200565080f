import pytest

from beakerlang.location import Line, LineMap, Location, LocationMap


def test_location_with_file():
    loc = Location("prog.bk", 3, 4)
    assert str(loc) == "prog.bk:3:4"


def test_location_without_file():
    assert str(Location()) == "0:0"
    assert str(Location(None, 5, 1)) == "5:1"


def test_location_fields():
    loc = Location("f", 2, 9)
    assert (loc.file, loc.line, loc.column) == ("f", 2, 9)


class _Node:
    def __eq__(self, other):
        return True

    __hash__ = None


def test_location_map_default():
    locs = LocationMap()
    assert locs.get(_Node()) == Location()


def test_location_map_identity_and_no_overwrite():
    locs = LocationMap()
    a, b = _Node(), _Node()
    first = Location("f", 1, 2)
    locs.record(a, first)
    locs.record(a, Location("f", 7, 7))
    assert locs.get(a) == first
    assert locs.get(b) == Location()
    assert a in locs and b not in locs
    assert len(locs) == 1


def _sample_map():
    lines = LineMap()
    lines.add(0, Line(1, 0, 5))
    lines.add(6, Line(2, 6, 10))
    return lines


def test_line_lookup():
    lines = _sample_map()
    assert lines.line(0).number == 1
    assert lines.line(4).number == 1
    assert lines.line(6).number == 2
    assert lines.line(1000).number == 2
    assert len(lines) == 2


def test_line_add_keeps_first():
    lines = _sample_map()
    lines.add(6, Line(9, 6, 6))
    assert lines.line(6) == Line(2, 6, 10)


def test_line_before_first_offset():
    lines = LineMap()
    lines.add(3, Line(1, 3, 4))
    with pytest.raises(KeyError):
        lines.line(2)