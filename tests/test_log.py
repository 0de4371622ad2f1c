import pytest

from splice.log import Level, level_name


@pytest.mark.parametrize(
    "level, name",
    [
        (Level.DEBUG, "Debug"),
        (Level.INFO, "Info"),
        (Level.WARN, "Warn"),
        (Level.ERROR, "Error"),
        (Level.FATAL, "Fatal"),
    ],
)
def test_level_names(level, name):
    assert level_name(level) == name


def test_integer_level_accepted():
    assert level_name(int(Level.WARN)) == level_name(Level.WARN)


@pytest.mark.parametrize("value", [-1, 5, 99])
def test_unknown_level(value):
    assert level_name(value) == "Unknown"


def test_levels_are_ordered_by_severity():
    assert [level_name(level) for level in sorted(Level)] == ["Debug", "Info", "Warn", "Error", "Fatal"]
    assert level_name(0) == "Debug"