import pytest
from pi.table import BoxStyle, Style, Table

ROWS = [
    [1, "Arya", "Stark", 3000],
    [20, "Jon", "Snow", 2000, "You know nothing, Jon Snow!"],
    [300, "Tyrion", "Lannister", 5000],
]
HEADER = ["#", "First Name", "Last Name", "Salary"]
FOOTER = ["", "", "Total", 10000]
ROW_MULTI_LINE = [0, "Winter", "Is", 0, "Coming.\nThe North Remembers!"]

# Every glyph distinct so that each one is visible in expected output.
STYLE_TEST = Style(
    name="styleTest",
    box=BoxStyle(
        bottom_left="\\",
        bottom_right="/",
        bottom_separator="v",
        left="[",
        left_separator="{",
        middle_horizontal="-",
        middle_separator="+",
        middle_vertical="|",
        padding_left="<",
        padding_right=">",
        right="]",
        right_separator="}",
        top_left="(",
        top_right=")",
        top_separator="^",
        unfinished_row=" ~~~",
    ),
)


@pytest.fixture
def rows() -> list[list]:
    return [list(row) for row in ROWS]


@pytest.fixture
def table(rows: list[list]) -> Table:
    """The sample rows in the all-distinct-glyphs style."""
    t = Table()
    t.append_rows(rows)
    t.set_style(STYLE_TEST)
    return t


@pytest.fixture
def header() -> list:
    return list(HEADER)


@pytest.fixture
def footer() -> list:
    return list(FOOTER)


@pytest.fixture
def multi_line_row() -> list:
    return list(ROW_MULTI_LINE)


@pytest.fixture
def style_test() -> Style:
    return STYLE_TEST
