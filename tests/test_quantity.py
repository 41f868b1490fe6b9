import pytest

from cooklang_parser.parsers.quantity import parse_fraction, parse_quantity


@pytest.mark.parametrize(
    "given,expected",
    (
        ("1/2", 0.5),
        ("2/1", 2.0),
        ("10/10", 1.0),
        ("500/1000", 0.5),
        ("1 / 4", 0.25),
        ("1.5", 1.5),
        ("100.084", 100.084),
        ("0.084", 0.084),
        (".084", 0.084),
        ("5", 5.0),
        ("840", 840.0),
    ),
)
def test_parse_quantity_numeric(given: str, expected: float) -> None:
    assert parse_quantity(given) == expected


@pytest.mark.parametrize(
    "given",
    (
        "",
        "0",
        "0/1",
        "1/0",
        "01/10",
        "10/01",
        "01.0",
        "1.",
        "1.0/1",
        "1/2/3",
        "-1",
        "-1.0",
        "NoQty",
        "some",
        "a pinch",
        "equal parts",
    ),
)
def test_parse_quantity_no_quantity(given: str) -> None:
    assert parse_quantity(given) is None


def test_parse_quantity_matches_float() -> None:
    for text in ("3", "12.25", "0.5", ".75", "1000.001"):
        assert parse_quantity(text) == float(text)


def test_parse_fraction() -> None:
    assert parse_fraction("3/4") == 3 / 4
    assert parse_fraction("3") is None


@pytest.mark.parametrize(
    "given",
    (
        "1" + "0" * 400 + "/1",
        "1" * 5000 + "/1",
        "1/" + "1" * 5000,
        "1" * 5000 + "/" + "1" * 5000,
        "9" * 400,
        "9" * 5000 + ".5",
    ),
)
def test_parse_quantity_out_of_float_range(given: str) -> None:
    assert parse_quantity(given) is None


def test_parse_fraction_rejects_underflow() -> None:
    assert parse_fraction("1/" + "1" * 400) is None
