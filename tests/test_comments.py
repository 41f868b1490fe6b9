import pytest

from cooklang_parser.parsers.comments import strip_comments


@pytest.mark.parametrize(
    "given,expected",
    (
        (b"Add salt -- to taste\nStir", b"Add salt \nStir"),
        (b"-- a note", b"\n"),
        (b"Mix -- well\r\nServe", b"Mix \nServe"),
        (b"Mix -- well\rServe", b"Mix \nServe"),
        (b"Add [- quietly -]salt", b"Add salt"),
        (b"Add[- a\nlong\nnote -] salt", b"Add salt"),
        (b"[- one -]keep[- two -]", b"keep"),
        (b"Stir [- never closed\nmore", b"Stir "),
        (b"[- -- inside -]x", b"x"),
        (b"No comments here", b"No comments here"),
    ),
)
def test_strip_comments(given: bytes, expected: bytes) -> None:
    assert strip_comments(given) == expected


def test_strip_comments_keeps_line_count() -> None:
    source = b"-- first\n-- second\nStep"
    assert strip_comments(source).count(b"\n") == source.count(b"\n")
