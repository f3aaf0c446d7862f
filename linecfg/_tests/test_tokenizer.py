import pytest

from linecfg.exceptions import TokenizeError
from linecfg.tokenizer import LineParser, tokenize


@pytest.mark.parametrize(
    ("line", "tokens"),
    [
        ("", []),
        ("   \t ", []),
        ("KEY value", ["KEY", "value"]),
        ("  KEY\t\tvalue  ", ["KEY", "value"]),
        ('NAME "two words"', ["NAME", "two words"]),
        ("NAME 'say \"hi\"'", ["NAME", 'say "hi"']),
        ("NAME `it's \"x\"`", ["NAME", "it's \"x\""]),
        ('EMPTY ""', ["EMPTY", ""]),
        ("a'b c", ["a'b", "c"]),
        ("# comment", []),
        ("  ; comment", []),
        ("#", []),
        ("KEY #not-a-comment", ["KEY", "#not-a-comment"]),
        ('"#quoted" x', ["#quoted", "x"]),
        ("<BLOCK a b", ["<BLOCK", "a", "b"]),
    ],
)
def test_tokenize(line, tokens):
    assert tokenize(line) == tokens


@pytest.mark.parametrize("line", ['"open', "KEY 'open", "KEY `x"])
def test_unterminated_quote(line):
    with pytest.raises(TokenizeError, match=r"Unterminated"):
        tokenize(line)


def test_tokenize_error_is_value_error():
    assert issubclass(TokenizeError, ValueError)


def test_line_parser():
    parser = LineParser()
    assert parser.num_tokens == 0

    parser.parse("<TRACK 'my track' 3")
    assert parser.num_tokens == 3
    assert parser.get_token(0) == "<TRACK"
    assert parser.get_token(1) == "my track"
    assert parser.get_token(3) == ""
    assert parser.get_token(-1) == ""
    assert parser.tokens == ["<TRACK", "my track", "3"]

    with pytest.raises(TokenizeError):
        parser.parse("bad 'quote")
    assert parser.num_tokens == 0
