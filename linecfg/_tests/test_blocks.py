import pytest

from linecfg.blocks import get_next_line, is_block_close, is_block_open, skip_current_block
from linecfg.tokenizer import LineParser

from ._helpers import reader_for


def test_markers():
    assert is_block_open("<TRACK")
    assert is_block_open("<")
    assert not is_block_open("TRACK")
    assert not is_block_open("")
    assert is_block_close(">")
    assert is_block_close(">junk")
    assert not is_block_close("|>")


def test_get_next_line_skips_noise():
    ctx = reader_for(b"\r\n# comment\r\n; other comment\r\n'unterminated\r\n   \r\nKEY value\r\n")
    parser = LineParser()

    assert get_next_line(ctx, parser)
    assert parser.tokens == ["KEY", "value"]

    assert not get_next_line(ctx, parser)
    assert parser.num_tokens == 0


def test_get_next_line_resets_parser_at_end():
    parser = LineParser()
    parser.parse("stale tokens")
    assert not get_next_line(reader_for(b""), parser)
    assert parser.tokens == []


def test_skip_nested():
    ctx = reader_for(b"<OUTER\r\na\r\n<IN\r\n<DEEP x\r\n>\r\n>\r\nb\r\n>\r\nAFTER\r\n")
    parser = LineParser()
    assert get_next_line(ctx, parser)
    assert parser.get_token(0) == "<OUTER"

    assert skip_current_block(ctx)
    assert get_next_line(ctx, parser)
    assert parser.tokens == ["AFTER"]


def _nested_stream(depth, siblings):
    lines = []

    def emit(level):
        lines.append(f"<LEVEL{level}")
        lines.append(f"value {level}")
        if level < depth:
            for _ in range(siblings):
                emit(level + 1)
        lines.append(">")

    emit(1)
    lines.append("NEXT")
    return ("\r\n".join(lines) + "\r\n").encode("ascii")


@pytest.mark.parametrize("depth", [1, 2, 4, 8])
@pytest.mark.parametrize("siblings", [1, 3])
def test_skip_consumes_exactly_one_block(depth, siblings):
    ctx = reader_for(_nested_stream(depth, siblings))
    assert ctx.get_line() == "<LEVEL1"
    assert skip_current_block(ctx)
    assert ctx.get_line() == "NEXT"
    assert ctx.get_line() is None


def test_skip_unterminated():
    ctx = reader_for(b"a\r\n<IN\r\n>\r\nb\r\n")
    assert not skip_current_block(ctx)
    assert ctx.get_line() is None


def test_skip_stops_at_first_unmatched_close():
    ctx = reader_for(b"x\r\n>\r\n>\r\nafter\r\n")
    assert skip_current_block(ctx)
    assert ctx.get_line() == ">"


def test_skip_ignores_untokenizable_lines():
    ctx = reader_for(b"\"<not closed\r\n>\r\nafter\r\n")
    assert skip_current_block(ctx)
    assert ctx.get_line() == "after"


def test_skip_none_context():
    assert not skip_current_block(None)
