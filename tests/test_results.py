import json

import pytest

from autocorrect.results import (
    FormatResult,
    LineResult,
    LintResult,
    Toggle,
    format_or_lint,
    line_col,
    match_autocorrect_toggle,
)


@pytest.mark.parametrize(
    "part, expected",
    [
        ("autocorrect-enable", Toggle.ENABLE),
        ("// autocorrect-enable", Toggle.ENABLE),
        ("# autocorrect-enable", Toggle.ENABLE),
        ("# autocorrect: true", Toggle.ENABLE),
        ("# autocorrect:true", Toggle.ENABLE),
        ("# autocorrect: false", Toggle.DISABLE),
        ("# autocorrect:false", Toggle.DISABLE),
        ("# autocorrect-disable", Toggle.DISABLE),
        ("// autocorrect-disable", Toggle.DISABLE),
        ("// hello world", Toggle.NONE),
    ],
)
def test_match_autocorrect_toggle(part, expected):
    assert match_autocorrect_toggle(part) is expected


def test_move_cursor():
    out = LintResult("")
    assert (out.line, out.col) == (1, 1)

    assert out.move_cursor("") == (1, 1)
    assert (out.line, out.col) == (1, 1)

    assert out.move_cursor("Foo\nHello world\nThis is ") == (1, 1)
    assert (out.line, out.col) == (3, 9)

    assert out.move_cursor("Hello\nworld\r\nHello world\nHello world") == (3, 9)
    assert (out.line, out.col) == (6, 12)

    assert out.move_cursor("Hello") == (6, 12)
    assert (out.line, out.col) == (6, 17)

    assert out.move_cursor("\nHello\n\naaa\n") == (6, 17)
    assert (out.line, out.col) == (10, 1)


def test_line_col():
    assert line_col("") == (0, 0, False)
    assert line_col("abc") == (0, 3, False)
    assert line_col("a\r\nb") == (1, 2, True)
    assert line_col("a\rb") == (0, 3, False)
    assert line_col("a\r") == (0, 2, False)


def test_format_result_cursor_does_not_move():
    result = FormatResult("abc")
    assert result.move_cursor("a\nb") == (0, 0)


def _html_lint() -> LintResult:
    result = LintResult("<p>Hello你好</p>")
    result.ignore("<p>")
    format_or_lint(result, "text", "Hello你好")
    result.ignore("</p>")
    return result


def test_lint_to_json():
    result = _html_lint()
    result.filepath = "foo.bar.html"
    assert not result.has_error()
    assert len(result.lines) == 1
    expected = (
        '{"filepath":"foo.bar.html","lines":[{"l":1,"c":4,'
        '"new":"Hello 你好","old":"Hello你好"}],"error":""}'
    )
    assert result.to_json() == expected


def test_lint_to_json_pretty():
    result = _html_lint()
    result.filepath = "foo.bar.html"
    assert json.loads(result.to_json_pretty()) == json.loads(result.to_json())
    assert "\n" in result.to_json_pretty()


def test_lint_to_diff():
    result = _html_lint()
    result.filepath = "./foo.html"
    assert result.to_diff() == (
        "foo.html:1:4\n"
        "\x1b[91mHello你好\x1b[0m\n"
        "\x1b[92mHello 你好\x1b[0m\n"
        "\n"
    )


def test_format_result_output():
    result = FormatResult("<p>Hello你好</p>")
    result.ignore("<p>")
    format_or_lint(result, "text", "Hello你好")
    result.ignore("</p>")
    assert not result.has_error()
    assert str(result) == "<p>Hello 你好</p>"


def test_format_multiline_part():
    result = FormatResult()
    format_or_lint(result, "comment", "/**\n * 第1行注释\n * 第2行注释\n */")
    assert result.out == "/**\n * 第 1 行注释\n * 第 2 行注释\n */"


def test_format_toggle_disable_and_enable():
    result = FormatResult()
    format_or_lint(result, "comment", "// autocorrect-disable")
    result.ignore("\n")
    format_or_lint(result, "string", '"这行将会disable掉"')
    result.ignore("\n")
    format_or_lint(result, "comment", "// autocorrect-enable")
    result.ignore("\n")
    format_or_lint(result, "string", '"hello世界"')
    assert result.out == (
        "// autocorrect-disable\n"
        '"这行将会disable掉"\n'
        "// autocorrect-enable\n"
        '"hello 世界"'
    )


def test_lint_multiline_comment_columns():
    result = LintResult()
    result.ignore("\n    ")
    format_or_lint(result, "comment", "/**\n    * Hello你好\n    * 这是第2行\n    */")
    assert [line.to_dict() for line in result.lines] == [
        {"c": 5, "l": 3, "new": "* Hello 你好", "old": "* Hello你好"},
        {"c": 5, "l": 4, "new": "* 这是第 2 行", "old": "* 这是第2行"},
    ]


def test_lint_skips_disabled_parts():
    result = LintResult()
    result.ignore("const a = ")
    format_or_lint(result, "string", '"这是string第1行"')
    result.ignore(";\n")
    format_or_lint(result, "comment", "// autocorrect-disable")
    result.ignore("\n")
    format_or_lint(result, "string", '"这行将会disable掉"')
    result.ignore("\n")
    format_or_lint(result, "comment", "// autocorrect-enable")
    result.ignore("\n")
    format_or_lint(result, "string", '"这是string第3行"')

    assert result.lines == [
        LineResult(line=1, col=11, new='"这是 string 第 1 行"', old='"这是string第1行"'),
        LineResult(line=5, col=1, new='"这是 string 第 3 行"', old='"这是string第3行"'),
    ]


def test_lint_unchanged_text_has_no_lines():
    result = LintResult()
    format_or_lint(result, "text", "Hello world")
    assert result.lines == []
    assert str(result) == ""


def test_set_error():
    lint = LintResult()
    fmt = FormatResult()
    lint.set_error("parse failed")
    fmt.set_error("parse failed")
    assert lint.has_error() and lint.error == "parse failed"
    assert fmt.has_error() and fmt.error == "parse failed"
    assert json.loads(lint.to_json())["error"] == "parse failed"