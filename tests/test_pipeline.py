from trace_formatter.constants import EXAMPLE_TRACE
from trace_formatter.core.pipeline import FormattedTrace, format_trace
from trace_formatter.parsing import Frame, Opaque


def test_format_trace_two_frames():
    result = format_trace("#0 /a/b.php(10): foo() #1 /c/d.php(20): bar()")
    assert result.records == (
        Frame(index="#0", location="/a/b.php", line_info="(10)", call_expression="foo()"),
        Frame(index="#1", location="/c/d.php", line_info="(20)", call_expression="bar()"),
    )
    assert result.text == "#0 /a/b.php(10): foo()\n#1 /c/d.php(20): bar()"


def test_format_trace_terminator_only():
    result = format_trace("#0 {main}")
    assert result.records == (Opaque(text="#0 {main}"),)


def test_format_trace_plain_message():
    result = format_trace("  Fatal error: uncaught exception  ")
    assert result.records == (Opaque(text="Fatal error: uncaught exception"),)
    assert result.frame_count == 0


def test_format_trace_blank_input():
    result = format_trace(" \n\t ")
    assert result.is_empty
    assert result.records == ()
    assert result.text == ""
    assert result.line_count == 0
    assert result.char_count == 4


def test_format_trace_example():
    result = format_trace(EXAMPLE_TRACE)
    assert result.lines == (
        "#0 /var/www/html/app/Models/User.php(45): PDO->prepare()",
        r"#1 /var/www/html/app/Controllers/UserController.php(123): App\Models\User->findById()",
        r"#2 /var/www/html/public/index.php(67): App\Controllers\UserController->show()",
        "#3 {main}",
    )
    assert result.records[1] == Frame(
        index="#1",
        location="/var/www/html/app/Controllers/UserController.php",
        line_info="(123)",
        call_expression=r"App\Models\User->findById()",
    )
    assert result.records[3] == Opaque(text="#3 {main}")
    assert result.stats == {
        "characters": len(EXAMPLE_TRACE),
        "lines": 4,
        "frames": 3,
        "opaque": 1,
    }


def test_format_trace_records_follow_lines():
    raw = "Uncaught Exception: boom in /a.php:3\nStack trace:\n#0 /a.php(3): f() #1 {main}\n  thrown in /a.php on line 3"
    result = format_trace(raw)
    assert len(result.records) == len(result.lines)
    for line, record in zip(result.lines, result.records):
        if isinstance(record, Opaque):
            assert record.text == line
        else:
            assert line.startswith(record.index)


def test_format_trace_is_deterministic():
    assert format_trace(EXAMPLE_TRACE) == format_trace(EXAMPLE_TRACE)


def test_formatted_trace_to_dict():
    data = format_trace("#0 a.php(1): f() #1 {main}").to_dict()
    assert data["lines"] == ["#0 a.php(1): f()", "#1 {main}"]
    assert data["records"][0]["kind"] == "frame"
    assert data["records"][1] == {"kind": "opaque", "text": "#1 {main}"}
    assert data["stats"]["frames"] == 1


def test_formatted_trace_is_a_plain_value():
    result = FormattedTrace(raw="x", lines=("x",), records=(Opaque(text="x"),))
    assert result.opaque_count == 1
    assert not result.is_empty


def _without_whitespace(text: str) -> str:
    return "".join(text.split())


def _rebuild(record) -> str:
    if isinstance(record, Opaque):
        return record.text
    parts = [record.index, " ", record.location, record.line_info or ""]
    if record.call_expression:
        parts += [": ", record.call_expression]
    return "".join(parts)


def test_format_trace_records_rebuild_reflowed_text():
    raw = "Uncaught Exception: boom\nStack trace: " + EXAMPLE_TRACE + "\n  thrown in /a.php on line 3"
    result = format_trace(raw)
    rebuilt = [_rebuild(record) for record in result.records]
    # opaque lines come back verbatim
    for line, record, text in zip(result.lines, result.records, rebuilt):
        if isinstance(record, Opaque):
            assert text == line
    # frames lose only the whitespace around the colon separator
    assert _without_whitespace("".join(rebuilt)) == _without_whitespace(result.text)
    assert _without_whitespace(result.text) == _without_whitespace(raw)
