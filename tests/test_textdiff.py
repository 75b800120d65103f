import io

import pytest

from wish.textdiff import (
    ContextDiff,
    UnifiedDiff,
    context_diff_string,
    format_range_context,
    format_range_unified,
    split_lines,
    unified_diff_string,
    write_context_diff,
    write_unified_diff,
)

PRINTF_LINE = 'fmt.Printf("%s,%T",a,b)'


def test_unified_diff_example():
    a = f"one\ntwo\nthree\nfour\n{PRINTF_LINE}"
    b = "zero\none\nthree\nfour"
    diff = UnifiedDiff(
        a=split_lines(a),
        b=split_lines(b),
        from_file="Original",
        from_date="2005-01-26 23:30:50",
        to_file="Current",
        to_date="2010-04-02 10:20:52",
        context=3,
    )
    assert unified_diff_string(diff) == (
        "--- Original\t2005-01-26 23:30:50\n"
        "+++ Current\t2010-04-02 10:20:52\n"
        "@@ -1,5 +1,4 @@\n"
        "+ zero\n"
        "  one\n"
        "- two\n"
        "  three\n"
        "  four\n"
        f"- {PRINTF_LINE}\n"
    )


def test_context_diff_example_with_trailing_line():
    a = f"one\ntwo\nthree\nfour\n{PRINTF_LINE}"
    b = "zero\none\ntree\nfour"
    diff = ContextDiff(
        a=split_lines(a),
        b=split_lines(b),
        from_file="Original",
        to_file="Current",
        context=3,
        eol="\n",
    )
    assert context_diff_string(diff) == (
        "*** Original\n"
        "--- Current\n"
        "***************\n"
        "*** 1,5 ****\n"
        "  one\n"
        "! two\n"
        "! three\n"
        "  four\n"
        f"- {PRINTF_LINE}\n"
        "--- 1,4 ----\n"
        "+ zero\n"
        "  one\n"
        "! tree\n"
        "  four\n"
    )


def test_context_diff_example():
    diff = ContextDiff(
        a=split_lines("one\ntwo\nthree\nfour"),
        b=split_lines("zero\none\ntree\nfour"),
        from_file="Original",
        to_file="Current",
        context=3,
        eol="\n",
    )
    assert context_diff_string(diff) == (
        "*** Original\n"
        "--- Current\n"
        "***************\n"
        "*** 1,4 ****\n"
        "  one\n"
        "! two\n"
        "! three\n"
        "  four\n"
        "--- 1,4 ----\n"
        "+ zero\n"
        "  one\n"
        "! tree\n"
        "  four\n"
    )


def test_comparing_empty_lists():
    diff = UnifiedDiff(from_file="Original", to_file="Current", context=3)
    assert unified_diff_string(diff) == ""
    assert context_diff_string(ContextDiff(from_file="Original", to_file="Current")) == ""


@pytest.mark.parametrize(
    "start, stop, expected",
    [(3, 3, "3,0"), (3, 4, "4"), (3, 5, "4,2"), (3, 6, "4,3"), (0, 0, "0,0")],
)
def test_format_range_unified(start, stop, expected):
    assert format_range_unified(start, stop) == expected


@pytest.mark.parametrize(
    "start, stop, expected",
    [(3, 3, "3"), (3, 4, "4"), (3, 5, "4,5"), (3, 6, "4,6"), (0, 0, "0")],
)
def test_format_range_context(start, stop, expected):
    assert format_range_context(start, stop) == expected


def _fields(**overrides):
    fields = dict(a=list("one"), b=list("two"), from_file="Original", to_file="Current", eol="\n")
    fields.update(overrides)
    return fields


def test_tab_delimiter():
    dates = dict(from_date="2005-01-26 23:30:50", to_date="2010-04-12 10:20:52")
    ud = unified_diff_string(UnifiedDiff(**_fields(**dates)))
    assert split_lines(ud)[:2] == [
        "--- Original\t2005-01-26 23:30:50\n",
        "+++ Current\t2010-04-12 10:20:52\n",
    ]
    cd = context_diff_string(ContextDiff(**_fields(**dates)))
    assert split_lines(cd)[:2] == [
        "*** Original\t2005-01-26 23:30:50\n",
        "--- Current\t2010-04-12 10:20:52\n",
    ]


def test_no_trailing_tab_on_empty_filedate():
    ud = unified_diff_string(UnifiedDiff(**_fields()))
    assert split_lines(ud)[:2] == ["--- Original\n", "+++ Current\n"]
    cd = context_diff_string(ContextDiff(**_fields()))
    assert split_lines(cd)[:2] == ["*** Original\n", "--- Current\n"]


def test_omit_filenames():
    a = split_lines("o\nn\ne\n")
    b = split_lines("t\nw\no\n")
    ud = unified_diff_string(UnifiedDiff(a=a, b=b, eol="\n"))
    assert split_lines(ud) == [
        "@@ -0,0 +1,2 @@\n",
        "+ t\n",
        "+ w\n",
        "@@ -2,2 +3,0 @@\n",
        "- n\n",
        "- e\n",
        "\n",
    ]
    cd = context_diff_string(ContextDiff(a=a, b=b, eol="\n"))
    assert split_lines(cd) == [
        "***************\n",
        "*** 0 ****\n",
        "--- 1,2 ----\n",
        "+ t\n",
        "+ w\n",
        "***************\n",
        "*** 2,3 ****\n",
        "- n\n",
        "- e\n",
        "--- 3 ----\n",
        "\n",
    ]


def test_empty_eol_defaults_to_line_feed():
    diff = UnifiedDiff(a=["x\n"], b=["y\n"], from_file="f", to_file="g", eol="")
    assert unified_diff_string(diff) == "--- f\n+++ g\n@@ -1 +1 @@\n- x\n+ y\n"


def test_custom_eol_applies_to_headers_only():
    diff = UnifiedDiff(a=["x"], b=["y"], eol="")
    diff.eol = "|"
    assert unified_diff_string(diff) == "@@ -1 +1 @@|- x+ y"


def test_write_functions_use_stream():
    diff = UnifiedDiff(a=["x\n"], b=["y\n"])
    stream = io.StringIO()
    write_unified_diff(stream, diff)
    assert stream.getvalue() == unified_diff_string(diff)

    cdiff = ContextDiff(a=["x\n"], b=["y\n"])
    stream = io.StringIO()
    write_context_diff(stream, cdiff)
    assert stream.getvalue() == "***************\n*** 1 ****\n! x\n--- 1 ----\n! y\n"


def test_identical_inputs_give_empty_diff():
    lines = split_lines("a\nb\nc")
    assert unified_diff_string(UnifiedDiff(a=lines, b=list(lines), context=3)) == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("foo", ["foo\n"]),
        ("foo\nbar", ["foo\n", "bar\n"]),
        ("foo\nbar\n", ["foo\n", "bar\n", "\n"]),
    ],
)
def test_split_lines(text, expected):
    assert split_lines(text) == expected