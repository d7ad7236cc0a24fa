import pytest

from easyfunc.formatting import PadType, chunk_split, str_pad, str_repeat, strrev, ucwords


@pytest.mark.parametrize(
    "body,length,end,expected",
    [
        ("abc", 1, "-", "a-b-c-"),
        ("foooooooooooooooo", 5, "", "foooo\r\nooooo\r\nooooo\r\noo\r\n"),
        ("X" * 152, 0, "", ("X" * 76 + "\r\n") * 2),
        ("test", 10, "|end", "test|end"),
    ],
)
def test_chunk_split(body, length, end, expected):
    assert chunk_split(body, length, end) == expected


def test_chunk_split_defaults():
    assert chunk_split("ab") == "ab\r\n"


def test_chunk_split_negative_length():
    with pytest.raises(ValueError):
        chunk_split("abc", -1, "-")


L, R, B = PadType.LEFT, PadType.RIGHT, PadType.BOTH


@pytest.mark.parametrize(
    "text,length,pad,kind,expected",
    [
        ("str_pad()", 20, "-+", L, "-+-+-+-+-+-str_pad()"),
        ("str_pad()", 20, "-+", R, "str_pad()-+-+-+-+-+-"),
        ("str_pad()", 20, "-+", B, "-+-+-str_pad()-+-+-+"),
        ("variation", -1, "=", L, "variation"),
        ("variation", 0, "=", L, "variation"),
        ("variation", 9, "=", L, "variation"),
        ("variation", 10, "=", L, "=variation"),
        ("variation", 16, "=", L, "=======variation"),
        ("variation", -1, "=", R, "variation"),
        ("variation", 0, "=", R, "variation"),
        ("variation", 9, "=", R, "variation"),
        ("variation", 10, "=", R, "variation="),
        ("variation", 16, "=", R, "variation======="),
        ("variation", -1, "=", B, "variation"),
        ("variation", 0, "=", B, "variation"),
        ("variation", 9, "=", B, "variation"),
        ("variation", 10, "=", B, "variation="),
        ("variation", 16, "=", B, "===variation===="),
        ("", -1, "=", L, ""),
        ("", 0, "=", L, ""),
        ("", 9, "=", L, "========="),
        ("", 10, "=", L, "=========="),
        ("", 16, "=", L, "================"),
        ("", -1, "=", R, ""),
        ("", 0, "=", R, ""),
        ("", 9, "=", R, "========="),
        ("", 10, "=", R, "=========="),
        ("", 16, "=", R, "================"),
        ("", -1, "=", B, ""),
        ("", 0, "=", B, ""),
        ("", 9, "=", B, "========="),
        ("", 10, "=", B, "=========="),
        ("", 16, "=", B, "================"),
        ("variation", 16, "=", 3, "variation"),
    ],
)
def test_str_pad(text, length, pad, kind, expected):
    assert str_pad(text, length, pad, kind) == expected


def test_str_pad_defaults_pad_right_with_spaces():
    assert str_pad("ab", 4) == "ab  "


def test_str_pad_empty_pad_string_raises():
    with pytest.raises(ValueError):
        str_pad("ab", 5, "", PadType.LEFT)


@pytest.mark.parametrize("text", [" ", "", "a", "%0", "1.23", "\\0"])
@pytest.mark.parametrize("multiplier,count", [(1, 1), (2, 2), (0, 0), (-1, 0)])
def test_str_repeat(text, multiplier, count):
    expected = {1: text, 2: text + text, 0: ""}[count]
    assert str_repeat(text, multiplier) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("hello\\\\world", "dlrow\\\\olleh"),
        ("hello\\$world", "dlrow$\\olleh"),
        ("\\ttesting\\ttesting\\tstrrev", "verrtst\\gnitsett\\gnitsett\\"),
        ("ababababababa", "ababababababa"),
        ("a", "a"),
        (" ", " "),
    ],
)
def test_strrev(text, expected):
    assert strrev(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("testing ucwords", "Testing Ucwords"),
        ("testing\tucwords", "Testing\tUcwords"),
        (" testing ucwords", " Testing Ucwords"),
        ("testing\nucwords", "Testing\nUcwords"),
        ("testing\vucwords", "Testing\vUcwords"),
        ("testing  ucwords", "Testing  Ucwords"),
        ("testing\rucwords", "Testing\rUcwords"),
        ("testing\fucwords", "Testing\fUcwords"),
        ("", ""),
        ("\n\n", "\n\n"),
        (
            "\ntesting ucword() with\nmultiline string using\nheredoc\n",
            "\nTesting Ucword() With\nMultiline String Using\nHeredoc\n",
        ),
        (
            "testing\rucword(str)\twith\n"
            "multiline   string\t\tusing\n"
            "heredoc\nstring.with\vdifferent\fwhite\vspaces",
            "Testing\rUcword(Str)\tWith\n"
            "Multiline   String\t\tUsing\n"
            "Heredoc\nString.With\vDifferent\fWhite\vSpaces",
        ),
        (
            "12sting 123string 4567\n"
            "multiline   string\t\tusing\n"
            "heredoc\nstring.with\vdifferent\fwhite\vspaces",
            "12sting 123string 4567\n"
            "Multiline   String\t\tUsing\n"
            "Heredoc\nString.With\vDifferent\fWhite\vSpaces",
        ),
        (
            "it's bright,but i cann't see it.\n"
            "\"things in double quote\"\n"
            "'things in single quote'\n"
            "this\\line is /with\\slashs",
            "It'S Bright,But I Cann'T See It.\n"
            "\"Things In Double Quote\"\n"
            "'Things In Single Quote'\n"
            "This\\Line Is /With\\Slashs",
        ),
        ("!@#$%^&*()_+=-`~", "!@#$%^&*()_+=-`~"),
        (
            "t@@#$% %test ^test &test *test +test -test",
            "T@@#$% %Test ^Test &Test *Test +Test -Test",
        ),
    ],
)
def test_ucwords(text, expected):
    assert ucwords(text) == expected


def test_ucwords_underscore_is_part_of_word():
    assert ucwords("snake_case word") == "Snake_case Word"