import pytest

from ftkit.tokenize import tokenize


def test_plain_words():
    line = "echo hello world"
    assert tokenize(line) == line.split(" ")


def test_tabs_and_repeated_blanks():
    assert tokenize("a\t\tb  c") == ["a", "b", "c"]


def test_leading_blanks_skipped():
    assert tokenize("   ls") == ["ls"]


def test_empty_string():
    assert tokenize("") == []


def test_blank_only_line_gives_one_empty_token():
    assert tokenize("   ") == [""]


def test_trailing_blank_gives_empty_token():
    assert tokenize("ls ") == ["ls", ""]


def test_double_quotes_keep_spaces():
    assert tokenize('echo "hello world"') == ["echo", '"hello world"']


def test_other_quote_inside_quotes():
    assert tokenize("say \"it's\"") == ["say", "\"it's\""]


def test_unterminated_quote_runs_to_end():
    assert tokenize('say "oops') == ["say", '"oops']


def test_quote_joined_to_word():
    assert tokenize('x"a b"y z') == ['x"a b"y', "z"]


def test_backslash_escapes_blank():
    assert tokenize(r"a\ b c") == [r"a\ b", "c"]


def test_character_after_closing_quote_is_absorbed():
    assert tokenize('"a" b') == ['"a" b', ""]


@pytest.mark.parametrize("line", ["one", "one two", "a b c d e", "x\ty"])
def test_unquoted_tokens_have_no_blanks(line):
    tokens = tokenize(line)
    assert all(" " not in t and "\t" not in t for t in tokens)
    assert "".join(tokens) == line.replace(" ", "").replace("\t", "")