from nix_config_parser.tokens import clean_line, strip_comment, tokenize


def test_tokenize_assignment():
    assert tokenize("cores = 4242") == ["cores", "=", "4242"]


def test_tokenize_collapses_whitespace_runs():
    assert tokenize("k   =   a    b") == ["k", "=", "a", "b"]
    assert tokenize("k\t=\t\ta \t b") == ["k", "=", "a", "b"]


def test_tokenize_leading_whitespace_is_ignored():
    assert tokenize("   cores = 1") == ["cores", "=", "1"]


def test_tokenize_trailing_carriage_return():
    assert tokenize("cores = 1\r") == ["cores", "=", "1"]


def test_tokenize_blank_and_comment_lines():
    assert tokenize("") == []
    assert tokenize("   \t ") == []
    assert tokenize("# a comment") == []
    assert tokenize("   #indented comment") == []


def test_comment_terminates_value():
    assert tokenize("key = a#b c") == ["key", "=", "a"]
    assert tokenize("key = a # b c") == ["key", "=", "a"]


def test_strip_comment_only_cuts_at_first_hash():
    assert strip_comment("a # b # c") == "a "
    assert strip_comment("no comment") == "no comment"


def test_clean_line_trims_after_stripping():
    assert clean_line("  bad config   # trailing") == "bad config"
