from playcount.splitter import split_line


def test_plain_commas():
    assert split_line("1,9857,1,10/08/2016") == ["1", "9857", "1", "10/08/2016"]


def test_quoted_comma_is_literal():
    assert split_line('1,"98,57",1') == ["1", "98,57", "1"]


def test_quotes_toggle_mid_field():
    assert split_line('a,b"c,d"e') == ["a", "bc,de"]


def test_tab_lines_split_literally():
    assert split_line('a\tb,c\t"d"') == ["a", "b,c", '"d"']


def test_empty_and_trailing_fields():
    assert split_line("") == [""]
    assert split_line("a,b,") == ["a", "b", ""]
