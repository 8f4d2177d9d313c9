from dataclasses import FrozenInstanceError

import pytest

from seid import Scanner, Token, Type, tokenize
from seid.error.scanner_error import ScannerException
from seid.scanner.scanner import KEYWORDS
from seid.util import Span
from tests.test_util import data_path, open_file


def test_scan(arithmetic_program: str):
    scanner = Scanner(arithmetic_program)
    tokens = scanner.scan()

    expected = [
        Token("1", Type.NUMBER, 1.0),
        Token("+", Type.PLUS),
        Token("2", Type.NUMBER, 2.0),
        Token("*", Type.STAR),
        Token("3", Type.NUMBER, 3.0),
    ]

    assert tokens[:5] == expected


def test_empty():
    scanner = Scanner("")
    tokens = scanner.scan()
    assert tokens == [Token("", Type.EOF)]
    assert tokens[0].line == 1


def test_number():
    assert tokenize("123") == [Token("123", Type.NUMBER, 123.0), Token("", Type.EOF)]


@pytest.mark.parametrize(
    "program, expected",
    [
        ("12.5", [("12.5", Type.NUMBER, 12.5)]),
        ("0.25", [("0.25", Type.NUMBER, 0.25)]),
        # A trailing dot is not part of the number
        ("12.", [("12", Type.NUMBER, 12.0), (".", Type.DOT, None)]),
        (".5", [(".", Type.DOT, None), ("5", Type.NUMBER, 5.0)]),
        (
            "1.2.3",
            [
                ("1.2", Type.NUMBER, 1.2),
                (".", Type.DOT, None),
                ("3", Type.NUMBER, 3.0),
            ],
        ),
        ("007", [("007", Type.NUMBER, 7.0)]),
    ],
)
def test_number_fraction(program: str, expected):
    tokens = tokenize(program)
    assert tokens[:-1] == [Token(*args) for args in expected]
    assert tokens[-1].type == Type.EOF


@pytest.mark.parametrize(
    "program, types",
    [
        ("!", [Type.BANG]),
        ("!=", [Type.BANG_EQUAL]),
        ("=", [Type.EQUAL]),
        ("==", [Type.EQUAL_EQUAL]),
        ("<", [Type.LESS]),
        ("<=", [Type.LESS_EQUAL]),
        (">", [Type.GREATER]),
        (">=", [Type.GREATER_EQUAL]),
        ("===", [Type.EQUAL_EQUAL, Type.EQUAL]),
        ("<==", [Type.LESS_EQUAL, Type.EQUAL]),
        ("! =", [Type.BANG, Type.EQUAL]),
        ("!!=", [Type.BANG, Type.BANG_EQUAL]),
        ("(){},.-+;*/", [
            Type.LEFT_PAREN,
            Type.RIGHT_PAREN,
            Type.LEFT_BRACE,
            Type.RIGHT_BRACE,
            Type.COMMA,
            Type.DOT,
            Type.MINUS,
            Type.PLUS,
            Type.SEMICOLON,
            Type.STAR,
            Type.SLASH,
        ]),
    ],
)
def test_operators(program: str, types):
    assert [token.type for token in tokenize(program)] == [*types, Type.EOF]


def test_comments():
    tokens = tokenize("1 // the rest / is ignored\n2 / 3")
    assert [token.type for token in tokens] == [
        Type.NUMBER,
        Type.NUMBER,
        Type.SLASH,
        Type.NUMBER,
        Type.EOF,
    ]
    assert [token.line for token in tokens] == [1, 2, 2, 2, 2]


def test_only_comment():
    assert tokenize("// nothing to see here") == [Token("", Type.EOF)]


def test_whitespace():
    tokens = tokenize(" \t\r\n  \n")
    assert tokens == [Token("", Type.EOF)]
    assert tokens[0].line == 3


def test_string():
    assert tokenize('"abc"') == [
        Token('"abc"', Type.STRING, "abc"),
        Token("", Type.EOF),
    ]
    assert tokenize('""')[0] == Token('""', Type.STRING, "")
    # Everything between the quotes is taken as is
    assert tokenize('"1 + // x"')[0].literal == "1 + // x"


def test_multiline_string():
    tokens = tokenize('"a\nb" 1')
    assert tokens[0] == Token('"a\nb"', Type.STRING, "a\nb")
    # The string is recognized on the line of its closing quote
    assert tokens[0].line == 2
    assert tokens[0].span == Span((1, 2), (0, 2))
    assert tokens[1].line == 2


@pytest.mark.parametrize("keyword", list(KEYWORDS))
def test_keywords(keyword: str):
    token = tokenize(keyword)[0]
    assert token.type == KEYWORDS[keyword]
    assert token.type.is_keyword
    assert token.literal is None


@pytest.mark.parametrize("name", ["x", "orchid", "_private", "var1", "nil_", "And", "true2"])
def test_identifier(name: str):
    assert tokenize(name)[0] == Token(name, Type.IDENTIFIER, name)


def test_keywords_shared():
    assert KEYWORDS["while"] == Type.WHILE
    assert len(KEYWORDS) == 16
    with pytest.raises(TypeError):
        KEYWORDS["loop"] = Type.WHILE


def test_spans():
    tokens = tokenize("1 +\n  22")
    assert tokens[0].span == Span(1, (0, 1))
    assert tokens[1].span == Span(1, (2, 3))
    assert tokens[2].span == Span(2, (2, 4))
    assert tokens[3].span == Span(2, (4, 4))


def test_token_immutable():
    token = tokenize("1")[0]
    with pytest.raises(FrozenInstanceError):
        token.text = "2"


def test_scan_twice():
    scanner = Scanner("1 + 2")
    assert scanner.scan() == scanner.scan()
    assert len(scanner.tokens) == 4


def test_bytes():
    assert tokenize(b"1 + 2") == tokenize("1 + 2")
    assert tokenize('"hé"'.encode("utf8"))[0].literal == "hé"


def test_invalid_encoding():
    with pytest.raises(ScannerException) as excinfo:
        tokenize(b"1 +\n\xff")
    assert excinfo.value.category == "invalid encoding"
    assert excinfo.value.line == 2
    assert excinfo.value.detail == "b'\\xff' is not valid UTF-8"


def test_space_separated_lexemes():
    pieces = [
        "(", ")", "{", "}", ",", ".", "-", "+", ";", "*", "/",
        "!", "!=", "=", "==", ">", ">=", "<", "<=",
        "123", "4.5", '"str"', "name", "and", "nil", "_x1",
    ]
    tokens = tokenize(" ".join(pieces))

    assert [token.text for token in tokens[:-1]] == pieces
    assert [token.type for token in tokens].count(Type.EOF) == 1
    assert tokens[-1].type == Type.EOF


def test_scan_file(file: str):
    program: str = open_file(file)
    try:
        tokens = Scanner(program).scan()
    except ScannerException:
        assert "scannerError" in file
        return

    # Exactly one EOF token, at the very end
    assert [token.type for token in tokens].count(Type.EOF) == 1
    assert tokens[-1].type == Type.EOF
    # Line numbers never decrease
    lines = [token.line for token in tokens]
    assert lines == sorted(lines)
    # Lexemes are verbatim slices of the program
    for token in tokens[:-1]:
        assert token.text in program


def test_rescan(valid_file: str):
    # Scanning the space separated lexemes results in the same token types
    tokens = tokenize(open_file(valid_file))
    rescanned = tokenize(" ".join(token.text for token in tokens[:-1]))
    assert [token.type for token in tokens] == [token.type for token in rescanned]


def test_unexpected_character():
    with pytest.raises(ScannerException) as excinfo:
        tokenize("1 ~ 2")
    error = excinfo.value
    assert error.line == 1
    assert error.category == "unexpected character"
    assert error.detail == "'~'"
    assert str(error) == "[line 1] Error unexpected character: '~'"


@pytest.mark.parametrize("char", ["~", "@", "#", "$", "&", "|", "'", "é", "\f"])
def test_unexpected_characters(char: str):
    with pytest.raises(ScannerException) as excinfo:
        tokenize(f"1 {char} 2")
    assert excinfo.value.category == "unexpected character"
    assert excinfo.value.detail == repr(char)


def test_unterminated_string():
    with pytest.raises(ScannerException) as excinfo:
        tokenize('"abc')
    assert excinfo.value.category == "unterminated string"
    assert excinfo.value.line == 1


def test_unterminated_multiline_string():
    with pytest.raises(ScannerException) as excinfo:
        tokenize('1\n"abc\ndef')
    # Reported on the line where scanning stopped
    assert excinfo.value.line == 3
    assert excinfo.value.detail == repr('"abc\ndef')


def test_UnexpectedCharacterError():
    program: str = open_file(data_path("scannerError", "UnexpectedCharacterError.seid"))
    scanner = Scanner(program)

    with pytest.raises(ScannerException) as excinfo:
        scanner.scan()
    assert str(excinfo.value) == "[line 3] Error unexpected character: '~'"
    assert "-> 3. " in excinfo.value.error.create_error()


def test_UnterminatedStringError():
    program: str = open_file(data_path("scannerError", "UnterminatedStringError.seid"))
    scanner = Scanner(program)

    with pytest.raises(ScannerException) as excinfo:
        scanner.scan()
    assert excinfo.value.line == 4
    assert excinfo.value.category == "unterminated string"
    assert "-> 2. " in excinfo.value.error.create_error()


def test_type_str():
    assert str(Type.EQUAL_EQUAL) == "'=='"
    assert str(Type.AND) == "'and'"
    assert str(Type.NUMBER) == "number"
    assert not Type.IDENTIFIER.is_keyword
    assert Type("<=") == Type.LESS_EQUAL
