import pytest

from crux.scanner import Scanner, Token, TokenType, tokenize


def types(source):
    return [token.type for token in tokenize(source)]


@pytest.mark.parametrize(
    "word, kind",
    [
        ("and", TokenType.AND),
        ("as", TokenType.AS),
        ("break", TokenType.BREAK),
        ("class", TokenType.CLASS),
        ("continue", TokenType.CONTINUE),
        ("default", TokenType.DEFAULT),
        ("else", TokenType.ELSE),
        ("give", TokenType.GIVE),
        ("if", TokenType.IF),
        ("let", TokenType.LET),
        ("not", TokenType.NOT),
        ("nil", TokenType.NIL),
        ("or", TokenType.OR),
        ("return", TokenType.RETURN),
        ("self", TokenType.SELF),
        ("super", TokenType.SUPER),
        ("while", TokenType.WHILE),
        ("false", TokenType.FALSE),
        ("for", TokenType.FOR),
        ("fn", TokenType.FN),
        ("from", TokenType.FROM),
        ("match", TokenType.MATCH),
        ("true", TokenType.TRUE),
        ("use", TokenType.USE),
        ("pub", TokenType.PUB),
        ("Err", TokenType.ERR),
        ("Ok", TokenType.OK),
    ],
)
def test_keywords(word, kind):
    token = Scanner(word).scan_token()
    assert token.type is kind
    assert token.lexeme == word


@pytest.mark.parametrize("word", ["foo", "_a1", "$x", "a", "s", "se", "classy", "iff", "f", "c"])
def test_identifiers(word):
    token = Scanner(word).scan_token()
    assert token == Token(TokenType.IDENTIFIER, word, 1)


def test_fn_prefix_is_fn_keyword():
    assert Scanner("fnord").scan_token().type is TokenType.FN


def test_lone_bang_scans_like_equal():
    assert types("!") == [TokenType.EQUAL, TokenType.EOF]
    assert types("!=") == [TokenType.BANG_EQUAL, TokenType.EOF]


def test_operators():
    source = "+= -= ** *= == => <= >= << >> \\= %= / \\ % * < > - + ="
    assert types(source) == [
        TokenType.PLUS_EQUAL,
        TokenType.MINUS_EQUAL,
        TokenType.STAR_STAR,
        TokenType.STAR_EQUAL,
        TokenType.EQUAL_EQUAL,
        TokenType.EQUAL_ARROW,
        TokenType.LESS_EQUAL,
        TokenType.GREATER_EQUAL,
        TokenType.LEFT_SHIFT,
        TokenType.RIGHT_SHIFT,
        TokenType.BACK_SLASH_EQUAL,
        TokenType.PERCENT_EQUAL,
        TokenType.SLASH,
        TokenType.BACKSLASH,
        TokenType.PERCENT,
        TokenType.STAR,
        TokenType.LESS,
        TokenType.GREATER,
        TokenType.MINUS,
        TokenType.PLUS,
        TokenType.EQUAL,
        TokenType.EOF,
    ]


def test_punctuation():
    assert types("(){}[];,.:") == [
        TokenType.LEFT_PAREN,
        TokenType.RIGHT_PAREN,
        TokenType.LEFT_BRACE,
        TokenType.RIGHT_BRACE,
        TokenType.LEFT_SQUARE,
        TokenType.RIGHT_SQUARE,
        TokenType.SEMICOLON,
        TokenType.COMMA,
        TokenType.DOT,
        TokenType.COLON,
        TokenType.EOF,
    ]


def test_numbers():
    tokens = tokenize("12 3.14 3.")
    assert [(t.type, t.lexeme) for t in tokens] == [
        (TokenType.INT, "12"),
        (TokenType.FLOAT, "3.14"),
        (TokenType.INT, "3"),
        (TokenType.DOT, "."),
        (TokenType.EOF, ""),
    ]


def test_strings_keep_quotes():
    tokens = tokenize("\"hi\" 'yo'")
    assert [(t.type, t.lexeme) for t in tokens[:2]] == [
        (TokenType.STRING, '"hi"'),
        (TokenType.STRING, "'yo'"),
    ]


def test_escaped_quote_stays_inside_string():
    source = '"a\\"b"'
    tokens = tokenize(source)
    assert tokens[0] == Token(TokenType.STRING, source, 1)
    assert tokens[1].type is TokenType.EOF


def test_unterminated_string():
    tokens = tokenize('"abc')
    assert tokens[0].type is TokenType.ERROR
    assert tokens[0].lexeme == "Unterminated String"
    assert tokens[-1].type is TokenType.EOF


def test_unexpected_character():
    token = Scanner("@").scan_token()
    assert token.type is TokenType.ERROR
    assert token.lexeme == "Unexpected character."


def test_comments_and_lines():
    tokens = tokenize("a // comment\nb")
    assert [(t.lexeme, t.line) for t in tokens[:2]] == [("a", 1), ("b", 2)]
    assert len(tokens) == 3


def test_multiline_string_advances_line():
    tokens = tokenize('"x\ny" z')
    assert tokens[0].line == tokens[1].line
    assert tokens[1].line > 1


def test_single_eof_and_repeat():
    scanner = Scanner("let x")
    tokens = list(scanner)
    assert [t.type for t in tokens].count(TokenType.EOF) == 1
    assert tokens[-1].type is TokenType.EOF
    assert scanner.scan_token().type is TokenType.EOF


def test_slash_not_comment():
    assert types("a / b") == [
        TokenType.IDENTIFIER,
        TokenType.SLASH,
        TokenType.IDENTIFIER,
        TokenType.EOF,
    ]