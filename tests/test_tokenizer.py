import pytest
from aexpr_linter.models import Token, TokenType
from aexpr_linter.tokenizer import Tokenizer, tokenize


def test_tokenize_declaration():
    tokens = tokenize("var x = 5;")

    assert tokens == [
        Token(TokenType.KEYWORD, "var", 1, 1),
        Token(TokenType.IDENTIFIER, "x", 1, 5),
        Token(TokenType.PUNCTUATION, "=", 1, 7),
        Token(TokenType.NUMBER, "5", 1, 9),
        Token(TokenType.PUNCTUATION, ";", 1, 10),
    ]


def test_comment_consumes_rest_of_line():
    tokens = tokenize("x = 1 // x = 2\ny")

    assert tokens[3] == Token(TokenType.COMMENT, "// x = 2", 1, 7)
    assert tokens[4] == Token(TokenType.IDENTIFIER, "y", 2, 1)
    assert len(tokens) == 5


def test_block_comments_are_not_comments():
    types = [t.type for t in tokenize("/* a */")]
    assert TokenType.COMMENT not in types


def test_string_with_escape():
    tokens = tokenize("'a\\'b' + \"c\"")

    assert tokens[0] == Token(TokenType.STRING, "'a\\'b'", 1, 1)
    assert tokens[1] == Token(TokenType.PUNCTUATION, "+", 1, 8)
    assert tokens[2] == Token(TokenType.STRING, '"c"', 1, 10)


def test_unterminated_string_ends_at_line_end():
    tokens = tokenize('x = "abc\ny')

    assert tokens[2] == Token(TokenType.STRING, '"abc', 1, 5)
    assert tokens[3] == Token(TokenType.IDENTIFIER, "y", 2, 1)


def test_numbers_have_no_sign_or_exponent():
    assert [t.value for t in tokenize("1.5.2")] == ["1.5.2"]
    assert [(t.type, t.value) for t in tokenize("-1")] == [
        (TokenType.PUNCTUATION, "-"),
        (TokenType.NUMBER, "1"),
    ]
    assert [t.value for t in tokenize("1e5")] == ["1", "e5"]


def test_word_classification():
    tokens = tokenize("wiggle(2, 30) + position + time + foo + if")
    words = {t.value: t.type for t in tokens if t.value.isalpha()}

    assert words["wiggle"] == TokenType.AE_FUNCTION
    assert words["position"] == TokenType.AE_PROPERTY
    # listed as both; the global function list wins
    assert words["time"] == TokenType.AE_FUNCTION
    assert words["foo"] == TokenType.IDENTIFIER
    assert words["if"] == TokenType.KEYWORD


def test_multi_char_operators_are_greedy():
    tokens = tokenize("a<=b&&c++")

    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.IDENTIFIER, "a"),
        (TokenType.OPERATOR, "<="),
        (TokenType.IDENTIFIER, "b"),
        (TokenType.OPERATOR, "&&"),
        (TokenType.IDENTIFIER, "c"),
        (TokenType.OPERATOR, "++"),
    ]


def test_single_equals_is_punctuation():
    assert tokenize("=")[0].type == TokenType.PUNCTUATION


def test_unknown_characters_degrade_to_punctuation():
    tokens = tokenize("@#")
    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.PUNCTUATION, "@"),
        (TokenType.PUNCTUATION, "#"),
    ]


def test_classify_uses_injected_profile():
    from aexpr_linter.language import DEFAULT_PROFILE
    from dataclasses import replace

    profile = replace(DEFAULT_PROFILE, global_functions=frozenset({"myFn"}))
    assert Tokenizer(profile).classify("myFn") == TokenType.AE_FUNCTION
    assert Tokenizer(profile).classify("wiggle") == TokenType.IDENTIFIER


@pytest.mark.parametrize(
    "source",
    [
        "",
        "var x = 5;",
        "if (a && b) {\n  x = 'str\\\\';\n}\n",
        "'abc\\",
        "  \t x = \"unterminated\n$y_1 = @ # 1..2 // tail",
        "a+=b-=c*=d/=e==f!=g\r\nh",
        "\n\n\n",
    ],
)
def test_positions_are_monotonic_and_in_bounds(source):
    lines = source.split("\n")
    tokens = tokenize(source)

    positions = [(t.line, t.column) for t in tokens]
    assert positions == sorted(positions)
    for token in tokens:
        line = lines[token.line - 1]
        assert token.column >= 1
        assert token.column + len(token.value) - 1 <= len(line)
        assert line[token.column - 1 : token.column - 1 + len(token.value)] == token.value
