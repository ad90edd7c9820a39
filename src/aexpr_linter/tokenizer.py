"""
Tokenizer for After Effects expressions.

A single left-to-right scan per line. It never raises: anything it does not
recognise becomes a one-character punctuation token.
"""

import re

from .language import DEFAULT_PROFILE, MULTI_CHAR_OPERATORS, LanguageProfile
from .models import Token, TokenType

_NUMBER_RE = re.compile(r"[0-9.]+")
_WORD_RE = re.compile(r"[a-zA-Z_$][a-zA-Z0-9_$]*")
_QUOTES = ("'", '"')


class Tokenizer:
    def __init__(self, profile: LanguageProfile = DEFAULT_PROFILE):
        self.profile = profile

    def tokenize(self, source: str) -> list[Token]:
        tokens: list[Token] = []
        for line_no, line in enumerate(source.split("\n"), start=1):
            tokens.extend(self._tokenize_line(line, line_no))
        return tokens

    def classify(self, word: str) -> TokenType:
        if word in self.profile.keywords:
            return TokenType.KEYWORD
        if word in self.profile.global_functions:
            return TokenType.AE_FUNCTION
        if word in self.profile.layer_properties:
            return TokenType.AE_PROPERTY
        return TokenType.IDENTIFIER

    def _tokenize_line(self, line: str, line_no: int) -> list[Token]:
        tokens = []
        pos = 0
        length = len(line)

        while pos < length:
            char = line[pos]
            start = pos

            if char.isspace():
                pos += 1
                continue

            if line.startswith("//", pos):
                tokens.append(Token(TokenType.COMMENT, line[pos:], line_no, pos + 1))
                break

            if char in _QUOTES:
                pos = self._scan_string(line, pos)
                tokens.append(Token(TokenType.STRING, line[start:pos], line_no, start + 1))
                continue

            if char.isascii() and char.isdigit():
                match = _NUMBER_RE.match(line, pos)
                pos = match.end()
                tokens.append(Token(TokenType.NUMBER, match.group(), line_no, start + 1))
                continue

            match = _WORD_RE.match(line, pos)
            if match:
                word = match.group()
                pos = match.end()
                tokens.append(Token(self.classify(word), word, line_no, start + 1))
                continue

            for op in MULTI_CHAR_OPERATORS:
                if line.startswith(op, pos):
                    tokens.append(Token(TokenType.OPERATOR, op, line_no, start + 1))
                    pos += len(op)
                    break
            else:
                tokens.append(Token(TokenType.PUNCTUATION, char, line_no, start + 1))
                pos += 1

        return tokens

    @staticmethod
    def _scan_string(line: str, pos: int) -> int:
        """Return the index just past the string starting at ``pos``."""
        quote = line[pos]
        pos += 1
        while pos < len(line) and line[pos] != quote:
            # escape consumes the next char, but never past the end of the line
            pos += 2 if line[pos] == "\\" else 1
        return min(pos + 1, len(line))


def tokenize(source: str, profile: LanguageProfile = DEFAULT_PROFILE) -> list[Token]:
    return Tokenizer(profile).tokenize(source)
