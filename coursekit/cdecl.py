"""Explain C declarations in English."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenKind(Enum):
    IDENTIFIER = auto()
    QUALIFIER = auto()
    TYPE = auto()
    POINTER = auto()
    PUNCT = auto()
    END = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str


_QUALIFIERS = {"const": "read-only", "volatile": "volatile"}
_TYPES = frozenset(
    {"void", "char", "signed", "unsigned", "short", "int", "long",
     "float", "double", "struct", "union", "enum"}
)
_TOKEN_RE = re.compile(r"[A-Za-z0-9]+|[^ ]", re.DOTALL)
_END = Token(TokenKind.END, "")


def _classify(word: str) -> Token:
    if word in _QUALIFIERS:
        return Token(TokenKind.QUALIFIER, _QUALIFIERS[word])
    if word in _TYPES:
        return Token(TokenKind.TYPE, word)
    return Token(TokenKind.IDENTIFIER, word)


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of a declaration, ending with an END token."""
    for match in _TOKEN_RE.finditer(text):
        word = match.group()
        if word[0].isascii() and word[0].isalnum():
            yield _classify(word)
        elif word == "*":
            yield Token(TokenKind.POINTER, "pointer to")
        else:
            yield Token(TokenKind.PUNCT, word)
    yield _END


def _is_punct(token: Token, char: str) -> bool:
    return token.kind is TokenKind.PUNCT and token.text == char


class _Explainer:
    def __init__(self, declaration: str) -> None:
        self._tokens = tokenize(declaration)
        self._current = _END
        self._stack: list[Token] = []
        self._words: list[str] = []

    def _advance(self) -> None:
        self._current = next(self._tokens, _END)

    def run(self) -> str:
        self._advance()
        while self._current.kind is not TokenKind.IDENTIFIER:
            if self._current.kind is TokenKind.END:
                raise ValueError("declaration has no identifier")
            self._stack.append(self._current)
            self._advance()
        self._words.append(f"{self._current.text} is")
        self._advance()
        self._declarator()
        return " ".join(self._words)

    def _arrays(self) -> None:
        while _is_punct(self._current, "["):
            self._words.append("array")
            self._advance()
            size = re.match(r"\d+", self._current.text)
            if size:
                self._words.append(f"0..{int(size.group()) - 1}")
                self._advance()
            self._advance()
            self._words.append("of")

    def _function_args(self) -> None:
        while not _is_punct(self._current, ")"):
            if self._current.kind is TokenKind.END:
                raise ValueError("unterminated parameter list")
            self._advance()
        self._advance()
        self._words.append("function returning")

    def _declarator(self) -> None:
        if _is_punct(self._current, "["):
            self._arrays()
        elif _is_punct(self._current, "("):
            self._function_args()
        while self._stack and self._stack[-1].kind is TokenKind.POINTER:
            self._words.append(self._stack.pop().text)
        while self._stack:
            token = self._stack.pop()
            if _is_punct(token, "("):
                self._advance()
                self._declarator()
            else:
                self._words.append(token.text)


def explain(declaration: str) -> str:
    """Return an English reading of a C declaration."""
    return _Explainer(declaration).run()


def main(argv: list[str] | None = None) -> int:
    """Explain a declaration given as arguments or on standard input."""
    args = sys.argv[1:] if argv is None else argv
    declaration = " ".join(args) if args else sys.stdin.readline().strip()
    try:
        print(explain(declaration))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())