"""Cyclic word stream consumed while filling sides."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from polyspiral.engine.errors import InvalidConfiguration


@dataclass(frozen=True)
class WordToken:
    text: str
    # False for the tail of a word that was split across two sides
    is_full_word: bool = True

    def __len__(self) -> int:
        return len(self.text)


class WordQueue:
    """Words from the source text, cycled indefinitely.

    Full words go back to the end as soon as they are taken, so the text
    repeats for as long as there is room. Split remainders are pushed to the
    front instead and are never requeued, so a word is never duplicated.
    """

    def __init__(self, tokens: list[WordToken]) -> None:
        if not tokens:
            raise InvalidConfiguration("Word queue needs at least one word")
        self._tokens: deque[WordToken] = deque(tokens)

    @classmethod
    def from_text(cls, text: str) -> WordQueue:
        """Split on whitespace runs; leading and trailing whitespace is dropped."""
        return cls([WordToken(word) for word in text.split()])

    def take_front(self) -> WordToken:
        return self._tokens.popleft()

    def requeue_back(self, token: WordToken) -> None:
        if not token.is_full_word:
            raise ValueError(f"Only full words cycle back, got fragment {token.text!r}")
        self._tokens.append(token)

    def split_and_return(self, token: WordToken, keep_chars: int) -> str:
        """Return the first `keep_chars` characters; the rest is consumed next."""
        if not 0 < keep_chars < len(token.text):
            raise ValueError(
                f"Cannot keep {keep_chars} characters of {token.text!r} ({len(token.text)} long)"
            )
        self._tokens.appendleft(WordToken(token.text[keep_chars:], is_full_word=False))
        return token.text[:keep_chars]

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[WordToken]:
        return iter(list(self._tokens))
