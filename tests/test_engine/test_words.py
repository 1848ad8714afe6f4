"""Tests for the cyclic word queue."""

import pytest

from polyspiral.engine.errors import InvalidConfiguration
from polyspiral.engine.words import WordQueue, WordToken


def test_from_text_collapses_whitespace():
    q = WordQueue.from_text("  hello \t  world\n\nfoo  ")
    assert [t.text for t in q] == ["hello", "world", "foo"]
    assert all(t.is_full_word for t in q)


def test_empty_text_rejected():
    with pytest.raises(InvalidConfiguration):
        WordQueue.from_text("   \n ")


def test_take_and_requeue_cycles():
    q = WordQueue.from_text("a b")
    taken = []
    for _ in range(5):
        token = q.take_front()
        q.requeue_back(token)
        taken.append(token.text)
    assert taken == ["a", "b", "a", "b", "a"]
    assert len(q) == 2


def test_split_pushes_fragment_to_front():
    q = WordQueue.from_text("supercal next")
    token = q.take_front()
    q.requeue_back(token)
    assert q.split_and_return(token, 3) == "sup"
    front = q.take_front()
    assert front == WordToken("ercal", is_full_word=False)
    # The full word is still waiting at the back for its next cycle
    assert [t.text for t in q] == ["next", "supercal"]


def test_fragment_is_never_requeued():
    q = WordQueue.from_text("word")
    with pytest.raises(ValueError):
        q.requeue_back(WordToken("rd", is_full_word=False))


@pytest.mark.parametrize("keep", [0, 4, 10])
def test_split_rejects_out_of_range(keep):
    q = WordQueue.from_text("word")
    token = q.take_front()
    with pytest.raises(ValueError):
        q.split_and_return(token, keep)
