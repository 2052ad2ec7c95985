import pytest

from earthy_ai.live.history import normalize_history, speaker_for
from earthy_ai.schemas import Speaker


@pytest.mark.parametrize("raw", [None, "hello", 42, {"author": "user", "text": "hi"}, True])
def test_non_sequence_history_is_empty(raw):
    assert normalize_history(raw) == []


def test_drops_malformed_elements_and_keeps_order():
    raw = [
        {"author": "user", "text": "first"},
        {"author": "ai"},
        {"text": "no author"},
        "just a string",
        {"author": "user", "text": "   "},
        {"author": "ai", "text": 123},
        {"author": "ai", "text": "second"},
        None,
        {"author": "user", "text": "third"},
    ]
    turns = normalize_history(raw)
    assert [t.text for t in turns] == ["first", "second", "third"]
    assert [t.speaker for t in turns] == [Speaker.USER, Speaker.ASSISTANT, Speaker.USER]


def test_text_is_trimmed():
    turns = normalize_history([{"author": "user", "text": "  what do you do?\n"}])
    assert turns[0].text == "what do you do?"


@pytest.mark.parametrize("author", ["user", "USER", " User ", "human"])
def test_user_authors(author):
    assert speaker_for(author) == Speaker.USER


@pytest.mark.parametrize("author", ["ai", "bot", "assistant", "system", "", None, 7])
def test_everything_else_is_assistant(author):
    assert speaker_for(author) == Speaker.ASSISTANT


def test_present_but_null_author_is_kept_as_assistant():
    turns = normalize_history([{"author": None, "text": "earlier reply"}])
    assert len(turns) == 1
    assert turns[0].speaker == Speaker.ASSISTANT


def test_no_truncation():
    raw = [{"author": "user" if i % 2 else "ai", "text": f"turn {i}"} for i in range(200)]
    assert len(normalize_history(raw)) == 200
