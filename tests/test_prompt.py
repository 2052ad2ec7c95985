import pytest

from earthy_ai.config import Settings
from earthy_ai.errors import InvalidInput
from earthy_ai.live.prompt import CompletionRequest, PromptPolicy, assemble_messages, default_policy
from earthy_ai.schemas import Role, Speaker, Turn


def _conversation(n):
    return [
        Turn(speaker=Speaker.USER if i % 2 == 0 else Speaker.ASSISTANT, text=f"turn {i}")
        for i in range(n)
    ]


@pytest.mark.parametrize("n", [0, 1, 2, 9])
def test_exactly_one_directive_first(n):
    messages = assemble_messages(CompletionRequest(PromptPolicy(), _conversation(n), "hello"))
    roles = [m.role for m in messages]
    assert roles.count(Role.SYSTEM) == 1
    assert roles[0] == Role.SYSTEM
    assert len(messages) == n + 2


def test_conversation_order_and_new_input_last():
    conv = _conversation(3)
    messages = assemble_messages(CompletionRequest(PromptPolicy(), conv, "  new question  "))
    assert [m.content for m in messages[1:-1]] == ["turn 0", "turn 1", "turn 2"]
    assert [m.role for m in messages[1:-1]] == [Role.USER, Role.ASSISTANT, Role.USER]
    assert messages[-1].role == Role.USER
    assert messages[-1].content == "new question"


def test_repeated_assembly_does_not_duplicate_directive():
    request = CompletionRequest(PromptPolicy(), _conversation(2), "hi")
    first = assemble_messages(request)
    second = assemble_messages(request)
    assert first == second
    assert sum(m.role == Role.SYSTEM for m in second) == 1


@pytest.mark.parametrize("bad", ["", "   ", "\n\t", None, 42, ["hi"]])
def test_empty_or_non_text_input_rejected(bad):
    with pytest.raises(InvalidInput):
        assemble_messages(CompletionRequest(PromptPolicy(), [], bad))


def test_directive_carries_policy_and_gate():
    messages = assemble_messages(CompletionRequest(PromptPolicy(), [], "hello there"))
    directive = messages[0].content
    assert "Earthy AI" in directive
    assert "2-4 sentences" in directive
    assert "lead_capture_gate: not-eligible" in directive
    assert "user_turns: 1" in directive


def test_gate_opens_after_enough_user_turns():
    conv = [
        Turn(speaker=Speaker.USER, text="hi"),
        Turn(speaker=Speaker.ASSISTANT, text="Hello, how can I help?"),
        Turn(speaker=Speaker.USER, text="tell me more"),
        Turn(speaker=Speaker.ASSISTANT, text="We help service businesses."),
    ]
    messages = assemble_messages(CompletionRequest(PromptPolicy(), conv, "sounds good"))
    assert "lead_capture_gate: eligible" in messages[0].content
    assert "user_turns: 3" in messages[0].content


def test_default_policy_uses_configured_threshold():
    policy = default_policy(Settings(lead_min_user_turns=5))
    assert policy.lead_trigger.min_user_turns == 5
    assert default_policy().lead_trigger.min_user_turns == 3
