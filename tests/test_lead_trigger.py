from earthy_ai.qualification import LeadTriggerPolicy, evaluate_lead_gate
from earthy_ai.schemas import Speaker, Turn

POLICY = LeadTriggerPolicy()


def user(text):
    return Turn(speaker=Speaker.USER, text=text)


def ai(text):
    return Turn(speaker=Speaker.ASSISTANT, text=text)


def test_greeting_is_not_eligible():
    gate = evaluate_lead_gate(POLICY, [], "Hi there")
    assert gate.user_turns == 1
    assert not gate.eligible
    assert not gate.pricing_allowed


def test_first_pricing_question_allows_pricing_only():
    gate = evaluate_lead_gate(POLICY, [], "What do you charge?")
    assert gate.pricing_interest
    assert gate.pricing_allowed
    assert not gate.eligible


def test_pricing_interest_opens_gate_on_second_user_turn():
    gate = evaluate_lead_gate(POLICY, [user("How much is it?"), ai("Plans start around $300.")], "ok")
    assert gate.eligible


def test_turn_count_opens_gate():
    conv = [user("hi"), ai("hello"), user("what do you do"), ai("we build assistants")]
    gate = evaluate_lead_gate(POLICY, conv, "nice")
    assert gate.user_turns == 3
    assert gate.eligible


def test_assistant_turns_do_not_count():
    conv = [ai("hello"), ai("still here"), ai("anything else?")]
    assert evaluate_lead_gate(POLICY, conv, "hi").user_turns == 1


def test_buying_intent_opens_gate_immediately():
    gate = evaluate_lead_gate(POLICY, [], "Can we book a call next week?")
    assert gate.buying_intent
    assert gate.eligible


def test_shared_email_closes_gate():
    conv = [user("hi"), ai("hello"), user("pricing?"), ai("from $300")]
    gate = evaluate_lead_gate(POLICY, conv, "sure, it's jo@greenleaf.co")
    assert gate.contact_shared
    assert not gate.eligible
    assert "contact_details: already-shared" in gate.render()


def test_shared_phone_closes_gate():
    gate = evaluate_lead_gate(POLICY, [], "call me at 555-123-4567")
    assert gate.contact_shared
    assert not gate.eligible


def test_previous_contact_request_is_reported():
    conv = [user("hi"), ai("Could you share your email so the team can follow up?")]
    gate = evaluate_lead_gate(POLICY, conv, "maybe later")
    assert gate.contact_requested
    assert "contact_details: already-requested" in gate.render()


def test_custom_threshold():
    gate = evaluate_lead_gate(LeadTriggerPolicy(min_user_turns=1), [], "hello")
    assert gate.eligible


def test_everyday_prose_is_not_a_contact_request():
    for text in (
        "We offer a number of packages for salons.",
        "We send a number of reports each month.",
        "Most clients get an email digest every week.",
        "A phone line is included in the premium setup.",
    ):
        gate = evaluate_lead_gate(POLICY, [user("hi"), ai(text)], "cool")
        assert not gate.contact_requested, text
        assert "contact_details" not in gate.render()


def test_contact_request_phrasings():
    for text in (
        "What's your email address?",
        "Could you leave your phone number?",
        "Feel free to drop us your contact details.",
        "What's the best way to reach you?",
    ):
        gate = evaluate_lead_gate(POLICY, [user("hi"), ai(text)], "ok")
        assert gate.contact_requested, text


def test_bare_digit_runs_do_not_close_gate():
    conv = [user("hi"), ai("hello"), user("we had an issue"), ai("sorry to hear that")]
    gate = evaluate_lead_gate(POLICY, conv, "our order 20240115 was late, I'm ready to buy")
    assert gate.buying_intent
    assert not gate.contact_shared
    assert gate.eligible
    for text in ("budget is 10000000", "invoice 2024-01-15", "about 10 000 000 visitors"):
        assert not evaluate_lead_gate(POLICY, [], text).contact_shared, text


def test_phone_formats_are_detected():
    for text in ("+44 20 7946 0958", "(555) 123-4567", "+15551234567", "555.123.4567"):
        assert evaluate_lead_gate(POLICY, [], f"reach me on {text}").contact_shared, text
