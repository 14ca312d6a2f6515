"""Tests for the application state store operations."""

from __future__ import annotations

import pytest

from promptforge.models import ChatSettings, ChatTurn, User
from promptforge.state import StateStore


@pytest.mark.parametrize(
    "balance, amount, succeeds",
    [(0, 1, False), (1, 1, True), (5, 5, True), (4, 5, False), (20, 0, True), (120, 7, True)],
)
def test_deduct_only_when_balance_covers_amount(balance, amount, succeeds):
    store = StateStore()
    store.add_credits(balance)

    assert store.deduct_credits(amount) is succeeds
    assert store.state.user_credits == (balance - amount if succeeds else balance)
    assert store.state.user_credits >= 0


def test_end_to_end_credit_scenario():
    store = StateStore()
    store.login(User(name="Demo", email="demo@x.com"))
    assert store.state.user_credits == 20
    assert store.state.current_view == "dashboard"

    results = [store.deduct_credits(5) for _ in range(5)]

    assert results == [True, True, True, True, False]
    assert store.state.user_credits == 0


def test_login_logout_login_preserves_balance(store):
    store.login(User(name="Demo", email="demo@x.com"))
    store.deduct_credits(3)
    store.logout()
    store.login(User(name="Demo", email="demo@x.com"))

    assert store.state.user_credits == 17


def test_logout_clears_session_and_chat_but_keeps_prompts(logged_in_store):
    logged_in_store.save_prompt("Title", "Body")
    logged_in_store.replace_history([ChatTurn(role="user", text="hi")])

    logged_in_store.logout()

    state = logged_in_store.state
    assert state.current_user is None
    assert state.current_chat_history == []
    assert state.current_view == "landing"
    assert [p.title for p in state.saved_prompts] == ["Title"]
    assert state.user_credits == 20


def test_save_prompt_prepends_most_recent_first(store):
    store.save_prompt("T1", "B1")
    store.save_prompt("T2", "B2")

    assert [(p.title, p.prompt) for p in store.state.saved_prompts] == [("T2", "B2"), ("T1", "B1")]
    ids = [p.id for p in store.state.saved_prompts]
    assert len(set(ids)) == 2


def test_delete_prompt_keeps_relative_order(store):
    saved = [store.save_prompt(f"T{i}", f"B{i}") for i in range(4)]

    store.delete_prompt(saved[1].id)

    assert [p.title for p in store.state.saved_prompts] == ["T3", "T2", "T0"]
    store.save_prompt("T4", "B4")
    assert store.state.saved_prompts[0].title == "T4"


def test_delete_unknown_prompt_is_noop(store):
    store.save_prompt("T1", "B1")
    notified = []
    store.subscribe(notified.append)

    store.delete_prompt("missing")

    assert len(store.state.saved_prompts) == 1
    assert notified == []


def test_check_credits_uses_operation_cost(store):
    assert store.check_credits() is False
    store.add_credits(4)
    assert store.check_credits() is True
    assert store.check_credits(5) is False


def test_add_credits_rejects_negative_amounts(store):
    with pytest.raises(ValueError):
        store.add_credits(-1)


def test_history_replace_and_append(store):
    store.replace_history([ChatTurn(role="user", text="one")])
    result = store.append_from_previous(lambda prev: prev + [ChatTurn(role="model", text="two")])

    assert [t.text for t in result] == ["one", "two"]
    assert [t.role for t in store.state.current_chat_history] == ["user", "model"]


def test_chat_turn_rejects_unknown_role():
    with pytest.raises(ValueError):
        ChatTurn(role="assistant", text="hi")


def test_handoff_is_taken_once(store):
    store.set_prompt_for_code_builder("# Build a todo app")

    assert store.take_prompt_for_code_builder() == "# Build a todo app"
    assert store.take_prompt_for_code_builder() == ""


def test_update_chat_settings_shows_toast(store):
    store.update_chat_settings(ChatSettings(persona="Code Wizard", tone="Casual", temperature=0.2))

    assert store.state.chat_settings.persona == "Code Wizard"
    assert store.ui.drain()["toasts"] == ["Chat settings saved!"]


def test_chat_settings_temperature_is_clamped():
    assert ChatSettings(temperature=3).temperature == 1.0
    assert ChatSettings(temperature=-1).temperature == 0.0


def test_effective_view_is_landing_when_logged_out(store):
    store.navigate("chat")

    assert store.state.current_view == "chat"
    assert store.effective_view() == "landing"
    assert store.snapshot()["currentView"] == "landing"


def test_navigate_rejects_unknown_view(logged_in_store):
    with pytest.raises(ValueError):
        logged_in_store.navigate("settings")


def test_listeners_run_after_each_mutation(store):
    seen = []
    store.subscribe(lambda state: seen.append(state.user_credits))

    store.add_credits(10)
    store.deduct_credits(3)
    store.deduct_credits(50)

    assert seen == [10, 7]


def test_deduct_rejects_negative_amounts(store):
    store.add_credits(5)

    with pytest.raises(ValueError):
        store.deduct_credits(-10)
    assert store.state.user_credits == 5
