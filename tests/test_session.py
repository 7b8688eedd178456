"""Unit tests for the ChatSession controller."""
import asyncio

import pytest
from hypothesis import given
from hypothesis import strategies as st

from musaed.chat import ERROR_REPLY, ChatSession, Role
from musaed.llm import LLMAPIError


class TestChatSession:
    """Tests for ChatSession."""

    def test_initial_state(self, make_session, provider):
        session = make_session(provider)

        assert session.messages == ()
        assert session.draft == ""
        assert not session.pending
        assert not session.can_submit
        assert session.model == "fake-model"

    def test_model_override(self, make_session, provider):
        session = make_session(provider, model="gemini-custom")
        assert session.model == "gemini-custom"

    @given(st.text(max_size=20), st.booleans())
    def test_can_submit_iff_idle_and_draft_not_blank(self, draft, pending):
        """Property test: submit control disabled iff pending or blank draft."""
        from musaed.chat.models import DispatchState

        class Idle:
            model = "m"

        session = ChatSession(Idle(), system_instruction="s")  # type: ignore[arg-type]
        session.set_draft(draft)
        if pending:
            session.dispatcher._state = DispatchState.AWAITING_RESPONSE

        assert session.can_submit == (not pending and draft.strip() != "")

    @pytest.mark.asyncio
    async def test_submit_sends_draft_and_clears_it(self, make_session, scripted):
        llm = scripted(["hi there"])
        session = make_session(llm)
        session.set_draft("hello")

        reply = await session.submit()

        assert session.draft == ""
        assert [(m.role, m.text) for m in session.messages] == [
            (Role.USER, "hello"),
            (Role.MODEL, "hi there"),
        ]
        assert reply.text == "hi there"
        assert not session.pending

    @pytest.mark.asyncio
    async def test_submit_with_blank_draft_is_noop(self, make_session, provider):
        session = make_session(provider)
        session.set_draft("   ")

        assert await session.submit() is None
        assert session.draft == "   "
        assert session.messages == ()
        assert provider.requests == []

    @pytest.mark.asyncio
    async def test_submit_while_pending_is_noop(self, make_session, scripted):
        llm = scripted(["first"], gated=True)
        session = make_session(llm)
        session.set_draft("one")
        task = asyncio.create_task(session.submit())
        await asyncio.sleep(0)

        session.set_draft("two")
        assert not session.can_submit
        assert await session.submit() is None
        assert session.draft == "two"
        assert len(session.messages) == 1

        llm.release()
        await task
        assert [m.text for m in session.messages] == ["one", "first"]

    @pytest.mark.asyncio
    async def test_failed_submit_shows_error_reply(self, make_session, scripted):
        session = make_session(scripted([LLMAPIError("quota", status_code=429)]))
        session.set_draft("test")

        await session.submit()

        assert [m.text for m in session.messages] == ["test", ERROR_REPLY]

    @pytest.mark.asyncio
    async def test_clear_while_pending_discards_late_reply(self, make_session, scripted):
        llm = scripted(["late"], gated=True)
        session = make_session(llm)
        session.set_draft("hello")
        task = asyncio.create_task(session.submit())
        await asyncio.sleep(0)

        session.clear()
        assert session.messages == ()
        assert session.pending

        llm.release()
        await task
        assert session.messages == ()
        assert not session.pending

    @pytest.mark.asyncio
    async def test_listeners_see_every_transition(self, make_session, scripted):
        session = make_session(scripted(["reply"]))
        snapshots = []
        session.subscribe(lambda: snapshots.append((len(session.messages), session.pending)))

        session.set_draft("hi")
        await session.submit()

        # draft typed, draft cleared, user appended, pending, reply appended, idle
        assert snapshots == [(0, False), (0, False), (1, False), (1, True), (2, True), (2, False)]

    def test_set_same_draft_does_not_notify(self, make_session, provider):
        session = make_session(provider)
        calls = []
        session.subscribe(lambda: calls.append(session.draft))

        session.set_draft("a")
        session.set_draft("a")

        assert calls == ["a"]
