"""Unit tests for the session module."""

import pytest

from tg_graphviz.render import GraphvizRenderer, RenderError
from tg_graphviz.session import (
    DIRECTED_PROMPT,
    HELP_TEXT,
    HOW_TEXT,
    INVALID_CHOICE,
    LABEL_TOO_LONG,
    TOO_MANY_LINES,
    Dialogue,
    DialogueState,
    SessionStore,
    Stage,
    parse_direction,
)


class TestSessionStore:
    """Tests for SessionStore class."""

    def test_default_state(self):
        store = SessionStore()
        assert store.get("chat") == DialogueState()
        assert store.get("chat").stage is Stage.START
        assert len(store) == 0

    def test_set_and_get(self):
        store = SessionStore()
        state = DialogueState(stage=Stage.RECEIVE_IMAGE, msg_text="A B")
        store.set(1, state)
        assert store.get(1) == state
        assert store.get(2) == DialogueState()

    def test_reset(self):
        store = SessionStore()
        store.set(1, DialogueState(stage=Stage.RECEIVE_IMAGE, msg_text="A"))
        store.reset(1)
        assert store.get(1) == DialogueState()
        store.reset(1)
        assert len(store) == 0


class TestParseDirection:
    """Tests for the y/n answer mapping."""

    @pytest.mark.parametrize("answer", ["y", "Y", "  y  "])
    def test_yes(self, answer):
        assert parse_direction(answer) is True

    @pytest.mark.parametrize("answer", ["n", "N", "n\n"])
    def test_no(self, answer):
        assert parse_direction(answer) is False

    @pytest.mark.parametrize("answer", ["", "yes", "maybe", "y n"])
    def test_invalid(self, answer):
        assert parse_direction(answer) is None


class TestDialogue:
    """Tests for the two-step conversation."""

    def test_first_message_asks_direction(self):
        dialogue = Dialogue()
        reply = dialogue.handle(1, "A B")
        assert reply.text == DIRECTED_PROMPT
        assert reply.document is None
        state = dialogue.store.get(1)
        assert state.stage is Stage.RECEIVE_IMAGE
        assert state.msg_text == "A B"

    def test_directed_answer(self, labelled_input):
        dialogue = Dialogue()
        dialogue.handle(1, labelled_input)
        reply = dialogue.handle(1, "Y")
        assert reply.text == ""
        assert reply.image is None
        assert reply.document.startswith("digraph {")
        assert '"A" -> "B" [label="Edge1"]' in reply.document
        assert 'layout="circo"' in reply.document
        assert dialogue.store.get(1).stage is Stage.START

    def test_undirected_answer(self, simple_input):
        dialogue = Dialogue()
        dialogue.handle(1, simple_input)
        reply = dialogue.handle(1, "n")
        assert reply.document.startswith("graph {")
        assert '"A" -- "B"' in reply.document

    def test_long_input_uses_neato(self):
        dialogue = Dialogue()
        dialogue.handle(1, "\n".join(f"N{i} M{i}" for i in range(20)))
        reply = dialogue.handle(1, "n")
        assert 'layout="neato"' in reply.document

    def test_invalid_choice_keeps_stage(self):
        dialogue = Dialogue()
        dialogue.handle(1, "A B")
        reply = dialogue.handle(1, "perhaps")
        assert reply.text == INVALID_CHOICE
        assert dialogue.store.get(1) == DialogueState(
            stage=Stage.RECEIVE_IMAGE, msg_text="A B"
        )
        reply = dialogue.handle(1, "y")
        assert reply.document is not None

    def test_label_too_long(self):
        dialogue = Dialogue()
        dialogue.handle(1, "A VeryLongNodeName")
        reply = dialogue.handle(1, "y")
        assert reply.text == LABEL_TOO_LONG
        assert reply.document is None
        assert dialogue.store.get(1).stage is Stage.START

    def test_too_many_lines(self):
        dialogue = Dialogue()
        dialogue.handle(1, "A B\n" * 60)
        reply = dialogue.handle(1, "n")
        assert reply.text == TOO_MANY_LINES
        assert dialogue.store.get(1).stage is Stage.START

    def test_sessions_are_independent(self):
        dialogue = Dialogue()
        dialogue.handle("alice", "A B")
        dialogue.handle("bob", "X")
        reply = dialogue.handle("alice", "y")
        assert '"A" -> "B"' in reply.document
        assert dialogue.store.get("bob").msg_text == "X"

    def test_commands_do_not_touch_state(self):
        dialogue = Dialogue()
        assert dialogue.handle(1, "/help").text == HELP_TEXT
        assert dialogue.store.get(1).stage is Stage.START
        dialogue.handle(1, "A B")
        assert dialogue.handle(1, "/HOW").text == HOW_TEXT
        assert dialogue.store.get(1).stage is Stage.RECEIVE_IMAGE

    def test_shared_store(self):
        store = SessionStore()
        Dialogue(store=store).handle(7, "A B")
        reply = Dialogue(store=store).handle(7, "n")
        assert reply.document is not None

    def test_renderer_output_attached(self, fake_renderer, png_bytes):
        dialogue = Dialogue(renderer=fake_renderer)
        dialogue.handle(1, "A B")
        reply = dialogue.handle(1, "y")
        assert reply.image == png_bytes
        assert fake_renderer.documents == [reply.document]

    def test_renderer_failure_resets_session(self):
        class BrokenRenderer:
            def render(self, document):
                raise RenderError("boom")

        dialogue = Dialogue(renderer=BrokenRenderer())
        dialogue.handle(1, "A B")
        with pytest.raises(RenderError):
            dialogue.handle(1, "y")
        assert dialogue.store.get(1).stage is Stage.START

    def test_graphviz_start_failure_is_render_error(self, monkeypatch):
        """An executable that cannot be started surfaces as RenderError."""

        def not_runnable(*args, **kwargs):
            raise PermissionError(13, "Permission denied", "dot")

        monkeypatch.setattr("tg_graphviz.render.graphviz.Source.pipe", not_runnable)
        dialogue = Dialogue(renderer=GraphvizRenderer())
        dialogue.handle(1, "A B")
        with pytest.raises(RenderError):
            dialogue.handle(1, "y")
        assert dialogue.store.get(1).stage is Stage.START

    def test_custom_node_settings(self):
        dialogue = Dialogue(node_settings="shape=box")
        dialogue.handle(1, "A")
        reply = dialogue.handle(1, "n")
        assert "\tnode [shape=box]\n" in reply.document
