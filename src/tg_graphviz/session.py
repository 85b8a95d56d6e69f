"""
Conversation flow for chat front-ends.

A conversation has two stages. The user first sends the graph description,
then answers whether the graph is directed. The reply to the second message
is either the rendered graph or an explanation of which limit was exceeded.

State lives in a SessionStore keyed by session id, so one Dialogue can serve
any number of independent chats. Transport (sending messages, photos) stays
with the caller: ``Dialogue.handle`` takes and returns plain values.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Hashable, Optional

from .graph import DEFAULT_NODE_SETTINGS, Graph, choose_layout
from .parser import MAX_LABEL_LENGTH, MAX_LINES, LabelTooLongError, TooManyLinesError
from .render import Renderer

logger = logging.getLogger(__name__)

DIRECTED_PROMPT = "Is your graph directed?(Y/n)"
INVALID_CHOICE = "Invalid choice! Try again.(Y/n)"
LABEL_TOO_LONG = (
    f"The number of letters in nodes and labels names should not exceed "
    f"{MAX_LABEL_LENGTH}!\nTry again."
)
TOO_MANY_LINES = (
    f"The number of lines in your message should not exceed {MAX_LINES}!\n"
    "Try again."
)

HELP_TEXT = """These commands are supported:
/help - List of supported commands
/how - Instruction how to use bot"""

HOW_TEXT = """Graph Visualizer Bot
This bot converts a graph written as a list of vertices into an image.
How to use:
1. Send a list of vertices, one edge per line, vertices separated by a space:
A B
B C
C D
2. Optionally add a third field as the edge label:
A B Edge1
B C Edge2
3. A line with a single name adds just that node:
A B
C
D
4. Answer whether the graph is directed and the bot sends back the image."""

COMMANDS = {
    "/help": HELP_TEXT,
    "/how": HOW_TEXT,
}


class Stage(Enum):
    """Where a session is in the conversation."""

    START = "start"
    RECEIVE_IMAGE = "receive_image"


@dataclass(frozen=True)
class DialogueState:
    """
    State of one session.

    Attributes:
        stage: Current conversation stage.
        msg_text: Graph description waiting for the directedness answer.
    """

    stage: Stage = Stage.START
    msg_text: str = ""


@dataclass
class Reply:
    """
    What the front-end should send back.

    Attributes:
        text: Message text, empty when only the image is sent.
        document: DOT document generated for the request, if any.
        image: Rendered image bytes, if a renderer is configured.
    """

    text: str = ""
    document: Optional[str] = None
    image: Optional[bytes] = None


class SessionStore:
    """In-memory dialogue state keyed by session id."""

    def __init__(self):
        self._states: Dict[Hashable, DialogueState] = {}

    def get(self, session_id: Hashable) -> DialogueState:
        return self._states.get(session_id, DialogueState())

    def set(self, session_id: Hashable, state: DialogueState) -> None:
        self._states[session_id] = state

    def reset(self, session_id: Hashable) -> None:
        self._states.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._states)


def parse_direction(answer: str) -> Optional[bool]:
    """Map a y/n answer to directedness, or None when it is neither."""
    choice = answer.strip().lower()
    if choice == "y":
        return True
    if choice == "n":
        return False
    return None


class Dialogue:
    """
    Drives the two-step conversation for every session.

    Example:
        >>> dialogue = Dialogue()
        >>> dialogue.handle(42, "A B\\nB C").text
        'Is your graph directed?(Y/n)'
        >>> print(dialogue.handle(42, "y").document)
    """

    def __init__(
        self,
        store: Optional[SessionStore] = None,
        renderer: Optional[Renderer] = None,
        node_settings: str = DEFAULT_NODE_SETTINGS,
    ):
        self.store = store if store is not None else SessionStore()
        self.renderer = renderer
        self.node_settings = node_settings

    def handle(self, session_id: Hashable, text: str) -> Reply:
        """
        Process one incoming message.

        Args:
            session_id: Identifier of the chat the message came from.
            text: Message text.

        Returns:
            The reply to send back to that chat.

        Raises:
            RenderError: If the renderer fails. The session is reset first.
        """
        command = text.strip().lower()
        if command in COMMANDS:
            return Reply(text=COMMANDS[command])

        state = self.store.get(session_id)
        if state.stage is Stage.START:
            return self._start(session_id, text)
        return self._receive_image(session_id, state, text)

    def _start(self, session_id: Hashable, text: str) -> Reply:
        logger.debug("session %r: received graph description", session_id)
        self.store.set(
            session_id, DialogueState(stage=Stage.RECEIVE_IMAGE, msg_text=text)
        )
        return Reply(text=DIRECTED_PROMPT)

    def _receive_image(
        self, session_id: Hashable, state: DialogueState, answer: str
    ) -> Reply:
        directed = parse_direction(answer)
        if directed is None:
            return Reply(text=INVALID_CHOICE)

        self.store.reset(session_id)

        graph = Graph(
            directed=directed,
            layout=choose_layout(state.msg_text),
            node_settings=self.node_settings,
        )
        try:
            graph.try_parse(state.msg_text)
        except LabelTooLongError as e:
            logger.debug("session %r: %s", session_id, e)
            return Reply(text=LABEL_TOO_LONG)
        except TooManyLinesError as e:
            logger.debug("session %r: %s", session_id, e)
            return Reply(text=TOO_MANY_LINES)

        document = graph.to_dot()
        if self.renderer is None:
            return Reply(document=document)

        image = self.renderer.render(document)
        logger.debug("session %r: sending rendered graph", session_id)
        return Reply(document=document, image=image)
