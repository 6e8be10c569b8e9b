"""
Caller‑owned conversation history.

:class:`ConversationHistory` remembers previous ``(user, assistant)`` turns
and renders them either as one plain‑text prompt (for the completion
endpoint) or as a list of chat messages.  The client never creates or
mutates a history on its own; callers pass it in explicitly, e.g. through
:meth:`OpenAIClient.send_chat_with_history`.
"""

import datetime
import threading
from typing import List, Optional, Tuple

from openai_client_lib.data_models.chat import ChatMessage

DEFAULT_MAX_PROMPT_CHARS = 16000

TURN_END = "<|im_end|>"

Turn = Tuple[str, str]


def default_base_prompt(today: Optional[datetime.date] = None) -> str:
    today = today or datetime.date.today()
    return (
        "You are ChatGPT, a large language model trained by OpenAI. "
        "Respond conversationally. Do not answer as the user. "
        f"Current date: {today.isoformat()}\n\n"
        "User: Hello\n"
        f"ChatGPT: Hello! How can I help you today? {TURN_END}\n\n\n"
    )


class ConversationHistory:
    """
    Ordered, de‑duplicated list of conversation turns.

    Parameters
    ----------
    enabled : bool, default ``True``
        When ``False`` nothing is recorded and prompts are the bare text.
    max_prompt_chars : int, default ``16000``
        Upper bound of a rendered prompt; the oldest turns are left out
        until the prompt fits.
    base_prompt : Optional[str]
        Preamble of the plain‑text prompt; defaults to
        :func:`default_base_prompt`.
    """

    def __init__(
        self,
        enabled: bool = True,
        max_prompt_chars: int = DEFAULT_MAX_PROMPT_CHARS,
        base_prompt: Optional[str] = None,
    ):
        self.enabled = enabled
        self.max_prompt_chars = max_prompt_chars
        self.base_prompt = base_prompt
        self._turns: List[Turn] = []
        self._lock = threading.Lock()

    @property
    def turns(self) -> List[Turn]:
        with self._lock:
            return list(self._turns)

    def append(self, user_text: str, response_text: str) -> None:
        """Record one turn; an identical turn already stored is not repeated."""
        if not self.enabled:
            return
        turn = (user_text, response_text)
        with self._lock:
            if turn not in self._turns:
                self._turns.append(turn)

    def clear(self) -> None:
        with self._lock:
            self._turns.clear()

    def build_prompt(self, text: str) -> str:
        """
        Render base prompt, history and the new question as one prompt.

        Returns ``text`` unchanged when the history is disabled.  If even the
        prompt without any history exceeds ``max_prompt_chars`` it is
        returned as is.
        """
        if not self.enabled:
            return text

        base = self.base_prompt if self.base_prompt is not None else default_base_prompt()
        question = f"User: {text}\nChatGPT:"
        turns = self.turns
        while True:
            rendered = "".join(
                f"User: {user}\n\n\nChatGPT: {answer}{TURN_END}\n"
                for user, answer in turns
            )
            prompt = base + rendered + question
            if len(prompt) <= self.max_prompt_chars or not turns:
                return prompt
            turns = turns[1:]

    def to_messages(
        self, text: str, system_prompt: Optional[str] = None
    ) -> List[ChatMessage]:
        """
        Render the history as chat messages followed by ``text``.

        The same character budget as :meth:`build_prompt` applies to the sum
        of all message contents.
        """
        head = [ChatMessage.system(system_prompt)] if system_prompt else []
        tail = [ChatMessage.user(text)]
        if not self.enabled:
            return head + tail

        fixed = len(system_prompt or "") + len(text)
        turns = self.turns
        while turns and fixed + sum(len(u) + len(a) for u, a in turns) > (
            self.max_prompt_chars
        ):
            turns = turns[1:]

        body: List[ChatMessage] = []
        for user, answer in turns:
            body.append(ChatMessage.user(user))
            body.append(ChatMessage.assistant(answer))
        return head + body + tail

    def __len__(self) -> int:
        with self._lock:
            return len(self._turns)
