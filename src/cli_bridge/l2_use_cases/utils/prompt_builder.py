"""Pure functions for flattening chat messages into a single CLI prompt.

The CLI runs in single-prompt mode, so a conversation is rendered as one
string: system messages become ``<system>`` blocks, earlier assistant turns
become ``<previous_response>`` blocks and user text is left as-is.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from cli_bridge.l1_entities.chat_message import ChatMessage

NULL_CONTENT = 'null'


def _format_system(text: str) -> str:
    return f'<system>\n{text}\n</system>\n'


def _format_user(text: str) -> str:
    return text


def _format_assistant(text: str) -> str:
    return f'<previous_response>\n{text}\n</previous_response>\n'


ROLE_FORMATTERS: Mapping[str, Callable[[str], str]] = {
    'system': _format_system,
    'user': _format_user,
    'assistant': _format_assistant,
}


def _part_field(part: Any, name: str) -> Any:
    if isinstance(part, Mapping):
        return part.get(name)
    return getattr(part, name, None)


def extract_content(content: Any) -> str:
    """Reduce message content to plain text.

    Strings pass through. For a list of parts only non-empty ``text`` parts are
    kept and joined without a separator; image parts are dropped. A missing body
    renders as ``null``, the JSON spelling; anything else is rendered with ``str()``.
    """
    if content is None:
        return NULL_CONTENT
    if isinstance(content, str):
        return content
    if isinstance(content, (list, tuple)):
        texts = (
            str(_part_field(part, 'text'))
            for part in content
            if _part_field(part, 'type') == 'text' and _part_field(part, 'text')
        )
        return ''.join(texts)
    return str(content)


def messages_to_prompt(messages: Iterable[ChatMessage]) -> str:
    """Flatten *messages* into one prompt string. Messages with unknown roles are skipped."""
    fragments: list[str] = []
    for msg in messages:
        formatter = ROLE_FORMATTERS.get(msg.role)
        if formatter is None:
            continue
        fragments.append(formatter(extract_content(msg.content)))
    return '\n'.join(fragments).strip()
