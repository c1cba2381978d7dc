"""
recordui Kernel — Host Messaging Bridge

The protocol between a rendered artifact and the host that embeds it.
One direction only: artifact → host, via window.parent.postMessage.
The artifact never waits for a reply.

Message kinds:

  {"type": "ui-size-change", "payload": {"height": <content height + padding>}}
  {"type": "prompt", "payload": {"prompt": <text>, "params": {"recordData": {...}}}}
  {"type": "action", "payload": {"action": "cancel"}}

Size changes may arrive any number of times; only the latest matters.
A prompt or cancel is sent once per explicit user action.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

from recordui.kernel.errors import MessageError
from recordui.kernel.parser import record_to_text
from recordui.kernel.types import RENDER_MODES, SIZE_PADDING, Record

MESSAGE_SIZE_CHANGE = "ui-size-change"
MESSAGE_PROMPT = "prompt"
MESSAGE_ACTION = "action"
ACTION_CANCEL = "cancel"

MESSAGE_TYPES: set[str] = {MESSAGE_SIZE_CHANGE, MESSAGE_PROMPT, MESSAGE_ACTION}
ACTIONS: set[str] = {ACTION_CANCEL}

_ASSETS_DIR = Path(__file__).parent / "assets"


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SizeChange:
    height: float

    def to_dict(self) -> dict[str, Any]:
        return {"type": MESSAGE_SIZE_CHANGE, "payload": {"height": self.height}}


@dataclass(frozen=True)
class PromptMessage:
    """A save (change sentence) or a re-edit request, plus the field values."""

    prompt: str
    record_data: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": MESSAGE_PROMPT,
            "payload": {"prompt": self.prompt, "params": {"recordData": dict(self.record_data)}},
        }


@dataclass(frozen=True)
class ActionMessage:
    action: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": MESSAGE_ACTION, "payload": {"action": self.action}}


HostMessage = SizeChange | PromptMessage | ActionMessage


def decode_message(raw: Any) -> HostMessage:
    """
    Decode a posted message. Raises MessageError for anything outside the
    protocol; the host should drop such messages.
    """
    if not isinstance(raw, dict):
        raise MessageError("Message must be an object")
    msg_type = raw.get("type")
    payload = raw.get("payload")
    if msg_type not in MESSAGE_TYPES:
        raise MessageError(f"Unknown message type: {msg_type!r}")
    if not isinstance(payload, dict):
        raise MessageError(f"{msg_type} message requires an object payload")

    if msg_type == MESSAGE_SIZE_CHANGE:
        height = payload.get("height")
        if isinstance(height, bool) or not isinstance(height, (int, float)) or height < 0:
            raise MessageError("ui-size-change requires a non-negative numeric height")
        return SizeChange(height)

    if msg_type == MESSAGE_PROMPT:
        prompt = payload.get("prompt")
        if not isinstance(prompt, str) or not prompt:
            raise MessageError("prompt message requires a non-empty 'prompt'")
        params = payload.get("params") or {}
        if not isinstance(params, dict):
            raise MessageError("prompt 'params' must be an object")
        record_data = params.get("recordData") or {}
        if not isinstance(record_data, dict):
            raise MessageError("prompt 'params.recordData' must be an object")
        return PromptMessage(prompt, {str(k): "" if v is None else str(v) for k, v in record_data.items()})

    action = payload.get("action")
    if action not in ACTIONS:
        raise MessageError(f"Unknown action: {action!r}")
    return ActionMessage(action)


def edit_prompt(record: Record, object_type: str | None = None) -> PromptMessage:
    """The message a table row or detail card sends to reopen a record for editing."""
    noun = f"{object_type} record" if object_type else "record"
    return PromptMessage(f"Edit this {noun}:\n\n{record_to_text(record)}", record.to_dict())


# ---------------------------------------------------------------------------
# Embedding
# ---------------------------------------------------------------------------


def bridge_config(
    mode: str,
    object_type: str | None = None,
    size_padding: int = SIZE_PADDING,
) -> dict[str, Any]:
    """Config block the runtime reads at load time."""
    if mode not in RENDER_MODES:
        raise ValueError(f"Unknown render mode: {mode!r}")
    return {
        "mode": mode,
        "objectType": object_type or "",
        "sizePadding": size_padding,
        "messages": {
            "sizeChange": MESSAGE_SIZE_CHANGE,
            "prompt": MESSAGE_PROMPT,
            "action": MESSAGE_ACTION,
            "cancel": ACTION_CANCEL,
        },
    }


@lru_cache(maxsize=1)
def load_bridge_script() -> str:
    """The artifact runtime source, read once per process."""
    return (_ASSETS_DIR / "bridge.js").read_text(encoding="utf-8")
