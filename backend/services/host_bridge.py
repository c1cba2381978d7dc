"""
Host-side handling of artifact messages.

The artifact posts messages and never waits for a reply; this is where a
host decides what each one means. State is per artifact URI, in memory,
and bounded: once more than `max_artifacts` URIs are tracked, the least
recently seen one is forgotten.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass

from backend.config import settings
from backend.models.tools import HostReaction
from recordui.kernel.bridge import ActionMessage, HostMessage, PromptMessage, SizeChange

logger = logging.getLogger(__name__)

STATE_OPEN = "open"
STATE_SUBMITTED = "submitted"
STATE_DISMISSED = "dismissed"

TERMINAL_STATES = {STATE_SUBMITTED, STATE_DISMISSED}

EDITABLE_PREFIX = "ui://record/edit/"


@dataclass
class ArtifactState:
    uri: str
    state: str = STATE_OPEN
    height: float | None = None

    @property
    def editable(self) -> bool:
        return self.uri.startswith(EDITABLE_PREFIX)


class HostBridge:
    """Tracks each artifact's size and lifecycle and reacts to its messages."""

    def __init__(self, max_artifacts: int | None = None) -> None:
        self.max_artifacts = max_artifacts or settings.MAX_TRACKED_ARTIFACTS
        self._artifacts: OrderedDict[str, ArtifactState] = OrderedDict()

    def __len__(self) -> int:
        return len(self._artifacts)

    def get(self, uri: str) -> ArtifactState:
        artifact = self._artifacts.get(uri)
        if artifact is None:
            artifact = ArtifactState(uri)
            self._artifacts[uri] = artifact
            while len(self._artifacts) > self.max_artifacts:
                evicted, _ = self._artifacts.popitem(last=False)
                logger.debug("host_bridge: forgetting %s", evicted)
        else:
            self._artifacts.move_to_end(uri)
        return artifact

    def height(self, uri: str) -> float | None:
        """Latest reported height, or None if the artifact never reported one."""
        artifact = self._artifacts.get(uri)
        return artifact.height if artifact else None

    def handle(self, uri: str, message: HostMessage) -> HostReaction:
        artifact = self.get(uri)

        if isinstance(message, SizeChange):
            # Only the latest height matters.
            artifact.height = message.height
            return HostReaction(kind="resize", uri=uri, height=message.height)

        if artifact.state in TERMINAL_STATES:
            logger.warning("host_bridge: %s is %s, ignoring %s", uri, artifact.state, type(message).__name__)
            return HostReaction(kind="ignored", uri=uri)

        if isinstance(message, PromptMessage):
            if artifact.editable:
                artifact.state = STATE_SUBMITTED
            return HostReaction(
                kind="prompt",
                uri=uri,
                prompt=message.prompt,
                record_data=dict(message.record_data),
            )

        if isinstance(message, ActionMessage):
            artifact.state = STATE_DISMISSED
            return HostReaction(kind="dismiss", uri=uri)

        raise TypeError(f"Unsupported message: {message!r}")

    def reset(self) -> None:
        self._artifacts.clear()


host_bridge = HostBridge()
