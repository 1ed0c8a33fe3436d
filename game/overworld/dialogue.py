"""Sequential NPC conversations: a two-state Closed/Open machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol

from .entities import NPC

EXPLORING_STATUS = "Move: WASD/Arrows | Talk: E/Enter | Goal: Talk to everyone"
TALKING_STATUS = "Talking... (E/Enter to continue)"


class DialogueView(Protocol):
    """Whatever shows the conversation; the controller pushes every change."""

    def show(self, name: str, text: str) -> None: ...

    def hide(self) -> None: ...

    def set_status(self, text: str) -> None: ...


class NullDialogueView:
    """View that discards updates, for headless sessions."""

    def show(self, name: str, text: str) -> None:
        return None

    def hide(self) -> None:
        return None

    def set_status(self, text: str) -> None:
        return None


@dataclass(frozen=True)
class DialogueSession:
    npc: NPC
    index: int = 0

    @property
    def line(self) -> str:
        return self.npc.lines[self.index]


class DialogueController:
    def __init__(
        self,
        view: DialogueView | None = None,
        total_npcs: int = 0,
        exploring_status: str = EXPLORING_STATUS,
        talking_status: str = TALKING_STATUS,
    ) -> None:
        self.view: DialogueView = view or NullDialogueView()
        self.total_npcs = total_npcs
        self.exploring_status = exploring_status
        self.talking_status = talking_status
        self._session: Optional[DialogueSession] = None
        self._talked_to: List[str] = []
        self.view.hide()
        self.view.set_status(self.status_text())

    # ------------------------------------------------------------------- state
    @property
    def is_open(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Optional[DialogueSession]:
        return self._session

    @property
    def speaker(self) -> Optional[str]:
        return self._session.npc.name if self._session else None

    @property
    def current_line(self) -> Optional[str]:
        return self._session.line if self._session else None

    @property
    def talked_to(self) -> tuple[str, ...]:
        """Names of NPCs whose conversation ran to the end, first finish first."""

        return tuple(self._talked_to)

    def status_text(self) -> str:
        if self.is_open:
            return self.talking_status
        if self.total_npcs <= 0:
            return self.exploring_status
        return f"{self.exploring_status} | Talked to {len(self._talked_to)}/{self.total_npcs}"

    # ------------------------------------------------------------- transitions
    def open(self, npc: NPC) -> None:
        if not npc.lines:
            raise ValueError(f"Cannot open dialogue with {npc.name!r}: no lines")
        if self._session is not None:
            raise RuntimeError("A dialogue session is already open")
        self._session = DialogueSession(npc, 0)
        self.view.show(npc.name, npc.lines[0])
        self.view.set_status(self.status_text())

    def advance(self) -> bool:
        """Step to the next line, closing after the last. No-op when closed."""

        session = self._session
        if session is None:
            return False

        next_index = session.index + 1
        if next_index >= len(session.npc.lines):
            self._session = None
            if session.npc.name not in self._talked_to:
                self._talked_to.append(session.npc.name)
            self.view.hide()
            self.view.set_status(self.status_text())
            return True

        self._session = DialogueSession(session.npc, next_index)
        self.view.show(session.npc.name, self._session.line)
        return True
