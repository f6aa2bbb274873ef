# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing

from .events import Event, KeyCode
from .kana import NonKana, RowKana, classify
from .mora import Mora

if typing.TYPE_CHECKING:
    import collections.abc

logger = logging.getLogger(__name__)


class KanaCombiner:
    """Combines kana key events into composed hiragana.

    `finalized` holds the characters already settled into the composing text; `pending` is the mora still open
    to combining marks. Only `process_event` and `reset` change either of them.
    """

    finalized: list[str]
    pending: typing.Optional[Mora]

    def __init__(self, space_on_boundary_delete: bool = True):
        self.space_on_boundary_delete = space_on_boundary_delete
        self.finalized = []
        self.pending = None

    def process_event(self, event: Event, previous_events: typing.Optional[collections.abc.Sequence[Event]] = None) -> Event:
        if event.is_shift:
            return event
        if event.is_whitespace:
            return self.flush(event)
        if event.is_functional_key:
            if event.is_delete:
                return self._handle_delete(event)
            return self.flush(event)
        self._handle_character(event)
        return Event.consumed_from(event)

    def flush(self, event: Event) -> Event:
        "Settle everything composed so far into a text commit, chained ahead of the event."
        text = self.combining_state_feedback
        self.reset()
        logger.debug("Flushing %r ahead of %r", text, event.key_code)
        return Event.software_text(text, KeyCode.MULTIPLE_CODE_POINTS, event)

    def _handle_delete(self, event: Event) -> Event:
        if self.space_on_boundary_delete and self._at_boundary:
            # Emptying the composing text goes to the host as a space keypress chained before the delete.
            logger.debug("Delete at composing boundary; substituting space")
            self.reset()
            return Event.hardware_keypress(0x20, KeyCode.SPACE, 0, event, event.is_key_repeat)
        if self.pending is not None:
            if self.pending.is_combined:
                self.pending = self.pending.uncombined()
            else:
                self.pending = None
            return Event.consumed_from(event)
        if self.finalized:
            self.finalized.pop()
            return Event.consumed_from(event)
        return event

    @property
    def _at_boundary(self):
        bare_letter_only = self.pending is not None and not self.pending.is_combined and not self.finalized
        single_character_only = self.pending is None and len(self.finalized) == 1
        return bare_letter_only or single_character_only

    def _handle_character(self, event: Event):
        current = self.pending if self.pending is not None else Mora()
        kana = classify(event.code_point)
        if not event.is_combining or isinstance(kana, NonKana):
            self.finalized.extend(current.string)
            self.finalized.extend(kana.string)
            self.pending = None
            return
        match kana:
            case RowKana():
                first = kana.to_first()
                if current.first is not None:
                    self.finalized.extend(current.string)
                    self.pending = Mora(first=first)
                else:
                    self.pending = current.with_first(first)
            case _:
                if current.first is None:
                    return
                self.pending = current.combine(kana)

    @property
    def combining_state_feedback(self) -> str:
        pending = self.pending.string if self.pending is not None else ""
        return "".join(self.finalized) + pending

    def reset(self):
        self.finalized = []
        self.pending = None
