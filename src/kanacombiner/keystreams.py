# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import abc
from contextlib import aclosing, asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterable, cast

import msgspec
import trio

from .combiner import KanaCombiner
from .events import Event

if TYPE_CHECKING:
    from .settings import Settings


class CombinedEvent(msgspec.Struct, frozen=True):
    event: Event
    composing: str


class Section(abc.ABC):
    @abc.abstractmethod
    async def pump(self, source: trio.MemoryReceiveChannel[Any], sink: trio.MemorySendChannel[Any]): ...


# stage 3: combine kana; every event in the returned chain goes downstream with the composing text as it stands
class CombineKana(Section):
    def __init__(self, settings: Settings):
        self.settings = settings
        self.combiner = KanaCombiner(space_on_boundary_delete=settings.space_on_boundary_delete)

    def _process(self, event: Event) -> Event:
        self.combiner.space_on_boundary_delete = self.settings.space_on_boundary_delete
        if self.settings.combining_enabled:
            return self.combiner.process_event(event)
        if self.combiner.combining_state_feedback:
            # combining was switched off mid-word; settle what was composed before passing keys through
            return self.combiner.flush(event)
        return event

    async def pump(self, source: trio.MemoryReceiveChannel[Event], sink: trio.MemorySendChannel[CombinedEvent]):
        async with aclosing(source), aclosing(sink):
            async for event in source:
                result = self._process(event)
                composing = self.combiner.combining_state_feedback
                for chained in result.chain():
                    await sink.send(CombinedEvent(event=chained, composing=composing))


@asynccontextmanager
async def pump_all(first_source: AsyncIterable[Any], *sections: Section):
    async with trio.open_nursery() as nursery:
        section_input = first_source
        for section in sections:
            section_send_channel, section_receive_channel = trio.open_memory_channel(0)
            nursery.start_soon(section.pump, section_input, section_send_channel)
            section_input = section_receive_channel
        yield section_input
        nursery.cancel_scope.cancel()


@asynccontextmanager
async def make_keystream(
    event_channel: trio.MemoryReceiveChannel[Event],
    settings: Settings,
):
    async with pump_all(event_channel, CombineKana(settings)) as keystream:
        yield cast(trio.MemoryReceiveChannel[CombinedEvent], keystream)
