from __future__ import annotations

import enum
import sys
import typing

import msgspec

if typing.TYPE_CHECKING:
    import collections.abc

NOT_A_CODE_POINT = -1
# str.isspace accepts these, but they do not end a word: no-break spaces and NEXT LINE
NOT_DELIMITERS = frozenset({0x85, 0xA0, 0x2007, 0x202F})


class KeyCode(enum.IntEnum):
    # Printable keys use their code point as key code; these are the ones the combiner cares about.
    NOT_SPECIFIED = 0
    ENTER = 0x0A
    SPACE = 0x20
    SHIFT = -1
    SYMBOL_ALPHA = -2
    DELETE = -4
    LANGUAGE_SWITCH = -9
    MULTIPLE_CODE_POINTS = -10


class EventType(enum.Enum):
    INPUT_KEYPRESS = enum.auto()
    SOFTWARE_GENERATED_STRING = enum.auto()
    NOT_HANDLED = enum.auto()


class Event(msgspec.Struct, frozen=True):
    event_type: EventType
    code_point: int
    key_code: int
    text: typing.Optional[str] = None
    meta_state: int = 0
    next_event: typing.Optional[Event] = None
    combining: bool = False
    consumed: bool = False
    key_repeat: bool = False

    @classmethod
    def keypress(
        cls,
        code_point: int,
        key_code: typing.Optional[int] = None,
        *,
        combining: bool = True,
        meta_state: int = 0,
        key_repeat: bool = False,
    ):
        "A key carrying a character. The key code defaults to the code point, the way printable keys report it."
        return cls(
            event_type=EventType.INPUT_KEYPRESS,
            code_point=code_point,
            key_code=code_point if key_code is None else key_code,
            meta_state=meta_state,
            combining=combining,
            key_repeat=key_repeat,
        )

    @classmethod
    def functional(cls, key_code: int, *, meta_state: int = 0, key_repeat: bool = False):
        return cls(
            event_type=EventType.INPUT_KEYPRESS,
            code_point=NOT_A_CODE_POINT,
            key_code=key_code,
            meta_state=meta_state,
            key_repeat=key_repeat,
        )

    @classmethod
    def consumed_from(cls, original: Event):
        return msgspec.structs.replace(original, consumed=True)

    @classmethod
    def hardware_keypress(
        cls,
        code_point: int,
        key_code: int,
        meta_state: int,
        next_event: typing.Optional[Event],
        is_key_repeat: bool,
    ):
        return cls(
            event_type=EventType.INPUT_KEYPRESS,
            code_point=code_point,
            key_code=key_code,
            meta_state=meta_state,
            next_event=next_event,
            key_repeat=is_key_repeat,
        )

    @classmethod
    def software_text(cls, text: str, key_code: int, next_event: typing.Optional[Event]):
        return cls(
            event_type=EventType.SOFTWARE_GENERATED_STRING,
            code_point=NOT_A_CODE_POINT,
            key_code=key_code,
            text=text,
            next_event=next_event,
        )

    @property
    def is_shift(self):
        return self.key_code == KeyCode.SHIFT

    @property
    def is_delete(self):
        return self.key_code == KeyCode.DELETE

    @property
    def is_functional_key(self):
        return self.event_type is EventType.INPUT_KEYPRESS and self.code_point == NOT_A_CODE_POINT

    @property
    def is_combining(self):
        return self.combining

    @property
    def is_consumed(self):
        return self.consumed

    @property
    def is_key_repeat(self):
        return self.key_repeat

    @property
    def is_whitespace(self):
        if not 0 <= self.code_point <= sys.maxunicode or self.code_point in NOT_DELIMITERS:
            return False
        return chr(self.code_point).isspace()

    @property
    def text_to_commit(self) -> str:
        if self.consumed:
            return ""
        if self.event_type is EventType.SOFTWARE_GENERATED_STRING:
            return self.text or ""
        if not 0 <= self.code_point <= sys.maxunicode:
            return ""
        return chr(self.code_point)

    def chain(self) -> collections.abc.Iterator[Event]:
        "This event, then every event linked after it, in dispatch order."
        event: typing.Optional[Event] = self
        while event is not None:
            yield event
            event = event.next_event
