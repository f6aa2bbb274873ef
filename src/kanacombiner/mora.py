from __future__ import annotations

import enum
import logging
import typing

import msgspec

from .kana import TSU, Dakuten, First, Handakuten, Row, Second, Sokuon, in_row

if typing.TYPE_CHECKING:
    from .kana import CombiningMark

logger = logging.getLogger(__name__)


@enum.unique
class MoraKind(enum.Enum):
    SIMPLE = "simple"
    VOICED = "voiced"
    SEMI_VOICED = "semi_voiced"
    DIGRAPH = "digraph"
    GEMINATION = "gemination"


VOICED_COMBINATIONS = {
    # ka row
    0x304B: 0x304C,
    0x304D: 0x304E,
    0x304F: 0x3050,
    0x3051: 0x3052,
    0x3053: 0x3054,
    # sa row
    0x3055: 0x3056,
    0x3057: 0x3058,
    0x3059: 0x305A,
    0x305B: 0x305C,
    0x305D: 0x305E,
    # ta row
    0x305F: 0x3060,
    0x3061: 0x3062,
    0x3064: 0x3065,
    0x3066: 0x3067,
    0x3068: 0x3069,
    # ha row
    0x306F: 0x3070,
    0x3072: 0x3073,
    0x3075: 0x3076,
    0x3078: 0x3079,
    0x307B: 0x307C,
}

SEMI_VOICED_COMBINATIONS = {
    0x306F: 0x3071,
    0x3072: 0x3074,
    0x3075: 0x3077,
    0x3078: 0x307A,
    0x307B: 0x307D,
}


class Mora(msgspec.Struct, frozen=True):
    first: typing.Optional[First] = None
    second: typing.Optional[Second] = None
    kind: MoraKind = MoraKind.SIMPLE

    @property
    def is_combined(self):
        return self.second is not None

    @property
    def string(self) -> str:
        if self.first is None:
            return ""
        match self.kind:
            case MoraKind.SIMPLE:
                return self.first.string
            case MoraKind.VOICED:
                return chr(VOICED_COMBINATIONS[self.first.code_point])
            case MoraKind.SEMI_VOICED:
                return chr(SEMI_VOICED_COMBINATIONS[self.first.code_point])
            case MoraKind.DIGRAPH | MoraKind.GEMINATION:
                # small forms sit immediately before their full-size letters
                return chr(self.first.code_point - 1)

    def with_first(self, first: First) -> Mora:
        return msgspec.structs.replace(self, first=first)

    def uncombined(self) -> Mora:
        return Mora(first=self.first)

    def combine(self, mark: CombiningMark) -> Mora:
        """Apply a combining mark to this mora's base letter.

        With no base letter the mark is ignored. A mark that does not apply to the base letter leaves a plain
        mora behind; so does a mark applied to a mora that is already combined, which lets a mark key toggle.
        """
        if self.first is None:
            return self
        kind = resolve_kind(self.first.code_point, mark)
        if kind is None or self.is_combined:
            logger.debug("Mark %r on %r leaves plain %s", mark, self, self.first.string)
            return self.uncombined()
        return msgspec.structs.replace(self, second=mark.to_second(), kind=kind)


def resolve_kind(code_point: int, mark: CombiningMark) -> typing.Optional[MoraKind]:
    "Which kind of mora the mark would make from this base letter, or None if it does not apply."
    match mark:
        case Dakuten():
            if in_row(code_point, Row.KA, Row.SA, Row.TA, Row.HA):
                return MoraKind.VOICED
        case Handakuten():
            if in_row(code_point, Row.HA):
                return MoraKind.SEMI_VOICED
        case Sokuon():
            if in_row(code_point, Row.YA):
                return MoraKind.DIGRAPH
            if code_point == TSU:
                return MoraKind.GEMINATION
    return None
