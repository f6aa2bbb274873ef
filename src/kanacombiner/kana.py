# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Classify hiragana code points by consonant row.

Rows are not contiguous in the Hiragana block (voiced and semi-voiced letters are interleaved with their
plain counterparts, and small forms sit just before their full-size letters), so every row is an explicit table.
"""
from __future__ import annotations

import enum
import sys
import typing

import msgspec

DAKUTEN = 0x309B
HANDAKUTEN = 0x309C
# Not a printable kana: the keyboard's "small form" key sends this code point (小) as a signal.
SMALL_FORM_SIGNAL = 0x5C0F
TSU = 0x3064


@enum.unique
class Row(enum.Enum):
    A = "a"
    KA = "ka"
    GA = "ga"
    SA = "sa"
    ZA = "za"
    TA = "ta"
    DA = "da"
    NA = "na"
    HA = "ha"
    BA = "ba"
    PA = "pa"
    MA = "ma"
    YA = "ya"
    RA = "ra"
    WA = "wa"
    N = "n"


ROW_MEMBERS: dict[Row, tuple[int, ...]] = {
    Row.A: (0x3042, 0x3044, 0x3046, 0x3048, 0x304A),
    Row.KA: (0x304B, 0x304D, 0x304F, 0x3051, 0x3053),
    Row.GA: (0x304C, 0x304E, 0x3050, 0x3052, 0x3054),
    Row.SA: (0x3055, 0x3057, 0x3059, 0x305B, 0x305D),
    Row.ZA: (0x3056, 0x3058, 0x305A, 0x305C, 0x305E),
    Row.TA: (0x305F, 0x3061, 0x3064, 0x3066, 0x3068),
    Row.DA: (0x3060, 0x3062, 0x3065, 0x3067, 0x3069),
    Row.NA: (0x306A, 0x306B, 0x306C, 0x306D, 0x306E),
    Row.HA: (0x306F, 0x3072, 0x3075, 0x3078, 0x307B),
    Row.BA: (0x3070, 0x3073, 0x3076, 0x3079, 0x307C),
    Row.PA: (0x3071, 0x3074, 0x3077, 0x307A, 0x307D),
    Row.MA: (0x307E, 0x307F, 0x3080, 0x3081, 0x3082),
    Row.YA: (0x3084, 0x3086, 0x3088),
    Row.RA: (0x3089, 0x308A, 0x308B, 0x308C, 0x308D),
    Row.WA: (0x308F, 0x3092),
    Row.N: (0x3093,),
}

_ROW_BY_CODE_POINT = {code_point: row for row, members in ROW_MEMBERS.items() for code_point in members}


class _Kana(msgspec.Struct, frozen=True):
    code_point: int

    @property
    def string(self) -> str:
        if not 0 <= self.code_point <= sys.maxunicode:
            return ""
        return chr(self.code_point)


class First(_Kana, frozen=True):
    "A letter accepted as the base of a mora."


class Second(_Kana, frozen=True):
    "A combining mark accepted into a mora."


class NonKana(_Kana, frozen=True):
    pass


class RowKana(_Kana, frozen=True):
    row: Row

    @property
    def is_canonical_member(self) -> bool:
        return self.code_point in ROW_MEMBERS[self.row]

    @property
    def row_ordinal(self) -> typing.Optional[int]:
        "Position within the row (vowel order a/i/u/e/o for full rows), or None if the code point is not in the row."
        members = ROW_MEMBERS[self.row]
        if self.code_point not in members:
            return None
        return members.index(self.code_point)

    def to_first(self) -> typing.Optional[First]:
        if self.code_point == 0:
            return None
        return First(self.code_point)


class _CombiningMark(_Kana, frozen=True):
    # subclasses set canonical_code_point

    @property
    def is_canonical_member(self) -> bool:
        return self.code_point == self.canonical_code_point

    def to_second(self) -> typing.Optional[Second]:
        if self.code_point == 0:
            return None
        return Second(self.code_point)


class Dakuten(_CombiningMark, frozen=True):
    canonical_code_point = DAKUTEN


class Handakuten(_CombiningMark, frozen=True):
    canonical_code_point = HANDAKUTEN


class Sokuon(_CombiningMark, frozen=True):
    "The small-form request; becomes a digraph or a gemination marker depending on the base letter."

    canonical_code_point = SMALL_FORM_SIGNAL


CombiningMark = Dakuten | Handakuten | Sokuon
Kana = RowKana | Dakuten | Handakuten | Sokuon | First | Second | NonKana

_MARKS: dict[int, type[_CombiningMark]] = {
    DAKUTEN: Dakuten,
    HANDAKUTEN: Handakuten,
    SMALL_FORM_SIGNAL: Sokuon,
}


def classify(code_point: int) -> Kana:
    if (mark := _MARKS.get(code_point)) is not None:
        return mark(code_point)
    if (row := _ROW_BY_CODE_POINT.get(code_point)) is not None:
        return RowKana(code_point, row=row)
    return NonKana(code_point)


def in_row(code_point: int, *rows: Row) -> bool:
    "Reinterpret the code point as a letter of each row in turn, and check whether it belongs to any of them."
    return any(RowKana(code_point, row=row).is_canonical_member for row in rows)
