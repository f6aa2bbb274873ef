import pytest

from kanacombiner.kana import (
    ROW_MEMBERS,
    Dakuten,
    First,
    Handakuten,
    NonKana,
    Row,
    RowKana,
    Second,
    Sokuon,
    classify,
    in_row,
)


@pytest.mark.parametrize(
    "code_point,row,ordinal",
    (
        (0x3042, Row.A, 0),
        (0x304A, Row.A, 4),
        (0x304B, Row.KA, 0),
        (0x3050, Row.GA, 2),
        (0x3057, Row.SA, 1),
        (0x305E, Row.ZA, 4),
        (0x3064, Row.TA, 2),
        (0x3060, Row.DA, 0),
        (0x306C, Row.NA, 2),
        (0x3078, Row.HA, 3),
        (0x307C, Row.BA, 4),
        (0x3071, Row.PA, 0),
        (0x3082, Row.MA, 4),
        (0x3086, Row.YA, 1),
        (0x308B, Row.RA, 2),
        (0x3092, Row.WA, 1),
        (0x3093, Row.N, 0),
    ),
)
def test_classify_row_letters(code_point: int, row: Row, ordinal: int):
    kana = classify(code_point)
    assert kana == RowKana(code_point, row=row)
    assert kana.is_canonical_member
    assert kana.row_ordinal == ordinal
    assert kana.string == chr(code_point)


@pytest.mark.parametrize(
    "code_point,expected",
    (
        (0x309B, Dakuten(0x309B)),
        (0x309C, Handakuten(0x309C)),
        (0x5C0F, Sokuon(0x5C0F)),
    ),
)
def test_classify_marks(code_point, expected):
    kana = classify(code_point)
    assert kana == expected
    assert kana.is_canonical_member
    assert kana.to_second() == Second(code_point)


@pytest.mark.parametrize(
    "code_point",
    (
        ord("a"),
        ord(" "),
        ord("。"),
        0x3041,  # small a
        0x3063,  # small tsu
        0x3083,  # small ya
        0x308E,  # small wa
        0x3090,  # wi
        0x3094,  # vu
        0x30AB,  # katakana ka
        0x3099,  # combining dakuten
        0x5C0E,
    ),
)
def test_classify_non_kana(code_point):
    assert classify(code_point) == NonKana(code_point)


@pytest.mark.parametrize("code_point", (-2, 0x110000, 0x7FFFFFFF))
def test_out_of_range_code_point_has_no_string(code_point):
    kana = classify(code_point)
    assert kana == NonKana(code_point)
    assert kana.string == ""


def test_every_row_letter_classifies_into_its_own_row():
    for row, members in ROW_MEMBERS.items():
        for ordinal, code_point in enumerate(members):
            kana = classify(code_point)
            assert isinstance(kana, RowKana)
            assert kana.row is row
            assert kana.row_ordinal == ordinal


def test_classification_is_repeatable():
    assert classify(0x304B) == classify(0x304B)
    assert classify(0x1F600) == classify(0x1F600)


def test_reinterpreted_row_membership():
    # ka is not a member of the ha row
    reinterpreted = RowKana(0x304B, row=Row.HA)
    assert not reinterpreted.is_canonical_member
    assert reinterpreted.row_ordinal is None
    assert in_row(0x304B, Row.SA, Row.KA)
    assert not in_row(0x304C, Row.KA, Row.SA, Row.TA, Row.HA)


def test_roles():
    assert RowKana(0x304B, row=Row.KA).to_first() == First(0x304B)
    assert RowKana(0, row=Row.KA).to_first() is None
    assert Dakuten(0).to_second() is None
    assert not Dakuten(0).is_canonical_member
    assert First(0x304B) != Second(0x304B)
