"""
Golden Master Test Suite for Phone Type Resolution

Pins the tag precedence of resolve_phone_type so that table edits or refactoring of the
resolver cannot silently change which category a TEL property is stored under.

Key behaviors covered:
- PREF/FAX act as modifiers only; FAX combines with HOME, WORK and OTHER
- "X-" is stripped only while no category has been chosen
- first known tag wins, except that a known tag replaces a custom label
- PAGER wins over anything when the number is a "digits@domain" pager address
- the first unknown tag becomes the custom label
"""

import sys
from pathlib import Path
import pytest

# Add the parent directory to path to import vcardfields
sys.path.insert(0, str(Path(__file__).parent.parent))

from vcardfields.contact_fields import (
    PhoneType,
    PhoneTypeResult,
    format_phone_number,
    get_phone_type_string,
    is_mobile_phone_label,
    is_valid_in_v21_but_unknown_phone_type,
    phone_number_region,
    resolve_phone_type,
    VCardConfig,
)


# (tags, number) → (type, label)
PHONE_TYPE_TEST_CASES = [
    # Defaults and modifiers
    (([], "555"), (PhoneType.HOME, None)),
    ((None, None), (PhoneType.HOME, None)),
    ((["PREF"], "555"), (PhoneType.MAIN, None)),
    ((["FAX"], ""), (PhoneType.FAX_HOME, None)),
    ((["PREF", "FAX"], "555"), (PhoneType.MAIN, None)),  # fax does not combine with MAIN
    ((["WORK", "FAX"], "555"), (PhoneType.FAX_WORK, None)),
    ((["work", "fax"], "555"), (PhoneType.FAX_WORK, None)),  # case-insensitive
    ((["OTHER", "FAX"], "555"), (PhoneType.OTHER_FAX, None)),
    ((["FAX", "HOME", "PREF"], "555"), (PhoneType.FAX_HOME, None)),
    ((["CELL", "FAX"], "555"), (PhoneType.MOBILE, None)),  # fax leaves MOBILE alone
    # Known tags, first one wins
    ((["CELL"], "555"), (PhoneType.MOBILE, None)),
    ((["WORK", "HOME"], "555"), (PhoneType.WORK, None)),
    ((["HOME", "WORK"], "555"), (PhoneType.HOME, None)),
    ((["CAR"], "555"), (PhoneType.CAR, None)),
    ((["ISDN"], "555"), (PhoneType.ISDN, None)),
    ((["COMPANY-MAIN"], "555"), (PhoneType.COMPANY_MAIN, None)),
    ((["TTY-TDD"], "555"), (PhoneType.TTY_TDD, None)),
    ((["CALLBACK"], "555"), (PhoneType.CALLBACK, None)),
    ((["RADIO"], "555"), (PhoneType.RADIO, None)),
    ((["ASSISTANT"], "555"), (PhoneType.ASSISTANT, None)),
    (([None, "WORK"], "555"), (PhoneType.WORK, None)),
    # X- prefix handling
    ((["X-CELL"], "555"), (PhoneType.MOBILE, None)),
    ((["x-work"], "555"), (PhoneType.WORK, None)),
    ((["X-"], "555"), (PhoneType.HOME, None)),  # nothing left after stripping
    ((["X-FOO"], "555"), (PhoneType.CUSTOM, "FOO")),
    ((["CELL", "X-HOME"], "555"), (PhoneType.MOBILE, None)),  # not stripped once chosen
    # Custom labels
    ((["FOO", "BAR"], "555"), (PhoneType.CUSTOM, "FOO")),
    ((["foo"], "555"), (PhoneType.CUSTOM, "FOO")),
    ((["VOICE"], "555"), (PhoneType.CUSTOM, "VOICE")),
    ((["MODEM"], "555"), (PhoneType.CUSTOM, "MODEM")),
    ((["PREF", "FOO"], "555"), (PhoneType.CUSTOM, "FOO")),
    ((["FOO", "FAX"], "555"), (PhoneType.CUSTOM, "FOO")),
    ((["FOO", "WORK"], "555"), (PhoneType.WORK, None)),  # known tag replaces the custom label
    ((["FOO", "WORK", "BAR"], "555"), (PhoneType.WORK, None)),
    ((["FOO", "WORK", "FAX"], "555"), (PhoneType.FAX_WORK, None)),
    # Pager with a pager-bridge address
    ((["PAGER"], "1234@example.com"), (PhoneType.PAGER, None)),
    ((["HOME", "PAGER"], "1234@example.com"), (PhoneType.PAGER, None)),
    ((["WORK", "FAX", "PAGER"], "1234@example.com"), (PhoneType.PAGER, None)),
    ((["FOO", "PAGER"], "1234@example.com"), (PhoneType.PAGER, None)),
    ((["HOME", "PAGER"], "555"), (PhoneType.HOME, None)),
    ((["HOME", "PAGER"], "@example.com"), (PhoneType.HOME, None)),
    ((["HOME", "PAGER"], "1234@"), (PhoneType.HOME, None)),
    ((["HOME", "PAGER"], "@"), (PhoneType.HOME, None)),
    ((["FOO", "PAGER"], "555"), (PhoneType.PAGER, None)),
    ((["PAGER", "HOME"], "555"), (PhoneType.PAGER, None)),
]


def test_phone_types_with_expected_results():
    """Every tag combination resolves to its pinned category and label."""
    passed = 0
    failed = 0

    for (tags, number), expected in PHONE_TYPE_TEST_CASES:
        result = resolve_phone_type(tags, number)
        result_tuple = (result.type, result.label)
        if result_tuple == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: {tags!r} / {number!r}: expected {expected}, got {result_tuple}")

    assert failed == 0, f"Phone type tests: {failed} failures out of {len(PHONE_TYPE_TEST_CASES)} tests"
    print(f"Phone type tests: {passed} passed, {failed} failed")


@pytest.mark.parametrize("tags,number", [case[0] for case in PHONE_TYPE_TEST_CASES])
def test_label_present_only_for_custom(tags, number):
    result = resolve_phone_type(tags, number)
    assert (result.label is not None) == (result.type is PhoneType.CUSTOM)
    assert result.is_custom == (result.type is PhoneType.CUSTOM)


def test_tag_order_does_not_matter_without_conflicts():
    assert resolve_phone_type(["FAX", "WORK", "PREF"], "555") == resolve_phone_type(["PREF", "WORK", "FAX"], "555")


def test_accepts_any_iterable_of_tags():
    assert resolve_phone_type(("CELL",), "555") == PhoneTypeResult.of_type(PhoneType.MOBILE)
    assert resolve_phone_type({"FAX": None, "WORK": None}.keys(), "555") == PhoneTypeResult.of_type(
        PhoneType.FAX_WORK
    )
    assert resolve_phone_type(iter(["X-SATELLITE"]), "555") == PhoneTypeResult.custom("SATELLITE")


def test_phone_type_strings():
    assert get_phone_type_string(PhoneType.PAGER) == "PAGER"
    assert get_phone_type_string(PhoneType.CAR) == "CAR"
    assert get_phone_type_string(int(PhoneType.ISDN)) == "ISDN"
    # Composed from several tags by the serializer, so no single string
    assert get_phone_type_string(PhoneType.HOME) is None
    assert get_phone_type_string(PhoneType.FAX_WORK) is None
    assert get_phone_type_string(99) is None


def test_mobile_phone_labels():
    assert is_mobile_phone_label("_AUTO_CELL")
    assert is_mobile_phone_label("MOBILE")
    assert is_mobile_phone_label("携帯電話")
    assert is_mobile_phone_label("携帯")
    assert is_mobile_phone_label("ケイタイ")
    assert is_mobile_phone_label("ｹｲﾀｲ")
    assert not is_mobile_phone_label("Mobile")
    assert not is_mobile_phone_label("HOME")
    assert not is_mobile_phone_label(None)


def test_v21_types_unknown_to_store():
    for label in ("MODEM", "BBS", "VIDEO"):
        assert is_valid_in_v21_but_unknown_phone_type(label)
    assert not is_valid_in_v21_but_unknown_phone_type("modem")
    assert not is_valid_in_v21_but_unknown_phone_type("HOME")
    assert not is_valid_in_v21_but_unknown_phone_type(None)


def test_phone_number_region():
    assert phone_number_region() == "US"
    assert phone_number_region(VCardConfig.create_default()) == "US"
    assert phone_number_region(VCardConfig.create_japanese()) == "JP"


def test_format_phone_number():
    assert format_phone_number("6502530000") == "(650) 253-0000"
    assert format_phone_number("0312345678", VCardConfig.create_japanese()) == "03-1234-5678"
    # Unparseable values are returned untouched
    assert format_phone_number("not a phone") == "not a phone"
    assert format_phone_number("") == ""
    assert format_phone_number(None) == ""
    # Another country code is kept, in international format
    assert format_phone_number("+44 20 7946 0958") == "+44 20 7946 0958"
    assert format_phone_number("+1 650 253 0000", VCardConfig.create_japanese()) == "+1 650-253-0000"
    assert format_phone_number("+81 3 1234 5678") == "+81 3-1234-5678"
    # Same country code as the region stays national
    assert format_phone_number("+81 3 1234 5678", VCardConfig.create_japanese()) == "03-1234-5678"


@pytest.mark.parametrize(
    "phone_type,label",
    [
        (PhoneType.HOME, "x"),
        (PhoneType.WORK, ""),
        (PhoneType.CUSTOM, None),
    ],
)
def test_phone_type_result_rejects_label_mismatch(phone_type, label):
    with pytest.raises(ValueError):
        PhoneTypeResult(phone_type, label)


def test_phone_type_result_factories_stay_valid():
    assert PhoneTypeResult.custom("SATELLITE").label == "SATELLITE"
    assert PhoneTypeResult.of_type(PhoneType.MOBILE).label is None
