# ═════════════════════════════════════════════════════════════════════════════════
# STATIC VCARD ↔ CONTACT STORE TABLES
# ═════════════════════════════════════════════════════════════════════════════════
#
# Everything in this module is built once at import and exposed read-only:
# 1. PHONE TYPE TAGS: TYPE= parameter values and the store category they select
# 2. IM PROPERTIES: instant-messaging protocols and their X- property names
# 3. LABEL SETS: legacy mobile labels, v2.1 types the store has no category for
# 4. ESCAPE TABLES: per-version backslash escapes for structured values
# 5. STORE FIELD NAMES: keys of the structured postal data row
# 6. HALF-WIDTH TABLE: full-width → half-width replacements for Japanese text
#
# Categories and protocols are stored by enum member name so this module has no
# dependency on the types in contact_fields.py.
# ═════════════════════════════════════════════════════════════════════════════════

import unicodedata
from types import MappingProxyType

# Layer 1: PHONE TYPE TAGS
PARAM_TYPE_PREF = "PREF"
PARAM_TYPE_FAX = "FAX"

# TYPE= tag (upper case) → PhoneType member name
PHONE_TYPE_BY_TAG = {
    "CAR": "CAR",
    "PAGER": "PAGER",
    "ISDN": "ISDN",
    "HOME": "HOME",
    "WORK": "WORK",
    "CELL": "MOBILE",
    # Extra types understood by the store but not defined in vCard 2.1
    "OTHER": "OTHER",
    "CALLBACK": "CALLBACK",
    "COMPANY-MAIN": "COMPANY_MAIN",
    "RADIO": "RADIO",
    "TTY-TDD": "TTY_TDD",
    "ASSISTANT": "ASSISTANT",
}

# PhoneType member name → TYPE= tag, only for types written as a single tag.
# HOME/WORK/fax combinations are composed from several tags by the serializer.
PHONE_TAG_BY_TYPE = {
    "CAR": "CAR",
    "PAGER": "PAGER",
    "ISDN": "ISDN",
}

# Layer 2: IM PROPERTIES
# ImProtocol member name → property name
IM_PROPERTY_BY_PROTOCOL = {
    "AIM": "X-AIM",
    "MSN": "X-MSN",
    "YAHOO": "X-YAHOO",
    "SKYPE": "X-SKYPE-USERNAME",
    "GOOGLE_TALK": "X-GOOGLE-TALK",
    "ICQ": "X-ICQ",
    "JABBER": "X-JABBER",
    "QQ": "X-QQ",
    "NETMEETING": "X-NETMEETING",
}

IM_PROTOCOL_BY_PROPERTY = {prop: protocol for protocol, prop in IM_PROPERTY_BY_PROTOCOL.items()}

# Layer 3: LABEL SETS
# Valid TYPE= values in vCard 2.1 with no store category; kept for validity checks only
UNKNOWN_PHONE_TYPES = frozenset({"MODEM", "BBS", "VIDEO"})

# Label used for mobile e-mail before the store had a mobile type
MOBILE_EMAIL_TYPE_NAME = "_AUTO_CELL"

MOBILE_PHONE_LABELS = frozenset(
    {
        "MOBILE",
        "携帯電話",  # keitai-denwa
        "携帯",  # keitai
        "ケイタイ",  # full-width katakana
        "ｹｲﾀｲ",  # half-width katakana
    }
)

# Layer 4: ESCAPE TABLES
# Character after a backslash → literal it stands for
V21_ESCAPES = {
    "\\": "\\",
    ";": ";",
    ":": ":",
    ",": ",",
}

V30_ESCAPES = {
    "\\": "\\",
    ";": ";",
    ",": ",",
    "n": "\n",
    "N": "\n",
}

# Literal → escaped form used when composing a structured value
V21_ESCAPE_ON_WRITE = {
    "\\": "\\\\",
    ";": "\\;",
}

V30_ESCAPE_ON_WRITE = {
    "\\": "\\\\",
    ";": "\\;",
    ",": "\\,",
    "\n": "\\n",
}

# Layer 5: STORE FIELD NAMES
MIMETYPE = "mimetype"
POSTAL_CONTENT_ITEM_TYPE = "vnd.android.cursor.item/postal-address_v2"
IS_PRIMARY = "is_primary"
POSTAL_TYPE = "data2"
POSTAL_LABEL = "data3"
POSTAL_FORMATTED_ADDRESS = "data1"
POSTAL_STREET = "data4"
POSTAL_POBOX = "data5"
POSTAL_NEIGHBORHOOD = "data6"
POSTAL_CITY = "data7"
POSTAL_REGION = "data8"
POSTAL_POSTCODE = "data9"
POSTAL_COUNTRY = "data10"

# vCard ADR order: PO Box, Extended Address, Street, Locality, Region, Postal Code, Country.
# Extended address is kept in NEIGHBORHOOD and locality in CITY.
POSTAL_ELEMENT_FIELDS = (
    POSTAL_POBOX,
    POSTAL_NEIGHBORHOOD,
    POSTAL_STREET,
    POSTAL_CITY,
    POSTAL_REGION,
    POSTAL_POSTCODE,
    POSTAL_COUNTRY,
)

# Layer 6: HALF-WIDTH TABLE
_HALF_WIDTH_KANA_RANGE = range(0xFF61, 0xFFA0)
_VOICED_MARKS = ("ﾞ", "ﾟ")
_FULL_WIDTH_ASCII_RANGE = range(0xFF01, 0xFF5F)
_FULL_WIDTH_OFFSET = 0xFEE0


def _build_half_width_map():
    """Derive full-width → half-width replacements from NFKC compatibility mappings."""
    table = {}
    for code in _FULL_WIDTH_ASCII_RANGE:
        table[chr(code)] = chr(code - _FULL_WIDTH_OFFSET)
    table["　"] = " "  # ideographic space

    # Half-width katakana and punctuation fold to a single full-width character under NFKC
    for code in _HALF_WIDTH_KANA_RANGE:
        half = chr(code)
        full = unicodedata.normalize("NFKC", half)
        if len(full) == 1 and full != half:
            table.setdefault(full, half)

    # Voiced and semi-voiced katakana become a base character plus a separate mark
    for code in _HALF_WIDTH_KANA_RANGE:
        for mark in _VOICED_MARKS:
            half = chr(code) + mark
            full = unicodedata.normalize("NFKC", half)
            if len(full) == 1:
                table.setdefault(full, half)

    # Spacing forms of the voiced marks
    table.setdefault("゛", _VOICED_MARKS[0])
    table.setdefault("゜", _VOICED_MARKS[1])
    return table


def _assert_round_trip_escapes(name, read_table, write_table):
    """Every escape produced on write must be understood on read."""
    for literal, escaped in write_table.items():
        if read_table.get(escaped[1]) != literal:
            raise ValueError(f"{name}: escape {escaped!r} does not read back as {literal!r}")


_assert_round_trip_escapes("V21", V21_ESCAPES, V21_ESCAPE_ON_WRITE)
_assert_round_trip_escapes("V30", V30_ESCAPES, V30_ESCAPE_ON_WRITE)


# Create immutable versions

PHONE_TYPE_BY_TAG = MappingProxyType(PHONE_TYPE_BY_TAG)
PHONE_TAG_BY_TYPE = MappingProxyType(PHONE_TAG_BY_TYPE)
IM_PROPERTY_BY_PROTOCOL = MappingProxyType(IM_PROPERTY_BY_PROTOCOL)
IM_PROTOCOL_BY_PROPERTY = MappingProxyType(IM_PROTOCOL_BY_PROPERTY)
V21_ESCAPES = MappingProxyType(V21_ESCAPES)
V30_ESCAPES = MappingProxyType(V30_ESCAPES)
V21_ESCAPE_ON_WRITE = MappingProxyType(V21_ESCAPE_ON_WRITE)
V30_ESCAPE_ON_WRITE = MappingProxyType(V30_ESCAPE_ON_WRITE)
HALF_WIDTH_MAP = MappingProxyType(_build_half_width_map())
