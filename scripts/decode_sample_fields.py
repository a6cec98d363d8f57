"""
This script walks through decoding and encoding the fields of one vCard contact.

The property values below are what the outer parser hands over after splitting the
document into property name, TYPE= parameters and raw value.
"""

from vcardfields.contact_fields import (
    AddressRecord,
    NameParts,
    PostalType,
    VCardConfig,
    format_phone_number,
    from_address_record,
    resolve_phone_type,
    to_address_elements,
)


def main() -> None:

    config = VCardConfig.create_japanese()

    # N:family;given;middle;prefix;suffix
    family, given, middle, prefix, suffix = config.split("山田;太郎;;;")
    name = NameParts(family=family, middle=middle, given=given, prefix=prefix, suffix=suffix)
    print("display name:", config.display_name(name))
    print("phonetic name:", name.phonetic_name())

    # TEL properties with their TYPE= lists
    telephones = [
        (["CELL", "PREF"], "090-1234-5678"),
        (["WORK", "FAX"], "03-1234-5678"),
        (["PAGER"], "1234@pager.example.jp"),
        (["X-SATELLITE"], "+881 6 1234 5678"),
    ]
    for tags, number in telephones:
        resolved = resolve_phone_type(tags, number)
        print(f"TEL {tags}: {resolved.type.name} label={resolved.label} number={format_phone_number(number, config)}")

    # ADR in both directions: vCard value -> store row -> vCard value
    address = AddressRecord.from_value(";;千代田1-1;千代田区;東京都;100-0001;日本", config.version, type=PostalType.HOME)
    row = from_address_record(address, config)
    print("postal row:", row)
    print("ADR value:", config.join(to_address_elements(row)))

    # Full-width input normalized for half-width-only receivers
    print("half width:", config.to_half_width("ヤマダ　タロウ"))


if __name__ == "__main__":
    main()
