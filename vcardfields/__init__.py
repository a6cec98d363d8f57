from vcardfields.contact_fields import (
    AddressRecord,
    FormatVersion,
    ImProtocol,
    NameOrder,
    NameParts,
    PhoneType,
    PhoneTypeResult,
    PostalType,
    VCardConfig,
    compose_display_name,
    from_address_record,
    is_identifier_safe,
    is_printable_ascii,
    is_printable_ascii_no_crlf,
    join_with_escaping,
    order_name_parts,
    resolve_phone_type,
    split_escaped_list,
    to_address_elements,
    to_half_width,
)
