import pytest

from itemservice.validators import ErrorCode, MessageCodesResolver, message_codes_resolver


def test_object_codes_are_object_specific_then_bare() -> None:
    codes = message_codes_resolver.resolve_object_codes("required", "item")
    assert codes == ["required.item", "required"]


def test_field_codes_follow_object_field_type_bare_order() -> None:
    codes = message_codes_resolver.resolve_field_codes("required", "item", "itemName", "String")
    assert codes == [
        "required.item.itemName",
        "required.itemName",
        "required.String",
        "required",
    ]


def test_field_type_class_uses_its_name() -> None:
    codes = message_codes_resolver.resolve_field_codes("range", "item", "price", int)
    assert codes == ["range.item.price", "range.price", "range.int", "range"]


def test_error_code_enum_resolves_to_its_value() -> None:
    codes = message_codes_resolver.resolve_object_codes(ErrorCode.TOTAL_PRICE_MIN, "item")
    assert codes == ["totalPriceMin.item", "totalPriceMin"]


def test_prefix_is_applied_to_every_code() -> None:
    resolver = MessageCodesResolver(prefix="validation.")
    assert resolver.resolve_object_codes("max", "item") == ["validation.max.item", "validation.max"]
    assert resolver.resolve_field_codes("max", "item", "quantity", int) == [
        "validation.max.item.quantity",
        "validation.max.quantity",
        "validation.max.int",
        "validation.max",
    ]


def test_bare_code_is_always_last() -> None:
    for code in ("required", "range", "max", "typeMismatch"):
        assert message_codes_resolver.resolve_object_codes(code, "order")[-1] == code
        assert message_codes_resolver.resolve_field_codes(code, "order", "total", "Decimal")[-1] == code


def test_field_chain_always_has_a_type_entry() -> None:
    with pytest.raises(TypeError):
        message_codes_resolver.resolve_field_codes("required", "item", "itemName")

    for field_type in (str, int, "Decimal"):
        assert len(message_codes_resolver.resolve_field_codes("required", "item", "x", field_type)) == 4
