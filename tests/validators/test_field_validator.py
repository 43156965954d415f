import pytest

from itemservice.models.item import Item
from itemservice.validators import ConstraintConfigurationError, ValidationReport
from itemservice.validators.catalog import cross_field, max_value, not_blank, not_null, value_range
from itemservice.validators.field_validator import FieldValidator


def _report_for(item: Item) -> ValidationReport:
    return ValidationReport.for_target(item, "item")


@pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
def test_not_blank_rejects_missing_or_whitespace_names(name) -> None:
    item = Item(item_name=name)
    report = _report_for(item)

    FieldValidator().validate_field(item, not_blank("item_name"), report)

    error = report.field_error("item_name")
    assert error is not None
    assert error.codes == (
        "required.item.item_name",
        "required.item_name",
        "required.str",
        "required",
    )
    assert error.arguments == ()
    assert error.rejected_value == name
    assert error.binding_failure is False


def test_not_blank_accepts_text() -> None:
    item = Item(item_name="Lamp")
    report = _report_for(item)

    FieldValidator().validate_field(item, not_blank("item_name"), report)

    assert not report.has_errors()


def test_not_null_uses_required_code() -> None:
    item = Item()
    report = _report_for(item)

    FieldValidator().validate_field(item, not_null("price"), report)

    assert report.field_error("price").code == "required"
    assert report.field_error("price").codes[2] == "required.int"


@pytest.mark.parametrize(
    "price, fails",
    [(None, True), (999, True), (1_000, False), (500_000, False), (1_000_000, False), (1_000_001, True)],
)
def test_range_is_inclusive_and_fails_on_none(price, fails) -> None:
    item = Item(price=price)
    report = _report_for(item)

    FieldValidator().validate_field(item, value_range("price", 1_000, 1_000_000), report)

    assert report.has_errors() is fails
    if fails:
        error = report.field_error("price")
        assert error.code == "range"
        assert error.arguments == (1_000, 1_000_000)
        assert error.rejected_value == price


@pytest.mark.parametrize(
    "quantity, fails",
    [(None, True), (-1, True), (0, True), (1, False), (9_999, False), (10_000, True)],
)
def test_max_requires_positive_value_up_to_ceiling(quantity, fails) -> None:
    item = Item(quantity=quantity)
    report = _report_for(item)

    FieldValidator().validate_field(item, max_value("quantity", 9_999), report)

    assert report.has_errors() is fails
    if fails:
        assert report.field_error("quantity").code == "max"
        assert report.field_error("quantity").arguments == (9_999,)


def test_every_failing_rule_appends_its_own_error() -> None:
    item = Item(item_name="Lamp")
    report = _report_for(item)
    rules = [not_null("price"), value_range("price", 1_000, 1_000_000)]

    FieldValidator().validate(item, rules, report)

    assert [(e.field, e.code) for e in report.field_errors()] == [("price", "required"), ("price", "range")]


def test_validate_ignores_cross_field_rules() -> None:
    item = Item(price=1, quantity=1)
    report = _report_for(item)

    FieldValidator().validate(item, [cross_field("totalPriceMin", 10_000)], report)

    assert not report.has_errors()


def test_fields_with_binding_failure_are_skipped() -> None:
    item = Item(item_name="Lamp")
    report = _report_for(item)
    report.add_field_error("price", "abc", True, ["typeMismatch"], ["price"])

    FieldValidator().validate(item, [not_null("price"), not_blank("item_name")], report)

    assert len(report.field_errors("price")) == 1
    assert report.field_error("price").binding_failure is True


def test_cross_field_rule_handed_to_validate_field_is_a_configuration_error() -> None:
    item = Item()

    with pytest.raises(ConstraintConfigurationError):
        FieldValidator().validate_field(item, cross_field("totalPriceMin"), _report_for(item))
