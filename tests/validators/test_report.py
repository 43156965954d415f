import pytest

from itemservice.models.item import Item
from itemservice.validators import (
    ConstraintConfigurationError,
    FieldError,
    MessageCodesResolver,
    ObjectError,
    ValidationReport,
)


@pytest.fixture
def report() -> ValidationReport:
    return ValidationReport.for_target(Item(item_name="Lamp", price=500, quantity=3), "item")


def test_new_report_has_no_errors(report) -> None:
    assert report.has_errors() is False
    assert report.error_count == 0
    assert report.field_errors() == []
    assert report.object_errors() == []
    assert report.field_error("price") is None


def test_errors_keep_insertion_order_across_kinds(report) -> None:
    report.reject_value("price", "range", (1_000, 1_000_000))
    report.reject("totalPriceMin", ("10,000", 1_500))
    report.reject_value("quantity", "max", (2,))

    assert [type(e) for e in report.all_errors()] == [FieldError, ObjectError, FieldError]
    assert [e.field for e in report.field_errors()] == ["price", "quantity"]
    assert [e.code for e in report.object_errors()] == ["totalPriceMin"]


def test_has_errors_matches_error_counts(report) -> None:
    report.reject("totalPriceMin")
    assert report.has_errors() is True
    assert len(report.field_errors()) + len(report.object_errors()) == report.error_count == 1


def test_reject_value_reads_value_and_declared_type(report) -> None:
    error = report.reject_value("price", "range", (1_000, 1_000_000))

    assert error.object_name == "item"
    assert error.rejected_value == 500
    assert error.binding_failure is False
    assert error.codes == ("range.item.price", "range.price", "range.int", "range")
    assert error.arguments == (1_000, 1_000_000)


def test_reject_value_on_undeclared_field_is_a_configuration_error(report) -> None:
    with pytest.raises(ConstraintConfigurationError, match="colour"):
        report.reject_value("colour", "required")
    assert not report.has_errors()


def test_reject_builds_object_code_chain(report) -> None:
    error = report.reject("totalPriceMin", ("10,000", 1_500))

    assert error.codes == ("totalPriceMin.item", "totalPriceMin")
    assert error.arguments == ("10,000", 1_500)
    assert not isinstance(error, FieldError)


def test_add_methods_append_and_never_replace(report) -> None:
    report.add_field_error("price", "abc", True, ["typeMismatch.price", "typeMismatch"], ["price"])
    report.add_field_error("price", "abc", True, ["typeMismatch"], [])
    report.add_object_error(["custom"])

    assert report.error_count == 3
    assert report.field_error("price").codes == ("typeMismatch.price", "typeMismatch")


def test_field_error_returns_first_match(report) -> None:
    report.reject_value("price", "required")
    report.reject_value("price", "range", (1_000, 1_000_000))

    assert report.field_error("price").code == "required"
    assert report.has_field_errors("price")
    assert not report.has_field_errors("item_name")


def test_field_value_prefers_rejected_value_over_target() -> None:
    item = Item(item_name="Lamp", price=None, quantity=3)
    report = ValidationReport.for_target(item, "item")
    report.add_field_error("price", "1,000 won", True, ["typeMismatch"], ["price"])

    assert report.field_value("price") == "1,000 won"
    assert report.field_value("item_name") == "Lamp"
    assert report.has_binding_failure("price")
    assert not report.has_binding_failure("item_name")


def test_report_uses_injected_resolver() -> None:
    report = ValidationReport.for_target(Item(), "item", MessageCodesResolver(prefix="v."))
    assert report.reject("totalPriceMin").codes == ("v.totalPriceMin.item", "v.totalPriceMin")


def test_serialization_keeps_field_details_and_drops_target(report) -> None:
    report.reject_value("price", "range", (1_000, 1_000_000))

    dumped = report.model_dump()

    assert "target" not in dumped
    assert dumped["errors"][0]["field"] == "price"
    assert dumped["errors"][0]["rejected_value"] == 500
