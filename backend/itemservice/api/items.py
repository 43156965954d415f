"""Item validation API — bind, validate, and either echo the item or explain why not.

Nothing is stored: the endpoints stop where persistence would begin.
"""

from functools import lru_cache
from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from itemservice.config import get_settings
from itemservice.messages import MessageSource, load_message_source
from itemservice.models.item import Item, ItemUpdateForm
from itemservice.models.responses import ErrorDetail, ItemResponse, ValidationFailedResponse
from itemservice.services.binder import bind
from itemservice.validators import Profile, ValidationEngine, ValidationReport, build_default_engine
from itemservice.validators.models import FieldError
from itemservice.validators.shapes import declared_fields

logger = structlog.get_logger()

router = APIRouter(prefix="/validation/items")


@lru_cache
def get_engine() -> ValidationEngine:
    return build_default_engine(total_price_min=get_settings().TOTAL_PRICE_MIN)


def get_messages() -> MessageSource:
    return load_message_source(get_settings().MESSAGES_FILE)


# ─── Helpers ───


def _error_details(report: ValidationReport, messages: MessageSource) -> list[ErrorDetail]:
    details = []
    for error in report.all_errors():
        is_field = isinstance(error, FieldError)
        details.append(ErrorDetail(
            object_name=error.object_name,
            field=error.field if is_field else None,
            code=error.code,
            codes=list(error.codes),
            arguments=list(error.arguments),
            rejected_value=error.rejected_value if is_field else None,
            binding_failure=error.binding_failure if is_field else False,
            message=messages.resolve(error, default=error.code),
        ))
    return details


def _failure_response(report: ValidationReport, messages: MessageSource) -> JSONResponse:
    form = {field: report.field_value(field) for field in declared_fields(type(report.target))}
    body = ValidationFailedResponse(
        object_name=report.object_name,
        errors=_error_details(report, messages),
        form=form,
    )
    return JSONResponse(status_code=400, content=body.model_dump(mode="json"))


def _bind_and_validate(
    model: type[BaseModel],
    raw: dict[str, Any],
    profile: Profile,
    engine: ValidationEngine,
) -> tuple[BaseModel, ValidationReport]:
    # Both forms report under "item" so they share the message table entries
    bound = bind(model, raw, object_name="item")
    report = engine.validate(bound.target, profile, bound.report)
    return bound.target, report


# ─── Endpoints ───


@router.post(
    "/add",
    response_model=ItemResponse,
    responses={400: {"model": ValidationFailedResponse}},
)
async def add_item(
    payload: dict[str, Any] = Body(...),
    engine: ValidationEngine = Depends(get_engine),
    messages: MessageSource = Depends(get_messages),
):
    """Validate a new item under the save profile."""
    item, report = _bind_and_validate(Item, payload, Profile.SAVE, engine)

    if report.has_errors():
        logger.info("item_rejected", profile=Profile.SAVE.value, error_count=report.error_count)
        return _failure_response(report, messages)

    logger.info("item_validated", profile=Profile.SAVE.value, item_name=item.item_name)
    return ItemResponse(**item.model_dump())


@router.post(
    "/{item_id}/edit",
    response_model=ItemResponse,
    responses={400: {"model": ValidationFailedResponse}},
)
async def edit_item(
    item_id: int,
    payload: dict[str, Any] = Body(...),
    engine: ValidationEngine = Depends(get_engine),
    messages: MessageSource = Depends(get_messages),
):
    """Validate an edit through the update form. The path id wins over the body."""
    form, report = _bind_and_validate(
        ItemUpdateForm, {**payload, "id": item_id}, Profile.UPDATE, engine
    )

    if report.has_errors():
        logger.info(
            "item_rejected",
            profile=Profile.UPDATE.value,
            item_id=item_id,
            error_count=report.error_count,
        )
        return _failure_response(report, messages)

    logger.info("item_validated", profile=Profile.UPDATE.value, item_id=item_id)
    return ItemResponse(**form.to_item().model_dump())
