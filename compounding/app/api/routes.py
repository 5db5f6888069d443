"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict, List, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from compounding import __version__
from compounding.config import CalculatorParams
from compounding.core.accrual import InvalidInput, compute
from compounding.core.presentation import FormError, chart_data, parse_form, summarize
from compounding.schemas.accrual import (
    AccrualDisplayResponse,
    AccrualFormRequest,
    AccrualRequest,
    AccrualResponse,
    ChartData,
)
from compounding.schemas.health import PingResponse
from compounding.utils.logging import get_logger

logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)


def _calculator() -> CalculatorParams:
    return current_app.config["CALCULATOR"]


def _granularity(requested: Optional[str]) -> str:
    return requested or _calculator().granularity


def _error_response(errors: List[str]):
    logger.info("rejected calculation: %s", "; ".join(errors))
    return jsonify({"error": errors}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(InvalidInput)
def _handle_invalid_input(exc: InvalidInput):
    return _error_response(exc.errors)


@api_bp.errorhandler(FormError)
def _handle_form_error(exc: FormError):
    return _error_response(exc.errors)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(version=__version__)
    return jsonify(response.model_dump())


@api_bp.get("/calc/accrual/defaults")
def accrual_defaults() -> Any:
    """Values the calculator form starts with."""
    calculator = _calculator()
    payload = AccrualRequest(
        **calculator.defaults.model_dump(),
        granularity=calculator.granularity,
    )
    return jsonify(payload.model_dump())


@api_bp.post("/calc/accrual")
def accrual() -> Any:
    """Compute the balance series from numeric inputs."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = AccrualRequest.model_validate(raw_payload)
    granularity = _granularity(payload.granularity)

    result = compute(payload.to_input(), granularity=granularity)
    response = AccrualResponse.from_result(result, granularity)
    return jsonify(response.model_dump())


@api_bp.post("/calc/accrual/form")
def accrual_form() -> Any:
    """Compute from the form's raw text and return display-ready figures."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = AccrualFormRequest.model_validate(raw_payload)
    granularity = _granularity(payload.granularity)

    result = compute(parse_form(payload.model_dump()), granularity=granularity)
    response = AccrualDisplayResponse(
        summary=summarize(result),
        chart=ChartData(**chart_data(result)),
        result=AccrualResponse.from_result(result, granularity),
    )
    return jsonify(response.model_dump())
