"""HTTP routes for the Flask API."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from config import Settings
from core.chart import build_chart_series
from core.currency import format_currency, format_duration
from core.ping import get_ping_message
from core.projection import ProjectionOptions, project_input
from schemas.ping import PingResponse
from schemas.projection import ProjectionRequest, ProjectionResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected payload: %d validation error(s)", exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _chart_points(settings: Settings) -> int:
    raw = request.args.get("chartPoints")
    if raw is None:
        return settings.chart_max_points
    try:
        points = int(raw)
    except ValueError:
        raise BadRequest("chartPoints must be an integer")
    if points < 2:
        raise BadRequest("chartPoints must be at least 2")
    return points


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message())
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Time to reach the desired patrimony, with the full monthly trajectory."""
    settings = _settings()

    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    if not isinstance(raw_payload, dict):
        raise BadRequest("request body must be a JSON object")

    payload = ProjectionRequest.model_validate(raw_payload)
    max_points = _chart_points(settings)

    options = ProjectionOptions(
        terminationMode=payload.terminationMode or settings.default_termination_mode,
        inflationModel=payload.inflationModel or settings.default_inflation_model,
        shortCircuitUnreachable=(
            payload.shortCircuitUnreachable
            if payload.shortCircuitUnreachable is not None
            else settings.short_circuit_unreachable
        ),
    )
    logger.info(
        "projection request: target=%s mode=%s inflation=%s",
        payload.desiredPatrimony,
        options.terminationMode.value,
        options.inflationModel.value,
    )

    result = project_input(payload.to_input(), options)

    response = ProjectionResponse(
        years=result.years,
        months=result.months,
        adjustedPatrimony=result.adjustedPatrimony,
        trajectory=result.trajectory,
        neverReached=result.never_reached,
        durationLabel=format_duration(result.years, result.months),
        adjustedPatrimonyLabel=format_currency(result.adjustedPatrimony),
        chart=build_chart_series(result.trajectory, max_points),
    )
    return current_app.response_class(
        response.model_dump_json(), status=HTTPStatus.OK, mimetype="application/json"
    )
