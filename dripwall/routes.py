from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from flask import Blueprint, current_app, render_template, request
from pydantic import TypeAdapter, ValidationError

from .models import DripUpdate
from .services.drip_service import MixedBatchError, StoreError, error_message
from .utils.coords import parse_focus

main_bp = Blueprint('main', __name__)

logger = logging.getLogger(__name__)

_updates_adapter = TypeAdapter(List[DripUpdate])


def _wants_json() -> bool:
    best = request.accept_mimetypes.best_match(['text/html', 'application/json'])
    return best == 'application/json'


def _simplify_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    return [
        {'loc': list(error['loc']), 'msg': error['msg']}
        for error in exc.errors()
    ]


@main_bp.route('/')
def index() -> str | Dict[str, Any]:
    result = current_app.drip_service.list_images()
    images = [image.model_dump() for image in result.data]

    if _wants_json():
        return {'images': images}

    return render_template('index.html', images=images, load_failed=not result.ok)


@main_bp.route('/canvas', methods=['POST'])
def update_positions() -> tuple[Dict[str, Any], int] | Dict[str, Any]:
    """Persist a batch of drip moves in one upsert keyed on ``id``."""

    payload = request.get_json(force=True, silent=True)
    try:
        updates = _updates_adapter.validate_python(payload)
    except ValidationError as exc:
        logger.info('Rejected position update batch: %d error(s)', exc.error_count())
        return {'success': False, 'errors': _simplify_errors(exc)}, 400

    try:
        current_app.drip_service.upsert_positions(updates)
    except MixedBatchError as exc:
        logger.info('Rejected position update batch: %s', exc)
        return {'success': False, 'errors': [{'loc': [], 'msg': str(exc)}]}, 400
    except StoreError as exc:
        logger.error('Error updating positions: %s', error_message(exc))
        return {'success': False}, 500

    return {'success': True}


@main_bp.route('/canvas', methods=['GET'])
@main_bp.route('/canvas/', methods=['GET'], strict_slashes=False)
@main_bp.route('/canvas/<coords>', methods=['GET'])
def focused_canvas(coords: Optional[str] = None) -> str | Dict[str, Any]:
    focus = parse_focus(coords)
    result = current_app.drip_service.fetch_all()
    focus_data = focus.model_dump() if focus else None

    if _wants_json():
        return {'images': result.data, 'focus': focus_data}

    return render_template('canvas.html', images=result.data, focus=focus_data)
