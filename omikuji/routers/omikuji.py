# omikuji/routers/omikuji.py

from fastapi import APIRouter, Depends, Response
from typing import Tuple

from ..models.omikuji import ResponseEnvelope
from ..services.fortune_service import RandomSource
from ..services.omikuji_service import API_PATH, HTML_PATH, handle
from .dependencies import get_fortune_labels, get_random_source

router = APIRouter(tags=["Omikuji"])

def envelope_to_response(envelope: ResponseEnvelope) -> Response:
    # Headers carry the exact Content-Type; media_type stays unset so Starlette adds no charset.
    return Response(
        content=envelope.body.encode("utf-8"),
        status_code=envelope.status_code,
        headers=envelope.headers,
    )

@router.get(HTML_PATH, response_class=Response)
def draw_page(
    labels: Tuple[str, ...] = Depends(get_fortune_labels),
    rand: RandomSource = Depends(get_random_source)
):
    """
    Draws a fortune and returns it as a self-contained HTML page.
    """
    return envelope_to_response(handle(HTML_PATH, labels, rand))

@router.get(API_PATH, response_class=Response)
def draw_api(
    labels: Tuple[str, ...] = Depends(get_fortune_labels),
    rand: RandomSource = Depends(get_random_source)
):
    """
    Draws a fortune and returns it as `{"result": "<label>"}`.
    """
    return envelope_to_response(handle(API_PATH, labels, rand))
