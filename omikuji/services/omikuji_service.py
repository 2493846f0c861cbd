# omikuji/services/omikuji_service.py

import random
from typing import Sequence

from ..models.omikuji import ResponseEnvelope
from .fortune_service import DEFAULT_FORTUNES, RandomSource, pick_result
from .render_service import render_html, render_json, render_not_found

HTML_PATH = "/"
API_PATH = "/api/omikuji"

ROUTES = {
    HTML_PATH: render_html,
    API_PATH: render_json,
}

def handle(
    path: str,
    labels: Sequence[str] = DEFAULT_FORTUNES,
    rand: RandomSource = random.random
) -> ResponseEnvelope:
    """
    Answers one request path with a full response envelope.

    Known routes draw a fresh fortune and render it; every other path gets
    the plain-text 404. Nothing is drawn for a routing miss.
    """
    renderer = ROUTES.get(path)
    if renderer is None:
        return render_not_found()
    return renderer(pick_result(labels, rand))
