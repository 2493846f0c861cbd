import json

from omikuji.services.fortune_service import FORTUNE_PRESETS
from omikuji.services.omikuji_service import handle


def test_root_renders_html():
    envelope = handle('/', rand=lambda: 0.0)
    assert envelope.status_code == 200
    assert envelope.headers['Content-Type'] == 'text/html; charset=utf-8'
    assert '<div class="result">大凶</div>' in envelope.body


def test_api_renders_json():
    envelope = handle('/api/omikuji', rand=lambda: 0.999)
    assert envelope.status_code == 200
    assert json.loads(envelope.body) == {'result': '大吉'}


def test_unknown_path_is_not_found():
    for path in ('/unknown', '/api', '/api/omikuji/', '/index.html', ''):
        envelope = handle(path)
        assert envelope.status_code == 404
        assert envelope.body == 'Not Found'


def test_routing_miss_does_not_draw():
    def rand():
        raise AssertionError("drew for an unknown path")

    assert handle('/unknown', rand=rand).status_code == 404


def test_uses_supplied_labels():
    envelope = handle('/api/omikuji', FORTUNE_PRESETS['kichi'], rand=lambda: 0.25)
    assert json.loads(envelope.body) == {'result': '中吉'}
