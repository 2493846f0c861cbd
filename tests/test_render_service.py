import json
import re

from omikuji.services.render_service import render_html, render_json, render_not_found

RESULT_PATTERN = re.compile(r'<div class="result">([^<]+)</div>')


def test_html_page_wraps_label():
    envelope = render_html('吉')
    assert envelope.status_code == 200
    assert envelope.body.startswith('<!DOCTYPE html>')
    assert '<html lang="ja">' in envelope.body
    assert '<title>おみくじ</title>' in envelope.body
    assert '<h1>おみくじ</h1>' in envelope.body
    assert RESULT_PATTERN.search(envelope.body).group(1) == '吉'


def test_html_page_has_redraw_link_and_viewport():
    body = render_html('吉').body
    assert '<a href="/" class="reload-button">もう一度引く</a>' in body
    assert '<meta name="viewport" content="width=device-width, initial-scale=1.0">' in body


def test_html_page_is_self_contained():
    body = render_html('吉').body
    assert '<style>' in body
    assert 'background-color: #f0f0f0' in body
    assert 'color: #d4af37' in body
    assert '<link' not in body
    assert '<script' not in body


def test_html_headers():
    envelope = render_html('大吉')
    assert envelope.headers == {
        'Content-Type': 'text/html; charset=utf-8',
        'Cache-Control': 'no-cache',
    }


def test_html_escapes_label():
    body = render_html('<b>吉</b>').body
    assert '<b>吉</b>' not in body
    assert '&lt;b&gt;吉&lt;/b&gt;' in body


def test_json_document():
    envelope = render_json('小吉')
    assert envelope.status_code == 200
    assert envelope.headers == {
        'Content-Type': 'application/json',
        'Access-Control-Allow-Origin': '*',
    }
    assert json.loads(envelope.body) == {'result': '小吉'}
    assert '小吉' in envelope.body


def test_not_found():
    envelope = render_not_found()
    assert envelope.status_code == 404
    assert envelope.body == 'Not Found'


def test_rendering_is_pure():
    assert render_html('凶') == render_html('凶')
    assert render_html('凶').body == render_html('凶').body
    assert render_json('凶').body == render_json('凶').body
