# omikuji/services/render_service.py

import html
from string import Template

from ..models.omikuji import OmikujiResult, ResponseEnvelope

PAGE_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="ja">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>おみくじ</title>
    <style>
        body {
            font-family: Arial, sans-serif;
            display: flex;
            justify-content: center;
            align-items: center;
            min-height: 100vh;
            margin: 0;
            background-color: #f0f0f0;
        }
        .omikuji-container {
            text-align: center;
            background: white;
            padding: 50px;
            border-radius: 10px;
            box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
        }
        h1 {
            color: #333;
            margin-bottom: 30px;
        }
        .result {
            font-size: 48px;
            font-weight: bold;
            color: #d4af37;
            margin: 30px 0;
            padding: 20px;
            border: 3px solid #d4af37;
            border-radius: 10px;
        }
        .reload-button {
            background-color: #4CAF50;
            color: white;
            padding: 15px 30px;
            text-decoration: none;
            border-radius: 5px;
            font-size: 18px;
            margin-top: 20px;
            display: inline-block;
        }
        .reload-button:hover {
            background-color: #45a049;
        }
    </style>
</head>
<body>
    <div class="omikuji-container">
        <h1>おみくじ</h1>
        <div class="result">$result</div>
        <a href="/" class="reload-button">もう一度引く</a>
    </div>
</body>
</html>
""")

HTML_HEADERS = {
    "Content-Type": "text/html; charset=utf-8",
    "Cache-Control": "no-cache",
}

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}

NOT_FOUND_HEADERS = {
    "Content-Type": "text/plain; charset=utf-8",
}

def render_html(label: str) -> ResponseEnvelope:
    body = PAGE_TEMPLATE.substitute(result=html.escape(label))
    return ResponseEnvelope(status_code=200, headers=dict(HTML_HEADERS), body=body)

def render_json(label: str) -> ResponseEnvelope:
    # model_dump_json leaves non-ASCII labels as raw UTF-8, not \u escapes.
    body = OmikujiResult(result=label).model_dump_json()
    return ResponseEnvelope(status_code=200, headers=dict(JSON_HEADERS), body=body)

def render_not_found() -> ResponseEnvelope:
    return ResponseEnvelope(status_code=404, headers=dict(NOT_FOUND_HEADERS), body="Not Found")
