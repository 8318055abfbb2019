#!/usr/bin/env python3
"""
Servidor local (Flask) que repassa /api/* ao lambda_handler como evento API Gateway

Como usar:
    cd lambda
    python local_server.py          # PORT=8000 HOST=0.0.0.0 por padrão

Exemplos:
    curl 'http://localhost:8000/api/weather?station=A701'
    curl 'http://localhost:8000/api/weather?capital=rio-de-janeiro'
    curl 'http://localhost:8000/api/weather?lat=-23.55&lng=-46.63'
    curl 'http://localhost:8000/api/weather-state?state=SP'
    curl 'http://localhost:8000/api/geocode?city=Campinas&state=SP'
"""
import os
import sys
import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from flask import Flask, Response, request, jsonify
from flask_cors import CORS

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from lambda_function import lambda_handler  # noqa: E402

API_ROUTES = (
    '/api/weather',
    '/api/weather-state',
    '/api/stations',
    '/api/alerts',
    '/api/geocode',
    '/api/radar',
)

app = Flask(__name__)
CORS(app, resources={r"/api/*": {"origins": "*"}})


@dataclass
class LocalLambdaContext:
    """Contexto mínimo exigido por logger.inject_lambda_context()"""
    function_name: str = "local-weather-alerts"
    function_version: str = "$LATEST"
    invoked_function_arn: str = "arn:aws:lambda:local:000000000000:function:local-weather-alerts"
    memory_limit_in_mb: int = 512
    aws_request_id: str = field(default_factory=lambda: f"local-{uuid.uuid4()}")
    log_group_name: str = "/aws/lambda/local-weather-alerts"
    log_stream_name: str = "local"

    def get_remaining_time_in_millis(self) -> int:
        return 30000


def build_event(flask_request, request_id: str) -> dict:
    """Evento REST (payload v1) equivalente à requisição Flask"""
    now = datetime.now(timezone.utc)
    single = {key: flask_request.args.get(key) for key in flask_request.args}
    multi = {key: flask_request.args.getlist(key) for key in flask_request.args}

    return {
        'resource': flask_request.path,
        'path': flask_request.path,
        'httpMethod': flask_request.method,
        'headers': dict(flask_request.headers),
        'queryStringParameters': single or None,
        'multiValueQueryStringParameters': multi or None,
        'pathParameters': None,
        'body': None,
        'isBase64Encoded': False,
        'requestContext': {
            'stage': 'local',
            'requestId': request_id,
            'httpMethod': flask_request.method,
            'path': flask_request.path,
            'requestTimeEpoch': int(now.timestamp() * 1000),
            'identity': {
                'sourceIp': flask_request.remote_addr,
                'userAgent': flask_request.headers.get('User-Agent', ''),
            },
        },
    }


def to_flask_response(lambda_response: dict) -> Response:
    body = lambda_response.get('body') or ''
    return Response(
        body if isinstance(body, str) else json.dumps(body),
        status=lambda_response.get('statusCode', 200),
        headers=lambda_response.get('headers') or {},
        mimetype='application/json',
    )


@app.route('/api/<path:subpath>', methods=['GET', 'OPTIONS'])
def proxy(subpath: str):
    if f"/api/{subpath}" not in API_ROUTES:
        return route_not_found(None)
    if request.method == 'OPTIONS':
        return '', 204

    context = LocalLambdaContext()
    event = build_event(request, context.aws_request_id)
    return to_flask_response(lambda_handler(event, context))


@app.route('/health', methods=['GET'])
def health():
    return jsonify({
        'status': 'ok',
        'env': os.environ.get('APP_ENV', 'development'),
        'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
    })


@app.errorhandler(404)
def route_not_found(_error):
    return jsonify({
        'success': False,
        'error': 'Rota não encontrada',
        'path': request.path,
        'routes': [f"GET {route}" for route in API_ROUTES] + ['GET /health'],
    }), 404


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8000))
    host = os.environ.get('HOST', '0.0.0.0')

    print(f"AClima weather alerts em http://localhost:{port}")
    for route in API_ROUTES:
        print(f"  GET {route}")

    app.run(host=host, port=port, debug=True)
