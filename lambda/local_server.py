#!/usr/bin/env python3
"""
Servidor Local para Desenvolvimento
Simula AWS Lambda + API Gateway localmente usando Flask

Como usar:
    cd lambda
    python local_server.py

Endpoints disponíveis:
    GET http://localhost:8080/weather?latitude=51.5074&longitude=-0.1278
    GET http://localhost:8080/weather/city?name=London
    GET http://localhost:8080/health
"""
import os
import sys
from datetime import datetime

from flask import Flask, Response, jsonify, request
from flask_cors import CORS

# Garantir que o diretório lambda está no path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from infrastructure.adapters.input.lambda_handler import lambda_handler  # noqa: E402
from shared.config.settings import CORS_ORIGIN  # noqa: E402

app = Flask(__name__)
CORS(app, resources={r"/weather*": {"origins": CORS_ORIGIN}})


class MockLambdaContext:
    """Mock do contexto Lambda para testes locais"""
    def __init__(self):
        self.aws_request_id = f"local-{datetime.now().timestamp()}"
        self.function_name = "local-weatherdesk-backend"
        self.function_version = "$LATEST"
        self.invoked_function_arn = "arn:aws:lambda:local:000000000000:function:local-weatherdesk-backend"
        self.memory_limit_in_mb = "256"
        self.log_group_name = "/aws/lambda/local-weatherdesk-backend"
        self.log_stream_name = "local"

    def get_remaining_time_in_millis(self):
        return 300000  # 5 minutos


def flask_to_lambda_event(flask_request):
    """Converte requisição Flask para evento Lambda/API Gateway (REST v1)"""
    query_string_parameters = dict(flask_request.args.items())
    headers = dict(flask_request.headers.items())
    now = datetime.now()

    return {
        'resource': flask_request.path,
        'path': flask_request.path,
        'httpMethod': flask_request.method,
        'headers': headers,
        'queryStringParameters': query_string_parameters or None,
        'pathParameters': None,
        'body': None,
        'isBase64Encoded': False,
        'requestContext': {
            'accountId': '000000000000',
            'apiId': 'local',
            'protocol': 'HTTP/1.1',
            'httpMethod': flask_request.method,
            'path': flask_request.path,
            'stage': 'local',
            'requestId': f"local-{now.timestamp()}",
            'requestTime': now.isoformat(),
            'requestTimeEpoch': int(now.timestamp() * 1000),
            'identity': {
                'sourceIp': flask_request.remote_addr,
                'userAgent': flask_request.headers.get('User-Agent', '')
            }
        }
    }


def lambda_to_flask_response(lambda_response):
    """Converte resposta Lambda para resposta Flask (mantém o content-type original)"""
    headers = dict(lambda_response.get('headers') or {})
    for key, values in (lambda_response.get('multiValueHeaders') or {}).items():
        if values:
            headers.setdefault(key, values[-1])

    return Response(
        response=lambda_response.get('body') or '',
        status=lambda_response.get('statusCode', 200),
        headers=headers
    )


@app.route('/weather', methods=['GET'])
@app.route('/weather/city', methods=['GET'])
def proxy_to_lambda():
    """Encaminha as rotas /weather* para o lambda_handler"""
    event = flask_to_lambda_event(request)
    response = lambda_handler(event, MockLambdaContext())
    return lambda_to_flask_response(response)


@app.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': 'weatherdesk-backend-local',
        'timestamp': datetime.now().isoformat()
    })


@app.errorhandler(404)
def not_found(error):
    """Handler para rotas não encontradas"""
    return jsonify({
        'error': 'Not Found',
        'message': f"Route {request.path} not found",
        'available_routes': [
            'GET /weather?latitude=<n>&longitude=<n>',
            'GET /weather/city?name=<city>',
            'GET /health'
        ]
    }), 404


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8080))
    host = os.environ.get('HOST', '0.0.0.0')

    print("=" * 70)
    print("Servidor Local - WeatherDesk Backend")
    print("=" * 70)
    print(f"\nRodando em: http://{host}:{port}")
    print(f"   GET  http://localhost:{port}/weather?latitude=51.5074&longitude=-0.1278")
    print(f"   GET  http://localhost:{port}/weather/city?name=London")
    print(f"   GET  http://localhost:{port}/health")
    print("\n" + "=" * 70 + "\n")

    app.run(host=host, port=port, debug=os.environ.get('FLASK_DEBUG', '0') == '1')
