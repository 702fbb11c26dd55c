"""API Gateway proxy responses shared by the request handlers"""

import json


def response_200(body: dict) -> dict:
    return {
        'statusCode': 200,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(body),
    }


def response_302(*, location: str) -> dict:
    return {
        'statusCode': 302,
        'headers': {'Location': location},
        'body': json.dumps({}),  # no body needed for redirects
    }


def response_400(message: str | None = None, error_code: str | None = None) -> dict:
    base = 'Bad Request'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return {
        'statusCode': 400,
        'body': json.dumps(body),
    }


def response_404(message: str | None = None, error_code: str | None = None) -> dict:
    base = 'Not Found'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return {
        'statusCode': 404,
        'body': json.dumps(body),
    }
