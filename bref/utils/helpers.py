"""Helper utilities for request handlers.

Functions:
    base_url() -> str
        Extract correct public base URL from API Gateway event
    get_short_url() -> str
        Get string representation of short URL for a given key
    guarantee_500_response(handler) -> Callable
        Decorator: Turn any uncaught exception into a generic 500 response

Example:
    Typical usage inside a handler:

        >>> from bref.utils.helpers import base_url
        >>> event = {
        ...     "requestContext": {
        ...         "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
        ...         "stage": "Prod"
        ...     }
        ... }
        >>> base_url(event)
        'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'

        >>> base_url({})
        'http://localhost:8080'
"""

import json
import logging
import functools
from typing import Any
from collections.abc import Callable

from bref.exceptions import BrefError


logger = logging.getLogger(__name__)

UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'


def base_url(event: dict[str, Any]) -> str:
    """Extract public base URL from API Gateway event

    If a custom domain is configured, the stage name is omitted.
    If using the default AWS execute-api domain, the stage name is included.

    Args:
        event (dict): API Gateway event object passed to the handler

    Returns:
        str: Base URL, e.g.:
             - "https://bref.example.com"
             - "https://abc123.execute-api.us-east-1.amazonaws.com/Prod"
    """
    request_context = event.get('requestContext', {})
    domain = request_context.get('domainName', '')
    stage = request_context.get('stage', '')

    if domain and 'execute-api' not in domain:
        # If the domain is a custom domain (no execute-api), skip stage
        return f'https://{domain}'
    elif domain:
        # Otherwise include the stage (for AWS default domains)
        return f'https://{domain}/{stage}'
    else:
        # Fallback: local invocation (tests, local server, etc.)
        return 'http://localhost:8080'


def get_short_url(key: str, event: dict[str, Any]) -> str:
    """Get string representation of shortened URL

    Args:
        key (str): short URL key
        event (dict): API Gateway event object passed to the handler

    Returns:
        str: short url string representation
    """
    return f'{base_url(event).rstrip("/")}/{key}'


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator: respond with a generic 500 when the handler raises

    Internal details (storage failures, clock errors, bugs) are logged but
    never exposed to the client.

    Example:
        >>> @guarantee_500_response
        ... def lambda_handler(event, context):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """

    @functools.wraps(handler)
    def wrapper(event: dict[str, Any], context: Any, *args, **kwargs) -> dict[str, Any]:
        try:
            return handler(event, context, *args, **kwargs)
        except Exception as e:
            error_code = e.error_code if isinstance(e, BrefError) else UNKNOWN_INTERNAL_SERVER_ERROR
            logger.exception('Unhandled error in request handler. Responding with 500.', extra={'errorCode': error_code})
            return {
                'statusCode': 500,
                'body': json.dumps({'message': 'Internal Server Error'}),
            }

    return wrapper
