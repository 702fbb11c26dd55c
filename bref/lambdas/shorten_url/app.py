import json
import base64
import logging
import binascii

from bref.types import LambdaEvent, LambdaContext, LambdaResponse
from bref.models import ShortURLModel
from bref.dao import create_short_url_dao
from bref.utils import load_config, get_short_url, guarantee_500_response
from bref.utils.shortener import generate_key
from bref.lambdas.responses import response_200, response_400
from bref.lambdas.shorten_url.constants import INVALID_JSON_BODY, MISSING_URL, SHORTEN_SUCCESS


logger = logging.getLogger(__name__)


def _request_body(event: LambdaEvent) -> str:
    body = event.get('body') or '{}'
    if event.get('isBase64Encoded'):
        body = base64.b64decode(body, validate=True).decode('utf-8')
    return body


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs

    This handler follows this procedure to shorten URLs:
    - Step 1: Extract original URL from request body
    - Step 2: Generate a time-based key for the new link
    - Step 3: Store key and target URL mapping in database (via DAO)
    - Step 4: Respond to user with 200 success

    HTTP responses:
        200: Successful URL shortening
            key: newly generated key
            url: original url (provided in request)
            short_url: newly generated short url
        400: Bad client request
            message: indicate cause of bad request (invalid JSON or missing url)
        500: Internal server error
            message: indicate the server experienced an internal error

    Args:
        event (dict):
            API Gateway event payload in Lambda Proxy format.
        context (Any):
            Runtime context object (not used directly).

    Returns:
        dict:
            JSON-serializable response following API Gateway Lambda Proxy
            output format. Includes status code, headers, and response body.

    Example:
        >>> event = {'httpMethod': 'POST', 'body': '{"url": "https://example.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])['key']
        '1dFhvQ'
    """
    # 0- Get application's config
    app_config = load_config()

    # 1- Extract original URL from request body
    try:
        request_body = json.loads(_request_body(event))
    except (json.JSONDecodeError, binascii.Error, UnicodeDecodeError):
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)

    target_url = request_body.get('url') if isinstance(request_body, dict) else None
    if not target_url or not isinstance(target_url, str):
        logger.info("Missing 'url' in JSON body. Responding with 400.", extra={'event': MISSING_URL})
        return response_400(message="missing 'url' in JSON body", error_code=MISSING_URL)

    # 2- Generate key for the new link
    key = generate_key()

    # 3- Store key and target URL mapping in database (via DAO)
    short_url_dao = create_short_url_dao(app_config)
    try:
        short_url_dao.insert(ShortURLModel(key=key, target=target_url))
    finally:
        short_url_dao.close()
    short_url = get_short_url(str(key), event)

    # 4- Return successful response to user
    logger.info(
        'Shortened URL. Responding with 200.',
        extra={'key': str(key), 'event': SHORTEN_SUCCESS},
    )
    return response_200(
        {
            'message': f'Successfully shortened {target_url} to {short_url}',
            'key': str(key),
            'url': target_url,
            'short_url': short_url,
        }
    )
