import logging

from bref.types import LambdaEvent, LambdaContext, LambdaResponse
from bref.models import Key
from bref.dao import create_short_url_dao
from bref.utils import load_config, get_short_url, guarantee_500_response
from bref.lambdas.responses import response_302, response_400, response_404
from bref.lambdas.redirect_url.constants import (
    MISSING_KEY,
    INVALID_KEY,
    SHORT_URL_NOT_FOUND,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect URLs

    This handler follows this procedure to redirect URLs:
    - Step 1: Extract key from request path
    - Step 2: Get short URL record from database
    - Step 3: Redirect client to target URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: target URL destination
        400: Bad client request
            message: missing or invalid key in path parameters
        404: Not found
            message: no short URL is stored under the key
        500: Internal server error
            message: server experienced an internal error

    Args:
        event (dict):
            API Gateway event payload containing the key path parameter.
        context (Any):
            Runtime context object (not used directly).

    Returns:
        dict:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'key': '1dFhvQ'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 0- Get application's config
    app_config = load_config()

    # 1- Extract key from request's path
    raw_key = (event.get('pathParameters') or {}).get('key')
    if raw_key is None:
        logger.info('Missing "key" in path. Responding with 400.', extra={'event': MISSING_KEY})
        return response_400(message="missing 'key' in path", error_code=MISSING_KEY)

    try:
        key = Key(raw_key)
    except ValueError:
        logger.info('Invalid key in path. Responding with 400.', extra={'key': raw_key, 'event': INVALID_KEY})
        return response_400(message=f"invalid key '{raw_key}'", error_code=INVALID_KEY)
    logger.debug('Client requested short URL %s.', get_short_url(str(key), event))

    # 2- Get short URL record from database
    short_url_dao = create_short_url_dao(app_config)
    try:
        short_url = short_url_dao.get(key)
    finally:
        short_url_dao.close()
    if short_url is None:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'key': str(key), 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(message=f"short url {get_short_url(str(key), event)} doesn't exist", error_code=SHORT_URL_NOT_FOUND)

    # 3- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'key': str(key), 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=short_url.target)
