# Logging events & error codes
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
MISSING_URL = 'MISSING_URL'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
