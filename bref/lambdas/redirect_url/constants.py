# Logging events & error codes
MISSING_KEY = 'MISSING_KEY'
INVALID_KEY = 'INVALID_KEY'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
