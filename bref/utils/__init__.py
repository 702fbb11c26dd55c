from bref.utils.config import app_env, app_name, app_prefix, data_dir, load_config
from bref.utils.helpers import base_url, get_short_url, guarantee_500_response
from bref.utils.logging import initialize_logging


__all__ = [
    'app_env',
    'app_name',
    'app_prefix',
    'data_dir',
    'load_config',
    'base_url',
    'get_short_url',
    'guarantee_500_response',
    'initialize_logging',
]
