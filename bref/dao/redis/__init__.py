from bref.dao.redis.redis_key_schema import RedisKeySchema
from bref.dao.redis.mixins import RedisClientMixin
from bref.dao.redis.short_url_redis_dao import ShortURLRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'ShortURLRedisDAO',
]
