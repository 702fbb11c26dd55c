# Application: environment variable names
APP_ENV_ENV = 'APP_ENV'
APP_NAME_ENV = 'APP_NAME'
LOG_LEVEL_ENV = 'LOG_LEVEL'

# Storage backend selection ('sqlite' or 'redis')
BACKEND_ENV = 'BREF_BACKEND'
DEFAULT_BACKEND = 'sqlite'
SUPPORTED_BACKENDS = frozenset({'sqlite', 'redis'})

# SQLite: directory holding the embedded database
DB_PATH_ENV = 'DB_PATH'
XDG_DATA_HOME_ENV = 'XDG_DATA_HOME'
DB_FILENAME = 'bref.sqlite3'

# SQLite: seconds a connection waits on a locked database before failing
SQLITE_BUSY_TIMEOUT_SECONDS = 30.0

# Redis: connection details
REDIS_HOST_ENV = 'REDIS_HOST'
REDIS_PORT_ENV = 'REDIS_PORT'
REDIS_DB_ENV = 'REDIS_DB'
REDIS_USERNAME_ENV = 'REDIS_USERNAME'
REDIS_PASSWORD_ENV = 'REDIS_PASSWORD'  # noqa: S105
