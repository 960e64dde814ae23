from pathlib import Path
from typing import List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Event Booking'
    VERSION: str = '0.1.0'
    DEBUG: bool = False

    # HTTP
    HOST: str = '0.0.0.0'
    PORT: int = 3000
    WORKERS: int = 1

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'event_booking'

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    @property
    def DATABASE_DSN(self) -> str:
        """Plain libpq DSN for asyncpg."""
        return self.DATABASE_URL_ASYNC.replace('postgresql+asyncpg://', 'postgresql://')

    # SQLAlchemy engine pool (read path + schema bootstrap)
    DB_POOL_SIZE: int = 5
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: float = 5.0  # Seconds to wait for a pooled connection
    DB_POOL_RECYCLE: int = 1800
    DB_POOL_PRE_PING: bool = True

    # asyncpg pool (transactional write path)
    ASYNCPG_POOL_MIN_SIZE: int = 2
    ASYNCPG_POOL_MAX_SIZE: int = 10
    ASYNCPG_POOL_CONNECT_TIMEOUT: float = 10.0
    ASYNCPG_POOL_MAX_INACTIVE_LIFETIME: float = 300.0
    ASYNCPG_POOL_MAX_QUERIES: int = 50000

    # Timeouts shared by both pools
    DB_POOL_ACQUIRE_TIMEOUT: float = 5.0  # asyncpg pool.acquire()
    DB_COMMAND_TIMEOUT: float = 10.0  # client-side per statement
    DB_LOCK_TIMEOUT_MS: int = 5000  # server-side lock_timeout
    DB_STATEMENT_TIMEOUT_MS: int = 15000  # server-side statement_timeout

    @property
    def DB_SERVER_SETTINGS(self) -> dict[str, str]:
        return {
            'application_name': 'event-booking',
            'lock_timeout': str(self.DB_LOCK_TIMEOUT_MS),
            'statement_timeout': str(self.DB_STATEMENT_TIMEOUT_MS),
        }

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []


settings = Settings()  # type: ignore
