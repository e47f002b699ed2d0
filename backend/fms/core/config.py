"""
Pydantic Settings: centralized configuration loaded from environment variables.

Every FMS service reads the same settings class; ``SERVICE_NAME`` decides
which resources a process exposes.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ──────────────────────────────
    POSTGRES_USER: str = "fms_user"
    POSTGRES_PASSWORD: str = "fms_pass"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "fms_db"
    DB_CREATE_TABLES: bool = True

    @property
    def DATABASE_URL(self) -> str:
        """Async URL for app runtime (asyncpg)."""
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # ── Kafka ─────────────────────────────────
    KAFKA_ENABLED: bool = True
    KAFKA_BOOTSTRAP_SERVERS: str = "localhost:9092"
    KAFKA_CLIENT_ID: str = "fms"
    KAFKA_TOPIC_PAYMENT_SET: str = "payment_set"
    KAFKA_TOPIC_FLIGHT_SET: str = "flight_set"
    KAFKA_TOPIC_FLIGHT_UPDATED: str = "flight_updated"
    KAFKA_TOPIC_FLIGHT_CANCELLED: str = "flight_cancelled"
    KAFKA_TOPIC_BOOKING_SET: str = "booking_set"
    KAFKA_TOPIC_BOOKING_CANCELLED: str = "booking_cancelled"

    @property
    def KAFKA_BROKERS(self) -> list[str]:
        """Bootstrap servers as a list (comma-separated in the env var)."""
        return [b.strip() for b in self.KAFKA_BOOTSTRAP_SERVERS.split(",") if b.strip()]

    # ── Elasticsearch ─────────────────────────
    ELASTICSEARCH_ENABLED: bool = True
    ELASTICSEARCH_URL: str = "http://localhost:9200"
    ELASTICSEARCH_INDEX_NOTIFICATIONS: str = "notifications"

    # ── Auth / JWT ────────────────────────────
    JWT_SECRET_KEY: str = "change-this-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    APP_NAME: str = "fms"
    SERVICE_NAME: str = "all"  # payments | flights | passengers | bookings | notifications | all
    PAYMENT_STRICT_VALIDATION: bool = False

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
