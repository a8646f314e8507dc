from pydantic import Field
from pydantic_settings import BaseSettings


class OrderSettings(BaseSettings):
    """
    Order numbering, backfill and live stream settings.
    Loaded from .env with prefix ORDERS_*
    """

    sequence_name: str = Field(default="order_number_seq", pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")
    backfill_batch_size: int = Field(default=100, ge=1)

    stream_poll_interval: float = Field(default=2.0, gt=0)
    stream_batch_size: int = Field(default=20, ge=1)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "ORDERS_",
        "extra": "ignore",
    }
