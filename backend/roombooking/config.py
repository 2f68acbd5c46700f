from functools import lru_cache
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


class Settings(BaseModel):
    seed_default_rooms: bool = Field(default=True)
    audit_log_enabled: bool = Field(default=True)


@lru_cache
def get_settings() -> Settings:
    return Settings(
        seed_default_rooms=os.getenv("ROOMBOOKING_SEED_ROOMS", "1"),
        audit_log_enabled=os.getenv("ROOMBOOKING_AUDIT_LOG", "1"),
    )
