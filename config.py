import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from parser_rules import coerce_count

# .env in the working directory, if any
load_dotenv()


def _split_extensions(raw: str) -> List[str]:
    exts = []
    for piece in raw.split(","):
        ext = piece.strip().lower()
        if not ext:
            continue
        exts.append(ext if ext.startswith(".") else f".{ext}")
    return exts


class Settings(BaseModel):
    app_name: str = Field(default=os.getenv("APP_NAME", "Text Summarizer"))
    environment: str = Field(default=os.getenv("ENV", "development"))
    log_level: str = Field(default=os.getenv("LOG_LEVEL", "INFO"))
    default_line_count: int = Field(default=coerce_count(os.getenv("DEFAULT_LINE_COUNT"), default=3))
    max_upload_bytes: int = Field(default=int(os.getenv("MAX_UPLOAD_BYTES", 1024 * 1024)))
    allowed_extensions: List[str] = Field(
        default_factory=lambda: _split_extensions(os.getenv("ALLOWED_EXTENSIONS", ".txt"))
    )

    @field_validator("default_line_count", mode="before")
    @classmethod
    def _at_least_one(cls, v):
        return coerce_count(v)

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
