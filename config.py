"""
應用程式設定

所有設定值都可以透過環境變數或 .env 覆寫，例如：
    PORT=8080
    WHEEL_ID_LENGTH=10
"""
import string
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Wheel ID：base36 小寫，URL 安全且不受大小寫影響
    wheel_id_length: int = 8
    wheel_id_alphabet: str = string.digits + string.ascii_lowercase
    wheel_id_max_attempts: int = 5

    # 前端頁面連結（靜態頁面由外部服務提供）
    wheel_link_template: str = "/wheel.html?id={wheel_id}"
    results_link_template: str = "/results.html?id={wheel_id}"

    cors_allow_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"


@lru_cache()
def get_settings():
    return Settings()
