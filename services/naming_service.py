"""
命名服務：生成 Wheel ID

純計算邏輯，不涉及狀態轉換（是否已被使用由呼叫者提供的 is_taken 判斷）
"""
import logging
import random
import string
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = string.digits + string.ascii_lowercase
DEFAULT_LENGTH = 8
DEFAULT_MAX_ATTEMPTS = 5


def generate_wheel_id(length: int = DEFAULT_LENGTH, alphabet: str = DEFAULT_ALPHABET) -> str:
    """
    生成隨機的 Wheel ID

    範例：k3f9x2bd, 0q7m1zz4

    注意：
    - 不檢查唯一性（由呼叫者負責）
    - 36^8 ≈ 2.8 兆種可能，碰撞機率極低
    - 只用小寫英數字，放進 URL 不需要編碼，也不怕大小寫被改掉
    """
    return ''.join(random.choices(alphabet, k=length))


def allocate_wheel_id(
    is_taken: Callable[[str], bool],
    generate: Callable[[], str] = generate_wheel_id,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
) -> Optional[str]:
    """
    生成一個尚未被使用的 Wheel ID

    流程：
    1. 生成 ID
    2. 用 is_taken 檢查是否已存在
    3. 碰撞則重新生成，最多嘗試 max_attempts 次

    參數：
        is_taken: 判斷 ID 是否已被使用
        generate: ID 生成函式
        max_attempts: 最大嘗試次數

    返回：
        可用的 ID；所有嘗試都碰撞時返回 None

    注意：
        - 呼叫者必須在整個呼叫期間持有 registry 的寫鎖，
          否則檢查與插入之間可能被其他請求搶先
    """
    for attempt in range(1, max_attempts + 1):
        wheel_id = generate()
        if not is_taken(wheel_id):
            return wheel_id
        logger.warning(
            f"Wheel id collision detected ({attempt}/{max_attempts}): {wheel_id}"
        )
    return None
