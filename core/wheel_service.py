"""
Wheel Service：串接 API 層需要的四個操作

職責：
1. 建立 Wheel 並產生分享連結
2. 查詢 Wheel 選項
3. 轉動（驗證參與者 -> 加權選擇 -> 記錄結果）
4. 查詢轉動紀錄

只有 create_wheel 和 spin 會變更狀態；describe_wheel 和 list_results 唯讀。
隨機數來源與時鐘都由建構子注入，測試時不需要 monkeypatch。
"""
import logging
import random
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from config import Settings, get_settings
from models import SpinResult
from core.wheel_registry import WheelRegistry
from core.exceptions import ValidationError
from services.selection_service import choose

logger = logging.getLogger(__name__)

PARTICIPANT_REQUIRED = "Name and phone are required"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_epoch_millis(timestamp: datetime) -> int:
    return int(timestamp.timestamp() * 1000)


def _clean_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


class WheelService:
    """Wheel 操作的協調者"""

    def __init__(
        self,
        registry: WheelRegistry,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = utc_now,
        settings: Optional[Settings] = None
    ):
        self.registry = registry
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock
        self._settings = settings if settings is not None else get_settings()

    def create_wheel(self, raw_options: Any) -> Dict[str, str]:
        """
        建立新 Wheel

        返回：
            - id: Wheel ID
            - link: 參與者轉盤頁面
            - results_link: 結果頁面

        異常：
            ValidationError: 選項不合法
            AllocationExhausted: 無法分配 ID
        """
        wheel = self.registry.create(raw_options)
        return {
            "id": wheel.id,
            "link": self._settings.wheel_link_template.format(wheel_id=wheel.id),
            "results_link": self._settings.results_link_template.format(wheel_id=wheel.id),
        }

    def describe_wheel(self, wheel_id: str) -> Dict[str, Any]:
        """
        取得 Wheel 選項（依建立時的順序）

        異常：
            WheelNotFound: Wheel 不存在
        """
        wheel = self.registry.get(wheel_id)
        return {
            "id": wheel.id,
            "options": [
                {"label": option.label, "weight": option.weight}
                for option in wheel.options
            ],
        }

    def spin(self, wheel_id: str, name: Any, phone: Any) -> Dict[str, str]:
        """
        為參與者轉動一次

        流程：
        1. 找到 Wheel
        2. 驗證參與者姓名與電話（去除空白後不可為空）
        3. 抽一個隨機數，加權選擇
        4. 記錄結果

        參數：
            wheel_id: Wheel ID
            name: 參與者姓名
            phone: 參與者電話

        返回：
            - result: 被選中的選項 label

        異常：
            WheelNotFound: Wheel 不存在
            ValidationError: 姓名或電話為空

        注意：
            - 任何異常都發生在 append 之前，失敗時紀錄不會變動
        """
        # 1. 找到 Wheel
        wheel = self.registry.get(wheel_id)

        # 2. 驗證參與者
        participant_name = _clean_text(name)
        participant_phone = _clean_text(phone)
        if not participant_name or not participant_phone:
            raise ValidationError(PARTICIPANT_REQUIRED)

        # 3. 加權選擇
        chosen = choose(wheel.options, self._rng.random())

        # 4. 記錄結果
        result = SpinResult(
            participant_name=participant_name,
            participant_phone=participant_phone,
            chosen_label=chosen.label,
            timestamp=self._clock()
        )
        self.registry.append_result(wheel.id, result)

        logger.info(f"Wheel {wheel.id} spun for {participant_name}: {chosen.label}")
        return {"result": chosen.label}

    def list_results(self, wheel_id: str) -> Dict[str, Any]:
        """
        取得 Wheel 的所有轉動紀錄（依新增順序）

        異常：
            WheelNotFound: Wheel 不存在
        """
        results: List[SpinResult] = self.registry.list_results(wheel_id)
        return {
            "id": wheel_id,
            "results": [
                {
                    "name": result.participant_name,
                    "phone": result.participant_phone,
                    "result": result.chosen_label,
                    "timestamp": to_epoch_millis(result.timestamp),
                }
                for result in results
            ],
        }
