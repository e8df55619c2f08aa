"""
Wheel Registry：管理 Wheel 的完整生命週期

職責：
1. 建立 Wheel（驗證選項 + 分配 ID）
2. 查詢 Wheel
3. 新增 / 查詢轉動紀錄

原則：
- 唯一的狀態來源：所有 Wheel 的存在與變更都經過這裡
- 先驗證，再變更：驗證失敗時 registry 完全不變
- 不做持久化：process 結束即消失
"""
import logging
import math
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Tuple

from models import Option, SpinResult, Wheel
from core.locks import ReadWriteLock
from core.exceptions import (
    ValidationError,
    WheelNotFound,
    AllocationExhausted
)
from services.naming_service import (
    allocate_wheel_id,
    generate_wheel_id,
    DEFAULT_MAX_ATTEMPTS
)

logger = logging.getLogger(__name__)

OPTIONS_REQUIRED = "options array is required"
INVALID_OPTION = "Each option must contain a non-empty label and a positive numeric weight"


def _coerce_weight(raw: Any) -> Optional[float]:
    """Convert a submitted weight to float, or None when it is not numeric."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            return float(raw)
        except OverflowError:
            return None
    if isinstance(raw, str):
        try:
            return float(raw.strip())
        except ValueError:
            return None
    return None


def parse_options(raw_options: Any) -> Tuple[Option, ...]:
    """
    驗證並整理使用者送來的選項

    規則：
    - 必須是非空的 list / tuple
    - 每個選項的 label 去除前後空白後不可為空（非字串視為空）
    - weight 必須是有限的正數（數字或數字字串）
    - 所有 weight 的總和也必須是有限數

    參數：
        raw_options: 原始選項資料（例如 [{"label": "Prize", "weight": 1}]）

    返回：
        Option tuple（順序與輸入相同）

    異常：
        ValidationError: 任何一個選項不合法，整批拒絕
    """
    if not isinstance(raw_options, (list, tuple)) or not raw_options:
        raise ValidationError(OPTIONS_REQUIRED)

    options = []
    for raw in raw_options:
        if not isinstance(raw, Mapping):
            raise ValidationError(INVALID_OPTION)

        label = raw.get("label")
        label = label.strip() if isinstance(label, str) else ""
        weight = _coerce_weight(raw.get("weight"))

        if not label or weight is None or not math.isfinite(weight) or weight <= 0:
            raise ValidationError(INVALID_OPTION)

        options.append(Option(label=label, weight=weight))

    # 每個權重都有限，總和仍可能溢位成 inf
    if not math.isfinite(sum(option.weight for option in options)):
        raise ValidationError(INVALID_OPTION)

    return tuple(options)


class WheelRegistry:
    """Wheel 生命週期管理器（id -> Wheel）"""

    def __init__(
        self,
        generate_id: Callable[[], str] = generate_wheel_id,
        max_id_attempts: int = DEFAULT_MAX_ATTEMPTS
    ):
        self._wheels: Dict[str, Wheel] = {}
        self._lock = ReadWriteLock()
        self._generate_id = generate_id
        self._max_id_attempts = max_id_attempts

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._wheels)

    def __contains__(self, wheel_id) -> bool:
        with self._lock.read_locked():
            return wheel_id in self._wheels

    def create(self, raw_options: Any) -> Wheel:
        """
        建立新的 Wheel

        流程：
        1. 驗證選項（失敗則整批拒絕，不會建立任何 Wheel）
        2. 取得寫鎖
        3. 分配唯一的 Wheel ID（碰撞會重試，有上限）
        4. 插入 map

        參數：
            raw_options: 原始選項資料

        返回：
            新建立的 Wheel

        異常：
            ValidationError: 選項不合法
            AllocationExhausted: ID 連續碰撞超過上限

        注意：
            - 分配 ID 與插入在同一個寫鎖內，並發建立不會拿到相同的 ID
        """
        # 1. 驗證選項（在鎖外做，不佔用寫鎖）
        options = parse_options(raw_options)

        with self._lock.write_locked():
            # 2. 分配 ID
            wheel_id = allocate_wheel_id(
                lambda candidate: candidate in self._wheels,
                generate=self._generate_id,
                max_attempts=self._max_id_attempts
            )
            if wheel_id is None:
                logger.error(
                    f"Wheel id allocation exhausted after {self._max_id_attempts} attempts "
                    f"({len(self._wheels)} wheels registered)"
                )
                raise AllocationExhausted(self._max_id_attempts)

            # 3. 插入
            wheel = Wheel(id=wheel_id, options=options)
            self._wheels[wheel_id] = wheel

        logger.info(f"Created wheel {wheel_id} with {len(options)} options")
        return wheel

    def get(self, wheel_id: str) -> Wheel:
        """
        透過 ID 取得 Wheel

        異常：
            WheelNotFound: Wheel 不存在
        """
        with self._lock.read_locked():
            wheel = self._wheels.get(wheel_id)
        if wheel is None:
            raise WheelNotFound(wheel_id)
        return wheel

    def append_result(self, wheel_id: str, result: SpinResult) -> None:
        """
        新增一筆轉動紀錄

        異常：
            WheelNotFound: Wheel 不存在（不會新增任何紀錄）
        """
        self.get(wheel_id).append_result(result)

    def list_results(self, wheel_id: str) -> List[SpinResult]:
        """
        取得轉動紀錄（依新增順序）

        返回：
            新的 list，修改它不會影響 registry

        異常：
            WheelNotFound: Wheel 不存在
        """
        return self.get(wheel_id).snapshot_results()
