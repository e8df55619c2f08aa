"""
資料模型

所有資料都只存在記憶體中，process 結束即消失：
- Option：轉盤上的一個選項（不可變）
- SpinResult：一次轉動的紀錄（不可變）
- Wheel：選項 + 轉動紀錄（只能 append）
"""
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Tuple


@dataclass(frozen=True)
class Option:
    label: str
    weight: float


@dataclass(frozen=True)
class SpinResult:
    participant_name: str
    participant_phone: str
    chosen_label: str
    timestamp: datetime


@dataclass(eq=False)
class Wheel:
    """
    轉盤

    options 建立後不可變（tuple），順序就是加權選擇時的走訪順序。
    results 只能透過 append_result 新增，讀取時透過 snapshot_results
    取得複本；兩者都在 wheel 自己的鎖內執行。
    """
    id: str
    options: Tuple[Option, ...]
    _results: List[SpinResult] = field(default_factory=list, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def append_result(self, result: SpinResult) -> None:
        with self._lock:
            self._results.append(result)

    def snapshot_results(self) -> List[SpinResult]:
        with self._lock:
            return list(self._results)
