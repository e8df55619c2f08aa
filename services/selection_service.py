"""
選擇服務：轉盤的加權隨機選擇

純計算邏輯，隨機數由呼叫者傳入，方便測試
"""
import math
from typing import Sequence

from models import Option


def choose(options: Sequence[Option], random_draw: float) -> Option:
    """
    依照權重從 options 中選出一個

    演算法：
    - total = 所有權重總和
    - r = random_draw * total
    - 依序走訪，每個選項佔據半開區間 [cumulative, cumulative + weight)
    - r 落在哪個區間就選哪個

    範例（A 權重 1、B 權重 3，total = 4）：
        random_draw = 0.0   -> r = 0.0 -> A
        random_draw = 0.25  -> r = 1.0 -> B（1.0 是 B 區間的起點，不屬於 A）
        random_draw = 0.99  -> r = 3.96 -> B

    參數：
        options: 選項（順序有意義）
        random_draw: [0, 1) 之間的隨機數

    返回：
        被選中的 Option

    異常：
        ValueError: options 為空
    """
    if not options:
        raise ValueError("Cannot choose from an empty option list")

    # 總和溢位時，先除以最大權重再走訪（比例不變）
    scale = 1.0
    total_weight = sum(option.weight for option in options)
    if not math.isfinite(total_weight):
        scale = max(option.weight for option in options)
        total_weight = sum(option.weight / scale for option in options)
    r = random_draw * total_weight

    cumulative = 0.0
    for option in options:
        weight = option.weight / scale
        if cumulative + weight > r:
            return option
        cumulative += weight

    # 浮點誤差導致沒有命中任何區間
    return options[-1]
