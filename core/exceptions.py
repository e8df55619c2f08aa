"""
自定義異常類別

集中管理所有業務邏輯異常，方便 API 層統一處理
"""


class WheelServiceException(Exception):
    """所有轉盤服務異常的基類"""
    pass


# ============ 輸入驗證異常 ============

class ValidationError(WheelServiceException):
    """輸入資料不合法（呼叫者可自行修正，伺服器不重試）"""
    pass


# ============ Wheel 相關異常 ============

class WheelNotFound(WheelServiceException):
    """轉盤不存在"""
    def __init__(self, wheel_id):
        self.wheel_id = wheel_id
        super().__init__(f"Wheel {wheel_id} not found")


class AllocationExhausted(WheelServiceException):
    """Wheel ID 連續碰撞，超過重試上限"""
    def __init__(self, attempts):
        self.attempts = attempts
        super().__init__(f"Could not allocate wheel id after {attempts} attempts")
