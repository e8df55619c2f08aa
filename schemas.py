"""
API 請求 / 回應格式（Pydantic models）

請求欄位刻意寬鬆（Any），型別與內容的驗證交給 core，
確保錯誤訊息與「整批拒絕」的規則只在一個地方實作。
"""
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


# ============ Requests ============

class WheelCreate(BaseModel):
    options: Any = None


class SpinSubmit(BaseModel):
    name: Any = None
    phone: Any = None


# ============ Responses ============

class WheelCreateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    link: str
    results_link: str = Field(..., alias="resultsLink")


class OptionResponse(BaseModel):
    label: str
    weight: float


class WheelResponse(BaseModel):
    id: str
    options: List[OptionResponse]


class SpinResponse(BaseModel):
    result: str


class SpinResultResponse(BaseModel):
    name: str
    phone: str
    result: str
    timestamp: int = Field(..., description="Epoch milliseconds")


class WheelResultsResponse(BaseModel):
    id: str
    results: List[SpinResultResponse]
