"""
Wheel API Endpoints

職責：
1. 建立 Wheel（管理者 endpoint）
2. 查詢 Wheel 選項
3. 轉動（參與者 endpoint）
4. 查詢轉動紀錄

所有業務邏輯集中在 WheelService，這裡只負責轉換 HTTP 狀態碼
"""
from fastapi import APIRouter, Depends, HTTPException, Path
import logging

from dependencies import get_wheel_service
from schemas import (
    WheelCreate,
    WheelCreateResponse,
    WheelResponse,
    SpinSubmit,
    SpinResponse,
    WheelResultsResponse
)
from core.wheel_service import WheelService
from core.exceptions import ValidationError, WheelNotFound, AllocationExhausted

router = APIRouter(prefix="/api", tags=["wheels"])
logger = logging.getLogger(__name__)

WHEEL_ID_PATTERN = r"^[a-zA-Z0-9_-]+$"


@router.post("/wheels", response_model=WheelCreateResponse, status_code=201)
def create_wheel(
    wheel_data: WheelCreate,
    service: WheelService = Depends(get_wheel_service)
):
    """
    建立新的 Wheel

    前置條件：
    - options 必須是非空陣列
    - 每個選項都要有非空 label 與正數 weight

    返回：
        - id: Wheel ID
        - link: 分享給參與者的轉盤頁面
        - resultsLink: 管理者查看結果的頁面
    """
    try:
        created = service.create_wheel(wheel_data.options)
        return WheelCreateResponse(**created)

    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AllocationExhausted:
        raise HTTPException(status_code=500, detail="Could not allocate id")
    except Exception as e:
        logger.error(f"Failed to create wheel: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/wheel/{wheel_id}", response_model=WheelResponse)
def get_wheel(
    wheel_id: str = Path(..., pattern=WHEEL_ID_PATTERN),
    service: WheelService = Depends(get_wheel_service)
):
    """
    取得 Wheel 選項（參與者頁面用來畫轉盤）
    """
    try:
        return service.describe_wheel(wheel_id)

    except WheelNotFound:
        raise HTTPException(status_code=404, detail="Wheel not found")
    except Exception as e:
        logger.error(f"Failed to get wheel: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("/wheel/{wheel_id}/spin", response_model=SpinResponse)
def spin_wheel(
    spin_data: SpinSubmit,
    wheel_id: str = Path(..., pattern=WHEEL_ID_PATTERN),
    service: WheelService = Depends(get_wheel_service)
):
    """
    參與者轉動一次

    參數：
        wheel_id: Wheel ID
        spin_data: 包含 name 和 phone

    返回：
        - result: 被選中的選項 label
    """
    try:
        return service.spin(wheel_id, spin_data.name, spin_data.phone)

    except WheelNotFound:
        raise HTTPException(status_code=404, detail="Wheel not found")
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to spin wheel: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/wheel/{wheel_id}/results", response_model=WheelResultsResponse)
def get_wheel_results(
    wheel_id: str = Path(..., pattern=WHEEL_ID_PATTERN),
    service: WheelService = Depends(get_wheel_service)
):
    """
    取得所有轉動紀錄（依轉動順序）

    返回：
        - id: Wheel ID
        - results: [{name, phone, result, timestamp}, ...]
    """
    try:
        return service.list_results(wheel_id)

    except WheelNotFound:
        raise HTTPException(status_code=404, detail="Wheel not found")
    except Exception as e:
        logger.error(f"Failed to get wheel results: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")
