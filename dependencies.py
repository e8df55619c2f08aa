from fastapi import Request

from core.wheel_service import WheelService


def get_wheel_service(request: Request) -> WheelService:
    """
    FastAPI dependency：提供 WheelService

    Service（以及它持有的 registry）在 lifespan 啟動時建立，
    存放在 app.state，整個 process 共用同一份。
    """
    return request.app.state.wheel_service
