import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from flexcoach.api import include_all_routers
from flexcoach.config.settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# 앱 생성
app = FastAPI(debug=settings.DEBUG_MODE)

# 자동으로 flexcoach/api/* 모듈을 스캔해 라우터 전부 등록
include_all_routers(app)

app.openapi = lambda: get_openapi(
    title="Elbow Flexion Coach API",
    version="1.0.0",
    description="팔꿈치 굴곡 운동 실시간 피드백 API",
    routes=app.routes,
)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("flexcoach.main:app", host="0.0.0.0", port=settings.FASTAPI_PORT, reload=True)
