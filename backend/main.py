# backend/main.py
# VA Starter Track - CRM 웹훅 → 프로필 페이지 서비스

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import CFG
from core.logging import setup_logging
from store import record_store

# 라우터 임포트
from webhooks.crm_webhook import router as webhook_router, WEBHOOK_PATHS
from pages.api import router as pages_router
from tracker.api import router as tracker_router, EMBED_PATHS

setup_logging()
logger = logging.getLogger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 라이프사이클"""
    logger.info(
        "%s starting (store mode=%s, port=%s)",
        CFG.SERVICE_NAME, record_store.mode, CFG.PORT,
    )
    yield
    logger.info("%s stopping (%d records dropped)", CFG.SERVICE_NAME, record_store.count())


app = FastAPI(
    title="VA Starter Track",
    description="""
## VA Starter Track Profile Tracker

### 기능
- **Webhook**: CRM 클라이언트 프로필 웹훅 수신 → 인메모리 저장
- **Pages**: uid별 개요 페이지 + 마이크로사이트 섹션 페이지
- **Tracker**: 임베드 스크립트 + 조회/클릭 이벤트 (저장 없음)

### 저장소
- 프로세스 메모리 (재시작 시 초기화)
    """,
    version=CFG.VERSION,
    lifespan=lifespan
)

# CORS (임베드 스크립트가 외부 페이지에서 이벤트 전송)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(webhook_router, tags=["Webhook - CRM"])
app.include_router(pages_router)
app.include_router(tracker_router)


@app.get("/")
async def root():
    """API 정보"""
    return {
        "service": CFG.SERVICE_NAME,
        "version": CFG.VERSION,
        "endpoints": {
            "health": ["/health"],
            "webhooks": list(WEBHOOK_PATHS),
            "pages": [
                f"{CFG.ROUTE_PREFIX}/{{uid}}/overview",
                f"{CFG.ROUTE_PREFIX}/{{uid}}/debug",
                f"{CFG.ROUTE_PREFIX}/p/{{uid}}/{{section}}"
            ],
            "tracker": list(EMBED_PATHS) + [f"{CFG.ROUTE_PREFIX}/e/{{event}}"]
        }
    }


@app.get("/health")
async def health():
    """헬스체크"""
    return {"ok": True, "service": CFG.SERVICE_NAME}


# 직접 실행 시
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=CFG.HOST, port=CFG.PORT)
