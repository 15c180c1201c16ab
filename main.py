"""
Workload Guard API

API 구조:
- /healthz                 - 헬스체크
- /clusterdeploymentsinfo  - Deployment ready / failed 상태
- /denyNetworkPolicy       - 워크로드 간 Calico 차단 정책 생성
"""

import argparse
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings, parse_listen_address
from core.kubernetes import connect_k8s_clients
from routers import health_router, deployments_router, network_policy_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 클러스터 연결 실패 시 서버를 시작하지 않음
    if getattr(app.state, "k8s_clients", None) is None:
        app.state.k8s_clients = connect_k8s_clients(settings.KUBECONFIG)
    yield


app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)


# ============================================
# 에러 응답 (text/plain)
# ============================================
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return PlainTextResponse("Error parsing JSON", status_code=400)


# ============================================
# 라우터 등록
# ============================================
app.include_router(health_router)
app.include_router(deployments_router)
app.include_router(network_policy_router)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description=settings.APP_TITLE)
    parser.add_argument("--kubeconfig", default=settings.KUBECONFIG,
                        help="path to kubeconfig, leave empty for in-cluster")
    parser.add_argument("--address", default=settings.LISTEN_ADDRESS,
                        help="HTTP server listen address")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings.KUBECONFIG = args.kubeconfig
    settings.LISTEN_ADDRESS = args.address
    host, port = parse_listen_address(args.address)

    import uvicorn
    logger.info(f"Server listening on {args.address}")
    uvicorn.run(app, host=host, port=port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
