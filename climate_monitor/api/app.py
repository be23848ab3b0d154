"""
HTTP endpoints for Climate Monitor.

This module implements the reading evaluation endpoint together with
health, readiness, metrics, and info endpoints for operational visibility.
"""

import time
from typing import Dict, List, Optional
from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from climate_monitor.adapters.secrets import secret_store_from_settings
from climate_monitor.api.problems import field_key, problem, validation_problem
from climate_monitor.core.alerts import AlertEvaluator
from climate_monitor.core.models import Alert, DeviceReading
from climate_monitor.observability.logging_setup import get_logger
from climate_monitor.orchestrators.readings import ReadingOrchestrator
from climate_monitor.settings import Settings

log = get_logger("climate_monitor.api")

def create_app(settings: Settings, orchestrator: Optional[ReadingOrchestrator] = None) -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title=settings.observability.service_name,
        version=settings.observability.build_version,
        description="Climate Monitor device reading ingestion service"
    )

    if orchestrator is None:
        orchestrator = ReadingOrchestrator(
            secret_store_from_settings(settings.device_auth),
            AlertEvaluator(settings.thresholds),
        )
    app.state.orchestrator = orchestrator
    start_time = time.time()

    @app.exception_handler(RequestValidationError)
    async def on_validation_error(request: Request, exc: RequestValidationError):
        """요청 바인딩 실패를 필드별 400 응답으로 변환"""
        errors: Dict[str, List[str]] = {}
        for err in exc.errors():
            errors.setdefault(field_key(err.get("loc", ())), []).append(err.get("msg", "invalid"))
        log.warning(f"요청 바인딩 실패 fields:{sorted(errors)}")
        return validation_problem(errors, "One or more validation errors occurred.")

    @app.post("/readings/evaluate", response_model=List[Alert])
    async def evaluate_reading(
        reading: DeviceReading,
        device_secret: Optional[str] = Header(default=None, alias=settings.device_auth.header_name),
    ):
        """
        장치 측정값을 평가하고 발생 가능한 경보를 반환합니다.

        구형 장치는 FirmwareVersion 형식 오류를 받으면
        별도 서비스에 펌웨어 업데이트를 요청합니다.
        """
        outcome = await app.state.orchestrator.handle(device_secret, reading)
        if outcome.status == "unauthorized":
            return problem(401, "Unauthorized", outcome.detail)
        if outcome.status == "malformed":
            return validation_problem(outcome.errors, outcome.detail, outcome.detail)
        return outcome.alerts

    @app.get("/health")
    async def health():
        """헬스 체크 엔드포인트"""
        return JSONResponse({
            "status": "ok",
            "service": settings.observability.service_name,
            "timestamp": time.time()
        })

    @app.get("/ready")
    async def ready():
        """레디니스 체크 엔드포인트"""
        return JSONResponse({
            "status": "ready",
            "service": settings.observability.service_name,
            "timestamp": time.time()
        })

    @app.get("/metrics")
    async def metrics():
        """Prometheus 메트릭 엔드포인트"""
        if not settings.observability.metrics_enabled:
            raise HTTPException(status_code=503, detail="Metrics disabled")
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/info")
    async def info():
        """서비스 정보 엔드포인트"""
        uptime = time.time() - start_time
        return JSONResponse({
            "service": settings.observability.service_name,
            "version": settings.observability.build_version,
            "build_date": settings.observability.build_date,
            "uptime_seconds": int(uptime),
            "metrics_enabled": settings.observability.metrics_enabled,
            "log_level": settings.observability.log_level
        })

    @app.get("/")
    async def root():
        """루트 엔드포인트"""
        return JSONResponse({
            "service": settings.observability.service_name,
            "version": settings.observability.build_version,
            "endpoints": {
                "evaluate": "/readings/evaluate",
                "health": "/health",
                "ready": "/ready",
                "metrics": "/metrics",
                "info": "/info"
            }
        })

    return app
