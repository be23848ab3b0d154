# climate_monitor/main.py
import os, asyncio
from typing import Optional
from climate_monitor.settings import Settings
from climate_monitor.observability.logging_setup import setup_logging_dev, get_logger
from climate_monitor.observability.server import run_http_server
from climate_monitor.adapters.secrets import StaticSecretStore, SQLiteSecretStore, secret_store_from_settings
from climate_monitor.core.alerts import AlertEvaluator
from climate_monitor.orchestrators.readings import ReadingOrchestrator
from climate_monitor.api.app import create_app

def _b(name, default=False): return os.getenv(name, str(default)).lower() in ("1","true","yes","on")

def _f(name, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "": return default
    return float(raw)

def build_settings() -> Settings:
    s = Settings()

    # 장치 인증
    secrets = os.getenv("DEVICE_SECRETS")
    if secrets is not None:
        s.device_auth.secrets = [x.strip() for x in secrets.split(",") if x.strip()]
    s.device_auth.secrets_db_path = os.getenv("DEVICE_SECRETS_DB", s.device_auth.secrets_db_path)
    s.device_auth.header_name = os.getenv("DEVICE_SECRET_HEADER", s.device_auth.header_name)

    # 경보 임계값
    s.thresholds.temperature_min = _f("TEMPERATURE_MIN", s.thresholds.temperature_min)
    s.thresholds.temperature_max = _f("TEMPERATURE_MAX", s.thresholds.temperature_max)
    s.thresholds.humidity_min = _f("HUMIDITY_MIN", s.thresholds.humidity_min)
    s.thresholds.humidity_max = _f("HUMIDITY_MAX", s.thresholds.humidity_max)
    s.thresholds.humidity_plausible_min = _f("HUMIDITY_PLAUSIBLE_MIN", s.thresholds.humidity_plausible_min)
    s.thresholds.humidity_plausible_max = _f("HUMIDITY_PLAUSIBLE_MAX", s.thresholds.humidity_plausible_max)

    # 관측성
    s.observability.http_host = os.getenv("HTTP_HOST", s.observability.http_host)
    s.observability.http_port = int(os.getenv("HTTP_PORT", s.observability.http_port))
    s.observability.metrics_enabled = _b("METRICS_ENABLED", s.observability.metrics_enabled)
    s.observability.log_level = os.getenv("LOG_LEVEL", s.observability.log_level)

    # 속성 대입은 검증을 거치지 않으므로 재검증
    return Settings.model_validate(s.model_dump())

async def build_secret_store(s: Settings):
    store = secret_store_from_settings(s.device_auth)
    if isinstance(store, SQLiteSecretStore):
        await store.init()
    return store

def main():
    s = build_settings()
    setup_logging_dev(s.observability.log_level)
    log = get_logger()
    log.info("설정 로드 완료")

    store = asyncio.run(build_secret_store(s))
    log.info(f"비밀 저장소 생성 완료: {type(store).__name__}")
    if isinstance(store, StaticSecretStore) and len(store) == 0:
        log.warning("허용된 장치 비밀이 없음, 모든 요청이 거부됩니다")

    orch = ReadingOrchestrator(store, AlertEvaluator(s.thresholds))
    log.info("오케스트레이터 생성 완료")

    run_http_server(s, create_app(s, orch))

if __name__ == "__main__":
    main()
