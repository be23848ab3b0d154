# climate_monitor/settings.py
from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

class DeviceAuth(BaseModel):
    secrets: List[str] = Field(default_factory=list)
    secrets_db_path: Optional[str] = None     # 설정 시 SQLite 저장소 사용
    header_name: str = "x-device-shared-secret"

class AlertThresholds(BaseModel):
    # None 이면 해당 규칙 비활성
    temperature_min: Optional[float] = None
    temperature_max: Optional[float] = None
    humidity_min: Optional[float] = None
    humidity_max: Optional[float] = None
    # 센서가 낼 수 있는 값의 범위 (벗어나면 humidity_implausible)
    humidity_plausible_min: Optional[float] = None
    humidity_plausible_max: Optional[float] = None

    @model_validator(mode="after")
    def _check_ranges(self) -> "AlertThresholds":
        for name in ("temperature", "humidity", "humidity_plausible"):
            lo = getattr(self, f"{name}_min")
            hi = getattr(self, f"{name}_max")
            if lo is not None and hi is not None and lo > hi:
                raise ValueError(f"{name}_min({lo}) > {name}_max({hi})")
        return self

class Observability(BaseModel):
    http_host: str = "0.0.0.0"
    http_port: int = 8080
    metrics_enabled: bool = True
    service_name: str = "ClimateMonitor"
    build_version: str = "0.1.0"
    build_date: str = "2026-01-01"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return level

class Settings(BaseModel):
    # 하위 섹션 (기본값/팩토리로 누락 방지)
    device_auth: DeviceAuth = Field(default_factory=DeviceAuth)
    thresholds: AlertThresholds = Field(default_factory=AlertThresholds)
    observability: Observability = Field(default_factory=Observability)
