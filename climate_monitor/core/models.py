"""
Core domain models for Climate Monitor.

This module defines the core domain models using Pydantic v2
for type safety and validation.
"""

from enum import Enum
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

# 경보 종류 정의
AlertKind = Literal[
    "temperature_too_low",
    "temperature_too_high",
    "humidity_implausible",
    "humidity_too_low",
    "humidity_too_high",
]

# 처리 결과 상태
OutcomeStatus = Literal["unauthorized", "malformed", "evaluated"]

# 펌웨어 오류가 귀속되는 필드명 (구형 장치가 이 키로 업데이트 여부를 판단)
FIRMWARE_FIELD = "FirmwareVersion"

class DeviceReading(BaseModel):
    """장치 센서 측정값 모델"""
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    temperature: float
    humidity: float
    firmware_version: str = Field(default="", alias="firmwareVersion")

class Alert(BaseModel):
    """경보 모델"""
    kind: AlertKind
    field: Literal["temperature", "humidity"]
    value: float
    limit: float
    message: str

class FailureKind(str, Enum):
    """게이트 실패 종류"""
    AUTHENTICATION_FAILURE = "authentication_failure"
    MALFORMED_INPUT = "malformed_input"

class Outcome(BaseModel):
    """요청 처리 결과 모델"""
    status: OutcomeStatus
    alerts: List[Alert] = Field(default_factory=list)
    errors: Dict[str, List[str]] = Field(default_factory=dict)
    detail: Optional[str] = None

    @classmethod
    def unauthorized(cls, detail: str) -> "Outcome":
        return cls(status="unauthorized", detail=detail)

    @classmethod
    def malformed(cls, field: str, detail: str) -> "Outcome":
        return cls(status="malformed", errors={field: [detail]}, detail=detail)

    @classmethod
    def evaluated(cls, alerts: List[Alert]) -> "Outcome":
        # 평가기가 만든 목록을 재검증 없이 그대로 보관
        return cls.model_construct(status="evaluated", alerts=alerts, errors={}, detail=None)
