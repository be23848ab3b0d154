"""
Validation gates for Climate Monitor.

Each gate is a stage that either lets a request continue or terminates
it with a tagged failure. Gates run in a fixed order, first failure wins.
"""

import inspect
from dataclasses import dataclass
from typing import Optional
from climate_monitor.core.models import DeviceReading, FailureKind, FIRMWARE_FIELD
from climate_monitor.core.semver import is_valid_semver
from climate_monitor.ports.secrets import DeviceSecretPort

SECRET_REJECTED = "Device secret is not within the valid range."
FIRMWARE_REJECTED = "The firmware value does not match semantic versioning format."

@dataclass(frozen=True)
class GateResult:
    passed: bool
    failure: Optional[FailureKind] = None
    field: Optional[str] = None
    detail: str = ""

PASS = GateResult(passed=True)

def fail(kind: FailureKind, detail: str, field: Optional[str] = None) -> GateResult:
    return GateResult(passed=False, failure=kind, field=field, detail=detail)

class SecretGate:
    """장치 공유 비밀 검증 게이트"""

    name = "secret"

    def __init__(self, secrets: DeviceSecretPort):
        self.secrets = secrets

    async def check(self, secret: Optional[str], reading: DeviceReading) -> GateResult:
        if not secret:
            return fail(FailureKind.AUTHENTICATION_FAILURE, SECRET_REJECTED)
        ok = self.secrets.is_authorized(secret)
        # 동기/비동기 저장소 모두 지원
        if inspect.isawaitable(ok):
            ok = await ok
        if ok is not True:  # 명시적 True 만 허용
            return fail(FailureKind.AUTHENTICATION_FAILURE, SECRET_REJECTED)
        return PASS

class FirmwareGate:
    """펌웨어 버전 형식 검증 게이트"""

    name = "firmware"

    async def check(self, secret: Optional[str], reading: DeviceReading) -> GateResult:
        if not is_valid_semver(reading.firmware_version):
            return fail(FailureKind.MALFORMED_INPUT, FIRMWARE_REJECTED, field=FIRMWARE_FIELD)
        return PASS
