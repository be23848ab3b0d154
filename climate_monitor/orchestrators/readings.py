"""
Reading orchestrator for Climate Monitor.

This module sequences the validation gates and the alert evaluator
for a single device request: secret -> firmware -> evaluation.
"""

from typing import List, Optional, Sequence
from climate_monitor.core.gates import FirmwareGate, GateResult, SecretGate
from climate_monitor.core.models import DeviceReading, FailureKind, Outcome
from climate_monitor.observability import metrics
from climate_monitor.observability.logging_setup import get_logger
from climate_monitor.ports.alerts import AlertEvaluatorPort
from climate_monitor.ports.secrets import DeviceSecretPort

log = get_logger("climate_monitor.orchestrator")

class ReadingOrchestrator:
    """측정값 처리 오케스트레이터"""

    def __init__(self,
                 secrets: DeviceSecretPort,
                 evaluator: AlertEvaluatorPort,
                 *,
                 gates: Optional[Sequence] = None):
        """
        초기화합니다.

        Args:
            secrets: 장치 비밀 조회 포트
            evaluator: 경보 평가 포트
            gates: 게이트 목록 (기본: 비밀 -> 펌웨어)
        """
        self.secrets = secrets
        self.evaluator = evaluator
        self.gates: List = list(gates) if gates is not None else [SecretGate(secrets), FirmwareGate()]

    async def handle(self, secret: Optional[str], reading: DeviceReading) -> Outcome:
        """
        요청 하나를 처리합니다.

        게이트를 순서대로 실행하고 첫 실패에서 중단합니다.
        모든 게이트를 통과한 경우에만 경보 평가기를 호출합니다.

        Args:
            secret: 장치가 제시한 공유 비밀 (없으면 None)
            reading: 측정값

        Returns:
            처리 결과
        """
        metrics.readings_received.inc()
        with metrics.evaluation_seconds.time():
            for gate in self.gates:
                result: GateResult = await gate.check(secret, reading)
                if not result.passed:
                    return self._rejected(gate.name, result)

            alerts = self.evaluator.evaluate(reading)

        metrics.readings_evaluated.inc()
        for alert in alerts:
            metrics.alerts_raised.labels(kind=alert.kind).inc()
        return Outcome.evaluated(alerts)

    def _rejected(self, gate_name: str, result: GateResult) -> Outcome:
        metrics.readings_rejected.labels(reason=result.failure.value).inc()
        if result.failure is FailureKind.AUTHENTICATION_FAILURE:
            # 비밀 값은 로그에 남기지 않음
            log.warning(f"게이트 거부 gate:{gate_name} reason:{result.failure.value}")
            return Outcome.unauthorized(result.detail)
        log.warning(f"게이트 거부 gate:{gate_name} reason:{result.failure.value} field:{result.field}")
        return Outcome.malformed(result.field or "reading", result.detail)
