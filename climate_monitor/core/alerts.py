"""
Alert evaluation for Climate Monitor.

This module contains the pure rule set that turns a validated
device reading into an ordered list of alerts.
"""

from typing import Callable, List, Optional, Tuple
from climate_monitor.core.models import Alert, DeviceReading
from climate_monitor.settings import AlertThresholds
from climate_monitor.observability.logging_setup import get_logger

log = get_logger("climate_monitor.alerts")

Rule = Callable[[DeviceReading, AlertThresholds], Optional[Alert]]

def _below(field: str, kind: str, attr: str) -> Rule:
    def rule(reading: DeviceReading, thresholds: AlertThresholds) -> Optional[Alert]:
        limit = getattr(thresholds, attr)
        value = getattr(reading, field)
        if limit is None or value >= limit:
            return None
        return Alert(kind=kind, field=field, value=value, limit=limit,
                     message=f"{field}({value}) < min({limit})")
    return rule

def _above(field: str, kind: str, attr: str) -> Rule:
    def rule(reading: DeviceReading, thresholds: AlertThresholds) -> Optional[Alert]:
        limit = getattr(thresholds, attr)
        value = getattr(reading, field)
        if limit is None or value <= limit:
            return None
        return Alert(kind=kind, field=field, value=value, limit=limit,
                     message=f"{field}({value}) > max({limit})")
    return rule

def _humidity_implausible(reading: DeviceReading, thresholds: AlertThresholds) -> Optional[Alert]:
    lo, hi = thresholds.humidity_plausible_min, thresholds.humidity_plausible_max
    value = reading.humidity
    if lo is not None and value < lo:
        limit = lo
    elif hi is not None and value > hi:
        limit = hi
    else:
        return None
    return Alert(kind="humidity_implausible", field="humidity", value=value, limit=limit,
                 message=f"humidity({value}) outside plausible range [{lo}, {hi}]")

# 평가 순서 = 출력 순서
RULES: Tuple[Rule, ...] = (
    _below("temperature", "temperature_too_low", "temperature_min"),
    _above("temperature", "temperature_too_high", "temperature_max"),
    _humidity_implausible,
    _below("humidity", "humidity_too_low", "humidity_min"),
    _above("humidity", "humidity_too_high", "humidity_max"),
)

class AlertEvaluator:
    """임계값 기반 경보 평가기"""

    def __init__(self, thresholds: Optional[AlertThresholds] = None,
                 rules: Tuple[Rule, ...] = RULES):
        """
        초기화합니다.

        Args:
            thresholds: 경보 임계값 설정 (None이면 모든 임계값 규칙 비활성)
            rules: 평가할 규칙 목록 (순서대로 평가)
        """
        self.thresholds = thresholds or AlertThresholds()
        self.rules = rules

    def evaluate(self, reading: DeviceReading) -> List[Alert]:
        """
        측정값에 모든 규칙을 독립적으로 적용합니다.

        Args:
            reading: 게이트를 통과한 측정값

        Returns:
            발생한 경보 목록 (빈 목록은 정상 측정값)
        """
        alerts: List[Alert] = []
        for rule in self.rules:
            alert = rule(reading, self.thresholds)
            if alert is not None:
                alerts.append(alert)
        if alerts:
            log.info(f"경보 {len(alerts)}건 발생: {[a.kind for a in alerts]}")
        else:
            log.debug("정상 측정값, 경보 없음")
        return alerts
