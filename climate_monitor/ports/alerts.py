"""
Alert evaluation port interface.

This module defines the protocol for alert evaluation.
"""

from typing import List, Protocol
from climate_monitor.core.models import Alert, DeviceReading

class AlertEvaluatorPort(Protocol):
    """경보 평가 포트 인터페이스"""
    
    def evaluate(self, reading: DeviceReading) -> List[Alert]:
        """
        검증된 측정값을 평가합니다.
        
        Args:
            reading: 두 게이트를 통과한 측정값
            
        Returns:
            경보 목록 (빈 목록은 정상)
        """
        ...
