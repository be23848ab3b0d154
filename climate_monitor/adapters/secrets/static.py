"""
In-memory device secret store for Climate Monitor.
"""

import hmac
from typing import Iterable
from climate_monitor.observability.logging_setup import get_logger

log = get_logger("climate_monitor.secrets")

class StaticSecretStore:
    """설정으로 주어진 고정 비밀 집합"""
    
    def __init__(self, secrets: Iterable[str]):
        # 빈 문자열은 비밀로 취급하지 않음
        self._secrets = tuple(frozenset(s for s in secrets if s))
        log.info(f"StaticSecretStore 초기화: {len(self._secrets)}개 비밀")
    
    def __len__(self) -> int:
        return len(self._secrets)
    
    def is_authorized(self, secret: str) -> bool:
        """
        제시된 비밀을 모든 허용 비밀과 상수 시간 비교합니다.
        
        Args:
            secret: 장치가 제시한 공유 비밀
            
        Returns:
            허용 여부
        """
        if not isinstance(secret, str) or not secret:
            return False
        presented = secret.encode("utf-8")
        matched = False
        # 조기 종료 없이 전체 집합 비교
        for known in self._secrets:
            matched |= hmac.compare_digest(presented, known.encode("utf-8"))
        return matched
