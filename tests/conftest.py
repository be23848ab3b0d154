"""
테스트 설정 및 픽스처

이 모듈은 pytest 설정과 공통 픽스처를 제공합니다.
"""

import pytest
import inspect
import tempfile
import os
from unittest.mock import Mock
from climate_monitor.settings import Settings, AlertThresholds
from climate_monitor.core.models import DeviceReading


VALID_SECRET = "valid-secret"


@pytest.fixture
def temp_db_path():
    """임시 데이터베이스 파일 경로"""
    with tempfile.NamedTemporaryFile(suffix='.db', delete=False) as f:
        temp_path = f.name
    yield temp_path
    # 테스트 후 파일 정리
    if os.path.exists(temp_path):
        os.unlink(temp_path)


@pytest.fixture
def sample_thresholds():
    """테스트용 경보 임계값"""
    return AlertThresholds(
        temperature_min=0.0,
        temperature_max=40.0,
        humidity_min=20.0,
        humidity_max=80.0,
        humidity_plausible_min=0.0,
        humidity_plausible_max=100.0
    )


@pytest.fixture
def sample_settings(sample_thresholds):
    """테스트용 설정"""
    settings = Settings()
    settings.device_auth.secrets = [VALID_SECRET, "another-secret"]
    settings.thresholds = sample_thresholds
    settings.observability.service_name = "test-service"
    settings.observability.build_version = "1.0.0"
    settings.observability.log_level = "INFO"
    return settings


@pytest.fixture
def nominal_reading():
    """테스트용 정상 측정값"""
    return DeviceReading(temperature=21.5, humidity=45.0, firmwareVersion="1.2.3")


@pytest.fixture
def mock_secret_store():
    """테스트용 비밀 저장소 (valid-secret 만 허용)"""
    store = Mock()
    store.is_authorized = Mock(side_effect=lambda s: s == VALID_SECRET)
    return store


@pytest.fixture
def mock_evaluator():
    """테스트용 경보 평가기 (항상 빈 목록)"""
    evaluator = Mock()
    evaluator.evaluate = Mock(return_value=[])
    return evaluator


# pytest 설정
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "asyncio: 비동기 테스트 마커"
    )
    config.addinivalue_line(
        "markers", "integration: 통합 테스트 마커"
    )


def pytest_collection_modifyitems(config, items):
    """테스트 아이템 수정"""
    for item in items:
        # 비동기 테스트에 asyncio 마커 추가
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)

        # 통합 테스트 마커 추가
        if "integration" in item.name:
            item.add_marker(pytest.mark.integration)
