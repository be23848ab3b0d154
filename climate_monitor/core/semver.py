"""
Semantic version validation for Climate Monitor.

This module contains a pure format gate for firmware version strings
following the SemVer 2.0.0 grammar. Versions are never parsed into numbers.
"""

import re
from typing import Any

# SemVer 2.0.0 (https://semver.org) - 숫자 식별자는 0 또는 선행 0 없는 정수
_NUMERIC = r"0|[1-9]\d*"
_PRERELEASE_ID = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_ID = r"[0-9a-zA-Z-]+"

SEMVER_PATTERN = re.compile(
    rf"(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    rf"(?:\+(?P<build>{_BUILD_ID}(?:\.{_BUILD_ID})*))?",
    re.ASCII,
)

def is_valid_semver(value: Any) -> bool:
    """
    문자열이 SemVer 2.0.0 문법에 완전히 일치하는지 확인합니다.

    Args:
        value: 검사할 펌웨어 버전 문자열

    Returns:
        문법 일치 여부 (부분 일치는 불일치로 처리)
    """
    if not isinstance(value, str):
        return False
    return SEMVER_PATTERN.fullmatch(value) is not None
