"""
Calico selector 표현식 헬퍼
"""
from typing import Dict, Optional


def render_selector(labels: Optional[Dict[str, str]]) -> str:
    """라벨 맵을 Calico selector 문자열로 변환

    {"app": "web", "tier": "fe"} -> "app == 'web' && tier == 'fe'"

    빈 맵은 빈 문자열(전체 선택)이 된다. 키는 정렬 순서로 렌더링한다.
    키/값은 이스케이프하지 않으므로 값에 작은따옴표가 있으면
    selector가 깨진다.
    """
    if not labels:
        return ""
    return " && ".join(f"{key} == '{value}'" for key, value in sorted(labels.items()))
