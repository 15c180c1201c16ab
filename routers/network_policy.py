"""
NetworkPolicy API Router
- 두 워크로드 간 트래픽 차단 정책 생성
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from core.kubernetes import K8sClients, get_k8s_clients
from models.network_policy import DenyNetworkRequest
from services.network_policy import DenyPolicyBuilder

logger = logging.getLogger(__name__)

router = APIRouter(tags=["network-policy"])


async def parse_deny_request(request: Request) -> DenyNetworkRequest:
    """요청 본문 전체를 JSON으로 디코딩 (Content-Type 무관)"""
    body = await request.body()
    try:
        return DenyNetworkRequest.model_validate_json(body)
    except ValidationError as e:
        logger.info(f"Rejected deny network policy body: {e.errors()}")
        raise HTTPException(status_code=400, detail="Error parsing JSON")


def get_deny_policy_builder(
    clients: K8sClients = Depends(get_k8s_clients),
) -> DenyPolicyBuilder:
    return DenyPolicyBuilder(clients.core_v1, clients.custom_objects)


@router.post("/denyNetworkPolicy", response_class=PlainTextResponse)
def create_deny_network_policy(
    deny_request: DenyNetworkRequest = Depends(parse_deny_request),
    builder: DenyPolicyBuilder = Depends(get_deny_policy_builder),
):
    """워크로드 A <-> B 트래픽 차단 정책 생성, 생성된 정책 이름 반환"""
    try:
        return builder.create_deny_policy(deny_request)
    except Exception as e:
        logger.error(f"Failed to create deny network policy: {e}")
        raise HTTPException(status_code=500, detail=str(e))
