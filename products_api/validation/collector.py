import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from fastapi import Request

from products_api.exceptions import RequestValidationFailed
from products_api.validation.rules import BODY, DISPATCH_TABLE, Rule, evaluate
from products_api.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_JSON = "JSON no válido"


@dataclass
class ValidatedRequest:
    """Request snapshot that passed every rule of its route"""

    params: Dict[str, Any] = field(default_factory=dict)
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def id(self) -> int:
        return int(self.params["id"])


async def read_body(request: Request) -> Dict[str, Any]:
    """JSON object body of the request; anything else reads as empty"""
    content_type = request.headers.get("content-type", "")
    if "json" not in content_type:
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        payload = json.loads(raw)
    except ValueError as e:
        raise RequestValidationFailed([
            {"type": "field", "msg": INVALID_JSON, "path": "", "location": BODY}
        ]) from e

    if not isinstance(payload, dict):
        return {}
    return payload


def collect_errors(rules: List[Rule]):
    """Build the dependency that runs `rules` and halts the chain on failure"""

    async def dependency(request: Request) -> ValidatedRequest:
        params = dict(request.path_params)
        payload = await read_body(request) if any(r.location == BODY for r in rules) else {}

        errors = evaluate(rules, params, payload)
        if errors:
            logger.debug("{} {} rejected with {} error(s)", request.method, request.url.path, len(errors))
            raise RequestValidationFailed(errors)

        return ValidatedRequest(params=params, body=payload)

    return dependency


def validated(method: str, path: str):
    """Error collector for the route registered as (method, path)"""
    return collect_errors(DISPATCH_TABLE[(method, path)])
