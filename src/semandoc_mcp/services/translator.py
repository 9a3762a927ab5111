"""Translate validated tool invocations into backend HTTP requests"""

import json
import logging
import math
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from ..config import BackendConfig
from ..models.tool import ToolDefinition, ToolResult
from .errors import BackendRequestError

logger = logging.getLogger(__name__)

# Integers beyond this lose precision as IEEE doubles
MAX_SAFE_INTEGER = 2**53 - 1


def format_number(value: float) -> str:
    """Render a number the way ECMAScript Number.prototype.toString does

    Whole numbers drop the fraction (1.0 -> "1"), and exponents are only
    used outside 1e-7 <= |value| < 1e21 (1e21 -> "1e+21", 1e-7 -> "1e-7").
    """
    if math.isnan(value) or math.isinf(value):
        return "null"
    if value == 0:
        return "0"

    mantissa, _, exponent = repr(abs(value)).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    digits = int_part + frac_part
    stripped = digits.lstrip("0")
    # value == 0.<digits> * 10**point
    point = len(int_part) - (len(digits) - len(stripped)) + int(exponent or 0)
    digits = stripped.rstrip("0")
    size = len(digits)

    if size <= point <= 21:
        text = digits + "0" * (point - size)
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        power = point - 1
        sign = "+" if power >= 0 else "-"
        head = digits if size == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{head}e{sign}{abs(power)}"

    return "-" + text if value < 0 else text


def _number_text(value: int | float) -> str:
    if isinstance(value, int) and abs(value) <= MAX_SAFE_INTEGER:
        return str(value)
    return format_number(float(value))


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _number_text(value)
    return str(value)


def to_json_text(payload: Any) -> str:
    """Compact JSON with numbers written as JavaScript writes them"""
    if payload is None:
        return "null"
    if isinstance(payload, bool):
        return "true" if payload else "false"
    if isinstance(payload, (int, float)):
        return _number_text(payload)
    if isinstance(payload, str):
        return json.dumps(payload, ensure_ascii=False)
    if isinstance(payload, dict):
        items = (
            f"{json.dumps(str(key), ensure_ascii=False)}:{to_json_text(value)}"
            for key, value in payload.items()
        )
        return "{" + ",".join(items) + "}"
    if isinstance(payload, (list, tuple)):
        return "[" + ",".join(to_json_text(item) for item in payload) + "]"
    raise TypeError(f"Object of type {type(payload).__name__} is not JSON serializable")


class RequestTranslator:
    """Issues one backend request per tool invocation and wraps the JSON reply"""

    def __init__(self, config: BackendConfig, client: httpx.AsyncClient):
        self.config = config
        self.client = client

    def build_url(self, definition: ToolDefinition, arguments: Dict[str, Any]) -> str:
        """Base URL plus the tool's path with path parameters filled in"""
        path_values = {
            name: quote(str(arguments[name]), safe="") for name in definition.path_params
        }
        return f"{self.config.base_url}{definition.path.format(**path_values)}"

    async def execute(self, definition: ToolDefinition, arguments: BaseModel) -> ToolResult:
        """Send the request for a validated invocation

        Args:
            definition: Tool being invoked
            arguments: Validated arguments model instance

        Returns:
            Result envelope holding the backend JSON as text. Non-2xx
            responses are returned the same way as successful ones.

        Raises:
            BackendRequestError: On connection failures, timeouts or a non-JSON body
        """
        values = arguments.model_dump(mode="json", exclude_none=True)
        url = self.build_url(definition, values)
        remaining = {k: v for k, v in values.items() if k not in definition.path_params}

        params: Optional[Dict[str, str]] = None
        body: Optional[Dict[str, Any]] = None
        if definition.payload == "query":
            params = {k: _query_value(v) for k, v in remaining.items()}
        elif definition.payload == "json":
            body = remaining

        logger.debug(f"{definition.method} {url} for {definition.name}")
        try:
            if body is not None:
                response = await self.client.request(
                    definition.method,
                    url,
                    content=to_json_text(body).encode("utf-8"),
                    headers={"Content-Type": "application/json"},
                )
            else:
                response = await self.client.request(definition.method, url, params=params)
            result = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error calling {definition.name}: {e}")
            raise BackendRequestError(
                f"Request to {url} for {definition.name} failed: {e}",
                details={"tool": definition.name, "url": url, "method": definition.method},
            ) from e

        return ToolResult.from_text(to_json_text(result))
