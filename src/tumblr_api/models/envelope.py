"""
Response Envelope

Every API reply shares the same outer document:

    {"meta": {"status": 200, "msg": "OK"}, "response": {...}}

The payload under "response" is kept undecoded until the caller picks the
structure it expects.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..config import config
from .fields import as_dict, as_int, as_str


def require_object(data: Any, what: str) -> Dict[str, Any]:
    """Return data if it is a JSON object, raise TypeError otherwise."""
    if not isinstance(data, dict):
        raise TypeError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


@dataclass
class Meta:
    """HTTP-like status carried inside the envelope."""
    status: int = 0
    msg: str = ""

    @property
    def ok(self) -> bool:
        return self.status in config.api.success_statuses

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Meta":
        return cls(status=as_int(data, "status"), msg=as_str(data, "msg"))


@dataclass
class Response:
    """The top-level envelope with its raw payload."""
    meta: Meta
    response: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> "Response":
        data = require_object(data, "envelope")

        # Flat {status, msg, response} documents are accepted as well
        meta = as_dict(data, "meta") or data
        return cls(meta=Meta.from_dict(meta), response=data.get("response"))
