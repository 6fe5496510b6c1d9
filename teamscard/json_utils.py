from __future__ import annotations

import json
from typing import Any


def dumps_payload(payload: dict[str, Any], *, pretty: bool = False) -> str:
    # dict order is the wire order; Teams renders sections/facts as listed
    if pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
