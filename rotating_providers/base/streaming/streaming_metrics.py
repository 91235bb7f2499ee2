"""Token usage helpers shared by the stream accumulator and logging."""
from __future__ import annotations

from typing import Dict, Optional


def build_token_usage(prompt: Optional[int], completion: Optional[int], total: Optional[int] = None) -> Dict[str, Optional[int]]:
    """Return a canonical token usage mapping, deriving ``total`` when possible."""
    derived_total = total
    if derived_total is None and (prompt is not None and completion is not None):
        derived_total = prompt + completion
    return {"prompt": prompt, "completion": completion, "total": derived_total}


__all__ = ["build_token_usage"]
