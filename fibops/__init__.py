# fibops/__init__.py
from __future__ import annotations

from typing import Any, Callable, Dict
import sys

from .version import STRING as __version__

# name -> payload handler, filled by @register_op
OPS_REGISTRY: Dict[str, Callable[..., Any]] = {}


def register_op(name: str):
    """Register the decorated function as the handler for op `name`."""
    def decorator(fn: Callable[..., Any]):
        prev = OPS_REGISTRY.get(name)
        if prev is not None and prev is not fn:
            print(
                f"[ops] WARNING: op '{name}' re-registered ({prev.__name__} -> {fn.__name__})",
                file=sys.stderr,
                flush=True,
            )
        OPS_REGISTRY[name] = fn
        return fn

    return decorator


def get_op(name: str) -> Callable[..., Any]:
    """Return the handler for `name`; ValueError if nothing registered it."""
    fn = OPS_REGISTRY.get(name)
    if fn is None:
        raise ValueError(f"Unknown op {name!r}. Registered ops: {sorted(OPS_REGISTRY)}")
    return fn


# op modules register themselves on import
from .closest_fibonacci import nearest_fibonacci  # noqa: E402
