"""Domain modules with auto-discovery.

Each subpackage exposes a ``router`` in its ``__init__.py``; the API
layer mounts every router found here under ``/api/v1``.
"""

from importlib import import_module
from pathlib import Path

import structlog
from fastapi import APIRouter


logger = structlog.get_logger()


def discover_modules() -> list[APIRouter]:
    """Import every domain module and collect its router.

    Returns:
        Routers in module name order.
    """
    modules_dir = Path(__file__).parent
    routers: list[APIRouter] = []

    for path in sorted(modules_dir.iterdir()):
        if not path.is_dir() or path.name.startswith("_"):
            continue
        if not (path / "__init__.py").exists():
            continue
        module = import_module(f"timescrub.modules.{path.name}")
        router = getattr(module, "router", None)
        if router is not None:
            routers.append(router)
            logger.debug("module_loaded", module=path.name)

    return routers
