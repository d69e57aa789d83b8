# ruff: noqa: N812

from .employee import blp as BlueprintEmployee
from .errors import register_error_handlers
from .health import blp as BlueprintHealth

__all__ = ['BlueprintHealth', 'BlueprintEmployee', 'register_error_handlers']
