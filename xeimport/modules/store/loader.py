import importlib
import logging
from typing import Any

from ..errors import ConnectorError
from .interfaces import Connector

logger = logging.getLogger("xeimport.store")


def load_connector(spec: str, **kwargs: Any) -> Connector:
    """
    Load a connector from an import path.

    Args:
        spec: "package.module:attribute"; the attribute is either a
            connector instance or a callable returning one
        **kwargs: Passed to the attribute when it is callable

    Returns:
        Connector instance

    Raises:
        ConnectorError: If the path is malformed or cannot be imported
    """
    if not spec or ":" not in spec:
        raise ConnectorError(
            f"Invalid connector '{spec}'. Expected format 'package.module:attribute'."
        )

    module_name, _, attr = spec.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConnectorError(f"Cannot import connector module '{module_name}': {e}") from e

    target = getattr(module, attr, None)
    if target is None:
        raise ConnectorError(f"Connector module '{module_name}' has no attribute '{attr}'")

    # Classes and factory functions are called; ready instances are used as-is
    if isinstance(target, type) or (callable(target) and not hasattr(target, "connect")):
        connector = target(**kwargs)
    else:
        connector = target

    if not hasattr(connector, "connect"):
        raise ConnectorError(f"Connector '{spec}' does not provide connect()")

    logger.debug(f"Loaded connector {spec}")
    return connector
