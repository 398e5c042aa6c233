from __future__ import annotations

"""
Exporter Registry.

Maps stable exporter keys (used by configuration and the CLI) to their
visitor classes and instantiates them with the requested options.
"""

import logging
from typing import Any, Dict, List, Type

from fsvisitor.core.exporters.base import BaseExporter
from fsvisitor.core.exporters.human import HumanReadableExporter
from fsvisitor.core.exporters.xml import XmlExporter
from fsvisitor.domain import constants as const

logger = logging.getLogger(__name__)

_EXPORTERS: Dict[str, Type[BaseExporter]] = {
    const.EXPORTER_HUMAN: HumanReadableExporter,
    const.EXPORTER_XML: XmlExporter,
}


class UnknownExporterError(KeyError):
    """Raised when an exporter key is not registered."""


def exporter_keys() -> List[str]:
    """Return the registered keys in registration order."""
    return list(_EXPORTERS)


def available_exporters() -> Dict[str, str]:
    """
    List the registered exporters with their display titles.

    Returns:
        Dict[str, str]: Map of exporter key to human label.
    """
    return {key: cls().title for key, cls in _EXPORTERS.items()}


def create_exporter(key: str, **options: Any) -> BaseExporter:
    """
    Build a new exporter instance for the given key.

    Options not supported by the selected exporter are dropped, so callers
    can pass the full configuration without branching per format.

    Args:
        key: Registered exporter key ('human' or 'xml').
        **options: Constructor options (preview_length, close_tags).

    Returns:
        BaseExporter: Fresh exporter instance.

    Raises:
        UnknownExporterError: If the key is not registered.
    """
    normalized = (key or "").strip().lower()
    cls = _EXPORTERS.get(normalized)
    if cls is None:
        raise UnknownExporterError(
            f"Unknown exporter '{key}'. Available: {', '.join(_EXPORTERS)}."
        )

    kwargs = {"preview_length": options["preview_length"]} if "preview_length" in options else {}
    if cls is XmlExporter and "close_tags" in options:
        kwargs["close_tags"] = bool(options["close_tags"])

    logger.debug(f"Creating exporter '{normalized}' with options {kwargs}")
    return cls(**kwargs)
