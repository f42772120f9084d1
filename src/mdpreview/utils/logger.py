"""Logger factory for mdpreview.

Every module logs under the ``mdpreview`` namespace, so an application can
tune the whole pipeline through ``logging.getLogger("mdpreview")``. The
package never installs handlers; applications decide where records go.

Example:
    >>> from mdpreview.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "mdpreview"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the mdpreview namespace.

    Module names (``mdpreview.parser``) are used as they are; any other
    name becomes a child of the package logger.

    Example:
        >>> get_logger("highlighting").name
        'mdpreview.highlighting'
    """
    package = logging.getLogger(PACKAGE_LOGGER)
    if name == PACKAGE_LOGGER:
        return package
    return package.getChild(name.removeprefix(f"{PACKAGE_LOGGER}."))
