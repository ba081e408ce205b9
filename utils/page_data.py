"""
Locate and decode the JSON blobs YouTube embeds in its HTML pages.

YouTube bootstraps its pages with two global JavaScript variables:

* ``ytInitialData`` – the page content (search results, watch-next
  panels, ...).
* ``ytInitialPlayerResponse`` – video details and caption tracks.

Neither is a published contract, so all pattern matching against the
raw HTML lives in this module.  The rest of the code only deals with
the decoded trees and reads them through :func:`get_path`.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, NamedTuple, Optional

logger = logging.getLogger(__name__)

INITIAL_DATA = "ytInitialData"
PLAYER_RESPONSE = "ytInitialPlayerResponse"

_VARIABLE_PATTERNS = {
    INITIAL_DATA: re.compile(r"var ytInitialData = ({.*?});"),
    # May appear as a plain assignment, hence no ``var`` keyword
    PLAYER_RESPONSE: re.compile(r"ytInitialPlayerResponse\s*=\s*({.+?});"),
}


def extract_embedded_json(html: str, variable: str) -> Optional[Dict[str, Any]]:
    """Extract and decode an embedded JSON variable from a page.

    Args:
        html: Raw HTML (or JavaScript) text of the page.
        variable: Either :data:`INITIAL_DATA` or :data:`PLAYER_RESPONSE`.

    Returns:
        The decoded JSON object, or ``None`` if the variable is absent
        or its value cannot be parsed.
    """
    pattern = _VARIABLE_PATTERNS.get(variable)
    if pattern is None:
        raise ValueError(f"Unsupported embedded variable: {variable}")
    match = pattern.search(html)
    if not match:
        logger.warning("%s not found in page", variable)
        return None
    try:
        data = json.loads(match.group(1))
    except ValueError as e:
        logger.warning("Error parsing %s: %s", variable, e)
        return None
    if not isinstance(data, dict):
        logger.warning("%s is not a JSON object", variable)
        return None
    return data


def get_path(tree: Any, *path: Any, default: Any = "") -> Any:
    """Walk ``path`` through a decoded JSON tree.

    String steps index into dictionaries and integer steps into
    lists.  A missing key, an out-of-range index, a node of the wrong
    type or a ``None`` value at any hop returns ``default``.

    Examples::

        >>> get_path({"title": {"runs": [{"text": "Hi"}]}}, "title", "runs", 0, "text")
        'Hi'
        >>> get_path({}, "title", "runs", 0, "text")
        ''
    """
    node = tree
    for step in path:
        if isinstance(step, int) and not isinstance(step, bool):
            if not isinstance(node, list) or not -len(node) <= step < len(node):
                return default
            node = node[step]
        elif isinstance(node, dict):
            node = node.get(step)
        else:
            return default
        if node is None:
            return default
    return node


class WatchInfoNodes(NamedTuple):
    """The two info renderers at the top of a watch page.

    YouTube renders the primary info (title, views, date) first and
    the secondary info (description, channel) second.  Either may be
    ``None`` when absent.
    """

    primary: Optional[Dict[str, Any]]
    secondary: Optional[Dict[str, Any]]


def watch_info_nodes(model: Dict[str, Any]) -> WatchInfoNodes:
    """Pick the primary and secondary info nodes out of a watch page."""
    contents = get_path(
        model, "contents", "twoColumnWatchNextResults", "results", "results", "contents",
        default=[],
    )
    primary = get_path(contents, 0, "videoPrimaryInfoRenderer", default=None)
    secondary = get_path(contents, 1, "videoSecondaryInfoRenderer", default=None)
    return WatchInfoNodes(
        primary=primary if isinstance(primary, dict) else None,
        secondary=secondary if isinstance(secondary, dict) else None,
    )
