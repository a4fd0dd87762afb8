"""
Message bundle for rendering diagnostics.

Plugins ship their message templates in their ``config.yaml`` under a
``messages`` mapping. Templates use positional ``{0}`` placeholders.
"""

import logging
from typing import Dict, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)


class MessageBundle:
    """Maps message keys to templates and formats them."""

    def __init__(self, messages: Optional[Mapping[str, str]] = None):
        self._messages: Dict[str, str] = dict(messages or {})

    def update(self, messages: Mapping[str, str]) -> None:
        for key, template in messages.items():
            if key in self._messages and self._messages[key] != template:
                logger.warning(f"Message '{key}' already defined, overwriting")
            self._messages[key] = template

    def keys(self) -> Iterable[str]:
        return self._messages.keys()

    def __contains__(self, key: str) -> bool:
        return key in self._messages

    def format(self, key: str, args: Iterable[str] = ()) -> str:
        """
        Render the message for ``key``.

        Unknown keys render as the key followed by the arguments, so a
        missing template never hides a violation.
        """
        args = tuple(args)
        template = self._messages.get(key)
        if template is None:
            return f"{key} {' '.join(args)}".strip()
        try:
            return template.format(*args)
        except (IndexError, KeyError) as e:
            logger.warning(f"Cannot format message '{key}' with {args}: {e}")
            return f"{template} {' '.join(args)}".strip()
