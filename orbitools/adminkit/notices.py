"""
Admin Notices

One-shot notices shown on the next admin page load. Notices live in the
transient store for a few minutes and are cleared once read.
"""

import logging
from dataclasses import asdict, dataclass
from typing import List, Optional

from config.constants import NOTICE_TTL, NOTICES_KEY_PREFIX
from orbitools.cache import NamespacedCache, create_transients

logger = logging.getLogger(__name__)

NOTICE_TYPES = ("success", "error", "warning", "info")


@dataclass(frozen=True)
class Notice:
    message: str
    type: str = "success"
    dismissible: bool = True

    def to_dict(self) -> dict:
        return asdict(self)


class NoticeManager:
    """Per-page notice queue backed by transients"""

    def __init__(
        self,
        slug: str,
        transients: Optional[NamespacedCache] = None,
        ttl: int = NOTICE_TTL,
    ):
        self.slug = slug
        self.transients = transients if transients is not None else create_transients()
        self.ttl = ttl

    @property
    def key(self) -> str:
        return f"{NOTICES_KEY_PREFIX}{self.slug}"

    def get_notices(self) -> List[Notice]:
        return list(self.transients.get(self.key) or [])

    def add_notice(self, message: str, type: str = "success", dismissible: bool = True) -> bool:
        """Queue a notice; False if the same message and type is already queued"""
        if type not in NOTICE_TYPES:
            raise ValueError(f"Unknown notice type: {type}")

        notices = self.get_notices()
        if any(n.message == message and n.type == type for n in notices):
            return False

        notices.append(Notice(message=message, type=type, dismissible=dismissible))
        self.transients.set(self.key, notices, ttl=self.ttl)
        return True

    def success(self, message: str) -> bool:
        return self.add_notice(message, "success")

    def error(self, message: str) -> bool:
        return self.add_notice(message, "error")

    def warning(self, message: str) -> bool:
        return self.add_notice(message, "warning")

    def info(self, message: str) -> bool:
        return self.add_notice(message, "info")

    def pop_notices(self) -> List[Notice]:
        """Return queued notices and clear the queue"""
        notices = self.get_notices()
        if notices:
            self.transients.delete(self.key)
        return notices

    def clear(self) -> None:
        self.transients.delete(self.key)
