import logging
import threading
from typing import Dict, List

from faniko.models.creator import Creator
from faniko.models.payments import Subscription, Transaction, UnlockedPost
from faniko.models.post import Post
from faniko.models.user import User

logger = logging.getLogger("faniko-backend.db")


# -------------------------------------------------
# IN-MEMORY STORE
# -------------------------------------------------
class Store:
    """
    Process-local "database": one list per collection.

    Every read-modify-write happens under `lock` so the threadpool
    FastAPI uses for sync endpoints sees one request at a time.
    Ids come from per-collection counters and are never reused,
    even after a delete.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self.reset()

    def reset(self) -> None:
        with self.lock:
            self.users: List[User] = []  # fans + creators
            self.creators: List[Creator] = []
            self.posts: List[Post] = []

            # money-related data
            self.transactions: List[Transaction] = []  # tips, PPV unlocks, subscriptions
            self.subscriptions: List[Subscription] = []
            self.unlocked_posts: List[UnlockedPost] = []  # which fan unlocked which PPV post

            self._counters: Dict[str, int] = {}

    def next_id(self, collection: str) -> int:
        with self.lock:
            value = self._counters.get(collection, 0) + 1
            self._counters[collection] = value
            return value


_store = Store()


# -------------------------------------------------
# DB ACCESS
# -------------------------------------------------
def get_db() -> Store:
    """
    Returns the shared store.
    Callers hold `store.lock` while mutating.
    """
    return _store
