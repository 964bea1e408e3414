
# 
# Copyright (c) 2020, 2021, John Grundback
# All rights reserved.
# 

import logging
import threading
import itertools

logger = logging.getLogger(__name__)

# 
# 
# 

SEED_USERS = [
    {
        "id": "1",
        "firstName": "nico",
        "lastName": "last",
    },
    {
        "id": "2",
        "firstName": "Elon",
        "lastName": "Mask",
    },
]

SEED_TWEETS = [
    {
        "id": "1",
        "text": "hello",
        "userId": "2",
    },
    {
        "id": "2",
        "text": "bye",
        "userId": "1",
    },
]


def _copy_rows(rows, kind):
    copied = []
    seen = set()
    for row in rows:
        row_id = str(row["id"])
        if row_id in seen:
            raise ValueError("Duplicate %s id: %r" % (kind, row_id))
        seen.add(row_id)
        copied.append(dict(row, id=row_id))
    return copied


def _next_id_after(rows):
    # Ids are handed out past the largest numeric id ever seen.
    numeric = [int(row["id"]) for row in rows if row["id"].isdecimal()]
    return max(numeric, default=len(rows)) + 1


class Store(object):
    """
    In-memory users and tweets.

    The store owns its two lists. Readers get shallow copies of them so
    the only way to change a collection is through append_tweet and
    remove_tweet. Ids are strings compared with plain equality.
    """

    def __init__(self, users=None, tweets=None):
        self._lock = threading.RLock()
        self._users = _copy_rows(SEED_USERS if users is None else users, "user")
        self._tweets = _copy_rows(SEED_TWEETS if tweets is None else tweets, "tweet")
        self._ids = itertools.count(_next_id_after(self._tweets))

    def list_tweets(self):
        return list(self._tweets)

    def find_tweet(self, id):
        for tweet in self._tweets:
            if tweet["id"] == id:
                return tweet
        return None

    def list_users(self):
        return list(self._users)

    def find_user(self, id):
        for user in self._users:
            if user["id"] == id:
                return user
        return None

    def append_tweet(self, text, user_id):
        with self._lock:
            tweet = {
                "id": str(next(self._ids)),
                "text": text,
                "userId": user_id,
            }
            self._tweets.append(tweet)
        logger.info("posted tweet %s for user %s", tweet["id"], user_id)
        return tweet

    def remove_tweet(self, id):
        with self._lock:
            tweet = self.find_tweet(id)
            if tweet is None:
                logger.debug("delete of unknown tweet %r ignored", id)
                return False
            self._tweets.remove(tweet)
        logger.info("deleted tweet %s", id)
        return True
