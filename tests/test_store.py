"""Tests for the in-memory Store."""

import pytest

from tweet_store import Store


def test_seeded_collections(store):
    assert [t["id"] for t in store.list_tweets()] == ["1", "2"]
    assert [u["id"] for u in store.list_users()] == ["1", "2"]


def test_list_tweets_returns_a_copy(store):
    tweets = store.list_tweets()
    tweets.clear()

    assert len(store.list_tweets()) == 2


def test_find_tweet_and_user(store):
    assert store.find_tweet("2")["text"] == "bye"
    assert store.find_user("2")["firstName"] == "Elon"
    assert store.find_tweet("99") is None
    assert store.find_user("99") is None


def test_ids_use_exact_string_equality(store):
    assert store.find_tweet(1) is None
    assert store.find_user(2) is None


def test_append_tweet_preserves_insertion_order(store):
    first = store.append_tweet("a", "1")
    second = store.append_tweet("b", "2")

    assert [t["id"] for t in store.list_tweets()] == ["1", "2", first["id"], second["id"]]
    assert second == {"id": "4", "text": "b", "userId": "2"}


def test_remove_tweet(store):
    assert store.remove_tweet("1") is True
    assert store.find_tweet("1") is None
    assert [t["id"] for t in store.list_tweets()] == ["2"]


def test_remove_unknown_tweet_leaves_collection_unchanged(store):
    before = store.list_tweets()

    assert store.remove_tweet("99") is False
    assert store.list_tweets() == before


def test_ids_are_not_reused_after_delete(store):
    store.remove_tweet("1")
    posted = store.append_tweet("x", "1")

    assert posted["id"] == "3"
    ids = [t["id"] for t in store.list_tweets()]
    assert len(ids) == len(set(ids))

    store.remove_tweet("3")
    assert store.append_tweet("y", "1")["id"] == "4"


def test_counter_starts_past_largest_seed_id():
    store = Store(tweets=[{"id": "7", "text": "t", "userId": "1"}])

    assert store.append_tweet("x", "1")["id"] == "8"


def test_empty_store():
    store = Store(users=[], tweets=[])

    assert store.list_tweets() == []
    assert store.append_tweet("x", None)["id"] == "1"


def test_seed_ids_are_normalised_to_strings():
    store = Store(tweets=[{"id": 5, "text": "t", "userId": "1"}])

    assert store.find_tweet("5") is not None


def test_duplicate_seed_ids_are_rejected():
    with pytest.raises(ValueError):
        Store(users=[
            {"id": "1", "firstName": "a", "lastName": "b"},
            {"id": "1", "firstName": "c", "lastName": "d"},
        ])


def test_non_decimal_seed_ids_do_not_drive_the_counter():
    store = Store(tweets=[
        {"id": "²", "text": "t", "userId": "1"},
        {"id": "4", "text": "u", "userId": "1"},
    ])

    assert store.append_tweet("x", "1")["id"] == "5"
