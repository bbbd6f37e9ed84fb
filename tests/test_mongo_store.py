"""MongoMessageStore against a stub collection exposing the pymongo calls it uses."""

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from palindrome_api.app.store import ListFilter, MessageNotFound, MessagePayload, MessageStoreError, MongoMessageStore


class StubCursor:
    def __init__(self, documents):
        self._documents = documents
        self.closed = False

    def __iter__(self):
        return iter(self._documents)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


class StubCollection:
    def __init__(self, fail=False):
        self.documents = {}
        self.queries = []
        self.fail = fail

    def _check(self):
        if self.fail:
            raise ServerSelectionTimeoutError("no servers")

    def insert_one(self, document):
        self._check()
        self.documents[document["_id"]] = dict(document)

    def find_one(self, query):
        self._check()
        doc = self.documents.get(query["_id"])
        return dict(doc) if doc is not None else None

    def find(self, query):
        self._check()
        self.queries.append(query)
        return StubCursor(
            [dict(d) for d in self.documents.values() if all(d.get(k) == v for k, v in query.items())]
        )

    def find_one_and_delete(self, query):
        self._check()
        return self.documents.pop(query["_id"], None)


class StubClient:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def collection():
    return StubCollection()


@pytest.fixture
def store(collection):
    return MongoMessageStore(collection)


def test_create_inserts_document(store, collection):
    msg = store.create(MessagePayload(text="racecar", palindrome=True))
    assert len(msg.id) == 24
    assert collection.documents[msg.id] == {
        "_id": msg.id,
        "text": "racecar",
        "palindrome": True,
        "createdAt": msg.created_at,
    }


def test_read_round_trip(store):
    created = store.create(MessagePayload(text="a toyota", palindrome=False))
    assert store.read(created.id) == created


def test_read_no_documents_is_not_found(store):
    with pytest.raises(MessageNotFound):
        store.read("000000000000000000000000")


def test_list_passes_palindrome_filter(store, collection):
    store.create(MessagePayload(text="racecar", palindrome=True))
    store.create(MessagePayload(text="abc", palindrome=False))
    store.create(MessagePayload(text="abba", palindrome=True))

    assert len(store.list()) == 3
    palindromes = store.list(ListFilter(palindrome=True))
    assert sorted(m.text for m in palindromes) == ["abba", "racecar"]
    assert collection.queries == [{}, {"palindrome": True}]


def test_delete(store, collection):
    msg = store.create(MessagePayload(text="abc", palindrome=False))
    store.delete(msg.id)
    assert collection.documents == {}
    with pytest.raises(MessageNotFound):
        store.delete(msg.id)


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.create(MessagePayload(text="x", palindrome=True)),
        lambda s: s.read("id"),
        lambda s: s.list(),
        lambda s: s.delete("id"),
    ],
)
def test_driver_errors_are_wrapped(call):
    store = MongoMessageStore(StubCollection(fail=True))
    with pytest.raises(MessageStoreError) as excinfo:
        call(store)
    assert not isinstance(excinfo.value, MessageNotFound)


def test_close_closes_owned_client(collection):
    client = StubClient()
    store = MongoMessageStore(collection, client=client)
    store.close()
    store.close()
    assert client.closed is True
