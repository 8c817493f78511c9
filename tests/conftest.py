"""
Shared fixtures: an in-memory stand-in for the parts of the Firestore
client the report touches (collection/document/collection chains and get()).
"""

import pytest


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    def to_dict(self):
        return None if self._data is None else dict(self._data)


class FakeCollection:
    def __init__(self, client, path):
        self._client = client
        self.path = path

    def document(self, doc_id):
        return FakeDocumentReference(self._client, f"{self.path}/{doc_id}")

    def get(self):
        self._client.reads.append(self.path)
        if self.path in self._client.failures:
            raise self._client.failures[self.path]
        docs = self._client.documents.get(self.path, {})
        return [FakeSnapshot(doc_id, data) for doc_id, data in docs.items()]


class FakeDocumentReference:
    def __init__(self, client, path):
        self._client = client
        self.path = path

    def collection(self, name):
        return FakeCollection(self._client, f"{self.path}/{name}")


class FakeFirestore:
    """Documents keyed by collection path, e.g. ``users`` or ``users/u1/history``."""

    def __init__(self):
        self.documents = {}
        self.failures = {}
        self.reads = []

    def add(self, collection_path, doc_id, data):
        self.documents.setdefault(collection_path, {})[doc_id] = data

    def add_many(self, collection_path, count):
        for i in range(count):
            self.add(collection_path, f"doc{i}", {"n": i})

    def fail(self, collection_path, error):
        self.failures[collection_path] = error

    def collection(self, name):
        return FakeCollection(self, name)


@pytest.fixture
def fake_db():
    return FakeFirestore()
