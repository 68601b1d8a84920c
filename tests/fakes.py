"""
In-memory stand-ins for the motor driver.

FakeMongoServer plays the MongoDB server: it counts connection attempts,
can be told to refuse connections or fail queries, and keeps documents per
collection. Its ``client_factory`` is passed to ``MongoDB`` in place of
``AsyncIOMotorClient``.
"""

import asyncio
import copy
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError


@dataclass
class FakeInsertOneResult:
    inserted_id: ObjectId


class FakeCursor:
    def __init__(self, collection: "FakeCollection", documents: List[dict]):
        self.collection = collection
        self.documents = documents

    def sort(self, spec):
        for key, direction in reversed(spec):
            self.documents.sort(key=lambda doc: doc[key], reverse=direction < 0)
        return self

    async def to_list(self, length: Optional[int] = None) -> List[dict]:
        await asyncio.sleep(0)
        self.collection.server.raise_if_query_fails()
        documents = self.documents if length is None else self.documents[:length]
        return copy.deepcopy(documents)


class FakeCollection:
    def __init__(self, server: "FakeMongoServer", name: str):
        self.server = server
        self.name = name

    @property
    def documents(self) -> List[dict]:
        return self.server.collections[self.name]

    def find(self, filter_dict: Dict[str, Any]) -> FakeCursor:
        assert filter_dict == {}, "only unfiltered queries are supported"
        return FakeCursor(self, list(self.documents))

    async def insert_one(self, document: dict) -> FakeInsertOneResult:
        await asyncio.sleep(0)
        self.server.raise_if_query_fails()
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return FakeInsertOneResult(inserted_id=document["_id"])

    async def create_index(self, keys, **kwargs) -> str:
        self.server.indexes[self.name].append(keys)
        return "_".join(f"{key}_{direction}" for key, direction in keys)


class FakeDatabase:
    def __init__(self, server: "FakeMongoServer", name: str):
        self.server = server
        self.name = name

    def __getitem__(self, collection_name: str) -> FakeCollection:
        return FakeCollection(self.server, collection_name)


class FakeAdmin:
    def __init__(self, server: "FakeMongoServer"):
        self.server = server

    async def command(self, name: str) -> dict:
        assert name == "ping"
        return await self.server.ping()


class FakeMotorClient:
    def __init__(self, server: "FakeMongoServer", uri: str, **options):
        self.server = server
        self.uri = uri
        self.options = options
        self.closed = False
        self.admin = FakeAdmin(server)

    def get_default_database(self, default: Optional[str] = None) -> FakeDatabase:
        path = self.uri.split("://", 1)[-1].split("?", 1)[0]
        name = path.split("/", 1)[1] if "/" in path else ""
        return FakeDatabase(self.server, name or default)

    def __getitem__(self, name: str) -> FakeDatabase:
        return FakeDatabase(self.server, name)

    def close(self) -> None:
        self.closed = True


class FakeMongoServer:
    """
    Fake MongoDB server.

    - ``refuse_connections``: number of upcoming pings that fail
    - ``connect_delay``: seconds each ping takes
    - ``fail_queries``: makes every read and write raise OperationFailure
    """

    def __init__(self, connect_delay: float = 0.0):
        self.connect_delay = connect_delay
        self.refuse_connections = 0
        self.fail_queries = False
        self.ping_count = 0
        self.clients: List[FakeMotorClient] = []
        self.collections: Dict[str, List[dict]] = defaultdict(list)
        self.indexes: Dict[str, list] = defaultdict(list)

    @property
    def connect_attempts(self) -> int:
        return len(self.clients)

    def client_factory(self, uri: str, **options) -> FakeMotorClient:
        client = FakeMotorClient(self, uri, **options)
        self.clients.append(client)
        return client

    async def ping(self) -> dict:
        self.ping_count += 1
        await asyncio.sleep(self.connect_delay)
        if self.refuse_connections > 0:
            self.refuse_connections -= 1
            raise ServerSelectionTimeoutError("localhost:27017: connection refused")
        return {"ok": 1.0}

    def raise_if_query_fails(self) -> None:
        if self.fail_queries:
            raise OperationFailure("not primary")
