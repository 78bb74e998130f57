# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fakes and fixtures. No live database or classifier is
# needed: FakeDataStore answers the storage query interface from
# in-memory columns, FakeClassifier returns canned JSON objects,
# FakeClock lets the rate scheduler "sleep" instantly.
#
# ==============================================

import re
from typing import Any, Dict, List, Optional

import pytest

from rule_inference.catalog import Field, Model
from rule_inference.config import InferenceConfig
from rule_inference.recognition import PatternRecognizer
from rule_inference.storage import DataStoreError


class FakeDataStore:
    """In-memory stand-in for MySQLClient / MongoClient."""

    def __init__(self, tables: Optional[Dict[str, Dict[str, List[Any]]]] = None):
        self.tables = tables or {}
        self.failures = set()  # (operation, table, column) or (operation, None, None)
        self.calls = []
        self.fetch_requests = []  # (table, column, limit, distinct)
        self.reachable = True

    def fail(self, operation: str, table: Optional[str] = None, column: Optional[str] = None):
        self.failures.add((operation, table, column))

    def _column(self, operation: str, table: str, column: str) -> List[Any]:
        self.calls.append((operation, table, column))
        if (operation, table, column) in self.failures or (operation, None, None) in self.failures:
            raise DataStoreError(f"{operation} failed on {table}.{column}")
        return self.tables.get(table, {}).get(column, [])

    def ping(self):
        if not self.reachable:
            raise DataStoreError("connection refused")

    def count_nulls(self, table, column):
        return sum(1 for v in self._column("count_nulls", table, column) if v is None)

    def fetch_values(self, table, column, limit, distinct=False):
        self.fetch_requests.append((table, column, limit, distinct))
        values = [v for v in self._column("fetch_values", table, column) if v is not None]
        if distinct:
            values = list(dict.fromkeys(values))
        return values[:limit]

    def min_max(self, table, column):
        values = [v for v in self._column("min_max", table, column) if v is not None]
        if not values:
            return None, None
        return min(values), max(values)

    def distinct_values(self, table, column):
        values = [v for v in self._column("distinct_values", table, column) if v is not None]
        return list(dict.fromkeys(values))


class FakeClassifier:
    """Returns a canned response per field name, or raises it if it is an exception."""

    FIELD_LINE = re.compile(r"^Field: (.+)$", re.MULTILINE)

    def __init__(self, responses: Optional[Dict[str, Any]] = None, default: Any = None):
        self.responses = responses or {}
        self.default = default
        self.prompts = []

    def classify(self, prompt: str):
        self.prompts.append(prompt)
        field_name = self.FIELD_LINE.search(prompt).group(1)
        response = self.responses.get(field_name, self.default)
        if isinstance(response, Exception):
            raise response
        if response is None:
            return {"pattern": None, "description": "No clear pattern"}
        return response


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def user_model() -> Model:
    return Model(
        name="User",
        fields=(
            Field(name="id", type="Int", is_id=True),
            Field(name="email", type="String", is_unique=True),
        ),
    )


@pytest.fixture
def user_store() -> FakeDataStore:
    return FakeDataStore({
        "User": {
            "id": [17, 1, 500, 42],
            "email": ["ana@example.com", "li@test.io", "ana@example.com", "bo@site.org"],
        }
    })


@pytest.fixture
def email_pattern() -> str:
    return r"^[^@]+@[^@]+\.[^@]+$"


@pytest.fixture
def classifier(email_pattern) -> FakeClassifier:
    return FakeClassifier({
        "email": {"pattern": email_pattern, "format": "email", "description": "Email address"},
    })


@pytest.fixture
def inference_config() -> InferenceConfig:
    # High RPM keeps the real-clock scheduler fast in service tests
    return InferenceConfig(sample_size=50, requests_per_minute=60000)


@pytest.fixture
def recognizer(classifier) -> PatternRecognizer:
    return PatternRecognizer(classifier)
