# ==============================================
# Tests for StatisticalAnalyzer
# ==============================================

import logging

import pytest

from rule_inference.analysis import FieldStats, STRING_SAMPLE_SIZE, StatisticalAnalyzer
from rule_inference.catalog import Field, FieldCategory, Model

from .conftest import FakeDataStore


@pytest.fixture
def store():
    return FakeDataStore({
        "products": {
            "sku": ["AB-1", "CD-2345", None, "EF-67"],
            "price": [19.99, 4.5, 250.0, None],
            "stock": [3, 0, 12],
            "status": ["ACTIVE", "RETIRED", "ACTIVE", None],
            "published": [True, False],
        }
    })


@pytest.fixture
def product():
    return Model(
        name="Product",
        db_name="products",
        fields=(
            Field(name="sku", type="String", is_required=False),
            Field(name="price", type="Decimal", is_required=False),
            Field(name="stock", type="Int"),
            Field(name="status", type="Status", kind="enum", is_required=False),
            Field(name="published", type="Boolean"),
            Field(name="tags", type="Tag", kind="relation", is_list=True),
        ),
    )


def field_of(model, name):
    return next(f for f in model.fields if f.name == name)


class TestStringStats:

    def test_length_bounds(self, store, product):
        stats = StatisticalAnalyzer(store).analyze(product, field_of(product, "sku"))
        assert stats.min_length == 4
        assert stats.max_length == 7
        assert stats.min is None and stats.max is None

    def test_sample_is_capped(self, product):
        store = FakeDataStore({"products": {"sku": ["x" * (i % 7 + 1) for i in range(1500)]}})
        StatisticalAnalyzer(store).analyze(product, field_of(product, "sku"))
        assert store.fetch_requests == [("products", "sku", 1000, False)]
        assert STRING_SAMPLE_SIZE == 1000

    def test_bytes_values_count_toward_lengths(self, product):
        store = FakeDataStore({"products": {"sku": [b"AB-1", b"CD-2345", "EF-67"]}})
        stats = StatisticalAnalyzer(store).analyze(product, field_of(product, "sku"))
        assert stats.min_length == 4
        assert stats.max_length == 7

    def test_empty_column_leaves_lengths_unset(self, product):
        stats = StatisticalAnalyzer(FakeDataStore()).analyze(product, field_of(product, "sku"))
        assert stats.min_length is None
        assert stats.max_length is None


class TestNumericStats:

    def test_min_max_over_full_column(self, store, product):
        stats = StatisticalAnalyzer(store).analyze(product, field_of(product, "price"))
        assert stats.min == 4.5
        assert stats.max == 250.0

    def test_zero_is_kept(self, store, product):
        stats = StatisticalAnalyzer(store).analyze(product, field_of(product, "stock"))
        assert stats.min == 0
        assert stats.max == 12

    def test_row_order_does_not_matter(self, product):
        forward = FakeDataStore({"products": {"stock": [5, 1, 9, 3]}})
        backward = FakeDataStore({"products": {"stock": [3, 9, 1, 5]}})
        field = field_of(product, "stock")
        assert StatisticalAnalyzer(forward).analyze(product, field) == \
            StatisticalAnalyzer(backward).analyze(product, field)


class TestEnumStats:

    def test_distinct_domain(self, store, product):
        stats = StatisticalAnalyzer(store).analyze(product, field_of(product, "status"))
        assert stats.distinct_values == ["ACTIVE", "RETIRED"]
        assert stats.distinct_count == 2


class TestNoStatsCategories:

    def test_boolean_is_empty(self, store, product):
        stats = StatisticalAnalyzer(store).analyze(product, field_of(product, "published"))
        assert stats.is_empty()

    def test_relation_issues_no_queries(self, store, product):
        StatisticalAnalyzer(store).analyze(product, field_of(product, "tags"))
        assert store.calls == []

    def test_every_category_has_a_strategy_entry(self, store):
        analyzer = StatisticalAnalyzer(store)
        assert set(analyzer._strategies) == set(FieldCategory)


class TestNulls:

    def test_optional_field_gets_has_nulls(self, store, product):
        stats = StatisticalAnalyzer(store).analyze(product, field_of(product, "sku"))
        assert stats.has_nulls is True

    def test_optional_field_without_nulls(self, product):
        store = FakeDataStore({"products": {"price": [1.0, 2.0]}})
        stats = StatisticalAnalyzer(store).analyze(product, field_of(product, "price"))
        assert stats.has_nulls is False

    def test_required_field_skips_null_query(self, store, product):
        stats = StatisticalAnalyzer(store).analyze(product, field_of(product, "stock"))
        assert stats.has_nulls is None
        assert ("count_nulls", "products", "stock") not in store.calls


class TestFailures:

    def test_query_error_returns_partial_stats(self, store, product, caplog):
        store.fail("fetch_values", "products", "sku")
        with caplog.at_level(logging.WARNING):
            stats = StatisticalAnalyzer(store).analyze(product, field_of(product, "sku"))
        assert stats.has_nulls is True
        assert stats.min_length is None
        assert "Product.sku" in caplog.text

    def test_first_query_error_returns_empty_stats(self, store, product):
        store.fail("count_nulls")
        stats = StatisticalAnalyzer(store).analyze(product, field_of(product, "price"))
        assert stats == FieldStats()


class TestFieldStatsSerialization:

    def test_to_dict_omits_uncomputed(self):
        stats = FieldStats(min=0, max=10, has_nulls=False)
        assert stats.to_dict() == {"min": 0, "max": 10, "has_nulls": False}
