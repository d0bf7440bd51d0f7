"""
Tests for query type / action type detection.

Run with: python -m pytest tests/test_query_shape.py -v
"""

import pytest

from nlu.catalog import ActionType, QueryType
from nlu.query_shape import QueryShapeDetector


@pytest.fixture(scope="module")
def shape(config):
    return QueryShapeDetector(config)


class TestQueryType:
    def test_detection(self, shape):
        cases = [
            ("search contracts", QueryType.SEARCH),
            ("show contract 123456", QueryType.SPECIFIC),
            ("list all contracts", QueryType.LIST),
            ("create contract", QueryType.CONTRACT),
            ("help me please", QueryType.HELP),
            ("contract 123456", QueryType.SPECIFIC),
            ("contracts for customer acme", QueryType.FILTER),
            ("hello there", QueryType.GENERAL),
        ]
        for query, expected in cases:
            assert shape.detect_query_type(query) == expected, query

    def test_confidence_full(self, shape):
        assert shape.query_type_confidence("show contract 123456") == 1.0

    def test_confidence_shared(self, shape):
        # SEARCH cue (3) against FILTER cue + account pattern (5)
        assert shape.query_type_confidence("find account 1234567") == pytest.approx(0.6)

    def test_general_has_no_confidence(self, shape):
        assert shape.query_type_confidence("hello there") == 0.0


class TestActionType:
    def test_detection(self, shape):
        cases = [
            ("search contracts", ActionType.SEARCH),
            ("show contract 123456", ActionType.SHOW),
            ("what is the status of contract 123456", ActionType.GET),
            ("list contracts", ActionType.LIST),
            ("create contract", ActionType.CREATE),
            ("how do i do this", ActionType.GUIDE),
            ("update contract 123456", ActionType.UPDATE),
            ("contracts created by john", ActionType.FILTER),
            ("hello there", ActionType.UNKNOWN),
        ]
        for query, expected in cases:
            assert shape.detect_action_type(query) == expected, query

    def test_confidence_full(self, shape):
        assert shape.action_type_confidence("show contract 123456") == 1.0

    def test_confidence_floor(self, shape):
        # "display" is detected but only "list" scores
        assert shape.action_type_confidence("display contract list") == pytest.approx(0.6)

    def test_unknown_has_no_confidence(self, shape):
        assert shape.action_type_confidence("hello there") == 0.0
