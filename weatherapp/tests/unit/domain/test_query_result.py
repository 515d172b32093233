import dataclasses

import pytest

from weatherapp.domain import query_result
from weatherapp.domain.query_result import IDLE, LOADING, Error, Idle, Loading, Success
from weatherapp.tests.unit.helpers import make_snapshot


def test_module_exports_only_the_union_and_its_constants():
    assert sorted(query_result.__all__) == sorted(
        ["Error", "IDLE", "Idle", "LOADING", "Loading", "QueryResult", "Success"]
    )


def test_idle_and_loading_constants_compare_equal_to_fresh_instances():
    assert IDLE == Idle()
    assert LOADING == Loading()
    assert IDLE != LOADING


@pytest.mark.parametrize("result", [Success(make_snapshot()), Error("City not found")])
def test_outcomes_are_frozen(result):
    field = dataclasses.fields(result)[0].name

    with pytest.raises(dataclasses.FrozenInstanceError):
        setattr(result, field, None)
