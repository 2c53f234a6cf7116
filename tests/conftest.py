# -*- coding: utf-8 -*-
""" Global fixtures """

import pytest

from ._test_utils import assert_async_execution, assert_sync_execution


@pytest.fixture
def starwars_schema():
    from ._star_wars import StarWarsSchema

    return StarWarsSchema


@pytest.fixture(
    params=(
        pytest.param(assert_sync_execution, id="blocking"),
        pytest.param(assert_async_execution, id="asyncio"),
    )
)
def assert_execution(request):
    """
    Run a query with both the blocking and the asyncio entry points.

    Both are exposed as coroutines so tests can be written once.
    """
    runner = request.param

    async def _assert_execution(*args, **kwargs):
        result = runner(*args, **kwargs)
        if result is not None:
            await result

    yield _assert_execution


@pytest.fixture
def raiser():
    def factory(cls, *args, **kwargs):
        assert issubclass(cls, Exception)

        def _raiser(*_a, **_kw):
            raise cls(*args, **kwargs)

        return _raiser

    return factory
