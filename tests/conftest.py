import pytest

from sqlgen import Builder, builder


@pytest.fixture
def sql() -> Builder:
    return builder()
