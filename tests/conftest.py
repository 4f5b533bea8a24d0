from io import BytesIO, TextIOWrapper

import pytest
from loguru import logger

from tests import ManualTimeSource


@pytest.fixture(scope="function")
def time_source() -> ManualTimeSource:
    return ManualTimeSource()


@pytest.fixture(scope="function")
def loguru_sink():
    textio = TextIOWrapper(BytesIO(), encoding="utf-8")
    sinkid = logger.add(sink=textio, level="DEBUG")
    yield textio
    logger.remove(sinkid)
