from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.e2e.helpers import Scenario, start_fake_server

if TYPE_CHECKING:
    from collections.abc import Generator


def _serve(scenario: Scenario) -> Generator[int, None, None]:
    proc, port = start_fake_server(scenario)
    yield port
    proc.terminate()
    proc.wait()


@pytest.fixture
def leaf_server() -> Generator[int, None, None]:
    yield from _serve(Scenario.LEAF)


@pytest.fixture
def index_server() -> Generator[int, None, None]:
    yield from _serve(Scenario.INDEX)


@pytest.fixture
def broken_server() -> Generator[int, None, None]:
    yield from _serve(Scenario.BROKEN)
