"""Tests for the datastore guard shared by every service."""

from __future__ import annotations

import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from ideaswipe.config import settings
from ideaswipe.errors import UpstreamFailure, UpstreamTimeout
from ideaswipe.services.base import StoreService


async def test_call_returns_result(session) -> None:
    service = StoreService(session, timeout=1.0)

    async def _ok():
        return 42

    assert await service._call(_ok(), "answer") == 42


async def test_slow_call_raises_upstream_timeout(session) -> None:
    service = StoreService(session, timeout=0.01)

    with pytest.raises(UpstreamTimeout, match="load ideas"):
        await service._call(asyncio.sleep(1), "load ideas")


async def test_driver_error_becomes_upstream_failure(session) -> None:
    service = StoreService(session, timeout=1.0)

    async def _broken():
        raise OperationalError("SELECT 1", {}, Exception("connection reset"))

    with pytest.raises(UpstreamFailure) as excinfo:
        await service._call(_broken(), "load ideas")
    assert not isinstance(excinfo.value, UpstreamTimeout)
    assert isinstance(excinfo.value.__cause__, OperationalError)


def test_timeout_is_a_kind_of_upstream_failure() -> None:
    assert issubclass(UpstreamTimeout, UpstreamFailure)
    assert UpstreamTimeout().status_code == 500


def test_timeout_defaults_to_configured_store_timeout(session) -> None:
    assert StoreService(session).timeout == settings.STORE_TIMEOUT_SECONDS
    assert StoreService(session, timeout=0.5).timeout == 0.5
