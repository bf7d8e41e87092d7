"""Shared pytest fixtures for POS client tests."""

import pytest

from pos_client.errors import SubmissionRejectedError
from pos_client.session import OrderSession

from .fixtures import FakeRecorder, make_product


@pytest.fixture
def product():
    return make_product()


@pytest.fixture
def session():
    return OrderSession()


@pytest.fixture
def recorder():
    return FakeRecorder()


@pytest.fixture
def rejecting_recorder():
    return FakeRecorder(error=SubmissionRejectedError("Insufficient stock for Kopi Susu", status_code=400))
