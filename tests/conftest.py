"""Shared fixtures for py-frame tests."""

import string

import pytest
from loguru import logger

from py_frame import Policy, make_container


def _letters_frame(policy):
    return make_container(
        {
            'letters_lower': list(string.ascii_lowercase),
            'letters_upper': list(string.ascii_uppercase),
            'values': list(range(1, 27)),
        },
        policy=policy,
    )


@pytest.fixture
def legacy_frame():
    """26-row frame under the legacy policy."""
    return _letters_frame(Policy.LEGACY)


@pytest.fixture
def strict_frame():
    """The same 26-row frame under the strict policy."""
    return _letters_frame(Policy.STRICT)


@pytest.fixture(params=[Policy.LEGACY, Policy.STRICT], ids=['legacy', 'strict'])
def any_frame(request):
    """The 26-row frame under each policy in turn."""
    return _letters_frame(request.param)


@pytest.fixture
def log_messages():
    """Collect py_frame debug log messages."""
    messages = []
    logger.enable("py_frame")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("py_frame")
