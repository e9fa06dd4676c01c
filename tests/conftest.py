"""
Shared fixtures. Qt widgets are created on the offscreen platform so the
suite runs without a display.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from graphicalcalculator.app.application import create_app
from graphicalcalculator.app.state import Store
from graphicalcalculator.model.editor import ExpressionEditor


@pytest.fixture(scope="session")
def qapp():
    return create_app([])


@pytest.fixture
def editor():
    return ExpressionEditor()


@pytest.fixture
def store(qapp):
    return Store()
