# tests/conftest.py
import pytest

from dss_bridge import IDSS, DSSContext, NativeLibrary

from fake_engine import FEEDER_SCRIPT, FakeDSSEngine


@pytest.fixture
def fake_engine():
    return FakeDSSEngine()


@pytest.fixture
def library(fake_engine):
    """A `NativeLibrary` backed by the in-process fake engine."""
    return NativeLibrary(fake_engine, path="<fake>")


@pytest.fixture
def ctx(library):
    context = DSSContext.new(library)
    yield context
    context.close()


@pytest.fixture
def dss(library):
    engine = IDSS(DSSContext.new(library))
    yield engine
    engine.close()


@pytest.fixture
def feeder(dss):
    """An engine with the small test feeder loaded (not yet solved)."""
    dss.text.commands(FEEDER_SCRIPT)
    return dss
