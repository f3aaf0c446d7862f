import pytest

from linecfg import config

from ._helpers import FilePair, MemoryPair


@pytest.fixture(params=["memory", "file"])
def pair(request, tmp_path):
    """
    A writer/reader factory over the same storage, for each kind of
    line context.
    """
    if request.param == "memory":
        return MemoryPair()
    return FilePair(tmp_path / "test.cfg")


@pytest.fixture(autouse=True)
def _restore_default_config():
    yield
    config._global_config = config.LinecfgConfig()
    config._local = config._ConfigLocal()
