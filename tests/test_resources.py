import asyncio

import pytest

from agent_workspace.resources import Resource


class DictResource(Resource):
    def __init__(self) -> None:
        super().__init__("kv", "memory", connection={"namespace": "test"})
        self.connect_calls = 0
        self._data = {}

    async def _connect(self) -> None:
        self.connect_calls += 1
        self._data = {"answer": 42}

    async def _disconnect(self) -> None:
        self._data = {}

    async def query(self, request):
        return self._data.get(request)


def test_resource_metadata():
    resource = DictResource()
    assert resource.get_name() == "kv"
    assert resource.get_type() == "memory"
    assert resource.connection == {"namespace": "test"}
    assert resource.is_connected is False


def test_resource_context_manager_tracks_connection():
    resource = DictResource()

    async def run():
        async with resource as connected:
            assert connected.is_connected
            await connected.connect()
            return await connected.query("answer")

    assert asyncio.run(run()) == 42
    assert resource.connect_calls == 1
    assert resource.is_connected is False


def test_resource_is_abstract():
    with pytest.raises(TypeError):
        Resource("base", "none")
