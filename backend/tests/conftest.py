"""Test fixtures — temporary downloads directory and FastAPI test client."""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from fileserver.config import Settings
from fileserver.main import create_app


def write_file(directory, name: str, content: bytes, mtime: int):
    """Create ``name`` with ``content`` and a fixed modification time."""
    path = directory / name
    path.write_bytes(content)
    os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def downloads_dir(tmp_path):
    directory = tmp_path / "Downloads"
    directory.mkdir()
    return directory


@pytest.fixture
def settings(downloads_dir) -> Settings:
    return Settings(downloads_dir=str(downloads_dir))


@pytest_asyncio.fixture
async def client(settings: Settings):
    """Provide an async test client bound to the temporary directory."""
    app = create_app(settings)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


def write_raw_name(directory, raw_name: bytes, content: bytes, mtime: int) -> None:
    """Create a file whose name is arbitrary bytes (may not be valid UTF-8)."""
    path = os.path.join(os.fsencode(directory), raw_name)
    with open(path, "wb") as f:
        f.write(content)
    os.utime(path, (mtime, mtime))
