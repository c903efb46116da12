import asyncio
from types import SimpleNamespace

import pytest

from fintrack.services.uploads import UploadError, build_upload_name, save_profile_image


def _upload(filename: str, content: bytes) -> SimpleNamespace:
    async def read() -> bytes:
        return content

    return SimpleNamespace(filename=filename, read=read)


def test_upload_name_keeps_extension() -> None:
    name = build_upload_name("Avatar.PNG")

    assert name.endswith(".png")
    assert name.split("-")[0].isdigit()


def test_profile_image_is_written(tmp_path) -> None:
    path = asyncio.run(save_profile_image(_upload("me.jpg", b"\xff\xd8data"), str(tmp_path / "uploads")))

    assert path.startswith("/uploads/")
    stored = tmp_path / "uploads" / path.removeprefix("/uploads/")
    assert stored.read_bytes() == b"\xff\xd8data"


def test_unsupported_extension_is_rejected(tmp_path) -> None:
    with pytest.raises(UploadError, match="Unsupported image type"):
        asyncio.run(save_profile_image(_upload("script.sh", b"echo"), str(tmp_path)))


def test_empty_upload_is_rejected(tmp_path) -> None:
    with pytest.raises(UploadError, match="empty"):
        asyncio.run(save_profile_image(_upload("me.png", b""), str(tmp_path)))
