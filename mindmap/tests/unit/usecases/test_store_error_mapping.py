from mindmap.domain.errors import StorageFailure
from mindmap.domain.ports import UserStoreError
from mindmap.usecases.error_mapping import map_store_error


def test_store_error_becomes_storage_failure() -> None:
    mapped = map_store_error(UserStoreError("disk full"))
    assert isinstance(mapped, StorageFailure)
    assert mapped.code == "STORAGE_FAILED"
    assert mapped.message == "User storage unavailable: disk full"


def test_store_error_without_detail() -> None:
    mapped = map_store_error(UserStoreError())
    assert mapped.message == "User storage unavailable."
