from repository.memory_config_repository import MemoryConfigRepository


def test_last_delete_drops_namespace():
    repo = MemoryConfigRepository()
    repo.store("dev", "a.yaml", b"1")
    repo.store("dev", "b.yaml", b"2")
    repo.delete("dev", "a.yaml")
    assert repo.namespaces() == ["dev"]
    repo.delete("dev", "b.yaml")
    assert repo.namespaces() == []
    assert repo.list("dev") == []


def test_namespace_reappears_on_store():
    repo = MemoryConfigRepository()
    repo.store("dev", "a.yaml", b"1")
    repo.delete("dev", "a.yaml")
    repo.store("dev", "a.yaml", b"2")
    assert repo.namespaces() == ["dev"]
    assert repo.get("dev", "a.yaml") == b"2"
