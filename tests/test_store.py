from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from users_service.infrastructure.ids import IdAllocator
from users_service.infrastructure.store import UserStore

def test_allocator_sequence():
    """Тест последовательности id"""
    ids = IdAllocator()
    assert [ids.allocate() for _ in range(3)] == [1, 2, 3]
    assert ids.allocate() == 4

def test_empty_store():
    """Тест пустого хранилища"""
    store = UserStore()
    assert store.list() == ([], 0)
    assert len(store) == 0

def test_create_assigns_increasing_ids():
    """Тест выдачи возрастающих id"""
    store = UserStore()
    first = store.create("Ann", "ann@x.com", "user")
    second = store.create("Bob", "bob@x.com", "admin")
    assert first.id == 1
    assert second.id == 2

def test_create_stamps_created_at():
    """Тест времени создания из переданных часов"""
    moment = datetime(2024, 1, 1, tzinfo=timezone.utc)
    store = UserStore(clock=lambda: moment)
    user = store.create("Ann", "ann@x.com", "user")
    assert user.created_at == moment

def test_list_preserves_insertion_order():
    """Тест порядка вставки"""
    store = UserStore()
    for name in ["Ann", "Bob", "Cid"]:
        store.create(name, f"{name.lower()}@x.com", "viewer")
    users, count = store.list()
    assert count == 3
    assert [u.name for u in users] == ["Ann", "Bob", "Cid"]

def test_get_by_id():
    """Тест поиска по id, повторный вызов даёт тот же результат"""
    store = UserStore()
    user = store.create("Ann", "ann@x.com", "user")
    assert store.get_by_id(user.id) == user
    assert store.get_by_id(user.id) == store.get_by_id(user.id)
    assert store.get_by_id(999) is None

def test_delete_by_id():
    """Тест удаления"""
    store = UserStore()
    user = store.create("Ann", "ann@x.com", "user")
    assert store.delete_by_id(user.id) is True
    assert store.get_by_id(user.id) is None
    assert store.list() == ([], 0)

def test_delete_missing_leaves_store_unchanged():
    """Удаление несуществующего id не меняет хранилище"""
    store = UserStore()
    store.create("Ann", "ann@x.com", "user")
    before = store.list()
    assert store.delete_by_id(42) is False
    assert store.list() == before

def test_deleted_ids_not_reused():
    """Удалённые id не переиспользуются"""
    store = UserStore()
    store.create("Ann", "ann@x.com", "user")
    second = store.create("Bob", "bob@x.com", "user")
    store.delete_by_id(second.id)
    third = store.create("Cid", "cid@x.com", "user")
    assert third.id == 3

def test_count_matches_creations_minus_deletions():
    """count = созданные - удалённые"""
    store = UserStore()
    created = [store.create(f"User{i}", f"u{i}@x.com", "user") for i in range(10)]
    deleted = sum(store.delete_by_id(u.id) for u in created[::3])
    deleted += store.delete_by_id(created[0].id)  # повторное удаление не считается
    _, count = store.list()
    assert count == len(created) - deleted == 6

def test_concurrent_creates_unique_ids():
    """Параллельное создание из потоков даёт уникальные упорядоченные id"""
    store = UserStore()
    with ThreadPoolExecutor(max_workers=8) as pool:
        users = list(pool.map(lambda i: store.create(f"User{i}", f"u{i}@x.com", "user"), range(200)))
    assert sorted(u.id for u in users) == list(range(1, 201))
    listed, count = store.list()
    assert count == 200
    assert [u.id for u in listed] == sorted(u.id for u in listed)
