from liteset import LiteSet, SetIdAllocator, default_set_ids


def test_allocate_increments():
    allocator = SetIdAllocator()

    assert [allocator.allocate() for _ in range(3)] == [0, 1, 2]


def test_allocate_from_start():
    allocator = SetIdAllocator(7)

    assert allocator.allocate() == 7
    assert allocator.allocate() == 8


def test_allocators_have_distinct_namespaces():
    assert SetIdAllocator().namespace != SetIdAllocator().namespace
    assert SetIdAllocator().namespace != default_set_ids.namespace


def test_allocators_are_independent():
    first = SetIdAllocator()
    second = SetIdAllocator()

    first.allocate()
    first.allocate()

    assert second.allocate() == 0


def test_default_allocator_is_shared():
    before = LiteSet().set_id

    assert default_set_ids.allocate() == before + 1
    assert LiteSet().set_id == before + 2
