import io

import pytest

from cokit.arena import ArenaAllocator, ArenaResource, InspectingResource, add_all


def test_first_allocation_at_zero():
    arena = ArenaResource(64)
    assert arena.allocate(3, 1) == 0


def test_allocations_aligned_and_disjoint():
    arena = ArenaResource(256)
    end = 0
    for size, align in [(3, 1), (4, 4), (1, 8), (10, 2), (5, 16)]:
        offset = arena.allocate(size, align)
        assert offset % align == 0
        assert offset >= end
        end = offset + size


def test_exhaustion_raises():
    arena = ArenaResource(8)
    arena.allocate(8, 1)
    with pytest.raises(MemoryError):
        arena.allocate(1, 1)


def test_default_capacity():
    arena = ArenaResource()
    assert arena.allocate(65536 * 161, 1) == 0
    with pytest.raises(MemoryError):
        arena.allocate(1, 1)


def test_release_resets():
    arena = ArenaResource(16)
    arena.allocate(16, 1)
    arena.release()
    assert arena.allocate(4, 4) == 0


def test_bad_align():
    with pytest.raises(ValueError):
        ArenaResource(16).allocate(1, 0)


def test_allocator_item_size_and_noop_deallocate():
    arena = ArenaResource(128)
    alloc = ArenaAllocator(arena, 8, 8)
    first = alloc.allocate(2)
    alloc.deallocate(first, 2)
    second = alloc.allocate(1)
    assert second >= first + 2 * 8
    assert second % 8 == 0


def test_allocator_release_and_equality():
    arena = ArenaResource(32)
    a = ArenaAllocator(arena, 4)
    b = ArenaAllocator(arena, 2)
    assert a == b
    assert not (a == ArenaAllocator(ArenaResource(32), 4))
    a.allocate(8)
    b.release()
    assert a.allocate(1) == 0


def test_inspecting_resource_logs():
    out = io.StringIO()
    inspector = InspectingResource(ArenaResource(64), out)
    offset = inspector.allocate(16, 8)
    inspector.deallocate(offset, 16, 8)
    lines = out.getvalue().splitlines()
    assert lines[0] == f"allocate    {offset:#x}  16  8"
    assert lines[1] == f"deallocate  {offset:#x}  16  8"


def test_inspecting_forwards_deallocate():
    calls = []

    class Upstream:
        def allocate(self, size, align):
            return 32

        def deallocate(self, offset, size, align):
            calls.append((offset, size, align))

    inspector = InspectingResource(Upstream(), io.StringIO())
    assert inspector.allocate(4, 4) == 32
    inspector.deallocate(32, 4, 4)
    assert calls == [(32, 4, 4)]


def test_add_all():
    assert add_all() == 0
    assert add_all(*range(5)) == sum(range(5))
    with pytest.raises(TypeError):
        add_all("a")