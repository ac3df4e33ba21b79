import pytest

from xvuser.umalloc import HEADER_SIZE, MIN_GROWTH, Allocator, OutOfMemory

ONE_GROWTH = MIN_GROWTH * HEADER_SIZE


def test_addresses_are_aligned():
    heap = Allocator(ONE_GROWTH)
    for size in (1, 15, 16, 17, 100):
        assert heap.malloc(size) % HEADER_SIZE == 0


def test_blocks_do_not_overlap():
    heap = Allocator(4 * ONE_GROWTH)
    sizes = [1, 10, 100, 1000, 5000, 33]
    spans = sorted((heap.malloc(n), n) for n in sizes)
    for (a, n), (b, _) in zip(spans, spans[1:]):
        assert a + n <= b


def test_free_restores_free_units():
    heap = Allocator(ONE_GROWTH)
    heap.free(heap.malloc(1))
    total = heap.free_units()
    addrs = []
    previous = total
    for _ in range(5):
        addrs.append(heap.malloc(200))
        assert heap.free_units() < previous
        previous = heap.free_units()
    for addr in addrs:
        heap.free(addr)
    assert heap.free_units() == total


def test_freed_blocks_coalesce():
    heap = Allocator(ONE_GROWTH)
    addrs = [heap.malloc(100) for _ in range(10)]
    for index in (3, 0, 9, 5, 1, 8, 2, 7, 4, 6):
        heap.free(addrs[index])
    whole = heap.malloc((MIN_GROWTH - 1) * HEADER_SIZE)
    assert heap.free_units() == 0
    heap.free(whole)
    assert heap.free_units() == MIN_GROWTH


def test_heap_too_small_raises():
    with pytest.raises(OutOfMemory):
        Allocator(1024).malloc(1)


def test_request_larger_than_limit_raises():
    heap = Allocator(ONE_GROWTH)
    with pytest.raises(OutOfMemory):
        heap.malloc(ONE_GROWTH)


def test_double_free_raises():
    heap = Allocator(ONE_GROWTH)
    addr = heap.malloc(8)
    heap.free(addr)
    with pytest.raises(ValueError):
        heap.free(addr)


def test_free_of_unknown_address_raises():
    heap = Allocator(ONE_GROWTH)
    addr = heap.malloc(8)
    with pytest.raises(ValueError):
        heap.free(addr + 1)


def test_reuse_after_free():
    heap = Allocator(ONE_GROWTH)
    first = heap.malloc(64)
    heap.free(first)
    assert heap.malloc(64) == first