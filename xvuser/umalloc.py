"""First-fit free-list allocator over a simulated, growable heap."""

HEADER_SIZE = 16
MIN_GROWTH = 4096  # units requested from the heap at a time

_BASE = -1  # the zero-sized sentinel block, below every heap block


class OutOfMemory(MemoryError):
    """Raised when the heap cannot grow to satisfy a request."""


class Allocator:
    """Circular free list with a roving pointer and coalescing on free.

    Memory is handed out in units of HEADER_SIZE bytes; every block carries
    one header unit in front of the address returned to the caller.
    """

    def __init__(self, heap_limit):
        if heap_limit < 0:
            raise ValueError(f"heap limit must not be negative: {heap_limit}")
        self._limit = heap_limit // HEADER_SIZE
        self._brk = 0
        self._next = {}
        self._size = {}
        self._freep = None
        self._allocated = {}

    def malloc(self, nbytes):
        """Allocate nbytes and return the address of the block."""
        if nbytes < 0:
            raise ValueError(f"size must not be negative: {nbytes}")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        if self._freep is None:
            self._next[_BASE] = _BASE
            self._size[_BASE] = 0
            self._freep = _BASE
        prevp = self._freep
        p = self._next[prevp]
        while True:
            size = self._size[p]
            if size >= nunits:
                if size == nunits:
                    self._next[prevp] = self._next.pop(p)
                    del self._size[p]
                else:
                    self._size[p] = size - nunits
                    p += size - nunits
                self._freep = prevp
                self._allocated[p] = nunits
                return (p + 1) * HEADER_SIZE
            if p == self._freep:
                p = self._morecore(nunits)
                if p is None:
                    raise OutOfMemory(f"cannot allocate {nbytes} bytes")
            prevp, p = p, self._next[p]

    def free(self, addr):
        """Return a block obtained from malloc to the free list."""
        unit, rem = divmod(addr, HEADER_SIZE)
        bp = unit - 1
        if rem or bp not in self._allocated:
            raise ValueError(f"address {addr:#x} was not allocated")
        self._size[bp] = self._allocated.pop(bp)
        self._release(bp)

    def free_units(self):
        """Total number of units held on the free list."""
        return sum(size for unit, size in self._size.items() if unit != _BASE)

    def _morecore(self, nunits):
        nunits = max(nunits, MIN_GROWTH)
        if self._brk + nunits > self._limit:
            return None
        hp = self._brk
        self._brk += nunits
        self._size[hp] = nunits
        self._release(hp)
        return self._freep

    def _release(self, bp):
        p = self._freep
        while not (p < bp < self._next[p]):
            if p >= self._next[p] and (bp > p or bp < self._next[p]):
                break
            p = self._next[p]
        following = self._next[p]
        if bp + self._size[bp] == following:
            self._size[bp] += self._size.pop(following)
            self._next[bp] = self._next.pop(following)
        else:
            self._next[bp] = following
        if p + self._size[p] == bp:
            self._size[p] += self._size.pop(bp)
            self._next[p] = self._next.pop(bp)
        else:
            self._next[p] = bp
        self._freep = p