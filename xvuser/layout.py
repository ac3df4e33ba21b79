"""Memory layout, page-table arithmetic and system parameters."""

UINT64_MASK = (1 << 64) - 1

# System parameters.
NPROC = 64
NCPU = 8
NOFILE = 16
NFILE = 100
NINODE = 50
NDEV = 10
ROOTDEV = 1
MAXARG = 32
MAXOPBLOCKS = 10
LOGSIZE = MAXOPBLOCKS * 3
NBUF = MAXOPBLOCKS * 3
FSSIZE = 2000
MAXPATH = 128
USERSTACK = 1

# Machine status register bits.
MSTATUS_MPP_MASK = 3 << 11
MSTATUS_MPP_M = 3 << 11
MSTATUS_MPP_S = 1 << 11
MSTATUS_MPP_U = 0 << 11
MSTATUS_MIE = 1 << 3

# Supervisor status register bits.
SSTATUS_SPP = 1 << 8
SSTATUS_SPIE = 1 << 5
SSTATUS_UPIE = 1 << 4
SSTATUS_SIE = 1 << 1
SSTATUS_UIE = 1 << 0

# Supervisor interrupt enable bits.
SIE_SEIE = 1 << 9
SIE_STIE = 1 << 5
SIE_SSIE = 1 << 1

MIE_STIE = 1 << 5

SATP_SV39 = 8 << 60

# Paging.
PGSIZE = 4096
PGSHIFT = 12

PTE_V = 1 << 0
PTE_R = 1 << 1
PTE_W = 1 << 2
PTE_X = 1 << 3
PTE_U = 1 << 4

PXMASK = 0x1FF

# One beyond the highest usable virtual address (one bit below Sv39's limit).
MAXVA = 1 << (9 + 9 + 9 + 12 - 1)

# Physical memory layout of the virt machine.
UART0 = 0x10000000
UART0_IRQ = 10
VIRTIO0 = 0x10001000
VIRTIO0_IRQ = 1
PLIC = 0x0C000000
PLIC_PRIORITY = PLIC + 0x0
PLIC_PENDING = PLIC + 0x1000
KERNBASE = 0x80000000
PHYSTOP = KERNBASE + 128 * 1024 * 1024

TRAMPOLINE = MAXVA - PGSIZE
TRAPFRAME = TRAMPOLINE - PGSIZE


def _check_address(value):
    if value < 0:
        raise ValueError(f"address must not be negative: {value}")
    return value & UINT64_MASK


def pgroundup(sz):
    """Round a size up to the next page boundary (wrapping at 64 bits)."""
    sz = _check_address(sz)
    return (sz + PGSIZE - 1) & ~(PGSIZE - 1) & UINT64_MASK


def pgrounddown(a):
    """Round an address down to the start of its page."""
    a = _check_address(a)
    return a & ~(PGSIZE - 1) & UINT64_MASK


def pa2pte(pa):
    """Shift a physical address into the position it takes in a PTE."""
    pa = _check_address(pa)
    return ((pa >> 12) << 10) & UINT64_MASK


def pte2pa(pte):
    """Extract the physical address held in a PTE."""
    pte = _check_address(pte)
    return ((pte >> 10) << 12) & UINT64_MASK


def pte_flags(pte):
    """Return the low ten flag bits of a PTE."""
    return _check_address(pte) & 0x3FF


def _pxshift(level):
    return PGSHIFT + 9 * level


def px(level, va):
    """Return the 9-bit page-table index of a virtual address at a level."""
    if level < 0:
        raise ValueError(f"page-table level must not be negative: {level}")
    va = _check_address(va)
    return (va >> _pxshift(level)) & PXMASK


def kstack(p):
    """Virtual address of the kernel stack of process slot p."""
    if p < 0:
        raise ValueError(f"process slot must not be negative: {p}")
    return TRAMPOLINE - (p + 1) * 2 * PGSIZE


def make_satp(pagetable):
    """Build an Sv39 satp value for a page table at a physical address."""
    pagetable = _check_address(pagetable)
    return (SATP_SV39 | (pagetable >> 12)) & UINT64_MASK