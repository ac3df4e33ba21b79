"""Virtio MMIO registers, virtqueue records and block request layout."""

import struct
from dataclasses import dataclass, field

# MMIO control register offsets.
VIRTIO_MMIO_MAGIC_VALUE = 0x000
VIRTIO_MMIO_VERSION = 0x004
VIRTIO_MMIO_DEVICE_ID = 0x008
VIRTIO_MMIO_VENDOR_ID = 0x00C
VIRTIO_MMIO_DEVICE_FEATURES = 0x010
VIRTIO_MMIO_DRIVER_FEATURES = 0x020
VIRTIO_MMIO_QUEUE_SEL = 0x030
VIRTIO_MMIO_QUEUE_NUM_MAX = 0x034
VIRTIO_MMIO_QUEUE_NUM = 0x038
VIRTIO_MMIO_QUEUE_READY = 0x044
VIRTIO_MMIO_QUEUE_NOTIFY = 0x050
VIRTIO_MMIO_INTERRUPT_STATUS = 0x060
VIRTIO_MMIO_INTERRUPT_ACK = 0x064
VIRTIO_MMIO_STATUS = 0x070
VIRTIO_MMIO_QUEUE_DESC_LOW = 0x080
VIRTIO_MMIO_QUEUE_DESC_HIGH = 0x084
VIRTIO_MMIO_DRIVER_DESC_LOW = 0x090
VIRTIO_MMIO_DRIVER_DESC_HIGH = 0x094
VIRTIO_MMIO_DEVICE_DESC_LOW = 0x0A0
VIRTIO_MMIO_DEVICE_DESC_HIGH = 0x0A4

# Status register bits.
VIRTIO_CONFIG_S_ACKNOWLEDGE = 1
VIRTIO_CONFIG_S_DRIVER = 2
VIRTIO_CONFIG_S_DRIVER_OK = 4
VIRTIO_CONFIG_S_FEATURES_OK = 8

# Device feature bits.
VIRTIO_BLK_F_RO = 5
VIRTIO_BLK_F_SCSI = 7
VIRTIO_BLK_F_CONFIG_WCE = 11
VIRTIO_BLK_F_MQ = 12
VIRTIO_F_ANY_LAYOUT = 27
VIRTIO_RING_F_INDIRECT_DESC = 28
VIRTIO_RING_F_EVENT_IDX = 29

# Number of descriptors; a power of two.
NUM = 8

VRING_DESC_F_NEXT = 1
VRING_DESC_F_WRITE = 2

VIRTIO_BLK_T_IN = 0
VIRTIO_BLK_T_OUT = 1

_DESC = struct.Struct("<QIHH")
_AVAIL = struct.Struct(f"<HH{NUM}HH")
_USED_ELEM = struct.Struct("<II")
_USED_HEAD = struct.Struct("<HH")
_BLOCK_REQUEST = struct.Struct("<IIQ")

DESC_SIZE = _DESC.size
AVAIL_SIZE = _AVAIL.size
USED_SIZE = _USED_HEAD.size + NUM * _USED_ELEM.size
BLOCK_REQUEST_SIZE = _BLOCK_REQUEST.size


def _pack(layout, *values):
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc


def _require(data, size, what):
    data = bytes(data)
    if len(data) < size:
        raise ValueError(f"{what} needs {size} bytes, got {len(data)}")
    return data


@dataclass
class VirtqDesc:
    """A single descriptor in the descriptor table."""

    addr: int = 0
    length: int = 0
    flags: int = 0
    next: int = 0

    def pack(self):
        """Encode the descriptor as device memory bytes."""
        return _pack(_DESC, self.addr, self.length, self.flags, self.next)


@dataclass
class VirtqAvail:
    """The driver's ring of available descriptor chain heads."""

    flags: int = 0
    idx: int = 0
    ring: list = field(default_factory=lambda: [0] * NUM)
    unused: int = 0

    def __post_init__(self):
        self.ring = list(self.ring)
        if len(self.ring) != NUM:
            raise ValueError(f"avail ring must hold {NUM} entries")

    def pack(self):
        """Encode the available ring as device memory bytes."""
        return _pack(_AVAIL, self.flags, self.idx, *self.ring, self.unused)


@dataclass
class VirtqUsedElem:
    """One completed request reported by the device."""

    id: int = 0
    length: int = 0


@dataclass
class VirtqUsed:
    """The device's ring of completed descriptor chains."""

    flags: int = 0
    idx: int = 0
    ring: list = field(default_factory=lambda: [VirtqUsedElem() for _ in range(NUM)])

    def __post_init__(self):
        self.ring = list(self.ring)
        if len(self.ring) != NUM:
            raise ValueError(f"used ring must hold {NUM} entries")

    def pack(self):
        """Encode the used ring as device memory bytes."""
        head = _pack(_USED_HEAD, self.flags, self.idx)
        return head + b"".join(_pack(_USED_ELEM, e.id, e.length) for e in self.ring)


@dataclass
class BlockRequest:
    """First descriptor of a disk request: operation and sector."""

    type: int = VIRTIO_BLK_T_IN
    reserved: int = 0
    sector: int = 0

    def pack(self):
        """Encode the request header as device memory bytes."""
        return _pack(_BLOCK_REQUEST, self.type, self.reserved, self.sector)


def unpack_desc(data):
    """Decode a descriptor from the start of data."""
    data = _require(data, DESC_SIZE, "descriptor")
    return VirtqDesc(*_DESC.unpack_from(data))


def unpack_used(data):
    """Decode a used ring from the start of data."""
    data = _require(data, USED_SIZE, "used ring")
    flags, idx = _USED_HEAD.unpack_from(data)
    ring = [
        VirtqUsedElem(*elem)
        for elem in _USED_ELEM.iter_unpack(data[_USED_HEAD.size:USED_SIZE])
    ]
    return VirtqUsed(flags=flags, idx=idx, ring=ring)


def unpack_block_request(data):
    """Decode a block request header from the start of data."""
    data = _require(data, BLOCK_REQUEST_SIZE, "block request")
    return BlockRequest(*_BLOCK_REQUEST.unpack_from(data))