import pytest

from xvuser.virtio import (
    AVAIL_SIZE,
    BLOCK_REQUEST_SIZE,
    DESC_SIZE,
    NUM,
    USED_SIZE,
    VIRTIO_BLK_T_IN,
    VIRTIO_BLK_T_OUT,
    VRING_DESC_F_NEXT,
    VRING_DESC_F_WRITE,
    BlockRequest,
    VirtqAvail,
    VirtqDesc,
    VirtqUsed,
    VirtqUsedElem,
    unpack_block_request,
    unpack_desc,
    unpack_used,
)


def test_queue_size_is_power_of_two():
    size = len(unpack_used(bytes(USED_SIZE)).ring)
    assert size == NUM == 8
    assert size & (size - 1) == 0


def test_desc_round_trip():
    desc = VirtqDesc(
        addr=0x87F00000, length=1024, flags=VRING_DESC_F_NEXT | VRING_DESC_F_WRITE, next=3
    )
    data = desc.pack()
    assert len(data) == DESC_SIZE
    assert unpack_desc(data) == desc


def test_desc_size():
    assert len(VirtqDesc().pack()) == 16


def test_desc_little_endian_address():
    data = VirtqDesc(addr=1).pack()
    assert data[0] == 1
    assert data[1:8] == bytes(7)


def test_desc_field_range_checked():
    with pytest.raises(ValueError):
        VirtqDesc(next=1 << 16).pack()


def test_avail_pack_layout():
    avail = VirtqAvail(idx=2, ring=[5, 6, 0, 0, 0, 0, 0, 0])
    data = avail.pack()
    assert len(data) == AVAIL_SIZE
    assert data[2:4] == (2).to_bytes(2, "little")
    assert data[4:6] == (5).to_bytes(2, "little")
    assert data[6:8] == (6).to_bytes(2, "little")


def test_avail_ring_length_checked():
    with pytest.raises(ValueError):
        VirtqAvail(ring=[0] * (NUM - 1))


def test_used_round_trip():
    ring = [VirtqUsedElem(id=i, length=i * 10) for i in range(NUM)]
    used = VirtqUsed(flags=0, idx=4, ring=ring)
    data = used.pack()
    assert len(data) == USED_SIZE
    assert unpack_used(data) == used


def test_used_default_is_zeroed():
    assert VirtqUsed().pack() == bytes(USED_SIZE)


def test_used_ring_length_checked():
    with pytest.raises(ValueError):
        VirtqUsed(ring=[VirtqUsedElem()])


def test_unpack_used_short():
    with pytest.raises(ValueError):
        unpack_used(bytes(USED_SIZE - 1))


def test_block_request_round_trip():
    req = BlockRequest(type=VIRTIO_BLK_T_OUT, sector=2 * 33)
    data = req.pack()
    assert len(data) == BLOCK_REQUEST_SIZE
    assert unpack_block_request(data) == req


def test_block_request_default_is_read():
    req = unpack_block_request(BlockRequest().pack())
    assert req.type == VIRTIO_BLK_T_IN


def test_unpack_desc_short():
    with pytest.raises(ValueError):
        unpack_desc(bytes(DESC_SIZE - 1))


def test_unpack_block_request_short():
    with pytest.raises(ValueError):
        unpack_block_request(b"")