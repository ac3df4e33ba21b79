import pytest

from xvuser.stat import STAT_SIZE, FileType, OpenFlags, Stat, unpack_stat


@pytest.mark.parametrize(
    "raw, expected",
    [(1, FileType.DIR), (2, FileType.FILE), (3, FileType.DEVICE)],
)
def test_file_type_values(raw, expected):
    st = unpack_stat(Stat(dev=1, ino=2, type=raw, nlink=1, size=0).pack())
    assert st.type is expected


def test_open_flag_values():
    assert OpenFlags(0x000) == OpenFlags.RDONLY
    assert OpenFlags(0x001) == OpenFlags.WRONLY
    assert OpenFlags(0x002) == OpenFlags.RDWR
    assert OpenFlags(0x200) == OpenFlags.CREATE
    assert OpenFlags(0x400) == OpenFlags.TRUNC


def test_open_flags_combine():
    flags = OpenFlags(0x601)
    assert flags == OpenFlags.WRONLY | OpenFlags.CREATE | OpenFlags.TRUNC
    assert OpenFlags.CREATE in flags
    assert OpenFlags.RDWR not in flags
    assert int(flags) & OpenFlags.TRUNC == OpenFlags.TRUNC


def test_stat_round_trip():
    st = Stat(dev=1, ino=17, type=FileType.FILE, nlink=2, size=123456)
    data = st.pack()
    assert len(data) == STAT_SIZE
    assert unpack_stat(data) == st


def test_stat_size():
    assert len(Stat(dev=0, ino=0, type=FileType.FILE, nlink=0, size=0).pack()) == 24


def test_stat_accepts_plain_int_type():
    st = Stat(dev=1, ino=2, type=1, nlink=1, size=0)
    assert st.type is FileType.DIR


def test_unknown_type_rejected():
    with pytest.raises(ValueError):
        Stat(dev=1, ino=2, type=9, nlink=1, size=0)


def test_unpack_wrong_length():
    with pytest.raises(ValueError):
        unpack_stat(bytes(STAT_SIZE - 1))


def test_unpack_unknown_type():
    data = bytearray(Stat(dev=1, ino=2, type=FileType.DIR, nlink=1, size=0).pack())
    data[8] = 0
    with pytest.raises(ValueError):
        unpack_stat(bytes(data))


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Stat(dev=1, ino=2, type=FileType.FILE, nlink=1, size=-1).pack()