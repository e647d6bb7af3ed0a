import pytest

from edhash.randombytes import RandomBytesError, RandomSource, randombytes, read_device


def test_read_device_returns_prefix(tmp_path):
    path = tmp_path / "pool"
    path.write_bytes(bytes(range(100)))
    assert read_device(path, 10) == bytes(range(10))


def test_read_device_zero_length(tmp_path):
    path = tmp_path / "pool"
    path.write_bytes(b"abc")
    assert read_device(path, 0) == b""


def test_read_device_short_file_raises(tmp_path):
    path = tmp_path / "pool"
    path.write_bytes(b"abc")
    with pytest.raises(RandomBytesError):
        read_device(path, 4)


def test_read_device_missing_file_raises(tmp_path):
    with pytest.raises(RandomBytesError):
        read_device(tmp_path / "missing", 4)


def test_error_is_an_os_error(tmp_path):
    with pytest.raises(OSError):
        read_device(tmp_path / "missing", 1)


def test_read_device_negative_length(tmp_path):
    with pytest.raises(ValueError):
        read_device(tmp_path / "missing", -1)


@pytest.mark.parametrize("length", [0, 1, 32, 1000])
def test_system_source_length(length):
    assert len(randombytes(length)) == length


def test_system_source_varies():
    samples = [randombytes(32, RandomSource.SYSTEM) for _ in range(5)]
    assert all(len(sample) == 32 for sample in samples)
    assert len(set(samples)) == 5


def test_urandom_source_length():
    assert len(randombytes(48, RandomSource.URANDOM)) == 48


def test_randombytes_negative_length():
    with pytest.raises(ValueError):
        randombytes(-5)


def test_urandom_device_path_is_readable():
    data = read_device(RandomSource.URANDOM.value, 24)
    assert len(data) == 24