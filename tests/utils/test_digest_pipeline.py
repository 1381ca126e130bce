import random
import time
import pytest
from blake3 import blake3
from models.algorithm import Algorithm, DEFAULT_ALGORITHM
from models.hash_entry import HashEntry, HashFile
from services.hashing_service import HashingService
from utils.digest_pipeline import hash_files, resolve_algorithm, verify_hash_file
from utils.exceptions import DigestIOError


@pytest.fixture
def many_files(tmp_path):
    paths = []
    for i in range(25):
        path = tmp_path / f"f{i:02d}.dat"
        path.write_bytes(f"content {i}\n".encode())
        paths.append(str(path))
    return paths


def test_hash_files_sorted_by_path(hashing_service, many_files):
    """Results come back in byte-wise path order whatever the input order."""
    shuffled = many_files[:]
    random.Random(7).shuffle(shuffled)
    results = hash_files(shuffled, Algorithm.BLAKE3, hashing_service, max_workers=8)
    assert [r.path for r in results] == sorted(many_files)


def test_hash_files_order_is_stable_across_runs(hashing_service, many_files):
    runs = [
        [(r.digest, r.path) for r in hash_files(list(reversed(many_files)), Algorithm.SHA2_256, hashing_service, max_workers=w)]
        for w in (1, 3, 16)
    ]
    assert runs[0] == runs[1] == runs[2]


def test_hash_files_byte_order_not_locale_order(tmp_path, hashing_service):
    """Uppercase sorts before lowercase, as in a byte-wise comparison."""
    names = ["b", "B", "a", "_"]
    for name in names:
        (tmp_path / name).write_bytes(b"x")
    results = hash_files([str(tmp_path / n) for n in names], Algorithm.MD5, hashing_service)
    assert [r.path.rsplit("/", 1)[-1] for r in results] == ["B", "_", "a", "b"]


def test_hash_files_digests(hashing_service, sample_files):
    results = hash_files([str(sample_files["a.txt"])], Algorithm.BLAKE3, hashing_service)
    assert len(results) == 1
    assert results[0].digest == blake3(b"hello\n").hexdigest()


def test_hash_files_skips_directories(tmp_path, hashing_service, sample_files):
    """A directory among N files gives exactly N results and no error."""
    subdir = tmp_path / "subdir"
    subdir.mkdir()
    paths = [str(p) for p in sample_files.values()] + [str(subdir)]
    results = hash_files(paths, Algorithm.BLAKE3, hashing_service)
    assert len(results) == len(sample_files)
    assert str(subdir) not in [r.path for r in results]


def test_hash_files_only_directories(tmp_path, hashing_service):
    assert hash_files([str(tmp_path)], Algorithm.BLAKE3, hashing_service) == []


def test_hash_files_empty_input(hashing_service):
    assert hash_files([], Algorithm.BLAKE3, hashing_service) == []


def test_hash_files_missing_file_aborts_batch(tmp_path, hashing_service, sample_files):
    missing = tmp_path / "missing.txt"
    paths = [str(sample_files["a.txt"]), str(missing), str(sample_files["b.bin"])]
    with pytest.raises(DigestIOError) as exc_info:
        hash_files(paths, Algorithm.BLAKE3, hashing_service)
    assert exc_info.value.path == str(missing)


def test_hash_files_first_error_in_input_order(tmp_path, hashing_service):
    first, second = tmp_path / "missing1", tmp_path / "missing2"
    with pytest.raises(DigestIOError) as exc_info:
        hash_files([str(first), str(second)], Algorithm.BLAKE3, hashing_service)
    assert exc_info.value.path == str(first)


def test_hash_files_runs_every_unit_before_failing(tmp_path, sample_files):
    """A failing unit does not cancel the others; the error surfaces after the pool drains."""
    calls = []

    class SlowService(HashingService):
        def calculate(self, file_path, algorithm):
            calls.append(file_path)
            time.sleep(0.01)
            return super().calculate(file_path, algorithm)

    paths = [str(tmp_path / "missing")] + [str(p) for p in sample_files.values()]
    with pytest.raises(DigestIOError):
        hash_files(paths, Algorithm.BLAKE3, SlowService(), max_workers=1)
    assert sorted(calls) == sorted(paths)


# ────────────────────────────────────────────────
# VERIFY MODE
# ────────────────────────────────────────────────

def test_resolve_algorithm_precedence():
    tagged = HashEntry(algorithm=Algorithm.MD5, hash="x", file="f")
    untagged = HashEntry(hash="x", file="f")
    plain = HashFile(entries=[])
    with_default = HashFile(algorithm=Algorithm.SHA1, entries=[])

    assert resolve_algorithm(tagged, with_default, Algorithm.SHA2_256) is Algorithm.MD5
    assert resolve_algorithm(untagged, with_default, Algorithm.SHA2_256) is Algorithm.SHA1
    assert resolve_algorithm(untagged, plain, Algorithm.SHA2_256) is Algorithm.SHA2_256
    assert resolve_algorithm(untagged, plain, None) is DEFAULT_ALGORITHM is Algorithm.BLAKE3


def test_verify_ok_and_err(work_dir, hashing_service):
    (work_dir / "a.txt").write_bytes(b"hello\n")
    (work_dir / "b.txt").write_bytes(b"tampered\n")
    hash_file = HashFile(entries=[
        HashEntry(hash=blake3(b"hello\n").hexdigest(), file="a.txt"),
        HashEntry(algorithm=Algorithm.MD5, hash="b1946ac92492d2347c6235b4d2611184", file="b.txt"),
    ])
    results = verify_hash_file(hash_file, None, hashing_service)
    assert [(r.path, r.matched) for r in results] == [("a.txt", True), ("b.txt", False)]


def test_verify_untagged_entries_use_default(work_dir, hashing_service):
    (work_dir / "a.txt").write_bytes(b"hello\n")
    sha = "5891b5b522d5df086d0ff0b110fbd9d21bb4fc7163af34d08286a2e846f6be03"
    hash_file = HashFile(entries=[HashEntry(hash=sha, file="a.txt")])
    assert verify_hash_file(hash_file, Algorithm.SHA2_256, hashing_service)[0].matched
    assert not verify_hash_file(hash_file, None, hashing_service)[0].matched


def test_verify_comparison_is_case_sensitive(work_dir, hashing_service):
    (work_dir / "a.txt").write_bytes(b"hello\n")
    upper = blake3(b"hello\n").hexdigest().upper()
    hash_file = HashFile(entries=[HashEntry(hash=upper, file="a.txt")])
    assert not verify_hash_file(hash_file, None, hashing_service)[0].matched


def test_verify_keeps_listing_order(work_dir, hashing_service):
    names = ["z", "m", "a"]
    for name in names:
        (work_dir / name).write_bytes(name.encode())
    hash_file = HashFile(entries=[HashEntry(hash=blake3(n.encode()).hexdigest(), file=n) for n in names])
    results = verify_hash_file(hash_file, None, hashing_service, max_workers=4)
    assert [r.path for r in results] == names
    assert all(r.matched for r in results)


def test_verify_missing_file_aborts(work_dir, hashing_service):
    (work_dir / "a.txt").write_bytes(b"hello\n")
    hash_file = HashFile(entries=[
        HashEntry(hash=blake3(b"hello\n").hexdigest(), file="a.txt"),
        HashEntry(hash="00", file="gone.txt"),
    ])
    with pytest.raises(DigestIOError) as exc_info:
        verify_hash_file(hash_file, None, hashing_service)
    assert exc_info.value.path == "gone.txt"


def test_verify_directory_entry_aborts(work_dir, hashing_service):
    (work_dir / "subdir").mkdir()
    hash_file = HashFile(entries=[HashEntry(hash="00", file="subdir")])
    with pytest.raises(DigestIOError) as exc_info:
        verify_hash_file(hash_file, None, hashing_service)
    assert exc_info.value.is_directory
