import pytest

from hillcracker.classical.polygraphic.codec import block_view
from hillcracker.classical.polygraphic.solver import encrypt_block, solve_key
from hillcracker.core.errors import KeyNotFoundError, SearchTimeoutError
from hillcracker.core.matrix import KeyMatrix, RowVector


def _encrypt_all(blocks, key):
    return [encrypt_block(b, key, key.modulus) for b in blocks]


def test_encrypt_block():
    assert encrypt_block(RowVector([7, 4]), KeyMatrix(3, 3, 2, 5), 26).as_tuple() == (3, 15)


def test_solver_recovers_key():
    key = KeyMatrix(3, 3, 2, 5)
    plain = block_view("THHEINERAN")
    cipher = _encrypt_all(plain, key)

    found = solve_key(plain, cipher, 26)

    targets = {c.as_tuple() for c in cipher}
    assert all(encrypt_block(p, found, 26).as_tuple() in targets for p in plain)
    # TH and HE form a basis mod 26 and no other linear map permutes the five digrams
    assert found == key


def test_solver_first_match_in_row_major_order():
    # Every key with first row (0, 0) maps (1, 0) to (0, 0)
    found = solve_key([RowVector([1, 0])], [RowVector([0, 0])], 5)
    assert found.as_tuple() == (0, 0, 0, 0)


def test_solver_invertible_only_skips_singular_keys():
    with pytest.raises(KeyNotFoundError):
        solve_key([RowVector([1, 0])], [RowVector([0, 0])], 5, invertible_only=True)


def test_solver_exhaustion():
    plain = [RowVector([1, 0]), RowVector([0, 1]), RowVector([1, 1])]
    with pytest.raises(KeyNotFoundError):
        solve_key(plain, [RowVector([1, 0])], 4)


def test_solver_needs_plaintext():
    with pytest.raises(ValueError):
        solve_key([], [RowVector([1, 0])], 26)


def test_solver_reports_progress():
    calls = []
    with pytest.raises(KeyNotFoundError):
        solve_key([RowVector([1, 0])], [], 3, progress=calls.append)
    assert calls == [1, 1, 1]


def test_solver_time_limit():
    with pytest.raises(SearchTimeoutError):
        solve_key([RowVector([1, 0])], [], 26, time_limit=1e-9)


@pytest.mark.parametrize("workers", [2, 3, 10])
def test_parallel_matches_sequential(workers):
    key = KeyMatrix(2, 3, 1, 4, modulus=7)
    plain = [RowVector([1, 2]), RowVector([3, 4])]
    cipher = _encrypt_all(plain, key)

    sequential = solve_key(plain, cipher, 7)
    parallel = solve_key(plain, cipher, 7, workers=workers)
    assert parallel == sequential


def test_parallel_exhaustion():
    plain = [RowVector([1, 0]), RowVector([0, 1]), RowVector([1, 1])]
    with pytest.raises(KeyNotFoundError):
        solve_key(plain, [RowVector([1, 0])], 4, workers=2)
