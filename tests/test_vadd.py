import numpy as np
import pytest

from hostcompute.vadd import (
    DEFAULT_LENGTH,
    count_correct,
    main,
    random_vector,
    vector_add,
)


def test_random_vector_length_and_dtype():
    values = random_vector(50, np.random.default_rng(1))
    assert values.shape == (50,)
    assert values.dtype == np.float32


def test_random_vector_range():
    values = random_vector(2000, np.random.default_rng(7))
    assert values.min() >= -500.0
    assert values.max() <= 0.0


def test_random_vector_reproducible():
    first = random_vector(20, np.random.default_rng(3))
    second = random_vector(20, np.random.default_rng(3))
    assert np.array_equal(first, second)


def test_random_vector_empty():
    assert random_vector(0, np.random.default_rng(0)).size == 0


def test_random_vector_negative_length():
    with pytest.raises(ValueError):
        random_vector(-1)


def test_vector_add_values():
    result = vector_add([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
    assert result.tolist() == [5.0, 7.0, 9.0]


def test_vector_add_commutes():
    rng = np.random.default_rng(11)
    a = random_vector(64, rng)
    b = random_vector(64, rng)
    assert np.array_equal(vector_add(a, b), vector_add(b, a))


def test_vector_add_length_mismatch():
    with pytest.raises(ValueError):
        vector_add([1.0, 2.0], [1.0])


def test_vector_add_rejects_matrix():
    with pytest.raises(ValueError):
        vector_add([[1.0]], [[2.0]])


def test_count_correct_all_correct():
    rng = np.random.default_rng(5)
    a = random_vector(100, rng)
    b = random_vector(100, rng)
    assert count_correct(a, b, vector_add(a, b)) == 100


def test_count_correct_detects_wrong_element():
    rng = np.random.default_rng(9)
    a = random_vector(10, rng)
    b = random_vector(10, rng)
    c = vector_add(a, b)
    c[4] += 1.0
    assert count_correct(a, b, c) == 9


def test_count_correct_boundary_is_not_correct():
    assert count_correct([1.0], [1.0], [2.5], tolerance=0.5) == 0


def test_count_correct_within_tolerance():
    assert count_correct([1.0], [1.0], [2.25], tolerance=0.5) == 1


def test_count_correct_length_mismatch():
    with pytest.raises(ValueError):
        count_correct([1.0, 2.0], [1.0, 2.0], [2.0])


def test_main_reports_all_correct(capsys):
    assert main(["16"]) == 0
    out = capsys.readouterr().out
    assert "C = A+B:  16 out of 16 results were correct." in out


def test_main_default_length(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"by default length={DEFAULT_LENGTH}" in out
    assert f"{DEFAULT_LENGTH} out of {DEFAULT_LENGTH}" in out


def test_main_invalid_length():
    assert main(["abc"]) == 1


def test_main_negative_length():
    assert main(["-3"]) == 1