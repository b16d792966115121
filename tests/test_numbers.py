import pytest

from drills.numbers import (
    climb_stairs,
    convert_to_base7,
    divisor_game,
    fizz_buzz,
    generate,
    is_palindrome_number,
    kth_character,
    number_of_steps,
    read_binary_watch,
)


@pytest.mark.parametrize("n, expected", [(2, True), (3, False), (1, False), (4, True)])
def test_divisor_game(n, expected):
    assert divisor_game(n) is expected


@pytest.mark.parametrize(
    "num_rows, expected",
    [
        (5, [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1], [1, 4, 6, 4, 1]]),
        (1, [[1]]),
    ],
)
def test_generate(num_rows, expected):
    assert generate(num_rows) == expected


def test_generate_rows_sum_to_powers_of_two():
    rows = generate(12)
    assert [sum(row) for row in rows] == [2**i for i in range(12)]


@pytest.mark.parametrize("num, expected", [(8, 4), (14, 6), (123, 12), (0, 0)])
def test_number_of_steps(num, expected):
    assert number_of_steps(num) == expected


@pytest.mark.parametrize("k, expected", [(1, "a"), (2, "b"), (5, "b"), (10, "c")])
def test_kth_character(k, expected):
    assert kth_character(k) == expected


def test_kth_character_rejects_zero():
    with pytest.raises(ValueError):
        kth_character(0)


def test_read_binary_watch_one_led():
    assert read_binary_watch(1) == [
        "0:01",
        "0:02",
        "0:04",
        "0:08",
        "0:16",
        "0:32",
        "1:00",
        "2:00",
        "4:00",
        "8:00",
    ]


def test_read_binary_watch_too_many_leds():
    assert read_binary_watch(9) == []


def test_read_binary_watch_zero_leds():
    assert read_binary_watch(0) == ["0:00"]


@pytest.mark.parametrize(
    "n, expected",
    [
        (5, ["1", "2", "Fizz", "4", "Buzz"]),
        (3, ["1", "2", "Fizz"]),
        (
            15,
            [
                "1", "2", "Fizz", "4", "Buzz", "Fizz", "7", "8",
                "Fizz", "Buzz", "11", "Fizz", "13", "14", "FizzBuzz",
            ],
        ),
    ],
)
def test_fizz_buzz(n, expected):
    assert fizz_buzz(n) == expected


@pytest.mark.parametrize(
    "num, expected", [(100, "202"), (2, "2"), (-7, "-10"), (0, "0")]
)
def test_convert_to_base7(num, expected):
    assert convert_to_base7(num) == expected


@pytest.mark.parametrize("num", [1, 6, 7, 48, 343, -1000, 123456])
def test_convert_to_base7_round_trip(num):
    assert int(convert_to_base7(num), 7) == num


@pytest.mark.parametrize("n, expected", [(2, 2), (3, 3), (1, 1), (0, 1)])
def test_climb_stairs(n, expected):
    assert climb_stairs(n) == expected


@pytest.mark.parametrize("x, expected", [(-121, False), (121, True), (10, False), (0, True)])
def test_is_palindrome_number(x, expected):
    assert is_palindrome_number(x) is expected