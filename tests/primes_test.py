from indexed_pq.datastructures import is_prime, next_prime


def test_is_prime_small_values():
    primes = [n for n in range(60) if is_prime(n)]
    assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59]


def test_next_prime():
    assert next_prime(0) == 2
    assert next_prime(1) == 2
    assert next_prime(14) == 17
    assert next_prime(17) == 17
    assert next_prime(34) == 37
