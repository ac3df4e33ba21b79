from xvuser.primes import END_LOOKUP, main, primes


def _is_prime(n):
    return n >= 2 and all(n % d for d in range(2, int(n ** 0.5) + 1))


def test_default_limit():
    assert list(primes()) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]


def test_small_limits():
    assert list(primes(2)) == []
    assert list(primes(0)) == []
    assert list(primes(3)) == [2]


def test_matches_trial_division():
    found = list(primes(300))
    assert found == [n for n in range(300) if _is_prime(n)]


def test_results_increase_and_stay_below_limit():
    found = list(primes(150))
    assert found == sorted(set(found))
    assert all(p < 150 for p in found)


def test_main_reports_each_prime(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().err.splitlines()
    assert lines == [f"executing {p}" for p in primes(END_LOOKUP)]