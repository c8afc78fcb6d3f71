from numtoys.prime import main, primes_below


def test_small_primes():
    assert list(primes_below(30)) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_limit_inclusive():
    assert list(primes_below(13))[-1] == 13
    assert list(primes_below(2)) == [2]
    assert list(primes_below(1)) == []


def test_each_is_prime():
    primes = list(primes_below(2000))
    assert len(primes) == 303
    composites = [
        p for p in primes if any(p % d == 0 for d in range(2, int(p**0.5) + 1))
    ]
    assert composites == []


def test_squares_of_primes_excluded():
    found = set(primes_below(1000))
    for p in list(found):
        assert p * p not in found


def test_main(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "No enough arguments\n"
    assert main(["10"]) == 0
    assert capsys.readouterr().out.split() == ["2", "3", "5", "7"]