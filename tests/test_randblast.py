from numtoys.randblast import crack, generate, main, matches, weak_rand


def test_lcg_step_from_zero():
    assert weak_rand(0) == (12345, 0)


def test_value_range():
    seed = 7
    for _ in range(1000):
        seed, value = weak_rand(seed)
        assert 0 <= value < 32768
        assert 0 <= seed < 2**32


def test_generate_deterministic_prefix():
    assert generate(99, 32)[:16] == generate(99, 16)


def test_match_round_trip():
    data = generate(42, 16)
    assert matches(42, data)
    assert not matches(43, data)
    assert not matches(42, b"")


def test_crack_finds_seed():
    data = generate(1234, 12)
    assert list(crack(data, 1000, 1500)) == [1234]


def test_main_generate_and_usage(tmp_path, capsys):
    target = tmp_path / "blob.bin"
    assert main([str(target), "5"]) == 0
    assert target.read_bytes()[:8] == generate(5, 8)
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_empty_file(tmp_path, capsys):
    empty = tmp_path / "empty.bin"
    empty.write_bytes(b"")
    assert main([str(empty)]) == 1
    assert "could not read file" in capsys.readouterr().out