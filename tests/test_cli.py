import pytest

from softseqheap.cli import BUILD_VALUES, SECOND_VALUES, main


def _run(capsys, argv):
    status = main(argv)
    return status, capsys.readouterr().out


def test_main_returns_success(capsys):
    status, _ = _run(capsys, [])
    assert status == 0


def test_main_prints_heaps(capsys):
    _, out = _run(capsys, [])
    assert out.startswith("rank threshold = ")
    assert out.count("rank threshold = ") == 4


def test_main_last_line_is_permutation_of_built_values(capsys):
    _, out = _run(capsys, [])
    last = out.strip().splitlines()[-1]
    values = [int(token) for token in last.split()]
    assert sorted(values) == sorted(BUILD_VALUES)


def test_main_melded_heap_holds_second_values(capsys):
    _, out = _run(capsys, ["--eps", "0.01"])
    for value in SECOND_VALUES:
        assert f"{value} (C=" in out


def test_main_small_eps_sorts_exactly(capsys):
    _, out = _run(capsys, ["--eps", "0.01"])
    last = out.strip().splitlines()[-1]
    assert [int(token) for token in last.split()] == sorted(BUILD_VALUES)


@pytest.mark.parametrize("eps", ["2", "-0.5", "abc"])
def test_main_rejects_bad_eps(eps):
    with pytest.raises(SystemExit) as excinfo:
        main(["--eps", eps])
    assert excinfo.value.code == 2