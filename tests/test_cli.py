import pytest

from namehash.cli import main

MEN = [(f"M{i}", i + 1) for i in range(30)]
WOMEN = [(f"F{i}", i + 100) for i in range(30)]


@pytest.fixture
def data_files(tmp_path):
    paths = []
    for label, rows in (("men", MEN), ("women", WOMEN)):
        path = tmp_path / f"{label}.csv"
        body = "".join(f"{name},X,{count}\n" for name, count in rows)
        path.write_text("imie,plec,liczba\n" + body, encoding="utf-8")
        paths.append(str(path))
    return paths


def test_reports_merge_and_first(data_files, capsys):
    assert main(data_files) == 0
    lines = capsys.readouterr().out.splitlines()
    name, count = MEN[0]
    assert lines[:2] == [f"Merged {len(MEN) + len(WOMEN)} records", f"({count}|{name})"]


def test_looks_up_records_40_to_44(data_files, capsys):
    main(data_files)
    out = capsys.readouterr().out
    merged = MEN + WOMEN
    for name, count in merged[40:45]:
        assert f"There are {count} people named ({count}|{name})" in out
    assert out.count("Looking up") == 5


def test_missing_name_reported(data_files, capsys):
    main(data_files + ["--missing", "Nobody"])
    out = capsys.readouterr().out
    assert out.count("Error: no such key: Nobody") == 2


def test_missing_file_fails(tmp_path, capsys):
    code = main([str(tmp_path / "a.csv"), str(tmp_path / "b.csv")])
    assert code == 1
    assert "Error" in capsys.readouterr().err