import json

import pytest

from ingestion.load_sources import SOURCE_FILES, load_all_sources
from ingestion.schema import SourceWork
from run_pipeline import main, run_pipeline


MIN_CONTENT = {"schwartz": 50, "ginzberg-v1": 100, "ginzberg-v2": 100}


def test_full_run(data_dir, tmp_path):
    output = tmp_path / "out" / "myths.json"
    database = run_pipeline(str(data_dir), str(output))

    assert output.exists()
    stats = database.metadata.stats
    assert stats.by_sources == {"schwartz": 2, "ginzberg-v1": 3, "ginzberg-v2": 3}
    assert stats.total == 8

    ids = [myth.id for myth in database.myths]
    assert ids[:3] == [
        "schwartz-the-first-light",
        "schwartz-the-angel-of-death",
        "ginzberg-v1-the-first-things-created",
    ]
    assert "ginzberg-v2-alphabet" in ids

    angel = database.myths[1]
    assert "Psalms 116:15" in angel.biblical_references
    assert "angels" in angel.themes


def test_records_respect_invariants(data_dir, tmp_path):
    database = run_pipeline(str(data_dir), str(tmp_path / "myths.json"))

    for myth in database.myths:
        assert len(myth.content) > MIN_CONTENT[myth.source_work]
        assert len(myth.themes) == len(set(myth.themes))
        assert len(myth.biblical_references) == len(set(myth.biblical_references))
        if myth.source_work != "schwartz":
            assert myth.section == ""
            assert myth.commentary == ""

    stats = database.metadata.stats
    options = database.metadata.filter_options
    assert set(options.themes) == set(stats.themes)
    counts = [stats.themes[theme] for theme in options.themes]
    assert counts == sorted(counts, reverse=True)
    assert options.books == sorted({m.book for m in database.myths if m.book})


def test_runs_are_deterministic(data_dir, tmp_path):
    first = run_pipeline(str(data_dir), str(tmp_path / "a.json"))
    second = run_pipeline(str(data_dir), str(tmp_path / "b.json"))

    first_data = json.loads((tmp_path / "a.json").read_text(encoding="utf-8"))
    second_data = json.loads((tmp_path / "b.json").read_text(encoding="utf-8"))
    assert first_data["myths"] == second_data["myths"]
    assert first_data["metadata"]["stats"] == second_data["metadata"]["stats"]
    assert first_data["metadata"]["filterOptions"] == second_data["metadata"]["filterOptions"]
    assert first.metadata.version == second.metadata.version


def test_dry_run_writes_nothing(data_dir, tmp_path):
    output = tmp_path / "myths.json"
    run_pipeline(str(data_dir), str(output), dry_run=True)
    assert not output.exists()


def test_missing_source_aborts_before_writing(data_dir, tmp_path):
    (data_dir / SOURCE_FILES[SourceWork.GINZBERG_V2]).unlink()
    output = tmp_path / "myths.json"

    with pytest.raises(FileNotFoundError):
        run_pipeline(str(data_dir), str(output))
    assert not output.exists()


def test_missing_source_exits_non_zero(data_dir, tmp_path, capsys):
    (data_dir / SOURCE_FILES[SourceWork.SCHWARTZ]).unlink()

    with pytest.raises(SystemExit) as excinfo:
        main(["--data-dir", str(data_dir), "--output", str(tmp_path / "myths.json")])
    assert excinfo.value.code == 1
    assert "File not found" in capsys.readouterr().out


def test_source_without_structure_yields_no_records(data_dir, tmp_path, capsys):
    (data_dir / SOURCE_FILES[SourceWork.GINZBERG_V2]).write_text(
        "Nothing but prose here.\n" * 500, encoding="utf-8"
    )
    database = run_pipeline(str(data_dir), str(tmp_path / "myths.json"))

    assert database.metadata.stats.by_sources["ginzberg-v2"] == 0
    assert database.metadata.stats.by_sources["ginzberg-v1"] == 3
    assert "Could not find content start marker" in capsys.readouterr().out


def test_load_all_sources(data_dir):
    texts = load_all_sources(str(data_dir))
    assert list(texts) == [SourceWork.SCHWARTZ, SourceWork.GINZBERG_V1, SourceWork.GINZBERG_V2]
    assert "BOOK ONE" in texts[SourceWork.SCHWARTZ]
