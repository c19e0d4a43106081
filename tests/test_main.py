import pytest

import main


def test_demo_output(capsys):
    main.main([])
    out = capsys.readouterr().out
    assert "Running Bipartite Matching on Graph 1" in out
    assert "Maximum pairs matched = 4" in out
    assert "Running Bipartite Matching on Graph 2" in out
    assert "Maximum pairs matched = 5" in out
    assert "Matched Vertices  1 & 1'" in out


def test_demo_cross_check(capsys):
    main.main(["--check"])
    out = capsys.readouterr().out
    assert out.count("Cross-check ok") == 2
    assert "Warning" not in out


def test_csv_input_and_export(tmp_path, capsys):
    edges = tmp_path / "pairs.csv"
    edges.write_text("a,b\nx,p\ny,p\ny,q\n")
    out_dir = tmp_path / "results"

    main.main(["--edges", str(edges), "--left-col", "a", "--right-col", "b",
               "--output-dir", str(out_dir)])

    out = capsys.readouterr().out
    assert "Maximum pairs matched = 2" in out
    saved = list(out_dir.glob("matching_results_*.csv"))
    assert len(saved) == 1
    assert saved[0].read_text().splitlines()[0] == "left,right,left_name,right_name"


def test_bad_input_exits(tmp_path, capsys):
    edges = tmp_path / "pairs.csv"
    edges.write_text("a,b\nx,p\n")
    with pytest.raises(SystemExit) as execinfo:
        main.main(["--edges", str(edges)])
    assert execinfo.value.code == 1
    assert "Error:" in capsys.readouterr().out
