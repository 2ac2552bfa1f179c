import pytest

from tgraph.cli import main


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main(["init", "ws"])
    monkeypatch.chdir(tmp_path / "ws")
    return tmp_path / "ws"


def test_init(workspace):
    assert (workspace / "tgraph.yml").is_file()
    assert (workspace / "sample.tgf").is_file()


def test_show_uses_configured_input(workspace, capsys):
    capsys.readouterr()
    main(["show"])
    out = capsys.readouterr().out
    assert "Vertex #1 (Moscow) is connected with\n" in out
    assert "|- Vertex #2 (Saint Petersburg)\n" in out
    assert out.count(" is connected with") == 7


def test_bfs(workspace, capsys):
    capsys.readouterr()
    main(["bfs"])
    ids = capsys.readouterr().out.split()
    assert sorted(int(i) for i in ids) == [1, 2, 3, 4, 5, 6, 7]


def test_bfs_explicit_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "g.tgf").write_text("10 a\n20 b\n#\n10 20 x\n")
    main(["bfs", "g.tgf"])
    assert capsys.readouterr().out == "10\n20\n"


def test_check_typed(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "g.tgf").write_text("1 1.5\n#\n1 1 3\n1 2 4\n")
    main(["check", "g.tgf", "--vertex-type", "float", "--edge-type", "int"])
    out = capsys.readouterr().out
    assert out.startswith("g.tgf: 1 vertices, 2 edges\n")
    assert "dangling edges: 1->2" in out


def test_bad_file_is_fatal(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "g.tgf").write_text("1 a\n")
    with pytest.raises(SystemExit) as info:
        main(["show", "g.tgf"])
    assert info.value.code == 1
    assert "separator is missing" in capsys.readouterr().err


def test_parse_error_is_fatal(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "g.tgf").write_text("1 a\n#\n1 1 x\n")
    with pytest.raises(SystemExit):
        main(["check", "g.tgf", "--edge-type", "int"])
    assert "cannot parse 'x' as int" in capsys.readouterr().err


def test_help(capsys):
    main(["help", "show"])
    assert "--watch" in capsys.readouterr().out


def test_bfs_without_config(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "g.tgf").write_text("10 a\n#\n")
    main(["bfs", "g.tgf"])
    captured = capsys.readouterr()
    assert captured.out == "10\n"
    assert "missing" not in captured.err


def test_show_progress_lines(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "g.tgf").write_text("1 a\n#\n")
    main(["show", "g.tgf"])
    assert capsys.readouterr().out == (
        "Deserializing g.tgf...\n"
        "Deserialization finished!\n"
        "\n"
        "Traversing all connectivity components with bfs...\n"
        "Vertex #1 (a) is connected with\n"
        "Traversing is finished!\n"
    )
