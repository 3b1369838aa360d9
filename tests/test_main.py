"""Tests for CLI parsing and dispatch."""

from pman import main as main_mod
from tests.helpers import make_project


def test_list_prints_projects_with_counts(tmp_path, capsys) -> None:
    folder = tmp_path / ".pman"
    folder.mkdir()
    make_project(folder, "Demo", active=("a", "b"), completed=("c",))

    main_mod.main([str(tmp_path), "--list"])

    out = capsys.readouterr().out
    assert "Demo" in out
    assert "active:  2" in out
    assert "completed:  1" in out


def test_list_on_empty_folder(tmp_path, capsys) -> None:
    main_mod.main([str(tmp_path), "--list"])

    assert "No projects in" in capsys.readouterr().out


def test_path_prints_resolved_folder(tmp_path, capsys) -> None:
    main_mod.main([str(tmp_path), "--path"])

    assert capsys.readouterr().out.strip() == str(tmp_path / ".pman")


def test_default_launches_dashboard_in_created_folder(tmp_path, monkeypatch) -> None:
    launched = []
    monkeypatch.setattr(main_mod, "cmd_dashboard", launched.append)

    main_mod.main([str(tmp_path)])

    assert launched == [tmp_path / ".pman"]
    assert (tmp_path / ".pman").is_dir()
