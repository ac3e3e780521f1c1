import subprocess
from pathlib import Path

import pytest

from lnpkg.cli import main, read_app_name


class _FakeRun:
    def __init__(self, returncode=0):
        self.returncode = returncode
        self.calls = []

    def __call__(self, command, *args, **kwargs):
        self.calls.append(list(command))
        return subprocess.CompletedProcess(command, self.returncode)


@pytest.fixture
def project(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PREFIX", raising=False)
    proj = tmp_path / "proj"
    proj.mkdir()
    (proj / "index.js").write_text("console.log('hi');\n")
    (proj / "package.json").write_text("{}\n")
    (proj / "lnpkg_config").write_text("myapp;extra\n")
    return proj


def test_read_app_name_until_semicolon(tmp_path):
    config = tmp_path / "lnpkg_config"
    config.write_text("myapp;ignored\nsecond;line\n")
    assert read_app_name(config) == "myapp"


def test_read_app_name_crlf(tmp_path):
    config = tmp_path / "lnpkg_config"
    config.write_bytes(b"tool;\r\n")
    assert read_app_name(config) == "tool"


def test_read_app_name_without_semicolon(tmp_path):
    config = tmp_path / "lnpkg_config"
    config.write_text("noterminator\nlater;\n")
    with pytest.raises(ValueError):
        read_app_name(config)


def test_read_app_name_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_app_name(tmp_path / "absent")


def test_main_without_args(capsys):
    assert main([]) == 1
    assert "Please provide project folder." in capsys.readouterr().out


def test_main_builds_project(project, monkeypatch, capsys):
    fake = _FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    stale = Path("lnpkg-build") / "stale.txt"
    stale.parent.mkdir()
    stale.write_text("old")

    assert main([str(project)]) == 0

    source = Path("lnpkg-build/source")
    assert not stale.exists()
    assert (source / "index.js").read_text() == "console.log('hi');\n"
    assert (source / "package.json").read_text() == "{}\n"
    assert (source / "app.c").is_file()
    assert (source / "node.s").is_file()
    assert (source / "lnpkg.h").is_file()
    assert fake.calls == [
        [
            "gcc",
            str(source / "app.c"),
            str(source / "node.s"),
            "-o",
            str(Path("lnpkg-build") / "myapp"),
        ]
    ]
    out = capsys.readouterr().out
    assert "[Success]: Project compiled successfully." in out
    assert "Failed to get NODE Bin" in out


def test_main_copies_node_modules(project, monkeypatch):
    monkeypatch.setattr(subprocess, "run", _FakeRun())
    (project / "node_modules" / "dep").mkdir(parents=True)
    (project / "node_modules" / "dep" / "index.js").write_text("module.exports = 1;")
    assert main([str(project)]) == 0
    copied = Path("lnpkg-build/source/node_modules/dep/index.js")
    assert copied.read_text() == "module.exports = 1;"


def test_main_compile_failure_still_succeeds(project, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", _FakeRun(returncode=1))
    assert main([str(project)]) == 0
    out = capsys.readouterr().out
    assert "Unable to add application executable in build folder." in out


def test_main_missing_index(project, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", _FakeRun())
    (project / "index.js").unlink()
    assert main([str(project)]) == 1
    assert "Unable to move index.js file" in capsys.readouterr().out


def test_main_missing_package_json(project, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", _FakeRun())
    (project / "package.json").unlink()
    assert main([str(project)]) == 1
    assert "Unable to move package.json file" in capsys.readouterr().out


def test_main_missing_config(project, monkeypatch, capsys):
    fake = _FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    (project / "lnpkg_config").unlink()
    assert main([str(project)]) == 1
    assert "Config file (lnpkg_config) not found." in capsys.readouterr().out
    assert fake.calls == []