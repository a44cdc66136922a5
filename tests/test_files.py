"""Tests for reading / writing files and stacked loading."""

from __future__ import annotations

import logging

import chardet

from pyinimini import ImiDocument, ImiFlag, ImiParser, ImiStackLoader


def test_write_then_read(tmp_path) -> None:
    path = tmp_path / "app.conf"
    doc = ImiDocument()
    doc.add_section("srv", "server block")
    doc.setstr("srv.host", "example.org")
    doc.setint("srv.port", 8080)
    doc.comment("srv.port", "listen port")

    flags = ImiFlag.COMMENTS
    assert ImiParser(str(path), "utf-8").write(doc, flags)
    assert path.read_text(encoding="utf-8") == (
        "; server block\n[srv]\nhost = example.org\nport = 8080 ; listen port\n"
    )

    loaded = ImiParser(str(path), "utf-8").read(flags)
    assert loaded is not None
    assert [(i.key, i.value, i.comment) for i in loaded] == [
        (None, None, "server block"),
        ("srv.host", "example.org", None),
        ("srv.port", "8080", "listen port"),
    ]


def test_read_appends_into_given_document(tmp_path) -> None:
    path = tmp_path / "app.conf"
    path.write_text("k = file\n", encoding="utf-8")
    doc = ImiDocument()
    doc.setstr("k", "memory")

    assert ImiParser(str(path)).read(doc=doc) is doc
    assert len(doc) == 2
    assert doc.getstr("k") == "memory"


def test_read_missing_file_leaves_document_alone(tmp_path, caplog) -> None:
    doc = ImiDocument()
    doc.setstr("k", "v")

    with caplog.at_level(logging.WARNING):
        assert ImiParser(str(tmp_path / "nope.conf")).read(doc=doc) is None
    assert len(doc) == 1
    assert "Config not loaded" in caplog.text


def test_write_failure_is_reported(tmp_path, caplog) -> None:
    doc = ImiDocument()
    doc.setstr("k", "v")
    with caplog.at_level(logging.WARNING):
        assert not ImiParser(str(tmp_path)).write(doc)
    assert "Config not saved" in caplog.text


def test_read_falls_back_to_detected_encoding(tmp_path) -> None:
    path = tmp_path / "wide.conf"
    path.write_bytes("[srv]\nname = 配置\n".encode("utf-16"))

    doc = ImiParser(str(path), "utf-8").read()
    assert doc is not None
    assert doc.getstr("srv.name") == "配置"


def test_parser_uses_its_dot_depth(tmp_path) -> None:
    path = tmp_path / "app.conf"
    path.write_text("[debug]\nlevel = 1\n", encoding="utf-8")
    doc = ImiParser(str(path), dot_depth=1).read()
    assert doc.dot_depth == 1
    assert doc.find("debug.level").parent == "debug"


def test_candidate_paths_per_platform() -> None:
    linux = ImiStackLoader("app", environ={"XDG_CONFIG_HOME": "/x", "HOME": "/h"}, platform="linux")
    assert linux.paths() == ["/etc/app/app.conf", "/x/app/app.conf", "./.app.conf"]

    home = ImiStackLoader("app", environ={"HOME": "/h"}, platform="linux")
    assert home.paths()[1] == "/h/.app.conf"

    mac = ImiStackLoader("app", "ini", environ={"HOME": "/h"}, platform="darwin")
    assert mac.paths() == ["/etc/app/app.ini", "/h/.app.ini", "./.app.ini"]

    win = ImiStackLoader("app", environ={"APPDATA": "C:/Users/u/AppData"}, platform="win32")
    assert win.paths()[:2] == ["C:/ProgramData/app/app.conf", "C:/Users/u/AppData/app.conf"]

    bare = ImiStackLoader("app", environ={}, platform="linux")
    assert bare.paths() == ["/etc/app/app.conf", "./.app.conf"]


def test_stack_load_later_files_win(tmp_path) -> None:
    system = tmp_path / "system.conf"
    system.write_text("; defaults\n[core]\nlevel = 1\nname = sys\n", encoding="utf-8")
    local = tmp_path / "local.conf"
    local.write_text("; local\n[core]\nlevel = 3\n", encoding="utf-8")

    doc = ImiDocument()
    loader = ImiStackLoader("app", environ={}, platform="linux")
    loaded = loader.load(
        doc, ImiFlag.COMMENTS,
        paths=[str(system), str(tmp_path / "missing.conf"), str(local)])

    assert loaded == 2
    assert doc.getint("core.level") == 3
    assert doc.getstr("core.name") == "sys"
    assert doc.find_section("core").comment == "defaults | local"
    assert doc.getsub() == ["core", "core.level", "core.name"]


def test_read_survives_unknown_detected_codec(tmp_path, monkeypatch) -> None:
    path = tmp_path / "gbk.conf"
    path.write_bytes("[srv]\nname = 配置\n".encode("gbk"))
    monkeypatch.setattr(
        chardet, "detect",
        lambda raw: {"encoding": "x-no-such-codec", "confidence": 0.99})

    doc = ImiParser(str(path), "utf-8").read()
    assert doc is not None
    assert doc.getstr("srv.name") == "配置"
