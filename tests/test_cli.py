"""Tests for the ``docs-pages`` command functions."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from docs_pages import cli

if typ.TYPE_CHECKING:
    from unittest.mock import MagicMock

    from pytest_mock import MockerFixture

    from .conftest import WriteTree


@pytest.fixture(autouse=True)
def logging_config(mocker: MockerFixture) -> MagicMock:
    """Keep the commands from reconfiguring the root logger under pytest."""
    return mocker.patch.object(cli, "_configure_logging")


@pytest.fixture
def config_path(tmp_path: Path, write_tree: WriteTree) -> Path:
    """Write a content tree plus a config that points at it."""
    write_tree(
        tmp_path / "content",
        {
            "introduction.md": "---\ntitle: Intro\n---\nHello",
            "sdks/python.md": "Python",
        },
    )
    path = tmp_path / "site.yaml"
    path.write_text(
        f"""
site:
  name: OpenMemory
  base_url: https://openmemory.ai
build:
  content_dir: {tmp_path / "content"}
  output_dir: {tmp_path / "public"}
""".strip()
        + "\n",
        encoding="utf-8",
    )
    return path


def test_routes_prints_enumerated_paths(
    config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``routes`` prints one page path per line, root first."""
    cli.routes(config=config_path)
    assert capsys.readouterr().out.splitlines() == [
        "/",
        "/docs/introduction",
        "/docs/sdks/python",
    ]


def test_sitemap_writes_default_location(
    config_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``sitemap`` writes into the configured output folder by default."""
    cli.sitemap(config=config_path)
    target = tmp_path / "public" / "sitemap.xml"
    assert target.is_file()
    assert "https://openmemory.ai/docs/sdks/python" in target.read_text(
        encoding="utf-8"
    )
    assert capsys.readouterr().out.strip().startswith("wrote ")


def test_sitemap_honours_output_override(config_path: Path, tmp_path: Path) -> None:
    """An explicit output path wins over configuration."""
    target = tmp_path / "elsewhere" / "map.xml"
    cli.sitemap(config=config_path, output=target)
    assert target.is_file()
    assert not (tmp_path / "public" / "sitemap.xml").exists()


def test_build_reports_each_written_file(
    config_path: Path,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    logging_config: MagicMock,
) -> None:
    """``build`` renders the site and prints a line per artifact."""
    cli.build(config=config_path, workers=2, verbose=True)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4, lines
    assert all(line.startswith("wrote ") for line in lines)
    assert (tmp_path / "public" / "docs" / "introduction" / "index.html").is_file()
    assert (tmp_path / "public" / "index.html").is_file()
    logging_config.assert_called_once_with(verbose=True)


def test_build_output_dir_override(config_path: Path, tmp_path: Path) -> None:
    """``--output-dir`` redirects the build."""
    cli.build(config=config_path, output_dir=tmp_path / "dist")
    assert (tmp_path / "dist" / "docs" / "sdks" / "python" / "index.html").is_file()
    assert (tmp_path / "dist" / "sitemap.xml").is_file()


def test_missing_config_raises(tmp_path: Path) -> None:
    """Commands surface a missing configuration file."""
    with pytest.raises(FileNotFoundError):
        cli.routes(config=tmp_path / "missing.yaml")


def test_format_path_prefers_relative(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Paths under the working directory are shown relative to it."""
    monkeypatch.chdir(tmp_path)
    assert cli._format_path(tmp_path / "public" / "index.html") == str(
        Path("public") / "index.html"
    )
