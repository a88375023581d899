import pytest

from susy2md import cli
from susy2md.scraper import SCRAPE_CONFIG

BASE_URL = "https://host/mc202ABC"


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.base_url == SCRAPE_CONFIG["base_url"]
    assert args.save_folder == "."
    assert args.prefix is None


def test_parser_rejects_non_http_url():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["ftp://host/mc202ABC"])


def test_main_success(fake_web, tmp_path, capsys):
    fake_web.pages[BASE_URL] = '<a href="../../mc202ABC/3">3</a>'
    fake_web.pages["https://host/mc202ABC/3/enunc.html"] = "<h2>Lab 3</h2>"
    out_dir = tmp_path / "out"

    cli.main([BASE_URL, str(out_dir)])

    assert (out_dir / "3").read_text(encoding="utf-8") == "## Lab 3\n"
    assert "Total converted 1 pages" in capsys.readouterr().out


def test_main_failure_exits_non_zero(fake_web, tmp_path, capsys):
    fake_web.pages[BASE_URL] = '<a href="../../mc202ABC/3">3</a>'

    with pytest.raises(SystemExit) as exc_info:
        cli.main([BASE_URL, str(tmp_path)])

    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert "[network]" in out
    assert "https://host/mc202ABC/3/enunc.html" in out
    assert list(tmp_path.iterdir()) == []


def test_main_prefix_override(fake_web, tmp_path):
    fake_web.pages["https://host/listing"] = '<a href="../../mc102XY/4">4</a>'
    fake_web.pages["https://host/mc102XY/4/enunc.html"] = "<p>four</p>"

    cli.main(["https://host/listing", str(tmp_path), "--prefix", "mc102XY"])

    assert (tmp_path / "4").read_text(encoding="utf-8") == "four\n"


def test_main_empty_page_converts(fake_web, tmp_path, capsys):
    fake_web.pages[BASE_URL] = '<a href="../../mc202ABC/3">3</a>'
    fake_web.pages["https://host/mc202ABC/3/enunc.html"] = ""

    cli.main([BASE_URL, str(tmp_path)])

    assert (tmp_path / "3").read_text(encoding="utf-8") == ""
    assert "Scrape Task Completed!" in capsys.readouterr().out


def test_main_save_folder_cannot_be_created(fake_web, tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(SystemExit) as exc_info:
        cli.main([BASE_URL, str(blocker / "out")])

    assert exc_info.value.code == 1
    assert "[filesystem]" in capsys.readouterr().out
    assert fake_web.calls == []
