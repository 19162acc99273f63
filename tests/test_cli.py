from click.testing import CliRunner

from tilde import __version__
from tilde.cli import cli


def test_cli_resolve_href(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["resolve", "~/home/index.html", "--app-root", "/approot"])
    assert result.exit_code == 0
    assert result.output == 'href="/approot/home/index.html"\n'


def test_cli_resolve_pre_encoded(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    result = runner.invoke(
        cli, ["resolve", "~/a?x=1&amp;y=2", "--pre-encoded", "--app-root", "/approot"]
    )
    assert result.exit_code == 0
    assert result.output == 'href="/approot/a?x=1&amp;y=2"\n'


def test_cli_resolve_srcset_uses_config(monkeypatch, tmp_path):
    (tmp_path / "tilde.yaml").write_text("app_root: /r\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    result = runner.invoke(
        cli, ["resolve", "~/a.png 1x, ~/b.png 2x", "--tag", "img", "--attribute", "srcset"]
    )
    assert result.exit_code == 0
    assert result.output == 'srcset="/r/a.png 1x, /r/b.png 2x"\n'


def test_cli_resolve_disabled(monkeypatch, tmp_path):
    (tmp_path / "tilde.yaml").write_text("enabled: false\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["resolve", "~/a", "--app-root", "/r"])
    assert result.exit_code == 0
    assert result.output == 'href="~/a"\n'


def test_cli_errors(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()

    result = runner.invoke(cli, ["resolve", "~/a", "--tag", "div"])
    assert result.exit_code != 0
    assert "No URL attributes configured for <div>" in result.output

    monkeypatch.setattr(
        "tilde.resolver.AppRootUrlResolver.content", lambda self, path: "UnexpectedResult"
    )
    result = runner.invoke(cli, ["resolve", "~/a"])
    assert result.exit_code == 1
    assert "Resolution failed" in result.output

    (tmp_path / "tilde.yaml").write_text("url_attributes: [a]\n", encoding="utf-8")
    result = runner.invoke(cli, ["resolve", "~/a"])
    assert result.exit_code != 0
    assert "Invalid tilde.yaml" in result.output


def test_cli_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
