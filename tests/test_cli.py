from __future__ import annotations

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


def test_abstract_factory_command():
    result = runner.invoke(app, ["abstract-factory"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "running windows",
        "open excel",
        "---------------",
        "running linux",
        "open word",
    ]


def test_abstract_factory_single_platform():
    result = runner.invoke(app, ["abstract-factory", "--platform", "linux"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["running linux", "open word"]


def test_builder_command():
    result = runner.invoke(app, ["builder"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "Phone{size=5.8, fps=120, focal=3, battery=3200}",
        "Phone{size=6.7, fps=120, focal=5, battery=4500}",
    ]


def test_builder_rejects_unknown_model():
    result = runner.invoke(app, ["builder", "--model", "16"])
    assert result.exit_code != 0


def test_factory_method_command():
    result = runner.invoke(app, ["factory-method", "-k", "rectangle"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["create a rectangle"]


def test_prototype_command():
    result = runner.invoke(app, ["prototype"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["lazySheep", "duoLi", "False"]


def test_prototype_deep_snapshot(tmp_path):
    scratch = tmp_path / "scratch.json"

    result = runner.invoke(app, ["prototype", "--snapshot", "--scratch-path", str(scratch)])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["ZhangSan", "LiSi"]
    assert scratch.exists()


def test_prototype_snapshot_failure_exits_1(tmp_path):
    scratch = tmp_path / "nope" / "a.txt"

    result = runner.invoke(app, ["prototype", "--snapshot", "--scratch-path", str(scratch)])

    assert result.exit_code == 1
    assert "Clone failed" in result.output


def test_explain_unknown_pattern():
    result = runner.invoke(app, ["explain", "singleton"])
    assert result.exit_code != 0


def test_explain_pattern():
    result = runner.invoke(app, ["explain", "builder"])

    assert result.exit_code == 0
    assert "Director" in result.stdout


def test_patterns_table(monkeypatch):
    monkeypatch.setenv("CREATIONAL_SHOW_BANNER", "false")

    result = runner.invoke(app, ["patterns"])

    assert result.exit_code == 0
    assert "factory-method" in result.stdout


def test_all_runs_every_demo():
    result = runner.invoke(app, ["all"])

    assert result.exit_code == 0
    for line in ("open word", "Phone{size=6.7, fps=120, focal=5, battery=4500}", "create a circle", "duoLi"):
        assert line in result.stdout


def test_doctor_run():
    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0
    assert "Scratch file" in result.stdout


def test_doctor_run_keeps_existing_scratch_file(tmp_path):
    scratch = tmp_path / "a.txt"
    scratch.write_text("user data", encoding="utf-8")

    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0
    assert scratch.read_text(encoding="utf-8") == "user data"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["a.txt"]
