from __future__ import annotations

from pathlib import Path

import pytest

from better_wagmi.cli import ExitCode, main
from better_wagmi.envfile import ENV_FILE_NAME
from better_wagmi.templates import LAYOUT_PATH, PAGE_PATH, PROVIDERS_PATH, get_template_set
from tests.fixtures.fake_runner import FakeRunner


def test_missing_name_exits_with_usage_error(tmp_path: Path, fake_runner: FakeRunner, capsys):
    def ask(prompt: str) -> str:
        raise AssertionError("prompt must not be shown")

    exit_code = main(["--directory", str(tmp_path)], runner=fake_runner, ask=ask)

    assert exit_code == ExitCode.USAGE == 1
    assert fake_runner.calls == []
    assert list(tmp_path.iterdir()) == []
    assert "Please provide a project name." in capsys.readouterr().err


def test_invalid_name_exits_with_usage_error(tmp_path: Path, fake_runner: FakeRunner, capsys):
    exit_code = main(["My App", "-d", str(tmp_path)], runner=fake_runner)

    assert exit_code == 1
    assert fake_runner.calls == []
    assert "try 'my-app'" in capsys.readouterr().err


def test_cli_bootstraps_project(tmp_path: Path, fake_runner: FakeRunner, answer, capsys):
    exit_code = main(["my-app", "-d", str(tmp_path)], runner=fake_runner, ask=answer)

    assert exit_code == 0
    root = tmp_path / "my-app"
    assert (root / ENV_FILE_NAME).read_text(encoding="utf-8") == 'NEXT_PUBLIC_WALLETCONNECT_PROJECT_ID="wc-123"'
    files = get_template_set().files
    for relative in (PROVIDERS_PATH, LAYOUT_PATH, PAGE_PATH):
        assert (root / relative).read_text(encoding="utf-8") == files[relative]
    assert "cd my-app" in capsys.readouterr().out


def test_cli_uses_current_directory_by_default(
    tmp_path: Path, fake_runner: FakeRunner, answer, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.chdir(tmp_path)
    assert main(["my-app"], runner=fake_runner, ask=answer) == 0
    assert (tmp_path / "my-app" / ENV_FILE_NAME).exists()


@pytest.mark.parametrize(
    "runner, expected",
    [
        (FakeRunner(fail_on="create-next-app"), ExitCode.SUBPROCESS_FAILURE),
        (FakeRunner(fail_on="wagmi"), ExitCode.SUBPROCESS_FAILURE),
        (FakeRunner(create_project=False), ExitCode.FILESYSTEM_FAILURE),
    ],
)
def test_failures_map_to_exit_codes(tmp_path: Path, answer, runner: FakeRunner, expected: ExitCode, capsys):
    exit_code = main(["my-app", "-d", str(tmp_path)], runner=runner, ask=answer)

    assert exit_code == expected
    assert "Next steps" not in capsys.readouterr().out


def test_unknown_flavor_is_rejected_by_argparse(tmp_path: Path, fake_runner: FakeRunner):
    with pytest.raises(SystemExit) as excinfo:
        main(["my-app", "--flavor", "vintage"], runner=fake_runner)
    assert excinfo.value.code == 2
    assert fake_runner.calls == []


def test_cli_reports_setup_complete_on_stdout(tmp_path: Path, fake_runner: FakeRunner, answer, capsys):
    assert main(["my-app", "-d", str(tmp_path)], runner=fake_runner, ask=answer) == 0
    out = capsys.readouterr().out
    assert "Project setup complete!" in out
    assert out.index("Project setup complete!") < out.index("Next steps")


def test_cli_creates_missing_target_directory(tmp_path: Path, fake_runner: FakeRunner, answer):
    target = tmp_path / "new"
    exit_code = main(["my-app", "-d", str(target)], runner=fake_runner, ask=answer)

    assert exit_code == ExitCode.OK
    assert fake_runner.calls[0][1] == target.resolve()
    assert (target / "my-app" / ENV_FILE_NAME).exists()


def test_undecodable_prompt_answer_exits_with_usage_error(tmp_path: Path, fake_runner: FakeRunner):
    def ask(prompt: str) -> str:
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

    exit_code = main(["my-app", "-d", str(tmp_path)], runner=fake_runner, ask=ask)

    assert exit_code == ExitCode.USAGE
    assert fake_runner.calls == []


def test_unencodable_prompt_answer_exits_with_filesystem_failure(tmp_path: Path, fake_runner: FakeRunner):
    exit_code = main(["my-app", "-d", str(tmp_path)], runner=fake_runner, ask=lambda prompt: "wc-\udcff")

    assert exit_code == ExitCode.FILESYSTEM_FAILURE
    assert not (tmp_path / "my-app" / ENV_FILE_NAME).exists()


def test_project_name_is_validated_once_by_the_config_model(
    tmp_path: Path, fake_runner: FakeRunner, answer, monkeypatch: pytest.MonkeyPatch
):
    from better_wagmi import config as config_module

    checked: list[str] = []
    original = config_module.validate_project_name

    def counting(name: str) -> str:
        checked.append(name)
        return original(name)

    monkeypatch.setattr(config_module, "validate_project_name", counting)

    assert main(["my-app", "-d", str(tmp_path)], runner=fake_runner, ask=answer) == 0
    assert checked == ["my-app"]
