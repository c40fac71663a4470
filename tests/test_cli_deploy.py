"""config-deploy stories: per-layer modes, reporting, partial failures.

The deploy port is replaced by a recorder so no real directory is touched.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner, Result
from fake_example.adapters.cli import cli
from fake_example.domain.enums import DeployTarget

PERMISSIONS_ON = {"lib_layered_config": {"default_permissions": {"enabled": True}}}
PERMISSIONS_OFF = {"lib_layered_config": {"default_permissions": {"enabled": False}}}


@dataclass
class DeployRecorder:
    """Deploy port double: records calls, writes ``<target>.toml`` names, fails where told."""

    root: Path
    failures: dict[DeployTarget, Exception] = field(default_factory=dict)
    calls: list[dict[str, Any]] = field(default_factory=list)

    def __call__(self, *, targets: Sequence[DeployTarget], **options: Any) -> list[Path]:
        self.calls.append({"targets": tuple(targets), **options})
        for target in targets:
            if target in self.failures:
                raise self.failures[target]
        return [self.root / f"{target.value}.toml" for target in targets]

    def modes(self) -> list[tuple[bool, int | None, int | None]]:
        return [(c["set_permissions"], c["dir_mode"], c["file_mode"]) for c in self.calls]


@pytest.fixture
def recorder(tmp_path: Path) -> DeployRecorder:
    return DeployRecorder(tmp_path)


@pytest.fixture
def deploy(
    cli_runner: CliRunner, services_with: Callable[..., Callable[[], Any]], recorder: DeployRecorder
) -> Callable[..., Result]:
    """Run ``fake-example [root_args] config-deploy *args`` against the recorder."""

    def _run(*args: str, config: dict[str, Any] = PERMISSIONS_ON, root_args: Sequence[str] = ()) -> Result:
        factory = services_with(get_config=config, deploy_configuration=recorder)
        return cli_runner.invoke(cli, [*root_args, "config-deploy", *args], obj=factory)

    return _run


@pytest.mark.os_agnostic
def test_each_target_is_deployed_separately_in_the_given_order(
    deploy: Callable[..., Result], recorder: DeployRecorder
) -> None:
    result = deploy("--target", "user", "--target", "HOST")

    assert result.exit_code == 0
    assert [c["targets"] for c in recorder.calls] == [(DeployTarget.USER,), (DeployTarget.HOST,)]
    assert "Configuration deployed successfully:" in result.stdout
    assert str(recorder.root / "user.toml") in result.stdout
    assert str(recorder.root / "host.toml") in result.stdout


@pytest.mark.os_agnostic
def test_a_target_named_twice_is_deployed_once(deploy: Callable[..., Result], recorder: DeployRecorder) -> None:
    result = deploy("--target", "user", "--target", "user")

    assert result.exit_code == 0
    assert len(recorder.calls) == 1


@pytest.mark.os_agnostic
def test_each_layer_gets_its_configured_modes(deploy: Callable[..., Result], recorder: DeployRecorder) -> None:
    result = deploy("--target", "user", "--target", "app")

    assert result.exit_code == 0
    assert recorder.modes() == [(True, 0o700, 0o600), (True, 0o755, 0o644)]


@pytest.mark.os_agnostic
def test_mode_options_win_over_configured_modes(deploy: Callable[..., Result], recorder: DeployRecorder) -> None:
    result = deploy("--target", "user", "--target", "host", "--dir-mode", "750", "--file-mode", "0o640")

    assert result.exit_code == 0
    assert recorder.modes() == [(True, 0o750, 0o640), (True, 0o750, 0o640)]


@pytest.mark.os_agnostic
def test_no_permissions_passes_no_modes(deploy: Callable[..., Result], recorder: DeployRecorder) -> None:
    result = deploy("--target", "user", "--no-permissions")

    assert result.exit_code == 0
    assert recorder.modes() == [(False, None, None)]
    assert "(permissions not set)" in result.stdout


@pytest.mark.os_agnostic
def test_disabled_permissions_in_config_become_the_default(
    deploy: Callable[..., Result], recorder: DeployRecorder
) -> None:
    assert deploy("--target", "user", config=PERMISSIONS_OFF).exit_code == 0
    assert deploy("--target", "user", "--permissions", config=PERMISSIONS_OFF).exit_code == 0

    assert recorder.modes() == [(False, None, None), (True, 0o700, 0o600)]


@pytest.mark.os_agnostic
def test_force_and_subcommand_profile_reach_the_port(deploy: Callable[..., Result], recorder: DeployRecorder) -> None:
    result = deploy("--target", "user", "--force", "--profile", "lab")

    assert result.exit_code == 0
    assert (recorder.calls[0]["force"], recorder.calls[0]["profile"]) == (True, "lab")
    assert "(profile: lab)" in result.stdout


@pytest.mark.os_agnostic
def test_root_profile_is_used_when_the_subcommand_names_none(
    deploy: Callable[..., Result], recorder: DeployRecorder
) -> None:
    result = deploy("--target", "user", root_args=["--profile", "staging"])

    assert result.exit_code == 0
    assert recorder.calls[0]["profile"] == "staging"


@pytest.mark.os_agnostic
def test_nothing_written_suggests_force(
    cli_runner: CliRunner, services_with: Callable[..., Callable[[], Any]]
) -> None:
    factory = services_with(get_config=PERMISSIONS_ON, deploy_configuration=lambda **_kwargs: [])

    result = cli_runner.invoke(cli, ["config-deploy", "--target", "user"], obj=factory)

    assert result.exit_code == 0
    assert "Nothing written" in result.stdout
    assert "--force" in result.stdout


@pytest.mark.os_agnostic
def test_permission_error_exits_13_with_a_hint(deploy: Callable[..., Result], recorder: DeployRecorder) -> None:
    recorder.failures[DeployTarget.APP] = PermissionError("/etc/xdg/fake-example")

    result = deploy("--target", "app")

    assert result.exit_code == 13
    assert "Permission denied. /etc/xdg/fake-example" in result.stderr
    assert "sudo" in result.stderr


@pytest.mark.os_agnostic
def test_other_errors_exit_1(deploy: Callable[..., Result], recorder: DeployRecorder) -> None:
    recorder.failures[DeployTarget.USER] = OSError("No space left on device")

    result = deploy("--target", "user")

    assert result.exit_code == 1
    assert "Failed to deploy configuration: No space left on device" in result.stderr


@pytest.mark.os_agnostic
def test_files_written_before_a_failing_target_are_still_listed(
    deploy: Callable[..., Result], recorder: DeployRecorder
) -> None:
    recorder.failures[DeployTarget.APP] = PermissionError("/etc/xdg/fake-example")

    result = deploy("--target", "user", "--target", "app")

    assert result.exit_code == 13
    assert "Deployed before the app target failed:" in result.stdout
    assert str(recorder.root / "user.toml") in result.stdout
    assert "app.toml" not in result.stdout
    assert "Configuration deployed successfully" not in result.stdout


@pytest.mark.os_agnostic
def test_targets_after_a_failure_are_not_attempted(deploy: Callable[..., Result], recorder: DeployRecorder) -> None:
    recorder.failures[DeployTarget.USER] = OSError("read-only file system")

    result = deploy("--target", "user", "--target", "host")

    assert result.exit_code == 1
    assert [c["targets"] for c in recorder.calls] == [(DeployTarget.USER,)]
    assert "Deployed before" not in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["../etc", "a/b", "CON"])
def test_unsafe_subcommand_profile_exits_78_before_deploying(
    deploy: Callable[..., Result], recorder: DeployRecorder, profile: str
) -> None:
    result = deploy("--target", "user", "--profile", profile)

    assert result.exit_code == 78
    errors = [line for line in result.stderr.splitlines() if line.startswith("Error:")]
    assert len(errors) == 1
    assert errors[0].startswith("Error: profile ")
    assert recorder.calls == []


@pytest.mark.os_agnostic
@pytest.mark.parametrize("args", [[], ["--target", "nowhere"], ["--target", "user", "--dir-mode", "rwx"]])
def test_bad_usage_exits_2(deploy: Callable[..., Result], recorder: DeployRecorder, args: list[str]) -> None:
    result = deploy(*args)

    assert result.exit_code == 2
    assert recorder.calls == []


@pytest.mark.os_agnostic
def test_help_lists_the_permission_options(deploy: Callable[..., Result]) -> None:
    result = deploy("--help")

    assert result.exit_code == 0
    for option in ("--no-permissions", "--dir-mode", "--file-mode", "--force"):
        assert option in result.output
