"""
@PURPOSE: 测试完整 lint 运行的诊断汇总、顺序和位置
@OUTLINE:
  - TestLintRunner: 运行器端到端测试
@DEPENDENCIES:
  - 内部: packages.blueprint_lint.runner
  - 外部: pytest
"""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import make_project, write_file

from packages.blueprint_lint.models import DiagnosticKind, ProjectClassification
from packages.blueprint_lint.runner import LintRunner, run_lint


class TestLintRunner:
    """运行器端到端测试."""

    def test_no_projects(self, workspace: Path) -> None:
        report = run_lint(workspace)

        assert report.ok
        assert report.exit_code == 0
        assert report.candidates == []

    def test_clean_project(self, workspace: Path) -> None:
        project = make_project(workspace / "counter")
        write_file(project / "contracts" / "counter.fc")
        write_file(project / "wrappers" / "Counter.ts", "export class Counter {}")
        write_file(project / "wrappers" / "Counter.compile.ts", "targets: ['contracts/counter.fc']")
        write_file(project / "scripts" / "deployCounter.ts")
        write_file(project / "tests" / "Counter.spec.ts")

        report = run_lint(workspace)

        assert report.diagnostics == []
        assert report.candidates[0].classification is ProjectClassification.VALID

    def test_locations_relative_to_scan_root(self, workspace: Path) -> None:
        write_file(make_project(workspace / "proj") / "contracts" / "MyContract.fc")

        report = run_lint(workspace)

        assert report.exit_code == 1
        assert [d.location for d in report.diagnostics] == ["proj/contracts/MyContract.fc"]

    def test_project_at_scan_root(self, workspace: Path) -> None:
        write_file(make_project(workspace) / "contracts" / "MyContract.fc")

        report = run_lint(workspace)

        assert [d.location for d in report.diagnostics] == ["contracts/MyContract.fc"]

    def test_check_order(self, workspace: Path) -> None:
        """合约命名 -> 重名 -> wrapper 命名 -> 脚本命名 -> 引用文件."""
        project = make_project(workspace / "proj")
        write_file(project / "contracts" / "MyJetton.fc")
        write_file(project / "contracts" / "my_jetton.tact")
        write_file(project / "wrappers" / "counter.ts")
        write_file(project / "scripts" / "Deploy.ts")
        write_file(project / "wrappers" / "Jetton.compile.ts", "target: 'contracts/jetton.tact'")

        report = run_lint(workspace)

        assert [d.location for d in report.diagnostics] == [
            "proj/contracts/MyJetton.fc",
            "proj/contracts/MyJetton.fc",
            "proj/contracts/my_jetton.tact",
            "proj/wrappers/counter.ts",
            "proj/scripts/Deploy.ts",
            "proj/wrappers/Jetton.compile.ts",
        ]
        assert report.diagnostics[-1].kind is DiagnosticKind.MISSING_REFERENCED_FILE

    def test_naming_dirs_scope(self, workspace: Path) -> None:
        project = make_project(workspace / "proj")
        write_file(project / "wrappers" / "counter.ts")
        write_file(project / "contracts" / "Counter.fc")
        write_file(project / "contracts" / "counter.tact")

        report = LintRunner(workspace, naming_dirs=["scripts"]).run()

        # 重名检测始终扫描 contracts
        assert {d.location for d in report.diagnostics} == {
            "proj/contracts/Counter.fc",
            "proj/contracts/counter.tact",
        }

    def test_broken_project_not_checked_further(self, workspace: Path) -> None:
        project = make_project(workspace / "proj", config=False)
        write_file(project / "contracts" / "MyContract.fc")

        report = run_lint(workspace)

        assert len(report.diagnostics) == 1
        assert report.diagnostics[0].kind is DiagnosticKind.STRUCTURE_INVALID

    def test_projects_checked_independently(self, workspace: Path) -> None:
        write_file(make_project(workspace / "alpha") / "contracts" / "Alpha.fc")
        (workspace / "beta" / "contracts").mkdir(parents=True)
        write_file(make_project(workspace / "gamma") / "scripts" / "Deploy.ts")

        report = run_lint(workspace)

        assert [(d.kind, d.location) for d in report.diagnostics] == [
            (DiagnosticKind.BROKEN_SCAFFOLD, "beta"),
            (DiagnosticKind.NAMING_MISMATCH, "alpha/contracts/Alpha.fc"),
            (DiagnosticKind.NAMING_MISMATCH, "gamma/scripts/Deploy.ts"),
        ]

    def test_unexpected_error_becomes_diagnostic(
        self, workspace: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        make_project(workspace / "alpha")
        write_file(make_project(workspace / "beta") / "contracts" / "Beta.fc")
        calls: list[Path] = []

        def flaky(project_root: Path, rules=None):
            calls.append(project_root)
            if project_root.name == "alpha":
                raise RuntimeError("boom")
            return []

        monkeypatch.setattr("packages.blueprint_lint.runner.find_duplicate_names", flaky)

        report = run_lint(workspace)

        assert len(calls) == 2
        assert report.diagnostics[0].kind is DiagnosticKind.STRUCTURE_INVALID
        assert report.diagnostics[0].location == "alpha"
        assert "boom" in report.diagnostics[0].message
        assert report.diagnostics[1].location == "beta/contracts/Beta.fc"

    def test_root_folder_reported_first(self, workspace: Path) -> None:
        write_file(workspace.parent / "package.json", "{}")
        (workspace.parent / "contracts").mkdir()
        write_file(make_project(workspace / "proj") / "contracts" / "Bad.fc")

        report = run_lint(workspace)

        assert report.diagnostics[0].location == str(workspace.parent)
        assert report.diagnostics[1].location == "proj/contracts/Bad.fc"
