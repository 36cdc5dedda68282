"""
@PURPOSE: 测试文本与 JSON 报告渲染
"""

from __future__ import annotations

import json
from pathlib import Path

from conftest import make_project, write_file

from packages.blueprint_lint.models import Diagnostic, DiagnosticKind
from packages.blueprint_lint.reporter import format_diagnostic, render_json, render_text
from packages.blueprint_lint.runner import run_lint

NAMING = Diagnostic(
    kind=DiagnosticKind.NAMING_MISMATCH,
    location="proj/contracts/MyContract.fc",
    message="合约文件应使用 snake_case 命名。期望: 'my_contract.fc'，实际: 'MyContract.fc'。",
)
STRUCTURE = Diagnostic(
    kind=DiagnosticKind.STRUCTURE_INVALID,
    location="proj",
    message="未找到配置文件 'blueprint.config.ts'。",
)


class TestRenderText:
    """文本报告."""

    def test_empty(self) -> None:
        assert render_text([]) == ""

    def test_grouped_in_kind_order(self) -> None:
        text = render_text([NAMING, STRUCTURE])

        assert text.startswith("Linter 发现 2 个问题:")
        assert text.index("[项目结构] 1 个") < text.index("[文件命名] 1 个")
        assert "结构无效: proj\n    - 未找到配置文件" in text

    def test_location_appended_once(self) -> None:
        assert format_diagnostic(NAMING).endswith("(文件: proj/contracts/MyContract.fc)")

        duplicate = Diagnostic(
            kind=DiagnosticKind.NAMING_MISMATCH,
            location="proj/contracts/a.fc",
            message="'contracts' 目录中存在重名文件: contracts/A.fc, contracts/a.fc。",
            names_location=True,
        )
        assert "(文件:" not in format_diagnostic(duplicate)

    def test_broken_scaffold_message_verbatim(self) -> None:
        broken = Diagnostic(kind=DiagnosticKind.BROKEN_SCAFFOLD, location="proj", message="目录 'proj' 有误")

        assert format_diagnostic(broken) == "目录 'proj' 有误"


class TestRenderJson:
    """JSON 报告."""

    def test_empty(self) -> None:
        assert render_json([]) == ""

    def test_flat_list_in_emission_order(self) -> None:
        payload = json.loads(render_json([NAMING, STRUCTURE]))

        assert payload == [NAMING.to_dict(), STRUCTURE.to_dict()]
        assert payload[0]["kind"] == "NAMING_MISMATCH"

    def test_non_ascii_kept(self) -> None:
        assert "未找到配置文件" in render_json([STRUCTURE])


class TestNestedProjectReport:
    """嵌套项目的报告位置."""

    def test_duplicates_in_nested_project_have_no_location_suffix(self, workspace: Path) -> None:
        project = make_project(workspace / "proj")
        write_file(project / "contracts" / "A.fc")
        write_file(project / "contracts" / "a.tact")

        report = run_lint(workspace)
        lines = [format_diagnostic(diagnostic) for diagnostic in report.diagnostics]

        assert [d.location for d in report.diagnostics] == [
            "proj/contracts/A.fc",
            "proj/contracts/A.fc",
            "proj/contracts/a.tact",
        ]
        # 第一条是合约命名错误，需要位置后缀；后两条是重名列表
        assert lines[0].endswith("(文件: proj/contracts/A.fc)")
        assert all("(文件:" not in line for line in lines[1:])
