"""
@PURPOSE: 使 blueprint_linter 可以作为模块运行
@OUTLINE:
  - 导入并运行 main.py 中的 app
@DEPENDENCIES:
  - 内部: apps.cli.blueprint_linter.main
"""

from apps.cli.blueprint_linter.main import app

if __name__ == "__main__":
    app(prog_name="blueprint-lint")
