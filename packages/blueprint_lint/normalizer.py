"""
@PURPOSE: 文件名大小写风格转换与判定
@OUTLINE:
  - normalize_to_snake_case(): PascalCase/camelCase 转 snake_case
  - canonical_base_name(): 由文件路径得到期望的 snake_case 名称
  - is_pascal_case(): 判断 PascalCase
  - is_lower_camel_case(): 判断 lowerCamelCase
  - duplicate_key(): 重名检测使用的归一化键
@GOTCHAS:
  - 末尾的连续大写（缩写）不会被拆开: MyNFT -> my_nft
  - 数字只按 "小写/数字 + 大写" 规则处理: MyNFTV2 -> my_nftv2
  - duplicate_key 只忽略大小写和下划线，不忽略连字符
@DEPENDENCIES:
  - 标准库: re, pathlib
"""

from __future__ import annotations

import re
from pathlib import Path

LOWER_TO_UPPER_PATTERN = re.compile(r"([a-z0-9])([A-Z])")
ACRONYM_BOUNDARY_PATTERN = re.compile(r"([A-Z])([A-Z][a-z])")
PASCAL_CASE_PATTERN = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
LOWER_CAMEL_CASE_PATTERN = re.compile(r"^[a-z][a-zA-Z0-9]*$")
TEST_MARKER_PATTERN = re.compile(r"\.(spec|test)$")


def normalize_to_snake_case(name: str) -> str:
    """把标识符风格的名称转换为 snake_case.

    Args:
        name: 任意字符串

    Returns:
        snake_case 字符串，空字符串返回空字符串

    Examples:
        >>> normalize_to_snake_case("MyContract")
        'my_contract'
        >>> normalize_to_snake_case("myContract")
        'my_contract'
        >>> normalize_to_snake_case("NFTCollection")
        'nft_collection'
    """
    if not name:
        return ""
    result = LOWER_TO_UPPER_PATTERN.sub(r"\1_\2", name)
    result = ACRONYM_BOUNDARY_PATTERN.sub(r"\1_\2", result)
    return result.lower()


def canonical_base_name(file_path: str | Path) -> str:
    """计算文件的期望 snake_case 名称.

    去掉最后一个扩展名；测试文件再去掉 .spec/.test 标记，
    这样 MyContract.spec.ts 的期望名称是 my_contract。

    Args:
        file_path: 文件路径

    Returns:
        snake_case 名称
    """
    stem = Path(file_path).stem
    stem = TEST_MARKER_PATTERN.sub("", stem)
    return normalize_to_snake_case(stem)


def is_pascal_case(name: str) -> bool:
    """检查是否为 PascalCase（大写字母开头，只含字母数字）."""
    return bool(PASCAL_CASE_PATTERN.match(name))


def is_lower_camel_case(name: str) -> bool:
    """检查是否为 lowerCamelCase（小写字母开头，只含字母数字）."""
    return bool(LOWER_CAMEL_CASE_PATTERN.match(name))


def duplicate_key(file_path: str | Path) -> str:
    """重名检测的归一化键: 小写文件名（去扩展名）并删除下划线.

    Examples:
        >>> duplicate_key("contracts/MyJetton.fc")
        'myjetton'
        >>> duplicate_key("contracts/my_jetton.tact")
        'myjetton'
    """
    return Path(file_path).stem.lower().replace("_", "")
