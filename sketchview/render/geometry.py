"""
几何投影 - 归一化曲线点 + 图框 → 绝对坐标路径命令

职责：
1. 解析 "{u, v}" 归一化坐标
2. 投影到 frame：(x + width×u, y + height×v)
3. 生成 M/C/Z 路径命令及 SVG d 字符串

测试要点：
- test_parse_point: 坐标解析
- test_closed_path_commands: 闭合路径 1M + NC + 1Z
- test_open_path_commands: 开放路径无回绕段
- test_empty_path_fails: 空路径直接失败
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..interfaces import MalformedGeometryError
from ..models import Frame, ShapePath
from .codec import format_number

_POINT_RE = re.compile(r"^\s*\{([^,{}]*),([^,{}]*)\}\s*$")

MOVE = "M"
CURVE = "C"
CLOSE = "Z"


@dataclass(frozen=True)
class PathCommand:
    """路径命令（M: 1个点，C: 控制点1/控制点2/终点，Z: 无点）"""
    op: str
    points: tuple[tuple[float, float], ...] = ()

    def to_svg(self) -> str:
        coords = [f"{format_number(x)},{format_number(y)}" for x, y in self.points]
        return f"{self.op}{' '.join(coords)}"


def parse_point(text: str) -> tuple[float, float]:
    """解析 "{u, v}" 为 (u, v)"""
    match = _POINT_RE.match(text or "")
    if not match:
        raise MalformedGeometryError(f"无法解析坐标: {text!r}")
    try:
        return float(match.group(1)), float(match.group(2))
    except ValueError as e:
        raise MalformedGeometryError(f"无法解析坐标: {text!r}") from e


def project(frame: Frame, u: float, v: float) -> tuple[float, float]:
    """归一化坐标投影到图框"""
    return frame.x + frame.width * u, frame.y + frame.height * v


def _project_text(frame: Frame, text: str) -> tuple[float, float]:
    return project(frame, *parse_point(text))


def shape_path_commands(shape: ShapePath) -> list[PathCommand]:
    """形状路径 → 路径命令序列"""
    points = shape.path.points
    if not points:
        raise MalformedGeometryError(f"路径没有任何点: {shape.name or shape.object_id}")

    frame = shape.frame
    count = len(points)
    commands = [PathCommand(MOVE, (_project_text(frame, points[0].point),))]

    segments = count + 1 if shape.path.is_closed else count
    for i in range(1, segments):
        prev = points[i - 1]
        now = points[i % count]
        commands.append(
            PathCommand(
                CURVE,
                (
                    _project_text(frame, prev.curve_from),
                    _project_text(frame, now.curve_to),
                    _project_text(frame, now.point),
                ),
            )
        )

    if shape.path.is_closed:
        commands.append(PathCommand(CLOSE))
    return commands


def commands_to_d(commands: list[PathCommand]) -> str:
    """路径命令 → SVG d 字符串"""
    return "".join(command.to_svg() for command in commands)


def shape_path_to_d(shape: ShapePath) -> str:
    """形状路径 → SVG d 字符串"""
    return commands_to_d(shape_path_commands(shape))
