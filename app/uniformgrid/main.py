from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterable, List

from app.uniformgrid.layout.dimensions import GridDimensions
from app.uniformgrid.layout.geometry import Size
from app.uniformgrid.layout.items import GridItem, Visibility
from app.uniformgrid.layout.uniform_grid import UniformGrid


@dataclass(frozen=True)
class LayoutReport:
    dimensions: GridDimensions
    desired_size: Size
    final_size: Size
    items: List[GridItem]


def build_items(
    count: int,
    *,
    item_size: Size = Size(100.0, 100.0),
    collapsed: Iterable[int] = (),
) -> List[GridItem]:
    if count < 0:
        raise ValueError("count must be >= 0")
    collapsed_set = set(collapsed)
    return [
        GridItem(
            key=f"item-{i}",
            preferred=item_size,
            visibility=Visibility.COLLAPSED if i in collapsed_set else Visibility.VISIBLE,
        )
        for i in range(count)
    ]


def run_layout(
    *,
    count: int,
    rows: int = 0,
    columns: int = 0,
    first_column: int = 0,
    width: float = 800.0,
    height: float = 600.0,
    item_size: Size = Size(100.0, 100.0),
    collapsed: Iterable[int] = (),
) -> LayoutReport:
    items = build_items(count, item_size=item_size, collapsed=collapsed)
    grid = UniformGrid(
        items,
        rows=rows,
        columns=columns,
        first_column=first_column,
    )
    available = Size(width, height)
    desired = grid.measure(available)
    final = grid.arrange(available)
    return LayoutReport(
        dimensions=grid.dimensions,
        desired_size=desired,
        final_size=final,
        items=items,
    )


def format_report(report: LayoutReport) -> List[str]:
    dims = report.dimensions
    lines = [
        f"Grid: {dims.rows} rows x {dims.columns} columns (first column {dims.first_column})",
        f"Desired size: {report.desired_size.width:g} x {report.desired_size.height:g}",
        f"Final size: {report.final_size.width:g} x {report.final_size.height:g}",
    ]
    for item in report.items:
        r = item.bounds
        if r is None:
            lines.append(f"- {item.key}: not placed")
            continue
        flag = "" if item.is_visible else " (collapsed)"
        lines.append(f"- {item.key}: x={r.x:g} y={r.y:g} w={r.width:g} h={r.height:g}{flag}")
    return lines


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {value}")
    return value


def _size(text: str) -> Size:
    w, sep, h = text.lower().partition("x")
    try:
        if not sep:
            raise ValueError(text)
        size = Size(float(w), float(h))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}") from None
    if size.width < 0 or size.height < 0:
        raise argparse.ArgumentTypeError(f"size must be >= 0: {text!r}")
    return size


def _indexes(text: str) -> List[int]:
    return [_non_negative_int(part.strip()) for part in text.split(",") if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute a uniform grid layout and print the placements")
    parser.add_argument("--items", type=_non_negative_int, default=9, help="Number of items")
    parser.add_argument("--rows", type=_non_negative_int, default=0, help="Row count (0 = auto)")
    parser.add_argument("--columns", type=_non_negative_int, default=0, help="Column count (0 = auto)")
    parser.add_argument("--first-column", type=_non_negative_int, default=0, help="Empty cells before the first item")
    parser.add_argument("--width", type=float, default=800.0, help="Available width")
    parser.add_argument("--height", type=float, default=600.0, help="Available height")
    parser.add_argument("--item-size", type=_size, default=Size(100.0, 100.0), help="Preferred item size, WxH")
    parser.add_argument("--collapsed", type=_indexes, default=[], help="Comma separated indexes of collapsed items")
    return parser


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width < 0 or args.height < 0:
        parser.error("--width and --height must be >= 0")

    report = run_layout(
        count=args.items,
        rows=args.rows,
        columns=args.columns,
        first_column=args.first_column,
        width=args.width,
        height=args.height,
        item_size=args.item_size,
        collapsed=args.collapsed,
    )
    for line in format_report(report):
        print(line)


if __name__ == "__main__":
    main()
