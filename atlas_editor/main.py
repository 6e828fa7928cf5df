"""Application entry point: command line over the editor core."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from atlas_editor.core.grid import AtlasGrid
from atlas_editor.infra.app_data import ensure_app_data_dirs
from atlas_editor.infra.config import (
    get_editor_config,
    load_default_env_files,
    load_editor_config,
    set_editor_config,
)
from atlas_editor.infra.logging import setup_logging
from atlas_editor.sprites.models import SpriteSheet
from atlas_editor.sprites.repository import SpriteSheetRepository
from atlas_editor.sprites.service import SpriteSheetService
from atlas_editor.ui.preview import SpritePreview
from sprite_engine.api.logging import get_logger
from sprite_engine.geometry import Aabb2, Aabb2i, Vec2, Vec2i
from sprite_engine.runtime.logging import shutdown_engine_logging

logger = get_logger(__name__)


def _grid_arg(raw: str) -> Vec2i:
    normalized = raw.strip().lower()
    try:
        if "x" in normalized:
            left, right = normalized.split("x", 1)
            cells = Vec2i(int(left), int(right))
        else:
            cells = Vec2i.splat(int(normalized))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid grid size: {raw!r}") from exc
    if cells.x < 1 or cells.y < 1:
        raise argparse.ArgumentTypeError("grid size must be at least 1x1")
    return cells


def _cells_from(values: Sequence[int]) -> Aabb2i:
    return Aabb2i.new(Vec2i(values[0], values[1]), Vec2i(values[2], values[3]))


def _format_vec(value: Vec2) -> str:
    return f"{value.x:.6g} {value.y:.6g}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="atlas-editor", description="Sprite atlas cell tools.")
    commands = parser.add_subparsers(dest="command", required=True)

    uv = commands.add_parser("uv", help="Print the UV range of a cell range.")
    uv.add_argument("--grid", type=_grid_arg, default=None)
    uv.add_argument("cells", type=int, nargs=4, metavar=("MINX", "MINY", "MAXX", "MAXY"))

    cell = commands.add_parser("cell", help="Print the atlas cell under a widget point.")
    cell.add_argument("--grid", type=_grid_arg, default=None)
    cell.add_argument("--widget", type=float, nargs=4, required=True, metavar=("X", "Y", "W", "H"))
    cell.add_argument("point", type=float, nargs=2, metavar=("PX", "PY"))

    preview = commands.add_parser("preview", help="Print the preview layout for a cell range.")
    preview.add_argument("--grid", type=_grid_arg, default=None)
    preview.add_argument("--size", type=float, default=None)
    preview.add_argument("cells", type=int, nargs=4, metavar=("MINX", "MINY", "MAXX", "MAXY"))

    sheets = commands.add_parser("sheets", help="Manage stored sprite sheets.")
    sheet_commands = sheets.add_subparsers(dest="sheet_command", required=True)
    sheet_commands.add_parser("list")
    show = sheet_commands.add_parser("show")
    show.add_argument("name")
    create = sheet_commands.add_parser("create")
    create.add_argument("name")
    create.add_argument("atlas")
    create.add_argument("--grid", type=_grid_arg, default=None)
    add_sprite = sheet_commands.add_parser("add-sprite")
    add_sprite.add_argument("sheet")
    add_sprite.add_argument("sprite")
    add_sprite.add_argument("cells", type=int, nargs=4, metavar=("MINX", "MINY", "MAXX", "MAXY"))
    remove_sprite = sheet_commands.add_parser("remove-sprite")
    remove_sprite.add_argument("sheet")
    remove_sprite.add_argument("sprite")
    rename = sheet_commands.add_parser("rename")
    rename.add_argument("old")
    rename.add_argument("new")
    delete = sheet_commands.add_parser("delete")
    delete.add_argument("name")
    return parser


def _grid(cells: Vec2i | None) -> AtlasGrid:
    return AtlasGrid(cells=cells if cells is not None else get_editor_config().grid_cells)


def _run_uv(args: argparse.Namespace) -> int:
    uv = _grid(args.grid).cells_to_uv(_cells_from(args.cells))
    print(f"{_format_vec(uv.min)} {_format_vec(uv.max)}")
    return 0


def _run_cell(args: argparse.Namespace) -> int:
    x, y, w, h = args.widget
    widget = Aabb2.new(Vec2(x, y), Vec2(x + w, y + h))
    hovered = _grid(args.grid).cell_at(widget, Vec2(args.point[0], args.point[1]))
    print("none" if hovered is None else f"{hovered.x} {hovered.y}")
    return 0


def _run_preview(args: argparse.Namespace) -> int:
    config = get_editor_config()
    size = args.size if args.size is not None else config.preview_size
    layout = (
        SpritePreview(_grid(args.grid), min_display_extent=config.preview_min_extent)
        .widget_size(Vec2.splat(size))
        .display_range(_cells_from(args.cells))
        .background_color(config.preview_background)
        .build(Vec2.zero(), Vec2.splat(size))
    )
    print(f"background {layout.background}")
    if layout.image is None:
        print("image none")
    else:
        print(f"uv_min {_format_vec(layout.image.uv_min)}")
        print(f"uv_max {_format_vec(layout.image.uv_max)}")
    return 0


def _run_sheets(args: argparse.Namespace, service: SpriteSheetService) -> int:
    command = args.sheet_command
    if command == "list":
        for name in service.list_sheets():
            print(name)
    elif command == "show":
        sheet = service.load_sheet(args.name)
        print(f"{sheet.name} atlas={sheet.atlas_path} grid={sheet.grid.cells.x}x{sheet.grid.cells.y}")
        for sprite in sheet.sprites:
            cells = sprite.cells
            print(f"  {sprite.name} {cells.min.x} {cells.min.y} {cells.max.x} {cells.max.y}")
    elif command == "create":
        service.save_sheet(SpriteSheet(name=args.name, atlas_path=args.atlas, grid=_grid(args.grid)))
    elif command == "add-sprite":
        service.add_sprite(args.sheet, args.sprite, _cells_from(args.cells))
    elif command == "remove-sprite":
        service.remove_sprite(args.sheet, args.sprite)
    elif command == "rename":
        service.rename_sheet(args.old, args.new)
    elif command == "delete":
        service.delete_sheet(args.name)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the atlas editor command line."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    set_editor_config(load_editor_config())
    paths = ensure_app_data_dirs()
    setup_logging()
    logger.debug("app_data_paths root=%s logs=%s sheets=%s", paths["root"], paths["logs"], paths["sheets"])
    try:
        if args.command == "uv":
            return _run_uv(args)
        if args.command == "cell":
            return _run_cell(args)
        if args.command == "preview":
            return _run_preview(args)
        return _run_sheets(args, SpriteSheetService(SpriteSheetRepository(paths["sheets"])))
    except (ValueError, FileNotFoundError) as exc:
        logger.error("command_failed command=%s reason=%s", args.command, exc)
        return 2
    finally:
        # Flush the run-log queue before the process exits.
        shutdown_engine_logging()


if __name__ == "__main__":
    raise SystemExit(main())
