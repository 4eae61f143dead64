# src/main.py - v1
"""CLI entry point: restyle, history, templates, models commands.

Usage:
    stylemorph restyle <files>... -p "<style request>" [options]
    stylemorph history list | show <id> | delete <id>
    stylemorph templates list | like <id> | save <name> <prompt> | rename <id> <name> | delete <id>
    stylemorph models
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from stylemorph.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return asyncio.run(_run(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


async def _run(args: argparse.Namespace) -> int:
    from stylemorph.app.context import AppContext
    from stylemorph.config.settings import load_settings
    from stylemorph.logging.logger import setup_logging

    settings = load_settings()
    setup_logging(
        level="DEBUG" if args.verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
    app = AppContext(settings)
    await app.load(discover_models=args.command in ("restyle", "models"))
    return await args.func(args, app)


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="stylemorph",
        description=f"StyleMorph v{__version__} - restyle HTML documents from a prompt",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- restyle ---
    p_restyle = subparsers.add_parser(
        "restyle", help="Generate a shared stylesheet and rewrite the documents",
    )
    p_restyle.add_argument("files", nargs="+", type=Path, help="HTML or text documents")
    source = p_restyle.add_mutually_exclusive_group(required=True)
    source.add_argument("-p", "--prompt", help="Style request")
    source.add_argument("-t", "--template", help="Use a template's prompt (by id)")
    p_restyle.add_argument("-m", "--model", default=None, help="Model id")
    p_restyle.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Archive path (default: ARCHIVE_NAME setting)",
    )
    p_restyle.set_defaults(func=_cmd_restyle)

    # --- history ---
    p_history = subparsers.add_parser("history", help="Inspect saved runs")
    history_sub = p_history.add_subparsers(dest="history_command", required=True)
    history_sub.add_parser("list", help="List saved runs").set_defaults(func=_cmd_history_list)
    p_show = history_sub.add_parser("show", help="Show or export a saved run")
    p_show.add_argument("run_id")
    p_show.add_argument("-o", "--output", type=Path, default=None, help="Export archive")
    p_show.set_defaults(func=_cmd_history_show)
    p_hdel = history_sub.add_parser("delete", help="Delete a saved run")
    p_hdel.add_argument("run_id")
    p_hdel.set_defaults(func=_cmd_history_delete)

    # --- templates ---
    p_templates = subparsers.add_parser("templates", help="Manage style templates")
    tpl_sub = p_templates.add_subparsers(dest="templates_command", required=True)
    p_tlist = tpl_sub.add_parser("list", help="List templates")
    p_tlist.add_argument("--search", default="", help="Filter by name or prompt")
    p_tlist.set_defaults(func=_cmd_templates_list)
    p_like = tpl_sub.add_parser("like", help="Toggle like on a template")
    p_like.add_argument("template_id")
    p_like.set_defaults(func=_cmd_templates_like)
    p_save = tpl_sub.add_parser("save", help="Save a prompt as a template")
    p_save.add_argument("name")
    p_save.add_argument("prompt")
    p_save.set_defaults(func=_cmd_templates_save)
    p_rename = tpl_sub.add_parser("rename", help="Rename your template")
    p_rename.add_argument("template_id")
    p_rename.add_argument("name")
    p_rename.set_defaults(func=_cmd_templates_rename)
    p_tdel = tpl_sub.add_parser("delete", help="Delete your template")
    p_tdel.add_argument("template_id")
    p_tdel.set_defaults(func=_cmd_templates_delete)

    # --- models ---
    subparsers.add_parser("models", help="List selectable models").set_defaults(
        func=_cmd_models
    )

    return parser


async def _cmd_restyle(args: argparse.Namespace, app) -> int:
    """Run the pipeline over the given files and write the archive."""
    from stylemorph.core.errors import InputValidationError, StyleMorphError
    from stylemorph.core.models import PipelineStatus
    from stylemorph.workspace.admission import read_input_files

    missing = [p for p in args.files if not p.is_file()]
    if missing:
        logger.error("File not found: %s", ", ".join(str(p) for p in missing))
        return 1

    files = read_input_files(args.files, app.settings.input_extensions_list)
    added = app.workspace.add_files(files)
    if len(added) < len(files):
        print(f"Only the first {len(added)} files are used (limit {app.workspace.max_files}).")

    try:
        if args.template:
            app.workspace.select_template(app.templates.get(args.template))
        else:
            app.workspace.set_prompt(args.prompt)
    except StyleMorphError as exc:
        logger.error("%s", exc)
        return 1

    if args.model and not app.select_model(args.model):
        logger.error(
            "Unknown model %r. Available: %s",
            args.model, ", ".join(m.id for m in app.models),
        )
        return 1

    try:
        outcome = await app.generate()
    except InputValidationError as exc:
        logger.error("%s", exc)
        return 1

    if outcome.status is PipelineStatus.ERROR:
        print(f"\nRun failed: {outcome.error}")
        return 1

    archive = args.output or Path(app.settings.archive_name)
    app.commands(archive).save_all()

    print("\nRestyle complete:")
    for artifact in outcome.artifacts:
        print(f"  {artifact.kind.value:<10s} {artifact.file_name} ({len(artifact.content)} chars)")
    print(f"  Archive:    {archive}")
    if outcome.warnings:
        print("  Warnings:   " + "; ".join(outcome.warnings))
        print("  (run not saved to history)")
    elif outcome.record is not None:
        print(f"  Saved as:   {outcome.record.id}")
    return 0


async def _cmd_history_list(args: argparse.Namespace, app) -> int:
    records = app.run_history.list()
    if not records:
        print("No saved runs.")
        return 0
    for record in records:
        when = record.timestamp.strftime("%Y-%m-%d %H:%M")
        prompt = record.prompt if len(record.prompt) <= 60 else record.prompt[:57] + "..."
        print(f"{record.id}  {when}  {len(record.artifacts)} files  {prompt}")
    return 0


async def _cmd_history_show(args: argparse.Namespace, app) -> int:
    from stylemorph.core.errors import RunNotFoundError

    try:
        record = app.open_run(args.run_id)
    except RunNotFoundError as exc:
        logger.error("%s", exc)
        return 1

    print(f"Run {record.id} ({record.timestamp.isoformat()})")
    print(f"  Prompt: {record.prompt}")
    for artifact in record.artifacts:
        print(f"  {artifact.kind.value:<10s} {artifact.file_name}")
    if args.output:
        app.commands(args.output).save_all()
        print(f"  Archive: {args.output}")
    return 0


async def _cmd_history_delete(args: argparse.Namespace, app) -> int:
    if not await app.delete_run(args.run_id):
        logger.error("No run with id %r", args.run_id)
        return 1
    print(f"Deleted run {args.run_id}")
    return 0


async def _cmd_templates_list(args: argparse.Namespace, app) -> int:
    templates = app.templates.search(args.search) if args.search else app.templates.list()
    for t in templates:
        liked = "*" if t.is_liked else " "
        mine = " (yours)" if t.is_user_authored else ""
        print(f"{t.id:<38s}{liked} {t.like_count:>4d}  {t.name}{mine}")
    return 0


async def _cmd_templates_like(args: argparse.Namespace, app) -> int:
    return await _template_op(app.templates.like(args.template_id))


async def _cmd_templates_save(args: argparse.Namespace, app) -> int:
    template = await app.templates.save(args.name, args.prompt)
    print(f"Saved template {template.id}")
    return 0


async def _cmd_templates_rename(args: argparse.Namespace, app) -> int:
    return await _template_op(app.templates.rename(args.template_id, args.name))


async def _cmd_templates_delete(args: argparse.Namespace, app) -> int:
    return await _template_op(app.templates.delete(args.template_id))


async def _template_op(operation) -> int:
    from stylemorph.core.errors import TemplateNotEditableError, TemplateNotFoundError

    try:
        await operation
    except (TemplateNotFoundError, TemplateNotEditableError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


async def _cmd_models(args: argparse.Namespace, app) -> int:
    for model in app.models:
        marker = "*" if model.id == app.selected_model.id else " "
        print(f"{marker} {model.id:<28s} {model.provider:<7s} {model.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
