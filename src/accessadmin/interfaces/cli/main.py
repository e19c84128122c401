"""Command line admin for access entries.

Usage:
  accessadmin serve
  accessadmin list [--identity alice]
  accessadmin create alice read doc1
  accessadmin update <id> --permission write
  accessadmin delete <id>

The API location comes from ACCESSADMIN_API_BASE_URL / ACCESSADMIN_API_TOKEN.
"""

import argparse
import asyncio
import sys

from accessadmin import __version__
from accessadmin.application.controller import AccessControlController
from accessadmin.config import get_settings
from accessadmin.domain.value_objects import DraftField, ListDisplayState
from accessadmin.infrastructure.http.access_api_client import HttpAccessApi
from accessadmin.interfaces.presenters.entry_form import EntryFormPresenter
from accessadmin.interfaces.presenters.entry_list import EntryListPresenter, EntryListView
from accessadmin.logging_config import configure_logging
from accessadmin.main import create_controller, run_server


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="accessadmin", description="Manage access entries")
    parser.add_argument("--version", action="version", version=f"accessadmin {__version__}")
    parser.add_argument("--api-url", help="Override ACCESSADMIN_API_BASE_URL")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("serve", help="Run the reference access entry API")

    p_list = sub.add_parser("list", help="List access entries")
    p_list.add_argument("--identity", help="Only entries for this subject")

    p_create = sub.add_parser("create", help="Create an access entry")
    p_create.add_argument("identity")
    p_create.add_argument("permission")
    p_create.add_argument("resource")

    p_update = sub.add_parser("update", help="Update an access entry")
    p_update.add_argument("entry_id")
    p_update.add_argument("--identity")
    p_update.add_argument("--permission")
    p_update.add_argument("--resource")

    p_delete = sub.add_parser("delete", help="Delete an access entry")
    p_delete.add_argument("entry_id")
    return parser


def format_list(view: EntryListView) -> str:
    if view.state != ListDisplayState.POPULATED:
        return view.message or ""
    lines = [f"{'ID':36}  {'IDENTITY':16}  {'PERMISSION':12}  {'RESOURCE':24}  TYPE"]
    for row in view.rows:
        e = row.entry
        lines.append(
            f"{e.id:36}  {e.identity:16}  {e.permission:12}  {e.resource:24}  {e.resource_type}"
        )
    return "\n".join(lines)


async def run_command(args: argparse.Namespace, controller: AccessControlController) -> int:
    """Drive one command through the controller. Returns the exit code."""
    entries = EntryListPresenter(controller)
    form = EntryFormPresenter(controller)

    if args.command == "list":
        if args.identity != controller.selection.selected_subject:
            await controller.select_subject(args.identity)
        else:
            await controller.refresh()
        view = entries.render()
        print(format_list(view))
        return 1 if view.state == ListDisplayState.ERROR else 0

    if args.command == "create":
        form.set_field(DraftField.IDENTITY, args.identity)
        form.set_field(DraftField.PERMISSION, args.permission)
        form.set_field(DraftField.RESOURCE, args.resource)
        created = await form.submit()
        if created is None:
            print(form.render().error_message, file=sys.stderr)
            return 1
        print(created.id)
        return 0

    if args.command == "update":
        await controller.refresh()
        try:
            entries.edit(args.entry_id)
        except KeyError:
            print(f"Access entry not found: {args.entry_id}", file=sys.stderr)
            return 1
        for name in (DraftField.IDENTITY, DraftField.PERMISSION, DraftField.RESOURCE):
            value = getattr(args, name.value)
            if value is not None:
                form.set_field(name, value)
        updated = await form.submit()
        if updated is None:
            print(form.render().error_message, file=sys.stderr)
            return 1
        print(updated.id)
        return 0

    if args.command == "delete":
        if not await entries.delete(args.entry_id):
            print(f"Could not delete access entry {args.entry_id}", file=sys.stderr)
            return 1
        return 0

    raise ValueError(f"Unknown command: {args.command}")


async def _run_client(args: argparse.Namespace) -> int:
    settings = get_settings()
    api = HttpAccessApi(
        base_url=args.api_url or settings.api_base_url,
        token=settings.api_token,
        timeout=settings.request_timeout,
    )
    async with api:
        controller = create_controller(settings, api=api)
        return await run_command(args, controller)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    if args.command == "serve":
        run_server(settings)
        return 0
    return asyncio.run(_run_client(args))


if __name__ == "__main__":
    sys.exit(main())
