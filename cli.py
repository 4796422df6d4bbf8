"""
Command-line front end for the config store client.

Every editing command loads the document from the Gist, applies the edit
and saves the whole document back.
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from client import ConfigStore
from config import TARGET_GROUPS, TARGETS, ClientConfig, load_client_config, save_client_config
from core import CoreError, ServerEntry, get_server, is_enabled, serialize_config
from server.logging_config import setup_logging

logger = logging.getLogger(__name__)

TARGET_CHOICES = list(TARGETS) + list(TARGET_GROUPS)


def parse_env_pairs(pairs: Sequence[str]) -> dict[str, str]:
    """Turn ["KEY=value", ...] into a mapping."""
    env: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got: {pair}")
        env[key.strip()] = value
    return env


def format_server(name: str, entry: ServerEntry) -> str:
    marker = "on " if is_enabled(entry) else "off"
    command = " ".join([entry.command, *(str(arg) for arg in entry.args or [])])
    return f"[{marker}] {name}: {command}"


# =============================================================================
# Commands
# =============================================================================


async def cmd_list(store: ConfigStore, args: argparse.Namespace) -> None:
    loaded = await store.load()
    document = loaded.document
    if not document.mcpServers:
        print("No servers configured")
        return
    for name, entry in document.mcpServers.items():
        print(format_server(name, entry))
    if document.version:
        print(f"\nVersion {document.version}, last modified {loaded.updated_at} by {document.modifiedBy}")


async def cmd_show(store: ConfigStore, args: argparse.Namespace) -> None:
    await store.load()
    entry = get_server(store.document, args.name)
    print(json.dumps(entry.model_dump(), indent=2))


async def cmd_add(store: ConfigStore, args: argparse.Namespace) -> None:
    await store.load()
    entry = ServerEntry(
        command=args.command,
        args=args.arg,
        env=parse_env_pairs(args.env),
        enabled=not args.disabled,
    )
    if args.replace and args.name in store.document.mcpServers:
        store.update_server(args.name, entry)
    else:
        store.add_server(args.name, entry)
    saved = await store.save()
    print(f"Server '{args.name}' saved (v{saved.version})")


async def cmd_remove(store: ConfigStore, args: argparse.Namespace) -> None:
    await store.load()
    store.delete_server(args.name)
    saved = await store.save()
    print(f"Server '{args.name}' deleted (v{saved.version})")


async def cmd_toggle(store: ConfigStore, args: argparse.Namespace) -> None:
    await store.load()
    enabled = store.toggle_server(args.name)
    saved = await store.save()
    print(f"Server '{args.name}' {'enabled' if enabled else 'disabled'} (v{saved.version})")


async def cmd_rename(store: ConfigStore, args: argparse.Namespace) -> None:
    await store.load()
    store.rename_server(args.old_name, args.new_name)
    saved = await store.save()
    print(f"Server '{args.old_name}' renamed to '{args.new_name}' (v{saved.version})")


async def cmd_export(store: ConfigStore, args: argparse.Namespace) -> None:
    await store.load()
    content = serialize_config(store.clean_config())
    if args.output:
        Path(args.output).write_text(content, encoding="utf-8")
        print(f"Clean config written to {args.output}")
    else:
        print(content)


async def cmd_apply(store: ConfigStore, args: argparse.Namespace) -> None:
    await store.load()
    outcome = await store.apply(args.target)

    if outcome.mode == "download":
        print(f"{outcome.reason} - downloading instead")
        for path in outcome.files:
            print(f"  {path}")
        return

    for result in outcome.results:
        if result.status == "success":
            print(f"  {result.label}: {result.path}")
            if result.backup and result.backup.backup:
                print(f"    backup: {result.backup.path}")
        else:
            print(f"  {result.label}: FAILED - {result.error}")
    if outcome.backups_created:
        print(f"{outcome.backups_created} backup(s) created in 'backups' folder")


async def cmd_status(store: ConfigStore, args: argparse.Namespace) -> None:
    if await store.writer.has_direct_save():
        status = await store.writer.get_status()
        print(f"Direct save active (writer {status.get('version')}, port {status.get('port')})")
        for target, path in (status.get("paths") or {}).items():
            print(f"  {target}: {path}")
    else:
        print("Download mode (config writer not running)")


async def cmd_settings(store: ConfigStore, args: argparse.Namespace) -> None:
    paths = {
        "code": args.code,
        "desktop": args.desktop,
        "cursor": args.cursor,
        "claudeIdeCursor": args.claude_ide_cursor,
    }
    if any(paths.values()) or args.max_backups is not None:
        settings = await store.writer.update_settings(paths=paths, max_backups=args.max_backups)
    else:
        settings = await store.writer.get_settings()
    print(json.dumps(settings, indent=2))


def cmd_configure(config: ClientConfig, args: argparse.Namespace) -> None:
    changes = {
        "gistId": args.gist_id,
        "githubToken": args.token,
        "writerUrl": args.writer_url,
        "downloadDir": args.download_dir,
    }
    updated = config.model_copy(update={k: v for k, v in changes.items() if v is not None})
    path = save_client_config(updated, args.config_dir)
    print(f"Configuration saved to {path}")


# =============================================================================
# Parser
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcpilot",
        description="Manage MCP server configs synced through a GitHub Gist",
    )
    parser.add_argument("--config-dir", type=Path, default=None, help="Client config directory")
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="subcommand", required=True)

    sub.add_parser("list", help="List servers").set_defaults(handler=cmd_list)

    show = sub.add_parser("show", help="Show one server")
    show.add_argument("name")
    show.set_defaults(handler=cmd_show)

    add = sub.add_parser("add", help="Add a server")
    add.add_argument("name")
    add.add_argument("--command", required=True, help="Executable, e.g. npx")
    add.add_argument("--arg", action="append", default=[], help="Argument (repeatable)")
    add.add_argument("--env", action="append", default=[], help="KEY=VALUE (repeatable)")
    add.add_argument("--disabled", action="store_true", help="Add the server disabled")
    add.add_argument("--replace", action="store_true", help="Overwrite an existing server")
    add.set_defaults(handler=cmd_add)

    remove = sub.add_parser("remove", help="Delete a server")
    remove.add_argument("name")
    remove.set_defaults(handler=cmd_remove)

    toggle = sub.add_parser("toggle", help="Enable or disable a server")
    toggle.add_argument("name")
    toggle.set_defaults(handler=cmd_toggle)

    rename = sub.add_parser("rename", help="Rename a server")
    rename.add_argument("old_name")
    rename.add_argument("new_name")
    rename.set_defaults(handler=cmd_rename)

    export = sub.add_parser("export", help="Print or write the clean config")
    export.add_argument("--output", "-o", help="File to write instead of stdout")
    export.set_defaults(handler=cmd_export)

    apply = sub.add_parser("apply", help="Write the clean config to application configs")
    apply.add_argument("target", choices=TARGET_CHOICES)
    apply.set_defaults(handler=cmd_apply)

    sub.add_parser("status", help="Check for a running config writer").set_defaults(handler=cmd_status)

    settings = sub.add_parser("settings", help="Show or change config writer settings")
    settings.add_argument("--code", help="Claude Code CLI config path")
    settings.add_argument("--desktop", help="Claude Desktop config path")
    settings.add_argument("--cursor", help="Cursor config path")
    settings.add_argument("--claude-ide-cursor", help="Claude IDE Cursor config path")
    settings.add_argument("--max-backups", type=int, help="Backups kept per target")
    settings.set_defaults(handler=cmd_settings)

    configure = sub.add_parser("configure", help="Save Gist and writer settings")
    configure.add_argument("--gist-id")
    configure.add_argument("--token")
    configure.add_argument("--writer-url")
    configure.add_argument("--download-dir")
    configure.set_defaults(handler=None)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, stream=sys.stderr, default="WARNING")

    config = load_client_config(args.config_dir)
    if args.subcommand == "configure":
        cmd_configure(config, args)
        return 0

    store = ConfigStore.from_config(config)
    try:
        asyncio.run(args.handler(store, args))
    except (CoreError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
