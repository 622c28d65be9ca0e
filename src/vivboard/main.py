"""
Opens or saves a board archive from the command line, using the Qt file dialogs

    vivboard open [ARCHIVE]
    vivboard save BOARD_JSON [ID=MEDIA_PATH ...]
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from vivboard.commands import BoardCommands
from vivboard.errors import BoardArchiveError, SelectionCancelledError
from vivboard.logger import configure_logging
from vivboard.models.media import MediaEntry


def parse_media(values: list[str]) -> list[MediaEntry]:
    """Parse ID=PATH pairs"""
    media: list[MediaEntry] = []
    for value in values:
        media_id, sep, source_path = value.partition("=")
        if not sep or not media_id:
            raise argparse.ArgumentTypeError(f"Expected ID=PATH, got {value!r}")
        media.append(MediaEntry.from_dict({"id": media_id, "sourcePath": source_path}))
    return media


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vivboard")
    subparsers = parser.add_subparsers(dest="command", required=True)
    open_parser = subparsers.add_parser("open", help="Open a board archive")
    _ = open_parser.add_argument("archive", nargs="?", type=Path)
    save_parser = subparsers.add_parser("save", help="Save a board archive")
    _ = save_parser.add_argument("board_json", type=Path)
    _ = save_parser.add_argument("media", nargs="*", metavar="ID=PATH")
    return parser


async def run(commands: BoardCommands, args: argparse.Namespace) -> int:
    if args.command == "open":
        if args.archive is None:
            result = await commands.load_board_archive()
        else:
            result = await commands.load_board_from(args.archive)
        print(json.dumps(result.to_dict(), indent=2))
    else:
        media = parse_media(args.media)
        board_json = args.board_json.read_text(encoding="utf-8")
        report = await commands.save_current_board(board_json, media)
        print(
            f"Saved {report.path} ({len(report.written)} media, "
            f"{len(report.skipped)} skipped)"
        )
    return 0


def execute(commands: BoardCommands, args: argparse.Namespace) -> int:
    """Run one command, turning failures into a non-zero exit code"""
    try:
        return asyncio.run(run(commands, args))
    except SelectionCancelledError as e:
        logging.getLogger("Main").info("%s", e)
        return 1
    except (BoardArchiveError, argparse.ArgumentTypeError, OSError) as e:
        logging.getLogger("Main").error("%s", e)
        return 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging()
    logging.debug("Starting vivboard...")

    from PyQt6.QtWidgets import QApplication

    from vivboard.ui.file_dialog import QtFilePicker

    _app = QApplication(sys.argv[:1])
    return execute(BoardCommands(QtFilePicker()), args)


if __name__ == "__main__":
    sys.exit(main())
