#!/usr/bin/env python3
"""
CLI module for ditherpack - Command-Line Interface

Packs images into dithered 1-bit .ditherpack files and unpacks them back
to PNG. Uses Rich for terminal output.
"""

import sys
import logging
import argparse
import json
from pathlib import Path
from typing import Optional, List, Dict, Any

# Rich imports for terminal output
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.panel import Panel
from rich.table import Table
from rich.markup import escape

from PIL import Image

# Local imports
from bitmap_codec import BitmapCodec
from config_manager import ConfigManager, ConfigValidationError
from ditherpack import (
    __version__,
    DitherMethod,
    DitherPackError,
    pack,
    unpack_bitmap,
    unpack_from,
)
from utils import format_size, load_grayscale_image, validate_image_file


# Initialize Rich console
console = Console()

# Logger instance
logger = logging.getLogger('ditherpack')

METHOD_DESCRIPTIONS = {
    DitherMethod.BAYER: "Recursive Bayer ordered dither (2^power square, 8x8 by default)",
    DitherMethod.BLUE_NOISE: "Bundled 128x128 void-and-cluster blue-noise tile",
    DitherMethod.WHITE_NOISE: "Uniform random threshold per pixel",
}


def setup_logging(verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None):
    """
    Setup logging with Rich handler for terminal output.

    Args:
        verbose: Enable verbose (DEBUG) logging
        quiet: Suppress all but ERROR messages
        log_file: Optional path to log file
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    handlers = []

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True
    )
    handlers.append(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True
    )

    logger.setLevel(level)
    return logger


class CLIProgressCallback:
    """
    Rich progress bar for batch packing. A no-op when disabled, so callers
    can use it unconditionally.
    """

    def __init__(self, total: int, enabled: bool = True):
        self.total = total
        self.enabled = enabled
        self.progress = None
        self.task = None

    def __enter__(self):
        if self.enabled:
            self.progress = Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                console=console
            )
            self.progress.__enter__()
            self.task = self.progress.add_task("Packing...", total=self.total)
        return self

    def __exit__(self, *args):
        if self.progress:
            self.progress.__exit__(*args)

    def advance(self, message: str):
        if self.progress and self.task is not None:
            self.progress.update(self.task, advance=1, description=message)


# ==================== Settings ====================

def load_settings(args: argparse.Namespace) -> ConfigManager:
    """
    Load the config file (if any), apply command-line overrides and validate.

    Raises:
        ConfigValidationError: if the merged settings are invalid
    """
    config = ConfigManager(args.config)
    overrides = {
        ("pack", "method"): getattr(args, "method", None),
        ("pack", "bayer_power"): getattr(args, "bayer_power", None),
        ("pack", "compression_level"): getattr(args, "level", None),
        ("pack", "workers"): getattr(args, "workers", None),
        ("unpack", "max_output_size"): getattr(args, "max_output_size", None),
    }
    for keys, value in overrides.items():
        if value is not None:
            config.set(*keys, value=value)
    return config.validate()


def output_path_for(input_path: Path, outdir: Optional[Path], extension: str) -> Path:
    """<stem><extension> next to the input, or inside outdir."""
    target_dir = outdir if outdir is not None else input_path.parent
    return target_dir / (input_path.stem + extension)


# ==================== Commands ====================

def pack_single_image(input_path: Path, output_path: Path, config: ConfigManager) -> bool:
    """
    Pack one image file.

    Returns:
        True if successful, False otherwise
    """
    if not validate_image_file(str(input_path)):
        logger.error(f"Not an image file: [cyan]{input_path}[/]")
        return False

    method = DitherMethod.parse(config.get("pack", "method"))
    try:
        logger.info(f"Loading image: [cyan]{input_path.name}[/]")
        image = load_grayscale_image(str(input_path))
        width, height = image.size
        logger.info(f"Image size: [cyan]{width}x{height}[/], method: [yellow]{method.value}[/]")

        packed = pack(
            image,
            method,
            bayer_power=config.get("pack", "bayer_power"),
            compression_level=config.get("pack", "compression_level"),
            workers=config.get("pack", "workers"),
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(packed)
    except (DitherPackError, OSError, Image.DecompressionBombError) as e:
        logger.error(f"Failed to pack {input_path}: {escape(str(e))}")
        return False

    ratio = len(packed) / float(width * height)
    logger.info(f"[green]✓[/] Saved [cyan]{output_path}[/] "
                f"({format_size(len(packed))}, {ratio:.1%} of raw luma)")
    return True


def cmd_pack(args: argparse.Namespace, config: ConfigManager) -> int:
    extension = config.get("pack", "extension")
    inputs: List[Path] = args.inputs
    failures = 0

    with CLIProgressCallback(len(inputs), enabled=len(inputs) > 1 and not args.quiet) as progress:
        for input_path in inputs:
            output_path = output_path_for(input_path, args.outdir, extension)
            if not pack_single_image(input_path, output_path, config):
                failures += 1
            progress.advance(f"Packed {input_path.name}")

    if failures:
        logger.error(f"[bold red]✗ {failures} of {len(inputs)} file(s) failed[/]")
        return 1
    return 0


def cmd_unpack(args: argparse.Namespace, config: ConfigManager) -> int:
    input_path: Path = args.input
    output_path = args.output or output_path_for(
        input_path, None, config.get("unpack", "extension"))

    try:
        logger.info(f"Unpacking: [cyan]{input_path}[/]")
        with open(input_path, 'rb') as fp:
            buffer = unpack_from(fp, max_output_size=config.get("unpack", "max_output_size"))
        image = buffer.to_image()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        image.save(output_path)
    except (DitherPackError, OSError, ValueError) as e:
        logger.error(f"Failed to unpack {input_path}: {escape(str(e))}")
        return 1

    logger.info(f"[green]✓[/] Wrote {buffer.width}x{buffer.height} image to [cyan]{output_path}[/]")
    if args.show:
        image.show(title=input_path.name)
    return 0


def cmd_info(args: argparse.Namespace, config: ConfigManager) -> int:
    input_path: Path = args.input
    try:
        data = input_path.read_bytes()
        bitmap = unpack_bitmap(data, max_output_size=config.get("unpack", "max_output_size"))
    except (DitherPackError, OSError) as e:
        logger.error(f"Failed to read {input_path}: {escape(str(e))}")
        return 1

    pixels = len(bitmap)
    white = bitmap.white_count()
    frame_size = BitmapCodec.packed_size(bitmap.width, bitmap.height)

    table = Table(title=input_path.name, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value", style="cyan")
    table.add_row("Dimensions", f"{bitmap.width}x{bitmap.height}")
    table.add_row("Pixels", str(pixels))
    table.add_row("White", f"{white} ({white / pixels:.1%})")
    table.add_row("Frame size", format_size(frame_size))
    table.add_row("Compressed size", format_size(len(data)))
    table.add_row("Ratio", f"{len(data) / float(frame_size):.1%} of frame")
    console.print(table)
    return 0


def cmd_methods(args: argparse.Namespace, config: ConfigManager) -> int:
    console.print("  [bold]Dither methods:[/]")
    for method in DitherMethod:
        console.print(f"    • [cyan]{method.value}[/] - {METHOD_DESCRIPTIONS[method]}")
    return 0


def cmd_example_config(args: argparse.Namespace, config: ConfigManager) -> int:
    example: Dict[str, Any] = {"_comment": "ditherpack CLI configuration"}
    example.update(ConfigManager.DEFAULT_CONFIG)
    example_json = json.dumps(example, indent=4)

    console.print("\n[bold cyan]Example Configuration:[/]\n")
    console.print(Panel(example_json, title="config.json", border_style="cyan"))
    console.print("\n[dim]Save this to a .json file and pass it with --config.[/]\n")
    return 0


COMMANDS = {
    "pack": cmd_pack,
    "unpack": cmd_unpack,
    "info": cmd_info,
    "methods": cmd_methods,
    "example-config": cmd_example_config,
}


def show_banner():
    """Display application banner."""
    banner = f"""
[bold cyan]╔═══════════════════════════════════════╗[/]
[bold cyan]║[/]      [bold white]ditherpack[/] [dim]- v{__version__}[/]            [bold cyan]║[/]
[bold cyan]║[/]  1-bit dithered image packing       [bold cyan]║[/]
[bold cyan]╚═══════════════════════════════════════╝[/]
"""
    console.print(banner)


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--config', '-c', type=str, help='Path to JSON configuration file')
    common.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    common.add_argument('--quiet', '-q', action='store_true', help='Quiet mode (errors only)')
    common.add_argument('--log-file', type=str, help='Log to file')

    parser = argparse.ArgumentParser(
        prog='ditherpack',
        description="ditherpack - dither images to 1 bit per pixel and pack them with zstd",
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    subparsers = parser.add_subparsers(dest='command', required=True)

    p_pack = subparsers.add_parser('pack', parents=[common], help='Pack image(s)')
    p_pack.add_argument('inputs', nargs='+', type=Path, help='Image file(s) to pack')
    p_pack.add_argument('--method', '-m', choices=[m.value for m in DitherMethod],
                        help='Dither method (default from config: bayer)')
    p_pack.add_argument('--outdir', '-o', type=Path, help='Output directory (default: next to input)')
    p_pack.add_argument('--bayer-power', type=int, help='Bayer matrix is 2^power square')
    p_pack.add_argument('--level', type=int, help='zstd compression level (1-22)')
    p_pack.add_argument('--workers', type=int, help='Threads for the dither pass')

    p_unpack = subparsers.add_parser('unpack', parents=[common], help='Unpack to PNG')
    p_unpack.add_argument('input', type=Path, help='.ditherpack file')
    p_unpack.add_argument('--output', '-o', type=Path, help='Output image path')
    p_unpack.add_argument('--show', action='store_true', help='Open the result in an image viewer')
    p_unpack.add_argument('--max-output-size', type=int,
                          help='Refuse frames that decompress beyond this many bytes')

    p_info = subparsers.add_parser('info', parents=[common], help='Describe a packed file')
    p_info.add_argument('input', type=Path, help='.ditherpack file')

    subparsers.add_parser('methods', parents=[common], help='List dither methods')
    subparsers.add_parser('example-config', parents=[common], help='Print an example config')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    if not args.quiet and args.command in ("pack", "unpack"):
        show_banner()

    try:
        config = load_settings(args)
    except ConfigValidationError as e:
        logger.error(f"[bold red]{escape(str(e))}[/]")
        return 1

    return COMMANDS[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
