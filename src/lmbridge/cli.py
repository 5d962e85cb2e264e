"""
lmbridge CLI — Export Ollama models to LM Studio.

Usage:
    lmbridge config <model> <output.json>        # Flat LM Studio config
    lmbridge preset <model> [--name NAME]        # Preset in ~/.lmstudio/config-presets
    lmbridge config <model> out.json --modelfile ./Modelfile   # Offline
"""

import argparse
import sys
from pathlib import Path

from lmbridge import __version__
from lmbridge.clients import (
    FileModelfileSource,
    ModelfileSource,
    OllamaClient,
    create_ollama_client,
)
from lmbridge.config import ExportConfig, normalize_host
from lmbridge.errors import LMBridgeError
from lmbridge.export import export_model_config, export_model_preset
from lmbridge.observability import DiagnosticCollector, configure_logging
from lmbridge.vocabulary import DiagnosticCode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lmbridge",
        description="Export Ollama Modelfile configuration to LM Studio",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write a per-model config file
  lmbridge config llama3:8b ./llama3.json

  # Write a preset named "Llama 3" to ~/.lmstudio/config-presets
  lmbridge preset llama3:8b --name "Llama 3"

  # Convert a local Modelfile without contacting Ollama
  lmbridge config mymodel ./mymodel.json --modelfile ./Modelfile
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--host",
        help="Ollama server URL (default: $OLLAMA_HOST or http://localhost:11434)"
    )
    common.add_argument(
        "--timeout",
        type=float,
        help="HTTP timeout in seconds"
    )
    common.add_argument(
        "--modelfile",
        type=Path,
        help="Read this Modelfile instead of fetching it from Ollama"
    )
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging (shows skipped parameters)"
    )
    common.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    config_parser = subparsers.add_parser(
        "config", parents=[common], help="Export a flat LM Studio config file"
    )
    config_parser.add_argument("model", help="Ollama model name")
    config_parser.add_argument("output", type=Path, help="Output JSON path")

    preset_parser = subparsers.add_parser(
        "preset", parents=[common], help="Export an LM Studio preset"
    )
    preset_parser.add_argument("model", help="Ollama model name")
    preset_parser.add_argument(
        "--name",
        help="Preset display name (default: the model name)"
    )
    preset_parser.add_argument(
        "--preset-dir",
        type=Path,
        help="Preset directory (default: ~/.lmstudio/config-presets)"
    )

    return parser


def resolve_config(args: argparse.Namespace) -> ExportConfig:
    """Environment configuration overridden by command-line flags."""
    config = ExportConfig.from_env()
    if args.host:
        config.ollama_host = normalize_host(args.host)
    if args.timeout is not None:
        config.timeout = args.timeout
    if getattr(args, "preset_dir", None):
        config.preset_dir = args.preset_dir.expanduser()
    if args.verbose:
        config.log_level = "DEBUG"
    if args.json_logs:
        config.json_logs = True
    return config


def build_source(args: argparse.Namespace, config: ExportConfig) -> ModelfileSource:
    if args.modelfile:
        return FileModelfileSource(args.modelfile)
    return create_ollama_client(host=config.ollama_host, timeout=config.timeout)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = resolve_config(args)
    configure_logging(level=config.log_level_value, json_format=config.json_logs)

    source = build_source(args, config)
    diagnostics = DiagnosticCollector()

    try:
        if args.command == "config":
            path = export_model_config(
                args.model, args.output, source, on_diagnostic=diagnostics
            )
        else:
            path = export_model_preset(
                args.model,
                args.name or args.model,
                source,
                preset_dir=config.preset_dir,
                on_diagnostic=diagnostics,
            )
    except LMBridgeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if isinstance(source, OllamaClient):
            source.close()

    print(f"[OK] - Wrote {path}")
    skipped = diagnostics.by_code(DiagnosticCode.UNSUPPORTED_PARAMETER) + diagnostics.by_code(
        DiagnosticCode.INVALID_PARAMETER_VALUE
    )
    if skipped and not args.verbose:
        print(f"  Skipped {len(skipped)} parameter(s); rerun with -v for details")

    return 0


if __name__ == "__main__":
    sys.exit(main())
