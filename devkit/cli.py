"""CLI entrypoints for devkit commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .analyzers.manifest import ManifestAnalyzer
from .config import load_config
from .errors import DevkitError, FileReadError
from .logging import configure_logging, get_logger
from .models import AnalysisResult
from .readme.badges import BADGE_TEMPLATES, create_badge, render_badge
from .readme.licenses import normalize_licenses
from .reporting import AnalysisReportRenderer
from .state import WorkspaceState

_logger = get_logger("cli")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_manifest_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "manifest",
        nargs="?",
        default="package.json",
        help="Path to a JSON manifest, or `-` to read from stdin (defaults to package.json).",
    )


def _add_output_option(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help=help_text,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devkit",
        description="Generate README files and check package manifest dependencies.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records, with timestamps, to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Analyze the dependencies declared in a package manifest.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    _add_manifest_argument(analyze_parser)
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the dependency list and analysis as JSON.",
    )

    latest_parser = subparsers.add_parser(
        "latest",
        help="Rewrite every dependency version in a manifest to `latest`.",
    )
    _add_verbose_option(latest_parser, suppress_default=True)
    _add_manifest_argument(latest_parser)
    _add_output_option(latest_parser, "Write the updated manifest here instead of stdout.")

    readme_parser = subparsers.add_parser(
        "readme",
        help="Compose a README from configuration and command-line fields.",
    )
    _add_verbose_option(readme_parser, suppress_default=True)
    readme_parser.add_argument(
        "--config",
        default=".",
        help="Path to .devkit.yml or the directory containing it.",
    )
    readme_parser.add_argument("--name", help="Project name.")
    readme_parser.add_argument("--description", help="Project description.")
    readme_parser.add_argument(
        "--feature",
        action="append",
        dest="features",
        help="Feature bullet; repeat for several features.",
    )
    readme_parser.add_argument("--installation", help="Installation commands.")
    readme_parser.add_argument("--usage", help="Usage commands.")
    readme_parser.add_argument("--contributing", help="Contributing guidelines.")
    readme_parser.add_argument(
        "--license",
        action="append",
        dest="licenses",
        help="License identifier; repeat to list several licenses.",
    )
    readme_parser.add_argument("--author", help="Author credit line.")
    readme_parser.add_argument(
        "--badge",
        action="append",
        dest="badges",
        default=[],
        metavar="TYPE:IDENTIFIER",
        help="Badge to add, e.g. github-stars:facebook/react.",
    )
    _add_output_option(readme_parser, "Write README.md here instead of stdout.")

    badges_parser = subparsers.add_parser("badges", help="List the available badge types.")
    _add_verbose_option(badges_parser, suppress_default=True)

    badge_parser = subparsers.add_parser(
        "badge",
        help="Validate a badge identifier and print its markdown.",
    )
    _add_verbose_option(badge_parser, suppress_default=True)
    badge_parser.add_argument("type", help="Badge type, see `devkit badges`.")
    badge_parser.add_argument("identifier", help="Package name, repository, URL or text.")
    badge_parser.add_argument("--label", help="Custom badge label.")
    badge_parser.add_argument("--message", help="Custom badge message.")
    badge_parser.add_argument("--color", help="Custom badge color.")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service.")
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument(
        "--config",
        default=".",
        help="Path to .devkit.yml or the directory containing it.",
    )
    serve_parser.add_argument("--host", default=None, help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind.")

    return parser


def _read_manifest_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _logger.debug("Failed to read %s: %s", path, exc)
        raise FileReadError(f"Failed to read file: {source}") from exc


def _analyze_source(state: WorkspaceState, source: str) -> AnalysisResult:
    if source == "-":
        state.manifest_text = _read_manifest_text(source)
        return state.run_analysis()
    return state.load_manifest_file(Path(source))


def _run_analyze(args: argparse.Namespace) -> None:
    result = _analyze_source(WorkspaceState(), args.manifest)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return
    print(AnalysisReportRenderer().render(result), end="")


def _run_latest(args: argparse.Namespace) -> None:
    analyzer = ManifestAnalyzer()
    updated = analyzer.rewrite_all_versions_to_latest(_read_manifest_text(args.manifest))
    if args.output:
        output = Path(args.output)
        state = WorkspaceState(manifest_text=updated)
        path = state.export_manifest(output)
        print(f"Updated manifest written to {_relativize(path)}")
    else:
        print(updated)


def _run_readme(args: argparse.Namespace) -> None:
    config = load_config(Path(args.config))
    state = WorkspaceState.from_defaults(config.readme)
    fields = state.fields
    for key in ("name", "description", "installation", "usage", "contributing", "author"):
        value = getattr(args, key)
        if value is not None:
            setattr(fields, key, value)
    if args.features:
        fields.features = "\n".join(args.features)
    if args.licenses:
        fields.licenses = normalize_licenses(args.licenses)
    for spec in args.badges:
        badge_type, sep, identifier = spec.partition(":")
        if not sep:
            raise DevkitError(f"Badge must be given as TYPE:IDENTIFIER, got {spec!r}")
        state.add_badge(badge_type, identifier)

    if args.output:
        path = state.export_readme(Path(args.output))
        print(f"README written to {_relativize(path)}")
    else:
        print(state.readme)


def _run_badges() -> None:
    for template in BADGE_TEMPLATES:
        print(f"{template.type.value:<16} {template.label:<16} e.g. {template.example}")


def _run_badge(args: argparse.Namespace) -> None:
    badge = create_badge(
        args.type,
        args.identifier,
        label=args.label,
        message=args.message,
        color=args.color,
    )
    print(render_badge(badge))


def _run_serve(args: argparse.Namespace) -> None:  # pragma: no cover - integration path
    from .service import run_service

    config = load_config(Path(args.config))
    host = args.host or config.service.host
    port = args.port if args.port is not None else config.service.port
    _logger.info("Starting devkit service on %s:%d", host, port)
    run_service(host=host, port=port, config=config)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for devkit commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(getattr(args, "verbose", False)),
        log_file=Path(args.log_file) if args.log_file else None,
    )

    try:
        if args.command == "analyze":
            _run_analyze(args)
        elif args.command == "latest":
            _run_latest(args)
        elif args.command == "readme":
            _run_readme(args)
        elif args.command == "badges":
            _run_badges()
        elif args.command == "badge":
            _run_badge(args)
        elif args.command == "serve":
            _run_serve(args)
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except DevkitError as exc:
        parser.exit(1, f"{exc}\n")
    except ValueError as exc:
        parser.exit(1, f"devkit {args.command} failed: {exc}\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
