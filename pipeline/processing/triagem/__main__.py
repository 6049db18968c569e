"""CLI entry point: python -m triagem {classify,route,intake}

- classify: parse CNJ numbers and print court/system/process type
- route:    decide the queue for one protocol form given as JSON
- intake:   classify + route + validate the latest raw intake run
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from models.protocolo import ProtocolForm

from triagem import config
from triagem.cnj import classify_cnj, has_valid_check_digits
from triagem.routing import route_protocol
from triagem.transformers import TRANSFORMER_REGISTRY, TransformResult
from triagem.validators import DataQualityValidator

logger = logging.getLogger("triagem")


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m triagem",
        description="Protocol triage - CNJ classification and queue routing.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument(
        "--fallback-handler",
        default=config.FALLBACK_HANDLER,
        help="Manual handler for non-robot protocols. Falls back to $TRIAGEM_FALLBACK_HANDLER.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    classify = sub.add_parser("classify", help="Classify one or more CNJ process numbers.")
    classify.add_argument("numbers", nargs="+", metavar="NUMBER")

    route = sub.add_parser("route", help="Route a protocol form given as JSON.")
    route.add_argument("form", help='Form JSON, e.g. \'{"system": "PJe", "court": "..."}\'.')
    route.add_argument(
        "--distribution",
        action="store_true",
        default=None,
        help="Treat as a distribution (default: read isDistribution from the form).",
    )
    route.add_argument("--resubmission", action="store_true")

    intake = sub.add_parser("intake", help="Process the latest raw intake run.")
    intake.add_argument(
        "--data-dir",
        type=Path,
        default=config.DATA_DIR,
        help="Base data directory containing raw/intake/YYYY-MM-DD/ (default: $TRIAGEM_DATA_DIR or pipeline/data).",
    )
    intake.add_argument(
        "--dry-run",
        action="store_true",
        help="Run transform + validate only, skip writing the output.",
    )
    return parser


def _classify(numbers: list[str]) -> None:
    for number in numbers:
        classification = classify_cnj(number)
        print(
            json.dumps(
                {
                    "input": number,
                    "processNumber": classification.number.formatted if classification.number else None,
                    "failure": classification.failure,
                    "checkDigitsOk": has_valid_check_digits(number),
                    "tribunal": (
                        classification.info.model_dump(mode="json", by_alias=True)
                        if classification.info
                        else None
                    ),
                },
                ensure_ascii=False,
            )
        )


def _route(form_json: str, is_distribution: bool | None, is_resubmission: bool, handler: str) -> None:
    try:
        form = ProtocolForm.model_validate_json(form_json)
    except ValidationError as exc:
        logger.error("Invalid form JSON: %s", exc)
        sys.exit(1)

    decision = route_protocol(
        form,
        is_distribution,
        is_resubmission=is_resubmission,
        fallback_handler=handler,
    )
    print(
        json.dumps(
            {
                "queue": decision.queue,
                "assignedTo": decision.assigned_to,
                "reason": decision.reason.value,
            },
            ensure_ascii=False,
        )
    )


def _transform(data_dir: Path, handler: str) -> tuple[TransformResult, Path]:
    """Run the intake transformer over the latest run directory."""
    transformer = TRANSFORMER_REGISTRY["intake"](fallback_handler=handler)

    run_dir = transformer.find_latest_run(data_dir)
    if run_dir is None:
        logger.error("No intake data found under %s", data_dir)
        sys.exit(1)

    logger.info("Processing intake from %s", run_dir)

    jsonl_files = sorted(run_dir.glob("*.jsonl"))
    if not jsonl_files:
        logger.error("No .jsonl files found in %s", run_dir)
        sys.exit(1)

    def all_records():
        for jf in jsonl_files:
            yield from transformer.read_jsonl(jf)

    result = transformer.transform(all_records())

    logger.info(
        "Transform complete - entities=%d unclassified=%d errors=%d",
        result.total_entities,
        len(result.unclassified),
        len(result.errors),
    )
    return result, run_dir


def _validate(result: TransformResult, handler: str) -> TransformResult:
    """Run data quality checks on transform results."""
    dq = DataQualityValidator(manual_handlers=config.MANUAL_HANDLERS | {handler})

    for table, records in result.entities.items():
        vr = dq.validate_batch(records)
        if vr.rejected:
            logger.warning(
                "Table %s: %d records rejected (dupes=%d, invalid=%d)",
                table,
                len(vr.rejected),
                vr.stats.duplicate_count,
                vr.stats.invalid_count,
            )
        result.entities[table] = vr.valid

    return result


def _write(result: TransformResult, data_dir: Path, run_name: str) -> None:
    """Write validated protocols as camelCase JSONL for the persistence service."""
    out_dir = data_dir / "processed" / "intake" / run_name
    out_dir.mkdir(parents=True, exist_ok=True)

    for table, records in result.entities.items():
        path = out_dir / f"{table}.jsonl"
        with path.open("w", encoding="utf-8") as fh:
            for record in records:
                fh.write(record.model_dump_json(by_alias=True) + "\n")
        logger.info("Wrote %d records to %s", len(records), path)


def _print_summary(result: TransformResult) -> None:
    """Print a summary of the processing run."""
    logger.info("--- Summary ---")
    for table, records in result.entities.items():
        logger.info("  %s: %d records", table, len(records))
        robot = sum(1 for r in records if r.assigned_to is None)
        logger.info("  %s: %d robot / %d manual", table, robot, len(records) - robot)
    if result.unclassified:
        logger.warning("  unclassified process numbers: %d", len(result.unclassified))
    if result.errors:
        logger.warning("  errors: %d", len(result.errors))


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "classify":
        _classify(args.numbers)
        return

    if args.command == "route":
        _route(args.form, args.distribution, args.resubmission, args.fallback_handler)
        return

    logger.info("=== Triagem intake ===")
    result, run_dir = _transform(args.data_dir, args.fallback_handler)
    result = _validate(result, args.fallback_handler)

    if args.dry_run:
        logger.info("Dry run - skipping write phase")
    else:
        _write(result, args.data_dir, run_dir.name)

    _print_summary(result)
    logger.info("=== Done ===")


if __name__ == "__main__":
    main()
