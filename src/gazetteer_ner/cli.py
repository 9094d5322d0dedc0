"""
Command-line interface for the gazetteer NER system.

Usage:
    gazetteer-ner gazetteer build          # Query the knowledge base, write the gazetteer
    gazetteer-ner gazetteer show           # Print the persisted gazetteer
    gazetteer-ner scan                     # Scan the corpus, write the match table
    gazetteer-ner scan --output-json       # Found matches per document as JSON
    gazetteer-ner evaluate                 # Score the saved match table against the gold standard
    gazetteer-ner annotate                 # Annotate the corpus (regex/spacy)
    gazetteer-ner run                      # All of the above in one go
    gazetteer-ner run --output-json        # JSON output for CI integration
"""

import argparse
import logging
import sys

from gazetteer_ner.config import get_config
from gazetteer_ner.errors import GazetteerNERError


def _config_from_args(args):
    return get_config(
        corpus_dir=getattr(args, "corpus_dir", None),
        gold_path=getattr(args, "gold", None),
        annotator=getattr(args, "annotator", None),
    )


def _print_metrics(metrics):
    from gazetteer_ner.models.entities import format_score

    print(f"Documents evaluated: {metrics.documents_evaluated}")
    print(f"Correct: {metrics.num_correct}  "
          f"Found: {metrics.all_answers}  "
          f"Expected: {metrics.possible_answers}")
    print(f"Precision: {format_score(metrics.precision)}")
    print(f"Recall:    {format_score(metrics.recall)}")
    print(f"F-measure: {format_score(metrics.f_measure)}")


def cmd_gazetteer_build(args):
    """Build the gazetteer from the configured label source."""
    from gazetteer_ner.pipeline import build_gazetteer

    config = _config_from_args(args)
    store = build_gazetteer(config)

    if args.output_json:
        import json
        print(json.dumps({
            "entries": len(store),
            "skipped": list(store.skipped),
            "path": str(config.gazetteer_path),
        }, indent=2, ensure_ascii=False))
        return

    print(f"Built gazetteer with {len(store)} entries -> {config.gazetteer_path}")
    if store.skipped:
        print(f"Skipped {len(store.skipped)} malformed label(s)")


def cmd_gazetteer_show(args):
    """Print the persisted gazetteer."""
    from gazetteer_ner.gazetteer.store import GazetteerStore

    config = _config_from_args(args)
    if not config.gazetteer_path.is_file():
        print(f"ERROR: No gazetteer at {config.gazetteer_path}")
        print("Run 'gazetteer-ner gazetteer build' first")
        sys.exit(1)

    for entry in GazetteerStore.load(config.gazetteer_path):
        print(entry)


def cmd_scan(args):
    """Scan the corpus and write the match table."""
    from gazetteer_ner.matching.aggregator import count_per_document, count_per_entity
    from gazetteer_ner.pipeline import load_or_build_gazetteer, scan_corpus
    from gazetteer_ner.storage.corpus import load_corpus

    config = _config_from_args(args)
    config.ensure_directories()
    store = load_or_build_gazetteer(config)
    corpus = load_corpus(config.corpus_dir, config.corpus_glob)
    table = scan_corpus(config, corpus, store)

    if args.output_json:
        import json
        print(json.dumps({
            "matches": table.to_dict(),
            "entity_counts": count_per_entity(table),
            "errors": table.errors,
            "path": str(config.match_table_path),
        }, indent=2, ensure_ascii=False))
        sys.exit(1 if table.errors else 0)

    for err in table.errors:
        print(f"WARNING: {err}")

    per_document = count_per_document(table)
    found = {name: n for name, n in count_per_entity(table).items() if n}
    print(f"Scanned {len(corpus)} document(s) against {len(store)} entries")
    print(f"Documents with matches: {len(per_document)}")
    for name, n in sorted(found.items(), key=lambda kv: (-kv[1], kv[0]))[: args.top]:
        print(f"  {n:5d}  {name}")
    print(f"Match table: {config.match_table_path}")


def cmd_evaluate(args):
    """Score a saved match table against the gold standard."""
    from gazetteer_ner.evaluation.metrics import evaluate
    from gazetteer_ner.pipeline import write_metrics
    from gazetteer_ner.storage.delimited import read_gold_standard, read_match_table

    config = _config_from_args(args)
    if config.gold_path is None:
        print("ERROR: No gold standard configured.")
        print("Pass --gold or set GAZETTEER_NER_GOLD_PATH")
        sys.exit(1)

    match_table = args.match_table or config.match_table_path
    system = read_match_table(match_table)
    gold = read_gold_standard(config.gold_path, strip_cells=config.strip_gold_cells)
    metrics = evaluate(system, gold, beta=config.beta, alignment=config.alignment)
    write_metrics(metrics, config.metrics_path)

    if args.output_json:
        print(metrics.to_json())
        return
    _print_metrics(metrics)


def cmd_annotate(args):
    """Annotate the corpus."""
    from gazetteer_ner.pipeline import annotate_corpus
    from gazetteer_ner.storage.corpus import load_corpus

    config = _config_from_args(args)
    if config.annotator == "none":
        print("ERROR: No annotator selected.")
        print("Pass --annotator or set GAZETTEER_NER_ANNOTATOR")
        sys.exit(1)

    config.ensure_directories()
    corpus = load_corpus(config.corpus_dir, config.corpus_glob)
    path = annotate_corpus(config, corpus)
    print(f"Annotated {len(corpus)} document(s) -> {path}")


def cmd_run(args):
    """Run the full pipeline."""
    from gazetteer_ner.pipeline import run_pipeline

    config = _config_from_args(args)
    result = run_pipeline(config, rebuild_gazetteer=args.rebuild_gazetteer)

    # JSON output mode (for CI/automation)
    if args.output_json:
        print(result.to_json())
        sys.exit(1 if result.errors else 0)

    for err in result.errors:
        print(f"WARNING: {err}")

    print(f"Gazetteer entries: {result.gazetteer_size}")
    print(f"Documents scanned: {result.document_count}")
    print(f"Documents with matches: {len(result.document_counts)}")
    if result.metrics is not None:
        _print_metrics(result.metrics)
    for name, path in result.outputs.items():
        print(f"  - {name}: {path}")


def _add_common_arguments(parser):
    parser.add_argument(
        "--corpus-dir",
        default=None,
        help="Corpus directory (overrides configuration)",
    )
    parser.add_argument(
        "--gold",
        default=None,
        help="Gold-standard file (overrides configuration)",
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="gazetteer-ner",
        description="Gazetteer NER -- dictionary-based entity recognition and evaluation",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # gazetteer -- subcommand group
    sub_gazetteer = subparsers.add_parser(
        "gazetteer",
        help="Gazetteer: build, show",
    )
    gazetteer_subparsers = sub_gazetteer.add_subparsers(
        dest="gazetteer_command",
        help="Gazetteer subcommands",
    )

    sub_build = gazetteer_subparsers.add_parser(
        "build",
        help="Query the knowledge base and write the gazetteer",
    )
    sub_build.add_argument(
        "--output-json",
        action="store_true",
        default=False,
        help="Output result as JSON (for CI/automation)",
    )
    sub_build.set_defaults(func=cmd_gazetteer_build)

    sub_show = gazetteer_subparsers.add_parser("show", help="Print the persisted gazetteer")
    sub_show.set_defaults(func=cmd_gazetteer_show)

    # scan
    sub_scan = subparsers.add_parser("scan", help="Scan the corpus and write the match table")
    _add_common_arguments(sub_scan)
    sub_scan.add_argument(
        "--top",
        type=int,
        default=20,
        help="Number of most frequent entities to print",
    )
    sub_scan.add_argument(
        "--output-json",
        action="store_true",
        default=False,
        help="Output result as JSON (for CI/automation)",
    )
    sub_scan.set_defaults(func=cmd_scan)

    # evaluate
    sub_evaluate = subparsers.add_parser(
        "evaluate",
        help="Score the match table against the gold standard",
    )
    _add_common_arguments(sub_evaluate)
    sub_evaluate.add_argument(
        "--match-table",
        default=None,
        help="Match table to score (default: configured match_table_path)",
    )
    sub_evaluate.add_argument(
        "--output-json",
        action="store_true",
        default=False,
        help="Output result as JSON (for CI/automation)",
    )
    sub_evaluate.set_defaults(func=cmd_evaluate)

    # annotate
    sub_annotate = subparsers.add_parser("annotate", help="Annotate the corpus")
    _add_common_arguments(sub_annotate)
    sub_annotate.add_argument(
        "--annotator",
        default=None,
        help="Annotator name (regex/spacy)",
    )
    sub_annotate.set_defaults(func=cmd_annotate)

    # run
    sub_run = subparsers.add_parser("run", help="Run the full pipeline")
    _add_common_arguments(sub_run)
    sub_run.add_argument(
        "--rebuild-gazetteer",
        action="store_true",
        default=False,
        help="Query the knowledge base even if a gazetteer file exists",
    )
    sub_run.add_argument(
        "--output-json",
        action="store_true",
        default=False,
        help="Output result as JSON (for CI/automation)",
    )
    sub_run.set_defaults(func=cmd_run)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    # Handle gazetteer subcommand group
    if args.command == "gazetteer" and args.gazetteer_command is None:
        sub_gazetteer.print_help()
        sys.exit(0)

    try:
        level = "DEBUG" if args.verbose else get_config().log_level
        logging.basicConfig(
            level=getattr(logging, level.upper(), logging.INFO),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        args.func(args)
    except (GazetteerNERError, ValueError, OSError) as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
