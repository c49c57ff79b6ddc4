import argparse
import logging
import sys
from pathlib import Path

# Add project root to path for robust execution
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tqdm import tqdm

from placer.config import Config, load_config
from placer.data_validation import validate
from placer.io_utils import load_annotations, read_lines, save_annotations, write_lines
from placer.parser import annotate
from placer.substitute import restore_line

def _load_cfg(path):
    if path is None:
        return Config()
    print(f"Loading configuration from {path}...")
    return load_config(path)

def run_strip(args, cfg: Config) -> None:
    """Strips markup from every input line and records the entities in a sidecar file."""
    print(f"Loading lines from {args.input}...")
    lines = read_lines(args.input)

    annotations = [
        annotate(line, i, cfg)
        for i, line in tqdm(enumerate(lines), total=len(lines), desc="Stripping", unit="line")
    ]
    failures = sum(1 for a in annotations if not a.parsed)

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    write_lines(str(output_path), [a.clean for a in annotations])
    save_annotations(args.entities, annotations)

    print(f"\nSuccessfully wrote {len(annotations)} clean lines to {args.output}")
    print(f"Successfully wrote entities to {args.entities}")
    if failures:
        print(f"Warning: {failures} line(s) had malformed markup and were passed through unchanged.")

def run_restore(args, cfg: Config) -> None:
    """Replaces placeholders in transformed lines with the entities from a sidecar file."""
    print(f"Loading entities from {args.entities}...")
    annotations = load_annotations(args.entities)
    print(f"Loading transformed lines from {args.input}...")
    transformed = read_lines(args.input)

    if len(annotations) != len(transformed):
        raise ValueError(
            f"{args.input} has {len(transformed)} lines but {args.entities} describes {len(annotations)}."
        )

    restored = []
    issue_count = 0
    for annotated, line in tqdm(zip(annotations, transformed), total=len(transformed), desc="Restoring", unit="line"):
        if args.validate:
            report = validate(annotated, line, cfg.sentinel)
            issue_count += report["issue_count"]
            for issue in report["issues"]:
                print(f"  - {issue['message']}")
        if cfg.using_placeholders:
            line = restore_line(line, annotated, cfg.sentinel)
        restored.append(line)

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    write_lines(str(output_path), restored)

    print(f"\nSuccessfully wrote {len(restored)} restored lines to {args.output}")
    if args.validate:
        print(f"Validation found {issue_count} issue(s).")

def main(argv=None):
    """
    Command-line interface for stripping and restoring entity placeholders.

    `strip` reads raw lines with inline entity markup, writes the clean lines
    for the transformation pipeline and saves the extracted entities to a JSON
    sidecar file. `restore` reads the pipeline's output together with that
    sidecar and writes the final lines with the entity values re-inserted.
    """
    parser = argparse.ArgumentParser(
        description="Carry inline entity markup through a text transformation pipeline.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the configuration YAML file. Built-in defaults are used when omitted."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    strip_parser = subparsers.add_parser("strip", help="Remove markup and save the extracted entities.")
    strip_parser.add_argument("--input", required=True, help="Path to the raw text file with inline markup.")
    strip_parser.add_argument("--output", required=True, help="Path to write the clean text file.")
    strip_parser.add_argument("--entities", required=True, help="Path to write the entity sidecar JSON file.")
    strip_parser.set_defaults(func=run_strip)

    restore_parser = subparsers.add_parser("restore", help="Re-insert entities into transformed text.")
    restore_parser.add_argument("--input", required=True, help="Path to the transformed text file.")
    restore_parser.add_argument("--entities", required=True, help="Path to the entity sidecar JSON file.")
    restore_parser.add_argument("--output", required=True, help="Path to write the restored text file.")
    restore_parser.add_argument(
        "--validate",
        action="store_true",
        help="Report lines whose placeholder count does not match their entities."
    )
    restore_parser.set_defaults(func=run_restore)

    args = parser.parse_args(argv)

    try:
        cfg = _load_cfg(args.config)
        logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")
        args.func(args, cfg)
    except (FileNotFoundError, ValueError, TypeError, KeyError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
