"""Command-line script for measuring placeholder survival across a corpus.

Restoring entities is only reliable when the transformation pipeline keeps
every placeholder it was given, in order. This script compares an entity
sidecar file (written by `main.py strip`) with the pipeline's output and
reports how often that assumption held:

-   **Corpus totals**: lines, parse failures, entities, placeholders.
-   **Mismatched lines**: lines whose placeholder count differs from their
    entity count. A per-line CSV can be written for error analysis.
"""
import argparse
import json
import sys
from pathlib import Path

# Add project root to path to allow for package imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from placer.io_utils import load_annotations, read_lines
from placer.report import aggregate, summarize

def main(argv=None):
    """
    Main entry point for the placeholder evaluation script.

    Loads the sidecar and the transformed lines, builds the per-line table
    with `placer.report.summarize`, and prints the aggregate as JSON.
    """
    parser = argparse.ArgumentParser(
        description="Evaluate how well placeholders survive a text transformation.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--entities", required=True, help="Path to the entity sidecar JSON file.")
    parser.add_argument("--transformed", required=True, help="Path to the transformed text file.")
    parser.add_argument("--sentinel", default="$", help="First character of a placeholder word.")
    parser.add_argument("--lines-out", help="Optional: Path to write the per-line table as CSV.")
    args = parser.parse_args(argv)

    try:
        print("Loading files...")
        annotations = load_annotations(args.entities)
        transformed = read_lines(args.transformed)

        df = summarize(annotations, transformed, args.sentinel)

        print("\n--- Placeholder Survival ---")
        print(json.dumps(aggregate(df), indent=2))

        if args.lines_out:
            Path(args.lines_out).parent.mkdir(parents=True, exist_ok=True)
            print(f"\nWriting {len(df)} rows to {args.lines_out}...")
            df.to_csv(args.lines_out, index=False)

    except (FileNotFoundError, ValueError, TypeError, KeyError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
