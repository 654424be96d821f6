#!/usr/bin/env python3
"""Compare recorded worksheet totals against the calculation engine.

Usage:
    python scripts/shadow_compare.py recordings.jsonl [account-id]

Exits with status 0 when every compared record matched within tolerance,
1 otherwise.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fabcalc_app.config.loader import ConfigLoader
from fabcalc_app.errors import FabricationError
from fabcalc_app.logging import configure_logging
from fabcalc_app.shadow import ShadowRunner, load_recordings, summarize


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)

    recordings_path = Path(sys.argv[1])
    account_id = sys.argv[2] if len(sys.argv) > 2 else "default"

    configure_logging(level="WARNING")

    config = ConfigLoader.create().build_config(account_id)

    try:
        records = load_recordings(recordings_path)
    except (OSError, FabricationError) as e:
        print(f"❌ Could not load {recordings_path}: {e}")
        sys.exit(1)

    print(f"🔍 Comparing {len(records)} recorded worksheets "
          f"(tolerance {config.shadow.tolerance_pct * 100:.2f}%)...")

    results = ShadowRunner(config).run(records)
    summary = summarize(results)

    for result in results:
        if not result.success:
            print(f"  ❌ {result.record_id} ({result.category}): {result.error}")
        elif not result.matched:
            print(f"  ⚠️  {result.record_id} ({result.category}): "
                  f"{result.old_total:.2f} → {result.new_total:.2f} "
                  f"({result.diff_pct * 100:.2f}%)")

    print(f"\n📊 Compared: {summary.total}  Matched: {summary.matched}  "
          f"Differed: {summary.mismatched}  Failed: {summary.failed}")
    print(f"   Largest difference: {summary.max_diff_pct * 100:.2f}%")

    if summary.all_matched:
        print("\n✅ All compared totals match")
        sys.exit(0)
    else:
        print("\n❌ Shadow comparison found differences")
        sys.exit(1)


if __name__ == "__main__":
    main()
