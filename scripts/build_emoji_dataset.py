"""
Builds the emoji dataset JSON from the Unicode `emoji-test.txt` file.

Download the source file from https://unicode.org/Public/emoji/latest/emoji-test.txt
and run, from the project root:

    python scripts/build_emoji_dataset.py emoji-test.txt

The output is written to src/emojied/data/emoji.json unless `--output` says
otherwise. Only fully-qualified emoji are kept.
"""

import argparse
import json
import re
import sys
from pathlib import Path
from typing import Dict, Iterable, List

PROJECT_ROOT = Path(__file__).resolve().parent.parent
OUTPUT_PATH = PROJECT_ROOT / "src" / "emojied" / "data" / "emoji.json"

# e.g. "1F600   ; fully-qualified     # 😀 E1.0 grinning face"
LINE_PATTERN = re.compile(
    r"^(?P<codes>[0-9A-F ]+?)\s*;\s*(?P<status>[a-z-]+)\s*#\s*(?P<char>\S+)\s+E\d+\.\d+\s+(?P<name>.+)$"
)


def parse_emoji_test(lines: Iterable[str]) -> List[Dict[str, str]]:
    """
    Parses the lines of emoji-test.txt into dataset records.

    Args:
        lines: The file contents, line by line.

    Returns:
        Records with `codes`, `char`, `name` and `category` keys, in file order.
    """
    records = []
    seen = set()
    group = subgroup = ""

    for line in lines:
        line = line.strip()
        if line.startswith("# group:"):
            group = line.split(":", 1)[1].strip()
            continue
        if line.startswith("# subgroup:"):
            subgroup = line.split(":", 1)[1].strip()
            continue
        if not line or line.startswith("#"):
            continue

        match = LINE_PATTERN.match(line)
        if match is None or match.group("status") != "fully-qualified":
            continue

        codes = " ".join(match.group("codes").split())
        if codes in seen:
            continue
        seen.add(codes)
        records.append({
            "codes": codes,
            "char": match.group("char"),
            "name": match.group("name").strip(),
            "category": f"{group} ({subgroup})" if subgroup else group,
        })

    return records


def main(argv=None):
    parser = argparse.ArgumentParser(description="Convert emoji-test.txt into the Emojied dataset.")
    parser.add_argument("source", type=Path, help="Path to emoji-test.txt")
    parser.add_argument("--output", type=Path, default=OUTPUT_PATH, help="Where to write emoji.json")
    args = parser.parse_args(argv)

    print("--- Starting Emoji Dataset Build ---")
    if not args.source.exists():
        print(f"ERROR: Source file not found: {args.source}")
        sys.exit(1)

    with open(args.source, "r", encoding="utf-8") as f:
        records = parse_emoji_test(f)

    if not records:
        print("ERROR: No fully-qualified emoji found. Is this really emoji-test.txt?")
        sys.exit(1)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False, indent=1)

    print(f"Wrote {len(records)} emoji to {args.output}")
    print("--- Emoji Dataset Build Complete! ---")


if __name__ == "__main__":
    main()
