#!/usr/bin/env python3
"""
Normalize and check the Persian text of a subtitle file.

Usage:
    python lint_subtitles.py input.srt [output.srt] [--dual]
"""
import sys
from pathlib import Path

from zirnevis.subtitles import CaptionSet, SubtitleFormatter, SubtitleParser, TimeCode, TimeCodeStyle


def lint(input_path: Path) -> CaptionSet:
    """Load a subtitle file into a caption set (normalizing and validating each cue)."""
    captions = CaptionSet()
    for draft in SubtitleParser().parse_file(input_path):
        captions.add(draft)
    return captions


def report(captions: CaptionSet) -> int:
    """Print issues per caption; return how many captions have issues."""
    flagged = 0
    for index, caption in enumerate(captions, 1):
        if caption.validation is None or caption.validation.is_valid:
            continue
        flagged += 1
        start = TimeCode.format(caption.start_time, TimeCodeStyle.READABLE)
        end = TimeCode.format(caption.end_time, TimeCodeStyle.READABLE)
        codes = ", ".join(issue.value for issue in caption.validation.issues)
        print(f"#{index} {start} -> {end} [{caption.validation.score}/100] {codes}")
        print(f"    {caption.target_text}")

    for first, second in captions.find_overlaps():
        print(f"overlap: {first.id} / {second.id}")

    return flagged


def main():
    args = [a for a in sys.argv[1:] if not a.startswith('--')]
    if not args:
        print("Usage: python lint_subtitles.py input.srt [output.srt] [--dual]")
        sys.exit(1)

    input_path = Path(args[0])
    captions = lint(input_path)
    print(f"Parsed {len(captions)} captions from {input_path}")

    flagged = report(captions)
    print(f"{flagged} captions with issues")

    if len(args) > 1:
        output_path = Path(args[1])
        if not SubtitleFormatter().save(captions.all(), output_path, dual_subtitles='--dual' in sys.argv):
            sys.exit(1)
        print(f"Saved normalized captions to {output_path}")

    sys.exit(1 if flagged else 0)


if __name__ == '__main__':
    main()
