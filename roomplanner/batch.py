"""
Room Normalizer runner - repairs stored room files, one file or a whole folder
Usage: roomplanner-normalize [room.json | folder] [output-folder]
"""
import json
import os
import sys
from pathlib import Path

from .errors import LayoutError
from .normalizer import LayoutNormalizer

# ============================================================================
# CONFIGURATION - CHANGE THESE SETTINGS
# ============================================================================

# MODE: 'single' or 'batch' (used when no path is given on the command line)
MODE = 'batch'

# Room file for SINGLE mode
SINGLE_INPUT = 'Input-Rooms/room.json'

# Folder of room files for BATCH mode
BATCH_INPUT_FOLDER = 'Input-Rooms'

# Where normalized rooms are written
OUTPUT_FOLDER = 'Output-Rooms'

# ============================================================================

# (report key, heading)
REPORT_SECTIONS = (
    ('initial', '🔴 BEFORE'),
    ('fixed', '✅ REPAIRED'),
    ('remaining', '⚠️  STILL PRESENT'),
)

RULE = '=' * 80


def _banner(title):
    print(RULE)
    print(f" {title}")
    print(RULE)


def print_all_violations(violations_dict):
    """Every violation per category, no truncation"""
    if not violations_dict:
        print("   None!")
        return

    for category, violations in violations_dict.items():
        print(f"\n  {category} ({len(violations)}):")
        for v in violations:
            print(f"    • {v}")


def _read_record(input_file):
    """Parsed room record, or None after reporting why it cannot be used"""
    try:
        with open(input_file, 'r') as f:
            record = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"❌ Cannot read {input_file}: {e}")
        return None

    if not isinstance(record, dict):
        print(f"❌ {input_file} holds a {type(record).__name__}, not a room object")
        return None
    return record


def process_layout(input_file, output_folder):
    """Normalize one room file into output_folder; True on success"""
    _banner(f"ROOM FILE: {input_file}")

    record = _read_record(input_file)
    if record is None:
        return False

    normalizer = LayoutNormalizer(record)
    try:
        normalized = normalizer.normalize()
    except LayoutError as e:
        print(f"❌ Invalid room: {e}")
        return False

    report = normalizer.get_violation_report()
    print()
    _banner("📋 VIOLATIONS")
    for key, heading in REPORT_SECTIONS:
        print(f"\n{heading}:")
        print_all_violations(report[key])

    if report['unresolved']:
        print(f"\n❌ No free spot found for: {', '.join(report['unresolved'])}")

    os.makedirs(output_folder, exist_ok=True)
    output_path = os.path.join(output_folder, f"{Path(input_file).stem}-normalized.json")
    try:
        with open(output_path, 'w') as f:
            json.dump(normalized, f, indent=2)
    except OSError as e:
        print(f"❌ Cannot write {output_path}: {e}")
        return False

    print(f"\n💾 Saved to: {output_path}\n")
    return True


def process_single(input_file=SINGLE_INPUT, output_folder=OUTPUT_FOLDER):
    """Normalize one file; True on success"""
    print(f"\n🎯 {input_file} -> {output_folder}\n")

    if not os.path.isfile(input_file):
        print(f"❌ No such file: {input_file}")
        return False

    ok = process_layout(input_file, output_folder)
    print("🎉 DONE!" if ok else "❌ FAILED!")
    return ok


def process_batch(input_folder=BATCH_INPUT_FOLDER, output_folder=OUTPUT_FOLDER):
    """Normalize every *.json in input_folder; list of (file name, ok)"""
    print(f"\n🎯 {input_folder}/*.json -> {output_folder}\n")

    if not os.path.isdir(input_folder):
        print(f"❌ No such folder: {input_folder}")
        return []

    room_files = sorted(Path(input_folder).glob('*.json'))
    if not room_files:
        print(f"❌ Nothing to do, {input_folder} has no .json files")
        return []

    total = len(room_files)
    results = []
    for i, room_file in enumerate(room_files, 1):
        print(f"\n[{i}/{total}] {room_file.name}")
        results.append((room_file.name, process_layout(str(room_file), output_folder)))

    failed = [name for name, ok in results if not ok]
    print()
    _banner("BATCH SUMMARY")
    print(f"📊 {total - len(failed)}/{total} normalized")
    for name in failed:
        print(f"   ❌ {name}")

    return results


def _exit_code(results):
    return 0 if results and all(ok for _, ok in results) else 1


def main(argv=None):
    """Entry point; exit code 0 when every file was normalized"""
    argv = sys.argv[1:] if argv is None else argv
    _banner("ROOM NORMALIZER")

    if argv:
        target = argv[0]
        output = argv[1] if len(argv) > 1 else OUTPUT_FOLDER
        if os.path.isdir(target):
            return _exit_code(process_batch(target, output))
        return 0 if process_single(target, output) else 1

    if MODE == 'single':
        return 0 if process_single() else 1
    if MODE == 'batch':
        return _exit_code(process_batch())

    print(f"❌ Unknown MODE {MODE!r}, expected 'single' or 'batch'")
    return 2


if __name__ == "__main__":
    sys.exit(main())
