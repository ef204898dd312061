"""
Room Layout Normalizer
Brings a stored room record back into a valid state: every entity clamped
inside the walls, furniture moved off beds where a free spot exists.
"""

import copy

from .overlap import RELOCATED, REVERTED, furniture_intersects_any_bed, resolve_placement
from .serialize import deserialize_room, serialize_room
from .validator import ViolationTracker


class LayoutNormalizer:
    """Normalizes one stored room record"""

    def __init__(self, record):
        self.record = copy.deepcopy(record)
        self.tracker = ViolationTracker()
        self.room = None
        self.relocated = []
        self.unresolved = []

    def normalize(self):
        """Main normalization - returns the corrected room record"""

        print(f"\n{'='*80}")
        print(f"ROOM LAYOUT NORMALIZER")
        print(f"{'='*80}")
        print(f"Room: {self.record.get('width')}×{self.record.get('height')}m")
        print(f"Openings: {len(self.record.get('openings') or [])} | "
              f"Beds: {len(self.record.get('beds') or [])} | "
              f"Furniture: {len(self.record.get('furniture') or [])}")

        print(f"\n📋 Analyzing stored layout...")
        self.tracker.set_initial(self.record)
        print(f"   Initial violations: {len(self.tracker.initial_violations)}")

        # STEP 1: Rebuild through add-and-clamp
        print(f"\n📐 Clamping entities into the room...")
        self.room = deserialize_room(self.record)

        # STEP 2: Move furniture off beds
        print(f"\n🛏️  Resolving bed/furniture overlaps...")
        for item in self.room.furniture:
            if not furniture_intersects_any_bed(self.room, item):
                continue

            outcome = resolve_placement(self.room, item)
            if outcome == RELOCATED:
                self.relocated.append(item.id)
                print(f"   ✓ {item.id} ({item.label}) moved to ({item.x_m:.2f}, {item.y_m:.2f})")
            elif outcome == REVERTED:
                self.unresolved.append(item.id)
                print(f"   ⚠️  {item.id} ({item.label}) has no free spot nearby, overlap kept")

        normalized = serialize_room(self.room)
        summary = self.tracker.finalize(normalized)

        print(f"\n{'='*80}")
        print(f"NORMALIZATION COMPLETE")
        print(f"{'='*80}")
        print(f"✓ Relocated: {len(self.relocated)} item(s)")
        print(f"✓ Violations: {summary['initial_count']} → {summary['final_count']}")
        print(f"✓ Fixed: {summary['fixed_count']} violations")
        print(f"✓ Improvement: {summary['improvement']}")

        return normalized

    def get_violation_report(self):
        """Get violation report for UI"""
        summary = self.tracker.get_summary()

        return {
            'initial': summary['initial'],
            'fixed': summary['fixed'],
            'remaining': summary['remaining'],
            'relocated': list(self.relocated),
            'unresolved': list(self.unresolved),
        }
