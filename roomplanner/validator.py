"""
Room Layout Validator
Checks a stored room record against the room's geometric rules without changing it
"""

from shapely.geometry import box

from .errors import LayoutError
from .footprint import bed_footprint, furniture_footprint
from .geometry import intersects, overlap_area
from .serialize import bed_from_record, furniture_from_record, opening_from_record

EPSILON = 1e-9


class LayoutValidator:
    """Validates a room record (the persisted dict shape)"""

    def __init__(self, record):
        self.room = record
        self.width = record.get('width')
        self.height = record.get('height')
        self.malformed = []
        self.opening_records = self._build(record.get('openings'), opening_from_record, 'opening')
        self.openings = [o for _, o in self.opening_records]
        self.beds = self._entities(record.get('beds'), bed_from_record, 'bed')
        self.furniture = self._entities(record.get('furniture'), furniture_from_record, 'furniture')

    def _entities(self, records, factory, what):
        return [e for _, e in self._build(records, factory, what)]

    def _build(self, records, factory, what):
        """(record, entity) pairs for every record that can be built"""
        built = []
        for i, rec in enumerate(records if isinstance(records, list) else []):
            try:
                built.append((rec, factory(rec)))
            except (LayoutError, TypeError, AttributeError) as e:
                name = rec.get('id') if isinstance(rec, dict) else None
                self.malformed.append(f"Dimension: {what} {name or '#' + str(i)} is malformed ({e})")
        return built

    def validate(self):
        """Main validation - returns violations list"""
        violations = list(self.malformed)

        if not self._room_ok():
            violations.append(f"Dimension: room size {self.width}×{self.height}m is not valid")
            return violations

        # 1. Overlaps (CRITICAL)
        violations.extend(self._check_overlaps())

        # 2. Beds and furniture inside the walls
        violations.extend(self._check_containment())

        # 3. Openings on their wall run
        violations.extend(self._check_openings())

        return violations

    def _room_ok(self):
        try:
            return float(self.width) > 0 and float(self.height) > 0
        except (TypeError, ValueError):
            return False

    def _check_overlaps(self):
        """Beds must not overlap furniture - most critical check"""
        violations = []

        for bed in self.beds:
            a = bed_footprint(bed).box
            for item in self.furniture:
                b = furniture_footprint(item).box
                if intersects(a, b):
                    area = overlap_area(a, b)
                    violations.append(
                        f"CRITICAL: {bed.id} overlaps {item.id} ({item.label}) (area: {area:.2f}m²)"
                    )

        return violations

    def _check_containment(self):
        """Footprints must sit inside the interior"""
        violations = []
        room_bounds = box(0, 0, float(self.width), float(self.height))

        for entity, fp in ([(b, bed_footprint(b)) for b in self.beds] +
                           [(f, furniture_footprint(f)) for f in self.furniture]):
            poly = fp.box.polygon()
            if not room_bounds.buffer(EPSILON).contains(poly):
                outside = poly.difference(room_bounds).area
                violations.append(
                    f"Containment: {entity.id} extends outside the room (area outside: {outside:.2f}m²)"
                )

        return violations

    def _check_openings(self):
        """Openings must fit on their wall"""
        violations = []

        for raw, opening in self.opening_records:
            run = float(self.width) if opening.wall_side in ('N', 'S') else float(self.height)
            offset = raw.get('offsetM', opening.offset_m)
            try:
                offset = float(offset)
            except (TypeError, ValueError):
                offset = opening.offset_m

            if offset < -EPSILON:
                violations.append(f"Opening: {opening.id} starts before wall {opening.wall_side} ({offset:.2f}m)")
            elif offset + opening.length_m > run + EPSILON:
                violations.append(
                    f"Opening: {opening.id} runs past the end of wall {opening.wall_side} "
                    f"({offset + opening.length_m:.2f}m > {run:.2f}m)"
                )

        return violations

    def get_layout_score(self):
        """Calculate overall layout score (lower is better)"""
        score = 0
        for v in self.validate():
            if 'CRITICAL' in v:
                score += 10  # overlaps
            elif v.startswith('Containment') or v.startswith('Dimension'):
                score += 5
            else:
                score += 1
        return score

    def get_detailed_report(self):
        """Generate detailed validation report"""
        violations = self.validate()

        return {
            'total_violations': len(violations),
            'score': self.get_layout_score(),
            'critical_issues': [v for v in violations if 'CRITICAL' in v],
            'containment_issues': [v for v in violations if v.startswith('Containment')],
            'opening_issues': [v for v in violations if v.startswith('Opening')],
            'other_issues': [v for v in violations if not any(
                k in v for k in ['CRITICAL', 'Containment', 'Opening'])],
        }


class ViolationTracker:
    """Tracks violations before and after normalization"""

    def __init__(self):
        self.initial_violations = []
        self.final_violations = []

    def set_initial(self, record):
        self.initial_violations = LayoutValidator(record).validate()
        return self.initial_violations

    def finalize(self, final_record):
        self.final_violations = LayoutValidator(final_record).validate()

        initial_set = set(self.initial_violations)
        final_set = set(self.final_violations)

        fixed = [v for v in self.initial_violations if v not in final_set]
        remaining = list(self.final_violations)

        return {
            'initial_count': len(self.initial_violations),
            'final_count': len(self.final_violations),
            'fixed_count': len(fixed),
            'fixed': fixed,
            'remaining': remaining,
            'new': [v for v in self.final_violations if v not in initial_set],
            'improvement': len(self.initial_violations) - len(self.final_violations),
        }

    def get_summary(self):
        """Categorize violations for UI"""

        def categorize(violations):
            categories = {
                'Overlaps': [],
                'Containment': [],
                'Openings': [],
                'Dimensions': [],
                'Other': [],
            }

            for v in violations:
                if 'overlap' in v.lower():
                    categories['Overlaps'].append(v)
                elif v.startswith('Containment'):
                    categories['Containment'].append(v)
                elif v.startswith('Opening'):
                    categories['Openings'].append(v)
                elif v.startswith('Dimension'):
                    categories['Dimensions'].append(v)
                else:
                    categories['Other'].append(v)

            return {k: v for k, v in categories.items() if v}

        return {
            'initial': categorize(self.initial_violations),
            'fixed': categorize([v for v in self.initial_violations if v not in self.final_violations]),
            'remaining': categorize(self.final_violations),
        }
