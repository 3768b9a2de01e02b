# lecturer_portal/utils/conflict.py
def is_conflict(existing_slots, new_slots):
    """
    existing_slots: slots already on the timetable
    new_slots: slots being added

    Two slots clash when:
    1. same day_of_week
    2. [start_time, end_time) ranges overlap (touching ends is fine)
    """
    for e in existing_slots:
        for n in new_slots:
            if _overlaps(e, n):
                return True
    return False


def find_conflicts(slots):
    """All clashing pairs, each pair reported once in list order."""
    pairs = []
    for i, a in enumerate(slots):
        for b in slots[i + 1:]:
            if _overlaps(a, b):
                pairs.append((a, b))
    return pairs


def _overlaps(a, b):
    if a.day_of_week != b.day_of_week:
        return False
    return a.start_time < b.end_time and b.start_time < a.end_time
