"""
Read-side aggregations.

Both functions work on collections that were already fetched in full
and keep no state between calls; callers recompute them on every
request.
"""

from collections import Counter
from typing import Iterable, List

from workshop_api.app.schemas.analytics import DesignationBreakdown
from workshop_api.app.schemas.attendee import AttendeeRead
from workshop_api.app.schemas.session import SessionRead, SessionWithSpeakers
from workshop_api.app.schemas.speaker import SpeakerRead


def join_sessions_with_speakers(
    sessions: Iterable[SessionRead], speakers: Iterable[SpeakerRead]
) -> List[SessionWithSpeakers]:
    """Attach speaker records to each session.

    Sessions keep their input order and each session's speakers follow
    the order of its ``speaker_ids``.  Keys with no matching speaker are
    skipped silently.
    """
    speakers_by_id = {speaker.id: speaker for speaker in speakers}
    joined = []
    for session in sessions:
        resolved = [speakers_by_id[key] for key in session.speaker_ids if key in speakers_by_id]
        joined.append(SessionWithSpeakers(**session.model_dump(), speakers=resolved))
    return joined


def designation_breakdown(attendees: Iterable[AttendeeRead]) -> List[DesignationBreakdown]:
    """Count attendees per designation (exact, case-sensitive match).

    The order of the returned rows is not part of the contract.
    """
    counts = Counter(attendee.designation for attendee in attendees)
    return [
        DesignationBreakdown(designation=designation, count=count)
        for designation, count in counts.items()
    ]
