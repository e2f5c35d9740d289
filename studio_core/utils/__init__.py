"""
Utility functions module.

Calendar month arithmetic shared by the event aggregator and the rolling
window aligner.

Time Semantics:
- Backend timestamps are converted to UTC before a calendar day is derived
- "Now" is always injectable; wall-clock time is only the fallback
"""
