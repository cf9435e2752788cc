# fast_view_cut/core/diagnostics.py

def _exc_to_str(e):
    try:
        return str(e)
    except Exception:
        return "<unstringifiable exception>"


class Diagnostics(object):
    """
    Structured diagnostics recorder for crop operations (Dynamo-safe stdlib).

    - Bounded event storage
    - Aggregated counts per level/phase/callsite/exception type
    - JSON-safe output via to_dict()
    """

    def __init__(self, max_events=200):
        self.max_events = max_events

        self.events = []
        self.counts = {}
        self.dropped_events = 0

        # dedupe_key -> {"index": int|None, "suppressed": int}
        self._dedupe = {}

    def _count_key(self, level, phase, callsite, exc_type):
        return "{}|{}|{}|{}".format(level, phase, callsite, exc_type or "")

    def _record(self, payload):
        key = self._count_key(
            payload.get("level"),
            payload.get("phase"),
            payload.get("callsite"),
            payload.get("exc_type"),
        )
        self.counts[key] = self.counts.get(key, 0) + 1

        if len(self.events) >= self.max_events:
            self.dropped_events += 1
            return None

        self.events.append(payload)
        return len(self.events) - 1

    def _payload(self, level, phase, callsite, message, view_id, extra, exc=None):
        return {
            "level": level,
            "phase": phase,
            "callsite": callsite,
            "message": message,
            "exc_type": type(exc).__name__ if exc is not None else None,
            "exc_message": _exc_to_str(exc) if exc is not None else None,
            "view_id": view_id,
            "extra": extra or {},
        }

    def debug(self, phase, callsite, message, view_id=None, extra=None):
        self._record(self._payload("DEBUG", phase, callsite, message, view_id, extra))

    def info(self, phase, callsite, message, view_id=None, extra=None):
        self._record(self._payload("INFO", phase, callsite, message, view_id, extra))

    def warn(self, phase, callsite, message, view_id=None, extra=None):
        self._record(self._payload("WARN", phase, callsite, message, view_id, extra))

    def error(self, phase, callsite, message, exc=None, view_id=None, extra=None):
        self._record(self._payload("ERROR", phase, callsite, message, view_id, extra, exc=exc))

    def debug_dedupe(self, dedupe_key, phase, callsite, message, view_id=None, extra=None):
        """Record at most one DEBUG event per dedupe_key.

        Later calls only bump extra.suppressed_count on the first event.
        """
        entry = self._dedupe.get(dedupe_key)
        if entry is None:
            payload_extra = dict(extra or {})
            payload_extra.setdefault("suppressed_count", 0)
            idx = self._record(
                self._payload("DEBUG", phase, callsite, message, view_id, payload_extra)
            )
            self._dedupe[dedupe_key] = {"index": idx, "suppressed": 0}
            return

        entry["suppressed"] += 1
        idx = entry.get("index")
        if idx is not None and 0 <= idx < len(self.events):
            ev_extra = self.events[idx].get("extra")
            if isinstance(ev_extra, dict):
                ev_extra["suppressed_count"] = entry["suppressed"]

    def has_errors(self):
        return any(k.startswith("ERROR|") for k in self.counts)

    def to_dict(self):
        return {
            "max_events": self.max_events,
            "num_events": len(self.events),
            "dropped_events": self.dropped_events,
            "counts": dict(self.counts),
            "events": list(self.events),
        }
