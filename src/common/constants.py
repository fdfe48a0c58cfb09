"""Shared constants for the anomaly score report."""

# Highest score with its own bucket; anything above is clamped into it
MAX_SCORE = 65536

# ── Report labels (one entry per direction) ─────────────────────────────────
INBOUND = "inbound"
OUTBOUND = "outbound"

# direction -> (section title, row noun, column noun, total-row noun)
DIRECTION_LABELS: dict[str, tuple[str, str, str, str]] = {
    INBOUND: ("Inbound (Requests)", "Requests", "req.", "requests"),
    OUTBOUND: ("Outbound (Responses)", "Responses", "res.", "responses"),
}

# Placeholder printed instead of a statistic when there is no data
NO_DATA = "—"
