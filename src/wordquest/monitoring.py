"""Monitoring configuration for the game."""
from prometheus_client import Counter, Gauge, start_http_server

# Lesson metrics
lessons_started = Counter(
    "wordquest_lessons_started_total",
    "Total number of lessons started",
    ["tier"],
)

lessons_completed = Counter(
    "wordquest_lessons_completed_total",
    "Total number of lessons that reached the completed phase",
    ["tier"],
)

lessons_exited = Counter(
    "wordquest_lessons_exited_total",
    "Total number of lessons abandoned before being confirmed",
    ["phase"],
)

answers = Counter(
    "wordquest_answers_total",
    "Total number of quiz answers",
    ["result"],
)

# Progression metrics
level_ups = Counter(
    "wordquest_level_ups_total",
    "Total number of level promotions",
)

progress_resets = Counter(
    "wordquest_progress_resets_total",
    "Total number of explicit progress resets",
)

# Capability metrics
audio_fallbacks = Counter(
    "wordquest_audio_fallbacks_total",
    "Total number of times speech synthesis replaced a missing clip",
    ["language"],
)

store_errors = Counter(
    "wordquest_store_errors_total",
    "Total number of durable store errors",
    ["operation_type"],
)

# Navigation metrics
active_screen = Gauge(
    "wordquest_active_screen",
    "1 for the screen currently shown, 0 otherwise",
    ["screen"],
)


def start_monitoring(port: int = 9090) -> None:
    """Start the Prometheus metrics server."""
    start_http_server(port)
